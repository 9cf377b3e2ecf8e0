"""
Sanitização de entrada contra XSS e caracteres perigosos.

clean() é aplicado a todo payload antes da validação e da persistência:
strings são codificadas em entidades HTML, têm tags removidas (exceto as
permitidas), bytes de controle removidos e espaços aparados. Dicts, listas
e objetos são percorridos recursivamente. Demais tipos passam intactos.

A codificação roda antes da remoção de tags, então dentro de clean() a
allow-list (SANITIZE_ALLOWED_TAGS) não preserva marcação: ela só tem efeito
em chamadas diretas a strip_tags().
"""

import copy
import os
import re
from types import ModuleType
from typing import Any, Iterable, Optional
from urllib.parse import urlsplit

# Tags HTML permitidas (nomes, sem < >). Vazio = nenhuma tag permitida.
_allowed_tags = frozenset()

# Entidades já codificadas não são codificadas de novo
_AMPERSAND_RE = re.compile(r'&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);)')
_TAG_RE = re.compile(r'<!--.*?-->|</?([a-zA-Z][a-zA-Z0-9]*)\b[^>]*>', re.DOTALL)
_CONTROL_CHARS_RE = re.compile('[\x00-\x08\x0b\x0c\x0e-\x13]')

_FILENAME_RE = re.compile(r'[^a-zA-Z0-9._-]')
# Caracteres aceitos em URLs e emails (demais são descartados)
_URL_CHARS_RE = re.compile(r"[^a-zA-Z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")
_EMAIL_CHARS_RE = re.compile(r"[^a-zA-Z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+(\.[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+)*"
    r"@([a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$"
)


def set_allowed_tags(tags: Iterable[str]) -> None:
    """Define as tags HTML permitidas (ex: ['p', '<a>'])."""
    global _allowed_tags
    _allowed_tags = frozenset(
        tag.strip().strip('<>/').lower() for tag in tags if tag and tag.strip()
    )


def get_allowed_tags() -> frozenset:
    return _allowed_tags


def clean(data: Any, strip: bool = True) -> Any:
    """
    Sanitiza um valor ou uma estrutura de valores.

    Args:
        data: Valor a sanitizar (str, dict, list, tuple, objeto ou escalar)
        strip: Se True, remove tags HTML (mantendo as permitidas)

    Returns:
        Valor sanitizado, com o mesmo formato do original
    """
    if isinstance(data, str):
        return _clean_string(data, strip)

    if isinstance(data, dict):
        return _clean_dict(data, strip)

    if isinstance(data, (list, tuple)):
        return type(data)(clean(item, strip) for item in data)

    if _is_object(data):
        return _clean_object(data, strip)

    # int, float, bool, None e afins
    return data


def _clean_string(value: str, strip: bool) -> str:
    value = escape(value)

    if strip:
        value = strip_tags(value, _allowed_tags)

    value = _CONTROL_CHARS_RE.sub('', value)

    return value.strip()


def _clean_dict(data: dict, strip: bool) -> dict:
    result = {}
    for key, value in data.items():
        clean_key = _clean_string(key, strip) if isinstance(key, str) else key
        result[clean_key] = clean(value, strip)
    return result


def _is_object(data: Any) -> bool:
    return (
        hasattr(data, '__dict__')
        and not isinstance(data, (type, ModuleType))
        and not callable(data)
    )


def _clean_object(data: Any, strip: bool) -> Any:
    cleaned = _clean_dict(vars(data), strip)
    clone = copy.copy(data)
    clone.__dict__.clear()
    clone.__dict__.update(cleaned)
    return clone


def escape(value: str) -> str:
    """Codifica & < > " ' em entidades HTML (sem codificar entidades existentes)."""
    value = _AMPERSAND_RE.sub('&amp;', value)
    return (
        value.replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
        .replace("'", '&apos;')
    )


def strip_tags(value: str, allowed: Iterable[str] = ()) -> str:
    """Remove tags HTML, mantendo as de `allowed`."""
    allowed = frozenset(allowed)

    def _replace(match):
        tag = match.group(1)
        if tag and tag.lower() in allowed:
            return match.group(0)
        return ''

    return _TAG_RE.sub(_replace, value)


def filename(name: str) -> str:
    """Sanitiza nome de arquivo contra directory traversal."""
    name = os.path.basename(name.replace('\\', '/'))

    for sequence in ('../', './', '\\', '\x00'):
        name = name.replace(sequence, '')

    return _FILENAME_RE.sub('', name)


def url(value: str) -> Optional[str]:
    """Sanitiza uma URL. Retorna None se for inválida."""
    value = _URL_CHARS_RE.sub('', value)
    try:
        parts = urlsplit(value)
    except ValueError:
        return None

    if not parts.scheme or not parts.netloc:
        return None
    return value


def email(value: str) -> Optional[str]:
    """Sanitiza um email. Retorna None se for inválido."""
    value = _EMAIL_CHARS_RE.sub('', value)
    return value if _EMAIL_RE.match(value) else None
