"""
Validação de payloads contra o ColumnSchema de uma entidade.

Schema: {'campo': {'required': bool}}
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass
class ValidationResult:
    not_allowed: List[str] = field(default_factory=list)
    missing_required: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.not_allowed and not self.missing_required

    def __bool__(self) -> bool:
        # "vazio" = válido
        return not self.is_valid

    def to_dict(self):
        return {
            'not_allowed': list(self.not_allowed),
            'missing_required': list(self.missing_required),
        }


def _required_fields(columns: Mapping[str, Mapping[str, Any]]) -> List[str]:
    return [name for name, rules in columns.items() if rules.get('required') is True]


def validate_fields(columns: Mapping[str, Mapping[str, Any]], data: Any) -> ValidationResult:
    """
    Valida `data` contra o schema `columns`.

    - Campos de `data` ausentes no schema vão para `not_allowed`.
    - Campos obrigatórios ausentes, None ou '' vão para `missing_required`.
    - Se `data` não for um dict (ou estiver vazio), todos os obrigatórios
      são reportados como faltando.

    Returns:
        ValidationResult; vazio (falsy) quando o payload é válido
    """
    result = ValidationResult()

    if not isinstance(data, Mapping) or not data:
        result.missing_required = _required_fields(columns)
        return result

    for name in data:
        if name not in columns and name not in result.not_allowed:
            result.not_allowed.append(name)

    for name in _required_fields(columns):
        if data.get(name) is None or data.get(name) == '':
            result.missing_required.append(name)

    return result
