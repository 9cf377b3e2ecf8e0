from dataclasses import asdict, dataclass
from functools import wraps
import logging
import re
import time

import jwt
from flask import current_app, g, request

from app.utils.responses import build_response

logger = logging.getLogger(__name__)

_BEARER_RE = re.compile(r'^\s*Bearer\s+(\S+)\s*$', re.IGNORECASE)


@dataclass(frozen=True)
class Identity:
    """Usuário autenticado, extraído de um token verificado (escopo: request)."""
    id: str
    email: str
    nome: str
    gabinete: str
    tipo: str
    gestor: bool

    @classmethod
    def from_claims(cls, claims):
        return cls(
            id=claims['sub'],
            email=claims.get('email'),
            nome=claims.get('nome'),
            gabinete=claims.get('gabinete'),
            tipo=claims.get('tipo'),
            gestor=bool(claims.get('gestor')),
        )

    def to_dict(self):
        return asdict(self)


def generate_jwt_token(payload, expires_in=None):
    """
    Gera um JWT assinado com iat/exp.

    Args:
        payload: Claims do token
        expires_in: Validade em segundos (padrão: JWT_EXPIRATION)
    """
    config = current_app.config
    if expires_in is None:
        expires_in = config['JWT_EXPIRATION']

    issued_at = int(time.time())
    claims = dict(payload)
    claims['iat'] = issued_at
    claims['exp'] = issued_at + int(expires_in)

    return jwt.encode(claims, config['JWT_SECRET_KEY'], algorithm=config['JWT_ALGORITHM'])


def decode_jwt_token(token):
    """
    Decodifica e verifica assinatura e expiração de um JWT.

    Raises:
        jwt.ExpiredSignatureError: token expirado
        jwt.InvalidTokenError: qualquer outra falha de verificação
    """
    config = current_app.config
    return jwt.decode(
        token,
        config['JWT_SECRET_KEY'],
        algorithms=[config['JWT_ALGORITHM']],
        options={'require': ['exp', 'iat', 'sub']},
    )


def generate_user_token(usuario):
    """Gera o token de acesso para um registro da tabela usuario."""
    return generate_jwt_token({
        'sub': str(usuario['usuario_id']),
        'email': usuario['usuario_email'],
        'nome': usuario['usuario_nome'],
        'gabinete': usuario['usuario_gabinete'],
        'tipo': usuario['usuario_tipo'],
        'gestor': bool(usuario['usuario_gestor']),
    })


def extract_bearer_token(auth_value):
    """Extrai o token de um header 'Bearer <token>'; None se malformado."""
    match = _BEARER_RE.match(auth_value or '')
    return match.group(1) if match else None


def require_jwt_auth(f):
    """Decorator para exigir JWT válido no header Authorization.

    Em caso de sucesso, g.jwt recebe as claims e g.user a Identity.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_value = request.headers.get('Authorization')

        if not auth_value:
            return build_response('unauthorized', 401, 'Token não fornecido')

        token = extract_bearer_token(auth_value)
        if not token:
            return build_response('unauthorized', 401, 'Token inválido')

        try:
            claims = decode_jwt_token(token)
            identity = Identity.from_claims(claims)
        except jwt.ExpiredSignatureError:
            return build_response('unauthorized', 401, 'Token expirado')
        except (jwt.InvalidTokenError, KeyError) as e:
            logger.info(f"Token rejeitado em {request.path}: {e}")
            return build_response('unauthorized', 401, 'Token inválido')

        g.jwt = claims
        g.user = identity

        return f(*args, **kwargs)

    return decorated_function
