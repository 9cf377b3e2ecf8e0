"""
Login Controller.
"""

import logging

from flask import request

from app.database import db
from app.exceptions import PersistenceError
from app.models import USUARIO
from app.utils.auth import generate_user_token
from app.utils.passwords import verify_password
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean

logger = logging.getLogger(__name__)


def login():
    """
    Autentica um usuário por email e senha.

    Body:
        {"email": str, "senha": str}

    Returns:
        Dados do usuário e o token JWT de acesso.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    email = data.get('email')
    senha = data.get('senha')

    if not email or not senha:
        return build_response('bad_request', 400, 'Email e senha são obrigatórios')

    email = clean(email)

    try:
        usuario = USUARIO.model(db.engine).find_one('usuario_email', email)
    except PersistenceError as e:
        logger.error(f"Erro ao buscar usuário para login: {e.detail}")
        return internal_error(e)

    if not usuario:
        logger.warning(f"Login recusado, usuário não encontrado: {email}")
        return build_response('unauthorized', 401, 'Usuário não encontrado')

    if not verify_password(usuario['usuario_senha'], senha):
        logger.warning(f"Login recusado, senha inválida: {email}")
        return build_response('unauthorized', 401, 'Senha inválida')

    if not usuario['usuario_ativo']:
        logger.warning(f"Login recusado, usuário inativo: {email}")
        return build_response('unauthorized', 401, 'Usuário inativo')

    token = generate_user_token(usuario)

    return build_response('success', 200, 'Login realizado com sucesso', {
        'id': usuario['usuario_id'],
        'nome': usuario['usuario_nome'],
        'email': usuario['usuario_email'],
        'gabinete': usuario['usuario_gabinete'],
        'tipo': usuario['usuario_tipo'],
        'gestor': bool(usuario['usuario_gestor']),
        'token': token,
    })
