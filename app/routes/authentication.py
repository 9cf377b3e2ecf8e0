"""
Authentication API - login por email e senha.
"""

from flask import Blueprint

from app.controllers.api.v1.auth import login
from app.utils.rate_limit import rate_limit_auth_strict

auth_bp = Blueprint('authentication', __name__, url_prefix='/api')


@auth_bp.route('/login', methods=['POST'])
@rate_limit_auth_strict()
def sign_in():
    """Autentica o usuário e retorna o token JWT"""
    return login()
