"""
Hash e verificação de senhas.

Senhas novas usam werkzeug.security. Hashes bcrypt ($2a$, $2b$, $2y$)
gravados pelo sistema anterior continuam válidos para login.
"""

import logging

import bcrypt
from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

BCRYPT_PREFIXES = ('$2a$', '$2b$', '$2y$')

# bcrypt só considera os primeiros 72 bytes da senha
BCRYPT_MAX_BYTES = 72


def hash_password(password):
    return generate_password_hash(str(password))


def _check_bcrypt(stored_hash, password):
    # $2y$ (PHP) e $2b$ são o mesmo algoritmo
    normalized = '$2b$' + stored_hash[4:]
    secret = str(password).encode('utf-8')[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(secret, normalized.encode('utf-8'))
    except ValueError as e:
        logger.warning(f"Hash bcrypt inválido: {e}")
        return False


def verify_password(stored_hash, password):
    """
    Confere uma senha contra o hash armazenado.

    Returns:
        False quando a senha não confere ou o hash não é reconhecido
    """
    if not stored_hash:
        return False

    if stored_hash.startswith(BCRYPT_PREFIXES):
        return _check_bcrypt(stored_hash, password)

    try:
        return check_password_hash(stored_hash, str(password))
    except ValueError as e:
        logger.warning(f"Formato de hash de senha não reconhecido: {e}")
        return False
