"""
Auth Controllers.

Controllers de autenticação por email e senha.
"""

from .login import login

__all__ = ['login']
