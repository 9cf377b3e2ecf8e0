"""
API v1 Controllers.

Cada subdiretório contém controllers para um domínio específico.
Controllers são responsáveis por:
- Receber requests
- Validar e sanitizar entrada
- Chamar models
- Retornar resposta no envelope padrão
"""

from . import entities
from . import auth
from . import uploads
