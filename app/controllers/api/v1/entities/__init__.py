"""
Entity Controllers.

Controllers genéricos de CRUD, parametrizados pela descrição da entidade
(app.models.registry.Entity).
"""

from .list import list_records
from .get import get_record
from .create import create_record
from .update import update_record
from .delete import delete_record

__all__ = [
    'list_records',
    'get_record',
    'create_record',
    'update_record',
    'delete_record',
]
