"""
Get Entity Record Controller.
"""

from app.exceptions import PersistenceError
from app.models import Entity
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean
from .helpers import get_model, logger, serialize


def get_record(entity: Entity, record_id):
    """Retorna um registro pelo ID"""
    record_id = clean(record_id)

    try:
        record = get_model(entity).find_one(entity.id_column, record_id)
    except PersistenceError as e:
        logger.error(f"Erro ao buscar {entity.table} {record_id}: {e.detail}")
        return internal_error(e)

    if not record:
        return build_response('not_found', 404, entity.not_found_message())

    return build_response('success', 200, '', serialize(entity, record))
