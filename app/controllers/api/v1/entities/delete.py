"""
Delete Entity Record Controller.
"""

from app.exceptions import ForeignKeyViolation, PersistenceError
from app.models import Entity
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean
from .helpers import get_model, logger


def delete_record(entity: Entity, record_id):
    """Deleta um registro (404 se não existir, 400 se possuir dependentes)"""
    record_id = clean(record_id)
    model = get_model(entity)

    try:
        record = model.find_one(entity.id_column, record_id)

        if not record:
            return build_response('not_found', 404, entity.not_found_message())

        model.delete(entity.id_column, record_id)
    except ForeignKeyViolation:
        return build_response('bad_request', 400, entity.delete_blocked_message())
    except PersistenceError as e:
        logger.error(f"Erro ao deletar {entity.table} {record_id}: {e.detail}")
        return internal_error(e)

    return build_response('success', 200, entity.deleted_message())
