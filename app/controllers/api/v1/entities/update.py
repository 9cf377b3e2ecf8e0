"""
Update Entity Record Controller.
"""

from app.exceptions import InvalidPayload, PersistenceError
from app.models import Entity
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean
from app.utils.validation import validate_fields
from .helpers import (
    get_model,
    logger,
    not_allowed_response,
    persistence_error_response,
    read_payload,
)


def update_record(entity: Entity, record_id):
    """
    Atualiza um registro existente.

    Atualização parcial: apenas campos desconhecidos são rejeitados,
    obrigatórios ausentes não.
    """
    record_id = clean(record_id)
    model = get_model(entity)

    try:
        existing = model.find_one(entity.id_column, record_id)
    except PersistenceError as e:
        logger.error(f"Erro ao buscar {entity.table} {record_id}: {e.detail}")
        return internal_error(e)

    if not existing:
        return build_response('not_found', 404, entity.not_found_message())

    data = read_payload()

    if entity.prepare:
        try:
            data = entity.prepare(data, False)
        except InvalidPayload as e:
            return build_response('bad_request', 400, e.message)

    errors = validate_fields(entity.columns, data)

    if errors.not_allowed:
        return not_allowed_response(errors)

    if not data:
        return build_response('bad_request', 400, 'Nenhum campo para atualizar')

    try:
        model.update(entity.id_column, record_id, data)
    except PersistenceError as e:
        return persistence_error_response(entity, e)

    return build_response('success', 200, entity.updated_message())
