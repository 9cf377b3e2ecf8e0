"""
Create Entity Record Controller.
"""

import uuid

from app.exceptions import InvalidPayload, PersistenceError
from app.models import Entity
from app.utils.responses import build_response
from app.utils.validation import validate_fields
from .helpers import (
    get_model,
    missing_required_response,
    not_allowed_response,
    persistence_error_response,
    read_payload,
)


def create_record(entity: Entity):
    """
    Cria um novo registro.

    O ID é sempre gerado pelo servidor (UUID v4); um ID enviado no corpo
    é sobrescrito.
    """
    data = read_payload()
    record_id = str(uuid.uuid4())
    data[entity.id_column] = record_id

    if entity.prepare:
        try:
            data = entity.prepare(data, True)
        except InvalidPayload as e:
            return build_response('bad_request', 400, e.message)

    errors = validate_fields(entity.columns, data)

    if errors.not_allowed:
        return not_allowed_response(errors)

    if errors.missing_required:
        return missing_required_response(errors)

    try:
        get_model(entity).create(data)
    except PersistenceError as e:
        return persistence_error_response(entity, e)

    return build_response(
        'created',
        201,
        entity.created_message(),
        {entity.id_column: record_id},
    )
