"""
Helpers para os controllers genéricos de entidades.
"""

from typing import Any, Dict
import logging

from flask import request

from app.database import db
from app.exceptions import ForeignKeyViolation, PersistenceError, UniqueViolation
from app.models import BaseModel, Entity
from app.serializers.base import RecordSerializer
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean
from app.utils.validation import ValidationResult

logger = logging.getLogger(__name__)


def get_model(entity: Entity) -> BaseModel:
    """BaseModel da entidade ligado ao engine da aplicação."""
    return entity.model(db.engine)


def read_payload() -> Dict[str, Any]:
    """Lê o corpo JSON e sanitiza. Corpo ausente ou que não seja objeto vira {}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return clean(data)


def serialize(entity: Entity, records):
    if isinstance(records, list):
        return RecordSerializer.to_list(records, exclude=entity.hidden_fields)
    return RecordSerializer.to_dict(records, exclude=entity.hidden_fields)


def not_allowed_response(errors: ValidationResult):
    return build_response(
        'bad_request',
        400,
        'Campos não permitidos: ' + ', '.join(errors.not_allowed),
    )


def missing_required_response(errors: ValidationResult):
    return build_response(
        'bad_request',
        400,
        'Campos obrigatórios faltando',
        errors={'message': 'Campos obrigatórios faltando: ' + ', '.join(errors.missing_required)},
    )


def persistence_error_response(entity: Entity, error: PersistenceError):
    """Converte um erro de persistência de create/update em resposta."""
    if isinstance(error, UniqueViolation):
        return build_response('conflict', 409, entity.conflict_message(error))

    if isinstance(error, ForeignKeyViolation):
        return build_response('bad_request', 400, entity.reference_message(error))

    logger.error(f"Erro de persistência em {entity.table}: {error.detail}")
    return internal_error(error)
