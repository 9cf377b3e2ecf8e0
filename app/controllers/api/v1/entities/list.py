"""
List Entity Records Controller.
"""

from app.exceptions import PersistenceError
from app.models import Entity
from app.utils.responses import build_response, internal_error
from app.utils.sanitize import clean
from .helpers import get_model, logger, serialize


def list_records(entity: Entity, gabinete=None):
    """
    Lista os registros da entidade.

    Entidades com escopo são filtradas pelo gabinete informado na rota;
    as demais retornam todos os registros.
    """
    model = get_model(entity)

    try:
        if entity.scoped:
            records = model.get_all_by_column(entity.scope_column, clean(gabinete))
        else:
            records = model.get_all()
    except PersistenceError as e:
        logger.error(f"Erro ao listar {entity.table}: {e.detail}")
        return internal_error(e)

    if not records:
        return build_response('empty', 200, entity.empty_message())

    return build_response('success', 200, '', serialize(entity, records))
