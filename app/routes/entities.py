"""
Rotas CRUD das entidades do gabinete.

As rotas são geradas a partir de app.models.ENTITIES. Entidades com escopo
listam por gabinete (/<path>/<gabinete>) e buscam por /<path>/detalhe/<id>;
as demais listam tudo (/<path>) e buscam por /<path>/<id>.
"""

from flask import Blueprint

from app.controllers.api.v1.entities import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from app.models import ENTITIES
from app.utils.auth import require_jwt_auth

entities_bp = Blueprint('entities', __name__, url_prefix='/api')

_CONTROLLERS = {
    'list': list_records,
    'get': get_record,
    'create': create_record,
    'update': update_record,
    'delete': delete_record,
}


def _make_view(entity, operation):
    controller = _CONTROLLERS[operation]

    def view(**kwargs):
        return controller(entity, **kwargs)

    if not entity.is_public(operation):
        view = require_jwt_auth(view)
    return view


def _rules(entity):
    base = f'/{entity.path}'
    if entity.scoped:
        yield 'list', f'{base}/<gabinete>', 'GET'
        yield 'get', f'{base}/detalhe/<record_id>', 'GET'
    else:
        yield 'list', base, 'GET'
        yield 'get', f'{base}/<record_id>', 'GET'
    yield 'create', base, 'POST'
    yield 'update', f'{base}/<record_id>', 'PUT'
    yield 'delete', f'{base}/<record_id>', 'DELETE'


def register_entity_routes(bp, entities):
    for entity in entities:
        for operation, rule, method in _rules(entity):
            bp.add_url_rule(
                rule,
                endpoint=f'{entity.name}_{operation}',
                view_func=_make_view(entity, operation),
                methods=[method],
            )


register_entity_routes(entities_bp, ENTITIES)
