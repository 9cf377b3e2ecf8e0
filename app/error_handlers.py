"""
Handlers globais de erro: toda resposta de erro usa o envelope padrão.
"""

import logging

from werkzeug.exceptions import HTTPException

from app.utils.responses import build_response, internal_error

logger = logging.getLogger(__name__)

STATUS_TAGS = {
    400: 'bad_request',
    401: 'unauthorized',
    403: 'forbidden',
    404: 'not_found',
    405: 'method_not_allowed',
    409: 'conflict',
    413: 'payload_too_large',
    415: 'unsupported_media_type',
    429: 'too_many_requests',
}


def register_error_handlers(app):

    @app.errorhandler(404)
    def not_found(e):
        return build_response('not_found', 404, 'Rota não encontrada')

    @app.errorhandler(405)
    def method_not_allowed(e):
        return build_response('method_not_allowed', 405, 'Método não permitido para esta rota')

    @app.errorhandler(429)
    def too_many_requests(e):
        return build_response(
            'too_many_requests',
            429,
            'Muitas tentativas. Tente novamente mais tarde',
            errors={'message': e.description},
        )

    @app.errorhandler(HTTPException)
    def http_error(e):
        code = e.code or 500
        return build_response(STATUS_TAGS.get(code, 'error'), code, e.description)

    @app.errorhandler(Exception)
    def unhandled_error(e):
        logger.error(f"Erro não tratado: {e}", exc_info=True)
        return internal_error(e)
