"""
Envelope padrão de resposta da API.

{
    "status": str,
    "status_code": int,
    "message": str,      (opcional)
    "data": any,         (opcional)
    "links": list,       (opcional)
    "errors": any        (somente em modo desenvolvimento)
}
"""

from flask import current_app, jsonify


def build_response(
    status='success',
    status_code=200,
    message='',
    data=None,
    links=None,
    errors=None,
    development=None,
):
    """
    Monta a resposta JSON padronizada.

    Args:
        status: Tag de status ('success', 'not_found', ...)
        status_code: Código HTTP
        message: Mensagem opcional
        data: Payload opcional
        links: Links opcionais
        errors: Detalhes de erro, expostos apenas em modo desenvolvimento
        development: Sobrescreve o flag DEVELOPMENT da configuração

    Returns:
        flask.Response com Content-Type application/json
    """
    if development is None:
        development = current_app.config.get('DEVELOPMENT', False)

    payload = {
        'status': status,
        'status_code': status_code,
    }

    if message:
        payload['message'] = message

    if data:
        payload['data'] = data

    if links:
        payload['links'] = links

    if errors and development:
        payload['errors'] = errors

    response = jsonify(payload)
    response.status_code = status_code
    return response


def internal_error(exc, message='Erro interno do servidor'):
    """Atalho para 500 com o detalhe do erro (somente em desenvolvimento)."""
    return build_response(
        'internal_server_error',
        500,
        message,
        errors={'message': str(exc)},
    )
