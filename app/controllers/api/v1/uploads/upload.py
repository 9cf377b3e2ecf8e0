"""
Upload Controller.
"""

import logging

from flask import current_app, request

from app.utils.responses import build_response
from app.utils.uploads import FileUploader

logger = logging.getLogger(__name__)


def upload_file():
    """
    Recebe um arquivo (campo multipart `file`) e o armazena em UPLOAD_FOLDER.

    Returns:
        data.file_path com o caminho público do arquivo.
    """
    file = request.files.get('file')

    if file is None:
        return build_response('bad_request', 400, 'Nenhum arquivo enviado')

    config = current_app.config
    result = FileUploader().upload_file(
        config['UPLOAD_FOLDER'],
        file,
        config['UPLOAD_ALLOWED_TYPES'],
        config['UPLOAD_MAX_SIZE_MB'],
    )

    if not result.ok:
        logger.warning(f"Upload recusado ({result.status}): {result.message}")
        return build_response(
            'bad_request',
            400,
            'Erro ao enviar arquivo',
            errors={'status': result.status, 'message': result.message},
        )

    return build_response('success', 200, 'Arquivo enviado com sucesso', {
        'file_path': '/public' + result.file_path,
    })
