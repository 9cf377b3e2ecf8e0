"""
FileUploader - armazenamento de arquivos enviados em disco.

Valida o tipo MIME (detectado pelo conteúdo) e o tamanho, cria o diretório de destino quando necessário
e gera nomes únicos para evitar colisões.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
import logging
import os
import uuid

import filetype
from werkzeug.datastructures import FileStorage

from app.utils import sanitize

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    status: str
    message: str
    file_path: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 'success'


# Cabeçalho suficiente para as assinaturas reconhecidas pelo filetype
SNIFF_BYTES = 8192


def detect_mimetype(file: FileStorage) -> Optional[str]:
    """Tipo MIME detectado pelo conteúdo do arquivo (ignora o Content-Type do cliente)."""
    file.stream.seek(0)
    head = file.stream.read(SNIFF_BYTES)
    file.stream.seek(0)

    kind = filetype.guess(head)
    return kind.mime if kind else None


class FileUploader:

    def upload_file(
        self,
        directory: str,
        file: FileStorage,
        allowed_types: Iterable[str],
        max_size_mb: int,
        unique: bool = True,
    ) -> UploadResult:
        """
        Salva um arquivo enviado em `directory`.

        Args:
            directory: Diretório de destino
            file: Arquivo recebido (request.files)
            allowed_types: Tipos MIME permitidos
            max_size_mb: Tamanho máximo em MB
            unique: Se True, gera um nome único (file_<uuid>.<ext>)

        Returns:
            UploadResult com status, mensagem e caminho relativo (/uploads/<nome>)
        """
        if detect_mimetype(file) not in set(allowed_types):
            return UploadResult('format_not_allowed', 'File type not allowed.')

        file.stream.seek(0, os.SEEK_END)
        file_size = file.stream.tell()
        file.stream.seek(0)

        if file_size > max_size_mb * 1024 * 1024:
            return UploadResult('max_file_size_exceeded', f'File exceeds the limit of {max_size_mb} MB.')

        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as e:
            logger.error(f"Erro ao criar diretório de upload {directory}: {e}")
            return UploadResult('directory_creation_failed', 'Failed to create the destination directory.')

        original_name = sanitize.filename(file.filename or '')
        extension = os.path.splitext(original_name)[1].lower()

        if unique:
            file_name = f"file_{uuid.uuid4().hex}{extension}"
        else:
            file_name = original_name

        if not file_name:
            return UploadResult('move_failed', 'Invalid file name.')

        destination = os.path.join(directory, file_name)

        if os.path.exists(destination):
            return UploadResult('file_already_exists', 'File already exists in the directory.')

        try:
            file.save(destination)
        except OSError as e:
            logger.error(f"Erro ao salvar arquivo em {destination}: {e}")
            return UploadResult('move_failed', 'Failed to move the file.')

        return UploadResult('success', 'File uploaded successfully.', f'/uploads/{file_name}')

    def delete_file(self, file_path: str) -> UploadResult:
        """Remove um arquivo armazenado."""
        file_path = os.path.normpath(file_path)

        if not os.path.isfile(file_path):
            return UploadResult('file_not_found', 'File not found.')

        try:
            os.remove(file_path)
        except OSError as e:
            logger.error(f"Erro ao remover arquivo {file_path}: {e}")
            return UploadResult('delete_failed', 'Failed to delete the file.')

        return UploadResult('success', 'File deleted successfully.')
