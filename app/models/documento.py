"""Documentos e tipos de documento."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

DOCUMENTO_TIPO = Entity(
    name='documento_tipo',
    path='documento-tipo',
    table='documentos_tipos',
    id_column='documento_tipo_id',
    scope_column='documento_tipo_gabinete',
    label='Tipo de documento',
    dependents='documentos associados',
    columns=schema({
        'documento_tipo_id': REQUIRED,
        'documento_tipo_nome': REQUIRED,
        'documento_tipo_descricao': OPTIONAL,
        'documento_tipo_criado_por': REQUIRED,
        'documento_tipo_gabinete': REQUIRED,
    }),
)

DOCUMENTO = Entity(
    name='documento',
    path='documento',
    table='documentos',
    id_column='documento_id',
    scope_column='documento_gabinete',
    label='Documento',
    columns=schema({
        'documento_id': REQUIRED,
        'documento_titulo': REQUIRED,
        'documento_resumo': OPTIONAL,
        'documento_arquivo': REQUIRED,
        'documento_ano': REQUIRED,
        'documento_tipo': REQUIRED,
        'documento_orgao': REQUIRED,
        'documento_criado_por': REQUIRED,
        'documento_gabinete': REQUIRED,
        'documento_criado_em': OPTIONAL,
        'documento_atualizado_em': OPTIONAL,
    }),
)
