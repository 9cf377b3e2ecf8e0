"""Clippings e tipos de clipping."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

CLIPPING_TIPO = Entity(
    name='clipping_tipo',
    path='clipping-tipo',
    table='clipping_tipos',
    id_column='clipping_tipo_id',
    scope_column='clipping_tipo_gabinete',
    label='Tipo de clipping',
    dependents='clippings associados',
    columns=schema({
        'clipping_tipo_id': REQUIRED,
        'clipping_tipo_nome': REQUIRED,
        'clipping_tipo_descricao': OPTIONAL,
        'clipping_tipo_criado_por': REQUIRED,
        'clipping_tipo_gabinete': REQUIRED,
    }),
)

CLIPPING = Entity(
    name='clipping',
    path='clipping',
    table='clippings',
    id_column='clipping_id',
    scope_column='clipping_gabinete',
    label='Clipping',
    columns=schema({
        'clipping_id': REQUIRED,
        'clipping_titulo': REQUIRED,
        'clipping_conteudo': REQUIRED,
        'clipping_tipo': REQUIRED,
        'clipping_fonte': REQUIRED,
        'clipping_data': REQUIRED,
        'clipping_link': OPTIONAL,
        'clipping_arquivo': OPTIONAL,
        'clipping_arquivo_nome': OPTIONAL,
        'clipping_arquivo_tipo': OPTIONAL,
        'clipping_arquivo_tamanho': OPTIONAL,
        'clipping_tags': OPTIONAL,
        'clipping_informacoes': OPTIONAL,
        'clipping_criado_por': REQUIRED,
        'clipping_gabinete': REQUIRED,
    }),
)
