"""Órgãos e tipos de órgão."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

ORGAO_TIPO = Entity(
    name='orgao_tipo',
    path='orgao-tipo',
    table='orgaos_tipos',
    id_column='orgao_tipo_id',
    scope_column='orgao_tipo_gabinete',
    label='Tipo de órgão',
    dependents='órgãos associados',
    columns=schema({
        'orgao_tipo_id': REQUIRED,
        'orgao_tipo_nome': REQUIRED,
        'orgao_tipo_descricao': OPTIONAL,
        'orgao_tipo_criado_por': REQUIRED,
        'orgao_tipo_gabinete': REQUIRED,
    }),
)

ORGAO = Entity(
    name='orgao',
    path='orgao',
    table='orgaos',
    id_column='orgao_id',
    scope_column='orgao_gabinete',
    label='Órgão',
    columns=schema({
        'orgao_id': REQUIRED,
        'orgao_nome': REQUIRED,
        'orgao_email': REQUIRED,
        'orgao_telefone': OPTIONAL,
        'orgao_endereco': OPTIONAL,
        'orgao_bairro': OPTIONAL,
        'orgao_municipio': REQUIRED,
        'orgao_estado': REQUIRED,
        'orgao_cep': OPTIONAL,
        'orgao_tipo': REQUIRED,
        'orgao_informacoes': OPTIONAL,
        'orgao_site': OPTIONAL,
        'orgao_criado_por': REQUIRED,
        'orgao_gabinete': REQUIRED,
    }),
)
