"""Emendas, status e objetivos de emenda."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

EMENDA_STATUS = Entity(
    name='emenda_status',
    path='emenda-status',
    table='emendas_status',
    id_column='emenda_status_id',
    scope_column='emenda_status_gabinete',
    label='Status de emenda',
    dependents='emendas associadas',
    columns=schema({
        'emenda_status_id': REQUIRED,
        'emenda_status_nome': REQUIRED,
        'emenda_status_descricao': OPTIONAL,
        'emenda_status_criado_por': REQUIRED,
        'emenda_status_gabinete': REQUIRED,
    }),
)

EMENDA_OBJETIVO = Entity(
    name='emenda_objetivo',
    path='emenda-objetivo',
    table='emendas_objetivos',
    id_column='emenda_objetivo_id',
    scope_column='emenda_objetivo_gabinete',
    label='Objetivo de emenda',
    dependents='emendas associadas',
    columns=schema({
        'emenda_objetivo_id': REQUIRED,
        'emenda_objetivo_nome': REQUIRED,
        'emenda_objetivo_descricao': OPTIONAL,
        'emenda_objetivo_criado_por': REQUIRED,
        'emenda_objetivo_gabinete': REQUIRED,
    }),
)

EMENDA = Entity(
    name='emenda',
    path='emenda',
    table='emendas',
    id_column='emenda_id',
    scope_column='emenda_gabinete',
    label='Emenda',
    feminine=True,
    columns=schema({
        'emenda_id': REQUIRED,
        'emenda_numero': REQUIRED,
        'emenda_ano': REQUIRED,
        'emenda_valor': OPTIONAL,
        'emenda_descricao': REQUIRED,
        'emenda_status': REQUIRED,
        'emenda_orgao': REQUIRED,
        'emenda_municipio': REQUIRED,
        'emenda_estado': REQUIRED,
        'emenda_objetivo': REQUIRED,
        'emenda_informacoes': OPTIONAL,
        'emenda_tipo': REQUIRED,
        'emenda_criado_por': REQUIRED,
        'emenda_gabinete': REQUIRED,
        'emenda_criada_em': OPTIONAL,
        'emenda_atualizada_em': OPTIONAL,
    }),
)
