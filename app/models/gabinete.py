"""Gabinete e tipos de gabinete."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

GABINETE_TIPO = Entity(
    name='gabinete_tipo',
    path='gabinete-tipo',
    table='gabinete_tipo',
    id_column='gabinete_tipo_id',
    label='Tipo de gabinete',
    dependents='gabinetes associados',
    public=frozenset({'list'}),
    columns=schema({
        'gabinete_tipo_id': REQUIRED,
        'gabinete_tipo_nome': REQUIRED,
        'gabinete_tipo_informacoes': OPTIONAL,
    }),
)

GABINETE = Entity(
    name='gabinete',
    path='gabinete',
    table='gabinete',
    id_column='gabinete_id',
    label='Gabinete',
    dependents='usuários associados',
    public=frozenset({'create'}),
    reference_default='Tipo de gabinete inválido',
    columns=schema({
        'gabinete_id': REQUIRED,
        'gabinete_nome': REQUIRED,
        'gabinete_estado': REQUIRED,
        'gabinete_assinaturas': REQUIRED,
        'gabinete_tipo': REQUIRED,
        'gabinete_criado_em': OPTIONAL,
        'gabinete_atualizado_em': OPTIONAL,
    }),
)
