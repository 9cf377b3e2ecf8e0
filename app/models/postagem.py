"""Postagens e status de postagem."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

POSTAGEM_STATUS = Entity(
    name='postagem_status',
    path='postagem-status',
    table='postagem_status',
    id_column='postagem_status_id',
    scope_column='postagem_status_gabinete',
    label='Status de postagem',
    dependents='postagens associadas',
    columns=schema({
        'postagem_status_id': REQUIRED,
        'postagem_status_nome': REQUIRED,
        'postagem_status_descricao': OPTIONAL,
        'postagem_status_criado_por': REQUIRED,
        'postagem_status_gabinete': REQUIRED,
    }),
)

POSTAGEM = Entity(
    name='postagem',
    path='postagem',
    table='postagens',
    id_column='postagem_id',
    scope_column='postagem_gabinete',
    label='Postagem',
    feminine=True,
    columns=schema({
        'postagem_id': REQUIRED,
        'postagem_titulo': REQUIRED,
        'postagem_conteudo': REQUIRED,
        'postagem_status': REQUIRED,
        'postagem_data_publicacao': REQUIRED,
        'postagem_data_atualizacao': OPTIONAL,
        'postagem_imagem': OPTIONAL,
        'postagem_imagem_nome': OPTIONAL,
        'postagem_imagem_tipo': OPTIONAL,
        'postagem_imagem_tamanho': OPTIONAL,
        'postagem_tags': OPTIONAL,
        'postagem_informacoes': OPTIONAL,
        'postagem_criado_por': REQUIRED,
        'postagem_gabinete': REQUIRED,
    }),
)
