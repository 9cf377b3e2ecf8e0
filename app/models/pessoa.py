"""Pessoas, tipos de pessoa e profissões."""

from .registry import Entity, OPTIONAL, REQUIRED, schema

PESSOA_TIPO = Entity(
    name='pessoa_tipo',
    path='pessoa-tipo',
    table='pessoas_tipos',
    id_column='pessoa_tipo_id',
    scope_column='pessoa_tipo_gabinete',
    label='Tipo de pessoa',
    dependents='pessoas associadas',
    columns=schema({
        'pessoa_tipo_id': REQUIRED,
        'pessoa_tipo_nome': REQUIRED,
        'pessoa_tipo_descricao': OPTIONAL,
        'pessoa_tipo_criado_por': REQUIRED,
        'pessoa_tipo_gabinete': REQUIRED,
    }),
)

PESSOA_PROFISSAO = Entity(
    name='pessoa_profissao',
    path='pessoa-profissao',
    table='pessoas_profissoes',
    id_column='pessoas_profissoes_id',
    scope_column='pessoas_profissoes_gabinete',
    label='Profissão',
    feminine=True,
    dependents='pessoas associadas',
    columns=schema({
        'pessoas_profissoes_id': REQUIRED,
        'pessoas_profissoes_nome': REQUIRED,
        'pessoas_profissoes_descricao': OPTIONAL,
        'pessoas_profissoes_criado_por': REQUIRED,
        'pessoas_profissoes_gabinete': REQUIRED,
    }),
)

PESSOA = Entity(
    name='pessoa',
    path='pessoa',
    table='pessoas',
    id_column='pessoa_id',
    scope_column='pessoa_gabinete',
    label='Pessoa',
    feminine=True,
    columns=schema({
        'pessoa_id': REQUIRED,
        'pessoa_nome': REQUIRED,
        'pessoa_email': REQUIRED,
        'pessoa_telefone': OPTIONAL,
        'pessoa_endereco': OPTIONAL,
        'pessoa_bairro': OPTIONAL,
        'pessoa_municipio': OPTIONAL,
        'pessoa_estado': OPTIONAL,
        'pessoa_cep': OPTIONAL,
        'pessoa_sexo': OPTIONAL,
        'pessoa_facebook': OPTIONAL,
        'pessoa_instagram': OPTIONAL,
        'pessoa_x': OPTIONAL,
        'pessoa_foto': OPTIONAL,
        'pessoa_tipo': REQUIRED,
        'pessoa_profissao': REQUIRED,
        'pessoa_partido': OPTIONAL,
        'pessoa_informacoes': OPTIONAL,
        'pessoa_aniversario': OPTIONAL,
        'pessoa_orgao': REQUIRED,
        'pessoa_criada_por': REQUIRED,
        'pessoa_gabinete': REQUIRED,
    }),
)
