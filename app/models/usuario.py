"""Usuários e tipos de usuário."""

from types import MappingProxyType

from app.exceptions import InvalidPayload
from app.utils.passwords import hash_password

from .registry import Entity, OPTIONAL, REQUIRED, schema

# Campos sensíveis que nunca devem ser expostos
SENSITIVE_FIELDS = ('usuario_senha', 'usuario_token')


def prepare_usuario(data, creating):
    """Gera o hash da senha e aplica os valores padrão do usuário."""
    if 'usuario_senha' in data:
        senha = data['usuario_senha']
        if senha is None or senha == '':
            # no create o validador reporta o campo obrigatório
            if not creating:
                raise InvalidPayload('Senha não pode ser vazia')
        else:
            data['usuario_senha'] = hash_password(senha)

    if creating and data.get('usuario_ativo') is None:
        data['usuario_ativo'] = 1

    return data


USUARIO_TIPO = Entity(
    name='usuario_tipo',
    path='usuario-tipo',
    table='usuario_tipo',
    id_column='usuario_tipo_id',
    label='Tipo de usuário',
    dependents='usuários associados',
    columns=schema({
        'usuario_tipo_id': REQUIRED,
        'usuario_tipo_nome': REQUIRED,
        'usuario_tipo_descricao': REQUIRED,
    }),
)

USUARIO = Entity(
    name='usuario',
    path='usuario',
    table='usuario',
    id_column='usuario_id',
    scope_column='usuario_gabinete',
    label='Usuário',
    public=frozenset({'create'}),
    hidden_fields=SENSITIVE_FIELDS,
    conflict_messages=MappingProxyType({
        'usuario_email': 'Email já cadastrado',
    }),
    reference_messages=MappingProxyType({
        'fk_usuario_tipo': 'Tipo de usuário inválido',
        'fk_usuario_gabinete': 'Gabinete inválido',
    }),
    reference_default='Gabinete inválido ou tipo de usuário não encontrados',
    prepare=prepare_usuario,
    columns=schema({
        'usuario_id': REQUIRED,
        'usuario_tipo': REQUIRED,
        'usuario_gabinete': REQUIRED,
        'usuario_nome': REQUIRED,
        'usuario_email': REQUIRED,
        'usuario_aniversario': OPTIONAL,
        'usuario_telefone': REQUIRED,
        'usuario_senha': REQUIRED,
        'usuario_token': OPTIONAL,
        'usuario_foto': OPTIONAL,
        'usuario_ativo': REQUIRED,
        'usuario_gestor': REQUIRED,
        'usuario_criado_em': OPTIONAL,
        'usuario_atualizado_em': OPTIONAL,
    }),
)
