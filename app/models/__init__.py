from .base import BaseModel
from .registry import Entity, OPERATIONS
from .gabinete import GABINETE_TIPO, GABINETE
from .usuario import USUARIO_TIPO, USUARIO
from .orgao import ORGAO_TIPO, ORGAO
from .pessoa import PESSOA_TIPO, PESSOA_PROFISSAO, PESSOA
from .documento import DOCUMENTO_TIPO, DOCUMENTO
from .emenda import EMENDA_STATUS, EMENDA_OBJETIVO, EMENDA
from .postagem import POSTAGEM_STATUS, POSTAGEM
from .clipping import CLIPPING_TIPO, CLIPPING

# Tabela declarativa de entidades expostas pela API (ordem = ordem das rotas)
ENTITIES = (
    GABINETE_TIPO,
    GABINETE,
    USUARIO_TIPO,
    USUARIO,
    ORGAO_TIPO,
    ORGAO,
    PESSOA_TIPO,
    PESSOA_PROFISSAO,
    PESSOA,
    DOCUMENTO_TIPO,
    DOCUMENTO,
    EMENDA_STATUS,
    EMENDA_OBJETIVO,
    EMENDA,
    POSTAGEM_STATUS,
    POSTAGEM,
    CLIPPING_TIPO,
    CLIPPING,
)


def get_entity(name):
    """Retorna a entidade pelo nome, ou None."""
    for entity in ENTITIES:
        if entity.name == name:
            return entity
    return None


__all__ = [
    'BaseModel',
    'Entity',
    'OPERATIONS',
    'ENTITIES',
    'get_entity',
    'GABINETE_TIPO',
    'GABINETE',
    'USUARIO_TIPO',
    'USUARIO',
    'ORGAO_TIPO',
    'ORGAO',
    'PESSOA_TIPO',
    'PESSOA_PROFISSAO',
    'PESSOA',
    'DOCUMENTO_TIPO',
    'DOCUMENTO',
    'EMENDA_STATUS',
    'EMENDA_OBJETIVO',
    'EMENDA',
    'POSTAGEM_STATUS',
    'POSTAGEM',
    'CLIPPING_TIPO',
    'CLIPPING',
]
