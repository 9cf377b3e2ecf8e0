"""
Registry de entidades.

Cada entidade de negócio (pessoa, órgão, emenda, ...) é descrita de forma
declarativa: tabela, coluna de ID, coluna de escopo (gabinete), schema de
colunas e os textos usados nas respostas. O handler genérico de CRUD
(app/controllers/api/v1/entities) opera sobre essas descrições.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from sqlalchemy.engine import Engine

from .base import BaseModel

REQUIRED = MappingProxyType({'required': True})
OPTIONAL = MappingProxyType({'required': False})

OPERATIONS = ('list', 'get', 'create', 'update', 'delete')


def schema(columns: Dict[str, Mapping[str, bool]]) -> Mapping[str, Mapping[str, bool]]:
    """Congela um ColumnSchema ({coluna: {'required': bool}})."""
    return MappingProxyType(dict(columns))


@dataclass(frozen=True)
class Entity:
    name: str
    path: str
    table: str
    id_column: str
    label: str
    columns: Mapping[str, Mapping[str, bool]]
    feminine: bool = False
    scope_column: Optional[str] = None
    dependents: str = 'dependências'
    hidden_fields: Tuple[str, ...] = ()
    public: FrozenSet[str] = frozenset()
    # substring da constraint -> mensagem para violações de chave estrangeira
    reference_messages: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    reference_default: str = 'Registro relacionado não encontrado'
    # coluna única -> mensagem de conflito específica
    conflict_messages: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    prepare: Optional[Callable[[Dict[str, Any], bool], Dict[str, Any]]] = None

    def model(self, engine: Engine) -> BaseModel:
        return BaseModel(self.table, engine)

    @property
    def scoped(self) -> bool:
        return self.scope_column is not None

    def is_public(self, operation: str) -> bool:
        return operation in self.public

    # Mensagens (concordância de gênero)

    @property
    def _o(self) -> str:
        return 'a' if self.feminine else 'o'

    @property
    def _lower_label(self) -> str:
        return self.label[0].lower() + self.label[1:]

    def empty_message(self) -> str:
        article = 'Nenhuma' if self.feminine else 'Nenhum'
        return f'{article} {self._lower_label} encontrad{self._o}'

    def not_found_message(self) -> str:
        return f'{self.label} não encontrad{self._o}'

    def created_message(self) -> str:
        return f'{self.label} criad{self._o} com sucesso'

    def updated_message(self) -> str:
        return f'{self.label} atualizad{self._o} com sucesso'

    def deleted_message(self) -> str:
        return f'{self.label} deletad{self._o} com sucesso'

    def conflict_message(self, error) -> str:
        for column, message in self.conflict_messages.items():
            if error.mentions(column):
                return message
        return f'{self.label} já existe'

    def reference_message(self, error) -> str:
        for constraint, message in self.reference_messages.items():
            if error.mentions(constraint):
                return message
        return self.reference_default

    def delete_blocked_message(self) -> str:
        return f'{self.label} não pode ser deletad{self._o} pois possui {self.dependents}'
