"""
Exceções da camada de persistência e de payloads recusados.

Os erros do driver são convertidos em variantes tipadas a partir dos
códigos estruturados de cada banco (SQLSTATE no PostgreSQL, errno no
MySQL, nome estendido do erro no SQLite), nunca pelo texto da mensagem.
"""

from sqlalchemy.exc import DBAPIError

PG_UNIQUE_VIOLATION = '23505'
PG_FOREIGN_KEY_VIOLATION = '23503'

MYSQL_DUPLICATE_ENTRY = 1062
MYSQL_FOREIGN_KEY_ERRNOS = (1216, 1217, 1451, 1452)

SQLITE_UNIQUE_NAMES = ('SQLITE_CONSTRAINT_UNIQUE', 'SQLITE_CONSTRAINT_PRIMARYKEY')
SQLITE_FOREIGN_KEY_NAMES = ('SQLITE_CONSTRAINT_FOREIGNKEY',)


class PersistenceError(Exception):
    """Erro genérico de persistência"""

    def __init__(self, detail: str, constraint: str = None):
        self.detail = detail
        self.constraint = constraint
        super().__init__(detail)

    def mentions(self, name: str) -> bool:
        """Indica se a constraint (ou o detalhe do driver) referencia `name`."""
        return name in (self.constraint or '') or name in (self.detail or '')


class UniqueViolation(PersistenceError):
    """Violação de chave única (registro duplicado)"""


class ForeignKeyViolation(PersistenceError):
    """Violação de chave estrangeira (referência inexistente ou dependentes)"""


def _constraint_name(orig):
    diag = getattr(orig, 'diag', None)
    if diag is not None:
        return getattr(diag, 'constraint_name', None)
    return None


def _mysql_errno(orig):
    args = getattr(orig, 'args', ())
    if args and isinstance(args[0], int):
        return args[0]
    return None


def translate_db_error(exc: DBAPIError) -> PersistenceError:
    """Converte um erro do SQLAlchemy/driver na variante correspondente."""
    orig = getattr(exc, 'orig', None) or exc
    detail = str(orig)
    constraint = _constraint_name(orig)

    pgcode = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    if pgcode == PG_UNIQUE_VIOLATION:
        return UniqueViolation(detail, constraint)
    if pgcode == PG_FOREIGN_KEY_VIOLATION:
        return ForeignKeyViolation(detail, constraint)

    sqlite_name = getattr(orig, 'sqlite_errorname', None)
    if sqlite_name in SQLITE_UNIQUE_NAMES:
        return UniqueViolation(detail, constraint)
    if sqlite_name in SQLITE_FOREIGN_KEY_NAMES:
        return ForeignKeyViolation(detail, constraint)

    errno = _mysql_errno(orig)
    if errno == MYSQL_DUPLICATE_ENTRY:
        return UniqueViolation(detail, constraint)
    if errno in MYSQL_FOREIGN_KEY_ERRNOS:
        return ForeignKeyViolation(detail, constraint)

    return PersistenceError(detail, constraint)


class InvalidPayload(Exception):
    """Payload recusado por uma regra da entidade (hook prepare)"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
