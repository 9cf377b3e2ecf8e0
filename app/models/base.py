"""
Base Model - operações CRUD genéricas sobre uma tabela.

Cada instância fica vinculada a uma tabela e recebe o engine na construção.
O SQL é montado a partir dos nomes de coluna presentes em `data`; quem chama
deve validar esses nomes contra o schema da entidade antes (validate_fields),
pois esta camada não os verifica novamente.

Cada escrita é um único statement em sua própria transação curta.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError

from app.exceptions import translate_db_error


class BaseModel:
    """Acesso a dados genérico para uma tabela."""

    def __init__(self, table: str, engine: Engine):
        self.table = table
        self.engine = engine

    def create(self, data: Dict[str, Any]) -> None:
        """Insere um registro usando cada chave de `data` como coluna."""
        columns = ', '.join(data.keys())
        placeholders = ', '.join(f':{column}' for column in data)
        sql = f'INSERT INTO {self.table} ({columns}) VALUES ({placeholders})'
        self._write(sql, dict(data))

    def get_all(self) -> List[Dict[str, Any]]:
        """Retorna todos os registros da tabela."""
        return self._fetch_all(f'SELECT * FROM {self.table}', {})

    def get_all_by_column(self, column: str, value: Any) -> List[Dict[str, Any]]:
        """Retorna todos os registros onde `column` = `value`."""
        sql = f'SELECT * FROM {self.table} WHERE {column} = :value'
        return self._fetch_all(sql, {'value': value})

    def find_one(self, column: str, value: Any) -> Optional[Dict[str, Any]]:
        """Retorna o primeiro registro onde `column` = `value`, ou None."""
        sql = f'SELECT * FROM {self.table} WHERE {column} = :value LIMIT 1'
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text(sql), {'value': value}).mappings().first()
        except DBAPIError as e:
            raise translate_db_error(e) from e
        return dict(row) if row is not None else None

    def delete(self, column: str, value: Any) -> bool:
        """
        Remove os registros onde `column` = `value`.

        Retorna True quando o statement executou; não distingue 0 de N linhas
        afetadas. Quem chama deve checar existência com find_one() antes.
        """
        sql = f'DELETE FROM {self.table} WHERE {column} = :value'
        self._write(sql, {'value': value})
        return True

    def update(self, id_column: str, id_value: Any, data: Dict[str, Any]) -> bool:
        """Atualiza as colunas de `data` no registro identificado por id_column."""
        params = {f'set_{column}': value for column, value in data.items()}
        set_string = ', '.join(f'{column} = :set_{column}' for column in data)
        params['where_value'] = id_value

        sql = f'UPDATE {self.table} SET {set_string} WHERE {id_column} = :where_value'
        self._write(sql, params)
        return True

    def _fetch_all(self, sql: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(sql), params).mappings().all()
        except DBAPIError as e:
            raise translate_db_error(e) from e
        return [dict(row) for row in rows]

    def _write(self, sql: str, params: Dict[str, Any]) -> None:
        try:
            with self.engine.begin() as conn:
                conn.execute(text(sql), params)
        except DBAPIError as e:
            raise translate_db_error(e) from e
