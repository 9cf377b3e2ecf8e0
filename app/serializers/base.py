"""
Record Serializer - transforma registros do banco em dicionários JSON.
"""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID


class RecordSerializer:
    """
    Serializa registros (dicts vindos do BaseModel).

    Campos em `exclude` são removidos; valores não nativos do JSON
    (datas, Decimal, UUID, bytes) são convertidos.
    """

    def __init__(self, instance: Any = None, many: bool = False, exclude: Iterable[str] = ()):
        """
        Inicializa serializer.

        Args:
            instance: Registro ou lista de registros a serializar
            many: Se True, instance é uma lista
            exclude: Campos que nunca devem ser expostos
        """
        self.instance = instance
        self.many = many
        self.exclude = frozenset(exclude)

    def serialize(self) -> Dict[str, Any] | List[Dict[str, Any]]:
        if self.instance is None:
            return {} if not self.many else []

        if self.many:
            return [self._serialize_one(item) for item in self.instance]

        return self._serialize_one(self.instance)

    def _serialize_one(self, record: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: self._serialize_value(value)
            for key, value in record.items()
            if key not in self.exclude
        }

    def _serialize_value(self, value: Any) -> Any:
        if value is None:
            return None

        if isinstance(value, (datetime, date, time)):
            return value.isoformat()

        if isinstance(value, Decimal):
            return float(value)

        if isinstance(value, UUID):
            return str(value)

        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).decode('utf-8', errors='replace')

        if isinstance(value, (dict, list, str, int, float, bool)):
            return value

        return str(value)

    @classmethod
    def to_dict(cls, record: Optional[Dict[str, Any]], **kwargs) -> Dict[str, Any]:
        """Atalho para serializar um registro."""
        return cls(record, **kwargs).serialize()

    @classmethod
    def to_list(cls, records: List[Dict[str, Any]], **kwargs) -> List[Dict[str, Any]]:
        """Atalho para serializar uma lista."""
        return cls(records, many=True, **kwargs).serialize()
