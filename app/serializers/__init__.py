"""
Serializers - Transformam registros do banco em dicionários para respostas da API.

Centralizam o controle de quais campos são expostos e a conversão de
valores (datas, Decimal, UUID) para JSON.
"""

from .base import RecordSerializer

__all__ = [
    'RecordSerializer',
]
