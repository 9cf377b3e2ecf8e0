"""
Tests for RecordSerializer
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.serializers.base import RecordSerializer


class TestRecordSerializer:

    def test_converts_non_json_values(self):
        record = {
            'id': UUID('12345678-1234-5678-1234-567812345678'),
            'criado_em': datetime(2024, 3, 1, 10, 30),
            'aniversario': date(1990, 5, 17),
            'valor': Decimal('1500.50'),
            'foto': b'abc',
            'ativo': True,
            'obs': None,
        }

        assert RecordSerializer.to_dict(record) == {
            'id': '12345678-1234-5678-1234-567812345678',
            'criado_em': '2024-03-01T10:30:00',
            'aniversario': '1990-05-17',
            'valor': 1500.5,
            'foto': 'abc',
            'ativo': True,
            'obs': None,
        }

    def test_exclude(self):
        records = [{'id': 1, 'usuario_senha': 'hash'}, {'id': 2, 'usuario_senha': 'hash'}]
        assert RecordSerializer.to_list(records, exclude=['usuario_senha']) == [{'id': 1}, {'id': 2}]

    def test_none(self):
        assert RecordSerializer(None).serialize() == {}
        assert RecordSerializer(None, many=True).serialize() == []
