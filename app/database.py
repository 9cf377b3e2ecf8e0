"""
Database - instância do Flask-SQLAlchemy compartilhada pela aplicação.

O engine é criado uma única vez por processo em create_app() e injetado
nos models (BaseModel) que precisam dele.
"""

import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite só aplica chaves estrangeiras com o PRAGMA ativo."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def init_db(app):
    """Registra o Flask-SQLAlchemy na aplicação."""
    db.init_app(app)
