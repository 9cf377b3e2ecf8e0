"""
Pytest fixtures para os testes da API
"""

import pytest
from sqlalchemy import text
from werkzeug.security import generate_password_hash

from app import create_app
from app.config import TestingConfig
from app.database import db
from app.utils.auth import generate_user_token

SCHEMA = [
    """
    CREATE TABLE gabinete_tipo (
        gabinete_tipo_id TEXT PRIMARY KEY,
        gabinete_tipo_nome TEXT NOT NULL UNIQUE,
        gabinete_tipo_informacoes TEXT
    )
    """,
    """
    CREATE TABLE gabinete (
        gabinete_id TEXT PRIMARY KEY,
        gabinete_nome TEXT NOT NULL UNIQUE,
        gabinete_estado TEXT NOT NULL,
        gabinete_assinaturas INTEGER NOT NULL,
        gabinete_tipo TEXT NOT NULL,
        gabinete_criado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        gabinete_atualizado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        CONSTRAINT fk_gabinete_tipo FOREIGN KEY (gabinete_tipo)
            REFERENCES gabinete_tipo (gabinete_tipo_id)
    )
    """,
    """
    CREATE TABLE usuario_tipo (
        usuario_tipo_id TEXT PRIMARY KEY,
        usuario_tipo_nome TEXT NOT NULL UNIQUE,
        usuario_tipo_descricao TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE usuario (
        usuario_id TEXT PRIMARY KEY,
        usuario_tipo TEXT NOT NULL,
        usuario_gabinete TEXT NOT NULL,
        usuario_nome TEXT NOT NULL,
        usuario_email TEXT NOT NULL UNIQUE,
        usuario_aniversario DATE,
        usuario_telefone TEXT NOT NULL,
        usuario_senha TEXT,
        usuario_token TEXT,
        usuario_foto TEXT,
        usuario_ativo INTEGER NOT NULL,
        usuario_gestor INTEGER NOT NULL,
        usuario_criado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        usuario_atualizado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        CONSTRAINT fk_usuario_tipo FOREIGN KEY (usuario_tipo)
            REFERENCES usuario_tipo (usuario_tipo_id),
        CONSTRAINT fk_usuario_gabinete FOREIGN KEY (usuario_gabinete)
            REFERENCES gabinete (gabinete_id)
    )
    """,
    """
    CREATE TABLE orgaos_tipos (
        orgao_tipo_id TEXT PRIMARY KEY,
        orgao_tipo_nome TEXT NOT NULL UNIQUE,
        orgao_tipo_descricao TEXT,
        orgao_tipo_criado_por TEXT NOT NULL,
        orgao_tipo_gabinete TEXT NOT NULL,
        CONSTRAINT fk_orgao_tipo_criado_por FOREIGN KEY (orgao_tipo_criado_por)
            REFERENCES usuario (usuario_id),
        CONSTRAINT fk_orgao_tipo_gabinete FOREIGN KEY (orgao_tipo_gabinete)
            REFERENCES gabinete (gabinete_id)
    )
    """,
    """
    CREATE TABLE orgaos (
        orgao_id TEXT PRIMARY KEY,
        orgao_nome TEXT NOT NULL UNIQUE,
        orgao_email TEXT NOT NULL,
        orgao_telefone TEXT,
        orgao_endereco TEXT,
        orgao_bairro TEXT,
        orgao_municipio TEXT NOT NULL,
        orgao_estado TEXT NOT NULL,
        orgao_cep TEXT,
        orgao_tipo TEXT NOT NULL,
        orgao_informacoes TEXT,
        orgao_site TEXT,
        orgao_criado_por TEXT NOT NULL,
        orgao_gabinete TEXT NOT NULL,
        CONSTRAINT fk_orgao_tipo FOREIGN KEY (orgao_tipo)
            REFERENCES orgaos_tipos (orgao_tipo_id),
        CONSTRAINT fk_orgao_criado_por FOREIGN KEY (orgao_criado_por)
            REFERENCES usuario (usuario_id),
        CONSTRAINT fk_orgao_gabinete FOREIGN KEY (orgao_gabinete)
            REFERENCES gabinete (gabinete_id)
    )
    """,
]

SENHA = 'senha-forte-123'


@pytest.fixture
def app(tmp_path):
    """App Flask em SQLite em memória com as tabelas usadas nos testes"""
    app = create_app(TestingConfig)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    with app.app_context():
        with db.engine.begin() as conn:
            for statement in SCHEMA:
                conn.execute(text(statement))
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """Gabinete, tipos e usuários (ativo e inativo) de base"""
    rows = [
        ("INSERT INTO gabinete_tipo (gabinete_tipo_id, gabinete_tipo_nome) VALUES (:id, :nome)",
         {'id': 'gt-1', 'nome': 'Deputado Federal'}),
        ("INSERT INTO gabinete (gabinete_id, gabinete_nome, gabinete_estado, gabinete_assinaturas, gabinete_tipo) "
         "VALUES (:id, :nome, :estado, :assinaturas, :tipo)",
         {'id': 'gab-1', 'nome': 'Gabinete Teste', 'estado': 'SP', 'assinaturas': 5, 'tipo': 'gt-1'}),
        ("INSERT INTO usuario_tipo (usuario_tipo_id, usuario_tipo_nome, usuario_tipo_descricao) "
         "VALUES (:id, :nome, :descricao)",
         {'id': 'ut-1', 'nome': 'Administrador', 'descricao': 'Acesso total'}),
    ]
    usuarios = [
        {
            'usuario_id': 'user-1',
            'usuario_nome': 'Maria Souza',
            'usuario_email': 'maria@gabinete.leg.br',
            'usuario_ativo': 1,
            'usuario_gestor': 1,
        },
        {
            'usuario_id': 'user-2',
            'usuario_nome': 'João Lima',
            'usuario_email': 'joao@gabinete.leg.br',
            'usuario_ativo': 0,
            'usuario_gestor': 0,
        },
    ]

    with db.engine.begin() as conn:
        for sql, params in rows:
            conn.execute(text(sql), params)
        for usuario in usuarios:
            conn.execute(text(
                "INSERT INTO usuario (usuario_id, usuario_tipo, usuario_gabinete, usuario_nome, "
                "usuario_email, usuario_telefone, usuario_senha, usuario_ativo, usuario_gestor) "
                "VALUES (:usuario_id, 'ut-1', 'gab-1', :usuario_nome, :usuario_email, '11999990000', "
                ":usuario_senha, :usuario_ativo, :usuario_gestor)"
            ), dict(usuario, usuario_senha=generate_password_hash(SENHA)))

    return {
        'gabinete_tipo': 'gt-1',
        'gabinete': 'gab-1',
        'usuario_tipo': 'ut-1',
        'usuario': dict(usuarios[0], usuario_gabinete='gab-1', usuario_tipo='ut-1'),
        'inativo': dict(usuarios[1], usuario_gabinete='gab-1', usuario_tipo='ut-1'),
        'senha': SENHA,
    }


@pytest.fixture
def auth_headers(seed):
    """Header Authorization com token do usuário ativo"""
    token = generate_user_token(seed['usuario'])
    return {'Authorization': f'Bearer {token}'}
