"""
Tests for login and JWT verification
"""

import bcrypt
import jwt
from sqlalchemy import text

from app.database import db
from app.utils.auth import (
    Identity,
    decode_jwt_token,
    extract_bearer_token,
    generate_jwt_token,
)
from app.utils.passwords import hash_password, verify_password


def login(client, email, senha):
    return client.post('/api/login', json={'email': email, 'senha': senha})


def set_stored_hash(usuario_id, stored_hash):
    with db.engine.begin() as conn:
        conn.execute(
            text('UPDATE usuario SET usuario_senha = :hash WHERE usuario_id = :id'),
            {'hash': stored_hash, 'id': usuario_id},
        )


def php_bcrypt_hash(senha):
    hashed = bcrypt.hashpw(senha.encode('utf-8'), bcrypt.gensalt(rounds=4)).decode('ascii')
    return '$2y$' + hashed[4:]


class TestLogin:

    def test_success(self, client, seed):
        """Login válido retorna dados do usuário e token"""
        response = login(client, 'maria@gabinete.leg.br', seed['senha'])
        body = response.get_json()

        assert response.status_code == 200
        assert body['status'] == 'success'
        assert body['message'] == 'Login realizado com sucesso'
        assert body['data']['id'] == 'user-1'
        assert body['data']['gabinete'] == 'gab-1'
        assert body['data']['gestor'] is True
        assert body['data']['token']

    def test_token_yields_matching_identity(self, client, seed):
        token = login(client, 'maria@gabinete.leg.br', seed['senha']).get_json()['data']['token']

        claims = decode_jwt_token(token)
        identity = Identity.from_claims(claims)

        assert identity.id == 'user-1'
        assert identity.email == 'maria@gabinete.leg.br'
        assert identity.gabinete == 'gab-1'
        assert identity.to_dict()['gestor'] is True
        assert claims['exp'] - claims['iat'] == 36000

    def test_wrong_password(self, client, seed):
        response = login(client, 'maria@gabinete.leg.br', 'errada')
        body = response.get_json()

        assert response.status_code == 401
        assert body['status'] == 'unauthorized'
        assert body['message'] == 'Senha inválida'
        assert 'data' not in body

    def test_unknown_user(self, client, seed):
        response = login(client, 'ninguem@gabinete.leg.br', seed['senha'])

        assert response.status_code == 401
        assert response.get_json()['message'] == 'Usuário não encontrado'

    def test_inactive_user(self, client, seed):
        response = login(client, 'joao@gabinete.leg.br', seed['senha'])

        assert response.status_code == 401
        assert response.get_json()['message'] == 'Usuário inativo'

    def test_missing_fields(self, client, seed):
        for payload in ({}, {'email': 'maria@gabinete.leg.br'}, {'senha': seed['senha']}):
            response = client.post('/api/login', json=payload)
            assert response.status_code == 400
            assert response.get_json()['message'] == 'Email e senha são obrigatórios'

    def test_invalid_json(self, client, seed):
        response = client.post('/api/login', data='{email', content_type='application/json')
        assert response.status_code == 400

    def test_legacy_bcrypt_hash(self, client, seed):
        """Hash $2y$ do sistema anterior continua aceito"""
        set_stored_hash('user-1', php_bcrypt_hash('senha-antiga'))

        assert login(client, 'maria@gabinete.leg.br', 'senha-antiga').status_code == 200

        response = login(client, 'maria@gabinete.leg.br', 'outra')
        assert response.status_code == 401
        assert response.get_json()['message'] == 'Senha inválida'

    def test_unrecognized_hash_is_invalid_password(self, client, seed):
        for stored_hash in ('$2y$10$truncado', 'md5$abc', 'texto-puro', ''):
            set_stored_hash('user-1', stored_hash)
            response = login(client, 'maria@gabinete.leg.br', seed['senha'])

            assert response.status_code == 401
            assert response.get_json()['message'] == 'Senha inválida'


class TestRequireJwtAuth:

    def test_missing_header(self, client, seed):
        response = client.get('/api/orgao/gab-1')
        body = response.get_json()

        assert response.status_code == 401
        assert body['message'] == 'Token não fornecido'

    def test_malformed_header(self, client, seed):
        response = client.get('/api/orgao/gab-1', headers={'Authorization': 'Token abc'})
        assert response.get_json()['message'] == 'Token inválido'

    def test_bad_signature(self, app, client, seed):
        token = jwt.encode({'sub': 'user-1', 'iat': 0, 'exp': 9999999999}, 'outra-chave', algorithm='HS256')
        response = client.get('/api/orgao/gab-1', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401
        assert response.get_json()['message'] == 'Token inválido'

    def test_expired_token(self, client, seed):
        """Token expirado é distinguido de token inválido"""
        token = generate_jwt_token({'sub': 'user-1', 'gabinete': 'gab-1'}, expires_in=-60)
        response = client.get('/api/orgao/gab-1', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401
        assert response.get_json()['message'] == 'Token expirado'

    def test_scheme_is_case_insensitive(self, client, auth_headers):
        token = auth_headers['Authorization'].split()[1]
        response = client.get('/api/orgao/gab-1', headers={'Authorization': f'bearer {token}'})
        assert response.status_code == 200

    def test_extract_bearer_token(self):
        assert extract_bearer_token('Bearer abc.def') == 'abc.def'
        assert extract_bearer_token('Bearer') is None
        assert extract_bearer_token('Bearer a b') is None
        assert extract_bearer_token(None) is None


class TestPasswords:

    def test_werkzeug_hash(self):
        stored = hash_password('segredo')

        assert stored != 'segredo'
        assert verify_password(stored, 'segredo')
        assert not verify_password(stored, 'errado')

    def test_bcrypt_prefixes(self):
        hashed = bcrypt.hashpw(b'segredo', bcrypt.gensalt(rounds=4)).decode('ascii')
        for prefix in ('$2a$', '$2b$', '$2y$'):
            assert verify_password(prefix + hashed[4:], 'segredo')

    def test_empty_or_unknown_hash(self):
        assert not verify_password(None, 'x')
        assert not verify_password('', 'x')
        assert not verify_password('sha999$salt$abc', 'x')
