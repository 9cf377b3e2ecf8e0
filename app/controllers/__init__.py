"""
Controllers - Camada de controle para endpoints da API.

Cada controller é responsável por uma ação específica (list, get, create, ...).

Estrutura:
- api/v1/entities/: CRUD genérico das entidades do gabinete
- api/v1/auth/: Login
- api/v1/uploads/: Upload de arquivos
"""
