"""
Testes da configuração de conexão com o MongoDB.
"""
from unittest.mock import patch

import pytest

from core import database


@pytest.fixture(autouse=True)
def limpar_cliente():
    database._client = None
    yield
    database._client = None


def test_mongo_uri_tem_prioridade(monkeypatch):
    monkeypatch.setenv('MONGO_URI', 'mongodb://servidor:27017/')
    monkeypatch.setenv('MONGO_USER', 'ignorado')

    assert database.get_mongo_uri() == 'mongodb://servidor:27017/'


def test_monta_uri_com_credenciais_escapadas(monkeypatch):
    monkeypatch.delenv('MONGO_URI', raising=False)
    monkeypatch.setenv('MONGO_USER', 'fulano')
    monkeypatch.setenv('MONGO_PASS', 'p@ss:word')
    monkeypatch.setenv('MONGO_HOST', 'db:27017')

    assert database.get_mongo_uri() == 'mongodb://fulano:p%40ss%3Aword@db:27017/'


def test_sem_configuracao_falha(monkeypatch):
    for var in ('MONGO_URI', 'MONGO_USER', 'MONGO_PASS'):
        monkeypatch.delenv(var, raising=False)

    with pytest.raises(RuntimeError):
        database.get_mongo_uri()


def test_cliente_criado_uma_vez(monkeypatch):
    monkeypatch.setenv('MONGO_URI', 'mongodb://servidor:27017/')
    monkeypatch.setenv('MONGO_DB_NAME', 'financas_teste')

    with patch.object(database, 'MongoClient') as mongo_client:
        database.get_database()
        database.get_database()

    mongo_client.assert_called_once_with('mongodb://servidor:27017/')
    mongo_client.return_value.__getitem__.assert_called_with('financas_teste')


def test_close_database_descarta_cliente(monkeypatch):
    monkeypatch.setenv('MONGO_URI', 'mongodb://servidor:27017/')

    with patch.object(database, 'MongoClient') as mongo_client:
        database.get_database()
        database.close_database()

    mongo_client.return_value.close.assert_called_once_with()
    assert database._client is None
