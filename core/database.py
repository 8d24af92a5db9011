"""
Conexão com o MongoDB.

Localização: core/database.py

Variáveis de ambiente (lidas de um .env, se existir):
- MONGO_URI: URI completa (tem prioridade sobre as demais)
- MONGO_USER / MONGO_PASS: credenciais, usadas para montar a URI
- MONGO_HOST: host do cluster (default: localhost:27017)
- MONGO_DB_NAME: nome do banco (default: minhas_financas)
"""
import os
import urllib.parse
import logging

from dotenv import load_dotenv, find_dotenv
from pymongo import MongoClient

load_dotenv(find_dotenv())

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = 'minhas_financas'

_client = None


def get_mongo_uri() -> str:
    """
    Monta a URI de conexão a partir do ambiente.

    Raises:
        RuntimeError: Se nem MONGO_URI nem MONGO_USER/MONGO_PASS estiverem configurados
    """
    uri = os.getenv('MONGO_URI')
    if uri:
        return uri

    user = os.getenv('MONGO_USER')
    password = os.getenv('MONGO_PASS')
    if not user or not password:
        raise RuntimeError("MONGO_URI ou MONGO_USER/MONGO_PASS não configurados")

    host = os.getenv('MONGO_HOST', 'localhost:27017')
    return "mongodb://%s:%s@%s/" % (
        urllib.parse.quote_plus(user),
        urllib.parse.quote_plus(password),
        host,
    )


def get_database():
    """Retorna o banco configurado, criando o MongoClient na primeira chamada."""
    global _client
    if _client is None:
        _client = MongoClient(get_mongo_uri())
        logger.info("[DATABASE] Cliente MongoDB criado")
    return _client[os.getenv('MONGO_DB_NAME', DEFAULT_DB_NAME)]


def close_database():
    """Fecha o cliente em cache (usado em testes e no shutdown)."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
