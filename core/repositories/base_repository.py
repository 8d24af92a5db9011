"""
Repository base para MongoDB.

Localização: core/repositories/base_repository.py

Este é um repository base que pode ser estendido por outros repositories
para compartilhar funcionalidades comuns.
"""
from typing import Optional, Dict, Any, List
from core.database import get_database
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """
    Converte um ID (string ou ObjectId) para ObjectId.

    Returns:
        ObjectId ou None se o valor for vazio ou malformado
    """
    if value is None:
        return None
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class BaseRepository:
    """
    Repository base com operações CRUD comuns.

    Exemplo de uso:
        class UserRepository(BaseRepository):
            def __init__(self, database=None):
                super().__init__('usuarios', database)
    """

    def __init__(self, collection_name: str, database=None):
        """
        Inicializa o repository.

        Args:
            collection_name: Nome da collection no MongoDB
            database: Banco a usar (default: get_database())
        """
        self.db = database if database is not None else get_database()
        self.collection = self.db[collection_name]
        self._ensure_indexes()

    def _ensure_indexes(self):
        """
        Cria índices necessários.
        Deve ser sobrescrito nas classes filhas.
        """
        pass

    def find_by_id(self, document_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca documento por ID.

        Args:
            document_id: ID do documento (ObjectId ou string)

        Returns:
            Dict com dados do documento ou None
        """
        object_id = to_object_id(document_id)
        if object_id is None:
            return None
        return self.collection.find_one({'_id': object_id})

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Busca um documento por query.

        Args:
            query: Query do MongoDB

        Returns:
            Dict com dados do documento ou None
        """
        return self.collection.find_one(query)

    def find_many(self, query: Dict[str, Any] = None,
                  sort: tuple = None) -> List[Dict[str, Any]]:
        """
        Busca múltiplos documentos.

        Args:
            query: Query do MongoDB (None para todos)
            sort: Tupla (campo, direção) para ordenação

        Returns:
            Lista de documentos
        """
        cursor = self.collection.find(query or {})

        if sort:
            cursor = cursor.sort(sort[0], sort[1])

        return list(cursor)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cria um novo documento.

        Args:
            data: Dados do documento

        Returns:
            Dict com dados do documento criado (incluindo _id)
        """
        result = self.collection.insert_one(data)
        data['_id'] = result.inserted_id
        return data

    def replace(self, document_id: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitui o documento inteiro (upsert).

        Args:
            document_id: ID do documento
            data: Documento completo (sem _id)

        Returns:
            Dict com o documento gravado (incluindo _id)

        Raises:
            ValueError: Se o ID for vazio ou malformado
        """
        object_id = to_object_id(document_id)
        if object_id is None:
            raise ValueError("ID inválido para substituir documento: %r" % (document_id,))
        self.collection.replace_one({'_id': object_id}, data, upsert=True)
        return {**data, '_id': object_id}

    def delete(self, document_id: Any) -> bool:
        """
        Deleta um documento.

        Args:
            document_id: ID do documento

        Returns:
            True se deletado com sucesso
        """
        object_id = to_object_id(document_id)
        if object_id is None:
            return False
        result = self.collection.delete_one({'_id': object_id})
        return result.deleted_count > 0

    def count(self, query: Dict[str, Any] = None, limit: int = 0) -> int:
        """
        Conta documentos.

        Args:
            query: Query do MongoDB (None para todos)
            limit: Para de contar ao atingir o limite (0 = sem limite)

        Returns:
            Número de documentos
        """
        if limit:
            return self.collection.count_documents(query or {}, limit=limit)
        return self.collection.count_documents(query or {})
