"""
Repository para operações de usuário no MongoDB.

Localização: core/repositories/user_repository.py

Encapsula todas as operações com a collection 'usuarios' no MongoDB.
"""
from typing import Optional, Dict, Any
from datetime import datetime
from core.repositories.base_repository import BaseRepository
from core.models.user_model import UserModel


class UserRepository(BaseRepository):
    """
    Repository para gerenciar usuários no MongoDB.

    Exemplo de uso:
        repo = UserRepository()
        user = repo.save({'nome': 'Fulano', 'email': 'user@email.com', 'senha': 'senha'})
    """

    def __init__(self, database=None):
        super().__init__('usuarios', database)

    def _ensure_indexes(self):
        """Cria índices necessários."""
        self.collection.create_index('email', unique=True)

    def save(self, usuario: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insere o usuário (sem _id) ou substitui o existente (com _id).

        O email é gravado normalizado (minúsculo, sem espaços).

        Args:
            usuario: Dict com dados do usuário

        Returns:
            Dict com os dados gravados (incluindo _id)
        """
        data = {k: v for k, v in usuario.items() if k != '_id'}
        data['email'] = UserModel.normalize_email(data.get('email'))
        if 'data_cadastro' not in data:
            data['data_cadastro'] = datetime.utcnow()

        if usuario.get('_id') is None:
            return self.create(data)
        return self.replace(usuario['_id'], data)

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Busca usuário por email.

        Args:
            email: Email do usuário

        Returns:
            Dict com dados do usuário ou None
        """
        if not email:
            return None
        return self.find_one({'email': UserModel.normalize_email(email)})

    def exists_by_email(self, email: str) -> bool:
        """
        Verifica se já existe usuário com o email.

        Args:
            email: Email a verificar

        Returns:
            True se o email já estiver cadastrado
        """
        if not email:
            return False
        return self.count({'email': UserModel.normalize_email(email)}, limit=1) > 0
