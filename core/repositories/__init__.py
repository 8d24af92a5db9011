"""
Repositories do core.

Localização: core/repositories/

Repositories são a camada de acesso a dados (Data Access Layer).
Eles encapsulam todas as operações com MongoDB, isolando a lógica de acesso
a dados do resto da aplicação.

Estrutura:
- Cada repository representa uma collection do MongoDB
- Métodos CRUD básicos (save, find, delete)
- Queries específicas do domínio
"""
from .base_repository import BaseRepository
from .user_repository import UserRepository

__all__ = ['BaseRepository', 'UserRepository']
