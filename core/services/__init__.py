"""
Services do core.

Localização: core/services/

Services contêm a lógica de negócio relacionada a funcionalidades base,
como cadastro e autenticação de usuários.
"""
from .usuario_service import UsuarioService

__all__ = ['UsuarioService']
