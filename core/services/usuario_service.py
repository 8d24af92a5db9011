"""
Service para lógica de usuários e autenticação.

Localização: core/services/usuario_service.py

Este service contém a lógica de negócio relacionada a usuários.
Ele usa o UserRepository para acessar dados, mas adiciona
validações e regras de negócio.
"""
import logging
from typing import Optional, Dict, Any
from core.exceptions import RegraNegocioException, ErroAutenticacao
from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UsuarioService:
    """
    Service para cadastro e autenticação de usuários.

    Exemplo de uso:
        service = UsuarioService()
        usuario = service.autenticar('user@email.com', 'senha123')
    """

    def __init__(self, user_repo: Optional[UserRepository] = None):
        self.user_repo = user_repo if user_repo is not None else UserRepository()

    def salvar_usuario(self, usuario: Dict[str, Any]) -> Dict[str, Any]:
        """
        Registra um novo usuário.

        Args:
            usuario: Dict com nome, email e senha

        Returns:
            Dict com dados do usuário gravado (incluindo _id)

        Raises:
            RegraNegocioException: Se o email já estiver cadastrado
        """
        self.validar_email(usuario.get('email'))

        salvo = self.user_repo.save(usuario)
        logger.info("[USUARIO] Usuário cadastrado: %s", salvo.get('_id'))
        return salvo

    def validar_email(self, email: str) -> None:
        """
        Garante que o email ainda não está em uso.

        Raises:
            RegraNegocioException: Se já existir usuário com esse email
        """
        if self.user_repo.exists_by_email(email):
            raise RegraNegocioException("Já existe um usuário cadastrado com esse email.")

    def autenticar(self, email: str, senha: str) -> Dict[str, Any]:
        """
        Autentica um usuário.

        A comparação de senha é igualdade simples; hash de senha não é
        responsabilidade desta camada.

        Args:
            email: Email do usuário
            senha: Senha informada

        Returns:
            Dict com dados do usuário autenticado

        Raises:
            ErroAutenticacao: Se o email não existir ou a senha não bater
        """
        usuario = self.user_repo.find_by_email(email)

        if not usuario:
            logger.warning("[USUARIO] Login recusado: email não cadastrado")
            raise ErroAutenticacao("Usuário não encontrado para o email informado.")

        if usuario.get('senha') != senha:
            logger.warning("[USUARIO] Login recusado: senha inválida para %s", usuario.get('_id'))
            raise ErroAutenticacao("Senha inválida.")

        return usuario

    def obter_por_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca usuário por ID.

        Args:
            user_id: ID do usuário

        Returns:
            Dict com dados do usuário ou None
        """
        return self.user_repo.find_by_id(user_id)
