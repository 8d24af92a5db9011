"""
Modelo de usuário.

Localização: core/models/user_model.py

Este módulo define a estrutura de dados do usuário no MongoDB.
"""
from typing import Optional, Dict, Any
from datetime import datetime


class UserModel:
    """
    Modelo de usuário.

    Schema no MongoDB:
    {
      _id: ObjectId,
      nome: String,
      email: String (único, minúsculo),
      senha: String,
      data_cadastro: ISODate
    }
    """

    @staticmethod
    def normalize_email(email: Optional[str]) -> Optional[str]:
        """Email em minúsculas e sem espaços nas pontas (None continua None)."""
        if email is None:
            return None
        return email.lower().strip()

    @staticmethod
    def create_user_data(nome: str, email: str, senha: str,
                         **kwargs) -> Dict[str, Any]:
        """
        Cria estrutura de dados do usuário.

        Args:
            nome: Nome do usuário
            email: Email do usuário
            senha: Senha
            **kwargs: Campos adicionais

        Returns:
            Dict com dados do usuário
        """
        return {
            'nome': nome.strip() if nome else nome,
            'email': UserModel.normalize_email(email),
            'senha': senha,
            'data_cadastro': datetime.utcnow(),
            **kwargs
        }
