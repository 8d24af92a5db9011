"""
Exceções de negócio da aplicação.

Localização: core/exceptions.py

Services levantam estas exceções para erros que o chamador pode corrigir
(dados inválidos, email duplicado, credenciais incorretas). Falhas de
infraestrutura (MongoDB fora do ar, etc.) propagam sem tradução.
"""


class RegraNegocioException(ValueError):
    """Violação de regra de negócio (validação, email duplicado, lançamento sem ID)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ErroAutenticacao(ValueError):
    """
    Falha ao autenticar um usuário.

    Levantada apenas por UsuarioService.autenticar, com mensagens distintas
    para "usuário não encontrado" e "senha inválida". A camada de
    apresentação deve exibir uma mensagem genérica ao usuário final.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
