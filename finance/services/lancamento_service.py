"""
Service para lógica de lançamentos financeiros.

Localização: finance/services/lancamento_service.py

Este service contém a lógica de negócio relacionada a lançamentos.
Ele usa o LancamentoRepository para acessar dados, mas adiciona
validações e regras de negócio.
"""
import logging
import re
from typing import List, Dict, Any, Optional
from decimal import Decimal
from core.exceptions import RegraNegocioException
from core.repositories.base_repository import to_object_id
from finance.models.lancamento_model import LancamentoModel, validar_lancamento
from finance.repositories.lancamento_repository import LancamentoRepository

logger = logging.getLogger(__name__)


class LancamentoService:
    """
    Service para gerenciar lançamentos financeiros.

    Exemplo de uso:
        service = LancamentoService()
        lancamento = service.salvar(LancamentoModel.create_lancamento_data(
            descricao='Salário',
            mes=1,
            ano=2019,
            valor='10',
            tipo=LancamentoModel.TIPO_RECEITA,
            usuario=usuario
        ))
    """

    def __init__(self, lancamento_repo: Optional[LancamentoRepository] = None):
        self.lancamento_repo = lancamento_repo if lancamento_repo is not None else LancamentoRepository()

    def salvar(self, lancamento: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cria um novo lançamento, sempre com status PENDENTE.

        Args:
            lancamento: Dict do lançamento

        Returns:
            Dict do lançamento gravado (incluindo _id)

        Raises:
            RegraNegocioException: Se algum campo for inválido
        """
        self.validar(lancamento)
        lancamento['status'] = LancamentoModel.STATUS_PENDENTE

        salvo = self.lancamento_repo.save(lancamento)
        logger.info("[LANCAMENTO] Lançamento criado: %s", salvo.get('_id'))
        return salvo

    def atualizar(self, lancamento: Dict[str, Any]) -> Dict[str, Any]:
        """
        Atualiza um lançamento já gravado.

        Raises:
            RegraNegocioException: Se o lançamento não tiver _id ou for inválido
        """
        self._exigir_id(lancamento)
        self.validar(lancamento)

        salvo = self.lancamento_repo.save(lancamento)
        logger.info("[LANCAMENTO] Lançamento atualizado: %s", salvo.get('_id'))
        return salvo

    def deletar(self, lancamento: Dict[str, Any]) -> None:
        """
        Deleta um lançamento já gravado.

        Raises:
            RegraNegocioException: Se o lançamento não tiver _id
        """
        self._exigir_id(lancamento)
        self.lancamento_repo.delete_lancamento(lancamento)
        logger.info("[LANCAMENTO] Lançamento deletado: %s", lancamento['_id'])

    def atualizar_status(self, lancamento: Dict[str, Any], status: str) -> Dict[str, Any]:
        """
        Troca o status e regrava o lançamento inteiro.

        O status do dict recebido é alterado mesmo que a atualização falhe.

        Raises:
            RegraNegocioException: Se o status for desconhecido, ou pelos
                mesmos motivos de atualizar()
        """
        if status not in LancamentoModel.STATUS:
            raise RegraNegocioException("Informe um Status válido.")

        lancamento['status'] = status
        return self.atualizar(lancamento)

    def buscar(self, filtro: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Busca lançamentos pelos campos preenchidos do filtro.

        Descrição casa por trecho, sem diferenciar maiúsculas; mês, ano,
        tipo, status e usuário casam por igualdade. Campos None são ignorados.

        Args:
            filtro: Dict no formato de lançamento

        Returns:
            Lista de lançamentos encontrados
            (vazia se o ID do usuário do filtro for malformado)
        """
        usuario = filtro.get('usuario')
        if usuario is not None and usuario.get('_id') is not None \
                and to_object_id(usuario['_id']) is None:
            # ID de usuário malformado não pertence a nenhum lançamento
            return []

        return self.lancamento_repo.find_all(self._montar_query(filtro))

    @staticmethod
    def _montar_query(filtro: Dict[str, Any]) -> Dict[str, Any]:
        query = {}

        descricao = filtro.get('descricao')
        if descricao is not None:
            query['descricao'] = {'$regex': re.escape(descricao), '$options': 'i'}

        for campo in ('mes', 'ano', 'tipo', 'status'):
            if filtro.get(campo) is not None:
                query[campo] = filtro[campo]

        usuario = filtro.get('usuario')
        if usuario is not None and usuario.get('_id') is not None:
            query['user_id'] = to_object_id(usuario['_id'])

        return query

    def obter_por_id(self, lancamento_id: Any) -> Optional[Dict[str, Any]]:
        """Busca lançamento por ID (None se não existir)."""
        return self.lancamento_repo.find_lancamento_by_id(lancamento_id)

    def obter_saldo(self, user_id: Any, tipo: str, status: str) -> Optional[Decimal]:
        """
        Soma dos valores do usuário para um tipo e status.

        Returns:
            Decimal, ou None quando não há lançamentos (diferente de zero)
        """
        return self.lancamento_repo.obter_saldo_por_tipo_lancamento_e_usuario_e_status(
            user_id, tipo, status
        )

    def obter_saldo_por_usuario(self, user_id: Any) -> Decimal:
        """
        Saldo efetivado do usuário: receitas menos despesas.

        Returns:
            Decimal (zero quando não há lançamentos efetivados)
        """
        receitas = self.obter_saldo(user_id, LancamentoModel.TIPO_RECEITA,
                                    LancamentoModel.STATUS_EFETIVADO)
        despesas = self.obter_saldo(user_id, LancamentoModel.TIPO_DESPESA,
                                    LancamentoModel.STATUS_EFETIVADO)
        return (receitas or Decimal('0')) - (despesas or Decimal('0'))

    def validar(self, lancamento: Dict[str, Any]) -> None:
        """
        Raises:
            RegraNegocioException: Com a mensagem da primeira regra violada
        """
        valido, mensagem = validar_lancamento(lancamento)
        if not valido:
            logger.warning("[LANCAMENTO] Validação falhou: %s", mensagem)
            raise RegraNegocioException(mensagem)

    @staticmethod
    def _exigir_id(lancamento: Dict[str, Any]) -> None:
        if lancamento.get('_id') is None:
            raise RegraNegocioException("Lançamento sem identificador: salve-o antes.")
        if to_object_id(lancamento['_id']) is None:
            raise RegraNegocioException("Identificador de lançamento inválido.")
