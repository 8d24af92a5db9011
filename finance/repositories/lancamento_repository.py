"""
Repository para lançamentos financeiros.

Localização: finance/repositories/lancamento_repository.py

Este repository encapsula todas as operações com a collection 'lancamentos'
no MongoDB. Converte entre o formato em memória (usuario dict, valor
Decimal) e o documento gravado (user_id ObjectId, valor Decimal128).
"""
import logging
from typing import Optional, List, Dict, Any
from decimal import Decimal
from datetime import datetime
from bson.decimal128 import Decimal128
from core.repositories.base_repository import BaseRepository, to_object_id

logger = logging.getLogger(__name__)


class LancamentoRepository(BaseRepository):
    """
    Repository para gerenciar lançamentos no MongoDB.

    Exemplo de uso:
        repo = LancamentoRepository()
        lancamento = repo.save({
            'descricao': 'Salário',
            'mes': 1,
            'ano': 2019,
            'valor': Decimal('10'),
            'tipo': 'RECEITA',
            'status': 'PENDENTE',
            'usuario': {'_id': ObjectId('...')}
        })
    """

    def __init__(self, database=None):
        super().__init__('lancamentos', database)

    def _ensure_indexes(self):
        """
        Cria índices necessários para otimizar queries.

        Índices:
        - user_id: Filtros por usuário
        - [user_id, tipo, status]: Cálculo de saldo
        - [user_id, ano, mes]: Buscas por período
        """
        self.collection.create_index('user_id')
        self.collection.create_index([('user_id', 1), ('tipo', 1), ('status', 1)])
        self.collection.create_index([('user_id', 1), ('ano', 1), ('mes', 1)])

    @staticmethod
    def _to_document(lancamento: Dict[str, Any]) -> Dict[str, Any]:
        """Converte o lançamento em memória para o documento gravado (sem _id)."""
        data = {k: v for k, v in lancamento.items() if k not in ('_id', 'usuario')}

        usuario = lancamento.get('usuario') or {}
        data['user_id'] = to_object_id(usuario.get('_id'))

        valor = data.get('valor')
        if valor is not None and not isinstance(valor, Decimal128):
            data['valor'] = Decimal128(Decimal(str(valor)))

        if 'data_cadastro' not in data:
            data['data_cadastro'] = datetime.utcnow()
        return data

    @staticmethod
    def _from_document(document: Dict[str, Any]) -> Dict[str, Any]:
        """Converte o documento do MongoDB para o formato em memória."""
        lancamento = dict(document)
        lancamento['usuario'] = {'_id': lancamento.pop('user_id', None)}
        valor = lancamento.get('valor')
        if isinstance(valor, Decimal128):
            lancamento['valor'] = valor.to_decimal()
        return lancamento

    def save(self, lancamento: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insere (sem _id) ou substitui (com _id) um lançamento.

        Args:
            lancamento: Dict do lançamento

        Returns:
            Dict do lançamento gravado (incluindo _id)
        """
        data = self._to_document(lancamento)

        if lancamento.get('_id') is None:
            gravado = self.create(data)
        else:
            gravado = self.replace(lancamento['_id'], data)
        return self._from_document(gravado)

    def delete_lancamento(self, lancamento: Dict[str, Any]) -> bool:
        """
        Deleta um lançamento.

        Args:
            lancamento: Dict do lançamento (precisa de _id)

        Returns:
            True se deletado
        """
        return self.delete(lancamento['_id'])

    def find_lancamento_by_id(self, lancamento_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca lançamento por ID.

        Returns:
            Dict do lançamento ou None (ID inexistente ou malformado)
        """
        document = self.find_by_id(lancamento_id)
        return self._from_document(document) if document else None

    def find_all(self, query: Dict[str, Any] = None) -> List[Dict[str, Any]]:
        """
        Busca lançamentos que satisfazem a query.

        Args:
            query: Query do MongoDB (None para todos)

        Returns:
            Lista de lançamentos em ordem de criação (_id)
        """
        return [self._from_document(doc) for doc in self.find_many(query, sort=('_id', 1))]

    def obter_saldo_por_tipo_lancamento_e_usuario_e_status(self, user_id: Any, tipo: str,
                                                          status: str) -> Optional[Decimal]:
        """
        Soma o valor dos lançamentos de um usuário por tipo e status.

        Args:
            user_id: ID do usuário
            tipo: 'RECEITA' ou 'DESPESA'
            status: Status dos lançamentos considerados

        Returns:
            Soma como Decimal, ou None se nenhum lançamento corresponder
        """
        pipeline = [
            {
                '$match': {
                    'user_id': to_object_id(user_id),
                    'tipo': tipo,
                    'status': status,
                }
            },
            {
                '$group': {
                    '_id': '$user_id',
                    'total': {'$sum': '$valor'}
                }
            }
        ]

        results = list(self.collection.aggregate(pipeline))
        if not results:
            return None

        total = results[0]['total']
        if isinstance(total, Decimal128):
            return total.to_decimal()
        return Decimal(str(total))
