"""
Modelo de Lançamento.

Localização: finance/models/lancamento_model.py

Schema no MongoDB:
{
  _id: ObjectId,
  descricao: String,
  mes: Number,              # 1 a 12
  ano: Number,              # 4 dígitos
  valor: Decimal128,        # sempre > 0
  tipo: String,             # 'RECEITA' | 'DESPESA'
  status: String,           # 'PENDENTE' | 'EFETIVADO' | 'CANCELADO'
  user_id: ObjectId,        # dono do lançamento
  data_cadastro: ISODate
}

Em memória o dono fica em 'usuario' (dict com '_id'); o repository
converte para 'user_id' ao gravar.
"""
from typing import Dict, Any, Optional, Tuple
from datetime import datetime
from decimal import Decimal, InvalidOperation


class LancamentoModel:
    """
    Modelo de dados para lançamentos financeiros.
    """

    # Tipos de lançamento
    TIPO_RECEITA = 'RECEITA'
    TIPO_DESPESA = 'DESPESA'
    TIPOS = [TIPO_RECEITA, TIPO_DESPESA]

    # Status de lançamento (qualquer transição é permitida)
    STATUS_PENDENTE = 'PENDENTE'
    STATUS_EFETIVADO = 'EFETIVADO'
    STATUS_CANCELADO = 'CANCELADO'
    STATUS = [STATUS_PENDENTE, STATUS_EFETIVADO, STATUS_CANCELADO]

    @staticmethod
    def create_lancamento_data(descricao: str, mes: int, ano: int,
                               valor: Any, tipo: str,
                               usuario: Optional[Dict[str, Any]],
                               status: str = STATUS_PENDENTE,
                               data_cadastro: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Cria estrutura de dados de lançamento.

        Args:
            descricao: Descrição
            mes: Mês (1 a 12)
            ano: Ano com 4 dígitos
            valor: Valor (convertido para Decimal)
            tipo: 'RECEITA' ou 'DESPESA'
            usuario: Dict do usuário dono (precisa de '_id')
            status: Status inicial (default: PENDENTE)
            data_cadastro: Data de cadastro (default: agora)

        Returns:
            Dict com dados do lançamento (sem _id)
        """
        return {
            'descricao': descricao,
            'mes': mes,
            'ano': ano,
            'valor': Decimal(str(valor)) if valor is not None else None,
            'tipo': tipo,
            'status': status,
            'usuario': usuario,
            'data_cadastro': data_cadastro or datetime.utcnow(),
        }


def validar_lancamento(lancamento: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Valida os campos de um lançamento.

    As regras são checadas nesta ordem e só o primeiro erro é reportado:
    descrição, mês, ano, usuário, valor, tipo.

    Args:
        lancamento: Dict do lançamento

    Returns:
        (True, None) se válido, (False, mensagem) no primeiro erro
    """
    descricao = lancamento.get('descricao')
    if descricao is None or str(descricao).strip() == '':
        return False, "Informe uma Descrição válida."

    mes = lancamento.get('mes')
    if not _inteiro(mes) or mes < 1 or mes > 12:
        return False, "Informe um Mês válido."

    ano = lancamento.get('ano')
    if not _inteiro(ano) or len(str(ano)) != 4:
        return False, "Informe um Ano válido."

    usuario = lancamento.get('usuario')
    if usuario is None or usuario.get('_id') is None:
        return False, "Informe um Usuário."

    valor = _decimal(lancamento.get('valor'))
    if valor is None or not valor > 0:
        return False, "Informe um Valor válido."

    if lancamento.get('tipo') not in LancamentoModel.TIPOS:
        return False, "Informe um tipo de Lançamento."

    return True, None


def _inteiro(valor: Any) -> bool:
    # bool é subclasse de int, mas True/False não são mês nem ano
    return isinstance(valor, int) and not isinstance(valor, bool)


def _decimal(valor: Any) -> Optional[Decimal]:
    """Converte para Decimal finito; None se vazio, não numérico, NaN ou infinito."""
    if valor is None or isinstance(valor, bool):
        return None
    try:
        numero = Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        return None
    return numero if numero.is_finite() else None
