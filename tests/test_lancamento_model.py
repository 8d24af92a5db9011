"""
Testes da validação de lançamentos.

A validação reporta apenas a primeira regra violada, na ordem:
descrição, mês, ano, usuário, valor, tipo.
"""
from decimal import Decimal

import pytest
from bson import ObjectId

from finance.models.lancamento_model import LancamentoModel, validar_lancamento


def criar_lancamento(**overrides):
    lancamento = LancamentoModel.create_lancamento_data(
        descricao='lancamento qualquer',
        mes=1,
        ano=2019,
        valor='10',
        tipo=LancamentoModel.TIPO_RECEITA,
        usuario={'_id': ObjectId()},
    )
    lancamento.update(overrides)
    return lancamento


def test_lancamento_valido_passa():
    assert validar_lancamento(criar_lancamento()) == (True, None)


def test_erros_reportados_na_ordem_das_regras():
    lancamento = {}
    assert validar_lancamento(lancamento) == (False, "Informe uma Descrição válida.")

    lancamento['descricao'] = ''
    assert validar_lancamento(lancamento) == (False, "Informe uma Descrição válida.")

    lancamento['descricao'] = 'Salario'
    assert validar_lancamento(lancamento) == (False, "Informe um Mês válido.")

    # ano inválido não é reportado enquanto o mês estiver faltando
    lancamento['ano'] = 0
    assert validar_lancamento(lancamento) == (False, "Informe um Mês válido.")

    lancamento['mes'] = 1
    assert validar_lancamento(lancamento) == (False, "Informe um Ano válido.")

    lancamento['ano'] = 202
    assert validar_lancamento(lancamento) == (False, "Informe um Ano válido.")

    lancamento['ano'] = 2020
    assert validar_lancamento(lancamento) == (False, "Informe um Usuário.")

    lancamento['usuario'] = {}
    assert validar_lancamento(lancamento) == (False, "Informe um Usuário.")

    lancamento['usuario']['_id'] = ObjectId()
    assert validar_lancamento(lancamento) == (False, "Informe um Valor válido.")

    lancamento['valor'] = Decimal('0')
    assert validar_lancamento(lancamento) == (False, "Informe um Valor válido.")

    lancamento['valor'] = Decimal('1')
    assert validar_lancamento(lancamento) == (False, "Informe um tipo de Lançamento.")

    lancamento['tipo'] = LancamentoModel.TIPO_DESPESA
    assert validar_lancamento(lancamento) == (True, None)


@pytest.mark.parametrize('descricao', [None, '', '   ', '\t\n'])
def test_descricao_vazia_invalida(descricao):
    assert validar_lancamento(criar_lancamento(descricao=descricao)) == (
        False, "Informe uma Descrição válida.")


@pytest.mark.parametrize('mes', [None, 0, -1, 13, 22])
def test_mes_fora_do_calendario_invalido(mes):
    assert validar_lancamento(criar_lancamento(mes=mes)) == (False, "Informe um Mês válido.")


@pytest.mark.parametrize('mes', [1, 6, 12])
def test_mes_do_calendario_valido(mes):
    assert validar_lancamento(criar_lancamento(mes=mes)) == (True, None)


@pytest.mark.parametrize('ano', [None, 0, 99, 202, 20190])
def test_ano_sem_quatro_digitos_invalido(ano):
    assert validar_lancamento(criar_lancamento(ano=ano)) == (False, "Informe um Ano válido.")


@pytest.mark.parametrize('usuario', [None, {}, {'_id': None}])
def test_usuario_sem_id_invalido(usuario):
    assert validar_lancamento(criar_lancamento(usuario=usuario)) == (False, "Informe um Usuário.")


@pytest.mark.parametrize('valor', [None, Decimal('0'), Decimal('-0.01'), -5, 0])
def test_valor_nao_positivo_invalido(valor):
    assert validar_lancamento(criar_lancamento(valor=valor)) == (False, "Informe um Valor válido.")


@pytest.mark.parametrize('tipo', [None, 'TRANSFERENCIA'])
def test_tipo_desconhecido_invalido(tipo):
    assert validar_lancamento(criar_lancamento(tipo=tipo)) == (
        False, "Informe um tipo de Lançamento.")


def test_validacao_nao_altera_o_lancamento():
    lancamento = criar_lancamento(status=LancamentoModel.STATUS_CANCELADO)
    copia = dict(lancamento)

    validar_lancamento(lancamento)

    assert lancamento == copia


def test_create_lancamento_data_converte_valor_e_inicia_pendente():
    lancamento = LancamentoModel.create_lancamento_data(
        descricao='Aluguel',
        mes=3,
        ano=2021,
        valor=1500.5,
        tipo=LancamentoModel.TIPO_DESPESA,
        usuario={'_id': ObjectId()},
    )

    assert lancamento['valor'] == Decimal('1500.5')
    assert lancamento['status'] == LancamentoModel.STATUS_PENDENTE
    assert lancamento['data_cadastro'] is not None
    assert '_id' not in lancamento


@pytest.mark.parametrize('valor', ['abc', '', float('nan'), float('inf'), Decimal('NaN'),
                                   Decimal('-Infinity'), True, [10]])
def test_valor_nao_numerico_ou_infinito_retorna_erro_sem_levantar(valor):
    assert validar_lancamento(criar_lancamento(valor=valor)) == (False, "Informe um Valor válido.")


@pytest.mark.parametrize('valor', ['10.50', 3, 0.01, Decimal('1500')])
def test_valor_positivo_em_qualquer_formato_numerico(valor):
    assert validar_lancamento(criar_lancamento(valor=valor)) == (True, None)


@pytest.mark.parametrize('mes', ['1', 1.0, True, [1]])
def test_mes_nao_inteiro_invalido(mes):
    assert validar_lancamento(criar_lancamento(mes=mes)) == (False, "Informe um Mês válido.")


@pytest.mark.parametrize('ano', ['2019', 2019.0, True, False])
def test_ano_nao_inteiro_invalido(ano):
    assert validar_lancamento(criar_lancamento(ano=ano)) == (False, "Informe um Ano válido.")
