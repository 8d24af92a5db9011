"""
Modelos do app finance.

Localização: finance/models/
"""
from .lancamento_model import LancamentoModel, validar_lancamento

__all__ = ['LancamentoModel', 'validar_lancamento']
