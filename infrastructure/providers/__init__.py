from .base import ExchangeRateProvider
from .neofinancial import NeoFinancialProvider

__all__ = ['ExchangeRateProvider', 'NeoFinancialProvider']
