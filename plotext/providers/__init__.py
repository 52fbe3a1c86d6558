"""Market data providers package."""

from .base import BaseProvider, ProviderError, SymbolNotFoundError
from .yahoo import YahooFinanceProvider, get_period_params

__all__ = [
    "BaseProvider",
    "ProviderError",
    "SymbolNotFoundError",
    "YahooFinanceProvider",
    "get_period_params",
]
