"""
Base provider interface for market data sources.

Providers turn a symbol into a list of TOHLCV bars the plotters can draw.
"""

from abc import ABC, abstractmethod

from ..charts.tohlcv import TOHLCV


class ProviderError(Exception):
    """Base exception for provider errors"""
    pass


class SymbolNotFoundError(ProviderError):
    """Raised when symbol doesn't exist"""
    pass


class BaseProvider(ABC):
    """
    Abstract base for market data providers.

    Subclasses must implement:
    - get_historical()
    """

    name: str

    @abstractmethod
    async def get_historical(
        self,
        symbol: str,
        period: str = "1mo",
        interval: str = "1d"
    ) -> list[TOHLCV]:
        """Get historical OHLCV data"""
        pass
