"""
Yahoo Finance provider - no API key required.

Uses yfinance library which scrapes Yahoo Finance.
Limitations: unofficial, may break if Yahoo changes their site.
"""

import asyncio
import logging

import yfinance as yf

from .base import BaseProvider, ProviderError, SymbolNotFoundError
from ..charts.tohlcv import TOHLCV

logger = logging.getLogger(__name__)


# Period/interval mappings for user-friendly input
PERIOD_MAPPINGS = {
    "1d": ("1d", "5m"),      # 1 day, 5-min bars (~78 points)
    "5d": ("5d", "15m"),     # 5 days, 15-min bars (~130 points)
    "1w": ("5d", "15m"),     # 1 week (alias)
    "1m": ("1mo", "1d"),     # 1 month, daily
    "3m": ("3mo", "1d"),     # 3 months, daily
    "6m": ("6mo", "1d"),     # 6 months, daily
    "1y": ("1y", "1wk"),     # 1 year, weekly
    "ytd": ("ytd", "1d"),    # Year to date
    "5y": ("5y", "1mo"),     # 5 years, monthly
}


def get_period_params(period: str) -> tuple[str, str]:
    """
    Convert user-friendly period to provider parameters.

    Returns:
        (period, interval) tuple for get_historical()
    """
    return PERIOD_MAPPINGS.get(period.lower(), ("1mo", "1d"))


class YahooFinanceProvider(BaseProvider):
    name = "yahoo"

    async def get_historical(
        self,
        symbol: str,
        period: str = "1mo",
        interval: str = "1d"
    ) -> list[TOHLCV]:
        """Fetch bars using yfinance (runs sync code in executor)"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, self._get_historical_sync, symbol, period, interval
        )

    def _get_historical_sync(
        self, symbol: str, period: str, interval: str
    ) -> list[TOHLCV]:
        ticker = yf.Ticker(symbol)
        try:
            hist = ticker.history(period=period, interval=interval)
        except Exception as e:
            raise ProviderError(f"Yahoo request for {symbol} failed: {e}") from e

        # Partial rows (halts, the still-open bar) come back as NaN
        hist = hist.dropna(subset=["Open", "High", "Low", "Close", "Volume"])
        if hist.empty:
            raise SymbolNotFoundError(f"No historical data for {symbol}")

        bars = []
        for idx, row in hist.iterrows():
            bars.append(TOHLCV(
                timestamp=idx.to_pydatetime(),
                open=float(row['Open']),
                high=float(row['High']),
                low=float(row['Low']),
                close=float(row['Close']),
                volume=float(row['Volume']),
            ))

        logger.debug(f"Fetched {len(bars)} bars for {symbol} ({period}/{interval})")
        return bars
