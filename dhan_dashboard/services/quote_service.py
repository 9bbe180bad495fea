"""
Dhan Dashboard - Quote Service

Live price lookups, one symbol at a time or fanned out concurrently.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from dhan_dashboard.services.dhan_service import (
    DhanClient, QuoteUnavailable, dhan_client
)
from dhan_dashboard.utils.field_resolver import resolve_quote_price

logger = logging.getLogger(__name__)


@dataclass
class Quote:
    """A resolved quote with the raw payload it came from."""
    symbol: str
    price: float
    data: Dict[str, Any] = field(default_factory=dict)


def _accept_quote(body: Any) -> Optional[Dict[str, Any]]:
    if resolve_quote_price(body) is None:
        return None
    return body


class QuoteService:
    """Service for fetching live quotes from Dhan."""

    def __init__(self, client: Optional[DhanClient] = None):
        self.client = client or dhan_client

    async def get_quote(self, symbol: str) -> Quote:
        """
        Fetch a quote for one symbol.

        Raises:
            ConfigurationError: If no access token is configured.
            QuoteUnavailable: If no quote endpoint returned a positive price.
        """
        result = await self.client.first_success(
            self.client.quote_candidates(symbol), _accept_quote
        )
        if not result.found:
            raise QuoteUnavailable(symbol)

        price = resolve_quote_price(result.value)
        logger.info(f"Quote {symbol}: {price}")
        return Quote(symbol=symbol, price=float(price), data=result.value)

    async def fetch_quotes(self, symbols: Iterable[str]) -> Dict[str, float]:
        """
        Fetch quotes for several symbols concurrently.

        Args:
            symbols: Symbols to price (duplicates are ignored)

        Returns:
            symbol -> price; 0.0 means the price is unknown.

        Note:
            A failure for one symbol never affects the others.
        """
        unique = list(dict.fromkeys(symbols))
        if not unique:
            return {}

        logger.info(f"Fetching quotes for {len(unique)} symbols: {unique}")
        results = await asyncio.gather(
            *(self.get_quote(s) for s in unique),
            return_exceptions=True
        )

        quotes: Dict[str, float] = {}
        for symbol, outcome in zip(unique, results):
            if isinstance(outcome, Quote):
                quotes[symbol] = outcome.price
            else:
                logger.warning(f"No price found for {symbol}: {outcome}")
                quotes[symbol] = 0.0

        found = sum(1 for p in quotes.values() if p > 0)
        logger.info(f"Fetched {found}/{len(unique)} quotes")
        return quotes


# Global service instance
quote_service = QuoteService()
