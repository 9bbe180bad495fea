"""
Dhan Dashboard - Position Service

Maps raw Dhan holdings (plus optional live quotes) to canonical positions.
No I/O happens here.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from dhan_dashboard.models.portfolio_models import Position
from dhan_dashboard.utils.field_resolver import (
    resolve_symbol, resolve_quantity, resolve_avg_price,
    resolve_holding_last_price, resolve_alternate_last_price,
    is_positive_number,
)

logger = logging.getLogger(__name__)


class PositionService:
    """Service for resolving raw holdings into positions."""

    def symbols_needing_quotes(self, holdings: Sequence[dict]) -> List[str]:
        """
        Symbols whose holding lacks a usable lastTradedPrice.

        An empty result means the quote fetch must be skipped entirely.
        """
        symbols: Dict[str, None] = {}
        for holding in holdings:
            if resolve_holding_last_price(holding) is not None:
                continue
            symbol = resolve_symbol(holding)
            if symbol:
                symbols[symbol] = None
        return list(symbols)

    def resolve_last_price(
        self,
        holding: dict,
        symbol: str,
        avg_price: float,
        quotes: Mapping[str, float]
    ) -> float:
        """
        Resolve the last price for a holding.

        Order: holding lastTradedPrice -> quote by symbol -> quote by
        securityId -> LastTradedPrice/ltp/currentPrice -> avg price.
        """
        price: Optional[float] = resolve_holding_last_price(holding)
        if price is not None:
            return price

        for key in (symbol, holding.get('securityId')):
            if key is not None and is_positive_number(quotes.get(str(key))):
                return quotes[str(key)]

        price = resolve_alternate_last_price(holding)
        if price is not None:
            return price

        return avg_price

    def resolve(
        self,
        holdings: Sequence[dict],
        quotes: Optional[Mapping[str, float]] = None
    ) -> List[Position]:
        """
        Resolve raw holdings into positions, preserving broker order.

        Args:
            holdings: Raw holdings that passed validation
            quotes: symbol -> live price (0 or missing = unknown)

        Returns:
            List of Position.
        """
        quotes = quotes or {}
        positions: List[Position] = []

        for holding in holdings:
            symbol = resolve_symbol(holding) or ''
            qty = resolve_quantity(holding) or 0
            avg_price = resolve_avg_price(holding) or 0.0
            last_price = self.resolve_last_price(holding, symbol, avg_price, quotes)

            position = Position(
                symbol=symbol,
                qty=qty,
                avg_price=avg_price,
                last_price=last_price,
            )
            logger.debug(
                f"Position: {symbol} - Qty: {qty}, Avg: {avg_price}, "
                f"Last: {last_price}, PnL: {position.pnl}"
            )
            positions.append(position)

        return positions


# Global service instance
position_service = PositionService()
