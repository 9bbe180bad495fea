"""
Dhan Dashboard - Portfolio Service

Assembles holdings, quotes and cash into one portfolio snapshot. The
dashboard must always render something, so any Dhan failure is handed
to a failure policy (mock data by default) instead of propagating.
"""

import logging
from typing import Callable, Optional

from dhan_dashboard.models.portfolio_models import DataSource, PortfolioSnapshot, Position
from dhan_dashboard.services.dhan_service import DhanError
from dhan_dashboard.services.holdings_service import HoldingsService, holdings_service
from dhan_dashboard.services.quote_service import QuoteService, quote_service
from dhan_dashboard.services.position_service import PositionService, position_service
from dhan_dashboard.services.cash_service import CashService, cash_service

logger = logging.getLogger(__name__)

MOCK_CASH = 10000.0
MOCK_POSITIONS = (
    Position(symbol="AAPL", qty=20, avg_price=187.5, last_price=189.1),
    Position(symbol="MSFT", qty=10, avg_price=414.2, last_price=418.7),
    Position(symbol="NVDA", qty=4, avg_price=110.0, last_price=114.3),
)

FailurePolicy = Callable[[DhanError], PortfolioSnapshot]


def use_mock_snapshot(error: DhanError) -> PortfolioSnapshot:
    """Default failure policy: serve the fixed mock portfolio."""
    return PortfolioSnapshot(
        cash=MOCK_CASH,
        positions=MOCK_POSITIONS,
        source=DataSource.MOCK,
        message=f"Using mock data - {error}",
    )


class PortfolioService:
    """Service for assembling portfolio snapshots."""

    def __init__(
        self,
        holdings: Optional[HoldingsService] = None,
        quotes: Optional[QuoteService] = None,
        positions: Optional[PositionService] = None,
        cash: Optional[CashService] = None,
        on_failure: FailurePolicy = use_mock_snapshot
    ):
        self.holdings = holdings or holdings_service
        self.quotes = quotes or quote_service
        self.positions = positions or position_service
        self.cash = cash or cash_service
        self.on_failure = on_failure

    async def assemble(self) -> PortfolioSnapshot:
        """
        Build a fresh portfolio snapshot.

        Returns:
            Snapshot tagged `dhan` on success, otherwise whatever the
            failure policy returns.
        """
        try:
            raw_holdings = await self.holdings.fetch_holdings()
        except DhanError as e:
            logger.warning(f"Dhan holdings unavailable, falling back: {e}")
            return self.on_failure(e)

        quotes = {}
        missing = self.positions.symbols_needing_quotes(raw_holdings)
        if missing:
            logger.info(f"Some holdings missing prices, fetching quotes for: {missing}")
            quotes = await self.quotes.fetch_quotes(missing)
        else:
            logger.info("All holdings have lastTradedPrice, skipping quote API")

        positions = self.positions.resolve(raw_holdings, quotes)
        cash = await self.cash.resolve()

        snapshot = PortfolioSnapshot(
            cash=cash,
            positions=tuple(positions),
            source=DataSource.DHAN,
        )
        logger.info(
            f"Assembled Dhan snapshot: {len(positions)} positions, "
            f"cash={cash:,.2f}, equity={snapshot.equity:,.2f}"
        )
        return snapshot


# Global service instance
portfolio_service = PortfolioService()
