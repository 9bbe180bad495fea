"""
Dhan Dashboard - API Routes

JSON endpoints consumed by the dashboard frontend.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from dhan_dashboard.services.dhan_service import ConfigurationError, QuoteUnavailable
from dhan_dashboard.services.portfolio_service import PortfolioService, portfolio_service
from dhan_dashboard.services.quote_service import QuoteService, quote_service
from dhan_dashboard.services.equity_series import EquitySeries, equity_series
from dhan_dashboard.utils.date_utils import now_ms
from dhan_dashboard.api.schemas import PortfolioResponse, EquityPointData, QuoteResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================
# Dependencies
# ============================================================

def get_portfolio_service() -> PortfolioService:
    return portfolio_service


def get_quote_service() -> QuoteService:
    return quote_service


def get_equity_series() -> EquitySeries:
    return equity_series


# ============================================================
# Portfolio Endpoint
# ============================================================

@router.get("/portfolio", response_model=PortfolioResponse, response_model_exclude_none=True)
async def get_portfolio(
    service: PortfolioService = Depends(get_portfolio_service)
):
    """
    Get the current portfolio snapshot.

    Falls back to mock data (source="mock") when Dhan is unavailable.
    """
    logger.info("Portfolio request received")
    snapshot = await service.assemble()
    return snapshot.to_dict()


# ============================================================
# Equity Series Endpoint
# ============================================================

@router.get("/equity-series", response_model=List[EquityPointData])
async def get_equity_series_points(
    service: PortfolioService = Depends(get_portfolio_service),
    series: EquitySeries = Depends(get_equity_series)
):
    """
    Record the current equity and return the series, oldest first.
    """
    snapshot = await service.assemble()
    series.observe(snapshot.equity, now_ms())

    points = series.read()
    logger.info(f"Returning {len(points)} equity points, latest equity: {snapshot.equity:,.2f}")
    return [p.to_dict() for p in points]


# ============================================================
# Quote Endpoint
# ============================================================

@router.get("/quote", response_model=QuoteResponse)
async def get_quote(
    symbol: Optional[str] = Query(None, description="Trading symbol"),
    service: QuoteService = Depends(get_quote_service)
):
    """Get a live quote for one symbol."""
    if not symbol or not symbol.strip():
        raise HTTPException(400, "Symbol parameter required")

    try:
        quote = await service.get_quote(symbol.strip())
    except ConfigurationError as e:
        raise HTTPException(500, str(e))
    except QuoteUnavailable:
        raise HTTPException(404, "Quote not found")

    return QuoteResponse(symbol=quote.symbol, price=quote.price, data=quote.data)
