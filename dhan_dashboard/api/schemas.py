"""
Dhan Dashboard - Pydantic Schemas for API
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class PositionData(BaseModel):
    """Individual position."""
    symbol: str
    qty: float
    avgPrice: float = Field(..., ge=0)
    lastPrice: float = Field(..., ge=0)
    pnl: float


class PortfolioResponse(BaseModel):
    """Portfolio snapshot."""
    cash: float = Field(..., ge=0)
    equity: float
    positions: List[PositionData]
    source: str = Field(..., pattern="^(dhan|mock)$")
    message: Optional[str] = None


class EquityPointData(BaseModel):
    """One equity series sample."""
    t: int
    equity: float


class QuoteResponse(BaseModel):
    """Live quote for one symbol."""
    symbol: str
    price: float
    data: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str
    service: str
