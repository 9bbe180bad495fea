"""
Dhan Dashboard - Portfolio Models

Canonical position, snapshot and equity point types. Derived values
(P&L, equity) are properties so they can never drift from their inputs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class DataSource(str, Enum):
    """Where a portfolio snapshot came from."""
    DHAN = "dhan"
    MOCK = "mock"


@dataclass(frozen=True)
class Position:
    """Normalised view of one holding, marked to the last known price."""
    symbol: str
    qty: float
    avg_price: float
    last_price: float

    @property
    def pnl(self) -> float:
        return (self.last_price - self.avg_price) * self.qty

    @property
    def market_value(self) -> float:
        return self.last_price * self.qty

    def to_dict(self) -> Dict[str, Any]:
        return {
            'symbol': self.symbol,
            'qty': self.qty,
            'avgPrice': self.avg_price,
            'lastPrice': self.last_price,
            'pnl': self.pnl,
        }


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Point-in-time view of cash plus positions."""
    cash: float
    positions: Tuple[Position, ...]
    source: DataSource
    message: Optional[str] = None

    @property
    def equity(self) -> float:
        """Cash plus mark-to-market value of all positions."""
        return self.cash + sum(p.market_value for p in self.positions)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'cash': self.cash,
            'equity': self.equity,
            'positions': [p.to_dict() for p in self.positions],
            'source': self.source.value,
        }
        if self.message:
            data['message'] = self.message
        return data


@dataclass(frozen=True)
class EquityPoint:
    """One sample of total account equity."""
    t: int  # epoch millis
    equity: float

    def to_dict(self) -> Dict[str, Any]:
        return {'t': self.t, 'equity': self.equity}
