"""
Dhan Dashboard - Models
"""

from dhan_dashboard.models.portfolio_models import (
    DataSource,
    Position,
    PortfolioSnapshot,
    EquityPoint,
)

__all__ = [
    'DataSource',
    'Position',
    'PortfolioSnapshot',
    'EquityPoint',
]
