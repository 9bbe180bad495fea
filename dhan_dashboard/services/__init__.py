# Services

from dhan_dashboard.services.dhan_service import (
    DhanClient, dhan_client,
    DhanError, ConfigurationError, BrokerUnavailable, NoHoldingsFound, QuoteUnavailable,
)
from dhan_dashboard.services.holdings_service import HoldingsService, holdings_service
from dhan_dashboard.services.quote_service import QuoteService, quote_service
from dhan_dashboard.services.position_service import PositionService, position_service
from dhan_dashboard.services.cash_service import CashService, cash_service
from dhan_dashboard.services.portfolio_service import PortfolioService, portfolio_service
from dhan_dashboard.services.equity_series import EquitySeries, equity_series

__all__ = [
    # Broker client
    'DhanClient',
    'dhan_client',
    'DhanError',
    'ConfigurationError',
    'BrokerUnavailable',
    'NoHoldingsFound',
    'QuoteUnavailable',
    # Portfolio
    'HoldingsService',
    'holdings_service',
    'QuoteService',
    'quote_service',
    'PositionService',
    'position_service',
    'CashService',
    'cash_service',
    'PortfolioService',
    'portfolio_service',
    # Equity series
    'EquitySeries',
    'equity_series',
]
