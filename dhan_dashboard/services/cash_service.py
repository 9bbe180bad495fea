"""
Dhan Dashboard - Cash Service

Finds available cash by probing Dhan's balance-like endpoints.
"""

import logging
from typing import Any, Optional

from dhan_dashboard.services.dhan_service import DhanClient, DhanError, dhan_client
from dhan_dashboard.utils.field_resolver import resolve_cash_field

logger = logging.getLogger(__name__)

NESTED_CASH_KEYS = ("data", "result", "funds", "margin")


def extract_cash(payload: Any) -> float:
    """
    Extract available cash from a funds payload.

    Direct cash fields are checked first; otherwise the first truthy
    nested `data`/`result`/`funds`/`margin` object is searched, and for a
    list the first element.

    Returns:
        Positive cash amount, or 0.0 if none was found.
    """
    if isinstance(payload, list):
        return extract_cash(payload[0]) if payload else 0.0
    if not isinstance(payload, dict):
        return 0.0

    direct = resolve_cash_field(payload)
    if direct is not None:
        return float(direct)

    for key in NESTED_CASH_KEYS:
        if payload.get(key):
            return extract_cash(payload[key])

    return 0.0


def _accept_cash(body: Any) -> Optional[float]:
    cash = extract_cash(body)
    return cash if cash > 0 else None


class CashService:
    """Service for resolving available cash."""

    def __init__(self, client: Optional[DhanClient] = None):
        self.client = client or dhan_client

    async def resolve(self) -> float:
        """
        Resolve available cash.

        Returns:
            Cash amount >= 0. 0.0 means cash could not be determined.

        Note:
            Never raises; every failure degrades to 0.0.
        """
        try:
            result = await self.client.first_success(
                self.client.funds_candidates(), _accept_cash
            )
        except DhanError as e:
            logger.warning(f"Cash lookup skipped: {e}")
            return 0.0

        if not result.found:
            logger.warning("Could not fetch cash from any endpoint, showing 0")
            return 0.0

        logger.info(f"Found cash: {result.value} from {result.url}")
        return result.value


# Global service instance
cash_service = CashService()
