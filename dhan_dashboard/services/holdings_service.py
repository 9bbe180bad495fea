"""
Dhan Dashboard - Holdings Service

Fetches holdings from Dhan and flattens whatever response shape comes
back into a plain list of raw holding dicts.
"""

import logging
import re
from typing import Any, List, Optional

from dhan_dashboard.services.dhan_service import (
    DhanClient, BrokerUnavailable, NoHoldingsFound, dhan_client
)
from dhan_dashboard.utils.field_resolver import is_valid_holding

logger = logging.getLogger(__name__)

NUMERIC_KEY = re.compile(r'^\d+$')


def extract_holdings(body: Any) -> List[Any]:
    """
    Flatten a holdings response body to a list.

    Shapes recognised, in priority order:
    - [...]
    - {"holdings": [...]}
    - {"data": [...]}
    - {"data": {"holdings": [...]}}
    - {"0": {...}, "1": {...}}  (map-as-array)

    Returns:
        List of candidate holdings (not yet validated); empty if the shape
        is not recognised.
    """
    if isinstance(body, list):
        return list(body)
    if not isinstance(body, dict):
        return []

    if isinstance(body.get('holdings'), list):
        return list(body['holdings'])

    data = body.get('data')
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict) and isinstance(data.get('holdings'), list):
        return list(data['holdings'])

    numeric_keys = sorted((k for k in body if NUMERIC_KEY.match(k)), key=int)
    if numeric_keys:
        items = [body[k] for k in numeric_keys if isinstance(body[k], dict)]
        logger.debug(f"Found {len(items)} holdings in numeric keys format")
        return items

    return []


def valid_holdings(body: Any) -> Optional[List[dict]]:
    """Accept a body only if it yields at least one valid holding."""
    holdings = [h for h in extract_holdings(body) if is_valid_holding(h)]
    return holdings or None


class HoldingsService:
    """Service for fetching raw holdings from Dhan."""

    def __init__(self, client: Optional[DhanClient] = None):
        self.client = client or dhan_client

    async def fetch_holdings(self) -> List[dict]:
        """
        Fetch raw holdings, trying each holdings endpoint in turn.

        Returns:
            Non-empty list of valid raw holdings, in broker order.

        Raises:
            ConfigurationError: If no access token is configured.
            BrokerUnavailable: If no endpoint returned a decodable response.
            NoHoldingsFound: If responses decoded but held no valid holdings.
        """
        candidates = self.client.holdings_candidates()
        result = await self.client.first_success(candidates, valid_holdings)

        if result.found:
            holdings = result.value
            logger.info(f"Found {len(holdings)} valid holdings from {result.url}")
            logger.debug(f"First holding: {holdings[0]}")
            return holdings

        if result.responded == 0:
            raise BrokerUnavailable(
                f"All {len(candidates)} Dhan holdings endpoints failed"
            )
        raise NoHoldingsFound(
            f"No valid holdings in {result.responded} Dhan response(s)"
        )


# Global service instance
holdings_service = HoldingsService()
