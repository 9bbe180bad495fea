"""
Dhan Dashboard - Dhan API Client Service

Dhan's REST surface is not contractually stable for our purposes, so
every read is expressed as an ordered list of endpoint candidates that
are tried one after another until one yields something usable.
"""

import httpx
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence
from urllib.parse import quote

from dhan_dashboard.config import settings

logger = logging.getLogger(__name__)

_UNSET = object()


class DhanError(Exception):
    """Base exception for Dhan data retrieval errors."""
    pass


class ConfigurationError(DhanError):
    """Access token is not configured."""
    pass


class BrokerUnavailable(DhanError):
    """Every endpoint candidate failed at the HTTP or decoding level."""
    pass


class NoHoldingsFound(DhanError):
    """Responses were decoded but none contained a valid holding."""
    pass


class QuoteUnavailable(DhanError):
    """No quote endpoint returned a usable price for a symbol."""

    def __init__(self, symbol: str, message: Optional[str] = None):
        self.symbol = symbol
        super().__init__(message or f"No quote available for {symbol}")


@dataclass
class EndpointCandidate:
    """One request variant: URL plus auth headers."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class CascadeResult:
    """Outcome of walking a candidate list."""
    value: Any = None
    url: Optional[str] = None
    responded: int = 0  # candidates that returned a decodable JSON body

    @property
    def found(self) -> bool:
        return self.url is not None


HOLDINGS_PATHS = [
    ("/v2/portfolio", "access-token"),
    ("/v2/holdings", "access-token"),
    ("/portfolio", "access-token"),
    ("/holdings", "bearer"),
]

FUNDS_PATHS = [
    "/v2/limits",
    "/v2/user/fund",
    "/v2/user/balance",
    "/v2/user/margin",
    "/v2/funds",
    "/v2/margin",
    "/v2/balance",
    "/v2/fund",
    "/limits",
    "/funds",
    "/margin",
    "/balance",
    "/fund",
    "/v2/account",
    "/account",
]

QUOTE_PATHS = [
    "/v2/quote/{symbol}",
    "/v2/quotes?symbol={symbol}",
    "/quote/{symbol}",
]


class DhanClient:
    """Client for the Dhan REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Any = _UNSET,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.dhan_api_base).rstrip("/")
        self.access_token = access_token if access_token is not None else settings.dhan_access_token
        self.timeout = settings.dhan_timeout if timeout is _UNSET else timeout
        self.transport = transport

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    def require_token(self) -> str:
        """
        Return the access token.

        Raises:
            ConfigurationError: If DHAN_ACCESS_TOKEN is not configured.
        """
        if not self.access_token:
            raise ConfigurationError("DHAN_ACCESS_TOKEN not configured")
        return self.access_token

    def _auth_headers(self, scheme: str) -> Dict[str, str]:
        token = self.require_token()
        if scheme == "bearer":
            return {"Authorization": f"Bearer {token}"}
        return {"Access-Token": token}

    def holdings_candidates(self) -> List[EndpointCandidate]:
        return [
            EndpointCandidate(f"{self.base_url}{path}", self._auth_headers(scheme))
            for path, scheme in HOLDINGS_PATHS
        ]

    def funds_candidates(self) -> List[EndpointCandidate]:
        headers = self._auth_headers("access-token")
        return [EndpointCandidate(f"{self.base_url}{path}", headers) for path in FUNDS_PATHS]

    def quote_candidates(self, symbol: str) -> List[EndpointCandidate]:
        headers = self._auth_headers("access-token")
        encoded = quote(symbol, safe="")
        return [
            EndpointCandidate(f"{self.base_url}{path.format(symbol=encoded)}", headers)
            for path in QUOTE_PATHS
        ]

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    async def first_success(
        self,
        candidates: Sequence[EndpointCandidate],
        accept: Callable[[Any], Any]
    ) -> CascadeResult:
        """
        Try candidates sequentially; stop at the first accepted body.

        Args:
            candidates: Endpoint variants in priority order
            accept: Maps a decoded JSON body to a result, or None to reject it

        Returns:
            CascadeResult; `found` is False if no candidate was accepted.

        Note:
            Failed candidates are logged and skipped, never retried.
        """
        result = CascadeResult()

        async with self._client() as client:
            for candidate in candidates:
                try:
                    response = await client.get(candidate.url, headers=candidate.headers)
                except httpx.HTTPError as e:
                    logger.warning(f"Dhan request error for {candidate.url}: {e}")
                    continue

                logger.debug(f"Dhan response status {response.status_code} for {candidate.url}")

                if not response.is_success:
                    logger.warning(
                        f"Dhan endpoint {candidate.url} failed: "
                        f"{response.status_code} - {response.text[:200]}"
                    )
                    continue

                try:
                    body = response.json()
                except ValueError as e:
                    logger.warning(f"Dhan endpoint {candidate.url} returned non-JSON body: {e}")
                    continue

                result.responded += 1
                value = accept(body)
                if value is not None:
                    result.value = value
                    result.url = candidate.url
                    return result

                logger.debug(f"Dhan endpoint {candidate.url} body rejected: {str(body)[:500]}")

        return result


# Global client instance
dhan_client = DhanClient()
