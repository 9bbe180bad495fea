"""
Dhan Dashboard - Field Resolver for Broker Payloads

Dhan responses are not shape-stable: the same value shows up under
different keys depending on endpoint and API version. Every semantic
field is resolved through an ordered list of candidate keys here, and
the first present value of the right type wins.

Both holding validation and position extraction go through these
helpers, so a holding that passes validation always resolves to the
same symbol/quantity/price during extraction.
"""

import math
from typing import Any, Callable, Mapping, Optional, Sequence

# Field-name priority lists (first match wins)
SYMBOL_FIELDS = ("tradingSymbol", "symbol", "securityId", "SecurityId")
QUANTITY_FIELDS = ("totalQty", "quantity", "Quantity", "qty", "availableQty")
AVG_PRICE_FIELDS = ("avgCostPrice", "averagePrice", "AveragePrice", "avgPrice")
LAST_PRICE_FIELDS = ("lastTradedPrice", "LastTradedPrice", "ltp", "currentPrice")
CASH_FIELDS = (
    "availableMargin", "available", "netAvailable", "cash", "cashBalance",
    "availableBalance", "freeCash", "fundBalance", "balance", "availableFunds",
    "netCash", "usableMargin", "availableMarginAmount", "freeMargin", "limit",
)
QUOTE_PRICE_FIELDS = ("lastPrice", "ltp", "price", "close", "ltpPrice")

# The holding's own LTP field; the rest of LAST_PRICE_FIELDS are alternates
# consulted only after live quotes.
PRIMARY_LAST_PRICE_FIELD = LAST_PRICE_FIELDS[0]
ALTERNATE_LAST_PRICE_FIELDS = LAST_PRICE_FIELDS[1:]


def is_number(value: Any) -> bool:
    """True for finite int/float values (bool, NaN and infinities excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_positive_number(value: Any) -> bool:
    return is_number(value) and value > 0


def is_non_negative_number(value: Any) -> bool:
    return is_number(value) and value >= 0


def is_symbol(value: Any) -> bool:
    """True for a non-empty string or a numeric security id."""
    if isinstance(value, str):
        return bool(value.strip())
    return is_number(value)


def first_match(
    record: Any,
    keys: Sequence[str],
    accept: Callable[[Any], bool],
) -> Optional[Any]:
    """
    Return the value of the first key in `keys` whose value passes `accept`.

    Args:
        record: Payload mapping (anything else resolves to None)
        keys: Candidate field names in priority order
        accept: Type/value predicate for the semantic field

    Returns:
        Matching value, or None if no candidate qualifies.
    """
    if not isinstance(record, Mapping):
        return None
    for key in keys:
        if key in record and accept(record[key]):
            return record[key]
    return None


def resolve_symbol(record: Any) -> Optional[str]:
    value = first_match(record, SYMBOL_FIELDS, is_symbol)
    if value is None:
        return None
    return value.strip() if isinstance(value, str) else str(value)


def resolve_quantity(record: Any) -> Optional[float]:
    return first_match(record, QUANTITY_FIELDS, is_number)


def resolve_avg_price(record: Any) -> Optional[float]:
    return first_match(record, AVG_PRICE_FIELDS, is_non_negative_number)


def resolve_holding_last_price(record: Any) -> Optional[float]:
    """Holding's own last-traded price, if positive."""
    return first_match(record, (PRIMARY_LAST_PRICE_FIELD,), is_positive_number)


def resolve_alternate_last_price(record: Any) -> Optional[float]:
    """Alternate last-price-like fields, if any is positive."""
    return first_match(record, ALTERNATE_LAST_PRICE_FIELDS, is_positive_number)


def resolve_cash_field(record: Any) -> Optional[float]:
    return first_match(record, CASH_FIELDS, is_positive_number)


def resolve_quote_price(record: Any) -> Optional[float]:
    return first_match(record, QUOTE_PRICE_FIELDS, is_positive_number)


def is_valid_holding(record: Any) -> bool:
    """A holding needs a symbol, a numeric quantity and a numeric avg price."""
    return (
        resolve_symbol(record) is not None
        and resolve_quantity(record) is not None
        and resolve_avg_price(record) is not None
    )
