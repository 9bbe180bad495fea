"""
Test Data - Dhan response shapes seen across holdings/funds/quote endpoints
"""

# Holdings in Dhan's v2 format (tradingSymbol + totalQty + avgCostPrice)
DHAN_HOLDINGS = [
    {
        "exchange": "NSE",
        "tradingSymbol": "TCS",
        "securityId": "11536",
        "isin": "INE467B01029",
        "totalQty": 5,
        "dpQty": 5,
        "t1Qty": 0,
        "availableQty": 5,
        "collateralQty": 0,
        "avgCostPrice": 3000,
        "lastTradedPrice": 3100,
    },
    {
        "exchange": "NSE",
        "tradingSymbol": "INFY",
        "securityId": "1594",
        "isin": "INE009A01021",
        "totalQty": 12,
        "dpQty": 12,
        "t1Qty": 0,
        "availableQty": 12,
        "collateralQty": 0,
        "avgCostPrice": 1450.5,
        "lastTradedPrice": 1502.25,
    },
]

# Holdings without lastTradedPrice (need live quotes)
UNPRICED_HOLDINGS = [
    {"tradingSymbol": "HDFCBANK", "securityId": "1333", "totalQty": 10, "avgCostPrice": 1600.0},
    {"symbol": "RELIANCE", "quantity": 3, "averagePrice": 2400.0, "ltp": 2450.0},
]

# Entries that must be rejected by the validity filter
INVALID_HOLDINGS = [
    {"tradingSymbol": "", "totalQty": 1, "avgCostPrice": 10},
    {"tradingSymbol": "NOQTY", "avgCostPrice": 10},
    {"tradingSymbol": "STRQTY", "totalQty": "5", "avgCostPrice": 10},
    {"tradingSymbol": "NOAVG", "totalQty": 1},
    "not-a-holding",
    None,
]

# Legacy map-as-array encoding
NUMERIC_KEY_HOLDINGS = {
    "1": {"tradingSymbol": "INFY", "totalQty": 12, "avgCostPrice": 1450.5},
    "0": {"tradingSymbol": "TCS", "totalQty": 5, "avgCostPrice": 3000},
}

# Funds responses
FUNDS_FLAT = {"dhanClientId": "1000000001", "availabelBalance": 0, "availableBalance": 25000.5}
FUNDS_NESTED = {"status": "success", "data": {"funds": {"netCash": 18000.0}}}
FUNDS_ZERO = {"availableBalance": 0, "sodLimit": 0}

# Quote response
QUOTE_RESPONSE = {"symbol": "HDFCBANK", "lastPrice": 1655.4, "open": 1640.0, "close": 1648.0}
