"""
Ticker normalization between the two upstream providers.

The quote provider expects a market-suffixed symbol ('2330.TW'); the
institutional-flow provider expects the bare numeric identifier ('2330').
"""

from stockboard.domain.errors import InvalidInputError

MARKET_SUFFIXES = (".TWO", ".TW")


def require_symbol(symbol: str | None) -> str:
    if symbol is None or not symbol.strip():
        raise InvalidInputError("Missing symbol parameter")
    return symbol.strip()


def to_quote_symbol(symbol: str, market_suffix: str = ".TW") -> str:
    """Uppercase *symbol* and append *market_suffix* to purely numeric codes."""
    normalized = require_symbol(symbol).upper()
    if normalized.isdigit():
        return normalized + market_suffix.upper()
    return normalized


def to_stock_id(symbol: str) -> str:
    """Strip a Taiwan market suffix: '2330.TW' -> '2330', '6488.TWO' -> '6488'."""
    normalized = require_symbol(symbol).upper()
    for suffix in MARKET_SUFFIXES:
        if normalized.endswith(suffix):
            return normalized[: -len(suffix)]
    return normalized
