"""Presentation helpers."""

from .numeric import safe_float


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(value, currency: str = "USD") -> str:
    """Format an amount en-US style, e.g. $1,234.56 or -$3.00."""
    amount = round(safe_float(value), 2)
    code = (currency or "USD").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
