from decimal import Decimal, ROUND_HALF_UP, getcontext
from splitledger.core.config import settings

getcontext().prec = 28
CENTS = Decimal("0.01")

# one currency minor unit
EPSILON = 0.01

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def is_zero(amount: float, epsilon: float = EPSILON) -> bool:
    return abs(amount) < epsilon


def format_currency(amount: float, currency: str | None = None) -> str:
    """
    Format an amount as money, e.g. ``₹1,234.50`` or ``-$12.00``.

    Unknown currency codes are used as a prefix: ``CHF 10.00``.
    """
    code = (currency or settings.CURRENCY).upper()
    value = qround(Decimal(str(amount)))
    sign = "-" if value < 0 else ""
    body = f"{abs(value):,.2f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{body}"
    return f"{sign}{code} {body}"
