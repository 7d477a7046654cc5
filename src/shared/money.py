"""Price parsing, exact money arithmetic and display formatting."""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENTS = Decimal("0.01")
MAX_PRICE = Decimal("1000000")


def parse_price(raw, field: str = "price") -> float:
    """Parse a price typed by the vendor ("12,50", "12.5", 12.5) into a float.

    Raises ValidationError when the value is missing, not a number, negative
    or above MAX_PRICE.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError({field: ["Price is required"]})
    if isinstance(raw, bool):
        raise ValidationError({field: ["Price must be a number"]})

    text = raw.strip().replace(",", ".") if isinstance(raw, str) else str(raw)
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError({field: [f"Price '{raw}' is not a number"]}) from None

    if not value.is_finite():
        raise ValidationError({field: [f"Price '{raw}' is not a number"]})
    if value < 0:
        raise ValidationError({field: ["Price must not be negative"]})
    # Decimal accepts magnitudes a float cannot hold ("1e400")
    if value > MAX_PRICE:
        raise ValidationError({field: [f"Price must not exceed {MAX_PRICE}"]})
    return float(value)


def to_decimal(value) -> Decimal:
    """Exact Decimal for a stored price.

    Floats go through ``str`` so 8.5 becomes Decimal("8.5") rather than the
    binary expansion of 8.5.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Round an amount half-up to cents, for totals and display."""
    amount = to_decimal(value)
    # quantize fails when the result has more digits than the context precision
    context = Context(prec=max(28, amount.adjusted() + 4))
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP, context=context)


def format_money(amount, currency_symbol: str = "R$", decimal_separator: str = ",") -> str:
    """Render an amount as e.g. ``R$ 38,00``."""
    text = f"{to_money(amount):.2f}"
    if decimal_separator != ".":
        text = text.replace(".", decimal_separator)
    return f"{currency_symbol} {text}" if currency_symbol else text
