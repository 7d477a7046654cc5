"""Order formatter — cart lines to the order summary handed to the vendor."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from ordering.cart.derivation import CartLine
from shared.money import format_money, to_money


@dataclass(frozen=True)
class OrderSummary:
    summary_text: str
    total: Decimal
    item_count: int


def format_order(lines: Sequence[CartLine], currency_symbol: str = "R$", decimal_separator: str = ",") -> OrderSummary:
    """One ``"{qty}x {name} — {line total}"`` row per line, then a total row.

    Line totals are summed exactly and only the final total is quantized. An
    empty sequence gives a zero total.
    """
    total = to_money(sum((line.line_total for line in lines), Decimal("0")))

    rows = [
        f"{line.quantity}x {line.display_name} — {format_money(line.line_total, currency_symbol, decimal_separator)}"
        for line in lines
    ]
    rows.append(f"Total: {format_money(total, currency_symbol, decimal_separator)}")

    return OrderSummary(
        summary_text="\n".join(rows),
        total=total,
        item_count=sum(line.quantity for line in lines),
    )
