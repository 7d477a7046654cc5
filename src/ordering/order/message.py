"""Wraps the order summary in the greeting sent to the vendor."""

from ordering.order.formatter import OrderSummary


def compose_order_message(summary: OrderSummary, shop_name: str) -> str:
    return (
        f"Olá! Gostaria de fazer um pedido no *{shop_name}*:\n\n"
        f"{summary.summary_text}\n\n"
        "_Aguardo seu retorno para combinarmos a entrega e o pagamento!_"
    )
