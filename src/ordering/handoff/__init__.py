"""Order sink registry — pluggable outbound order channel.

Uses the WhatsApp deep-link sink by default; ORDER_SINK_ADAPTER=fake selects
the recording sink.
"""

from ordering.handoff.port import HandoffResult, OrderSink
from shared.settings import settings

_sink_instance: OrderSink | None = None


def get_order_sink() -> OrderSink:
    """Return the configured order sink (singleton)."""
    global _sink_instance
    if _sink_instance is None:
        adapter = settings.order_sink_adapter
        if adapter == "whatsapp":
            from ordering.handoff.whatsapp_adapter import WhatsAppLinkSink

            _sink_instance = WhatsAppLinkSink()
        elif adapter == "fake":
            from ordering.handoff.fake_adapter import FakeOrderSink

            _sink_instance = FakeOrderSink()
        else:
            raise ValueError(f"Unknown order sink adapter: {adapter}")
    return _sink_instance


def set_order_sink(sink: OrderSink) -> None:
    """Override the active order sink (useful for tests)."""
    global _sink_instance
    _sink_instance = sink


def reset_order_sink() -> None:
    """Reset the order sink singleton (useful for testing)."""
    global _sink_instance
    _sink_instance = None


__all__ = ["HandoffResult", "OrderSink", "get_order_sink", "reset_order_sink", "set_order_sink"]
