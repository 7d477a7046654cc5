"""Fake order sink — records handed-off messages for testing."""

from ordering.handoff.port import HandoffResult, OrderSink


class FakeOrderSink(OrderSink):
    """Order sink that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Order channel unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Order channel unavailable"):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def deliver(self, destination: str, message: str) -> HandoffResult:
        if not self.should_succeed:
            return HandoffResult(delivered=False, failure_reason=self.failure_reason)

        self.sent_messages.append({"to": destination, "body": message})
        return HandoffResult(delivered=True, url=f"fake://{destination}")

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "Order channel unavailable"
