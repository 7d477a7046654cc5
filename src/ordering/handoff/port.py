"""Order sink port (abstract interface).

The storefront's only job is to produce a correctly formatted, correctly
totaled message; how it reaches the vendor is up to the adapter.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HandoffResult:
    """Result of handing an order message to the sink."""

    delivered: bool
    url: str | None = None
    failure_reason: str | None = None


class OrderSink(ABC):
    """Abstract outbound order channel."""

    @abstractmethod
    def deliver(self, destination: str, message: str) -> HandoffResult:
        """Hand the pre-formatted message to ``destination``."""
        ...
