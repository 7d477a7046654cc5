"""WhatsApp deep-link order sink."""

import re
from urllib.parse import quote

import structlog

from ordering.handoff.port import HandoffResult, OrderSink

logger = structlog.get_logger(__name__)

WA_ME_URL = "https://wa.me/{number}?text={text}"


def build_whatsapp_link(number: str, message: str) -> str:
    digits = re.sub(r"\D", "", number)
    # Only unreserved marks and !*'() stay unescaped
    return WA_ME_URL.format(number=digits, text=quote(message, safe="!*'()"))


class WhatsAppLinkSink(OrderSink):
    def deliver(self, destination: str, message: str) -> HandoffResult:
        if not re.sub(r"\D", "", destination or ""):
            return HandoffResult(delivered=False, failure_reason="Destination has no phone number")

        url = build_whatsapp_link(destination, message)
        logger.info("Order handoff link built", destination=destination, length=len(url))
        return HandoffResult(delivered=True, url=url)
