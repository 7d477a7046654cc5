"""FastAPI endpoints for the cart and checkout."""

from decimal import Decimal

from fastapi import APIRouter

from ordering.api.schemas import (
    AdjustQuantityRequest,
    AdjustQuantityResponse,
    CartLineResponse,
    CartResponse,
    CheckoutRequest,
    CheckoutResponse,
    OrderSummaryResponse,
    StatusResponse,
)
from shared.money import to_money
from storefront import get_storefront

cart_router = APIRouter(prefix="/cart", tags=["cart"])


def _amount_text(amount: Decimal) -> str:
    """Two places, or more when a price has sub-cent digits."""
    if amount.as_tuple().exponent < -2:
        return str(amount)
    return str(to_money(amount))


@cart_router.get("", response_model=CartResponse)
async def get_cart() -> CartResponse:
    storefront = get_storefront()
    lines = storefront.cart_lines()
    summary = storefront.order_summary()
    return CartResponse(
        lines=[
            CartLineResponse(
                line_id=line.line_id,
                product_id=line.product_id,
                display_name=line.display_name,
                unit_price=_amount_text(line.unit_price),
                quantity=line.quantity,
                line_total=_amount_text(line.line_total),
            )
            for line in lines
        ],
        total=str(summary.total),
        item_count=summary.item_count,
    )


@cart_router.post("/adjust", response_model=AdjustQuantityResponse)
async def adjust_quantity(body: AdjustQuantityRequest) -> AdjustQuantityResponse:
    quantity = get_storefront().adjust(body.line_id, body.delta)
    return AdjustQuantityResponse(line_id=body.line_id, quantity=quantity)


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart() -> StatusResponse:
    get_storefront().clear_cart()
    return StatusResponse()


@cart_router.get("/summary", response_model=OrderSummaryResponse)
async def get_order_summary() -> OrderSummaryResponse:
    summary = get_storefront().order_summary()
    return OrderSummaryResponse(summary_text=summary.summary_text, total=str(summary.total), item_count=summary.item_count)


@cart_router.post("/checkout", response_model=CheckoutResponse)
async def checkout(body: CheckoutRequest) -> CheckoutResponse:
    result = get_storefront().checkout(destination=body.destination)
    return CheckoutResponse(
        summary_text=result.summary.summary_text,
        total=str(result.summary.total),
        message=result.message,
        delivered=result.handoff.delivered,
        url=result.handoff.url,
        failure_reason=result.handoff.failure_reason,
    )
