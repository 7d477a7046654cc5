"""Pydantic request/response schemas for the Cart API.

Amounts are returned as decimal strings ("38.00") so clients never see binary
float artifacts. Totals always have two places; unit prices and line totals
keep any sub-cent digits the vendor typed.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AdjustQuantityRequest(BaseModel):
    line_id: str = Field(..., min_length=1)
    delta: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"line_id": "pao-tradicional", "delta": 1},
                {"line_id": "tempero-roca-g", "delta": -1},
            ]
        }
    }


class CheckoutRequest(BaseModel):
    destination: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartLineResponse(BaseModel):
    line_id: str
    product_id: str
    display_name: str
    unit_price: str
    quantity: int
    line_total: str


class CartResponse(BaseModel):
    lines: list[CartLineResponse]
    total: str
    item_count: int


class AdjustQuantityResponse(BaseModel):
    line_id: str
    quantity: int


class OrderSummaryResponse(BaseModel):
    summary_text: str
    total: str
    item_count: int


class CheckoutResponse(BaseModel):
    summary_text: str
    total: str
    message: str
    delivered: bool
    url: str | None = None
    failure_reason: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
