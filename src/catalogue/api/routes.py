"""FastAPI endpoints for the Catalogue."""

from fastapi import APIRouter

from catalogue.api.schemas import (
    CategoryGroupResponse,
    ProductResponse,
    StatusResponse,
    UpsertProductRequest,
    VariantResponse,
)
from catalogue.product.product import Product
from storefront import get_storefront

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description or "",
        price=product.price,
        display_price=product.display_price,
        category=product.category,
        image_url=product.image_url,
        variants=[VariantResponse(id=str(v.id), label=v.label, price=v.price) for v in product.variants],
    )


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [to_response(p) for p in get_storefront().catalog.list()]


@product_router.put("", response_model=ProductResponse)
async def upsert_product(body: UpsertProductRequest) -> ProductResponse:
    payload = body.model_dump(exclude_none=True)
    if "variants" in payload:
        payload["variants"] = [{k: v for k, v in variant.items() if v is not None} for variant in payload["variants"]]
    product = get_storefront().upsert_product(payload)
    return to_response(product)


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    get_storefront().remove_product(product_id)
    return StatusResponse()


@product_router.post("/reset", response_model=StatusResponse)
async def reset_catalog() -> StatusResponse:
    get_storefront().reset_catalog()
    return StatusResponse()


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryGroupResponse])
async def list_categories() -> list[CategoryGroupResponse]:
    return [
        CategoryGroupResponse(category=group.category, products=[to_response(p) for p in group.products])
        for group in get_storefront().categories()
    ]
