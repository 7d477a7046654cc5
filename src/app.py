"""Pão da Roça storefront FastAPI application.

Serves the catalog, the category browse view, the cart and the checkout
handoff for a single local session.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
from catalogue.domain import catalogue  # noqa: E402
from catalogue.utils.logging import add_context, clear_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

catalogue.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Pão da Roça Storefront API",
    description="Catalog, cart and order handoff for a home bakery",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the catalogue domain context and bind the request to log events."""
    add_context(method=request.method, path=request.url.path)
    try:
        with catalogue.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import category_router, product_router  # noqa: E402
from ordering.api import cart_router  # noqa: E402
from shared.http_errors import register_error_handlers  # noqa: E402

app.include_router(product_router)
app.include_router(category_router)
app.include_router(cart_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    from storefront import get_storefront

    storefront = get_storefront()
    return JSONResponse(
        content={
            "status": "ok",
            "domain": catalogue.name,
            "products": len(storefront.catalog.snapshot()),
            "cart_entries": len(storefront.cart.snapshot()),
        }
    )
