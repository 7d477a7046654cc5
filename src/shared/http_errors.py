"""HTTP mapping for domain and persistence errors."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from shared.errors import PersistenceError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"errors": exc.messages})

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        # The change is live in this session but was not saved
        logger.error("Request change not persisted", path=request.url.path, key=exc.key, error=str(exc))
        return JSONResponse(status_code=503, content={"error": str(exc), "key": exc.key, "saved": False})
