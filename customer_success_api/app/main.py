"""
Main entrypoint for the Customer Success Platform API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn customer_success_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import router as api_router
from .services.churn_service import ChurnModel
from .services.customer_service import CustomerService, CustomerStore

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer 400 for bodies that are not JSON at all.

    Schema violations keep FastAPI's default 422 response.
    """
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Malformed JSON body"},
        )
    return await request_validation_exception_handler(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback when the exception is re-raised.
    logger.error("Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(
    store: Optional[CustomerStore] = None,
    churn_model: Optional[ChurnModel] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[CustomerStore]
        Customer store to serve.  A fresh empty store is created when
        omitted.
    churn_model : Optional[ChurnModel]
        Placeholder churn network.  When omitted one is created with
        random weights, seeded from ``settings.churn_model_seed``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    store = store if store is not None else CustomerStore()
    app.state.customer_store = store
    app.state.customer_service = CustomerService(store)
    app.state.churn_model = churn_model or ChurnModel.create(settings.churn_model_seed)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
