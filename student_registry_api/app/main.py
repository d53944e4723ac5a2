"""
Main entrypoint for the Student Registry API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn student_registry_api.app.main:app --reload

Errors raised by the service layer are turned into JSON bodies of the
form ``{"error": "<message>"}`` by the exception handlers registered
here.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import SeedFetchError, StudentValidationError
from .core.logging_config import setup_logging
from .services.seed_client import SeedClient
from .services.student_service import StudentStore

STATIC_PATH = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map service and request errors onto ``{"error": ...}`` responses."""

    @app.exception_handler(StudentValidationError)
    async def student_validation_handler(request: Request, exc: StudentValidationError) -> JSONResponse:
        logger.warning("Rejected student payload on %s: %s", request.url.path, exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.warning("Malformed request on %s: %s", request.url.path, message)
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(SeedFetchError)
    async def seed_fetch_handler(request: Request, exc: SeedFetchError) -> JSONResponse:
        logger.error("Seed data unavailable while serving %s: %s", request.url.path, exc)
        return _error(status.HTTP_502_BAD_GATEWAY, f"Could not load seed data: {exc}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def create_app(
    settings: Optional[Settings] = None,
    seed_client: Optional[SeedClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the environment-derived
        defaults.
    seed_client : Optional[SeedClient]
        Client used to fetch the seed data.  Built from ``settings``
        when omitted; tests pass a fake here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the code below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    if seed_client is None:
        seed_client = SeedClient(url=settings.seed_url, timeout=settings.seed_timeout)
    store = StudentStore(seed_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.preload_students:
            try:
                await store.load()
            except SeedFetchError as exc:
                logger.warning("Preloading students failed, falling back to lazy loading: %s", exc)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.student_store = store

    register_exception_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")
    app.include_router(v1_router)

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(url="/students?format=html")

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "OK", "students_loaded": store.loaded}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
