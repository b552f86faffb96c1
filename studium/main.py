# studium/main.py (async version)

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studium.adapters.configuration.config import Settings, settings as default_settings
from studium.adapters.inbound.api.endpoints import health_endpoint
from studium.adapters.inbound.api.router import ENDPOINTS, api_router
from studium.adapters.outbound.persistence.database import Database
from studium.shared.middleware import AsyncExceptionMiddleware, AsyncRequestLoggingMiddleware

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if default_settings.DEBUG else getattr(logging, default_settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")
    database: Database = app.state.database

    if app.state.settings.DB_CREATE_TABLES:
        await database.create_all()

    yield

    # Shutdown
    logger.info("Application shutting down...")
    await database.dispose()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Requisição inválida: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Requisição inválida", "details": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    ``settings`` defaults to the values loaded from the environment and
    ``database`` to one built from those settings; tests pass their own.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Studium Backend API",
        description="API de planejamento de estudos",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    # Middlewares
    app.add_middleware(AsyncRequestLoggingMiddleware, production=settings.is_production)
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(api_router, prefix="/api")
    app.include_router(health_endpoint.router, tags=["Saúde"])

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "ok": True,
            "message": "Studium Backend API",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "endpoints": ENDPOINTS,
        }

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Remove unwanted schemas and 422 responses
        for name in ("HTTPValidationError", "ValidationError"):
            schema.get("components", {}).get("schemas", {}).pop(name, None)

        for path in schema.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi

    return app


app = create_app()
