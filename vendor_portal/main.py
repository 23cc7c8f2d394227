"""Vendor Portal API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendor_portal.core.config import settings
from vendor_portal.core.exceptions import register_exception_handlers
from vendor_portal.db.base import create_schema
from vendor_portal.middleware.audit import AuditMiddleware
from vendor_portal.schemas.common import HealthResponse

# v1 routers
from vendor_portal.routers.v1.admins import router as admins_v1_router
from vendor_portal.routers.v1.analytics import router as analytics_v1_router
from vendor_portal.routers.v1.audit import router as audit_v1_router
from vendor_portal.routers.v1.auth import router as auth_v1_router
from vendor_portal.routers.v1.compliance import router as compliance_v1_router
from vendor_portal.routers.v1.directory import router as directory_v1_router
from vendor_portal.routers.v1.documents import router as documents_v1_router
from vendor_portal.routers.v1.emails import router as emails_v1_router
from vendor_portal.routers.v1.notifications import router as notifications_v1_router
from vendor_portal.routers.v1.registration import router as registration_v1_router
from vendor_portal.routers.v1.review import router as review_v1_router
from vendor_portal.routers.v1.vendors import router as vendors_v1_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        await create_schema()
        logger.info("Database schema ensured at %s", settings.database_url)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    yield


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Access log for state-changing requests ---
    app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    for router in (
        registration_v1_router,
        review_v1_router,
        documents_v1_router,
        notifications_v1_router,
        compliance_v1_router,
        vendors_v1_router,
        audit_v1_router,
        analytics_v1_router,
        directory_v1_router,
        auth_v1_router,
        admins_v1_router,
        emails_v1_router,
    ):
        app.include_router(router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
