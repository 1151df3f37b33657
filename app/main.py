"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from app.api import (
    admin,
    auth,
    blogs,
    contacts,
    donation_requests,
    donors,
    fundings,
    health,
    products,
)
from app.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.database.mongo import connect_database
from app.middleware.request_logging import RequestLoggingMiddleware
from app.repositories import (
    DonationRequestRepository,
    ProductRepository,
    UserRepository,
)
from app.services.identity import (
    FirebaseIdentityVerifier,
    IdentityResolver,
    IdentityVerifier,
)
from app.services.payments import PaymentGateway, StripePaymentGateway
from ventech_common.logging import setup_logging
from ventech_common.mongo import close_clients

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    UserRepository(db).ensure_indexes()
    ProductRepository(db).ensure_indexes()
    DonationRequestRepository(db).ensure_indexes()


def create_app(
    settings: Optional[Settings] = None,
    *,
    db: Optional[Database] = None,
    identity_verifier: Optional[IdentityVerifier] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """Build the API; collaborators not passed in are created at startup."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = db if db is not None else connect_database(settings)
        verifier = identity_verifier or FirebaseIdentityVerifier(
            settings.FIREBASE_CREDENTIALS_FILE, settings.FIREBASE_PROJECT_ID
        )
        ensure_indexes(database)

        app.state.settings = settings
        app.state.db = database
        app.state.identity_resolver = IdentityResolver(database, verifier)
        app.state.payment_gateway = payment_gateway or StripePaymentGateway(
            settings.STRIPE_SECRET_KEY, settings.PAYMENT_CURRENCY
        )
        logger.info("%s started", settings.APP_NAME, extra={"db": database.name})
        try:
            yield
        finally:
            if identity_verifier is None:
                verifier.close()
            if db is None:
                close_clients()
            logger.info("%s stopped", settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    prefix = settings.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix)
    app.include_router(admin.router, prefix=prefix)
    app.include_router(products.router, prefix=prefix)
    app.include_router(donors.router, prefix=prefix)
    app.include_router(donation_requests.router, prefix=prefix)
    app.include_router(blogs.router, prefix=prefix)
    app.include_router(fundings.router, prefix=prefix)
    app.include_router(contacts.router, prefix=prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": f"{prefix}/docs",
        }

    return app


def build_app() -> FastAPI:
    """Factory for ``uvicorn --factory app.main:build_app``."""
    setup_logging(default_settings.LOG_LEVEL)
    return create_app()
