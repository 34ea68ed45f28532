"""
Main entrypoint for the Code Camp API.

``create_app`` assembles the FastAPI application from an explicit
``Settings`` instance: it configures logging, stores the settings and
the authorization policy on ``app.state``, installs middleware and
mounts the API router.  The database is migrated (and optionally
seeded) on startup.

Serve it with ``run.py`` or directly with uvicorn's factory mode::

    uvicorn --factory code_camp_api.app.main:create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings
from .core.db import init_db, seed_db
from .core.logging_config import configure_logging
from .core.security import AuthorizationPolicy, superuser_policy

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject invalid request data with 400 and the list of problems."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(
    settings: Optional[Settings] = None,
    authorization_policy: AuthorizationPolicy = superuser_policy,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application configuration.  Loaded from the environment (and
        the optional config file it names) when omitted.
    authorization_policy : AuthorizationPolicy
        Predicate over token claims that guards the mutating endpoints.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.load()
    configure_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.authorization_policy = authorization_policy

    if settings.force_https:
        app.add_middleware(HTTPSRedirectMiddleware)
    if settings.cors_allow_any_get:
        app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"], allow_headers=["*"])
    elif settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db(settings.database_path)
        if settings.seed_database:
            seed_db(settings.database_path)
        logger.info("%s %s ready (database: %s)", settings.project_name, settings.api_version, settings.database_path)

    return app
