"""
Notebooks API — FastAPI Application Factory
============================================

What:  Builds the FastAPI application around the user and notebook services.
How:   create_app() takes the services directly, or loads whichever is
       missing from the USER_SERVICE / NOTEBOOK_SERVICE settings.
Who:   uvicorn (`uvicorn notebooks_api.main:create_app --factory`) and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Access Log → CORS        │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ /users       │ │ /notebooks     │ │ /health   │  │
    │  │ UserCtrl     │ │ NotebookCtrl   │ │           │  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception handler: anything unhandled → 500        │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notebooks_api import __version__
from notebooks_api.config import settings
from notebooks_api.controllers.notebook_controller import NotebookController
from notebooks_api.controllers.user_controller import UserController
from notebooks_api.middleware.access_log import AccessLogMiddleware
from notebooks_api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from notebooks_api.routes import health
from notebooks_api.services.loader import load_service
from notebooks_api.services.notebook_base import NotebookService
from notebooks_api.services.user_base import UserService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """Configure root logging to stdout at settings.log_level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates AccessLogMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Notebooks API %s starting up", __version__)
    logger.info(
        "Services: user=%s notebook=%s",
        type(app.state.user_service).__name__,
        type(app.state.notebook_service).__name__,
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the last-resort handler.

    Controllers answer every service error themselves; this only catches
    failures outside them (serialization, middleware bugs). The trace is
    logged, the client gets a generic body.

    Runs outside RequestIDMiddleware: the id comes from request.state and
    the X-Request-ID header is set here.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"msg": "Internal Server Error."},
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def resolve_services(
    user_service: Optional[UserService],
    notebook_service: Optional[NotebookService],
) -> Tuple[UserService, NotebookService]:
    """
    Fill in services not passed explicitly from configuration.

    Raises:
        ServiceConfigurationError: a needed import path is unset or cannot
            be loaded.
    """
    if user_service is None:
        user_service = load_service(settings.user_service, UserService)
    if notebook_service is None:
        notebook_service = load_service(settings.notebook_service, NotebookService)

    return user_service, notebook_service


def create_app(
    user_service: Optional[UserService] = None,
    notebook_service: Optional[NotebookService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        user_service: UserService used by /users; loaded from
            settings.user_service when omitted.
        notebook_service: NotebookService used by /notebooks; loaded from
            settings.notebook_service when omitted.
    """
    user_service, notebook_service = resolve_services(user_service, notebook_service)

    app = FastAPI(
        title="Notebooks API",
        description="Users (sign-up, login, token lookup) and notebooks.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.user_service = user_service
    app.state.notebook_service = notebook_service

    # Last added runs first: RequestID → AccessLog → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(UserController(user_service).get_router())
    app.include_router(NotebookController(notebook_service).get_router())
    app.include_router(health.router)

    return app
