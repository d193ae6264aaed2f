"""Application definition for passgate."""

__all__ = ["create_app"]

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from importlib.metadata import version

from fastapi import FastAPI
from safir.logging import configure_uvicorn_logging

from .config import Configuration
from .dependencies.config import config_dependency
from .dependencies.context import context_dependency
from .exceptions import AuthenticationError
from .factory import ProcessContext
from .gate import authentication_error_handler
from .handlers import (
    external_index_router,
    internal_index_router,
    user_router,
)
from .storage.credentials import CredentialStore


def create_app(
    *,
    config: Configuration | None = None,
    store: CredentialStore | None = None,
) -> FastAPI:
    """Create and configure the passgate FastAPI application.

    The password file is loaded here rather than in the lifespan, so that a
    malformed file prevents the application from being created instead of
    surfacing on the first request.

    Parameters
    ----------
    config : `Configuration`, optional
        The configuration to use.  If not provided, the default Configuration
        will be used.  This is a parameter primarily to allow for dependency
        injection by the test suite.
    store : `CredentialStore`, optional
        The credential store to use.  If not provided, it is loaded from the
        password file named in the configuration.

    Raises
    ------
    passgate.exceptions.CredentialLoadError
        The password file could not be loaded.
    """
    if not config:
        config = config_dependency.config()
    process_context = ProcessContext(config, store)

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        context_dependency.initialize(process_context)
        yield
        context_dependency.reset()

    path_prefix = f"/{config.name}"
    app = FastAPI(
        title="passgate",
        description=(
            "passgate protects its routes with HTTP Basic authentication"
            " against a file of bcrypt password hashes."
        ),
        version=version("passgate"),
        openapi_tags=[
            {
                "name": "internal",
                "description": (
                    "Internal routes used by the ingress and health checks."
                ),
            },
        ],
        openapi_url=f"{path_prefix}/openapi.json",
        docs_url=f"{path_prefix}/docs",
        redoc_url=f"{path_prefix}/redoc",
        lifespan=_lifespan,
    )

    # Internal routes
    app.include_router(internal_index_router)
    # External routes
    app.include_router(external_index_router, prefix=path_prefix)
    app.include_router(user_router, prefix=path_prefix)

    # Add exception handlers
    app.exception_handler(AuthenticationError)(authentication_error_handler)

    # Rationalize logs
    configure_uvicorn_logging(config.log_level)

    return app
