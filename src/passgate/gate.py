"""HTTP Basic authentication gate.

The gate sits in front of a protected handler.  For each request it pulls
the Basic credentials out of the ``Authorization`` header, checks them
against a `~passgate.storage.credentials.CredentialStore`, and either hands
the request and the authenticated user to the handler or answers with a 401
challenge.
"""

import base64
import binascii
from collections.abc import Awaitable, Callable
from functools import wraps

import structlog
from fastapi import Request, status
from fastapi.security.utils import get_authorization_scheme_param
from starlette.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse, Response
from structlog.stdlib import BoundLogger

from .exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    MissingCredentialsError,
)
from .models.user import AuthenticatedUser
from .storage.credentials import CredentialStore

__all__ = [
    "CHALLENGE",
    "REALM",
    "AuthenticatedEndpoint",
    "BasicAuthGate",
    "authentication_error_handler",
    "challenge_response",
    "parse_basic_auth",
]

REALM = "restricted"
"""Authentication realm advertised in challenges."""

CHALLENGE = f'Basic realm="{REALM}", charset="UTF-8"'
"""Value of the ``WWW-Authenticate`` header sent with every 401."""

AuthenticatedEndpoint = Callable[
    [Request, AuthenticatedUser], Awaitable[Response]
]
"""Type of a Starlette endpoint that receives the authenticated user."""


def parse_basic_auth(header: str | None) -> tuple[str, str]:
    """Extract the username and password from an ``Authorization`` header.

    Parameters
    ----------
    header
        Value of the header, or `None` if it was not sent.

    Returns
    -------
    tuple of str
        The username and password.

    Raises
    ------
    MissingCredentialsError
        The header is missing, uses another scheme, or is not valid
        base64-encoded UTF-8 ``username:password``.
    """
    if not header:
        raise MissingCredentialsError("No Authorization header")
    scheme, param = get_authorization_scheme_param(header)
    if scheme.lower() != "basic":
        raise MissingCredentialsError(f"Unsupported auth scheme {scheme!r}")
    try:
        decoded = base64.b64decode(param, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise MissingCredentialsError("Malformed Basic credentials") from e
    username, sep, password = decoded.partition(":")
    if not sep:
        raise MissingCredentialsError("Basic credentials missing separator")
    return username, password


def challenge_response(exc: AuthenticationError) -> Response:
    """Build the 401 response for a failed authentication."""
    return PlainTextResponse(
        exc.body,
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": CHALLENGE},
    )


async def authentication_error_handler(
    request: Request, exc: Exception
) -> Response:
    """FastAPI exception handler that turns auth failures into challenges."""
    if not isinstance(exc, AuthenticationError):
        raise exc
    return challenge_response(exc)


class BasicAuthGate:
    """Authenticate requests against a credential store.

    Parameters
    ----------
    store
        Loaded credential store.  Shared, never modified.
    logger
        Logger for per-request outcomes.  Defaults to the logger for
        __name__.
    """

    def __init__(
        self,
        store: CredentialStore,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or structlog.get_logger(__name__)

    async def authenticate(self, request: Request) -> AuthenticatedUser:
        """Authenticate a request.

        Parameters
        ----------
        request
            Incoming request.

        Returns
        -------
        AuthenticatedUser
            The verified identity of the caller.

        Raises
        ------
        MissingCredentialsError
            No usable Basic credentials were sent.
        InvalidCredentialsError
            The credentials were rejected.  The subclass says why, but that
            is only logged.
        """
        url = str(request.url)
        try:
            username, password = parse_basic_auth(
                request.headers.get("Authorization")
            )
        except MissingCredentialsError as e:
            self._logger.warning("No auth", url=url, error=str(e))
            raise

        try:
            await run_in_threadpool(self._store.verify, username, password)
        except InvalidCredentialsError as e:
            self._logger.warning(
                "Bad auth", url=url, user=username, error=str(e)
            )
            raise

        self._logger.info("Authenticated request", url=url, user=username)
        return AuthenticatedUser(username=username)

    def wrap(
        self, endpoint: AuthenticatedEndpoint
    ) -> Callable[[Request], Awaitable[Response]]:
        """Protect a Starlette endpoint with HTTP Basic authentication.

        The inner endpoint is only called once the caller has been
        authenticated, and receives the `AuthenticatedUser` as its second
        argument.  Otherwise the wrapper answers with a 401 challenge itself.
        """

        @wraps(endpoint)
        async def gated(request: Request) -> Response:
            try:
                user = await self.authenticate(request)
            except AuthenticationError as e:
                return challenge_response(e)
            return await endpoint(request, user)

        return gated
