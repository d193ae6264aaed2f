"""HTTP Basic authentication dependency backed by the password file."""

from fastapi import Request

from ..models.user import AuthenticatedUser
from .context import context_dependency

__all__ = ["auth_dependency"]


async def auth_dependency(request: Request) -> AuthenticatedUser:
    """Authenticate the request and return the caller's identity.

    Failures raise an `~passgate.exceptions.AuthenticationError`, which the
    application turns into a 401 challenge.
    """
    gate = context_dependency.get_process_context().gate
    return await gate.authenticate(request)
