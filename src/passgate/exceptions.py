"""Exceptions for passgate."""

__all__ = [
    "AuthenticationError",
    "BadCredentialsError",
    "CredentialLoadError",
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "UnknownUserError",
]


class CredentialLoadError(Exception):
    """The password file could not be loaded.

    Parameters
    ----------
    message
        Description of the problem.
    source
        Name of the password file, if the data came from a named file.
    lineno
        1-based line number of the offending line, if the problem is tied
        to a specific line.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        lineno: int | None = None,
    ) -> None:
        self.message = message
        self.source = source
        self.lineno = lineno
        super().__init__(message)

    def __str__(self) -> str:
        prefix = ""
        if self.source:
            prefix = f"{self.source}:"
        if self.lineno is not None:
            prefix += f"{self.lineno}:"
        if prefix:
            return f"{prefix} {self.message}"
        return self.message


class AuthenticationError(Exception):
    """Base class for requests that must be answered with a 401."""

    body = "Unauthorized"


class MissingCredentialsError(AuthenticationError):
    """No usable HTTP Basic credentials were sent."""


class InvalidCredentialsError(AuthenticationError):
    """Credentials were sent but were not accepted.

    Subclasses distinguish the cause for logging only.  Clients always see
    the same response.
    """

    body = "Incorrect username/password"


class UnknownUserError(InvalidCredentialsError):
    """Username is not in the password file."""


class BadCredentialsError(InvalidCredentialsError):
    """Password does not match the stored hash."""
