"""Password file storage layer.

The password file is line-oriented text.  Each non-comment line holds a
username and a bcrypt hash separated by whitespace::

    # comment
    alice $2b$12$...

The store is built once and never modified afterwards, so it can be shared
between any number of concurrent requests without locking.
"""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Self, TextIO

from ..exceptions import (
    BadCredentialsError,
    CredentialLoadError,
    UnknownUserError,
)
from ..passwords import check_password

__all__ = ["CredentialStore", "parse_credentials"]


def parse_credentials(
    lines: Iterable[str], source: str | None = None
) -> dict[str, bytes]:
    """Parse password file lines into a map of username to hash.

    Parameters
    ----------
    lines
        Lines of the password file, with or without trailing newlines.
    source
        Name of the file the lines came from, used in error messages.

    Returns
    -------
    dict of str to bytes
        Map from username to the raw bytes of its password hash.

    Raises
    ------
    CredentialLoadError
        A line does not have exactly two fields, a username appears twice,
        or reading the lines failed.
    """
    passwords: dict[str, bytes] = {}
    lineno = 0
    try:
        for lineno, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if line.startswith("#"):
                continue
            fields = line.split()
            if len(fields) != 2:
                raise CredentialLoadError(
                    f"invalid line {line!r}", source=source, lineno=lineno
                )
            username, password_hash = fields
            if username in passwords:
                raise CredentialLoadError(
                    f"duplicate user {username}", source=source, lineno=lineno
                )
            passwords[username] = password_hash.encode()
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialLoadError(
            f"read error: {e}", source=source, lineno=lineno + 1
        ) from e
    return passwords


class CredentialStore:
    """Read-only table of usernames and bcrypt password hashes.

    Parameters
    ----------
    passwords
        Map from username to password hash.  The store keeps its own copy.
    source
        Where the passwords came from, if known.
    """

    def __init__(
        self, passwords: Mapping[str, bytes], *, source: str | None = None
    ) -> None:
        self._passwords = MappingProxyType(dict(passwords))
        self.source = source

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load the store from a password file.

        Raises
        ------
        CredentialLoadError
            The file could not be opened or read, or its contents are
            invalid.  The error names the file.
        """
        source = str(path)
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                passwords = parse_credentials(f, source)
        except OSError as e:
            raise CredentialLoadError(
                f"cannot open: {e.strerror or e}", source=source
            ) from e
        return cls(passwords, source=source)

    @classmethod
    def from_stream(cls, stream: TextIO, source: str | None = None) -> Self:
        """Load the store from an open text stream.

        Raises
        ------
        CredentialLoadError
            The stream contents are invalid or could not be read.
        """
        return cls(parse_credentials(stream, source), source=source)

    def __contains__(self, username: object) -> bool:
        return username in self._passwords

    def __iter__(self) -> Iterator[str]:
        return iter(self._passwords)

    def __len__(self) -> int:
        return len(self._passwords)

    def lookup(self, username: str) -> bytes | None:
        """Return the stored hash for a user, or `None` if unknown."""
        return self._passwords.get(username)

    def verify(self, username: str, password: str) -> None:
        """Check a username and password against the store.

        This runs a bcrypt comparison and is deliberately slow.  Async
        callers should run it in a thread pool.

        Raises
        ------
        UnknownUserError
            The username is not in the store.
        BadCredentialsError
            The password does not match the stored hash.
        """
        password_hash = self._passwords.get(username)
        if password_hash is None:
            raise UnknownUserError(f"No such user {username!r}")
        if not check_password(password, password_hash):
            raise BadCredentialsError(f"Failed password for user {username!r}")
