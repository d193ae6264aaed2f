"""Utilities, such as fixtures and sample data, for passgate tests."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette

from passgate.config import Configuration
from passgate.passwords import hash_password
from passgate.storage.credentials import CredentialStore

# Hashes generated elsewhere, so they also check compatibility with
# other bcrypt implementations.
USER1_HASH = "$2b$09$XDxv37mFio1MI0EnlFK2SOTrBL7BRYDOGw2nZnSbGibQ0TmxccvOm"
USER1_PASSWORD = "you-cracked-it"
USER2_HASH = "$2b$10$.T2oFl.3/LIDnakEaBKjbO25NLWlkczEpYkfvz0dbzVQZUQ1tZ4.."
USER2_PASSWORD = "you-cracked-it2"
OTHER_HASH = "$2b$10$20zZVM2wu0Pw2AROUW/1V.l1gXZx/v0ezro53/fbZPrsE.gaBOmFe"


def password_line(username: str, password: str) -> str:
    """Build a password file line with a cheap hash."""
    return f"{username} {hash_password(password, rounds=4).decode()}\n"


def build_store(users: dict[str, str]) -> CredentialStore:
    """Build a store from a map of username to plaintext password."""
    text = "".join(password_line(u, p) for u, p in users.items())
    return CredentialStore.from_stream(StringIO(text))


def write_password_file(path: Path, users: dict[str, str]) -> Path:
    """Write a password file for the given users and return its path."""
    path.write_text(
        "# test users\n"
        + "".join(password_line(u, p) for u, p in users.items())
    )
    return path


def build_config(password_file: Path | None = None) -> Configuration:
    config = Configuration()
    if password_file:
        config.password_file = password_file
    return config


def get_http_client(
    app: FastAPI | Starlette, auth: tuple[str, str] | None = None
) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://example.com",
        auth=auth,
    )
