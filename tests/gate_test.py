"""Tests for the passgate.gate module."""

from __future__ import annotations

import base64

import pytest
from structlog.testing import capture_logs
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from passgate.exceptions import MissingCredentialsError
from passgate.gate import CHALLENGE, BasicAuthGate, parse_basic_auth
from passgate.models.user import AuthenticatedUser
from tests.util import build_store, get_http_client


def _basic(value: bytes) -> str:
    return "Basic " + base64.b64encode(value).decode()


def test_parse_basic_auth() -> None:
    assert parse_basic_auth(_basic(b"alice:secret")) == ("alice", "secret")
    assert parse_basic_auth(_basic(b"alice:")) == ("alice", "")
    assert parse_basic_auth(_basic(b":")) == ("", "")
    assert parse_basic_auth(_basic(b"alice:a:b")) == ("alice", "a:b")
    assert parse_basic_auth("basic " + _basic(b"a:b")[6:]) == ("a", "b")
    assert parse_basic_auth(_basic("jörg:pässword".encode())) == (
        "jörg",
        "pässword",
    )


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "Basic",
        "Bearer abcdef",
        "Basic !!!not-base64!!!",
        _basic(b"no-separator"),
        _basic(b"\xff\xfe:password"),
    ],
)
def test_parse_basic_auth_missing(header: str | None) -> None:
    with pytest.raises(MissingCredentialsError):
        parse_basic_auth(header)


def _build_app() -> tuple[Starlette, list[str]]:
    store = build_store({"alice": "secret", "bob": "other"})
    gate = BasicAuthGate(store)
    seen: list[str] = []

    async def echo(request: Request, user: AuthenticatedUser) -> Response:
        seen.append(user.username)
        return PlainTextResponse(f"hello {user.username}")

    app = Starlette(routes=[Route("/protected", gate.wrap(echo))])
    return app, seen


@pytest.mark.asyncio
async def test_wrap() -> None:
    app, seen = _build_app()

    async with get_http_client(app, auth=("alice", "secret")) as client:
        r = await client.get("/protected")
    assert r.status_code == 200
    assert r.text == "hello alice"
    assert seen == ["alice"]

    async with get_http_client(app, auth=("bob", "other")) as client:
        r = await client.get("/protected")
    assert r.status_code == 200
    assert r.text == "hello bob"
    assert seen == ["alice", "bob"]


@pytest.mark.asyncio
async def test_wrap_rejected() -> None:
    app, seen = _build_app()

    async with get_http_client(app, auth=("alice", "wrong")) as client:
        r = await client.get("/protected")
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == CHALLENGE
    assert r.text == "Incorrect username/password"

    async with get_http_client(app) as client:
        r = await client.get("/protected")
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == CHALLENGE
    assert r.text == "Unauthorized"

    async with get_http_client(app) as client:
        r = await client.get(
            "/protected", headers={"Authorization": "Bearer some-token"}
        )
    assert r.status_code == 401
    assert r.text == "Unauthorized"

    assert seen == []


@pytest.mark.asyncio
async def test_unknown_user_indistinguishable() -> None:
    app, _ = _build_app()

    async with get_http_client(app, auth=("alice", "wrong")) as client:
        bad_password = await client.get("/protected")
    async with get_http_client(app, auth=("mallory", "wrong")) as client:
        unknown_user = await client.get("/protected")

    assert bad_password.status_code == unknown_user.status_code == 401
    assert bad_password.content == unknown_user.content
    assert bad_password.headers == unknown_user.headers


@pytest.mark.asyncio
async def test_log_records() -> None:
    url = "https://example.com/protected"
    with capture_logs() as logs:
        app, _ = _build_app()

        async with get_http_client(app, auth=("alice", "secret")) as client:
            await client.get("/protected")
        assert len(logs) == 1
        assert logs[0]["log_level"] == "info"
        assert logs[0]["url"] == url
        assert logs[0]["user"] == "alice"

        async with get_http_client(app, auth=("alice", "wrong")) as client:
            await client.get("/protected")
        assert len(logs) == 2
        bad_password = logs[1]
        assert bad_password["log_level"] == "warning"
        assert bad_password["url"] == url
        assert bad_password["user"] == "alice"

        async with get_http_client(app, auth=("mallory", "wrong")) as client:
            await client.get("/protected")
        assert len(logs) == 3
        unknown_user = logs[2]
        assert unknown_user["log_level"] == "warning"
        assert unknown_user["url"] == url
        assert unknown_user["user"] == "mallory"
        assert unknown_user["error"] != bad_password["error"]
        assert "mallory" in unknown_user["error"]

        async with get_http_client(app) as client:
            await client.get("/protected")
        assert len(logs) == 4
        assert logs[3]["log_level"] == "warning"
        assert logs[3]["url"] == url
        assert "user" not in logs[3]
        assert logs[3]["error"]
