from __future__ import annotations

import pytest

from markmedium.errors import ApiFailure, ProtocolMismatchError, TransportError
from markmedium.platforms.medium import MediumApiClient

from .stubs import StubResponse, StubSession, connection_error


def _client(session: StubSession) -> MediumApiClient:
    return MediumApiClient(base_url="https://api.test/v1/", timeout=5, session=session)


def test_fetch_me_sends_bearer_token() -> None:
    session = StubSession(StubResponse({"data": {"id": "author-1", "username": "me"}}))

    user = _client(session).fetch_me("secret")

    assert user.id == "author-1"
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://api.test/v1/me"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["json"] is None
    assert call["timeout"] == 5


def test_fetch_me_error_envelope_on_401() -> None:
    session = StubSession(
        StubResponse({"errors": [{"message": "Token was invalid.", "code": 6003}]}, status_code=401)
    )

    with pytest.raises(ApiFailure) as excinfo:
        _client(session).fetch_me("bad")
    assert str(excinfo.value) == "Token was invalid."


def test_create_post_posts_payload() -> None:
    session = StubSession(StubResponse({"data": {"url": "https://medium.com/p/1"}}, status_code=201))
    payload = {"title": "Hello", "content": "World", "contentFormat": "markdown"}

    post = _client(session).create_post("secret", "author-1", payload)

    assert post.url == "https://medium.com/p/1"
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.test/v1/users/author-1/posts"
    assert call["json"] == payload
    assert call["headers"]["Authorization"] == "Bearer secret"


def test_non_json_body_is_protocol_mismatch() -> None:
    session = StubSession(StubResponse(None, status_code=502, raw="<html>Bad gateway</html>"))

    with pytest.raises(ProtocolMismatchError) as excinfo:
        _client(session).fetch_me("secret")
    assert excinfo.value.details["status"] == 502


def test_connection_failure_is_transport_error() -> None:
    session = StubSession(error=connection_error())

    with pytest.raises(TransportError) as excinfo:
        _client(session).fetch_me("secret")
    assert "connection refused" in str(excinfo.value)


def test_close_closes_session() -> None:
    session = StubSession()
    _client(session).close()
    assert session.closed
