"""Tests for the mock helpers shipped in labrinth_client.testing."""

import httpx
import pytest

from labrinth_client.testing import RecordingHandler, create_error_response, create_mock_response


@pytest.mark.unit
def test_mock_response_has_rate_limit_headers():
    response = create_mock_response(200, {"id": "abc"})

    assert response.json() == {"id": "abc"}
    assert response.headers["X-Ratelimit-Remaining"] == "299"


@pytest.mark.unit
def test_mock_response_without_rate_limit():
    response = create_mock_response(204, rate_limit=None, headers={"X-Test": "1"})

    assert "X-Ratelimit-Limit" not in response.headers
    assert response.headers["X-Test"] == "1"
    assert response.content == b""


@pytest.mark.unit
def test_error_response_body():
    response = create_error_response(401, description="missing scope")

    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized", "description": "missing scope"}


@pytest.mark.unit
def test_recording_handler_strips_host_path():
    handler = RecordingHandler({("GET", "/user"): create_mock_response(200, {"id": "me"})})

    response = handler(httpx.Request("GET", "https://api.modrinth.com/v2/user"))

    assert response.json() == {"id": "me"}
    assert handler.last_request.url.path == "/v2/user"


@pytest.mark.unit
def test_recording_handler_unknown_route():
    handler = RecordingHandler()

    response = handler(httpx.Request("POST", "https://api.modrinth.com/v2/user"))

    assert response.status_code == 404
    assert len(handler.requests) == 1


@pytest.mark.unit
def test_recording_handler_callable_route():
    handler = RecordingHandler({("POST", "/echo"): lambda request: httpx.Response(200, content=request.content)})

    response = handler(httpx.Request("POST", "https://api.modrinth.com/v2/echo", json={"a": 1}))

    assert response.json() == {"a": 1}
    assert handler.last_json() == {"a": 1}
