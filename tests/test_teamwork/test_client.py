"""Tests for the Teamwork API client (mocked with httpx.MockTransport)."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from teamwork_unfurl.teamwork.client import (
    _is_retryable,
    close_client,
    fetch_task,
    get_teamwork_client,
    reset_client,
)

TASK_URL = "https://acme.teamwork.com/#/tasks/12345"


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Ensure clean singleton state for every test."""
    reset_client()
    yield
    reset_client()


def _patch_transport(handler):
    """Patch the cached client with one backed by a MockTransport."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return patch("teamwork_unfurl.teamwork.client.get_teamwork_client", return_value=client)


async def test_fetch_task_returns_todo_item():
    """A 200 response yields the todo-item dict from the v1 endpoint."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"STATUS": "OK", "todo-item": {"id": 12345}})

    with _patch_transport(handler):
        item = await fetch_task(TASK_URL)

    assert item == {"id": 12345}
    assert str(seen[0].url) == "https://acme.teamwork.com/tasks/12345.json"


async def test_fetch_task_404_returns_none():
    """A 404 means the task does not exist."""
    with _patch_transport(lambda request: httpx.Response(404)):
        assert await fetch_task(TASK_URL) is None


async def test_fetch_task_without_todo_item_returns_none():
    """A body without todo-item yields None."""
    with _patch_transport(lambda request: httpx.Response(200, json={"STATUS": "OK"})):
        assert await fetch_task(TASK_URL) is None


async def test_fetch_task_no_task_id_skips_request():
    """URLs without a task id never reach the network."""
    handler = MagicMock()
    with _patch_transport(handler):
        assert await fetch_task("https://acme.teamwork.com/#/projects/1") is None
    handler.assert_not_called()


async def test_fetch_task_auth_error_raises_without_retry():
    """401 is permanent: raised after a single attempt."""
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(401)

    with _patch_transport(handler), pytest.raises(httpx.HTTPStatusError):
        await fetch_task(TASK_URL)
    assert calls == 1


@patch("teamwork_unfurl.teamwork.client.get_settings")
def test_get_teamwork_client_uses_basic_auth(mock_get_settings: MagicMock):
    """The client authenticates with the API key as username."""
    mock_get_settings.return_value.teamwork_api_key = "tw-key"
    mock_get_settings.return_value.teamwork_timeout_seconds = 5.0

    client = get_teamwork_client()

    assert isinstance(client, httpx.AsyncClient)
    assert isinstance(client.auth, httpx.BasicAuth)
    assert client.timeout.read == 5.0
    assert get_teamwork_client() is client


@patch("teamwork_unfurl.teamwork.client.get_settings")
async def test_close_client_clears_cache(mock_get_settings: MagicMock):
    """After close_client(), a new instance is created."""
    mock_get_settings.return_value.teamwork_api_key = "tw-key"
    mock_get_settings.return_value.teamwork_timeout_seconds = 5.0

    first = get_teamwork_client()
    await close_client()
    assert first.is_closed
    assert get_teamwork_client() is not first


# --- _is_retryable tests ---


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://acme.teamwork.com/tasks/1.json")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def test_is_retryable_server_error():
    assert _is_retryable(_status_error(503)) is True


def test_is_retryable_rate_limit():
    assert _is_retryable(_status_error(429)) is True


def test_is_retryable_auth_error():
    assert _is_retryable(_status_error(403)) is False


def test_is_retryable_transport_error():
    assert _is_retryable(httpx.ConnectError("refused")) is True


def test_is_retryable_other_exception():
    assert _is_retryable(ValueError("bad json")) is False
