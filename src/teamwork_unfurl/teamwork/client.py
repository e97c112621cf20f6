"""Async Teamwork API client.

Creates a cached httpx.AsyncClient authenticated with the Teamwork API key
(HTTP basic auth, key as username). Transient failures (transport errors,
429 and 5xx responses) are retried with tenacity; everything else propagates
to the caller.
"""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from teamwork_unfurl.config import get_settings
from teamwork_unfurl.teamwork.urls import parse_task_id, task_api_url

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_teamwork_client() -> httpx.AsyncClient:
    """Return a cached Teamwork HTTP client.

    Creates the client on first call using teamwork_api_key and
    teamwork_timeout_seconds from settings.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = httpx.AsyncClient(
            auth=(settings.teamwork_api_key, "x"),
            timeout=httpx.Timeout(settings.teamwork_timeout_seconds),
            headers={"Accept": "application/json"},
        )
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None


async def close_client() -> None:
    """Close and drop the cached client. Called on application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def _is_retryable(error: BaseException) -> bool:
    """Transport errors, rate limits (429) and server errors (5xx) are transient."""
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status == 429 or status >= 500
    return isinstance(error, httpx.TransportError)


@retry(
    retry=retry_if_exception(_is_retryable),
    wait=wait_exponential_jitter(initial=0.5, max=5, jitter=1),
    stop=stop_after_attempt(3),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _get_task(api_url: str) -> httpx.Response:
    """GET a task endpoint, raising for error statuses other than 404."""
    client = get_teamwork_client()
    response = await client.get(api_url)
    if response.status_code != 404:
        response.raise_for_status()
    return response


async def fetch_task(url: str) -> dict | None:
    """Fetch the raw ``todo-item`` for a Teamwork task URL.

    Returns None when the URL carries no task id, when Teamwork answers 404,
    or when the body has no ``todo-item``.

    Raises:
        httpx.HTTPError: On transport failures or error statuses, after retries.
        ValueError: If the response body is not JSON.
    """
    task_id = parse_task_id(url)
    if task_id is None:
        logger.info("No task id in URL: %s", url)
        return None

    response = await _get_task(task_api_url(url, task_id))
    if response.status_code == 404:
        return None

    return response.json().get("todo-item") or None
