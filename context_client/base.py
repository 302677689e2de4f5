"""Base HTTP client with retry logic."""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_TIMEOUT, CONTEXT_API_URL


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class ApiError(Exception):
    """Non-retryable error response from the context API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class BaseClient:
    """Base async HTTP client with exponential backoff."""

    def __init__(
        self,
        base_url: str = CONTEXT_API_URL,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _request(self, method: str, path: str, **kwargs) -> dict:
        """Send a request with retry logic; 4xx responses raise ApiError."""
        self._request_count += 1
        resp = await self._client.request(method, path, **kwargs)
        if 400 <= resp.status_code < 500:
            raise ApiError(resp.status_code, _error_message(resp))
        resp.raise_for_status()
        return resp.json()


def _error_message(resp: httpx.Response) -> str:
    try:
        return resp.json().get("error") or resp.text
    except ValueError:
        return resp.text
