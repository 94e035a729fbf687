"""
Async HTTP client for the People Data Labs v5 API.
"""
from typing import Any

import httpx

from .config import Settings
from .exceptions import PDLAPIError
from .logger import get_logger
from .tools.schemas import OutboundRequest

logger = get_logger("client")


class PDLClient:
    """
    Thin wrapper around one shared httpx.AsyncClient.

    The base URL and headers are fixed at construction. Every failure,
    whether a non-2xx response or a transport error, surfaces as PDLAPIError.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
            headers={
                "X-Api-Key": settings.api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    async def __aenter__(self) -> "PDLClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET `path` with query parameters and return the decoded JSON body."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """POST `body` as JSON to `path` and return the decoded JSON body."""
        return await self._request("POST", path, json=body)

    async def send(self, request: OutboundRequest) -> Any:
        """Execute a builder's OutboundRequest."""
        if request.method == "POST":
            return await self.post(request.path, request.json_body)
        return await self.get(request.path, request.params)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug(f"{method} {path}")
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise PDLAPIError(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise PDLAPIError(response.status_code, _error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise PDLAPIError(response.status_code, "response body is not valid JSON") from e


def _error_message(response: httpx.Response) -> str:
    """Prefer PDL's `error.message`, fall back to the HTTP reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])

    return response.reason_phrase or f"Request failed with status code {response.status_code}"
