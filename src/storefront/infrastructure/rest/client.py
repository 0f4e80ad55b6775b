"""
Async HTTP client for the storefront REST backend.

Wraps a single ``httpx.AsyncClient`` for the lifetime of one unit of
work. The bearer token is supplied by the caller; the client never
looks it up on its own.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    The backend could not be reached or answered with an error status.

    Attributes:
        message: Error message
        status_code: HTTP status code if a response was received
        details: Decoded error body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ApiClient:
    """
    Client for the storefront REST API.

    Use as an async context manager so the connection pool is released::

        async with ApiClient("http://localhost:3000", token=token) as api:
            products = await api.get("/products")
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            base_url: Base URL of the backend
            token: Bearer token sent with every request, if any
            timeout: Request timeout in seconds
            transport: Alternative httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Verbs ----------------------------------------------------------------

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self._request("GET", path, params=params, headers=headers)

    async def get_optional(self, path: str) -> Any:
        """GET a single resource; ``None`` when the backend answers 404."""
        return await self._request("GET", path, allow_missing=True)

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._request("PUT", path, json=payload)

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", path, json=payload)

    # --- Internal helpers -----------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        allow_missing: bool = False,
    ) -> Any:
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.TimeoutException as exc:
            raise ApiError(f"Request to {self.base_url}{path} timed out") from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"Could not reach {self.base_url}: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if allow_missing and response.status_code == 404:
            return None

        if response.is_error:
            raise self._error_for(method, path, response)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _error_for(method: str, path: str, response: httpx.Response) -> ApiError:
        try:
            details = response.json() if response.content else {}
        except ValueError:
            details = {"detail": response.text}
        if not isinstance(details, dict):
            details = {"detail": details}

        message = f"{method} {path} failed with HTTP {response.status_code}"
        detail = details.get("message") or details.get("detail")
        if detail:
            message = f"{message}: {detail}"
        return ApiError(message, status_code=response.status_code, details=details)
