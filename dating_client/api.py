# dating_client/api.py
"""
Async HTTP client for the Dating App API.

Every call completes exactly once: it returns the parsed result or raises
``ApiError``. Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

import httpx

from dating_client.models import LoginCredentials, Member, RegisterForm, User

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://localhost:5001/api"


class ApiError(Exception):
    """
    Failed API call, carrying the server's error envelope when there is one.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return cls(
                response.status_code,
                str(error.get("code", "http_error")),
                str(error.get("message", response.reason_phrase)),
                error.get("details"),
            )
        return cls(response.status_code, "http_error", response.reason_phrase or "HTTP error")

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, code={self.code!r})"


class AccountApi:
    """
    Thin wrapper around ``httpx.AsyncClient`` for the account and member
    endpoints.

    Pass ``client`` to reuse an existing client (tests mount the ASGI app
    through ``httpx.ASGITransport``); otherwise one is created for
    ``base_url`` and closed by ``aclose()``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AccountApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def register(self, form: RegisterForm) -> User:
        data = await self._request("POST", "/account/register", json=form.to_json())
        return User.from_json(data)

    async def login(self, credentials: LoginCredentials) -> User:
        data = await self._request("POST", "/account/login", json=credentials.to_json())
        return User.from_json(data)

    async def list_members(self) -> List[Member]:
        data = await self._request("GET", "/members")
        return [Member.from_json(item) for item in data]

    async def get_member(self, member_id: str) -> Member:
        data = await self._request("GET", f"/members/{member_id}")
        return Member.from_json(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as exc:
            logger.warning("Request %s %s failed: %s", method, path, exc)
            raise ApiError(0, "network_error", str(exc) or "Network error") from exc

        if response.is_error:
            raise ApiError.from_response(response)
        return response.json()


__all__ = ["ApiError", "AccountApi", "DEFAULT_BASE_URL"]
