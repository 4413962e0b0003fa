from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class APIClientError(Exception):
    pass


class APITimeoutError(APIClientError):
    pass


class APIServerError(APIClientError):
    pass


class APIPayloadError(APIClientError):
    pass


class APIUnexpectedStatusError(APIClientError):
    def __init__(self, status_code: int, body_text: str | None = None) -> None:
        super().__init__(f"Unexpected status code: {status_code}")
        self.status_code = status_code
        self.body_text = body_text


@dataclass(frozen=True)
class APIResult:
    status_code: int
    data: Any
    headers: dict[str, str]


class APIClient:
    """
    REST Countries client
    - GET-only
    - No auth, no custom headers
    - Async httpx
    """

    def __init__(
        self,
        *,
        base_url: str = "https://restcountries.com",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout_seconds)

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers={},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> APIResult:
        return await self.request("GET", endpoint, params=params)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> APIResult:
        if method.upper() != "GET":
            raise ValueError("GET only: POST/PUT/DELETE are not supported")

        if headers:
            raise ValueError("Custom headers are forbidden")

        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        try:
            resp = await self._client.request(
                method="GET",
                url=endpoint,
                params=params or {},
            )
        except httpx.TimeoutException as e:
            raise APITimeoutError("Request timeout") from e
        except httpx.RequestError as e:
            raise APIClientError(f"Request error: {e}") from e

        resp_headers = {k: v for k, v in resp.headers.items()}

        if 200 <= resp.status_code < 300:
            try:
                data = resp.json()
            except ValueError as e:
                raise APIPayloadError("Failed to parse JSON") from e
            return APIResult(status_code=resp.status_code, data=data, headers=resp_headers)

        if resp.status_code >= 500:
            raise APIServerError(f"API server error ({resp.status_code})")

        body_text: str | None
        try:
            body_text = resp.text
        except UnicodeDecodeError:
            body_text = None
        raise APIUnexpectedStatusError(resp.status_code, body_text=body_text)
