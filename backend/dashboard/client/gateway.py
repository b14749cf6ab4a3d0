"""Persistence gateway: the only part of the editor core that talks to the network."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

import httpx

from dashboard.client.errors import (
    EndpointUnavailable,
    NotFound,
    TransportError,
    Unauthorized,
)
from dashboard.config import backend_url, http_timeout

logger = logging.getLogger(__name__)

# (filename, payload, content type)
AssetFile = Tuple[str, bytes, str]

DOCUMENT_PATH = "/api/dashboard-content"
BACKGROUND_UPLOAD_PATH = "/api/backgrounds/upload"
NEWS_UPLOAD_PATH = "/api/news/upload"
LOGIN_PATH = "/api/login"


class PersistenceGateway(Protocol):
    async def fetch_document(self) -> dict: ...

    async def save_document(self, document: dict) -> dict: ...

    async def upload_assets(self, files: Sequence[AssetFile]) -> List[str]: ...


class HttpPersistenceGateway:
    """
    Gateway backed by the dashboard HTTP API.

    `token_provider` returns the current bearer token (or None); it is
    consulted on every mutating call so a re-login takes effect at once.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or backend_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else http_timeout()
        self._token_provider = token_provider or (lambda: None)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpPersistenceGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _auth_headers(self) -> dict:
        token = self._token_provider()
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Malformed response body from {response.url}") from exc

    # ------------------------
    # Document
    # ------------------------

    async def fetch_document(self) -> dict:
        response = await self._request("GET", DOCUMENT_PATH)

        if response.status_code == 404:
            raise NotFound("No content found")
        if not response.is_success:
            raise TransportError(f"Failed to fetch dashboard content (status {response.status_code})")

        data = self._json(response)
        if not isinstance(data, dict):
            raise TransportError("Dashboard content is not an object")
        return data

    async def save_document(self, document: dict) -> dict:
        response = await self._request(
            "POST",
            DOCUMENT_PATH,
            json={"content": document["content"], "history": document["history"]},
            headers=self._auth_headers(),
        )

        if response.status_code in (401, 403, 422):
            raise Unauthorized("Not allowed to save dashboard content")
        if not response.is_success:
            raise TransportError(f"Failed to save dashboard content (status {response.status_code})")

        return self._json(response)

    # ------------------------
    # Assets
    # ------------------------

    def _absolute(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    async def _upload(self, path: str, field: str, files: Sequence[AssetFile]) -> httpx.Response:
        return await self._request(
            "POST",
            path,
            files=[(field, (name, payload, content_type)) for name, payload, content_type in files],
            headers=self._auth_headers(),
        )

    async def upload_assets(self, files: Sequence[AssetFile]) -> List[str]:
        """
        Upload files and return their absolute URLs, in order.

        Older backends lack the backgrounds endpoint; a 404 there falls back
        to the news upload route.
        """
        if not files:
            return []

        response = await self._upload(BACKGROUND_UPLOAD_PATH, "backgrounds", files)
        if response.status_code == 404:
            logger.warning("Background upload endpoint missing, falling back to news upload")
            response = await self._upload(NEWS_UPLOAD_PATH, "images", files)

        if response.status_code == 401:
            raise Unauthorized("Not allowed to upload files")
        if not response.is_success:
            raise EndpointUnavailable(f"Upload endpoints unavailable (status {response.status_code})")

        body = self._json(response)
        urls = body.get("urls") if isinstance(body, dict) else None
        if not isinstance(urls, list) or len(urls) != len(files) or not all(isinstance(u, str) for u in urls):
            raise EndpointUnavailable("Upload returned an unexpected number of urls")

        return [self._absolute(u) for u in urls]

    # ------------------------
    # Auth
    # ------------------------

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token."""
        response = await self._request(
            "POST", LOGIN_PATH, json={"username": username, "password": password}
        )
        if response.status_code == 401:
            raise Unauthorized("Invalid credentials")
        if not response.is_success:
            raise TransportError(f"Login failed (status {response.status_code})")

        body = self._json(response)
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise TransportError("Login response carried no token")
        return token
