from functools import lru_cache
from typing import Optional

import httpx
from app.core.config import settings


class HTTPClientManager:
    """
    Owns the process-wide httpx.AsyncClient used by the CEP providers.

    A single pooled client is shared by every lookup so concurrent provider
    requests reuse keep-alive connections instead of opening a new pool per call.
    """

    def __init__(self):
        # Created lazily by initialize()
        self._client: Optional[httpx.AsyncClient] = None
        self._is_initialized: bool = False

    async def initialize(self):
        """
        Creates the httpx.AsyncClient with the configured limits and headers.
        Called once from the application lifespan.
        """
        if self._is_initialized:
            return

        limits = httpx.Limits(
            max_keepalive_connections=settings.HTTPX_MAX_KEEPALIVE,
            max_connections=settings.HTTPX_MAX_CONNECTIONS,
            keepalive_expiry=settings.HTTPX_KEEPALIVE_EXPIRY,
        )

        # Per-request ceiling; the race deadline is usually much shorter
        timeout = httpx.Timeout(settings.REQUEST_TIMEOUT)

        headers = {
            "User-Agent": f"{settings.PROJECT_NAME}/{settings.VERSION}",
            "Accept": "application/json",
        }

        self._client = httpx.AsyncClient(
            timeout=timeout,
            limits=limits,
            headers=headers,
            verify=settings.HTTPX_VERIFY_SSL
        )
        self._is_initialized = True

    def get_client(self) -> httpx.AsyncClient:
        """
        Returns the shared client.
        Raises an error if the client has not been initialized.
        """
        if not self._client:
            raise RuntimeError("HTTPClientManager has not been initialized. Call initialize() first.")
        return self._client

    async def close(self) -> None:
        """Closes the client and its connection pool. Called on shutdown."""
        if self._client:
            await self._client.aclose()
            self._client = None
            self._is_initialized = False


@lru_cache
def get_http_client_manager() -> HTTPClientManager:
    """Returns the single HTTPClientManager instance."""
    return HTTPClientManager()
