"""Authenticated Cloudflare SDK client provider.

The provider owns the single ``AsyncCloudflare`` instance shared by every
zone setting call and creates it on first use.
"""

import asyncio
import logging
from typing import Protocol

from cloudflare import AsyncCloudflare

from cloudflare_security.settings import (
    CloudflareSecuritySettings,
    get_cloudflare_security_settings,
)

logger = logging.getLogger(__name__)


class ClientProvider(Protocol):
    """Source of an authenticated Cloudflare SDK client."""

    async def get_client(self) -> AsyncCloudflare:
        """Return a ready-to-use client."""
        ...


class CloudflareClientProvider:
    """Lazily builds and caches an ``AsyncCloudflare`` client.

    Example:
        ```python
        async with CloudflareClientProvider() as provider:
            client = await provider.get_client()
        ```
    """

    def __init__(
        self,
        settings: CloudflareSecuritySettings | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            settings: Optional settings. If not provided, reads from environment.
        """
        self.settings = settings or get_cloudflare_security_settings()
        self._client: AsyncCloudflare | None = None
        self._lock = asyncio.Lock()

    async def get_client(self) -> AsyncCloudflare:
        """Return the shared client, creating it on first call.

        Returns:
            The authenticated SDK client.
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                self._client = self._build_client()
                logger.info("Initialized Cloudflare API client")
        return self._client

    def _build_client(self) -> AsyncCloudflare:
        kwargs = {}
        if self.settings.cloudflare_base_url:
            kwargs["base_url"] = self.settings.cloudflare_base_url
        return AsyncCloudflare(
            api_token=self.settings.get_token_value(),
            timeout=self.settings.request_timeout,
            max_retries=self.settings.max_retries,
            **kwargs,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.debug("Closed Cloudflare API client")

    async def __aenter__(self) -> "CloudflareClientProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
