"""npm registry client for fetching package dist-tags.

Queries the ``/-/package/{name}/dist-tags`` endpoint of an npm-compatible
registry. One GET per call, no retries and no caching.
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import aiohttp
from yarl import URL

from depbump.config import DEFAULT_REGISTRY_URL, RegistryOptions
from depbump.models import DistTags
from depbump.registry.base import BaseRegistryClient
from depbump.registry.errors import PackageNotFoundError, ParseError, RequestError

logger = logging.getLogger(__name__)


class NpmRegistryClient(BaseRegistryClient):
    """Client for the npm registry dist-tags API.

    Holds one aiohttp session (and its connection pool) that is shared by
    every concurrent fetch. Use as an async context manager or call close()
    when done.

    Attributes:
        registry_url: Base URL of the registry, without a trailing slash.
        options: Transport options (pool size, timeout, TLS verification).
    """

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        options: Optional[RegistryOptions] = None,
    ) -> None:
        """Initialize the npm registry client.

        Args:
            registry_url: Base URL of the registry.
            options: Transport options. Defaults to RegistryOptions().
        """
        self.registry_url = registry_url.rstrip("/")
        self.options = options or RegistryOptions()
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def name(self) -> str:
        return "npm"

    def _create_session(self) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(
            limit_per_host=self.options.max_sockets,
            ssl=self.options.strict_ssl,
            ttl_dns_cache=300,
        )
        return aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self.options.timeout),
            headers={"Accept": "application/json"},
        )

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = self._create_session()
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "NpmRegistryClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def dist_tags_url(self, name: str) -> URL:
        """Build the dist-tags URL for a package.

        Scoped names keep their "@" and have the "/" encoded as %2F.

        Raises:
            ParseError: If the resulting URL is not an absolute http(s) URL.
        """
        full_url = f"{self.registry_url}/-/package/{quote(name, safe='@')}/dist-tags"
        try:
            url = URL(full_url, encoded=True)
            # Accessing the port validates it.
            url.port
        except ValueError as e:
            raise ParseError(name, full_url) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ParseError(name, full_url)
        return url

    async def fetch_dist_tags(self, name: str) -> DistTags:
        """Fetch dist-tags for a package.

        Args:
            name: Package name.

        Returns:
            The package's DistTags.

        Raises:
            ParseError: If the request URL is malformed.
            RequestError: On connection, timeout or TLS failures.
            PackageNotFoundError: If the body is not dist-tag metadata.
        """
        url = self.dist_tags_url(name)
        logger.debug("Fetching dist-tags from %s", url)

        try:
            session = await self._get_session()
            async with session.get(url) as response:
                try:
                    payload = await response.json(content_type=None)
                    return DistTags.from_payload(payload)
                except ValueError as e:
                    logger.debug(
                        "Registry returned status %d with unusable body for %s",
                        response.status,
                        name,
                    )
                    raise PackageNotFoundError(name, e) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RequestError(name, e) from e
