"""Concurrent update resolution across every declared dependency.

Each dependency gets its own task: fetch dist-tags, pick the candidate for
the active target, then decide. Tasks are consumed in completion order and a
failing task only removes its own dependency from the result.
"""

import asyncio
import contextlib
import logging
from collections.abc import Iterable
from typing import Optional

from depbump.config import Settings
from depbump.models import DependencyRecord, UpdateCandidate
from depbump.policy import resolve_candidate, should_update
from depbump.registry import BaseRegistryClient, NpmRegistryClient, RegistryError
from depbump.resolvers.base import BaseUpdateResolver
from depbump.versions import VersionError

logger = logging.getLogger(__name__)


def collect_updates(candidates: Iterable[UpdateCandidate]) -> list[UpdateCandidate]:
    """Sort update candidates by package name.

    Names compare case-sensitively by code point, which matches byte order
    of their UTF-8 encoding.
    """
    return sorted(candidates, key=lambda candidate: candidate.name)


class UpdateResolver(BaseUpdateResolver):
    """Resolves update candidates against a registry.

    Attributes:
        settings: Shared, immutable run configuration.
        client: Registry client used by every task.
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[BaseRegistryClient] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            settings: Run configuration (registry, target, limits).
            client: Optional registry client. If not provided, an
                NpmRegistryClient is created from the settings.
        """
        self.settings = settings
        self.client = client or NpmRegistryClient(
            registry_url=settings.registry_url,
            options=settings.options,
        )

    async def resolve(self, record: DependencyRecord) -> Optional[UpdateCandidate]:
        """Check one dependency for an update.

        Registry and version errors are logged as warnings and yield None.

        Args:
            record: Dependency to check.

        Returns:
            UpdateCandidate if the target policy accepts the candidate version.
        """
        target = self.settings.target

        try:
            dist_tags = await self.client.fetch_dist_tags(record.name)
        except RegistryError as e:
            logger.warning("Error checking updates for package %s: %s", record.name, e)
            return None

        candidate_version = resolve_candidate(dist_tags, target)
        if candidate_version is None:
            logger.debug("No %s candidate for %s", target.value, record.name)
            return None

        try:
            updatable = should_update(
                record.constraint, record.constraint, candidate_version, target
            )
        except VersionError as e:
            logger.warning("Skipping package %s: %s", record.name, e)
            return None

        if not updatable:
            logger.debug(
                "%s %s: %s is not a %s update",
                record.name,
                record.constraint,
                candidate_version,
                target.value,
            )
            return None

        return UpdateCandidate(
            name=record.name,
            current_version=record.constraint,
            candidate_version=candidate_version,
        )

    async def _resolve_isolated(
        self, record: DependencyRecord, semaphore: Optional[asyncio.Semaphore]
    ) -> Optional[UpdateCandidate]:
        try:
            async with semaphore or contextlib.nullcontext():
                return await self.resolve(record)
        except Exception as e:
            logger.error("Update check failed for package %s: %s", record.name, e)
            return None

    async def resolve_batch(
        self, records: list[DependencyRecord]
    ) -> list[UpdateCandidate]:
        """Resolve every dependency concurrently.

        All tasks are started at once (or throttled by settings.concurrency)
        and consumed as they complete. An unexpected exception in one task
        is logged and never affects the others.

        Args:
            records: Dependencies to check.

        Returns:
            Update candidates sorted by package name.
        """
        logger.info("Checking %d dependencies for updates", len(records))

        semaphore = (
            asyncio.Semaphore(self.settings.concurrency)
            if self.settings.concurrency
            else None
        )
        tasks = [
            asyncio.ensure_future(self._resolve_isolated(record, semaphore))
            for record in records
        ]

        candidates: list[UpdateCandidate] = []
        for next_done in asyncio.as_completed(tasks):
            candidate = await next_done
            if candidate is not None:
                candidates.append(candidate)

        logger.info(
            "Update check complete: %d/%d dependencies have updates",
            len(candidates),
            len(records),
        )
        return collect_updates(candidates)

    async def close(self) -> None:
        """Close the registry client."""
        await self.client.close()

    async def __aenter__(self) -> "UpdateResolver":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
