"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from depbump.config import Settings
from depbump.models import DependencyRecord, DistTags, UpdateCandidate

REGISTRY_URL = "https://registry.npmjs.org"


def dist_tags_url(name: str, registry: str = REGISTRY_URL) -> str:
    """Return the dist-tags endpoint for an unscoped package."""
    return f"{registry}/-/package/{name}/dist-tags"


@pytest.fixture
def settings() -> Settings:
    """Return default run settings."""
    return Settings(registry_url=REGISTRY_URL)


@pytest.fixture
def sample_dist_tags_payload() -> dict[str, Any]:
    """Return a dist-tags response as served by the npm registry."""
    return {
        "latest": "18.2.0",
        "next": "18.3.0-canary-a1b2c3",
        "canary": "18.3.0-canary-a1b2c3",
        "beta": "19.0.0-beta-26f2496093-20240514",
        "rc": "19.0.0-rc.1",
        "experimental": "0.0.0-experimental-a1b2c3",
    }


@pytest.fixture
def sample_dist_tags() -> DistTags:
    """Return DistTags with a stable release and two prerelease channels."""
    return DistTags(latest="2.1.0", next="3.0.0-rc.2", beta="3.0.0-beta.4")


@pytest.fixture
def sample_records() -> list[DependencyRecord]:
    """Return a small set of declared dependencies."""
    return [
        DependencyRecord(name="react", constraint="^18.2.0"),
        DependencyRecord(name="lodash", constraint="~4.17.20"),
        DependencyRecord(name="typescript", constraint="5.3.3"),
    ]


@pytest.fixture
def sample_candidates() -> list[UpdateCandidate]:
    """Return update candidates sorted by name."""
    return [
        UpdateCandidate(name="lodash", current_version="~4.17.20", candidate_version="4.17.21"),
        UpdateCandidate(name="react", current_version="^18.2.0", candidate_version="19.0.0"),
        UpdateCandidate(name="typescript", current_version="5.3.3", candidate_version="5.4.0"),
    ]
