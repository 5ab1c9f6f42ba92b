"""Update policy: which registry version to consider and whether it counts.

Both functions are pure and synchronous; they never touch the network.
"""

import logging
from typing import Optional

from depbump.models import DistTags, UpdateTarget
from depbump.versions import (
    InvalidVersion,
    VersionDiff,
    VersionSpec,
    classify_diff,
    parse_range,
    parse_version,
)

logger = logging.getLogger(__name__)

_TIERS = {
    UpdateTarget.MAJOR: VersionDiff.MAJOR,
    UpdateTarget.MINOR: VersionDiff.MINOR,
    UpdateTarget.PATCH: VersionDiff.PATCH,
}


def highest_prerelease(dist_tags: DistTags) -> Optional[str]:
    """Return the highest parsable prerelease channel version.

    Every populated channel is parsed and compared; channels whose value is
    not a semantic version are skipped. On a tie the higher-ranked channel
    wins.

    Args:
        dist_tags: Registry dist-tags for one package.

    Returns:
        The winning channel's version string, or None if no channel parses.
    """
    best: Optional[tuple[VersionSpec, str]] = None
    for channel, value in dist_tags.channels():
        try:
            version = parse_version(value)
        except InvalidVersion:
            logger.debug("Ignoring unparsable %s dist-tag %r", channel, value)
            continue
        if best is None or version > best[0]:
            best = (version, value)
    return best[1] if best else None


def resolve_candidate(dist_tags: DistTags, target: UpdateTarget) -> Optional[str]:
    """Select the registry version to evaluate for the given target.

    Args:
        dist_tags: Registry dist-tags for one package.
        target: Active update target.

    Returns:
        The candidate version string. Every target except PRE uses "latest";
        PRE uses the highest prerelease channel and falls back to "latest".
    """
    if target is UpdateTarget.PRE:
        return highest_prerelease(dist_tags) or dist_tags.latest
    return dist_tags.latest


def should_update(
    current_constraint: str,
    current_version: str,
    candidate_version: str,
    target: UpdateTarget,
) -> bool:
    """Decide whether the candidate is an update under the given target.

    Args:
        current_constraint: Constraint as declared in the manifest.
        current_version: Current version text; any leading non-digit prefix
            is stripped before parsing.
        candidate_version: Version chosen by resolve_candidate().
        target: Active update target.

    Returns:
        True if the candidate should be offered as an update.

    Raises:
        InvalidVersion: If either version does not parse.
        InvalidRange: If target is SEMVER and the constraint is not a range.
    """
    current = parse_version(current_version)
    candidate = parse_version(candidate_version)

    if target is UpdateTarget.PRE:
        return candidate.is_prerelease and candidate > current

    if candidate <= current:
        return False

    if target is UpdateTarget.LATEST:
        return not current.is_prerelease

    if target is UpdateTarget.SEMVER:
        return parse_range(current_constraint).satisfies(candidate)

    return classify_diff(current, candidate) == _TIERS[target]
