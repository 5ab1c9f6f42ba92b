"""depbump - check npm dependencies for newer registry versions.

This package resolves, for every direct dependency of a package.json, whether
the registry has a newer version under the chosen update target, and can
install the updates the user selects.
"""

__version__ = "0.1.0"

from depbump.config import RegistryOptions, Settings
from depbump.models import (
    DependencyRecord,
    DependencySelection,
    DistTags,
    UpdateCandidate,
    UpdateTarget,
)
from depbump.policy import resolve_candidate, should_update
from depbump.versions import (
    InvalidRange,
    InvalidVersion,
    RangeSpec,
    VersionDiff,
    VersionError,
    VersionSpec,
    classify_diff,
    is_prerelease,
    parse_range,
    parse_version,
)

__all__ = [
    "__version__",
    "DependencyRecord",
    "DependencySelection",
    "DistTags",
    "InvalidRange",
    "InvalidVersion",
    "RangeSpec",
    "RegistryOptions",
    "Settings",
    "UpdateCandidate",
    "UpdateTarget",
    "VersionDiff",
    "VersionError",
    "VersionSpec",
    "classify_diff",
    "is_prerelease",
    "parse_range",
    "parse_version",
    "resolve_candidate",
    "should_update",
]
