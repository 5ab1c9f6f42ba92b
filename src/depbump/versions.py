"""Semantic version model.

Parses version strings and npm range expressions, orders versions, and
classifies how far apart two versions are. Parsing and range matching are
delegated to the semantic_version library; NpmSpec understands caret, tilde,
x-range, hyphen and ``||`` expressions as written in package.json files.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Optional

import semantic_version

# Everything before the first digit ("^", "~", ">=", "v", ...).
_PREFIX_PATTERN = re.compile(r"^\D*")
# A comparator followed by whitespace (">= 1.2.0", "~ 1.2.0").
_SPACED_COMPARATOR = re.compile(r"(<=|>=|<|>|=|\^|~)\s+")
# A "v" directly in front of a version number ("^v1.2.0", "v2.0.0").
_V_PREFIX = re.compile(r"(^|[\s<>=^~])v(?=\d)")


class VersionError(ValueError):
    """Raised when version or range text cannot be interpreted."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text


class InvalidVersion(VersionError):
    """The text is not a semantic version once its prefix is stripped."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "Invalid version")


class InvalidRange(VersionError):
    """The text is not a valid npm range expression."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "Invalid version range")


class VersionDiff(str, Enum):
    """Most significant numeric component that increased between two versions."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@total_ordering
@dataclass(frozen=True)
class VersionSpec:
    """An immutable parsed semantic version.

    Ordering follows semver precedence: numeric components first, then a
    version with prerelease identifiers sorts below the same release.
    Build metadata is kept for display but ignored by comparisons.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Prerelease identifiers (e.g., ("alpha", "1")).
        build: Build metadata identifiers.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _semver(self) -> semantic_version.Version:
        return semantic_version.Version(str(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionSpec):
            return NotImplemented
        return self._semver() < other._semver()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


@dataclass(frozen=True)
class RangeSpec:
    """An immutable parsed npm range expression.

    Attributes:
        raw: The expression as written (e.g., "^1.2.0").
    """

    raw: str
    _spec: semantic_version.NpmSpec = field(repr=False, compare=False)

    def satisfies(self, version: VersionSpec) -> bool:
        """Return True if the version falls inside this range."""
        return self._spec.match(version._semver())


def normalize_version(text: str) -> str:
    """Strip every character before the first digit.

    The removal is purely textual: "^1.2.0" and ">=1.2.0" both become "1.2.0".
    """
    return _PREFIX_PATTERN.sub("", text, count=1)


def parse_version(text: str) -> VersionSpec:
    """Parse a version string, ignoring any leading non-digit prefix.

    Args:
        text: Version text such as "1.2.3", "^1.2.3" or "v2.0.0-rc.1".

    Returns:
        The parsed VersionSpec.

    Raises:
        InvalidVersion: If the stripped text is not a semantic version.
    """
    try:
        parsed = semantic_version.Version(normalize_version(text))
    except ValueError as e:
        raise InvalidVersion(text) from e

    return VersionSpec(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        prerelease=tuple(parsed.prerelease),
        build=tuple(parsed.build),
    )


def _normalize_range(text: str) -> str:
    """Rewrite loose npm range syntax that NpmSpec rejects.

    npm allows whitespace between a comparator and its version and a "v"
    in front of each version.
    """
    text = _SPACED_COMPARATOR.sub(r"\1", text.strip())
    return _V_PREFIX.sub(r"\1", text)


def parse_range(text: str) -> RangeSpec:
    """Parse an npm range expression.

    A bare version is a valid range that matches exactly that version.
    Loose forms such as ">= 1.2.0" or "^v1.2.0" are normalized and retried.

    Raises:
        InvalidRange: If the expression cannot be parsed.
    """
    try:
        spec = semantic_version.NpmSpec(text)
    except ValueError:
        try:
            spec = semantic_version.NpmSpec(_normalize_range(text))
        except ValueError as e:
            raise InvalidRange(text) from e
    return RangeSpec(raw=text, _spec=spec)


def classify_diff(current: VersionSpec, candidate: VersionSpec) -> Optional[VersionDiff]:
    """Classify the bump from ``current`` to ``candidate``.

    Returns:
        None if the candidate is not strictly newer or differs only in its
        prerelease identifiers, otherwise the most significant numeric
        component that changed.
    """
    if candidate <= current:
        return None
    if candidate.major != current.major:
        return VersionDiff.MAJOR
    if candidate.minor != current.minor:
        return VersionDiff.MINOR
    if candidate.patch != current.patch:
        return VersionDiff.PATCH
    return None


def is_prerelease(version: VersionSpec) -> bool:
    """Return True if the version carries prerelease identifiers."""
    return version.is_prerelease
