# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101
- An optional leading "v" is accepted and discarded: v1.2.3
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Sequence, Union

from . import comparator
from .exceptions import SemverError
from .tokenizers import COERCE_PATTERN, INT_MAX, STRICT_PATTERN

if TYPE_CHECKING:
    from .ranges_expression import RangesExpression
    from .ranges_list import RangesList

logger = logging.getLogger(__name__)

Identifiers = Union[str, Sequence[str]]


class VersionDiff(IntEnum):
    """Most significant difference between two versions, ranked by severity."""

    NONE = 0
    BUILD = 1
    PRE_RELEASE = 2
    PATCH = 3
    MINOR = 4
    MAJOR = 5


def _parse_int(numeral: str) -> int:
    value = int(numeral)
    if value > INT_MAX:
        raise SemverError(f"Value [{numeral}] must be a number between 0 and {INT_MAX}")
    return value


def _split_identifiers(identifiers: Optional[Identifiers]) -> tuple[str, ...]:
    """Split a dot-delimited string (or pass through a sequence), dropping blanks."""
    if not identifiers:
        return ()
    if isinstance(identifiers, str):
        identifiers = identifiers.split(".")
    return tuple(part for part in identifiers if part.strip())


@dataclass(frozen=True, slots=True)
class Semver:
    """Represents a parsed semantic version.

    Equality is structural and includes build metadata. The ordering
    operators follow SemVer precedence, which ignores build metadata, so
    ``Semver.of("1.0.0+a") == Semver.of("1.0.0+b")`` is False while neither
    is lower than the other.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers (e.g. ("alpha", "1"))
        build: Build metadata identifiers (e.g. ("build", "123"))
        version: Canonical string form
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    version: str = field(init=False, repr=False, compare=False)

    ZERO: ClassVar[Semver]

    def __post_init__(self) -> None:
        if self.major < 0:
            raise SemverError(f"Major [{self.major}] should be >= 0")
        if self.minor < 0:
            raise SemverError(f"Minor [{self.minor}] should be >= 0")
        if self.patch < 0:
            raise SemverError(f"Patch [{self.patch}] should be >= 0")

        object.__setattr__(self, "pre_release", _split_identifiers(self.pre_release))
        object.__setattr__(self, "build", _split_identifiers(self.build))

        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += "-" + ".".join(self.pre_release)
        if self.build:
            version += "+" + ".".join(self.build)
        object.__setattr__(self, "version", version)

    @classmethod
    def of(cls, version_string: str) -> Semver:
        """Strictly parse a semantic version string.

        Args:
            version_string: A string of the form
                [v]MAJOR.MINOR.PATCH[-prerelease][+build]

        Returns:
            The parsed version

        Raises:
            SemverError: If the string is not valid semver, or if a numeral
                does not fit between 0 and INT_MAX

        Examples:
            >>> Semver.of("1.2.3-alpha.1+build.5")
            Semver(major=1, minor=2, patch=3, pre_release=('alpha', '1'), build=('build', '5'))
            >>> Semver.of("v2.0.0").version
            '2.0.0'
        """
        if not isinstance(version_string, str):
            raise SemverError(
                f"Version must be a string, got {type(version_string).__name__}"
            )

        match = STRICT_PATTERN.fullmatch(version_string)
        if match is None:
            raise SemverError(f"Version [{version_string}] is not a valid semver.")

        major, minor, patch, pre_release, build = match.groups()
        return cls(
            major=_parse_int(major),
            minor=_parse_int(minor),
            patch=_parse_int(patch),
            pre_release=_split_identifiers(pre_release),
            build=_split_identifiers(build),
        )

    def __str__(self) -> str:
        return self.version

    @property
    def is_stable(self) -> bool:
        """Return True for a released version of a public API (>= 1.0.0, no pre-release)."""
        return self.major > 0 and not self.pre_release

    # Comparison

    def compare_to(self, other: Union[Semver, str]) -> int:
        """Return -1, 0 or 1 comparing this version's precedence to ``other``."""
        return comparator.compare(self, _as_semver(other))

    def is_greater_than(self, other: Union[Semver, str]) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal_to(self, other: Union[Semver, str]) -> bool:
        return self.compare_to(other) >= 0

    def is_lower_than(self, other: Union[Semver, str]) -> bool:
        return self.compare_to(other) < 0

    def is_lower_than_or_equal_to(self, other: Union[Semver, str]) -> bool:
        return self.compare_to(other) <= 0

    def is_equivalent_to(self, other: Union[Semver, str]) -> bool:
        """Same precedence; build metadata is ignored."""
        return self.compare_to(other) == 0

    def is_equal_to(self, other: Union[Semver, str]) -> bool:
        """Structural equality; build metadata is significant."""
        return self == _as_semver(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return comparator.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return comparator.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return comparator.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return comparator.compare(self, other) >= 0

    def diff(self, other: Union[Semver, str]) -> VersionDiff:
        """Return the most significant field that differs from ``other``.

        Examples:
            >>> Semver.of("1.2.3").diff("1.3.0")
            <VersionDiff.MINOR: 4>
        """
        other = _as_semver(other)
        if self.major != other.major:
            return VersionDiff.MAJOR
        if self.minor != other.minor:
            return VersionDiff.MINOR
        if self.patch != other.patch:
            return VersionDiff.PATCH
        if self.pre_release != other.pre_release:
            return VersionDiff.PRE_RELEASE
        if self.build != other.build:
            return VersionDiff.BUILD
        return VersionDiff.NONE

    def is_api_compatible(self, other: Union[Semver, str]) -> bool:
        """Return True if ``other`` has the same major version."""
        return self.diff(other) < VersionDiff.MAJOR

    def satisfies(self, ranges: Union[str, RangesExpression, RangesList]) -> bool:
        """Check whether this version satisfies a range string, expression or list.

        Examples:
            >>> Semver.of("1.2.3").satisfies("^1.0.0")
            True
            >>> Semver.of("1.2.3-alpha").satisfies("*")
            False
        """
        from .factory import create_ranges_list
        from .ranges_list import RangesList

        if not isinstance(ranges, RangesList):
            ranges = create_ranges_list(ranges)
        return ranges.is_satisfied_by(self)

    def format(self, formatter: Callable[[Semver], str]) -> str:
        return formatter(self)

    # Derivations

    def next_major(self) -> Semver:
        """Return the next major release.

        A pre-release of a major version (1.0.0-5) bumps to that version (1.0.0).
        """
        if self.minor != 0 or self.patch != 0 or not self.pre_release:
            major = self.major + 1
        else:
            major = self.major
        return Semver(major, 0, 0, build=self.build)

    def next_minor(self) -> Semver:
        """Return the next minor release; 1.2.0-5 bumps to 1.2.0."""
        if self.patch != 0 or not self.pre_release:
            minor = self.minor + 1
        else:
            minor = self.minor
        return Semver(self.major, minor, 0, build=self.build)

    def next_patch(self) -> Semver:
        """Return the next patch release; 1.2.3-5 bumps to 1.2.3."""
        patch = self.patch if self.pre_release else self.patch + 1
        return Semver(self.major, self.minor, patch, build=self.build)

    def with_inc_major(self, number: int = 1) -> Semver:
        return Semver(self.major + number, self.minor, self.patch, self.pre_release, self.build)

    def with_inc_minor(self, number: int = 1) -> Semver:
        return Semver(self.major, self.minor + number, self.patch, self.pre_release, self.build)

    def with_inc_patch(self, number: int = 1) -> Semver:
        return Semver(self.major, self.minor, self.patch + number, self.pre_release, self.build)

    def with_pre_release(self, pre_release: Identifiers) -> Semver:
        return Semver(self.major, self.minor, self.patch, pre_release, self.build)

    def with_build(self, build: Identifiers) -> Semver:
        return Semver(self.major, self.minor, self.patch, self.pre_release, build)

    def with_cleared_pre_release(self) -> Semver:
        return self.with_pre_release(())

    def with_cleared_build(self) -> Semver:
        return self.with_build(())

    def with_cleared_pre_release_and_build(self) -> Semver:
        return Semver(self.major, self.minor, self.patch)


Semver.ZERO = Semver(0, 0, 0)


def _as_semver(version: Union[Semver, str]) -> Semver:
    return version if isinstance(version, Semver) else Semver.of(version)


def parse(version_string: Optional[str]) -> Optional[Semver]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> parse("1.0.0")
        Semver(major=1, minor=0, patch=0, pre_release=(), build=())
        >>> parse("INVALID") is None
        True
    """
    if version_string is None:
        return None
    try:
        return Semver.of(version_string)
    except SemverError:
        return None


def coerce(version_string: Optional[str]) -> Optional[Semver]:
    """Best-effort extraction of a version from a loosely formatted string.

    A strict parse is tried first. Otherwise the first run of up to three
    dot-separated numerals is used, with missing minor and patch set to 0.
    Numerals longer than 16 digits are skipped over.

    Args:
        version_string: Any string, or None

    Returns:
        The coerced version, or None if no numeral could be found

    Examples:
        >>> coerce("version 1.2")
        Semver(major=1, minor=2, patch=0, pre_release=(), build=())
        >>> coerce("v3.4 replaces v3.3.1").version
        '3.4.0'
        >>> coerce("INVALID") is None
        True
    """
    if version_string is None:
        return None

    strict = parse(version_string)
    if strict is not None:
        return strict

    match = COERCE_PATTERN.search(version_string)
    if match is None:
        return None

    _, major, minor, patch = match.groups()
    if int(major) > INT_MAX:
        logger.debug("Cannot coerce %r: major %s is out of range", version_string, major)
        return None

    def numeral_or_zero(numeral: Optional[str]) -> int:
        if numeral is None or int(numeral) > INT_MAX:
            return 0
        return int(numeral)

    coerced = Semver(int(major), numeral_or_zero(minor), numeral_or_zero(patch))
    logger.debug("Coerced %r to %s", version_string, coerced)
    return coerced


def is_valid(version_string: Optional[str]) -> bool:
    """Return True if the string is a strictly valid semantic version."""
    return parse(version_string) is not None
