# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and increments.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7, -0A
- Build metadata: +001, +build.1.2.3, +exp.sha.5114f85, +20130313144700

Versions are immutable. The increment methods return new instances and clear
build metadata unless asked to keep it with BuildPolicy.KEEP.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from .config import BuildPolicy
from .errors import (
    EmptyIdentifierError,
    InvalidVersionError,
    LeadingZeroIdentifierError,
    MalformedVersionError,
    NegativeComponentError,
)

logger = logging.getLogger(__name__)

# Overall shape of a version string. Identifier sections are matched loosely
# here and split and checked by _validate_identifiers, so that empty
# identifiers and leading zeros are reported distinctly.
SEMVER_PATTERN = re.compile(
    r"(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z.-]*))?"
)

_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")

PRERELEASE = "pre-release"
BUILD = "build"


def _is_numeric(identifier: str) -> bool:
    """Return True if the identifier consists of ASCII digits only."""
    return identifier.isascii() and identifier.isdigit()


def _numeric_key(identifier: str) -> tuple[int, str]:
    """Return a key ordering numeric identifiers by value without int().

    Longer digit runs are larger once leading zeros are dropped, so this
    stays exact for identifiers past the int/str conversion limit.
    """
    digits = identifier.lstrip("0") or "0"
    return (len(digits), digits)


def _increment_numeric(identifier: str) -> str:
    """Add one to a numeric identifier, working on the digit string."""
    head = identifier.rstrip("9")
    carried = "0" * (len(identifier) - len(head))
    if not head:
        return "1" + carried
    return head[:-1] + "123456789"[int(head[-1])] + carried


def _validate_identifiers(version: str, text: str, part: str) -> None:
    """Check every dot-separated identifier of a pre-release or build string."""
    for identifier in text.split("."):
        if not identifier:
            raise EmptyIdentifierError(version, part)
        if not _IDENTIFIER.fullmatch(identifier):
            raise MalformedVersionError(
                version,
                f"{part} identifier {identifier!r} may only contain [0-9A-Za-z-]",
            )
        # Build identifiers carry no precedence, so "001" is fine there
        if (
            part == PRERELEASE
            and _is_numeric(identifier)
            and identifier.startswith("0")
            and identifier != "0"
        ):
            raise LeadingZeroIdentifierError(version, identifier)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a validated semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" if none
        build: Build metadata (e.g., "build.123", "001"), "" if none

    Equality covers all five fields. Ordering follows semantic versioning
    precedence and ignores build metadata, so two versions can be neither
    less nor greater than each other without being equal.

    Raises:
        NegativeComponentError: If major, minor or patch is negative or not an int
        EmptyIdentifierError: If an identifier is empty
        LeadingZeroIdentifierError: If a numeric pre-release identifier has a leading zero
        MalformedVersionError: If an identifier contains characters outside [0-9A-Za-z-]
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        if self.prerelease is None:
            object.__setattr__(self, "prerelease", "")
        if self.build is None:
            object.__setattr__(self, "build", "")

        for component in ("major", "minor", "patch"):
            value = getattr(self, component)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise NegativeComponentError(self._describe(), component)

        # Every valid version must render, and str() of an int is bounded by
        # the interpreter's int/str conversion limit
        for component in ("major", "minor", "patch"):
            try:
                str(getattr(self, component))
            except ValueError:
                raise MalformedVersionError(
                    self._describe(), f"{component} version has too many digits"
                ) from None

        for part, text in ((PRERELEASE, self.prerelease), (BUILD, self.build)):
            if not isinstance(text, str):
                raise MalformedVersionError(
                    str(self), f"{part} must be a string, got {type(text).__name__}"
                )
            if text:
                _validate_identifiers(str(self), text, part)

    def _describe(self) -> str:
        try:
            return str(self)
        except ValueError:
            return "<version with an oversized component>"

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def _compare(self, other: Any) -> Optional[int]:
        from .compare import compare_versions

        if not isinstance(other, Version):
            return None
        return compare_versions(self, other)

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    @property
    def is_stable(self) -> bool:
        """Return True if this version has no pre-release."""
        return not self.prerelease

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def increment_major(self, build_policy: Union[BuildPolicy, str, None] = None) -> "Version":
        """Return the next major version: X+1.0.0, pre-release cleared."""
        return self._successor(self.major + 1, 0, 0, "", build_policy)

    def increment_minor(self, build_policy: Union[BuildPolicy, str, None] = None) -> "Version":
        """Return the next minor version: X.Y+1.0, pre-release cleared."""
        return self._successor(self.major, self.minor + 1, 0, "", build_policy)

    def increment_patch(self, build_policy: Union[BuildPolicy, str, None] = None) -> "Version":
        """Return the next patch version: X.Y.Z+1, pre-release cleared."""
        return self._successor(self.major, self.minor, self.patch + 1, "", build_policy)

    def increment_prerelease(
        self, build_policy: Union[BuildPolicy, str, None] = None
    ) -> "Version":
        """Return the next pre-release of the same core version.

        A version without pre-release gets "1". Otherwise a numeric last
        identifier is incremented ("alpha.1" -> "alpha.2") and a non-numeric
        one gets ".1" appended ("alpha" -> "alpha.1").

        Examples:
            >>> Version(1, 0, 0, "rc.9").increment_prerelease()
            Version(major=1, minor=0, patch=0, prerelease='rc.10', build='')
        """
        if not self.prerelease:
            prerelease = "1"
        else:
            identifiers = self.prerelease.split(".")
            if _is_numeric(identifiers[-1]):
                identifiers[-1] = _increment_numeric(identifiers[-1])
            else:
                identifiers.append("1")
            prerelease = ".".join(identifiers)
        return self._successor(self.major, self.minor, self.patch, prerelease, build_policy)

    def _successor(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: str,
        build_policy: Union[BuildPolicy, str, None],
    ) -> "Version":
        policy = BuildPolicy(build_policy or BuildPolicy.CLEAR)
        build = self.build if policy is BuildPolicy.KEEP else ""
        return Version(major, minor, patch, prerelease, build)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is rejected.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not match the version grammar
        EmptyIdentifierError: If a pre-release or build identifier is empty
        LeadingZeroIdentifierError: If a numeric pre-release identifier has a leading zero

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha+001")
        Version(major=1, minor=0, patch=0, prerelease='alpha', build='001')
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise MalformedVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        logger.debug("Rejected malformed version %r", version_string)
        raise MalformedVersionError(version_string)

    try:
        # A bare "-" or "+" separator leaves an empty identifier behind
        for part, group in ((PRERELEASE, "prerelease"), (BUILD, "buildmetadata")):
            if match.group(group) == "":
                raise EmptyIdentifierError(version_string, part)

        core = {}
        for component in ("major", "minor", "patch"):
            try:
                core[component] = int(match.group(component))
            except ValueError:
                # Past the interpreter's int/str conversion limit
                raise MalformedVersionError(
                    version_string, f"{component} version has too many digits"
                ) from None

        return Version(
            **core,
            prerelease=match.group("prerelease"),
            build=match.group("buildmetadata"),
        )
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
