# SPDX-License-Identifier: MIT
"""Exception classes raised while building or parsing versions.

Every failure subclasses InvalidVersionError (itself a ValueError), so callers
can catch the whole family at once or discriminate on the root cause.
"""

from __future__ import annotations

from typing import Any

INVALID_FORMAT_MESSAGE = (
    "invalid version format: must be in the form X.Y.Z[-PRERELEASE][+BUILD]"
)


class InvalidVersionError(ValueError):
    """Raised when a version does not follow semantic versioning.

    Attributes:
        version: The offending input, rendered as a string
        message: Human-readable error message
    """

    def __init__(self, version: Any, message: str = ""):
        self.version = str(version)
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class MalformedVersionError(InvalidVersionError):
    """The input does not match the X.Y.Z[-PRERELEASE][+BUILD] grammar."""

    def __init__(self, version: Any, message: str = ""):
        super().__init__(version, message or INVALID_FORMAT_MESSAGE)


class NegativeComponentError(InvalidVersionError):
    """A major, minor or patch component is negative or not an integer."""

    def __init__(self, version: Any, component: str):
        self.component = component
        super().__init__(
            version, f"{component} version must be numeric, and non-negative"
        )


class EmptyIdentifierError(InvalidVersionError):
    """A pre-release or build identifier is empty."""

    def __init__(self, version: Any, part: str):
        self.part = part
        super().__init__(version, f"{part} identifiers must not be empty")


class LeadingZeroIdentifierError(InvalidVersionError):
    """A numeric pre-release identifier carries a leading zero."""

    def __init__(self, version: Any, identifier: str):
        self.identifier = identifier
        super().__init__(
            version,
            f"numeric pre-release identifiers must not have leading zeros: {identifier!r}",
        )
