# SPDX-License-Identifier: MIT
"""Semantic version value type.

This package provides an immutable Version type that parses, validates,
renders, compares and increments versions following the SemVer 2.0.0
specification.

Example:
    >>> from semver_value import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version.increment_minor())
    '1.3.0'
    >>>
    >>> is_valid_semver("1.0.0-01")
    False
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    MalformedVersionError,
    NegativeComponentError,
    EmptyIdentifierError,
    LeadingZeroIdentifierError,
)
from .config import (
    BuildPolicy,
    ConfigError,
    VersionConfig,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_identifiers,
    compare_versions,
    version_key,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "MalformedVersionError",
    "NegativeComponentError",
    "EmptyIdentifierError",
    "LeadingZeroIdentifierError",
    # Configuration
    "BuildPolicy",
    "ConfigError",
    "VersionConfig",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_identifiers",
    "compare_versions",
    "version_key",
]
