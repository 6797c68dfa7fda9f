# SPDX-License-Identifier: MIT
"""Version comparison following semantic versioning precedence.

Pre-release ordering: numeric identifiers compare as integers and sort before
alphanumeric ones, alphanumeric identifiers compare in ASCII order, and a
shorter run of identifiers sorts before a longer one it prefixes:
1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0-beta.2
< 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version, _is_numeric, _numeric_key


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_identifiers(pre1: str, pre2: str) -> int:
    """Compare two dot-separated pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Examples:
        >>> compare_identifiers("alpha", "alpha.1")
        -1
        >>> compare_identifiers("alpha.2", "alpha.10")
        -1
        >>> compare_identifiers("1", "alpha")
        -1
    """
    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            result = _sign(_numeric_key(p1), _numeric_key(p2))
        elif is_num1:
            # Numeric < alphanumeric
            return -1
        elif is_num2:
            return 1
        else:
            result = _sign(p1, p2)

        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(parts1), len(parts2))


def _compare_prerelease(pre1: str, pre2: str) -> int:
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1
    return compare_identifiers(pre1, pre2)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0-alpha")
        1
        >>> compare_versions("1.0.0+001", "1.0.0+002")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    # Build metadata is ignored
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases get (1,) to sort after every (0, ...) pre-release key
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0, *_numeric_key(part)))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
