"""Dotted-numeric version comparison and latest version directory selection."""

from __future__ import annotations

from edge_plugins.errors import InvalidVersionFormat, NoVersionFound
from edge_plugins.models import VersionEntry, VersionRelation

_OPERATORS = {relation.value: relation for relation in VersionRelation}


def parse_version(version: str) -> tuple[int, ...]:
    """Parse "1.2.3" into (1, 2, 3).

    Raises:
        InvalidVersionFormat: if the string is empty or any component is not
            a non-negative integer.
    """
    if not version:
        raise InvalidVersionFormat(version)
    parts = version.split(".")
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidVersionFormat(version)
    return tuple(int(part) for part in parts)


def compare_versions(compared: str, comparator: str) -> VersionRelation:
    """Return how ``compared`` relates to ``comparator``.

    The shorter version is right-padded with zeros, so "1.2" == "1.2.0".
    """
    left = parse_version(compared)
    right = parse_version(comparator)
    if compared == comparator:
        return VersionRelation.EQUAL

    width = max(len(left), len(right))
    left += (0,) * (width - len(left))
    right += (0,) * (width - len(right))

    for a, b in zip(left, right):
        if a > b:
            return VersionRelation.GREATER
        if a < b:
            return VersionRelation.LESS
    return VersionRelation.EQUAL


def make_version_comparison(compared: str, operator: str, comparator: str) -> bool:
    """Return True if ``compared <operator> comparator`` holds.

    Only "<", ">" and "==" are accepted; any other operator returns False.
    """
    relation = _OPERATORS.get(operator)
    if relation is None:
        return False
    return compare_versions(compared, comparator) is relation


def normalize_version(directory_name: str) -> str:
    """Turn a version directory name such as "1.2.3_0" into "1.2.3.0"."""
    return directory_name.replace("_", ".", 1)


def version_entry(directory_name: str) -> VersionEntry:
    return VersionEntry(
        raw_directory_name=directory_name,
        normalized_version=normalize_version(directory_name),
    )


def partition_version_directories(version_dirs: list[str]) -> tuple[list[str], list[str]]:
    """Split directory names into (valid, malformed), keeping their order.

    A name is valid when its normalized form parses as a dotted-numeric
    version. The scanner only checks a "N.N" prefix, so "1.2.beta" gets here.
    """
    valid: list[str] = []
    malformed: list[str] = []
    for name in version_dirs:
        try:
            parse_version(normalize_version(name))
        except InvalidVersionFormat:
            malformed.append(name)
        else:
            valid.append(name)
    return valid, malformed


def select_latest(version_dirs: list[str]) -> str:
    """Pick the directory name holding the highest version.

    The first entry seeds the running maximum; later entries replace it only
    when strictly greater, so the first seen wins on ties.

    Raises:
        NoVersionFound: if ``version_dirs`` is empty.
        InvalidVersionFormat: if a compared entry is not dotted-numeric.
    """
    if not version_dirs:
        raise NoVersionFound("No version directory to select from")

    latest = version_dirs[0]
    latest_version = normalize_version(latest)
    for candidate in version_dirs[1:]:
        candidate_version = normalize_version(candidate)
        if make_version_comparison(candidate_version, ">", latest_version):
            latest = candidate
            latest_version = candidate_version
    return latest
