"""
Password composition rule: characters from enough distinct groups.
"""

from __future__ import annotations

from typing import Sequence

from .config import DEFAULT_CONFIG


def represented_groups(password: str, groups: Sequence[str]) -> int:
    """
    Count the groups that have at least one character in ``password``.
    """
    chars = set(password)
    return sum(1 for group in groups if chars.intersection(group))


def meets_requirements(
    password: str,
    groups: Sequence[str] | None = None,
    min_groups: int | None = None,
) -> bool:
    """
    True if ``password`` contains characters from at least ``min_groups``
    of the character groups. Defaults to the four groups of DEFAULT_CONFIG
    with at most one of them missing.
    """
    if groups is None:
        groups = DEFAULT_CONFIG.character_groups
    if min_groups is None:
        min_groups = DEFAULT_CONFIG.min_groups
    return represented_groups(password, groups) >= min_groups
