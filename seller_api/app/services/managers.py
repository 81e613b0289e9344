"""
Manager list helpers.
"""

from typing import Iterable, List


def merge_manager_ids(existing: Iterable[int], additional: Iterable[int]) -> List[int]:
    """Return the union of both ID collections without duplicates.

    The result is sorted only to make it deterministic; callers must
    treat it as a set.
    """
    return sorted(set(existing) | set(additional))
