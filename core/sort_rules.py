"""
sort_rules.py - Batch Ordering Rules

Fixes the candidate order before preview. The preview itself never sorts:
the order given here decides which file gets which collision ordinal.
"""

from typing import List, Callable
from .models_fs import Candidate, SortKey


def get_sort_key(sort_by: SortKey) -> Callable[[Candidate], tuple]:
    """
    Get sort key function

    Args:
        sort_by: Sorting method

    Returns:
        Sort key function (ties broken by path)
    """
    if sort_by == SortKey.MTIME:
        return lambda c: (c.mtime, c.path.lower())
    elif sort_by == SortKey.CTIME:
        return lambda c: (c.created, c.path.lower())
    elif sort_by == SortKey.SIZE:
        return lambda c: (c.size, c.path.lower())
    elif sort_by == SortKey.PATH:
        return lambda c: (c.path.lower(),)
    else:
        return lambda c: (c.name.lower(), c.path.lower())


def sort_candidates(
    candidates: List[Candidate],
    sort_by: SortKey = SortKey.NAME,
    reverse: bool = False
) -> List[Candidate]:
    """
    Sort candidate list

    Args:
        candidates: Candidate list
        sort_by: Sorting method
        reverse: Whether to sort in reverse

    Returns:
        Sorted candidate list (new list)
    """
    return sorted(candidates, key=get_sort_key(sort_by), reverse=reverse)
