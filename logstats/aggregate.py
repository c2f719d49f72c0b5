"""Log Stats - Frequency aggregation"""

from collections import Counter
from typing import Hashable, Iterable, List, Tuple

from .patterns import DEFAULT_TOP


def frequency_table(values: Iterable[Hashable]) -> Counter:
    # Counter keeps first-seen order, which decides ties below
    return Counter(values)


def top_entries(values: Iterable[Hashable], k: int = DEFAULT_TOP) -> List[Tuple[Hashable, int]]:
    """(value, count) pairs for the k most frequent values.

    Ordered by descending count; equal counts keep first-seen order.
    """
    if k <= 0:
        return []
    return frequency_table(values).most_common(k)


def top_values(values: Iterable[Hashable], k: int = DEFAULT_TOP) -> List[Hashable]:
    return [value for value, _ in top_entries(values, k)]


def unique_count(values: Iterable[Hashable]) -> int:
    return len(set(values))
