import re
from typing import List, Optional, Sequence, Tuple

from ..constants import DECIMAL_INTEGER_PATTERN

_DECIMAL_INTEGER = re.compile(DECIMAL_INTEGER_PATTERN)


def str_to_bigint(number_str: str) -> Tuple[Optional[int], bool]:
    """
    Parse a base-10 string into an arbitrary-precision integer.

    Accepts an optional leading sign followed by ASCII digits only.

    Args:
        number_str: Decimal string (e.g. "123", "-42")

    Returns:
        (value, True) on success, (None, False) if the string is not
        a decimal integer
    """
    if not isinstance(number_str, str):
        return None, False

    if not _DECIMAL_INTEGER.fullmatch(number_str):
        return None, False

    return int(number_str), True


def count_elements(groups: Sequence[Sequence[int]]) -> List[int]:
    """
    Count, per group, the elements equal to that group's first element.

    An empty group has no first element and counts as 0.
    """
    counts = []
    for group in groups:
        if not group:
            counts.append(0)
            continue
        first = group[0]
        counts.append(sum(1 for value in group if value == first))
    return counts
