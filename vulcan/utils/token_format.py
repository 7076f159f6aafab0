"""
ERC1155 composite token-id helpers.

A composite token-id batches one or more (id, amount) pairs, e.g.
"955_921&1_2" or "955-921&1-2".
"""
import logging
import re
from typing import List, Optional, Pattern, Tuple

from ..constants import (
    ERC1155_FORMAT_PATTERN,
    ERC1155_ID_SEPARATORS,
    ERC1155_PAIR_SEPARATOR,
)

logger = logging.getLogger(__name__)


def _compile_format(pattern: str) -> Optional[Pattern[str]]:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.error(f"Invalid ERC1155 format pattern {pattern!r}: {e}")
        return None


# None when the pattern failed to compile; validation then never matches
ERC1155_FORMAT = _compile_format(ERC1155_FORMAT_PATTERN)


def is_valid_erc1155_format(value: str) -> bool:
    """Check that value is a composite token-id with a single separator."""
    if ERC1155_FORMAT is None or not isinstance(value, str):
        return False
    return ERC1155_FORMAT.fullmatch(value) is not None


def parse_erc1155_ids(value: str) -> Tuple[List[int], List[int]]:
    """
    Split a composite token-id into token ids and amounts.

    Args:
        value: Composite token-id such as "955_921&1_2"

    Returns:
        Tuple of (ids, amounts), in pair order

    Raises:
        ValueError: If value is not a valid composite token-id
    """
    if not is_valid_erc1155_format(value):
        raise ValueError(f"Invalid ERC1155 token id format: {value!r}")

    separator = next(s for s in ERC1155_ID_SEPARATORS if s in value)
    ids = []
    amounts = []
    for pair in value.split(ERC1155_PAIR_SEPARATOR):
        token_id, amount = pair.split(separator)
        ids.append(int(token_id))
        amounts.append(int(amount))
    return ids, amounts
