from .crosschain import CrossChainCollections, NetworkContractMap, get_crosschain_data
from .number_utils import count_elements, str_to_bigint
from .token_format import is_valid_erc1155_format, parse_erc1155_ids

__all__ = [
    "CrossChainCollections",
    "NetworkContractMap",
    "count_elements",
    "get_crosschain_data",
    "is_valid_erc1155_format",
    "parse_erc1155_ids",
    "str_to_bigint"
]
