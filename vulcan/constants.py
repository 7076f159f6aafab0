"""
Shared constants for the vulcan helpers.

Centralizes values used by more than one module so the loader, the
settings and the token-id helpers agree on them.
"""

# Base directory the configuration loader reads from when no other
# directory is configured (relative to the process working directory).
DEFAULT_CONFIG_DIR = "./configs"

# Composite ERC1155 token-id: one or more "<id>_<amount>" pairs joined by "&",
# or the same with "-" as the pair separator. A single string must use one
# separator throughout.
ERC1155_FORMAT_PATTERN = (
    r"[0-9]+_[0-9]+(?:&[0-9]+_[0-9]+)*"
    r"|[0-9]+-[0-9]+(?:&[0-9]+-[0-9]+)*"
)
ERC1155_PAIR_SEPARATOR = "&"
ERC1155_ID_SEPARATORS = ("_", "-")

# Signed base-10 integer, ASCII digits only
DECIMAL_INTEGER_PATTERN = r"[+-]?[0-9]+"

PARSE_ERROR_TEMPLATE = "Failed to parse configuration JSON: {error}"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
