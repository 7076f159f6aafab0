"""
Unit tests for ERC1155 composite token-id helpers.
"""
from unittest.mock import patch

import pytest

from vulcan.utils import token_format
from vulcan.utils.token_format import is_valid_erc1155_format, parse_erc1155_ids


class TestIsValidERC1155Format:
    """Tests for is_valid_erc1155_format."""

    @pytest.mark.parametrize("value", [
        "955_921",
        "955-921",
        "955_921&1_2",
        "955-921&1-2",
        "0_0",
        "1_2&3_4&5_6&7_8",
    ])
    def test_valid_formats(self, value):
        assert is_valid_erc1155_format(value)

    @pytest.mark.parametrize("value", [
        "",
        "abc_1",
        "955_921&1-2",  # mixed separators
        "955-921&1_2",
        "955",
        "955_",
        "_921",
        "955_921&",
        "&955_921",
        "955_921&&1_2",
        "955_921_3",
        "x955_921",
        "955_921x",
        "955_921\n",
        "955 921",
        "-955_921",
    ])
    def test_invalid_formats(self, value):
        assert not is_valid_erc1155_format(value)

    def test_non_string_input(self):
        assert not is_valid_erc1155_format(None)
        assert not is_valid_erc1155_format(955921)

    def test_pattern_compiled_once(self):
        """The module holds a compiled pattern."""
        assert token_format.ERC1155_FORMAT is not None
        assert token_format.ERC1155_FORMAT.pattern

    def test_broken_pattern_never_matches(self, caplog):
        """A pattern that fails to compile is logged and fails closed."""
        with caplog.at_level("ERROR", logger="vulcan.utils.token_format"):
            broken = token_format._compile_format("[0-9")
        assert broken is None
        assert "Invalid ERC1155 format pattern" in caplog.text

        with patch.object(token_format, "ERC1155_FORMAT", None):
            assert not is_valid_erc1155_format("955_921")


class TestParseERC1155Ids:
    """Tests for parse_erc1155_ids."""

    def test_single_pair(self):
        assert parse_erc1155_ids("955_921") == ([955], [921])

    def test_multiple_pairs_dash(self):
        assert parse_erc1155_ids("955-921&1-2&3-4") == ([955, 1, 3], [921, 2, 4])

    def test_large_ids(self):
        token_id = "1" * 78  # uint256-sized id
        ids, amounts = parse_erc1155_ids(f"{token_id}_5")
        assert ids == [int(token_id)]
        assert amounts == [5]

    def test_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid ERC1155 token id format"):
            parse_erc1155_ids("955_921&1-2")
        with pytest.raises(ValueError, match="Invalid ERC1155 token id format"):
            parse_erc1155_ids("")
