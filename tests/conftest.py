"""
Pytest configuration and shared fixtures.
"""
import json

import pytest

from vulcan.config import get_settings


SAMPLE_CONFIG = {
    "evmNetworks": {
        "eth": ["wss://ethereum.publicnode.com", "https://eth.llamarpc.com"],
        "trn": ["https://root.rootnet.live/archive"],
        "arb": ["https://arb1.arbitrum.io/rpc"],
        "frame": ["https://rpc.testnet.frame.xyz/http"]
    },
    "validStandards": ["erc20", "token", "erc721", "nft", "sft", "erc1155"],
    "port": ":8080"
}


@pytest.fixture
def config_dir(tmp_path):
    """Create an empty configuration directory."""
    directory = tmp_path / "configs"
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(config_dir):
    """Write raw text into a file inside the configuration directory."""
    def _write(name, content):
        path = config_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_config_file(write_config):
    """Write the sample configuration as config.json."""
    return write_config("config.json", json.dumps(SAMPLE_CONFIG))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
