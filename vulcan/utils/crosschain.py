"""Lookups over collections deployed on several EVM networks."""
from typing import Dict

# network name -> contract address
NetworkContractMap = Dict[str, str]

# collection id -> NetworkContractMap
CrossChainCollections = Dict[str, NetworkContractMap]


def get_crosschain_data(
    network: str,
    contract: str,
    collections: CrossChainCollections
) -> CrossChainCollections:
    """
    Find the collections deployed at a given contract on a given network.

    Args:
        network: Network name, e.g. "eth"
        contract: Contract address to match exactly on that network
        collections: Collection id -> per-network contract addresses

    Returns:
        Matching collection ids with copies of their full network maps.
        Empty when no collection matches; collections without the
        network never match.
    """
    return {
        collection_id: dict(contracts)
        for collection_id, contracts in collections.items()
        if network in contracts and contracts[network] == contract
    }
