from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Configuration(BaseModel):
    """Service configuration read from a JSON file at startup."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    evm_networks: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="evmNetworks",
        description="RPC endpoint URLs per EVM network"
    )
    valid_standards: List[str] = Field(
        default_factory=list,
        alias="validStandards",
        description="Token standards accepted by the service"
    )
    port: str = Field("", description="Listen address, e.g. ':8080'")

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        """Accept JSON keys in any casing; an exact match takes precedence."""
        if not isinstance(data, dict):
            return data
        keys = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            keys[key.lower()] = key
        matched = dict(data)
        for raw_key, value in data.items():
            if not isinstance(raw_key, str):
                continue
            key = keys.get(raw_key.lower())
            if key is not None and key not in matched:
                matched[key] = value
        return matched

    @property
    def networks(self) -> List[str]:
        """Configured network names, in file order."""
        return list(self.evm_networks)

    def rpc_urls(self, network: str) -> List[str]:
        """
        Get the endpoint URLs configured for a network.

        Returns an empty list for networks that are not configured.
        """
        return list(self.evm_networks.get(network, []))

    def is_valid_standard(self, standard: str) -> bool:
        """Check whether a token standard is accepted (case-insensitive)."""
        wanted = standard.lower()
        return any(s.lower() == wanted for s in self.valid_standards)
