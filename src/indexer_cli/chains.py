"""Mapping between CAIP-2 chain ids and the short network aliases shown to users."""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

CAIP2_BY_CHAIN_ALIAS: Dict[str, str] = {
    "mainnet": "eip155:1",
    "goerli": "eip155:5",
    "gnosis": "eip155:100",
    "hardhat": "eip155:1337",
    "arbitrum-one": "eip155:42161",
    "arbitrum-goerli": "eip155:421613",
    "sepolia": "eip155:11155111",
    "arbitrum-sepolia": "eip155:421614",
}

CHAIN_ALIAS_BY_CAIP2: Dict[str, str] = {caip2: alias for alias, caip2 in CAIP2_BY_CHAIN_ALIAS.items()}


def resolve_chain_alias(chain_id: str) -> str:
    """Return the alias for a CAIP-2 id, or the input unchanged if it has none."""
    alias = CHAIN_ALIAS_BY_CAIP2.get(chain_id)
    if alias is None:
        logger.debug(f"No network alias for {chain_id!r}, leaving as is")
        return chain_id
    return alias
