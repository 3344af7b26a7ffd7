from chain_utils.chains.registry import (
    DEFAULT_CHAINS,
    ChainRegistry,
    chain_id_key,
    get_default_registry,
)

__all__ = ["DEFAULT_CHAINS", "ChainRegistry", "chain_id_key", "get_default_registry"]
