"""Select the API client variant for a chain ID."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from antelope_chains.chain.provider import AntelopeClient, ClientOptions, TelosClient, WaxClient
from antelope_chains.chain.registry import lookup_key_by_id

logger = logging.getLogger(__name__)


class ClientKind(str, Enum):
    GENERIC = "generic"
    TELOS = "telos"
    WAX = "wax"


# Chains not listed here use the generic client
CHAIN_CLIENTS: Mapping[str, ClientKind] = MappingProxyType({
    "Antelope": ClientKind.GENERIC,
    "Telos": ClientKind.TELOS,
    "TelosTestnet": ClientKind.TELOS,
    "WAX": ClientKind.WAX,
    "WAXTestnet": ClientKind.WAX,
})

CLIENT_FACTORIES: Mapping[ClientKind, type[AntelopeClient]] = MappingProxyType({
    ClientKind.GENERIC: AntelopeClient,
    ClientKind.TELOS: TelosClient,
    ClientKind.WAX: WaxClient,
})


def client_kind_for(chain_id: Any) -> ClientKind:
    key = lookup_key_by_id(chain_id)
    if key is None:
        return ClientKind.GENERIC
    return CHAIN_CLIENTS.get(key, ClientKind.GENERIC)


def get_chain_client(chain_id: Any, options: ClientOptions | Mapping[str, Any]) -> AntelopeClient:
    """Build a client for a chain ID. Unknown chains get the generic client.

    ``options`` must provide the ``url``; it is never looked up here.
    """
    if not isinstance(options, ClientOptions):
        options = ClientOptions.model_validate(dict(options))
    kind = client_kind_for(chain_id)
    logger.debug(f"Using {kind.value} client for chain {chain_id} at {options.url}")
    return CLIENT_FACTORIES[kind].from_options(options)
