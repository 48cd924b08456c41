"""Chain registry mapping symbolic keys to chain definitions."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

from antelope_chains.models.schema import ChainDefinition, Logo
from antelope_chains.models.types import checksum256

UNKNOWN_CHAIN_NAME = "Unknown blockchain"

LOGO_BASE_URL = "https://assets.wharfkit.com/chain"


class NotFoundError(KeyError):
    """No registry entry exists for the requested key."""


class ChainRegistry(Mapping[str, ChainDefinition]):
    """Read-only mapping of chain keys. Lookups return independent copies."""

    def __init__(self, chains: dict[str, ChainDefinition]):
        self._chains = MappingProxyType(dict(chains))

    def __getitem__(self, key: str) -> ChainDefinition:
        if key not in self._chains:
            raise NotFoundError(f"Unknown chain '{key}'. Supported: {list(self._chains)}")
        return self._chains[key].model_copy(deep=True)

    def __contains__(self, key: object) -> bool:
        return key in self._chains

    def __iter__(self) -> Iterator[str]:
        return iter(self._chains)

    def __len__(self) -> int:
        return len(self._chains)


CHAINS = ChainRegistry({
    "EOS": ChainDefinition(
        id="aca376f206b8fc25a6ed44dbdc66547c36c6c33e3a119ffbeaef943642f0e906",
        url="https://eos.greymass.com",
        name="EOS",
        logo=f"{LOGO_BASE_URL}/eos.png",
        explorer={"prefix": "https://bloks.io/transaction/", "suffix": ""},
    ),
    "FIO": ChainDefinition(
        id="21dcae42c0182200e93f954a074011f9048a7624c6fe81d3c9541a614a88bd1c",
        url="https://fio.greymass.com",
        name="FIO",
        logo=f"{LOGO_BASE_URL}/fio.png",
        explorer={"prefix": "https://fio.bloks.io/transaction/", "suffix": ""},
    ),
    "FIOTestnet": ChainDefinition(
        id="b20901380af44ef59c5918439a1f9a41d83669020319a80574b804a5f95cbd7e",
        url="https://fiotestnet.greymass.com",
        name="FIO (Testnet)",
        logo=f"{LOGO_BASE_URL}/fio.png",
        explorer={"prefix": "https://fio-test.bloks.io/transaction/", "suffix": ""},
    ),
    "Jungle4": ChainDefinition(
        id="73e4385a2708e6d7048834fbc1079f2fabb17b3c125b146af438971e90716c4d",
        url="https://jungle4.greymass.com",
        name="Jungle 4 (Testnet)",
        logo=f"{LOGO_BASE_URL}/jungle.png",
    ),
    "KylinTestnet": ChainDefinition(
        id="5fff1dae8dc8e2fc4d5b23b2c7665c97f9e9d8edf2b6485a86ba311c25639191",
        url="https://api.kylin.alohaeos.com",
        name="Kylin (Testnet)",
    ),
    "Libre": ChainDefinition(
        id="38b1d7815474d0c60683ecbea321d723e83f5da6ae5f1c1f9fecc69d9ba96465",
        url="https://libre.greymass.com",
        name="Libre",
        logo=f"{LOGO_BASE_URL}/libre.png",
        explorer={"prefix": "https://www.libreblocks.io/tx/", "suffix": ""},
    ),
    "LibreTestnet": ChainDefinition(
        id="b64646740308df2ee06c6b72f34c0f7fa066d940e831f752db2006fcc2b78dee",
        url="https://libretestnet.greymass.com",
        name="Libre (Testnet)",
        logo=f"{LOGO_BASE_URL}/libre.png",
    ),
    "Proton": ChainDefinition(
        id="384da888112027f0321850a169f737c33e53b388aad48b5adace4bab97f437e0",
        url="https://proton.greymass.com",
        name="Proton",
        logo=f"{LOGO_BASE_URL}/proton.png",
        explorer={"prefix": "https://www.protonscan.io/transaction/", "suffix": ""},
    ),
    "ProtonTestnet": ChainDefinition(
        id="71ee83bcf52142d61019d95f9cc5427ba6a0d7ff8accd9e2088ae2abeaf3d3dd",
        url="https://proton-testnet.greymass.com",
        name="Proton (Testnet)",
        logo=f"{LOGO_BASE_URL}/proton.png",
    ),
    "Telos": ChainDefinition(
        id="4667b205c6838ef70ff7988f6e8257e8be0e1284a2f59699054a018f743b1d11",
        url="https://telos.greymass.com",
        name="Telos",
        logo=f"{LOGO_BASE_URL}/telos.png",
        explorer={"prefix": "https://explorer.telos.net/transaction/", "suffix": ""},
    ),
    "TelosTestnet": ChainDefinition(
        id="1eaa0824707c8c16bd25145493bf062aecddfeb56c736f6ba6397f3195f33c9f",
        url="https://telos.greymass.com",
        name="Telos (Testnet)",
        logo=f"{LOGO_BASE_URL}/telos.png",
    ),
    "WAX": ChainDefinition(
        id="1064487b3cd1a897ce03ae5b6a865651747e2e152090f99c1d19d44e01aea5a4",
        url="https://wax.greymass.com",
        name="WAX",
        logo=f"{LOGO_BASE_URL}/wax.png",
        explorer={"prefix": "https://waxblock.io/transaction/", "suffix": ""},
    ),
    "WAXTestnet": ChainDefinition(
        id="f16b1833c747c43682f4386fca9cbb327929334a762755ebec17f6f23c9b8a12",
        url="https://waxtestnet.greymass.com",
        name="WAX (Testnet)",
        logo=f"{LOGO_BASE_URL}/wax.png",
    ),
    "UX": ChainDefinition(
        id="8fc6dce7942189f842170de953932b1f66693ad3788f766e777b6f9d22335c02",
        url="https://api.uxnetwork.io",
        name="UX Network",
        logo=f"{LOGO_BASE_URL}/ux.png",
        explorer={"prefix": "https://explorer.uxnetwork.io/tx/", "suffix": ""},
    ),
})


def _index_by_id(chains: Mapping[str, ChainDefinition]) -> dict[str, str]:
    index: dict[str, str] = {}
    for key, chain in chains.items():
        if chain.id in index:
            raise ValueError(f"Chain ID {chain.id} is registered as both '{index[chain.id]}' and '{key}'")
        index[chain.id] = key
    return index


CHAIN_IDS_TO_KEYS: Mapping[str, str] = MappingProxyType(_index_by_id(CHAINS))

# Side tables for definitions built outside the registry without name or logo
CHAIN_NAMES: Mapping[str, str] = MappingProxyType({
    "Antelope": "Unknown Antelope Chain",
    **{key: chain.stored_name for key, chain in CHAINS.items()},
})

CHAIN_LOGOS: Mapping[str, Logo] = MappingProxyType({
    # Jungle 3, retired but still seen in saved sessions
    "2a02a0053e5a8cf73a56ba0fda11e4d92e0238a4a2aa74fccf46d5a910746840": Logo.model_validate(
        f"{LOGO_BASE_URL}/jungle.png"
    ),
    **{chain.id: chain.logo for chain in CHAINS.values() if chain.logo},
})


def get_chain(key: str) -> ChainDefinition:
    """Get a copy of a chain definition by key. Raises ``NotFoundError`` if not found."""
    return CHAINS[key]


def list_chain_keys() -> list[str]:
    return list(CHAINS)


def lookup_key_by_id(chain_id: Any) -> Optional[str]:
    """Reverse lookup of a chain ID. Unknown or malformed IDs give ``None``."""
    try:
        normalized = checksum256(chain_id)
    except ValueError:
        return None
    return CHAIN_IDS_TO_KEYS.get(normalized)


def resolve_chain(key_or_id: str | bytes) -> ChainDefinition:
    """Resolve a chain key or chain ID to its definition."""
    if isinstance(key_or_id, str) and key_or_id in CHAINS:
        return CHAINS[key_or_id]
    key = lookup_key_by_id(key_or_id)
    if key is None:
        raise NotFoundError(f"Unknown chain '{key_or_id!r}'. Supported: {list_chain_keys()}")
    return CHAINS[key]


def display_name(chain: ChainDefinition) -> str:
    if chain.stored_name:
        return chain.stored_name
    key = CHAIN_IDS_TO_KEYS.get(chain.id)
    if key and key in CHAIN_NAMES:
        return CHAIN_NAMES[key]
    return UNKNOWN_CHAIN_NAME


def get_logo(chain: ChainDefinition) -> Optional[Logo]:
    if chain.logo:
        return chain.logo.model_copy()
    logo = CHAIN_LOGOS.get(chain.id)
    return logo.model_copy() if logo else None
