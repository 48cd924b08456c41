import pytest

from antelope_chains.chain.registry import (
    CHAIN_IDS_TO_KEYS,
    CHAIN_NAMES,
    CHAINS,
    NotFoundError,
    _index_by_id,
    display_name,
    get_chain,
    get_logo,
    list_chain_keys,
    lookup_key_by_id,
    resolve_chain,
)
from antelope_chains.models.schema import ChainDefinition, Logo

WAX_ID = "1064487b3cd1a897ce03ae5b6a865651747e2e152090f99c1d19d44e01aea5a4"
UNKNOWN_ID = "ff" * 32


def test_reverse_index_matches_definitions():
    for chain_id, key in CHAIN_IDS_TO_KEYS.items():
        assert CHAINS[key].id == chain_id, f"{key}: {CHAINS[key].id} != {chain_id}"


def test_reverse_index_is_injective():
    ids = [chain.id for chain in CHAINS.values()]
    assert len(set(ids)) == len(ids) == len(CHAIN_IDS_TO_KEYS)


def test_duplicate_chain_id_rejected():
    wax = get_chain("WAX")
    with pytest.raises(ValueError, match="registered as both"):
        _index_by_id({"WAX": wax, "WAXMirror": wax.model_copy(update={"url": "https://mirror.example.com"})})


def test_every_chain_has_a_name():
    for key in list_chain_keys():
        chain = get_chain(key)
        assert isinstance(chain, ChainDefinition)
        assert display_name(chain)
        assert chain.name == CHAIN_NAMES[key]


def test_known_chains():
    assert len(CHAINS) == 14
    wax = get_chain("WAX")
    assert wax.id == WAX_ID
    assert wax.url == "https://wax.greymass.com"
    assert wax.explorer.url("abc") == "https://waxblock.io/transaction/abc"


def test_lookup_is_case_sensitive():
    with pytest.raises(NotFoundError):
        get_chain("wax")
    assert "wax" not in CHAINS
    assert CHAINS.get("wax") is None


def test_lookup_returns_copies():
    chain = get_chain("WAX")
    chain.url = "https://example.com"
    chain.logo.light = "https://example.com/logo.png"
    fresh = get_chain("WAX")
    assert fresh.url == "https://wax.greymass.com"
    assert fresh.logo.light.endswith("/wax.png")


def test_lookup_key_by_id():
    assert lookup_key_by_id(WAX_ID) == "WAX"
    assert lookup_key_by_id(WAX_ID.upper()) == "WAX"
    assert lookup_key_by_id(bytes.fromhex(WAX_ID)) == "WAX"
    assert lookup_key_by_id(UNKNOWN_ID) is None
    assert lookup_key_by_id("not-a-chain-id") is None


def test_resolve_chain_by_key_or_id():
    assert resolve_chain("Telos").url == "https://telos.greymass.com"
    assert resolve_chain(WAX_ID).name == "WAX"
    with pytest.raises(NotFoundError):
        resolve_chain(UNKNOWN_ID)


def test_name_falls_back_to_registry():
    custom = ChainDefinition(id=WAX_ID, url="https://wax.example.com")
    assert custom.name == "WAX"
    named = ChainDefinition(id=WAX_ID, url="https://wax.example.com", name="My WAX")
    assert named.name == "My WAX"
    unknown = ChainDefinition(id=UNKNOWN_ID, url="https://example.com")
    assert unknown.name == "Unknown blockchain"


def test_logo_falls_back_to_registry():
    custom = ChainDefinition(id=WAX_ID, url="https://wax.example.com")
    assert custom.get_logo() == Logo.model_validate("https://assets.wharfkit.com/chain/wax.png")
    own = ChainDefinition(id=WAX_ID, url="https://wax.example.com", logo="https://x/y.png")
    assert str(own.get_logo()) == "https://x/y.png"
    assert get_logo(ChainDefinition(id=UNKNOWN_ID, url="https://example.com")) is None


def test_retired_jungle3_logo():
    jungle3 = ChainDefinition(
        id="2a02a0053e5a8cf73a56ba0fda11e4d92e0238a4a2aa74fccf46d5a910746840",
        url="https://jungle3.greymass.com",
    )
    assert jungle3.name == "Unknown blockchain"
    assert jungle3.get_logo().dark.endswith("/jungle.png")


def test_name_is_stored_under_name_key():
    custom = ChainDefinition(id=WAX_ID, url="https://wax.example.com")
    assert custom.name == "WAX"
    assert custom.stored_name is None
    assert custom.model_dump()["name"] is None
    assert ChainDefinition(id=UNKNOWN_ID, url="https://example.com").name == "Unknown blockchain"
    dumped = get_chain("Telos").model_dump()
    assert dumped["name"] == "Telos"
    assert ChainDefinition.model_validate(dumped).name == "Telos"
