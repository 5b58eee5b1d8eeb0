"""
Open Assets Protocol Test Fixtures
"""

import pytest
from bitcoin.core import CTxOut
from bitcoin.core.script import CScript

from oap.core.bitcoin import BaseAddress
from oap.core.types import Hash160


# Marker payload from the Open Assets reference test data
MARKER_PAYLOAD_HEX = "4f4101000364007b1b753d68747470733a2f2f6370722e736d2f35596753553150672d71"
MARKER_METADATA = b"u=https://cpr.sm/5YgSU1Pg-q"
MARKER_QUANTITIES = (100, 0, 123)

P2PKH_SCRIPT_HEX = "76a914010966776006953d5567439e5e39f86a0d273bee88ac"
P2SH_SCRIPT_HEX = "a914f9d499817e88ef7b10a88673296c6d6df2f4292d87"


@pytest.fixture
def marker_payload_bytes() -> bytes:
    """Serialized reference marker payload."""
    return bytes.fromhex(MARKER_PAYLOAD_HEX)


@pytest.fixture
def marker_txout(marker_payload_bytes) -> CTxOut:
    """OP_RETURN output carrying the reference payload."""
    return CTxOut(0, CScript(bytes.fromhex("6a24") + marker_payload_bytes))


@pytest.fixture
def p2pkh_txout() -> CTxOut:
    """Plain pay-to-pubkey-hash output."""
    return CTxOut(600, CScript(bytes.fromhex("76a91446c2fbfbecc99a63148fa076de58cf29b0bcf0b088ac")))


@pytest.fixture
def mainnet_address() -> BaseAddress:
    return BaseAddress.from_string("1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8")


@pytest.fixture
def testnet_address() -> BaseAddress:
    return BaseAddress.from_string("mkgW6hNYBctmqDtTTsTJrsf2Gh2NPtoCU4")


@pytest.fixture
def segwit_address() -> BaseAddress:
    return BaseAddress.from_string("bc1qvzvkjn4q3nszqxrv3nraga2r822xjty3ykvkuw")


@pytest.fixture
def mock_hash() -> Hash160:
    """Create a mock hash160 for testing."""
    return Hash160(bytes(range(20)))
