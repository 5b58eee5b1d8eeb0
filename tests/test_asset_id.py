"""
Open Assets Protocol Asset ID Tests
"""

import pytest
from bitcoin.core.script import CScript

from oap.asset_id import AssetId
from oap.core.bitcoin import BaseAddress, b58check_encode
from oap.core.types import Hash160, Network, PubkeyHash, ScriptHash
from oap.errors import (
    Base58DecodeError,
    ErrorCode,
    InvalidLengthError,
    TextDecodeError,
    UnrecognizedVersionError,
)


P2PKH_SCRIPT = bytes.fromhex("76a914010966776006953d5567439e5e39f86a0d273bee88ac")
P2SH_SCRIPT = bytes.fromhex("a914f9d499817e88ef7b10a88673296c6d6df2f4292d87")


class TestAssetIdDerivation:
    """Tests for deriving asset IDs from scripts."""

    def test_p2pkh_mainnet(self):
        """Test the reference pay-to-pubkey-hash vector."""
        asset_id = AssetId.from_script(P2PKH_SCRIPT, Network.MAINNET)
        assert str(asset_id) == "ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuBC"

    def test_p2sh_testnet(self):
        """Test the reference pay-to-script-hash testnet vector."""
        asset_id = AssetId.from_script(P2SH_SCRIPT, Network.TESTNET)
        assert asset_id.to_text() == "oMb2yzA542yQgwn8XtmGefTzBv5NJ2nDjh"

    def test_regtest_uses_testnet_version(self):
        """Test regtest renders with the testnet version byte."""
        regtest = AssetId.from_script(P2SH_SCRIPT, Network.REGTEST)
        assert regtest.version == 0x73
        assert regtest.to_text() == "oMb2yzA542yQgwn8XtmGefTzBv5NJ2nDjh"

    def test_accepts_cscript(self):
        """Test a CScript hashes the same as its raw bytes."""
        assert AssetId.from_script(CScript(P2PKH_SCRIPT), Network.MAINNET) == \
            AssetId.from_script(P2PKH_SCRIPT, Network.MAINNET)

    def test_deterministic(self):
        """Test the same script always gives the same ID."""
        first = AssetId.from_script(b"\x51", Network.MAINNET)
        second = AssetId.from_script(b"\x51", Network.MAINNET)
        assert first == second
        assert hash(first) == hash(second)

    def test_empty_script(self):
        """Test hashing is total over empty input."""
        asset_id = AssetId.from_script(b"", Network.MAINNET)
        assert asset_id.hash.hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"

    def test_network_distinguishes(self):
        """Test equality covers the network."""
        assert AssetId.from_script(P2PKH_SCRIPT, Network.MAINNET) != \
            AssetId.from_script(P2PKH_SCRIPT, Network.TESTNET)

    def test_from_address(self):
        """Test the issuing address script yields the same ID."""
        p2pkh = BaseAddress(Network.MAINNET, PubkeyHash(Hash160.from_hex("010966776006953d5567439e5e39f86a0d273bee")))
        assert str(AssetId.from_address(p2pkh)) == "ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuBC"

        p2sh = BaseAddress(Network.TESTNET, ScriptHash(Hash160.from_hex("f9d499817e88ef7b10a88673296c6d6df2f4292d")))
        assert str(AssetId.from_address(p2sh)) == "oMb2yzA542yQgwn8XtmGefTzBv5NJ2nDjh"

    def test_from_address_network_override(self):
        p2pkh = BaseAddress(Network.MAINNET, PubkeyHash(Hash160.from_hex("010966776006953d5567439e5e39f86a0d273bee")))
        assert AssetId.from_address(p2pkh, Network.TESTNET).network == Network.TESTNET


class TestAssetIdText:
    """Tests for parsing asset ID text."""

    def test_from_text_mainnet(self):
        asset_id = AssetId.from_text("ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuBC")
        assert asset_id == AssetId.from_script(P2PKH_SCRIPT, Network.MAINNET)

    def test_from_text_testnet(self):
        asset_id = AssetId.from_text("oMb2yzA542yQgwn8XtmGefTzBv5NJ2nDjh")
        assert asset_id == AssetId.from_script(P2SH_SCRIPT, Network.TESTNET)

    @pytest.mark.parametrize("network", [Network.MAINNET, Network.TESTNET])
    def test_round_trip(self, network, mock_hash):
        asset_id = AssetId(mock_hash, network)
        assert AssetId.from_text(asset_id.to_text()) == asset_id

    def test_unrecognized_version(self, mock_hash):
        """Test other version bytes are rejected with the offending byte."""
        text = b58check_encode(0x18, bytes(mock_hash))
        with pytest.raises(UnrecognizedVersionError) as exc_info:
            AssetId.from_text(text)
        assert exc_info.value.details == {"version": 0x18}
        assert exc_info.value.code == ErrorCode.UNRECOGNIZED_VERSION

    def test_address_text_rejected(self):
        """Test a Bitcoin address is not an asset ID."""
        with pytest.raises(UnrecognizedVersionError):
            AssetId.from_text("1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8")

    def test_bad_checksum(self):
        text = "ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuBD"
        with pytest.raises(Base58DecodeError):
            AssetId.from_text(text)

    def test_invalid_character(self):
        with pytest.raises(Base58DecodeError):
            AssetId.from_text("ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuB0")

    def test_empty(self):
        with pytest.raises(TextDecodeError):
            AssetId.from_text("")

    def test_wrong_length(self):
        """Test a valid checksum over a short hash is rejected."""
        text = b58check_encode(0x17, bytes(19))
        with pytest.raises(InvalidLengthError):
            AssetId.from_text(text)
