"""
Open Assets Protocol Asset ID

The asset ID of an asset is the hash160 of the output script of the
first input of its issuance transaction, rendered as

    base58check(version || hash160)

with version 0x17 on mainnet and 0x73 on testnet/regtest.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Union

from oap.constants import ASSET_ID_SIZE, ASSET_ID_VERSION_MAINNET, ASSET_ID_VERSION_TESTNET
from oap.core.bitcoin import BaseAddress, b58check_decode, b58check_encode
from oap.core.types import Hash160, Network
from oap.crypto.hash import hash160
from oap.errors import InvalidLengthError, UnrecognizedVersionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssetId:
    """
    Open Assets asset identifier.

    SIZE: 21 bytes before base58check (version, hash160)
    """
    hash: Hash160
    network: Network

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_script(cls, script: Union[bytes, bytearray], network: Network) -> AssetId:
        """Derive the asset ID of the raw serialized script bytes."""
        return cls(hash160(bytes(script)), network)

    @classmethod
    def from_address(cls, address: BaseAddress, network: Optional[Network] = None) -> AssetId:
        """Asset ID issued from the scriptPubKey of a Bitcoin address."""
        return cls.from_script(address.to_script(), network or address.network)

    @property
    def version(self) -> int:
        return ASSET_ID_VERSION_MAINNET if self.network.is_mainnet else ASSET_ID_VERSION_TESTNET

    def to_text(self) -> str:
        return b58check_encode(self.version, bytes(self.hash))

    @classmethod
    def from_text(cls, text: str) -> AssetId:
        """
        Parse a base58check asset ID.

        Raises:
            Base58DecodeError: Invalid base58 or checksum
            UnrecognizedVersionError: Version byte is neither 0x17 nor 0x73
            InvalidLengthError: Decoded data is not 21 bytes
        """
        version, data = b58check_decode(text)
        if version == ASSET_ID_VERSION_MAINNET:
            network = Network.MAINNET
        elif version == ASSET_ID_VERSION_TESTNET:
            network = Network.TESTNET
        else:
            logger.debug(f"Asset ID version byte unknown: 0x{version:02x}")
            raise UnrecognizedVersionError(version)

        if len(data) != ASSET_ID_SIZE - 1:
            raise InvalidLengthError(len(data) + 1, ASSET_ID_SIZE)
        return cls(Hash160(data), network)
