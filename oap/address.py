"""
Open Assets Protocol Address

An Open Assets address wraps a pay-to-pubkey-hash or pay-to-script-hash
Bitcoin address under the 0x13 namespace:

    base58check(0x13 || network_byte || hash160)

network_byte is 0x00 on mainnet and 0x6F on testnet/regtest for both hash
kinds, so a script-hash address reads back as pubkey-hash. The Bitcoin
script-hash version bytes (0x05, 0xC4) are accepted on decode.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from oap.constants import (
    ADDRESS_NAMESPACE,
    ADDRESS_SIZE,
    ADDRESS_VERSION_MAINNET,
    ADDRESS_VERSION_TESTNET,
    SCRIPT_ADDR_MAINNET,
    SCRIPT_ADDR_TESTNET,
)
from oap.core.bitcoin import BaseAddress, b58check_decode, b58check_encode
from oap.core.types import Hash160, Network, PaymentPayload, PubkeyHash, ScriptHash
from oap.errors import InvalidLengthError, InvalidPayloadError, UnrecognizedVersionError

logger = logging.getLogger(__name__)

# network byte -> (network, payload type)
_NETWORK_BYTES = {
    ADDRESS_VERSION_MAINNET: (Network.MAINNET, PubkeyHash),
    ADDRESS_VERSION_TESTNET: (Network.TESTNET, PubkeyHash),
    SCRIPT_ADDR_MAINNET: (Network.MAINNET, ScriptHash),
    SCRIPT_ADDR_TESTNET: (Network.TESTNET, ScriptHash),
}


@dataclass(frozen=True, slots=True)
class Address:
    """
    Open Assets address.

    SIZE: 22 bytes before base58check (namespace, network byte, hash160)
    """
    payload: PaymentPayload
    network: Network

    def __post_init__(self):
        if not isinstance(self.payload, (PubkeyHash, ScriptHash)):
            kind = getattr(self.payload, "kind", type(self.payload).__name__)
            raise InvalidPayloadError(kind)

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_payload(cls, payload: PaymentPayload, network: Network) -> Address:
        """
        Build an address from a base-ledger payload.

        Raises:
            InvalidPayloadError: If the payload is not a pubkey or script hash
        """
        return cls(payload, network)

    @classmethod
    def from_base_address(cls, base: BaseAddress) -> Address:
        """Convert a Bitcoin address to its Open Assets form."""
        return cls.from_payload(base.payload, base.network)

    def to_base_address(self) -> BaseAddress:
        """Reconstruct the underlying Bitcoin address."""
        return BaseAddress(self.network, self.payload)

    def to_text(self) -> str:
        network_byte = ADDRESS_VERSION_MAINNET if self.network.is_mainnet else ADDRESS_VERSION_TESTNET
        return b58check_encode(ADDRESS_NAMESPACE, bytes([network_byte]) + bytes(self.payload.hash))

    @classmethod
    def from_text(cls, text: str) -> Address:
        """
        Parse an Open Assets address.

        Raises:
            Base58DecodeError: Invalid base58 or checksum
            UnrecognizedVersionError: Namespace or network byte unknown
            InvalidLengthError: Decoded data is not 22 bytes
        """
        namespace, data = b58check_decode(text)
        if namespace != ADDRESS_NAMESPACE:
            logger.debug(f"Address namespace mismatch: 0x{namespace:02x}")
            raise UnrecognizedVersionError(namespace)
        if len(data) != ADDRESS_SIZE - 1:
            raise InvalidLengthError(len(data) + 1, ADDRESS_SIZE)

        network_byte = data[0]
        if network_byte not in _NETWORK_BYTES:
            logger.debug(f"Address network byte unknown: 0x{network_byte:02x}")
            raise UnrecognizedVersionError(network_byte)
        network, payload_type = _NETWORK_BYTES[network_byte]
        return cls(payload_type(Hash160(data[1:])), network)


def to_oa_address(base: BaseAddress) -> Address:
    """Convert a Bitcoin address to an Open Assets address."""
    return Address.from_base_address(base)
