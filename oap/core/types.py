"""
Open Assets Protocol Core Types

Network selector, hash container and the payment payload variants of a
base-ledger address.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from oap.constants import (
    HASH160_SIZE,
    PUBKEY_ADDR_MAINNET,
    PUBKEY_ADDR_TESTNET,
    SCRIPT_ADDR_MAINNET,
    SCRIPT_ADDR_TESTNET,
    BECH32_HRP_MAINNET,
    BECH32_HRP_TESTNET,
    BECH32_HRP_REGTEST,
)


class Network(str, Enum):
    """Bitcoin network an address or asset belongs to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"

    @classmethod
    def from_name(cls, name: str) -> Network:
        """
        Resolve a network from its common spellings.

        Accepts the enum value as well as the names used by Bitcoin Core
        ("main", "test", "regtest") and "bitcoin" for mainnet.
        """
        aliases = {
            "main": cls.MAINNET,
            "bitcoin": cls.MAINNET,
            "test": cls.TESTNET,
        }
        key = name.strip().lower()
        if key in aliases:
            return aliases[key]
        return cls(key)

    @property
    def is_mainnet(self) -> bool:
        return self is Network.MAINNET

    @property
    def pubkey_address_version(self) -> int:
        return PUBKEY_ADDR_MAINNET if self.is_mainnet else PUBKEY_ADDR_TESTNET

    @property
    def script_address_version(self) -> int:
        return SCRIPT_ADDR_MAINNET if self.is_mainnet else SCRIPT_ADDR_TESTNET

    @property
    def bech32_hrp(self) -> str:
        return {
            Network.MAINNET: BECH32_HRP_MAINNET,
            Network.TESTNET: BECH32_HRP_TESTNET,
            Network.REGTEST: BECH32_HRP_REGTEST,
        }[self]


@dataclass(frozen=True, slots=True)
class Hash160:
    """
    RIPEMD-160(SHA-256(x)) digest.

    SIZE: 20 bytes
    SERIALIZATION: raw bytes
    """
    data: bytes = field(default_factory=lambda: bytes(HASH160_SIZE))

    def __post_init__(self):
        if len(self.data) != HASH160_SIZE:
            raise ValueError(f"Hash160 must be {HASH160_SIZE} bytes, got {len(self.data)}")

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"Hash160({self.data.hex()})"

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def from_hex(cls, hex_string: str) -> Hash160:
        return cls(bytes.fromhex(hex_string))


# ==============================================================================
# Payment Payload Variants
# ==============================================================================

@dataclass(frozen=True, slots=True)
class PubkeyHash:
    """Pay-to-pubkey-hash payload."""
    hash: Hash160

    kind: ClassVar[str] = "pubkey-hash"


@dataclass(frozen=True, slots=True)
class ScriptHash:
    """Pay-to-script-hash payload."""
    hash: Hash160

    kind: ClassVar[str] = "script-hash"


@dataclass(frozen=True, slots=True)
class WitnessProgram:
    """
    Segregated witness program payload.

    version: 0-16
    program: 2-40 bytes
    """
    version: int
    program: bytes

    kind: ClassVar[str] = "witness-program"

    def __post_init__(self):
        if not 0 <= self.version <= 16:
            raise ValueError(f"Invalid witness version: {self.version}")
        if not 2 <= len(self.program) <= 40:
            raise ValueError(f"Invalid witness program length: {len(self.program)}")

    def __repr__(self) -> str:
        return f"WitnessProgram(version={self.version}, program={self.program.hex()})"


PaymentPayload = Union[PubkeyHash, ScriptHash, WitnessProgram]
