"""
Open Assets Protocol Bitcoin Base Ledger Structures

Base58check and bech32 come from python-bitcoinlib. Only the parameter-free
primitives are used so no code path depends on bitcoin.SelectParams().
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Tuple

from bitcoin import segwit_addr
from bitcoin.base58 import Base58Error, CBase58Data
from bitcoin.core.script import (
    CScript,
    CScriptOp,
    OP_0,
    OP_CHECKSIG,
    OP_DUP,
    OP_EQUAL,
    OP_EQUALVERIFY,
    OP_HASH160,
)

from oap.constants import HASH160_SIZE
from oap.core.types import (
    Hash160,
    Network,
    PaymentPayload,
    PubkeyHash,
    ScriptHash,
    WitnessProgram,
)
from oap.errors import (
    Base58DecodeError,
    Bech32DecodeError,
    InvalidLengthError,
    UnrecognizedVersionError,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# Base58check
# ==============================================================================

def b58check_encode(version: int, payload: bytes) -> str:
    """
    Encode version || payload || checksum as base58.

    checksum = SHA256(SHA256(version || payload))[:4]
    """
    return str(CBase58Data.from_bytes(payload, version))


def b58check_decode(text: str) -> Tuple[int, bytes]:
    """
    Decode base58check text.
    Returns (version_byte, payload).

    Raises:
        Base58DecodeError: On invalid characters or checksum mismatch
    """
    try:
        decoded = CBase58Data(text)
    except Base58Error as e:
        logger.debug(f"base58check decode failed for {text!r}: {e}")
        raise Base58DecodeError(text, str(e)) from e
    return decoded.nVersion, decoded.to_bytes()


# ==============================================================================
# Base Ledger Address
# ==============================================================================

@dataclass(frozen=True, slots=True)
class BaseAddress:
    """
    Bitcoin payment address.

    Hash payloads render as base58check, witness programs as bech32.
    Testnet and regtest share base58 version bytes; base58 text always
    parses to TESTNET.
    """
    network: Network
    payload: PaymentPayload

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        payload = self.payload
        if isinstance(payload, PubkeyHash):
            return b58check_encode(self.network.pubkey_address_version, bytes(payload.hash))
        if isinstance(payload, ScriptHash):
            return b58check_encode(self.network.script_address_version, bytes(payload.hash))
        encoded = segwit_addr.encode(self.network.bech32_hrp, payload.version, payload.program)
        if encoded is None:
            raise ValueError(f"Cannot bech32 encode {payload!r}")
        return encoded

    @classmethod
    def from_string(cls, text: str) -> BaseAddress:
        """
        Parse a Bitcoin address.

        Raises:
            Bech32DecodeError: Malformed segwit address
            Base58DecodeError: Malformed base58check text
            UnrecognizedVersionError: Unknown base58 version byte
            InvalidLengthError: Hash payload is not 20 bytes
        """
        lowered = text.lower()
        for network in (Network.MAINNET, Network.TESTNET, Network.REGTEST):
            hrp = network.bech32_hrp
            if lowered.startswith(hrp + "1"):
                version, program = segwit_addr.decode(hrp, text)
                if version is None:
                    raise Bech32DecodeError(text)
                return cls(network, WitnessProgram(version, bytes(program)))

        version, data = b58check_decode(text)
        if len(data) != HASH160_SIZE:
            raise InvalidLengthError(len(data), HASH160_SIZE)

        for network in (Network.MAINNET, Network.TESTNET):
            if version == network.pubkey_address_version:
                return cls(network, PubkeyHash(Hash160(data)))
            if version == network.script_address_version:
                return cls(network, ScriptHash(Hash160(data)))
        raise UnrecognizedVersionError(version)

    def to_script(self) -> CScript:
        """Build the scriptPubKey paying to this address."""
        payload = self.payload
        if isinstance(payload, PubkeyHash):
            return CScript([OP_DUP, OP_HASH160, bytes(payload.hash), OP_EQUALVERIFY, OP_CHECKSIG])
        if isinstance(payload, ScriptHash):
            return CScript([OP_HASH160, bytes(payload.hash), OP_EQUAL])
        version_op = OP_0 if payload.version == 0 else CScriptOp.encode_op_n(payload.version)
        return CScript([version_op, payload.program])
