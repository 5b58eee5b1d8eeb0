"""
Open Assets Protocol Core Data Structures
"""

from oap.core.types import (
    Hash160,
    Network,
    PaymentPayload,
    PubkeyHash,
    ScriptHash,
    WitnessProgram,
)
from oap.core.serialization import (
    serialize_u16,
    serialize_varint,
    serialize_bytes,
    deserialize_u16,
    deserialize_varint,
    deserialize_bytes,
    leb128_encode,
    leb128_decode,
    ByteReader,
    ByteWriter,
)
from oap.core.bitcoin import BaseAddress, b58check_encode, b58check_decode

__all__ = [
    # Types
    "Hash160",
    "Network",
    "PaymentPayload",
    "PubkeyHash",
    "ScriptHash",
    "WitnessProgram",
    # Serialization
    "serialize_u16",
    "serialize_varint",
    "serialize_bytes",
    "deserialize_u16",
    "deserialize_varint",
    "deserialize_bytes",
    "leb128_encode",
    "leb128_decode",
    "ByteReader",
    "ByteWriter",
    # Bitcoin
    "BaseAddress",
    "b58check_encode",
    "b58check_decode",
]
