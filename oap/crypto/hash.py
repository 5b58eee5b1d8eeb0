"""
Open Assets Protocol Hash Functions

SHA-256 from hashlib, RIPEMD-160 from pycryptodome (OpenSSL 3 builds of
hashlib no longer ship it).
"""

from __future__ import annotations
import hashlib
from typing import Union

from Crypto.Hash import RIPEMD160

from oap.core.types import Hash160


def sha256(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """SHA-256 hash function returning raw bytes."""
    return hashlib.sha256(data).digest()


def double_sha256(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """
    SHA-256 applied twice.

    The first 4 bytes are the base58check checksum.
    """
    return sha256(sha256(data))


def ripemd160(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """RIPEMD-160 hash function returning raw bytes."""
    hasher = RIPEMD160.new()
    hasher.update(bytes(data))
    return hasher.digest()


def hash160(data: Union[bytes, bytearray, memoryview]) -> Hash160:
    """
    Compute HASH160 = RIPEMD160(SHA256(data)).

    Args:
        data: Input data to hash

    Returns:
        Hash160: 20-byte digest wrapped in Hash160 type
    """
    return Hash160(ripemd160(sha256(data)))
