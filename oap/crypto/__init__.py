"""
Open Assets Protocol Hash Primitives
"""

from oap.crypto.hash import sha256, double_sha256, ripemd160, hash160

__all__ = [
    "sha256",
    "double_sha256",
    "ripemd160",
    "hash160",
]
