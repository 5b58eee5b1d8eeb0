"""
Open Assets Protocol Constants

All protocol constants defined here for single source of truth.
"""

from typing import Final

# ==============================================================================
# MARKER OUTPUT
# ==============================================================================

MARKER: Final[int] = 0x4F41                     # "OA"
MARKER_VERSION: Final[int] = 0x0100             # Open Assets protocol v1.0

MAX_ASSET_QUANTITY: Final[int] = 0xFFFFFFFFFFFFFFFF

# Standardness relay limit for OP_RETURN data (advisory, not enforced by codec)
MAX_OP_RETURN_RELAY: Final[int] = 80

# ==============================================================================
# VARINT ENCODINGS
# ==============================================================================

# Compact size prefixes (Bitcoin-style count prefix)
COMPACT_SIZE_U16: Final[int] = 0xFD
COMPACT_SIZE_U32: Final[int] = 0xFE
COMPACT_SIZE_U64: Final[int] = 0xFF

# LEB128
LEB128_CONTINUATION: Final[int] = 0x80
LEB128_VALUE_MASK: Final[int] = 0x7F
LEB128_GROUP_BITS: Final[int] = 7

# ==============================================================================
# OPEN ASSETS ADDRESS
# ==============================================================================

ADDRESS_NAMESPACE: Final[int] = 0x13
ADDRESS_VERSION_MAINNET: Final[int] = 0x00      # 0
ADDRESS_VERSION_TESTNET: Final[int] = 0x6F      # 111
ADDRESS_SIZE: Final[int] = 22                   # namespace + version + hash160

# ==============================================================================
# ASSET ID
# ==============================================================================

ASSET_ID_VERSION_MAINNET: Final[int] = 0x17
ASSET_ID_VERSION_TESTNET: Final[int] = 0x73
ASSET_ID_SIZE: Final[int] = 21                  # version + hash160

# ==============================================================================
# BITCOIN BASE LEDGER
# ==============================================================================

HASH160_SIZE: Final[int] = 20

PUBKEY_ADDR_MAINNET: Final[int] = 0x00
SCRIPT_ADDR_MAINNET: Final[int] = 0x05
PUBKEY_ADDR_TESTNET: Final[int] = 0x6F
SCRIPT_ADDR_TESTNET: Final[int] = 0xC4

BECH32_HRP_MAINNET: Final[str] = "bc"
BECH32_HRP_TESTNET: Final[str] = "tb"
BECH32_HRP_REGTEST: Final[str] = "bcrt"

# ==============================================================================
# SERIALIZATION
# ==============================================================================

BIG_ENDIAN: Final[str] = "big"
LITTLE_ENDIAN: Final[str] = "little"
