"""
Open Assets Protocol Error Handling

All error codes and exception classes.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Protocol error codes."""

    # 1xxx - General errors
    UNKNOWN_ERROR = 1000
    INVALID_PARAMETER = 1001

    # 2xxx - Marker payload errors
    INVALID_MARKER = 2001
    INVALID_VERSION = 2002
    TRUNCATED_LENGTH = 2003
    TRUNCATED_VARINT = 2004
    TRUNCATED_METADATA = 2005
    QUANTITY_OVERFLOW = 2006
    NOT_MARKER_OUTPUT = 2007

    # 3xxx - Text encoding errors
    BASE58_DECODE_FAILED = 3001
    UNRECOGNIZED_VERSION = 3002
    INVALID_LENGTH = 3003
    BECH32_DECODE_FAILED = 3004

    # 4xxx - Address errors
    INVALID_PAYLOAD = 4001


class OAPError(Exception):
    """Base exception for all Open Assets protocol errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# General Errors (1xxx)
# ==============================================================================

class UnknownError(OAPError):
    def __init__(self, message: str = "Unknown error occurred", details: Any = None):
        super().__init__(ErrorCode.UNKNOWN_ERROR, message, details)


class InvalidParameterError(OAPError):
    def __init__(self, param: str, message: str = ""):
        msg = f"Invalid parameter: {param}"
        if message:
            msg += f" - {message}"
        super().__init__(ErrorCode.INVALID_PARAMETER, msg, {"parameter": param})


# ==============================================================================
# Marker Payload Errors (2xxx)
# ==============================================================================

class MarkerPayloadError(OAPError):
    """Marker payload could not be decoded."""


class InvalidMarkerError(MarkerPayloadError):
    def __init__(self, marker: int, expected: int):
        super().__init__(
            ErrorCode.INVALID_MARKER,
            f"Invalid marker: 0x{marker:04x}, expected 0x{expected:04x}",
            {"marker": marker, "expected": expected}
        )


class InvalidVersionError(MarkerPayloadError):
    def __init__(self, version: int, expected: int):
        super().__init__(
            ErrorCode.INVALID_VERSION,
            f"Invalid version: 0x{version:04x}, expected 0x{expected:04x}",
            {"version": version, "expected": expected}
        )


class TruncatedLengthError(MarkerPayloadError):
    def __init__(self, offset: int, needed: int, available: int):
        super().__init__(
            ErrorCode.TRUNCATED_LENGTH,
            f"Truncated length prefix at offset {offset}: "
            f"need {needed} bytes, have {available}",
            {"offset": offset, "needed": needed, "available": available}
        )


class TruncatedVarintError(MarkerPayloadError):
    def __init__(self, offset: int):
        super().__init__(
            ErrorCode.TRUNCATED_VARINT,
            f"Truncated LEB128 value starting at offset {offset}",
            {"offset": offset}
        )


class TruncatedMetadataError(MarkerPayloadError):
    def __init__(self, offset: int, needed: int, available: int):
        super().__init__(
            ErrorCode.TRUNCATED_METADATA,
            f"Truncated metadata at offset {offset}: "
            f"need {needed} bytes, have {available}",
            {"offset": offset, "needed": needed, "available": available}
        )


class QuantityOverflowError(MarkerPayloadError):
    def __init__(self, offset: int):
        super().__init__(
            ErrorCode.QUANTITY_OVERFLOW,
            f"Asset quantity at offset {offset} exceeds 64 bits",
            {"offset": offset}
        )


class NotMarkerOutputError(MarkerPayloadError):
    def __init__(self, reason: str):
        super().__init__(
            ErrorCode.NOT_MARKER_OUTPUT,
            f"Not a marker output: {reason}",
            {"reason": reason}
        )


# ==============================================================================
# Text Encoding Errors (3xxx)
# ==============================================================================

class TextDecodeError(OAPError):
    """Address or asset id text could not be decoded."""


class Base58DecodeError(TextDecodeError):
    def __init__(self, text: str, reason: str):
        super().__init__(
            ErrorCode.BASE58_DECODE_FAILED,
            f"Invalid base58check string {text!r}: {reason}",
            {"text": text, "reason": reason}
        )


class UnrecognizedVersionError(TextDecodeError):
    def __init__(self, version: int):
        super().__init__(
            ErrorCode.UNRECOGNIZED_VERSION,
            f"Unrecognized version byte: 0x{version:02x}",
            {"version": version}
        )


class InvalidLengthError(TextDecodeError):
    def __init__(self, length: int, expected: int):
        super().__init__(
            ErrorCode.INVALID_LENGTH,
            f"Invalid decoded length: {length}, expected {expected}",
            {"length": length, "expected": expected}
        )


class Bech32DecodeError(TextDecodeError):
    def __init__(self, text: str):
        super().__init__(
            ErrorCode.BECH32_DECODE_FAILED,
            f"Invalid bech32 segwit address {text!r}",
            {"text": text}
        )


# ==============================================================================
# Address Errors (4xxx)
# ==============================================================================

class AddressError(OAPError):
    """Address could not be constructed."""


class InvalidPayloadError(AddressError):
    def __init__(self, payload_kind: str):
        super().__init__(
            ErrorCode.INVALID_PAYLOAD,
            f"Open Assets address is not defined for {payload_kind} payloads",
            {"payload": payload_kind}
        )
