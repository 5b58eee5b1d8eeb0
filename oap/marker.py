"""
Open Assets Protocol Marker Output

A marker output is an OP_RETURN output whose single pushed argument is the
marker payload:

    offset  size  field
    0       2     marker        0x4F41 ("OA")
    2       2     version       0x0100
    4       var   quantity count (compact size)
    ...     var   N x LEB128 asset quantities
    ...     var   metadata length (compact size) || metadata

Any malformed field aborts the parse; no partial payload is ever returned.
Bytes after the metadata are ignored.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union

from bitcoin.core import CTxOut
from bitcoin.core.script import CScript, CScriptInvalidError, OP_RETURN

from oap.constants import MARKER, MARKER_VERSION, MAX_ASSET_QUANTITY
from oap.core.serialization import ByteReader, ByteWriter
from oap.errors import (
    InvalidMarkerError,
    InvalidVersionError,
    MarkerPayloadError,
    NotMarkerOutputError,
    QuantityOverflowError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MarkerPayload:
    """
    Asset quantities and metadata carried by a marker output.

    quantities: one u64 per output, in output order
    metadata: opaque bytes, conventionally UTF-8 (never validated)
    """
    quantities: Tuple[int, ...] = ()
    metadata: bytes = field(default=b"")

    def __post_init__(self):
        quantities = tuple(self.quantities)
        for quantity in quantities:
            if not 0 <= quantity <= MAX_ASSET_QUANTITY:
                raise ValueError(f"Asset quantity out of range: {quantity}")
        object.__setattr__(self, "quantities", quantities)
        object.__setattr__(self, "metadata", bytes(self.metadata))

    @property
    def metadata_text(self) -> str:
        """Metadata decoded for display; undecodable bytes are replaced."""
        return self.metadata.decode("utf-8", errors="replace")

    def serialize(self) -> bytes:
        """Serialize to the marker payload wire format."""
        writer = ByteWriter()
        writer.write_u16(MARKER)
        writer.write_u16(MARKER_VERSION)
        writer.write_varint(len(self.quantities))
        for quantity in self.quantities:
            writer.write_leb128(quantity)
        writer.write_bytes(self.metadata)
        return writer.to_bytes()

    @classmethod
    def deserialize(cls, data: Union[bytes, bytearray, memoryview]) -> MarkerPayload:
        """
        Parse a marker payload.

        Raises:
            InvalidMarkerError: First two bytes are not 0x4F41
            InvalidVersionError: Next two bytes are not 0x0100
            TruncatedLengthError: A compact size prefix is cut short
            TruncatedVarintError: An asset quantity is cut short
            QuantityOverflowError: An asset quantity does not fit in 64 bits
            TruncatedMetadataError: Metadata is shorter than its prefix
        """
        reader = ByteReader(bytes(data))

        marker = reader.read_u16()
        if marker != MARKER:
            raise InvalidMarkerError(marker, MARKER)

        version = reader.read_u16()
        if version != MARKER_VERSION:
            raise InvalidVersionError(version, MARKER_VERSION)

        count = reader.read_varint()
        quantities = []
        # each quantity takes at least one byte, so a bogus count fails fast
        for _ in range(count):
            offset = reader.offset
            quantity = reader.read_leb128()
            if quantity > MAX_ASSET_QUANTITY:
                raise QuantityOverflowError(offset)
            quantities.append(quantity)

        metadata = reader.read_bytes()
        return cls(tuple(quantities), metadata)


# ==============================================================================
# Script Helpers
# ==============================================================================

def parse_script(script: Union[bytes, CScript]) -> Optional[bytes]:
    """
    Extract the pushed data of an OP_RETURN <push> script.

    Returns None if the first operation is not OP_RETURN, if it is not
    followed by exactly one well-formed push, or if more operations follow.
    """
    iterator = CScript(script).raw_iter()
    try:
        first_opcode, _, _ = next(iterator, (None, None, None))
        _, data, _ = next(iterator, (None, None, None))
        remainder = next(iterator, None)
    except CScriptInvalidError as e:
        logger.debug(f"Malformed script: {e}")
        return None

    if first_opcode == OP_RETURN and data is not None and remainder is None:
        return bytes(data)
    return None


def build_script(data: Union[bytes, MarkerPayload]) -> CScript:
    """Build an OP_RETURN script pushing the given payload."""
    if isinstance(data, MarkerPayload):
        data = data.serialize()
    return CScript([OP_RETURN, bytes(data)])


def get_op_return_data(txout: CTxOut) -> bytes:
    """Pushed data of an OP_RETURN output, empty for any other output."""
    data = parse_script(txout.scriptPubKey)
    return data if data is not None else b""


def get_marker_payload(txout: CTxOut) -> MarkerPayload:
    """
    Parse the marker payload of an output.

    Raises:
        NotMarkerOutputError: If the output is not an OP_RETURN push
        MarkerPayloadError: If the pushed data is not a valid payload
    """
    data = parse_script(txout.scriptPubKey)
    if data is None:
        raise NotMarkerOutputError("script is not OP_RETURN followed by a single push")
    return MarkerPayload.deserialize(data)


def is_marker_output(txout: CTxOut) -> bool:
    """Check whether an output carries a valid marker payload."""
    try:
        get_marker_payload(txout)
        return True
    except MarkerPayloadError as e:
        logger.debug(f"Output rejected as marker: {e}")
        return False


def find_marker_output(outputs: Iterable[CTxOut]) -> Optional[Tuple[int, MarkerPayload]]:
    """
    Locate the first valid marker output.

    Returns (index, payload), or None if no output is a marker output.
    """
    for index, txout in enumerate(outputs):
        try:
            return index, get_marker_payload(txout)
        except MarkerPayloadError:
            continue
    return None
