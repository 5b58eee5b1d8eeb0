"""
Open Assets Protocol (OAP) codec

Colored coins on Bitcoin: marker output payloads, asset IDs and
Open Assets addresses.
"""

__version__ = "1.0.0"
__author__ = "OAP Contributors"

from oap.constants import MARKER, MARKER_VERSION
from oap.core.types import Network
from oap.address import Address
from oap.asset_id import AssetId
from oap.marker import MarkerPayload, is_marker_output, get_marker_payload

__all__ = [
    "MARKER",
    "MARKER_VERSION",
    "Network",
    "Address",
    "AssetId",
    "MarkerPayload",
    "is_marker_output",
    "get_marker_payload",
    "__version__",
]
