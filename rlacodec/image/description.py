"""In-memory description of an image about to be written."""

import numpy as np
from typing import Dict, List, Optional


class ImageDescription:
    """
    Format-agnostic description of an image.

    Holds the data window (x, y, width, height), the full/display window,
    the channel count with its pixel types and a bag of named metadata
    attributes. Pixel types are numpy dtypes.
    """

    def __init__(self, width: int, height: int, nchannels: int,
                 format=np.uint8, channelformats: Optional[List] = None,
                 x: int = 0, y: int = 0, depth: int = 1,
                 full_x: Optional[int] = None, full_y: Optional[int] = None,
                 full_width: Optional[int] = None,
                 full_height: Optional[int] = None,
                 attributes: Optional[Dict] = None):
        self.width = width
        self.height = height
        self.depth = depth
        self.x = x
        self.y = y
        self.full_x = x if full_x is None else full_x
        self.full_y = y if full_y is None else full_y
        self.full_width = width if full_width is None else full_width
        self.full_height = height if full_height is None else full_height
        self.nchannels = nchannels
        self.format = np.dtype(format)
        self.channelformats = [np.dtype(f) for f in (channelformats or [])]
        if self.channelformats and len(self.channelformats) != nchannels:
            raise ValueError(f"Expected {nchannels} channel formats, got {len(self.channelformats)}")
        self.attributes = dict(attributes or {})

    def attribute(self, name: str, value) -> None:
        """Set a metadata attribute."""
        self.attributes[name] = value

    def find_attribute(self, name: str):
        """Return the raw attribute value, or None if absent."""
        return self.attributes.get(name)

    def get_int_attribute(self, name: str, default: int = 0) -> int:
        value = self.attributes.get(name)
        if isinstance(value, (bool, str)) or value is None:
            return default
        if isinstance(value, (int, np.integer)):
            return int(value)
        return default

    def get_float_attribute(self, name: str, default: float = 0.0) -> float:
        value = self.attributes.get(name)
        if isinstance(value, (int, float, np.integer, np.floating)) \
                and not isinstance(value, bool):
            return float(value)
        return default

    def get_string_attribute(self, name: str, default: str = '') -> str:
        value = self.attributes.get(name)
        if isinstance(value, str):
            return value
        return default

    def channel_format(self, channel: int) -> np.dtype:
        """Pixel type of one channel."""
        if self.channelformats:
            return self.channelformats[channel]
        return self.format

    def pixel_bytes(self) -> int:
        """Bytes per pixel across all channels."""
        return sum(self.channel_format(c).itemsize
                   for c in range(self.nchannels))

    def scanline_bytes(self) -> int:
        """Bytes in one scanline of native data."""
        return self.pixel_bytes() * self.width

    def __repr__(self) -> str:
        return (f"ImageDescription({self.width}x{self.height}, "
                f"nchannels={self.nchannels}, format={self.format})")
