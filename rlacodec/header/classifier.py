"""Channel classification into RLA color / matte / auxiliary groups."""

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ..constants import CT_BYTE, CT_FLOAT

# Color group never holds more than this many channels
MAX_COLOR_CHANNELS = 3


class GroupKind(Enum):
    """The three RLA channel groups, in file order."""

    COLOR = "color"
    MATTE = "matte"
    AUX = "aux"


class PixelKind(Enum):
    """RLA channel type, valued by its header code."""

    BYTE = CT_BYTE
    FLOAT = CT_FLOAT


class ChannelGroup(NamedTuple):
    """One contiguous run of channels."""

    kind: GroupKind
    pixel_kind: PixelKind
    bit_depth: int
    count: int


def pixel_kind_of(dtype) -> PixelKind:
    """Only 32-bit float maps to FLOAT; every other type is stored as BYTE."""
    return PixelKind.FLOAT if np.dtype(dtype) == np.float32 else PixelKind.BYTE


def bit_depth_of(dtype) -> int:
    return np.dtype(dtype).itemsize * 8


def _group(kind: GroupKind, dtype, count: int) -> ChannelGroup:
    return ChannelGroup(kind, pixel_kind_of(dtype), bit_depth_of(dtype), count)


def _empty(kind: GroupKind) -> ChannelGroup:
    return ChannelGroup(kind, PixelKind.BYTE, 0, 0)


def _run_length(formats: Sequence[np.dtype], start: int,
                limit: Optional[int] = None) -> int:
    """Length of the run of equal types starting at `start`."""
    first = formats[start]
    count = 1
    while start + count < len(formats) and formats[start + count] == first:
        if limit is not None and count >= limit:
            break
        count += 1
    return count


def classify_channels(nchannels: int, channelformats: Optional[Sequence] = None,
                      format=np.uint8) -> Tuple[ChannelGroup, ChannelGroup, ChannelGroup]:
    """
    Partition channels into (color, matte, aux) groups.

    With per-channel types the groups follow runs of equal types, the color
    run being capped at 3 channels. Without them a channel-count heuristic
    is used and every group shares the global type.

    Args:
        nchannels: Total channel count
        channelformats: Optional per-channel pixel types
        format: Global pixel type, used when channelformats is empty

    Returns:
        Tuple of three ChannelGroup (color, matte, aux)
    """
    if channelformats:
        formats = [np.dtype(f) for f in channelformats][:nchannels]
        return _classify_explicit(formats)
    return _classify_global(nchannels, np.dtype(format))


def _classify_explicit(formats: List[np.dtype]):
    total = len(formats)
    if total == 0:
        return (_empty(GroupKind.COLOR), _empty(GroupKind.MATTE),
                _empty(GroupKind.AUX))

    # Color: leading run of channel 0's type, at most 3 channels
    ncolor = _run_length(formats, 0, MAX_COLOR_CHANNELS)
    color = _group(GroupKind.COLOR, formats[0], ncolor)

    # Matte: next run of equal types, uncapped
    matte = _empty(GroupKind.MATTE)
    if ncolor < total:
        nmatte = _run_length(formats, ncolor)
        matte = _group(GroupKind.MATTE, formats[ncolor], nmatte)

    # Aux: everything left, typed by its first channel
    aux = _empty(GroupKind.AUX)
    start = color.count + matte.count
    if start < total:
        aux = _group(GroupKind.AUX, formats[start], total - start)

    return color, matte, aux


def _classify_global(nchannels: int, dtype: np.dtype):
    remaining = nchannels

    if remaining >= 3:
        ncolor = 3
        remaining -= 3
    else:
        # Treat a lone channel as luminosity
        ncolor = 1
        remaining -= 1

    nmatte = 0
    if remaining > 0:
        nmatte = 1
        remaining -= 1

    naux = remaining if remaining > 0 else 0

    return (_group(GroupKind.COLOR, dtype, ncolor),
            _group(GroupKind.MATTE, dtype, nmatte),
            _group(GroupKind.AUX, dtype, naux))
