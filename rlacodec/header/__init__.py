"""Header construction modules for the RLA writer."""

from .classifier import (
    ChannelGroup, GroupKind, PixelKind, classify_channels,
    pixel_kind_of, bit_depth_of,
)
from .fields import (
    format_gamma, format_chromaticity, format_date, format_aspect_ratio,
)
from .builder import RlaHeader, build_header

__all__ = [
    'ChannelGroup',
    'GroupKind',
    'PixelKind',
    'classify_channels',
    'pixel_kind_of',
    'bit_depth_of',
    'format_gamma',
    'format_chromaticity',
    'format_date',
    'format_aspect_ratio',
    'RlaHeader',
    'build_header',
]
