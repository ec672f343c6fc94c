"""Build an RLA header record from an image description."""

from datetime import datetime
from typing import Callable, Optional

from ..constants import (
    HEADER_LAYOUT, REVISION, PROGRAM_NAME, DEFAULT_COLOR_CHANNEL,
    DEFAULT_RED_CHROMA, DEFAULT_GREEN_CHROMA, DEFAULT_BLUE_CHROMA,
    DEFAULT_WHITE_POINT,
)
from ..image import ImageDescription
from .classifier import classify_channels
from .fields import (
    format_gamma, format_chromaticity, format_date, format_aspect_ratio,
)

# (header field, attribute name, NTSC default)
CHROMATICITIES = (
    ('RedChroma', 'rla:RedChroma', DEFAULT_RED_CHROMA),
    ('GreenChroma', 'rla:GreenChroma', DEFAULT_GREEN_CHROMA),
    ('BlueChroma', 'rla:BlueChroma', DEFAULT_BLUE_CHROMA),
    ('WhitePoint', 'rla:WhitePoint', DEFAULT_WHITE_POINT),
)

# Free-text fields copied straight from rla:* attributes
TEXT_ATTRIBUTES = (
    ('MachineName', 'rla:MachineName'),
    ('UserName', 'rla:UserName'),
    ('Aspect', 'rla:Aspect'),
    ('Time', 'rla:Time'),
    ('Filter', 'rla:Filter'),
    ('AuxData', 'rla:AuxData'),
)


class RlaHeader:
    """
    Flat record of the Wavefront RLA header fields.

    Starts zeroed: numeric fields are 0, text fields are empty and the
    reserved block is all zero bytes.
    """

    def __init__(self):
        for name, kind, size in HEADER_LAYOUT:
            if kind == 'str':
                setattr(self, name, '')
            elif kind == 'pad':
                setattr(self, name, bytes(size))
            else:
                setattr(self, name, 0)

    def __repr__(self) -> str:
        return (f"RlaHeader(window=({self.WindowLeft}, {self.WindowBottom}, "
                f"{self.WindowRight}, {self.WindowTop}), "
                f"channels={self.NumOfColorChannels}/"
                f"{self.NumOfMatteChannels}/{self.NumOfAuxChannels})")


def build_header(spec: ImageDescription, filename: str = '',
                 clock: Optional[Callable[[], datetime]] = None,
                 program_name: str = PROGRAM_NAME) -> RlaHeader:
    """
    Populate an RLA header for an image.

    Args:
        spec: Description of the image being written
        filename: Output file name, stored in the FileName field
        clock: Callable returning the creation time (default: datetime.now)
        program_name: Banner stored in the ProgramName field

    Returns:
        Populated RlaHeader
    """
    if clock is None:
        clock = datetime.now

    rla = RlaHeader()

    # Frame (display) window, y axis pointing up
    rla.WindowLeft = spec.full_x
    rla.WindowRight = spec.full_x + spec.full_width - 1
    rla.WindowBottom = -spec.full_y
    rla.WindowTop = spec.full_height - spec.full_y - 1

    # Active (data) window
    rla.ActiveLeft = spec.x
    rla.ActiveRight = spec.x + spec.width - 1
    rla.ActiveBottom = -spec.y
    rla.ActiveTop = spec.height - spec.y - 1

    rla.FrameNumber = spec.get_int_attribute('rla:FrameNumber', 0)

    color, matte, aux = classify_channels(
        spec.nchannels, spec.channelformats, spec.format)
    rla.ColorChannelType = color.pixel_kind.value
    rla.NumOfChannelBits = color.bit_depth
    rla.NumOfColorChannels = color.count
    rla.MatteChannelType = matte.pixel_kind.value
    rla.NumOfMatteBits = matte.bit_depth
    rla.NumOfMatteChannels = matte.count
    rla.AuxChannelType = aux.pixel_kind.value
    rla.NumOfAuxBits = aux.bit_depth
    rla.NumOfAuxChannels = aux.count

    rla.Revision = REVISION

    rla.Gamma = format_gamma(
        spec.get_string_attribute('oiio:ColorSpace', 'Unknown'),
        spec.get_float_attribute('oiio:Gamma', 1.0))

    for field, attr, default in CHROMATICITIES:
        setattr(rla, field, format_chromaticity(spec.find_attribute(attr), default))

    rla.JobNumber = spec.get_int_attribute('rla:JobNumber', 0)
    rla.FileName = filename
    rla.Description = spec.get_string_attribute('ImageDescription', '')
    rla.ProgramName = program_name

    for field, attr in TEXT_ATTRIBUTES:
        setattr(rla, field, spec.get_string_attribute(attr, ''))

    rla.DateCreated = format_date(clock())
    rla.AspectRatio = format_aspect_ratio(spec.width, spec.height)
    rla.ColorChannel = spec.get_string_attribute('rla:ColorChannel',
                                                 DEFAULT_COLOR_CHANNEL)
    rla.FieldRendered = spec.get_int_attribute('rla:FieldRendered', 0)

    return rla
