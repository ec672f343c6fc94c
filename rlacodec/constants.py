"""Constants for the Wavefront RLA header writer."""

import struct

# Program banner written to the ProgramName field
PROGRAM_NAME = 'rlacodec 0.1.0'

# Header revision marker (0xFFFE as a signed 16-bit value)
REVISION = 0xFFFE

# Channel type codes
CT_BYTE = 0
CT_FLOAT = 4

# Integer field formats (Big-endian)
INT16_FORMAT = '>h'
UINT16_FORMAT = '>H'
INT32_FORMAT = '>i'
UINT32_FORMAT = '>I'

# Header layout in write order: (field name, kind, size in bytes)
# kind is 'i16', 'i32', 'str' or 'pad'
HEADER_LAYOUT = (
    ('WindowLeft', 'i16', 2),
    ('WindowRight', 'i16', 2),
    ('WindowBottom', 'i16', 2),
    ('WindowTop', 'i16', 2),
    ('ActiveLeft', 'i16', 2),
    ('ActiveRight', 'i16', 2),
    ('ActiveBottom', 'i16', 2),
    ('ActiveTop', 'i16', 2),
    ('FrameNumber', 'i16', 2),
    ('ColorChannelType', 'i16', 2),
    ('NumOfColorChannels', 'i16', 2),
    ('NumOfMatteChannels', 'i16', 2),
    ('NumOfAuxChannels', 'i16', 2),
    ('Revision', 'i16', 2),
    ('Gamma', 'str', 16),
    ('RedChroma', 'str', 24),
    ('GreenChroma', 'str', 24),
    ('BlueChroma', 'str', 24),
    ('WhitePoint', 'str', 24),
    ('JobNumber', 'i32', 4),
    ('FileName', 'str', 128),
    ('Description', 'str', 128),
    ('ProgramName', 'str', 64),
    ('MachineName', 'str', 32),
    ('UserName', 'str', 32),
    ('DateCreated', 'str', 20),
    ('Aspect', 'str', 24),
    ('AspectRatio', 'str', 8),
    ('ColorChannel', 'str', 32),
    ('FieldRendered', 'i16', 2),
    ('Time', 'str', 12),
    ('Filter', 'str', 32),
    ('NumOfChannelBits', 'i16', 2),
    ('MatteChannelType', 'i16', 2),
    ('NumOfMatteBits', 'i16', 2),
    ('AuxChannelType', 'i16', 2),
    ('NumOfAuxBits', 'i16', 2),
    ('AuxData', 'str', 32),
    ('Reserved', 'pad', 36),
    ('NextOffset', 'i32', 4),
)

HEADER_SIZE = sum(size for _, _, size in HEADER_LAYOUT)  # 740 bytes

# Size of one scanline offset table entry
OFFSET_ENTRY_SIZE = struct.calcsize(INT32_FORMAT)  # 4 bytes

# Default NTSC chromaticities
DEFAULT_RED_CHROMA = '0.67 0.08'
DEFAULT_GREEN_CHROMA = '0.21 0.71'
DEFAULT_BLUE_CHROMA = '0.14 0.33'
DEFAULT_WHITE_POINT = '0.31 0.316'

DEFAULT_COLOR_CHANNEL = 'rgb'

# Month number -> abbreviation used in DateCreated
MONTH_NAMES = ('JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN',
               'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC')

# Two spaces after the month so the 3-letter name fits in place
DATE_FORMAT = '%m  %d %H:%M %Y'

# Fields formatted with a C string terminator: at most size - 1 characters
TERMINATED_FIELDS = frozenset((
    'Gamma', 'RedChroma', 'GreenChroma', 'BlueChroma', 'WhitePoint',
    'DateCreated', 'AspectRatio',
))
