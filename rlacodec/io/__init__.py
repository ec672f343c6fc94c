"""I/O modules for the RLA writer."""

from .image_reader import read_image, describe_array
from .bytestream import (
    ByteStreamWriter, ByteStreamReader, write_header, pack_header,
    unpack_header, pack_offset_table, unpack_offset_table,
)

__all__ = [
    'read_image',
    'describe_array',
    'ByteStreamWriter',
    'ByteStreamReader',
    'write_header',
    'pack_header',
    'unpack_header',
    'pack_offset_table',
    'unpack_offset_table',
]
