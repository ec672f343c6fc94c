"""Big-endian byte stream reader and writer for RLA headers."""

import io
import struct
from ..constants import (
    HEADER_LAYOUT, HEADER_SIZE, REVISION, INT16_FORMAT, UINT16_FORMAT,
    INT32_FORMAT, UINT32_FORMAT, OFFSET_ENTRY_SIZE, TERMINATED_FIELDS,
)


class ByteStreamWriter:
    """Field-level writer; every multi-byte integer goes out big-endian."""

    def __init__(self, f):
        """
        Initialize byte stream writer.

        Args:
            f: File object opened in binary write mode
        """
        self.f = f
        self.bytes_written = 0

    def write_int16(self, value: int) -> None:
        """Write a 16-bit integer (two's complement for negatives)."""
        self.write_bytes(struct.pack(UINT16_FORMAT, value & 0xFFFF))

    def write_int32(self, value: int) -> None:
        """Write a 32-bit integer (two's complement for negatives)."""
        self.write_bytes(struct.pack(UINT32_FORMAT, value & 0xFFFFFFFF))

    def write_fixed_string(self, text: str, size: int, terminate: bool = False) -> None:
        """Write text truncated to `size` bytes (`size - 1` if terminated) and NUL padded."""
        limit = size - 1 if terminate else size
        data = text.encode('latin-1', errors='replace')[:limit]
        self.write_bytes(data.ljust(size, b'\x00'))

    def write_padding(self, size: int) -> None:
        """Write `size` zero bytes."""
        self.write_bytes(bytes(size))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self.f.write(data)
        self.bytes_written += len(data)


class ByteStreamReader:
    """Field-level reader for big-endian data."""

    def __init__(self, data_bytes: bytes):
        """
        Initialize byte stream reader.

        Args:
            data_bytes: Binary data to read from
        """
        self.data = data_bytes
        self.byte_ptr = 0

    def read_bytes(self, size: int) -> bytes:
        """Read `size` raw bytes."""
        if self.byte_ptr + size > len(self.data):
            raise EOFError("End of byte stream")
        chunk = self.data[self.byte_ptr:self.byte_ptr + size]
        self.byte_ptr += size
        return chunk

    def read_int16(self) -> int:
        """Read a signed 16-bit integer."""
        return struct.unpack(INT16_FORMAT, self.read_bytes(2))[0]

    def read_int32(self) -> int:
        """Read a signed 32-bit integer."""
        return struct.unpack(INT32_FORMAT, self.read_bytes(4))[0]

    def read_fixed_string(self, size: int) -> str:
        """Read a NUL padded text field."""
        return self.read_bytes(size).split(b'\x00', 1)[0].decode('latin-1')

    def bytes_remaining(self) -> int:
        """Return number of bytes remaining."""
        return max(0, len(self.data) - self.byte_ptr)


def write_header(writer: ByteStreamWriter, header) -> None:
    """
    Write every header field individually, in file order.

    Args:
        writer: Destination byte stream
        header: RlaHeader (any object with the header field attributes)
    """
    for name, kind, size in HEADER_LAYOUT:
        value = getattr(header, name)
        if kind == 'i16':
            writer.write_int16(value)
        elif kind == 'i32':
            writer.write_int32(value)
        elif kind == 'str':
            writer.write_fixed_string(value, size, terminate=name in TERMINATED_FIELDS)
        else:
            writer.write_padding(size)


def pack_header(header) -> bytes:
    """
    Serialize a header record into its 740-byte form.

    Args:
        header: Populated RlaHeader

    Returns:
        740-byte header as bytes
    """
    buffer = io.BytesIO()
    write_header(ByteStreamWriter(buffer), header)
    return buffer.getvalue()


def pack_offset_table(height: int) -> bytes:
    """Scanline offset table placeholder: one zero int32 per row."""
    return bytes(OFFSET_ENTRY_SIZE * max(height, 0))


def unpack_header(header_bytes: bytes) -> dict:
    """
    Unpack the 740-byte RLA header.

    Args:
        header_bytes: 740-byte header data

    Returns:
        Dictionary with header fields (Revision reported unsigned)

    Raises:
        ValueError: If header is invalid
    """
    if len(header_bytes) != HEADER_SIZE:
        raise ValueError(f"Header size mismatch. Expected {HEADER_SIZE}, got {len(header_bytes)}")

    reader = ByteStreamReader(header_bytes)
    fields = {}
    for name, kind, size in HEADER_LAYOUT:
        if kind == 'i16':
            fields[name] = reader.read_int16()
        elif kind == 'i32':
            fields[name] = reader.read_int32()
        elif kind == 'str':
            fields[name] = reader.read_fixed_string(size)
        else:
            fields[name] = reader.read_bytes(size)

    fields['Revision'] &= 0xFFFF
    if fields['Revision'] != REVISION:
        raise ValueError(f"Unsupported revision: {fields['Revision']:#06x}")

    return fields


def unpack_offset_table(data: bytes, height: int) -> list:
    """Read `height` scanline offsets following the header."""
    needed = height * OFFSET_ENTRY_SIZE
    reader = ByteStreamReader(data)
    if reader.bytes_remaining() < needed:
        raise ValueError(f"Offset table truncated: expected {needed} bytes, got {reader.bytes_remaining()}")
    return [reader.read_int32() for _ in range(height)]
