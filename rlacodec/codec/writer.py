"""RLA output session - validates, writes the header and copies scanlines."""

import logging
import os
import numpy as np
from datetime import datetime
from typing import Callable, Optional

from ..constants import PROGRAM_NAME
from ..image import ImageDescription
from ..header import build_header
from ..io.bytestream import ByteStreamWriter, write_header, pack_offset_table

logger = logging.getLogger(__name__)

FORMAT_NAME = 'rla'
MODE_CREATE = 'create'


class InvalidResolutionError(ValueError):
    """Width or height below 1."""


class UnsupportedDimensionalityError(ValueError):
    """Volume images (depth > 1) cannot be stored."""


class SinkCreationError(OSError):
    """The output file could not be created."""


class RlaWriter:
    """
    Writer for Wavefront RLA files.

    Lifecycle:
    1. open()  - validate the description, create the file, write the
                 header and the scanline offset table
    2. write_scanline() for each row
    3. close()

    Pixel data is copied uncompressed and the offset table holds zero
    placeholders, so the output is not readable by RLA decoders that
    seek through the offset table.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None,
                 program_name: str = PROGRAM_NAME):
        self.clock = clock
        self.program_name = program_name
        self.spec = None
        self.header = None
        self.data_offset = 0
        self._file = None
        self._writer = None

    def format_name(self) -> str:
        return FORMAT_NAME

    def open(self, name: str, spec: ImageDescription, mode: str = MODE_CREATE) -> bool:
        """
        Open `name` for writing and emit the header.

        Args:
            name: Output file path
            spec: Description of the image to write
            mode: Only 'create' is supported

        Returns:
            True on success

        Raises:
            ValueError: If mode is not 'create'
            InvalidResolutionError: If width or height is below 1
            UnsupportedDimensionalityError: If depth is above 1
            SinkCreationError: If the file cannot be created
        """
        if mode != MODE_CREATE:
            raise ValueError(f"{self.format_name()} does not support subimages or MIP levels")

        self.close()
        self.spec = spec

        if spec.width < 1 or spec.height < 1:
            raise InvalidResolutionError(
                f"Image resolution must be at least 1x1, you asked for "
                f"{spec.width} x {spec.height}")

        # depth < 1 is treated as a flat image
        if spec.depth > 1:
            raise UnsupportedDimensionalityError(
                f"{self.format_name()} does not support volume images (depth > 1)")

        name = os.fspath(name)
        self.header = build_header(spec, filename=name, clock=self.clock,
                                   program_name=self.program_name)

        try:
            self._file = open(name, 'wb')
        except OSError as e:
            raise SinkCreationError(f'Could not open file "{name}": {e}') from e

        try:
            self._writer = ByteStreamWriter(self._file)
            write_header(self._writer, self.header)

            # Offsets are never filled in; rows follow the table in order
            self._writer.write_bytes(pack_offset_table(spec.height))
        except BaseException:
            self.close()
            raise

        self.data_offset = self._writer.bytes_written
        logger.info("Opened %s (%s), pixel data at byte %d", name, spec,
                    self.data_offset)
        logger.warning("Scanline offset table of %s left as %d zero placeholders",
                       name, spec.height)
        return True

    def write_scanline(self, y: int, data: np.ndarray) -> bool:
        """
        Append one row of pixels.

        Args:
            y: Row index (informational, rows must arrive in order)
            data: Array of shape (width, nchannels) or flat bytes

        Returns:
            True on success
        """
        if self._file is None:
            raise ValueError("write_scanline called before open")

        if isinstance(data, (bytes, bytearray)):
            row = bytes(data)
        else:
            row = self._to_native_scanline(np.asarray(data))

        expected = self.spec.scanline_bytes()
        if len(row) != expected:
            raise ValueError(f"Scanline {y} size mismatch. Expected {expected}, got {len(row)}")

        self._writer.write_bytes(row)
        return True

    def _to_native_scanline(self, row: np.ndarray) -> bytes:
        """Convert a row to the per-channel formats of the description."""
        row = row.reshape(self.spec.width, self.spec.nchannels)
        if not self.spec.channelformats:
            return row.astype(self.spec.format, copy=False).tobytes()

        # Mixed types: interleave each channel at its own width
        fields = [(f'c{i}', self.spec.channel_format(i))
                  for i in range(self.spec.nchannels)]
        out = np.empty(self.spec.width, dtype=np.dtype(fields))
        for i in range(self.spec.nchannels):
            out[f'c{i}'] = row[:, i]
        return out.tobytes()

    def close(self) -> bool:
        """Close the file if open. Safe to call repeatedly."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
        return True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def write_rla(path: str, pixels: np.ndarray, spec: ImageDescription,
              clock: Optional[Callable[[], datetime]] = None):
    """
    Write a whole image to an RLA file.

    Args:
        path: Output file path
        pixels: Array of shape (height, width, nchannels)
        spec: Description of the image
        clock: Creation-time source for the header (default: datetime.now)

    Returns:
        The RlaHeader that was written
    """
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]

    with RlaWriter(clock=clock) as out:
        out.open(path, spec)
        for y in range(spec.height):
            out.write_scanline(y, pixels[y])
        return out.header
