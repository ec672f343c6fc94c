"""Image reader supporting NumPy, raw and Pillow-readable formats."""

import numpy as np
from pathlib import Path
from typing import Tuple

from ..image import ImageDescription

PILLOW_SUFFIXES = ('.png', '.jpg', '.jpeg', '.tif', '.tiff', '.bmp', '.tga')


def read_image(path: str, width: int = None, height: int = None,
               nchannels: int = 1, dtype=np.uint8) -> Tuple[np.ndarray, ImageDescription]:
    """
    Read an image and describe it for the RLA writer.

    Args:
        path: Path to the image file (.npy, .raw or a Pillow format)
        width: Image width (required for .raw files)
        height: Image height (required for .raw files)
        nchannels: Channel count for raw files (default: 1)
        dtype: Pixel type for raw files (default: uint8)

    Returns:
        (pixels, spec) where pixels is a (height, width, channels) array

    Raises:
        ValueError: If format is unsupported or parameters are missing
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == '.npy':
        pixels = _read_numpy(path)
    elif suffix == '.raw':
        if width is None or height is None:
            raise ValueError("Width and height are required for .raw files")
        pixels = _read_raw(path, width, height, nchannels, dtype)
    elif suffix in PILLOW_SUFFIXES:
        pixels = _read_pillow(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")

    return pixels, describe_array(pixels)


def describe_array(pixels: np.ndarray) -> ImageDescription:
    """Build an ImageDescription for a (height, width, channels) array."""
    if pixels.ndim != 3:
        raise ValueError(f"Expected 3D array, got {pixels.ndim}D")
    h, w, c = pixels.shape
    return ImageDescription(width=w, height=h, nchannels=c, format=pixels.dtype)


def _read_numpy(path: Path) -> np.ndarray:
    """Read a NumPy array file, promoting 2D arrays to one channel."""
    data = np.load(str(path))

    if data.ndim == 2:
        data = data[:, :, np.newaxis]
    if data.ndim != 3:
        raise ValueError(f"Expected 2D or 3D array, got {data.ndim}D")

    return data


def _read_raw(path: Path, width: int, height: int, nchannels: int,
              dtype) -> np.ndarray:
    """Read interleaved raw pixels."""
    with open(path, 'rb') as f:
        data = np.frombuffer(f.read(), dtype=dtype)

    expected_size = width * height * nchannels
    if len(data) != expected_size:
        raise ValueError(f"Data size mismatch. Expected {expected_size}, got {len(data)}")

    return data.reshape((height, width, nchannels))


def _read_pillow(path: Path) -> np.ndarray:
    """Read an image through Pillow."""
    from PIL import Image

    with Image.open(str(path)) as img:
        if img.mode not in ('L', 'LA', 'RGB', 'RGBA', 'F'):
            img = img.convert('RGBA' if 'A' in img.getbands() else 'RGB')
        pixels = np.asarray(img)

    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    return pixels
