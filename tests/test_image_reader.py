"""Image reading and description of input arrays."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from PIL import Image
from rlacodec.image import ImageDescription
from rlacodec.io import read_image, describe_array


def test_read_npy_2d(tmp_path):
    path = tmp_path / "gray.npy"
    np.save(str(path), np.zeros((5, 7), dtype=np.uint16))

    pixels, spec = read_image(str(path))

    assert pixels.shape == (5, 7, 1)
    assert (spec.width, spec.height, spec.nchannels) == (7, 5, 1)
    assert spec.format == np.uint16


def test_read_npy_rgba_float(tmp_path):
    path = tmp_path / "rgba.npy"
    np.save(str(path), np.ones((2, 3, 4), dtype=np.float32))

    pixels, spec = read_image(str(path))

    assert spec.nchannels == 4
    assert spec.format == np.float32
    assert spec.full_width == 3 and spec.full_height == 2


def test_read_raw(tmp_path):
    path = tmp_path / "pix.raw"
    np.arange(24, dtype=np.uint8).tofile(str(path))

    pixels, spec = read_image(str(path), width=4, height=2, nchannels=3)

    assert pixels.shape == (2, 4, 3)
    assert pixels[1, 3, 2] == 23


def test_read_raw_requires_dimensions(tmp_path):
    path = tmp_path / "pix.raw"
    path.write_bytes(b'\x00' * 4)
    with pytest.raises(ValueError):
        read_image(str(path))


def test_read_raw_size_mismatch(tmp_path):
    path = tmp_path / "pix.raw"
    path.write_bytes(b'\x00' * 5)
    with pytest.raises(ValueError):
        read_image(str(path), width=2, height=2)


def test_read_png(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new('RGB', (6, 4), (10, 20, 30)).save(str(path))

    pixels, spec = read_image(str(path))

    assert pixels.shape == (4, 6, 3)
    assert spec.format == np.uint8
    assert tuple(pixels[0, 0]) == (10, 20, 30)


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        read_image(str(tmp_path / "file.xyz"))


def test_describe_array_rejects_2d():
    with pytest.raises(ValueError):
        describe_array(np.zeros((2, 2)))


def test_attribute_accessors():
    spec = ImageDescription(2, 2, 1)
    spec.attribute('i', 3)
    spec.attribute('f', 2.5)
    spec.attribute('s', 'text')

    assert spec.get_int_attribute('i') == 3
    assert spec.get_int_attribute('s', 9) == 9
    assert spec.get_float_attribute('f') == 2.5
    assert spec.get_float_attribute('i') == 3.0
    assert spec.get_string_attribute('s') == 'text'
    assert spec.get_string_attribute('i', 'd') == 'd'
    assert spec.find_attribute('missing') is None


def test_channel_format_count_must_match():
    with pytest.raises(ValueError):
        ImageDescription(2, 2, 5, channelformats=[np.float32] * 3)
    spec = ImageDescription(2, 2, 4, channelformats=[np.float32] * 3 + [np.uint8])
    assert spec.pixel_bytes() == 13
