"""Channel classification into color / matte / aux groups."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from rlacodec.header import (
    classify_channels, GroupKind, PixelKind, pixel_kind_of, bit_depth_of,
)


def counts(groups):
    return tuple(g.count for g in groups)


# ---------------------------------------------------------------------------
# Explicit per-channel types
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("nchannels", [1, 2, 3])
def test_explicit_uniform_small_is_all_color(nchannels):
    groups = classify_channels(nchannels, [np.float32] * nchannels)
    assert counts(groups) == (nchannels, 0, 0)


@pytest.mark.parametrize("nchannels", range(1, 9))
def test_explicit_uniform_color_capped_at_three(nchannels):
    color, matte, aux = classify_channels(nchannels, [np.uint8] * nchannels)
    assert color.count == min(nchannels, 3)
    # Channels past the color cap form one equal-typed matte run
    assert matte.count == max(nchannels - 3, 0)
    assert aux.count == 0


@pytest.mark.parametrize("a,b,c", [
    (3, 1, 2),
    (2, 2, 1),
    (1, 3, 4),
    (3, 1, 0),
    (1, 1, 1),
    (3, 4, 1),
])
def test_explicit_three_runs_recovered(a, b, c):
    formats = [np.float32] * a + [np.uint8] * b + [np.uint16] * c
    groups = classify_channels(a + b + c, formats)
    assert counts(groups) == (a, b, c)


def test_explicit_group_types():
    formats = [np.float32] * 3 + [np.uint8] + [np.uint16] * 2
    color, matte, aux = classify_channels(6, formats)

    assert color.kind is GroupKind.COLOR
    assert color.pixel_kind is PixelKind.FLOAT
    assert color.bit_depth == 32

    assert matte.kind is GroupKind.MATTE
    assert matte.pixel_kind is PixelKind.BYTE
    assert matte.bit_depth == 8

    assert aux.kind is GroupKind.AUX
    assert aux.pixel_kind is PixelKind.BYTE
    assert aux.bit_depth == 16


def test_explicit_aux_takes_everything_left():
    formats = [np.float32] * 3 + [np.uint8, np.uint16, np.float32]
    groups = classify_channels(6, formats)
    assert counts(groups) == (3, 1, 2)
    assert sum(counts(groups)) == 6
    assert groups[2].bit_depth == 16


def test_explicit_counts_sum_to_channel_count():
    rng = np.random.default_rng(7)
    choices = [np.uint8, np.uint16, np.float32, np.float16]
    for n in range(1, 12):
        formats = [choices[i] for i in rng.integers(0, len(choices), n)]
        assert sum(counts(classify_channels(n, formats))) == n


def test_explicit_mismatch_stops_color_early():
    groups = classify_channels(4, [np.uint8, np.uint16, np.uint16, np.uint16])
    assert counts(groups) == (1, 3, 0)


def test_explicit_zero_channels_gives_empty_groups():
    groups = classify_channels(0, [np.float32])
    assert counts(groups) == (0, 0, 0)
    assert all(g.bit_depth == 0 for g in groups)


# ---------------------------------------------------------------------------
# Single global type
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("nchannels,expected", [
    (1, (1, 0, 0)),
    (2, (1, 1, 0)),
    (3, (3, 0, 0)),
    (4, (3, 1, 0)),
    (5, (3, 1, 1)),
    (6, (3, 1, 2)),
    (7, (3, 1, 3)),
    (8, (3, 1, 4)),
])
def test_global_heuristic(nchannels, expected):
    assert counts(classify_channels(nchannels, None, np.uint8)) == expected


def test_global_color_is_one_below_three():
    for n in range(1, 9):
        color, _, _ = classify_channels(n, [], np.float32)
        assert color.count == (3 if n >= 3 else 1)


def test_global_zero_channels_still_reports_luminosity():
    # The luminosity decrement happens even with nothing to take
    assert counts(classify_channels(0, None, np.uint8)) == (1, 0, 0)


def test_global_groups_share_type():
    groups = classify_channels(5, None, np.float32)
    for g in groups:
        assert g.pixel_kind is PixelKind.FLOAT
        assert g.bit_depth == 32

    groups = classify_channels(2, None, np.uint16)
    for g in groups:
        assert g.pixel_kind is PixelKind.BYTE
        assert g.bit_depth == 16


# ---------------------------------------------------------------------------
# Type mapping
# ---------------------------------------------------------------------------

def test_pixel_kind_mapping():
    assert pixel_kind_of(np.float32) is PixelKind.FLOAT
    assert pixel_kind_of(np.float16) is PixelKind.BYTE
    assert pixel_kind_of(np.float64) is PixelKind.BYTE
    assert pixel_kind_of(np.uint8) is PixelKind.BYTE
    assert PixelKind.FLOAT.value == 4
    assert PixelKind.BYTE.value == 0


def test_bit_depth_mapping():
    assert bit_depth_of(np.uint8) == 8
    assert bit_depth_of(np.uint16) == 16
    assert bit_depth_of(np.float16) == 16
    assert bit_depth_of(np.float32) == 32
    assert bit_depth_of(np.float64) == 64
