"""Text formatting of gamma, chromaticity, date and aspect fields."""

import sys
import os
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from rlacodec.header import (
    format_gamma, format_chromaticity, format_date, format_aspect_ratio,
)
from rlacodec.constants import MONTH_NAMES


def test_gamma_linear():
    assert format_gamma("Linear") == "1.0"
    assert format_gamma("LINEAR", 2.2) == "1.0"


def test_gamma_corrected():
    assert format_gamma("GammaCorrected", 2.2) == "2.2000000000"
    assert format_gamma("gammacorrected", 1.8) == "1.8000000000"


def test_gamma_unknown_is_empty():
    assert format_gamma("Unknown", 2.2) == ""
    assert format_gamma("sRGB") == ""


def test_chromaticity_three_components():
    value = np.array([0.64, 0.33, 0.0], dtype=np.float32)
    assert format_chromaticity(value, "0.67 0.08") == "0.6400 0.3300 0.0000"


def test_chromaticity_two_components():
    value = np.array([0.3127, 0.329], dtype=np.float32)
    assert format_chromaticity(value, "0.31 0.316") == "0.3127 0.3290"


def test_chromaticity_python_floats():
    assert format_chromaticity((0.15, 0.06), "x") == "0.1500 0.0600"


def test_chromaticity_missing_uses_default():
    assert format_chromaticity(None, "0.67 0.08") == "0.67 0.08"


@pytest.mark.parametrize("value", ["0.64 0.33", 7, np.array([1, 2], dtype=np.int32)])
def test_chromaticity_non_float_uses_default(value):
    assert format_chromaticity(value, "0.14 0.33") == "0.14 0.33"


def test_chromaticity_wrong_length_is_empty():
    value = np.array([0.1, 0.2, 0.3, 0.4], dtype=np.float32)
    assert format_chromaticity(value, "0.21 0.71") == ""


def test_date_march():
    text = format_date(datetime(2026, 3, 18, 14, 5))
    assert text[:3] == "MAR"
    assert text == "MAR 18 14:05 2026"


@pytest.mark.parametrize("month", range(1, 13))
def test_date_every_month(month):
    text = format_date(datetime(2026, month, 1, 0, 0))
    assert text.startswith(MONTH_NAMES[month - 1] + " ")
    assert text.endswith("2026")


def test_date_fits_field():
    assert len(format_date(datetime(2026, 12, 31, 23, 59))) <= 20


def test_aspect_ratio():
    assert format_aspect_ratio(4, 2) == "2.0000000000"
    assert format_aspect_ratio(640, 480) == "1.3333333333"
    assert format_aspect_ratio(1, 1) == "1.0000000000"
