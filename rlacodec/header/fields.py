"""Text formatting for RLA header fields (gamma, chromaticities, date, aspect)."""

from datetime import datetime

import numpy as np

from ..constants import DATE_FORMAT, MONTH_NAMES


def format_gamma(color_space: str, gamma: float = 1.0) -> str:
    """
    Format the Gamma field from the color space name.

    Args:
        color_space: Value of the color space attribute
        gamma: Gamma value, used for "GammaCorrected"

    Returns:
        "1.0" for linear data, the gamma with 10 decimals for gamma
        corrected data, empty string otherwise
    """
    name = color_space.lower()
    if name == 'linear':
        return '1.0'
    if name == 'gammacorrected':
        return f"{gamma:.10f}"
    return ''


def format_chromaticity(value, default: str) -> str:
    """
    Format a chromaticity attribute as space separated decimals.

    A float vector of 2 or 3 components is written with 4 decimals per
    component. A float vector of any other length gives an empty field.
    Anything that is not a float vector falls back to `default`.
    """
    if value is None:
        return default

    arr = np.asarray(value)
    if not np.issubdtype(arr.dtype, np.floating):
        return default

    arr = arr.ravel()
    if arr.size not in (2, 3):
        return ''
    return ' '.join(f"{float(c):.4f}" for c in arr)


def format_date(now: datetime) -> str:
    """
    Format the DateCreated field, e.g. "03  18 14:05 2026" -> "MAR 18 14:05 2026".

    The leading month number is overwritten in place by its abbreviation.
    """
    text = now.strftime(DATE_FORMAT)
    month = int(text[:2])
    if 1 <= month <= 12:
        text = MONTH_NAMES[month - 1] + text[3:]
    return text


def format_aspect_ratio(width: int, height: int) -> str:
    """Pixel aspect of the data window, width / height with 10 decimals."""
    return f"{width / float(height):.10f}"
