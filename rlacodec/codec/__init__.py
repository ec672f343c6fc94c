"""Codec modules for the RLA writer."""

from .writer import (
    RlaWriter,
    write_rla,
    InvalidResolutionError,
    UnsupportedDimensionalityError,
    SinkCreationError,
)

__all__ = [
    'RlaWriter',
    'write_rla',
    'InvalidResolutionError',
    'UnsupportedDimensionalityError',
    'SinkCreationError',
]
