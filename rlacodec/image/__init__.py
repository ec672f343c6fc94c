"""Image description model for the RLA writer."""

from .description import ImageDescription

__all__ = [
    'ImageDescription',
]
