"""Reusable type definitions for seed discovery."""

from .base import StrictBaseModel
from .uint import BaseUint, Uint16, Uint32

__all__ = [
    "BaseUint",
    "StrictBaseModel",
    "Uint16",
    "Uint32",
]
