"""Polygon Adapter - MATIC/POL delegation via the Everstake ValidatorShare."""

from .adapter import Polygon

__all__ = ["Polygon"]
