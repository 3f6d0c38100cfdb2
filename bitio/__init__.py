"""Bit-level reading and writing over seekable byte streams."""

__version__ = "0.1.0"
__all__ = ["bits", "reader", "writer"]