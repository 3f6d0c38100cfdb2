"""Bit-order tags, error types and helpers for converting between bytes and bits.

Bits are plain lists of booleans, most significant bit of each byte first.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Order(Enum):
    """Order in which bits are taken from, or placed into, a byte."""

    MSB0 = "msb0"
    LSB0 = "lsb0"


class DekuError(Exception):
    """Base class for every error raised while reading or writing bits."""


class IncompleteError(DekuError):
    """Raised when the input ends before the requested number of bits."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__(f"Incomplete(NeedSize {{ bits: {bits} }})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncompleteError):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(("incomplete", self.bits))


class DekuIOError(DekuError):
    """Raised when the underlying stream fails for a reason other than running out."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Io({kind})")


def bytes_to_bits(data: bytes | bytearray | Iterable[int]) -> list[bool]:
    """Expand bytes into a list of bits, most significant bit of each byte first."""
    bits: list[bool] = []
    for byte in bytes(data):
        bits.extend(bool(byte >> shift & 1) for shift in range(7, -1, -1))
    return bits


def bits_to_bytes(bits: Iterable[bool | int]) -> bytes:
    """Pack a whole number of bytes' worth of bits, most significant bit first."""
    values = [bool(bit) for bit in bits]
    if len(values) % 8:
        raise ValueError(
            f"cannot pack {len(values)} bits into bytes: not a multiple of 8"
        )
    out = bytearray()
    for start in range(0, len(values), 8):
        byte = 0
        for bit in values[start:start + 8]:
            byte = byte << 1 | bit
        out.append(byte)
    return bytes(out)