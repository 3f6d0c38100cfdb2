"""Bit-level writer over a seekable binary stream."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterable

from bitio.bits import DekuIOError, Order, bits_to_bytes, bytes_to_bits


class Writer:
    """Writes bits and bytes to a binary stream, holding back bits of a partial byte.

    ``leftover`` is a pair of the bits not yet written (fewer than a byte) and the
    order they were written with. ``bits_written`` counts the bits sent to the stream.
    """

    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self.leftover: tuple[list[bool], Order] = ([], Order.MSB0)
        self.bits_written = 0

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._inner

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Seek the wrapped stream, dropping any leftover bits."""
        self.leftover = ([], Order.MSB0)
        return self._inner.seek(offset, whence)

    def rest(self) -> list[bool]:
        """Return the bits that are waiting to complete a byte."""
        return list(self.leftover[0])

    def _write_all(self, data: bytes) -> None:
        view = memoryview(data)
        try:
            while view:
                written = self._inner.write(view)
                if written is None:
                    written = len(view)
                if written == 0:
                    raise OSError("stream accepted no data")
                view = view[written:]
        except OSError as exc:
            raise DekuIOError(exc) from exc

    def write_bits_order(self, bits: Iterable[bool | int], order: Order) -> None:
        """Write ``bits``, emitting every complete byte and keeping the remainder.

        With ``Order.MSB0`` new bits follow the held bits; with ``Order.LSB0`` the
        held bits are placed after the new ones and whole bytes are emitted in
        reverse order.
        """
        new_bits = [bool(bit) for bit in bits]
        held, held_order = self.leftover

        if len(held) + len(new_bits) < 8:
            if held_order is Order.MSB0:
                self.leftover = (held + new_bits, order)
            else:
                self.leftover = (new_bits + held, order)
            return

        if not held:
            combined = new_bits
        elif held_order is Order.MSB0:
            combined = held + new_bits
        else:
            combined = new_bits + held

        if order is Order.MSB0:
            whole = len(combined) - len(combined) % 8
            buf = bits_to_bytes(combined[:whole])
            self.bits_written += len(buf) * 8
            self.leftover = (combined[whole:], order)
            self._write_all(buf)
        else:
            skip = len(combined) % 8
            buf = bits_to_bytes(combined[skip:])[::-1]
            self._write_all(buf)
            self.bits_written += len(buf) * 8
            self.leftover = (combined[:skip], order)

    def write_bits(self, bits: Iterable[bool | int]) -> None:
        """Write ``bits`` most significant first."""
        self.write_bits_order(bits, Order.MSB0)

    def write_bytes(self, data: bytes | bytearray) -> None:
        """Write ``data``, going through the bit path when bits are held back."""
        if self.leftover[0]:
            self.write_bits(bytes_to_bits(data))
        else:
            self._write_all(bytes(data))
            self.bits_written += len(data) * 8

    def finalize(self) -> None:
        """Pad held bits with zeros to a whole byte and write it."""
        held, order = self.leftover
        if not held:
            return
        padded = held + [False] * (-len(held) % 8)
        buf = bits_to_bytes(padded)
        self._write_all(buf)
        self.bits_written += len(buf) * 8
        self.leftover = ([], order)