"""Bit-level reader over a seekable binary stream."""

from __future__ import annotations

import io
from typing import BinaryIO

from bitio.bits import DekuIOError, IncompleteError, Order, bytes_to_bits

Leftover = "int | list[bool] | None"


class Reader:
    """Reads bits and bytes from a binary stream, keeping unread bits of a partial byte.

    ``leftover`` holds what was read from the stream but not yet handed out:
    ``None``, a single byte (an ``int``, buffered by :meth:`end`) or a list of bits.
    ``bits_read`` counts the bits handed out by :meth:`read_bits` and :meth:`read_bytes`.
    """

    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self.leftover: int | list[bool] | None = None
        self.bits_read = 0

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._inner

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Seek the wrapped stream, dropping any leftover bits."""
        self.leftover = None
        if whence == io.SEEK_SET:
            if offset > 0:
                self.bits_read = offset * 8
        elif whence == io.SEEK_CUR:
            if offset > 0:
                self.bits_read += offset * 8
        return self._inner.seek(offset, whence)

    def rest(self) -> list[bool]:
        """Return the bits that were read from the stream but not consumed."""
        if self.leftover is None:
            return []
        if isinstance(self.leftover, int):
            return bytes_to_bits([self.leftover])
        return list(self.leftover)

    def end(self) -> bool:
        """Return True if the stream is exhausted and no bits are buffered.

        A byte read to check this is buffered and not counted in ``bits_read``.
        """
        if self.leftover is not None:
            return False
        try:
            data = self._inner.read(1)
        except OSError:
            data = b"\x00"
        if not data:
            return True
        self.leftover = data[0]
        return False

    def skip_bits(self, amt: int) -> None:
        """Skip ``amt`` bits, counting them in ``bits_read``."""
        bytes_amt, bits_amt = divmod(amt, 8)
        if bytes_amt:
            try:
                self.seek(bytes_amt, io.SEEK_CUR)
            except OSError as exc:
                raise DekuIOError(exc) from exc
            self.bits_read = 0
        self.bits_read += bytes_amt * 8
        self.read_bits(bits_amt, Order.MSB0)

    def _read_exact(self, size: int, need_bits: int) -> bytes:
        try:
            data = self._inner.read(size)
        except OSError as exc:
            raise DekuIOError(exc) from exc
        if data is None or len(data) < size:
            raise IncompleteError(need_bits)
        return bytes(data)

    def read_bits(self, amt: int, order: Order = Order.MSB0) -> list[bool] | None:
        """Read exactly ``amt`` bits, or return None when ``amt`` is zero.

        Bits beyond ``amt`` taken from the last byte are kept for the next read;
        ``order`` decides whether they come from the low or the high end of it.
        """
        if amt == 0:
            return None

        if isinstance(self.leftover, int):
            self.leftover = bytes_to_bits([self.leftover])
        stored: list[bool] = self.leftover if self.leftover is not None else []

        if amt == len(stored):
            ret = stored
            self.leftover = None
        elif amt > len(stored):
            bits_left = amt - len(stored)
            bytes_len = -(-bits_left // 8)
            new_bits = bytes_to_bits(self._read_exact(bytes_len, amt))

            front_bits: list[bool] = []
            if bits_left > 8:
                cut = bits_left - bits_left % 8
                front_bits, new_bits = new_bits[:cut], new_bits[cut:]
                bits_left %= 8

            if order is Order.LSB0:
                split = len(new_bits) - bits_left
                rest, used = new_bits[:split], new_bits[split:]
                ret = used + front_bits + stored
                self.leftover = rest or None
            else:
                used, not_needed = new_bits[:bits_left], new_bits[bits_left:]
                ret = stored + front_bits + used
                self.leftover = not_needed or None
        else:
            if order is Order.LSB0:
                split = len(stored) - amt
                ret, self.leftover = stored[split:], stored[:split]
            else:
                ret, self.leftover = stored[:amt], stored[amt:]

        self.bits_read += len(ret)
        return ret

    def read_bytes(self, amt: int, order: Order = Order.MSB0) -> bytes | list[bool] | None:
        """Read ``amt`` bytes.

        When byte aligned this returns ``bytes``; when bits are left over from an
        earlier read it returns ``amt * 8`` bits as from :meth:`read_bits`.
        """
        if amt == 0 and not isinstance(self.leftover, list):
            return b""
        if self.leftover is None:
            data = self._read_exact(amt, amt * 8)
            self.bits_read += amt * 8
            return data
        if isinstance(self.leftover, int):
            first = self.leftover
            self.leftover = None
            remaining = amt - 1
            data = bytes([first])
            if remaining:
                data += self._read_exact(remaining, remaining * 8)
            self.bits_read += amt * 8
            return data
        return self.read_bits(amt * 8, order)