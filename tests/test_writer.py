import io

import pytest

from bitio.bits import DekuIOError, Order
from bitio.writer import Writer


def _bits(text: str) -> list[bool]:
    return [ch == "1" for ch in text]


class _FailingStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError("disk full")


def test_writer_bits():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bytes(bytes.fromhex("aa"))
    writer.write_bits(_bits("10111011"))
    writer.write_bits(_bits("1111"))
    writer.write_bits(_bits("0001"))
    writer.write_bytes(bytes.fromhex("aa"))
    writer.write_bits(_bits("0001"))
    writer.write_bits(_bits("1111"))
    writer.write_bits(_bits("0001"))
    writer.write_bytes(bytes.fromhex("aa"))
    writer.write_bits(_bits("1111"))
    assert out.getvalue() == bytes([0xAA, 0xBB, 0xF1, 0xAA, 0x1F, 0x1A, 0xAF])
    assert writer.bits_written == 56
    assert writer.rest() == []


def test_writer_bytes():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bytes(bytes.fromhex("aa"))
    assert out.getvalue() == b"\xaa"
    assert writer.bits_written == 8


@pytest.mark.parametrize(
    "first, first_order, second, second_order, expected",
    [
        ("1010", Order.MSB0, "0101", Order.MSB0, [0b1010_0101]),
        ("1010", Order.LSB0, "0101", Order.LSB0, [0b0101_1010]),
        ("1010", Order.MSB0, "0101", Order.LSB0, [0b1010_0101]),
        ("101010", Order.MSB0, "010101", Order.MSB0, [0b1010_1001, 0b0101_0000]),
        ("101010", Order.LSB0, "010101", Order.LSB0, [0b0110_1010, 0b0101_0000]),
        ("101010", Order.LSB0, "010101", Order.MSB0, [0b0101_0110, 0b1010_0000]),
    ],
)
def test_bit_order(first, first_order, second, second_order, expected):
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bits_order(_bits(first), first_order)
    writer.write_bits_order(_bits(second), second_order)
    writer.finalize()
    assert out.getvalue() == bytes(expected)
    assert writer.bits_written == len(expected) * 8


def test_rest_holds_partial_byte():
    writer = Writer(io.BytesIO())
    writer.write_bits(_bits("101"))
    assert writer.rest() == [True, False, True]
    assert writer.bits_written == 0


def test_finalize_pads_with_zeros():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bits(_bits("11"))
    writer.finalize()
    assert out.getvalue() == b"\xc0"
    assert writer.rest() == []


def test_finalize_without_leftover_writes_nothing():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bytes(b"\x01\x02")
    writer.finalize()
    assert out.getvalue() == b"\x01\x02"
    assert writer.bits_written == 16


def test_write_bits_accepts_ints():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bits([1, 1, 1, 1, 0, 0, 0, 0])
    assert out.getvalue() == b"\xf0"


def test_seek_drops_leftover():
    out = io.BytesIO(b"\x00\x00\x00")
    writer = Writer(out)
    writer.write_bits(_bits("111"))
    position = writer.seek(2)
    assert position == 2
    assert writer.rest() == []
    writer.write_bytes(b"\xff")
    assert out.getvalue() == b"\x00\x00\xff"


def test_into_inner_returns_stream():
    out = io.BytesIO()
    writer = Writer(out)
    writer.write_bytes(b"\x7f")
    assert writer.into_inner().getvalue() == b"\x7f"


def test_write_bytes_io_error():
    writer = Writer(_FailingStream())
    with pytest.raises(DekuIOError):
        writer.write_bytes(b"\x01")


def test_write_bits_io_error():
    writer = Writer(_FailingStream())
    with pytest.raises(DekuIOError):
        writer.write_bits(_bits("10101010"))


def test_finalize_io_error():
    writer = Writer(_FailingStream())
    writer.write_bits(_bits("1"))
    with pytest.raises(DekuIOError):
        writer.finalize()