# bitio

Read and write individual bits on top of any seekable binary stream, such as
`io.BytesIO` or an open file.

- `bitio.reader.Reader` reads bits or bytes from a stream. Bits that are left
  over from a partly read byte are kept for the next read.
- `bitio.writer.Writer` holds bits back until a whole byte can be written.
  `finalize()` pads whatever is left with zero bits and writes it.
- `bitio.bits.Order` picks the bit order. `Order.MSB0` takes bits from the most
  significant end of a byte first. `Order.LSB0` takes them from the least
  significant end first.

A run of bits is a list of booleans, most significant bit first.
`bitio.bits.bytes_to_bits` expands bytes into such a list, and
`bitio.bits.bits_to_bytes` packs one back into `bytes`. `bits_to_bytes` raises
`ValueError` when the number of bits is not a multiple of 8.

## Installation

```
pip install .
```

## Reading

```python
import io
from bitio.bits import Order
from bitio.reader import Reader

reader = Reader(io.BytesIO(bytes([0xAB])))
reader.read_bits(4, Order.MSB0)   # [True, False, True, False]  (0xa)
reader.read_bits(4, Order.MSB0)   # [True, False, True, True]   (0xb)
reader.end()                      # True
reader.bits_read                  # 8
```

`Reader` methods and attributes:

- `read_bits(amt, order)` returns exactly `amt` bits, or `None` when `amt` is
  zero. Bits of the last byte that were not asked for are kept in `leftover`
  for the next read; with `Order.LSB0` they are the high bits of that byte,
  with `Order.MSB0` the low bits.
- `read_bytes(amt, order)` returns `bytes` when the reader is on a byte
  boundary. When bits are left over from an earlier read it returns the
  `amt * 8` bits as a list, as `read_bits` would.
- `end()` returns `True` when the stream is exhausted and no bits are held. To
  find out, it reads one byte and keeps it; that byte is not counted in
  `bits_read`.
- `rest()` returns the bits read from the stream but not yet handed out.
- `skip_bits(amt)` skips `amt` bits: whole bytes by seeking, the remainder by
  reading. The skipped bits are counted in `bits_read`.
- `seek(offset, whence)` seeks the wrapped stream and drops held bits. A
  positive offset from the start sets `bits_read` to `offset * 8`; a positive
  offset from the current position adds `offset * 8` to it.
- `into_inner()` returns the wrapped stream.
- `bits_read` counts the bits handed out.

When the stream runs out, the reader raises `bitio.bits.IncompleteError`. The
number of bits that were needed is in its `bits` attribute. An `OSError` from
the stream while reading raises `bitio.bits.DekuIOError`, with the original
error in its `kind` attribute. Both are subclasses of `bitio.bits.DekuError`.

## Writing

```python
import io
from bitio.bits import Order
from bitio.writer import Writer

out = io.BytesIO()
writer = Writer(out)
writer.write_bits_order([True, False, True, False], Order.LSB0)
writer.write_bits_order([False, True, False, True], Order.LSB0)
writer.finalize()
out.getvalue()   # b'Z'  (0x5a)
```

`Writer` methods and attributes:

- `write_bits_order(bits, order)` writes every complete byte and holds the
  remaining bits. With `Order.MSB0` new bits follow the held ones; with
  `Order.LSB0` the held bits go after the new ones and the complete bytes are
  written in reverse order.
- `write_bits(bits)` is `write_bits_order(bits, Order.MSB0)`.
- `write_bytes(data)` writes the bytes directly when no bits are held.
  Otherwise the bytes are expanded to bits and written with `write_bits`,
  joined with the held bits.
- `finalize()` pads held bits with zeros to a whole byte and writes it.
- `rest()` returns the bits still held.
- `seek(offset, whence)` seeks the wrapped stream and drops held bits.
- `into_inner()` returns the wrapped stream.
- `bits_written` counts the bits that have reached the stream.
- `leftover` is a pair of the held bits and the order they were written with.

An `OSError` from the stream, or a stream that accepts no data, raises
`bitio.bits.DekuIOError`.

## What it does not do

`bitio` works one read or write call at a time. It has no way to declare a
record layout (fields, their widths, counts or conditions) and have it parsed
or written as a whole; code that lays out a format calls `Reader` and `Writer`
itself and turns the bits into numbers.

## Running the tests

```
pip install .[test]
pytest
```