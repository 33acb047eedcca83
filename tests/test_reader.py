# SPDX-License-Identifier: EUPL-1.2

import io

import pytest

from elfhdr import ELFDATA, ByteSource, DecodeError, EndiannessNotResolved, IOFailure, Truncated


class ChunkedStream(io.RawIOBase):
    """Raw stream that hands out at most one byte per read."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def readable(self):
        return True

    def readinto(self, buffer):
        chunk = self._data.read(min(1, len(buffer)))
        buffer[:len(chunk)] = chunk
        return len(chunk)


class BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def readinto(self, buffer):
        raise OSError(5, 'Input/output error')


def test_read_exact():
    source = ByteSource(io.BytesIO(b'\x01\x02\x03\x04\x05'))
    assert source.read_exact(2) == b'\x01\x02'
    assert source.position == 2
    assert source.read_u8() == 3
    assert source.read_exact(0) == b''
    assert source.position == 3


def test_read_exact_short_reads():
    source = ByteSource(ChunkedStream(b'abcdef'))
    assert source.read_exact(4) == b'abcd'
    assert source.position == 4


def test_truncated():
    source = ByteSource(io.BytesIO(b'\x7fEL'))
    with pytest.raises(Truncated) as exc_info:
        source.read_exact(4)
    assert exc_info.value.expected == 4
    assert exc_info.value.got == 3
    assert exc_info.value.offset == 0
    assert exc_info.value.kind == 'truncated'


def test_io_failure():
    source = ByteSource(BrokenStream())
    with pytest.raises(IOFailure) as exc_info:
        source.read_exact(1)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert exc_info.value.kind == 'io-failure'


@pytest.mark.parametrize('read', ['read_u16', 'read_u32', 'read_u64'])
def test_endianness_not_resolved(read):
    source = ByteSource(io.BytesIO(b'\x00' * 8))
    with pytest.raises(EndiannessNotResolved) as exc_info:
        getattr(source, read)()
    assert not isinstance(exc_info.value, DecodeError)
    # nothing consumed
    assert source.position == 0


@pytest.mark.parametrize(
    ('endianness', 'u16', 'u32', 'u64'),
    [
        (ELFDATA.LSB, 0x0201, 0x06050403, 0x0e0d0c0b0a090807),
        (ELFDATA.MSB, 0x0102, 0x03040506, 0x0708090a0b0c0d0e),
    ],
)
def test_sized_reads(endianness, u16, u32, u64):
    source = ByteSource(io.BytesIO(bytes(range(1, 15))))
    source.set_endianness(endianness)
    assert source.endianness == endianness
    assert source.read_u16() == u16
    assert source.read_u32() == u32
    assert source.read_u64() == u64
    assert source.position == 14


def test_sized_read_truncated():
    source = ByteSource(io.BytesIO(b'\x01\x02\x03'))
    source.set_endianness(ELFDATA.LSB)
    with pytest.raises(Truncated):
        source.read_u32()


def test_set_endianness_unknown():
    source = ByteSource(io.BytesIO())
    with pytest.raises(ValueError):
        source.set_endianness(3)
