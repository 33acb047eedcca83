# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

import io
import struct

from typing import BinaryIO, Dict, Optional, Union

from elfhdr._data import ELFDATA
from elfhdr._errors import EndiannessNotResolved, IOFailure, Truncated
from elfhdr._util import _EnumItem


_BYTE_ORDER: Dict[int, str] = {
    ELFDATA.LSB: '<',
    ELFDATA.MSB: '>',
}

_UNSIGNED: Dict[int, str] = {
    2: 'H',
    4: 'I',
    8: 'Q',
}


class ByteSource():
    """Sequential reader over a binary stream.

    Raw bytes can always be read; sized integers only once the data
    encoding of the file is known, see :meth:`set_endianness`.
    """

    def __init__(self, fd: Union[BinaryIO, io.RawIOBase]) -> None:
        self._fd = fd
        self._position = 0
        self._endianness: Optional[_EnumItem] = None

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    @property
    def endianness(self) -> Optional[_EnumItem]:
        return self._endianness

    def set_endianness(self, endianness: _EnumItem) -> None:
        self._endianness = ELFDATA.from_value(endianness)

    def read_exact(self, n: int) -> bytes:
        data = b''
        while len(data) < n:
            try:
                chunk = self._fd.read(n - len(data))
            except OSError as e:
                raise IOFailure(self._position + len(data), e) from e
            if not chunk:
                raise Truncated(self._position, n, len(data))
            data += chunk
        self._position += n
        return data

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def _read_unsigned(self, size: int) -> int:
        if self._endianness is None:
            raise EndiannessNotResolved(size)
        unpack_format = _BYTE_ORDER[self._endianness] + _UNSIGNED[size]
        value: int = struct.unpack(unpack_format, self.read_exact(size))[0]
        return value

    def read_u16(self) -> int:
        return self._read_unsigned(2)

    def read_u32(self) -> int:
        return self._read_unsigned(4)

    def read_u64(self) -> int:
        return self._read_unsigned(8)
