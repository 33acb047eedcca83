# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

import dataclasses
import io
import logging
import os

from typing import BinaryIO, Tuple, Union

from elfhdr._data import EI, ELFCLASS, ELFDATA, ELFMAG, EM, ET, EV, OSABI
from elfhdr._errors import (
    DecodeError,
    EndiannessNotResolved,
    InvalidABI,
    InvalidEndianness,
    InvalidField,
    InvalidIdentifierVersion,
    InvalidObjectType,
    InvalidWordSize,
    IOFailure,
    NotAnELF,
    Truncated,
)
from elfhdr._reader import ByteSource
from elfhdr._util import _EnumItem, _Printable, even_hex_repr


__all__ = [
    'Address',
    'ByteSource',
    'DecodeError',
    'ELFCLASS',
    'ELFDATA',
    'ELFHeader',
    'EM',
    'ET',
    'EV',
    'EndiannessNotResolved',
    'IOFailure',
    'InvalidABI',
    'InvalidEndianness',
    'InvalidField',
    'InvalidIdentifierVersion',
    'InvalidObjectType',
    'InvalidWordSize',
    'NotAnELF',
    'OSABI',
    'Truncated',
    'decode',
]

__version__ = '0.1.0'


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Address():
    """Address or file offset, tagged with the width it was stored with."""

    word_size: _EnumItem
    value: int

    def __post_init__(self) -> None:
        if self.value >> (32 if self.word_size == ELFCLASS._32 else 64):
            raise ValueError(f'{even_hex_repr(self.value)} does not fit in {self.word_size.name}')

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'<{self.word_size.name}: {even_hex_repr(self.value)}>'


@dataclasses.dataclass(repr=False)
class ELFHeader(_Printable):
    """ELF file header."""

    # e_ident[EI_MAG0..EI_MAG3] is always ELFMAG, so it is not kept
    word_size: _EnumItem  # e_ident[EI_CLASS]
    endianness: _EnumItem  # e_ident[EI_DATA]
    abi: _EnumItem  # e_ident[EI_OSABI]
    abi_version: int  # e_ident[EI_ABIVERSION]
    type: _EnumItem  # e_type
    machine: int  # e_machine
    version: int  # e_version
    entry_point: Address  # e_entry
    program_header_address: Address  # e_phoff
    section_header_address: Address  # e_shoff
    flags: int  # e_flags
    header_size: int  # e_ehsize
    program_header_entry_size: int  # e_phentsize
    program_header_entry_count: int  # e_phnum
    section_header_entry_size: int  # e_shentsize
    section_header_entry_count: int  # e_shnum
    section_header_name_index: int  # e_shstrndx

    def __post_init__(self) -> None:
        for name in ('entry_point', 'program_header_address', 'section_header_address'):
            address = getattr(self, name)
            if address.word_size != self.word_size:
                raise ValueError(
                    f'{name} is {address.word_size.name} '
                    f'but the header is {self.word_size.name}'
                )

    @property
    def expected_size(self) -> int:
        """Size of the header for its word size, what e_ehsize should hold."""
        if self.word_size == ELFCLASS._32:
            return 52
        return 64

    @property
    def is_little_endian(self) -> bool:
        return self.endianness == ELFDATA.LSB

    @classmethod
    def from_fd(cls, fd: Union[BinaryIO, io.RawIOBase]) -> ELFHeader:
        return decode(ByteSource(fd))

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike[str]]) -> ELFHeader:
        with open(path, 'rb') as fd:
            return cls.from_fd(fd)


def _read_ident(source: ByteSource) -> Tuple[_EnumItem, _EnumItem, _EnumItem, int]:
    """Decode e_ident, resolving the data encoding of ``source`` on the way."""
    magic = source.read_exact(len(ELFMAG))
    if magic != ELFMAG:
        raise NotAnELF(magic)

    value = source.read_u8()
    try:
        word_size = ELFCLASS.from_value(value)
    except ValueError:
        raise InvalidWordSize(value) from None

    value = source.read_u8()
    try:
        endianness = ELFDATA.from_value(value)
    except ValueError:
        raise InvalidEndianness(value) from None
    # every multi-byte field from here on depends on this
    source.set_endianness(endianness)
    logger.debug('ei_class: %s ei_data: %s', word_size.name, endianness.name)

    value = source.read_u8()
    if value != EV.CURRENT:
        raise InvalidIdentifierVersion(value)

    value = source.read_u8()
    try:
        abi = OSABI.from_value(value)
    except ValueError:
        raise InvalidABI(value) from None

    abi_version = source.read_u8()

    source.read_exact(EI.NIDENT - EI.PAD)
    return word_size, endianness, abi, abi_version


def _read_addresses(source: ByteSource, word_size: _EnumItem) -> Tuple[Address, Address, Address]:
    """Read e_entry, e_phoff and e_shoff, whose width follows the file class."""
    read = source.read_u32 if word_size == ELFCLASS._32 else source.read_u64
    entry_point = Address(word_size, read())
    program_header_address = Address(word_size, read())
    section_header_address = Address(word_size, read())
    return entry_point, program_header_address, section_header_address


def decode(source: ByteSource) -> ELFHeader:
    """Decode the ELF header at the current position of ``source``.

    Raises a :class:`DecodeError` subclass describing the first invalid
    field; nothing is returned for a partially valid header.
    """
    word_size, endianness, abi, abi_version = _read_ident(source)

    value = source.read_u16()
    try:
        object_type = ET.from_value(value)
    except ValueError:
        raise InvalidObjectType(value) from None

    machine = EM.from_value_fallback(source.read_u16())
    version = EV.from_value_fallback(source.read_u32())
    if version != EV.CURRENT:
        logger.warning('e_version is %d but e_ident[EI_VERSION] is %d', version, EV.CURRENT)

    entry_point, program_header_address, section_header_address = _read_addresses(source, word_size)
    logger.debug(
        'e_entry: %r e_phoff: %r e_shoff: %r',
        entry_point, program_header_address, section_header_address,
    )

    header = ELFHeader(
        word_size,
        endianness,
        abi,
        abi_version,
        object_type,
        machine,
        version,
        entry_point,
        program_header_address,
        section_header_address,
        flags=source.read_u32(),
        header_size=source.read_u16(),
        program_header_entry_size=source.read_u16(),
        program_header_entry_count=source.read_u16(),
        section_header_entry_size=source.read_u16(),
        section_header_entry_count=source.read_u16(),
        section_header_name_index=source.read_u16(),
    )
    if header.header_size != header.expected_size:
        logger.warning(
            'e_ehsize is %d but a %s header is %d bytes',
            header.header_size, word_size.name, header.expected_size,
        )
    return header
