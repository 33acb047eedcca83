# SPDX-License-Identifier: EUPL-1.2

import struct

import pytest


def build_header(
    word_size=2,
    endianness=1,
    ident_version=1,
    abi=0,
    abi_version=0,
    type=2,
    machine=0x3e,
    version=1,
    entry=0x401000,
    phoff=64,
    shoff=0x3a00,
    flags=0,
    ehsize=None,
    phentsize=56,
    phnum=13,
    shentsize=64,
    shnum=31,
    shstrndx=30,
):
    """Pack a synthetic ELF header, the byte order following ``endianness``."""
    order = '>' if endianness == 2 else '<'
    native = 'I' if word_size == 1 else 'Q'
    if ehsize is None:
        ehsize = 52 if word_size == 1 else 64
    ident = b'\x7fELF' + bytes([word_size, endianness, ident_version, abi, abi_version]) + b'\x00' * 7
    return ident + struct.pack(
        order + 'HHI' + native * 3 + 'IHHHHHH',
        type,
        machine,
        version,
        entry,
        phoff,
        shoff,
        flags,
        ehsize,
        phentsize,
        phnum,
        shentsize,
        shnum,
        shstrndx,
    )


@pytest.fixture()
def make_header():
    return build_header
