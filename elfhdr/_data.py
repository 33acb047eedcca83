# SPDX-License-Identifier: EUPL-1.2

from elfhdr._util import _Enum, _EnumItem


ELFMAG = b'\x7fELF'


class EI(_Enum):
    ## e_ident
    NIDENT = 0x10  # size
    # indexes
    CLASS = 0x04
    DATA = 0x05
    VERSION = 0x06
    OSABI = 0x07
    ABIVERSION = 0x08
    PAD = 0x09


class ELFCLASS(_Enum):
    _32 = 1
    _64 = 2


class ELFDATA(_Enum):
    LSB = 1
    MSB = 2


class OSABI(_Enum):
    SYSTEM_V = 0x00
    HP_UX = 0x01
    NETBSD = 0x02
    LINUX = 0x03
    GNU_HURD = 0x04
    SOLARIS = 0x06
    AIX = 0x07
    IRIX = 0x08
    FREEBSD = 0x09
    TRU64 = 0x0a
    NOVELL_MODESTO = 0x0b
    OPENBSD = 0x0c
    OPENVMS = 0x0d
    NONSTOP_KERNEL = 0x0e
    AROS = 0x0f
    FENIX_OS = 0x10
    CLOUDABI = 0x11
    STRATUS_OPENVOS = 0x12


class ET(_Enum):
    # e_type
    NONE = 0x00
    REL = 0x01
    EXEC = 0x02
    DYN = 0x03
    CORE = 0x04
    # reserved, kept as the raw code
    LOOS = 0xfe00
    HIOS = 0xfeff
    LOPROC = 0xff00
    HIPROC = 0xffff

    @staticmethod
    def is_other(item: _EnumItem) -> bool:
        """Whether the item is one of the OS/processor specific codes."""
        return int(item) >= ET.LOOS


class EM(_Enum):
    # e_machine, informational only
    NONE = 0
    M32 = 1
    SPARC = 2
    _386 = 3
    _68K = 4
    _88K = 5
    IAMCU = 6
    _860 = 7
    MIPS = 8
    S370 = 9
    MIPS_RS3_LE = 10
    PARISC = 15
    PPC = 20
    PPC64 = 21
    S390 = 22
    ARM = 40
    ALPHA = 41
    SH = 42
    SPARCV9 = 43
    IA_64 = 50
    X86_64 = 62
    AVR = 83
    XTENSA = 94
    MSP430 = 105
    BLACKFIN = 106
    ALTERA_NIOS2 = 113
    AARCH64 = 183
    CUDA = 190
    AMDGPU = 224
    RISCV = 243
    BPF = 247
    LOONGARCH = 258


class EV(_Enum):
    NONE = 0x00
    CURRENT = 0x01
