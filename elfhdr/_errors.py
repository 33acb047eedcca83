# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

from typing import Collection, Optional


class DecodeError(Exception):
    """The input is not a valid ELF header.

    ``kind`` is a stable identifier for the failure, ``str()`` the diagnostic.
    """

    kind = 'decode-error'


class NotAnELF(DecodeError):
    """File is not an ELF file."""

    kind = 'not-an-elf'

    def __init__(self, magic: bytes) -> None:
        super().__init__(f'not an ELF file (magic {magic.hex(" ")})')
        self.magic = magic


class InvalidField(DecodeError):
    """A field holds a value outside of its defined set."""

    def __init__(self, field: str, value: int, expected: Optional[Collection[int]] = None) -> None:
        if expected:
            message = 'invalid {} should have been {} but was {}'.format(
                field, ', '.join(str(e) for e in expected), value,
            )
        else:
            message = f'invalid {field} {value}'
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidWordSize(InvalidField):
    kind = 'invalid-word-size'

    def __init__(self, value: int) -> None:
        super().__init__('e_ident[EI_CLASS]', value, (1, 2))


class InvalidEndianness(InvalidField):
    kind = 'invalid-endianness'

    def __init__(self, value: int) -> None:
        super().__init__('e_ident[EI_DATA]', value, (1, 2))


class InvalidIdentifierVersion(InvalidField):
    kind = 'invalid-identifier-version'

    def __init__(self, value: int) -> None:
        super().__init__('e_ident[EI_VERSION]', value, (1,))


class InvalidABI(InvalidField):
    kind = 'invalid-abi'

    def __init__(self, value: int) -> None:
        super().__init__('e_ident[EI_OSABI]', value)


class InvalidObjectType(InvalidField):
    kind = 'invalid-object-type'

    def __init__(self, value: int) -> None:
        super().__init__('e_type', value)


class Truncated(DecodeError):
    """Stream ended before the header was complete."""

    kind = 'truncated'

    def __init__(self, offset: int, expected: int, got: int) -> None:
        super().__init__(
            f'unexpected end of file at offset {offset}: '
            f'wanted {expected} bytes but only {got} were available'
        )
        self.offset = offset
        self.expected = expected
        self.got = got


class IOFailure(DecodeError):
    """The underlying stream failed; the original error is the ``__cause__``."""

    kind = 'io-failure'

    def __init__(self, offset: int, error: OSError) -> None:
        super().__init__(f'read error at offset {offset}: {error}')
        self.offset = offset


class EndiannessNotResolved(RuntimeError):
    """A multi-byte integer was read before the data encoding was known.

    This is a bug in the caller, never a property of the input.
    """

    def __init__(self, size: int) -> None:
        super().__init__(f'tried to read a {size * 8}-bit integer before the endianness was set')
        self.size = size
