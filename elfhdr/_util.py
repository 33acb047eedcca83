# SPDX-License-Identifier: EUPL-1.2

from __future__ import annotations

from typing import Any, Dict, Tuple, Type


def even_hex_repr(value: int) -> str:
    hex_repr = f'{value:x}'
    hex_repr = ('0' * (len(hex_repr) % 2)) + hex_repr
    return f'0x{hex_repr}'


class _Printable():
    """Generates a nice repr showing the object attributes with support for nested objects.

    Plain integers are shown in hex, enum items by name.
    """

    def _pad(self, level: int) -> str:
        return '  ' * level

    def _repr(self, level: int) -> str:
        def value_repr(value: Any) -> str:
            if isinstance(value, _Printable):
                return value._repr(level + 1)
            elif isinstance(value, int) and not isinstance(value, _EnumItem):
                return even_hex_repr(value)
            return repr(value)

        return '{}(\n{}{})'.format(self._name, ''.join(
            '{}{}={},\n'.format(self._pad(level + 1), key, value_repr(value))
            for key, value in self._values.items()
        ), self._pad(level))

    @property
    def _name(self) -> str:
        return self.__class__.__name__

    @property
    def _values(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in vars(self).items()
            if not key.startswith('_')
        }

    def __repr__(self) -> str:
        return self._repr(0)


class _EnumItem(int):
    """Custom int that tracks the enum name."""

    name: str

    def __new__(cls, value: int, name: str) -> _EnumItem:
        obj = super().__new__(cls, value)
        obj.name = name
        return obj

    def __repr__(self) -> str:
        return f'<{self.name}: {even_hex_repr(self)}>'


class _EnumMeta(type):
    def __new__(
        mcs,
        name: str,
        bases: Tuple[Any],
        dict_: Dict[str, Any],
    ) -> _EnumMeta:
        new_dict = {
            key: (
                _EnumItem(value, f'{name}.{key}')
                if isinstance(value, int) and not key.startswith('__')
                else value
            )
            for key, value in dict_.items()
        }
        return super().__new__(mcs, name, bases, new_dict)

    @property
    def value_dict(self) -> Dict[int, _EnumItem]:
        return {
            int(value): value
            for value in vars(self).values()
            if isinstance(value, _EnumItem)
        }


class _Enum(metaclass=_EnumMeta):
    """Closed set of named integer codes."""

    @classmethod
    def from_value(cls, value: int) -> _EnumItem:
        try:
            return cls.value_dict[value]
        except KeyError:
            raise ValueError(f'Item not found for 0x{value:x} in {cls.__name__}') from None

    @classmethod
    def from_value_fallback(cls, value: int) -> int:
        """Like from_value, but falls back to value passed."""
        try:
            return cls.from_value(value)
        except ValueError:
            return value
