# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:07
# @Author : Kariko Lin

"""
Flat INI structure: sections of `key=value` pairs, nothing more.

Values are kept exactly as read (whitespace already stripped by the parser)
and only get converted when asked for through `IniStore.get()`.
"""

from collections.abc import Iterator, Mapping
from enum import Enum
from re import compile as regex

from .errors import (
    KeyNotFound,
    SectionNotFound,
    UnsupportedType,
    ValueFormatError,
)

# C `int` bounds.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_DECIMAL = regex(r'[+-]?[0-9]+')


class ValueKind(str, Enum):
    STRING = 'string'
    INTEGER = 'integer'

    @classmethod
    def of(cls, as_type: 'type | ValueKind') -> 'ValueKind':
        if isinstance(as_type, cls):
            return as_type
        # bool is an int subclass, so compare identity, not issubclass().
        if as_type is str:
            return cls.STRING
        if as_type is int:
            return cls.INTEGER
        raise UnsupportedType(as_type)


def parse_int(section: str, key: str, value: str) -> int:
    if _DECIMAL.fullmatch(value) is None:
        raise ValueFormatError(section, key, value, 'integer')
    ret = int(value)
    if not INT_MIN <= ret <= INT_MAX:
        raise ValueFormatError(section, key, value, '32-bit integer')
    return ret


class IniSection(Mapping[str, str]):
    """一个小节的只读键值表。"""

    def __init__(self, name: str, pairs: dict[str, str]) -> None:
        self._name = name
        self._data = pairs

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))


class IniStore(Mapping[str, IniSection]):
    """INI 文件表示。只支持下面这种最朴素的写法：

        ```ini
        # 注释只能独占一行
        [Section1]
        MyIntVariable = 42
        # 行内没有注释；下面读出来是 "helloworld"，空格全部去掉
        MyStringVariable = hello world
        ```

    由`IniParser`一次性填充，之后只读。
    """
    def __init__(
        self,
        sections: dict[str, dict[str, str]] | None = None,
        source: str | None = None
    ) -> None:
        # never share the caller's dicts.
        self.__raw_dicts: dict[str, dict[str, str]] = {
            k: v.copy() for k, v in (sections or {}).items()
        }
        self._source = source

    @property
    def source(self) -> str | None:
        """The file this store was read from, `None` if from a stream."""
        return self._source

    def __getitem__(self, key: str) -> IniSection:
        if key not in self.__raw_dicts:
            raise SectionNotFound(key)
        return IniSection(key, self.__raw_dicts[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'<IniStore {self._source or "<stream>"} ' \
            f'sections={list(self.__raw_dicts)}>'

    def sections(self) -> list[str]:
        return list(self.__raw_dicts)

    def get(  # type: ignore[override]
        self, section: str, key: str | None = None,
        as_type: type | ValueKind = str
    ) -> IniSection | str | int | None:
        """Look up `[section] key` and convert it to `as_type`.

        `as_type` is `str`/`int` or the matching `ValueKind`;
        anything else raises `UnsupportedType`.

        Without `key` this is plain `Mapping.get()`: the section or `None`.
        Unlike `Mapping.get()`, the second argument is a key, not a default.

        Raises:
            SectionNotFound, KeyNotFound, ValueFormatError, UnsupportedType.
        """
        if key is None:
            return self[section] if section in self.__raw_dicts else None
        if section not in self.__raw_dicts:
            raise SectionNotFound(section)
        pairs = self.__raw_dicts[section]
        if key not in pairs:
            raise KeyNotFound(section, key)

        if ValueKind.of(as_type) is ValueKind.INTEGER:
            return parse_int(section, key, pairs[key])
        return pairs[key]

    def getstr(self, section: str, key: str) -> str:
        return self.get(section, key, ValueKind.STRING)  # type: ignore

    def getint(self, section: str, key: str) -> int:
        return self.get(section, key, ValueKind.INTEGER)  # type: ignore
