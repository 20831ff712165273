# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 22:05:31
# @Author : Kariko Lin

"""Everything `load()` and `IniStore.get()` may raise.

Each error is an `IniError` with a `kind`, and additionally subclasses
the builtin a Python caller would expect to catch:

    ```python
    try:
        port = store.getint('Server', 'Port')
    except KeyNotFound:      # or `except KeyError`
        port = 8080
    except IniError as e:
        if e.kind is ErrorKind.VALUE_FORMAT_ERROR:
            ...
    ```
"""

from enum import Enum


class ErrorKind(str, Enum):
    IO_ERROR = 'IOError'
    SECTION_NOT_FOUND = 'SectionNotFound'
    KEY_NOT_FOUND = 'KeyNotFound'
    VALUE_FORMAT_ERROR = 'ValueFormatError'
    UNSUPPORTED_TYPE = 'UnsupportedType'


class IniError(Exception):
    kind: ErrorKind

    # KeyError would otherwise repr() the message.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


class IniIOError(IniError, OSError):
    kind = ErrorKind.IO_ERROR

    def __init__(self, path: str, reason: OSError) -> None:
        super().__init__(f'cannot read "{path}": {reason.strerror or reason}')
        self.path = path


class SectionNotFound(IniError, KeyError):
    kind = ErrorKind.SECTION_NOT_FOUND

    def __init__(self, section: str) -> None:
        super().__init__(f'section [{section}] not found')
        self.section = section


class KeyNotFound(IniError, KeyError):
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'key "{key}" not found in [{section}]')
        self.section = section
        self.key = key


class ValueFormatError(IniError, ValueError):
    kind = ErrorKind.VALUE_FORMAT_ERROR

    def __init__(self, section: str, key: str, value: str, expected: str):
        super().__init__(
            f'[{section}] {key}={value!r} is not a valid {expected}')
        self.section = section
        self.key = key
        self.value = value


class UnsupportedType(IniError, TypeError):
    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, requested: object) -> None:
        name = getattr(requested, '__name__', repr(requested))
        super().__init__(f'unsupported value type: {name}')
        self.requested = requested
