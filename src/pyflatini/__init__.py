# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:21:36
# @Author : Kariko Lin

from .ini import (
    ErrorKind, IniError, IniIOError,
    SectionNotFound, KeyNotFound, ValueFormatError, UnsupportedType,
    IniSection, IniStore, ValueKind,
    IniParser, load
)

__all__ = [
    'ErrorKind', 'IniError', 'IniIOError',
    'SectionNotFound', 'KeyNotFound', 'ValueFormatError', 'UnsupportedType',
    'IniSection', 'IniStore', 'ValueKind',
    'IniParser', 'load'
]
