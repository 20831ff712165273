# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:20:09
# @Author : Kariko Lin

from .errors import (
    ErrorKind,
    IniError,
    IniIOError,
    SectionNotFound,
    KeyNotFound,
    ValueFormatError,
    UnsupportedType
)
from .model import IniSection, IniStore, ValueKind
from .parser import IniParser, load
