# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:02:44
# @Author : Kariko Lin

"""Reads flat INIs into an `IniStore`.

Every line gets ALL its whitespace removed before anything else happens,
interior whitespace included. So `my key = hello world` is stored as
`mykey` -> `helloworld`. Files in the wild rely on this, don't "fix" it.

Reading is permissive: anything that is not a section header or a
`key=value` pair is dropped without a word. Only an unreadable file
raises (`IniIOError`).
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from ..abstract import FileHandler
from .errors import IniIOError
from .model import IniStore

__all__ = ['IniParser', 'load']

# what C's isspace() accepts; non-ASCII blanks are left alone.
_STRIP_WHITESPACE = str.maketrans('', '', ' \t\n\v\f\r')
CODEC_CONFIDENCE = 0.8


class IniParser(FileHandler[IniStore]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase, source: str | None = None) -> IniStore:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`或`load()`便是。
        """
        sections: dict[str, dict[str, str]] = {}
        # empty means "no section yet"; `[]` puts us back there.
        this_sect = ''
        while i := buf.readline():
            line = i.translate(_STRIP_WHITESPACE)
            if not line or line[0] == '#':
                continue
            if line[0] == '[' and line[-1] == ']':
                this_sect = line[1:-1]
            elif '=' in line and this_sect:
                key, val = line.split('=', 1)
                # a section only exists once it holds a pair.
                sections.setdefault(this_sect, {})[key] = val
        logging.debug(
            f'Loaded {len(sections)} section(s) from {source or "stream"}.')
        return IniStore(sections, source)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < CODEC_CONFIDENCE):
            codec = {'encoding': 'utf-8'}
        logging.info(f'Decoding "{filename}" as {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf, newline='\n')

    def _read_text(self) -> IniStore:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec,
                      newline='\n') as fp:
                return self.readstream(fp, self._fn)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn), self._fn)

    def read(self) -> IniStore:
        """读取`IniParser`实例指定的文件。

        Raises:
            IniIOError: the file is missing or not readable.
        """
        try:
            return self._read_text()
        except OSError as e:
            logging.warning(f'INI file not readable: {e}')
            raise IniIOError(self._fn, e) from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def load(
    source: str | PathLike[str] | TextIOBase,
    encoding: str | None = None
) -> IniStore:
    """Parse `source`, a path or an open text stream, into a new store.

    Anything with a `readline()` returning `str` counts as a stream
    (`TextIOBase`, `SpooledTemporaryFile(mode='w+')`, ...).
    `encoding` only matters for paths; a stream is read as it is.
    """
    if hasattr(source, 'readline'):
        return IniParser.readstream(source)  # type: ignore[arg-type]
    return IniParser(source, encoding).read()
