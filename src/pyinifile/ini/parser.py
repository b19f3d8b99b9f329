# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 00:12:44
# @Author : Kariko Lin

"""Note: the parser is **permissive**. A line it cannot make sense of
is skipped, never reported as an error, since INI has no way to say
"this line is garbage" anyway.

Grammar it understands (leading whitespace ignored):

    ; comment
    [section]       ; without `]`, the rest of the line is the name
    name = value    ; name trimmed, value kept as is
    name            ; same as `name=`
"""

import logging
from codecs import BOM_UTF8, BOM_UTF16_BE, BOM_UTF16_LE, BOM_UTF32_BE, \
    BOM_UTF32_LE
from io import StringIO
from os import PathLike
from typing import Iterable

import chardet

from ..abstract import FileHandler
from .consts import DEFAULT_SECTION, IniMark
from .model import IniClass, IniSection

__all__ = ['IniSourceError', 'IniParser']

logger = logging.getLogger(__name__)

# UTF-32 LE begins with the UTF-16 LE mark, so check longer ones first.
_BOMS = (
    (BOM_UTF32_LE, 'utf-32'),
    (BOM_UTF32_BE, 'utf-32'),
    (BOM_UTF8, 'utf-8-sig'),
    (BOM_UTF16_LE, 'utf-16'),
    (BOM_UTF16_BE, 'utf-16'),
)


class IniSourceError(OSError):
    """The INI file could not be decoded (or encoded for writing)."""
    pass


class IniParser(FileHandler[IniClass]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None,
        detect_bom: bool = True
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._detect_bom = detect_bom

    @staticmethod
    def readlines(
        lines: Iterable[str], into: IniClass | None = None
    ) -> IniClass:
        """读取解码好的文本行，填充（并返回）`into`。

        `into`原有的内容会先被清空；不传则新建一个`IniClass`。
        每行末尾的一个换行符会被去掉，所以直接传文本流也行。
        """
        ret = IniClass() if into is None else into
        ret.clear()
        this_sect: IniSection | None = None

        for lineno, line in enumerate(lines, 1):
            line = line.removesuffix('\n').removesuffix('\r')
            start = len(line) - len(line.lstrip())
            if start == len(line):
                continue
            if line[start] == IniMark.COMMENT:
                continue

            if line[start] == IniMark.HEADER_OPEN:
                start += 1
                end = line.find(IniMark.HEADER_CLOSE, start)
                if end == -1:
                    end = len(line)
                if name := line[start:end].strip():
                    this_sect = ret._section(name)
                else:
                    logger.debug('line %d: empty section name ignored.',
                                 lineno)
                continue

            pos = line.find(IniMark.DELIMITER, start)
            if pos == -1:
                name, value = line.strip(), ''
            else:
                name, value = line[:pos].strip(), line[pos + 1:]
            if not name:
                logger.debug('line %d: setting without name ignored.', lineno)
                continue

            if this_sect is None:
                logger.debug('line %d: no section yet, using [%s].',
                             lineno, DEFAULT_SECTION)
                this_sect = ret._section(DEFAULT_SECTION)
            # overrides any previous value, in place.
            this_sect._set(name, value)
        return ret

    @staticmethod
    def writelines(instance: IniClass) -> list[str]:
        """Render `instance` back to lines, without line breaks.

        Sections without any setting are NOT written.
        """
        ret: list[str] = []
        for section in instance.values():
            if not section:
                continue
            if ret:
                ret.append('')
            ret.append(f'[{section.name}]')
            ret.extend(str(i) for i in section.settings())
        return ret

    def _decode(self, raw: bytes) -> str:
        # a BOM wins over everything, explicit `encoding` included.
        if self._detect_bom:
            for bom, codec in _BOMS:
                if raw.startswith(bom):
                    try:
                        return raw.decode(codec)
                    except UnicodeDecodeError as e:
                        raise IniSourceError(
                            f'{self._fn} has a {codec} BOM '
                            f'but does not decode: {e}') from e

        if self._codec is not None:
            try:
                return raw.decode(self._codec)
            except (UnicodeDecodeError, LookupError) as e:
                raise IniSourceError(
                    f'cannot decode {self._fn} as {self._codec}: {e}') from e

        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError:
            pass

        # fallbacks
        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            raise IniSourceError(f'unable to guess encoding of {self._fn}.')
        logger.warning('%s is not UTF-8, guessed %s (confidence %.2f).',
                       self._fn, codec['encoding'], codec['confidence'])
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError) as e:
            raise IniSourceError(
                f'cannot decode {self._fn} as {codec["encoding"]}: {e}'
            ) from e

    def read(self, into: IniClass | None = None) -> IniClass:
        """读取`IniParser`实例指定的文件。

        文件完整读入并解码成功之后才会清空`into`，
        因此打不开（`OSError`）或解不了码（`IniSourceError`）时，`into`原样保留。
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        # newline=None: `\r\n` and `\r` read as `\n`.
        buf = StringIO(self._decode(raw), newline=None)
        logger.info('reading %s', self)
        return self.readlines(buf, into)

    def write(self, instance: IniClass) -> None:
        """保存到 INI 文件（已存在则覆盖）。空小节不会写出。

        先整体编码再打开文件，所以编码失败（`IniSourceError`）时原文件不受影响。
        """
        codec = self._codec or 'utf-8'
        text = ''.join(f'{i}\n' for i in self.writelines(instance))
        try:
            raw = text.encode(codec)
        except (UnicodeEncodeError, LookupError) as e:
            raise IniSourceError(
                f'cannot encode {self._fn} as {codec}: {e}') from e
        with open(self._fn, 'wb') as fp:
            fp.write(raw)
        logger.info('written to %s', self)

    def __str__(self) -> str:
        return super().__str__() + f" ({self._codec or 'auto'})"
