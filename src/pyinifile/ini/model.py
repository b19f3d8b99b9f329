# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:31:09
# @Author : Kariko Lin

"""
Basically INI Structure: ordered sections of ordered settings.

Names are matched through a *comparer*, i.e. a key-folding function
(`str.casefold` by default), on sections and settings alike.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator, TypeVar

from .boolopts import BoolOptions
from .consts import DEFAULT_SECTION, IGNORE_CASE, INTEGER, Comparer, IniMark

__all__ = [
    'IniArgumentError', 'FoldedDict', 'IniSetting', 'IniSection', 'IniClass'
]

V = TypeVar('V')


class IniArgumentError(ValueError):
    """A section or setting name is missing, or cannot be written as INI."""
    pass


def _require_name(name: str | None, what: str) -> str:
    if name is None:
        raise IniArgumentError(f'{what} name is required.')
    return name


# whatever `IniParser.readlines` would not read back the same.
def _check_section_name(name: str) -> None:
    if not name or not name.strip():
        raise IniArgumentError('section name must not be blank.')
    if name != name.strip():
        raise IniArgumentError(
            f'section name {name!r} has leading or trailing spaces.')
    if IniMark.HEADER_CLOSE in name or _has_line_break(name):
        raise IniArgumentError(
            f'section name {name!r} contains "]" or a line break.')


def _check_setting(name: str, value: str) -> None:
    if not name or not name.strip():
        raise IniArgumentError('setting name must not be blank.')
    if name != name.strip():
        raise IniArgumentError(
            f'setting name {name!r} has leading or trailing spaces.')
    if name[0] in (IniMark.COMMENT, IniMark.HEADER_OPEN):
        raise IniArgumentError(
            f'setting name {name!r} would read as a comment or header.')
    if IniMark.DELIMITER in name or _has_line_break(name):
        raise IniArgumentError(
            f'setting name {name!r} contains "=" or a line break.')
    if _has_line_break(value):
        raise IniArgumentError(f'value of {name!r} contains a line break.')


def _has_line_break(text: str) -> bool:
    return '\n' in text or '\r' in text


class FoldedDict(MutableMapping[str, V]):
    """Insertion-ordered dict whose keys are compared by `comparer(key)`.

    The first spelling of a key is kept; assigning an equivalent key
    only replaces the value, position unchanged.
    """
    def __init__(self, comparer: Comparer = IGNORE_CASE) -> None:
        self._fold = comparer
        # folded key -> (original key, value)
        self.__raw: dict[str, tuple[str, V]] = {}

    def __getitem__(self, key: str) -> V:
        return self.__raw[self._fold(key)][1]

    def __setitem__(self, key: str, value: V) -> None:
        folded = self._fold(key)
        if folded in self.__raw:
            key = self.__raw[folded][0]
        self.__raw[folded] = (key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[self._fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self.__raw

    def __iter__(self) -> Iterator[str]:
        return (k for k, _ in self.__raw.values())

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return repr(dict(self.items()))

    def clear(self) -> None:
        self.__raw.clear()


class IniSetting:
    """One `name=value` pair. Name is fixed, value is not."""

    __slots__ = ('_name', 'value')

    def __init__(self, name: str, value: str = '') -> None:
        if not name or not name.strip():
            raise IniArgumentError('setting name must not be blank.')
        self._name = name
        self.value = value

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return f'{self._name}={self.value}'

    def __repr__(self) -> str:
        return f'IniSetting({self._name!r}, {self.value!r})'


class IniSection(Mapping[str, str]):
    """INI 小节：按插入顺序维护的键值对。

    读取时表现为`name -> value`字典；赋值时若已存在同名（按 comparer 判等）词条，
    则*原地*改写其值，位置不变。词条不支持单独删除。
    """
    def __init__(self, name: str, comparer: Comparer = IGNORE_CASE) -> None:
        if not name or not name.strip():
            raise IniArgumentError('section name must not be blank.')
        self._name = name
        self._data: FoldedDict[IniSetting] = FoldedDict(comparer)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key].value

    def __setitem__(self, key: str, value: str) -> None:
        _check_setting(key, value)
        self._set(key, value)

    def _set(self, key: str, value: str) -> None:
        """for IniParser.readlines(), whose names need no checks."""
        if (setting := self._data.get(key)) is not None:
            setting.value = value
        else:
            self._data[key] = IniSetting(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def get_setting_obj(self, key: str) -> IniSetting | None:
        return self._data.get(key)

    def settings(self) -> list[IniSetting]:
        return list(self._data.values())

    def to_dict(self) -> dict[str, str]:
        return {k: v.value for k, v in self._data.items()}


class IniClass(Mapping[str, IniSection]):
    """INI 文件表示。

    ```ini
    key = val   ; 位于任何小节之前的词条，归入 [General]

    [Section]
    Key = Value
    ```

    Section and setting names share one comparer, fixed on construction.
    Use `IniParser` to fill it from lines (or a file) and to write it back.
    """

    DEFAULT_SECTION = DEFAULT_SECTION

    def __init__(
        self,
        comparer: Comparer | None = None,
        bool_options: BoolOptions | None = None
    ) -> None:
        self.__comparer = comparer or IGNORE_CASE
        self.__bool_options = bool_options or BoolOptions()
        self.__raw: FoldedDict[IniSection] = FoldedDict(self.__comparer)

    @property
    def comparer(self) -> Comparer:
        return self.__comparer

    @property
    def bool_options(self) -> BoolOptions:
        return self.__bool_options

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return f'IniClass({list(self.__raw.values())!r})'

    def setdefault(self, section: str) -> IniSection:
        """Return section `section`, creating an empty one if absent."""
        _check_section_name(section)
        return self._section(section)

    def _section(self, section: str) -> IniSection:
        """for IniParser.readlines(): get or create, unchecked."""
        if (ret := self.__raw.get(section)) is None:
            ret = IniSection(section, self.__comparer)
            self.__raw[section] = ret
        return ret

    def clear(self) -> None:
        self.__raw.clear()

    def get_setting(
        self, section: str, name: str,
        default: str | int | float | bool | None = None
    ) -> str | int | float | bool | None:
        """Look up a value, coerced to the type of `default`.

        A `bool`, `int` or `float` default makes the stored text parsed
        as such; if the setting is missing or unparsable, `default` is
        returned instead. No exception for bad values.
        """
        _require_name(section, 'section')
        _require_name(name, 'setting')

        value = None
        if (sect := self.__raw.get(section)) is not None:
            value = sect.get(name)
        if value is None:
            return default

        # bool first, since bool is also int.
        if isinstance(default, bool):
            ret = self.__bool_options.try_parse(value)
            return default if ret is None else ret
        if isinstance(default, int):
            return int(value) if INTEGER.fullmatch(value) else default
        if isinstance(default, float):
            try:
                return default if '_' in value else float(value)
            except ValueError:
                return default
        return value

    def get_sections(self) -> list[str]:
        return list(self.__raw)

    def get_section_settings(self, section: str) -> list[IniSetting]:
        _require_name(section, 'section')
        if (sect := self.__raw.get(section)) is None:
            return []
        return sect.settings()

    def set_setting(
        self, section: str, name: str,
        value: str | int | float | bool
    ) -> None:
        """Create or overwrite a setting. Typed values are stored as text."""
        _require_name(section, 'section')
        _require_name(name, 'setting')
        if isinstance(value, bool):
            value = self.__bool_options.to_string(value)
        elif isinstance(value, (int, float)):
            value = str(value)
        elif not isinstance(value, str):
            raise TypeError(
                f'unsupported value type {type(value).__name__!r} '
                f'for [{section}] {name}.')
        # both checked first, so a bad setting leaves no empty section.
        _check_section_name(section)
        _check_setting(name, value)
        self._section(section)._set(name, value)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__raw.items()}
