# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:40:17
# @Author : Kariko Lin

from enum import Enum
from re import compile as regex
from typing import Callable

# settings met before any `[section]` go here.
DEFAULT_SECTION = 'General'

# optional sign, ASCII digits. no `_`, no hex.
INTEGER = regex(r'\s*[+-]?[0-9]+\s*')


class IniMark(str, Enum):
    COMMENT = ';'
    HEADER_OPEN = '['
    HEADER_CLOSE = ']'
    DELIMITER = '='


Comparer = Callable[[str], str]

# name equivalence: folded keys compare equal.
IGNORE_CASE: Comparer = str.casefold


def ORDINAL(name: str) -> str:
    return name
