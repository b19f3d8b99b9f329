# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:36:02
# @Author : Kariko Lin

from .boolopts import BoolOptions
from .consts import DEFAULT_SECTION, IGNORE_CASE, ORDINAL
from .model import (
    IniArgumentError,
    FoldedDict,
    IniSetting,
    IniSection,
    IniClass
)
from .parser import IniParser, IniSourceError
