# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:12:47
# @Author : Kariko Lin

import logging

from .ini import (
    DEFAULT_SECTION, IGNORE_CASE, ORDINAL,
    BoolOptions, IniArgumentError, IniClass, IniParser,
    IniSection, IniSetting, IniSourceError
)

__all__ = [
    'DEFAULT_SECTION', 'IGNORE_CASE', 'ORDINAL',
    'BoolOptions', 'IniArgumentError', 'IniClass', 'IniParser',
    'IniSection', 'IniSetting', 'IniSourceError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
