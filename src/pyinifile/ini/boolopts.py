# -*- encoding: utf-8 -*-
# @File   : boolopts.py
# @Time   : 2024/11/02 22:05:51
# @Author : Kariko Lin

"""How booleans look like in INI text.

INI consumers never agree on this: some write `1/0`, some `yes/no`,
and others `true/false`. So every `IniClass` holds its own `BoolOptions`.
"""

from typing import Iterable

from .consts import INTEGER

__all__ = ['BoolOptions']


class BoolOptions:
    """Tokens accepted as `True`/`False`, and the two strings written back.

    Matching is case-insensitive and ignores surrounding whitespace.
    The render strings are always accepted as well.
    """

    DEFAULT_TRUE = ('true', 'yes', 'on', '1')
    DEFAULT_FALSE = ('false', 'no', 'off', '0')

    def __init__(
        self,
        true_tokens: Iterable[str] = DEFAULT_TRUE,
        false_tokens: Iterable[str] = DEFAULT_FALSE,
        *,
        true_string: str = 'True',
        false_string: str = 'False',
        nonzero_numbers_are_true: bool = False
    ) -> None:
        self._true_string = true_string
        self._false_string = false_string
        self._nonzero_numbers_are_true = nonzero_numbers_are_true
        self._true = self.__unique(true_string, *true_tokens)
        self._false = self.__unique(false_string, *false_tokens)

        if overlap := set(self._true) & set(self._false):
            raise ValueError(
                f'tokens used as both true and false: {sorted(overlap)}')

    @staticmethod
    def __unique(*tokens: str) -> tuple[str, ...]:
        # ordered, folded, no dups.
        ret: dict[str, None] = {}
        for i in tokens:
            if not (i := i.strip().casefold()):
                raise ValueError('boolean token must not be blank.')
            ret.setdefault(i, None)
        return tuple(ret)

    @property
    def true_tokens(self) -> tuple[str, ...]:
        return self._true

    @property
    def false_tokens(self) -> tuple[str, ...]:
        return self._false

    @property
    def nonzero_numbers_are_true(self) -> bool:
        return self._nonzero_numbers_are_true

    def try_parse(self, text: str | None) -> bool | None:
        """Returns the matched boolean, or `None` if `text` is not a token."""
        if text is None:
            return None
        token = text.strip().casefold()
        if token in self._true:
            return True
        if token in self._false:
            return False
        if self._nonzero_numbers_are_true and INTEGER.fullmatch(text):
            return int(text) != 0
        return None

    def to_string(self, value: bool) -> str:
        return self._true_string if value else self._false_string

    def __repr__(self) -> str:
        return (f'BoolOptions(true={self._true!r}, false={self._false!r}, '
                f'render=({self._true_string!r}, {self._false_string!r}))')
