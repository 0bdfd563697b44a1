"""The minforth lexer.

Input is normalized before it is split: everything is upper-cased (words are
case-insensitive) and control characters become spaces. What remains is split
on whitespace. The lexer cannot fail; a blank line has no tokens.
"""
from __future__ import annotations
import dataclasses
import unicodedata
from typing import List, Tuple, TypeAlias

import parsy

from minforth.location import Location


@dataclasses.dataclass
class Token:
    """Class to represent tokens.

    self.value - token value, as string, already case-folded.
    self.start - starting position of token in the normalized line, as
        (line, col)
    self.end - ending position of token in the normalized line, as (line, col)
    """

    value: str = ''
    start: Location = (1, 0)
    end: Location = (1, 0)


def normalize(line: str) -> str:
    return ''.join(
        ' ' if unicodedata.category(char) == 'Cc' else char
        for char in line.upper()
    )


def _to_token(mark: Tuple[Tuple[int, int], str, Tuple[int, int]]) -> Token:
    # parsy counts lines from zero.
    (start_line, start_col), value, (end_line, end_col) = mark
    return Token(value, (start_line + 1, start_col), (end_line + 1, end_col))


_whitespace = parsy.regex(r'\s*')
_word = parsy.regex(r'\S+').mark().map(_to_token)
_line = _whitespace >> (_word << _whitespace).many()


def tokenize(line: str) -> List[Token]:
    return _line.parse(normalize(line))


TokenTuple: TypeAlias = Tuple[str, Location, Location]


def to_tokens(*tokTuples: TokenTuple) -> List[Token]:
    return [Token(*tuple) for tuple in tokTuples]
