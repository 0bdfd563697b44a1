"""Resolution of single tokens into items.

A token is either a number, which becomes a literal, or the name of a word,
which becomes a copy of that word's current definition.
"""
from __future__ import annotations
from typing import List, Optional

import parsy

from minforth.errors import UnknownWord
from minforth.items import Item, LiteralItem
from minforth.lex import Token
from minforth.vocabulary import Vocabulary

VALUE_MIN = -(2**31)
VALUE_MAX = 2**31 - 1

_number = parsy.regex(r'[+-]?[0-9]+').map(int).desc('number')


def parse_number(text: str) -> Optional[int]:
    """Return the value of a 32-bit decimal integer literal, or None.

    Literals that don't fit in 32 bits are not numbers at all."""
    try:
        value = _number.parse(text)
    except parsy.ParseError:
        return None
    if not VALUE_MIN <= value <= VALUE_MAX:
        return None
    return value


def resolve(token: Token, vocabulary: Vocabulary) -> List[Item]:
    value = parse_number(token.value)
    if value is not None:
        return [LiteralItem(value)]
    try:
        return vocabulary.lookup(token.value)
    except KeyError:
        raise UnknownWord(token) from None
