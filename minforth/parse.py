"""The minforth definition parser.

Parsing a line does two things at once: it expands every word into the
items it currently stands for, producing the flat list of items the
evaluator runs, and it processes `: name ... ;` blocks, which store a new
definition in the vocabulary instead of producing items.

The parser is a small state machine:

NORMAL --`:`--> DEFINITION_NAME_EXPECTED --name--> DEFINITION_BODY --`;`--> NORMAL

A line is only accepted if it ends in NORMAL. Definitions are stored as they
are parsed, so a line that fails part way through keeps whatever it already
defined.
"""
from __future__ import annotations
import enum
from typing import List, Optional, Sequence, cast

from minforth.errors import InvalidWord, UnknownWord
from minforth.items import Executable, Item, Marker, is_marker
from minforth.lex import Token
import minforth.logging
from minforth.resolve import parse_number, resolve
from minforth.vocabulary import Vocabulary


_logger = minforth.logging.ForthLogger.get(__name__)


class ParseState(enum.Enum):
    NORMAL = enum.auto()
    DEFINITION_NAME_EXPECTED = enum.auto()
    DEFINITION_BODY = enum.auto()


def _last_item(items: Sequence[Item], token: Token) -> Item:
    # Words defined as `: name ;` expand to nothing.
    if not items:
        raise InvalidWord(token)
    return items[-1]


def _check_definition_name(token: Token, vocabulary: Vocabulary) -> None:
    if parse_number(token.value) is not None:
        raise InvalidWord(token)
    try:
        items = resolve(token, vocabulary)
    except UnknownWord:
        # Defining a brand new word.
        return
    _last_item(items, token)


def parse(tokens: Sequence[Token], vocabulary: Vocabulary) -> List[Executable]:
    """Expand the tokens of one line into executable items.

    The vocabulary is updated in place by any definitions on the line."""
    items: List[Executable] = []
    state = ParseState.NORMAL
    definition: List[Item] = []
    definition_start: Optional[Token] = None

    for token in tokens:
        if state is ParseState.NORMAL:
            resolved = resolve(token, vocabulary)
            last = _last_item(resolved, token)
            if is_marker(last, Marker.DEFINITION_START):
                definition_start = token
                state = ParseState.DEFINITION_NAME_EXPECTED
            elif is_marker(last, Marker.DEFINITION_END):
                # `;` without a matching `:` does nothing.
                pass
            else:
                # Stored definitions never contain markers.
                items.extend(cast(List[Executable], resolved))
        elif state is ParseState.DEFINITION_NAME_EXPECTED:
            _check_definition_name(token, vocabulary)
            definition = vocabulary.define(token.value)
            state = ParseState.DEFINITION_BODY
        elif state is ParseState.DEFINITION_BODY:
            resolved = resolve(token, vocabulary)
            last = _last_item(resolved, token)
            if is_marker(last, Marker.DEFINITION_END):
                state = ParseState.NORMAL
            elif is_marker(last, Marker.DEFINITION_START):
                # Definitions don't nest.
                raise InvalidWord(token)
            else:
                definition.extend(resolved)
        _logger.debug('after {!r}: {}', token.value, state.name)

    if state is not ParseState.NORMAL:
        # Either `:` ended the line or the definition was never closed.
        raise InvalidWord(definition_start)
    return items

