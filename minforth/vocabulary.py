from __future__ import annotations
from typing import Dict, List

from minforth.items import (
    ArithmeticItem,
    ArithmeticOp,
    Item,
    Marker,
    MarkerItem,
    StackOp,
    StackOpItem,
)
import minforth.logging


_logger = minforth.logging.ForthLogger.get(__name__)


def canonical_name(name: str) -> str:
    return name.upper()


class Vocabulary(Dict[str, List[Item]]):
    """A dictionary from canonical word names to definition bodies.

    Keys are always upper-case. A body is the flat list of items a word
    expands to; looking a word up hands out a copy, so expansions already
    made are unaffected by later (re)definitions.
    """

    @classmethod
    def with_builtins(cls) -> Vocabulary:
        vocabulary = cls()
        for op in StackOp:
            vocabulary[op.value] = [StackOpItem(op)]
        for arithmetic_op in ArithmeticOp:
            vocabulary[arithmetic_op.value] = [ArithmeticItem(arithmetic_op)]
        for marker in Marker:
            vocabulary[marker.value] = [MarkerItem(marker)]
        return vocabulary

    def lookup(self, name: str) -> List[Item]:
        """Return a snapshot of the body of `name`.

        Raises KeyError if there is no such word."""
        return list(self[canonical_name(name)])

    def define(self, name: str) -> List[Item]:
        """Start a fresh, empty definition of `name`, replacing any old one.

        The returned list is the stored body itself; appending to it extends
        the definition."""
        name = canonical_name(name)
        if name in self:
            _logger.debug('redefining word {}', name)
        else:
            _logger.debug('defining word {}', name)
        body: List[Item] = []
        self[name] = body
        return body
