"""The items that words resolve to.

A word's definition is a flat list of items. Executable items (arithmetic,
stack operations and literals) are what the evaluator runs; markers only
exist to tell the definition parser where a `: name ... ;` block starts and
ends.
"""
from __future__ import annotations
import dataclasses
import enum
from typing import List, Literal, TypeAlias


class ArithmeticOp(enum.Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


class StackOp(enum.Enum):
    DUP = 'DUP'
    DROP = 'DROP'
    SWAP = 'SWAP'
    OVER = 'OVER'


class Marker(enum.Enum):
    DEFINITION_START = ':'
    DEFINITION_END = ';'


@dataclasses.dataclass(frozen=True)
class ArithmeticItem:
    """Pops two values and pushes the result of a binary operation."""

    op: ArithmeticOp
    type: Literal['arithmetic'] = dataclasses.field(
        default='arithmetic', init=False
    )


@dataclasses.dataclass(frozen=True)
class StackOpItem:
    """Rearranges the top of the stack."""

    op: StackOp
    type: Literal['stack-op'] = dataclasses.field(
        default='stack-op', init=False
    )


@dataclasses.dataclass(frozen=True)
class LiteralItem:
    value: int
    type: Literal['literal'] = dataclasses.field(default='literal', init=False)


@dataclasses.dataclass(frozen=True)
class MarkerItem:
    marker: Marker
    type: Literal['marker'] = dataclasses.field(default='marker', init=False)


Executable: TypeAlias = 'ArithmeticItem | StackOpItem | LiteralItem'

Item: TypeAlias = 'Executable | MarkerItem'


def is_marker(item: Item, marker: Marker) -> bool:
    return item.type == 'marker' and item.marker is marker


def to_items(*values: int) -> List[Item]:
    return [LiteralItem(value) for value in values]
