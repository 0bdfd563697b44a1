"""This module takes the parser output and executes it."""
from typing import Iterable

from typing_extensions import assert_never

from minforth.items import Executable
from minforth.stack import Stack
from minforth.words import apply_arithmetic, stack_words


def execute(items: Iterable[Executable], stack: Stack) -> None:
    """Run items against the stack, in order.

    Execution stops at the first error, which propagates. The stack is left
    as it was at that point."""
    for item in items:
        if item.type == 'literal':
            stack.append(item.value)
        elif item.type == 'stack-op':
            stack_words[item.op](stack)
        elif item.type == 'arithmetic':
            apply_arithmetic(item.op, stack)
        else:
            assert_never(item)
