"""The built-in words.

Shuffle words follow Forth. Arithmetic works on 32-bit integers: results wrap
around, and division truncates toward zero.
"""
from __future__ import annotations
from typing import Callable, Dict

from minforth.errors import DivisionByZero
from minforth.items import ArithmeticOp, StackOp
from minforth.stack import Stack


def wrap(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


def dup(stack: Stack) -> None:
    """x -- x x"""
    stack.append(stack.peek(1))


def drop(stack: Stack) -> None:
    """x --"""
    stack.pop()


def swap(stack: Stack) -> None:
    """x y -- y x"""
    y = stack.pop()
    x = stack.pop()
    stack.append(y)
    stack.append(x)


def over(stack: Stack) -> None:
    """x y -- x y x"""
    stack.append(stack.peek(2))


def add(x: int, y: int) -> int:
    return wrap(x + y)


def subtract(x: int, y: int) -> int:
    return wrap(x - y)


def multiply(x: int, y: int) -> int:
    return wrap(x * y)


def divide(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZero()
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return wrap(quotient)


stack_words: Dict[StackOp, Callable[[Stack], None]] = {
    StackOp.DUP: dup,
    StackOp.DROP: drop,
    StackOp.SWAP: swap,
    StackOp.OVER: over,
}

arithmetic_words: Dict[ArithmeticOp, Callable[[int, int], int]] = {
    ArithmeticOp.ADD: add,
    ArithmeticOp.SUB: subtract,
    ArithmeticOp.MUL: multiply,
    ArithmeticOp.DIV: divide,
}


def apply_arithmetic(op: ArithmeticOp, stack: Stack) -> None:
    """x y -- z

    Both operands are popped before the result is computed, so a failing
    operation (underflow part way through, division by zero) leaves them
    consumed."""
    y = stack.pop()
    x = stack.pop()
    stack.append(arithmetic_words[op](x, y))
