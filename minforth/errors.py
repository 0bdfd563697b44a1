from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from minforth.lex import Token


class ForthError(Exception):
    """Base class of every error raised while evaluating a line.

    self.token - the token being processed when the error happened, or None
    when the error happened while executing (execution no longer knows which
    token an item came from).
    """

    message = 'error'

    def __init__(self, token: Optional[Token] = None) -> None:
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return '{}: {}'.format(self.message, self.token.value)


class UnknownWord(ForthError):
    message = 'unknown word'


class InvalidWord(ForthError):
    message = 'invalid word definition'


class StackUnderflow(ForthError):
    message = 'stack underflow'


class DivisionByZero(ForthError):
    message = 'division by zero'
