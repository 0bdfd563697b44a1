from typing import List

from minforth.execute import execute
import minforth.lex
import minforth.logging
from minforth.parse import parse
from minforth.stack import Stack
from minforth.vocabulary import Vocabulary


_logger = minforth.logging.ForthLogger.get(__name__)


class Forth:
    """A minforth interpreter: a vocabulary and a stack.

    Each line given to `evaluate` is tokenized, expanded into items by the
    definition parser (which also stores new definitions) and then executed.
    Errors are raised as minforth.errors.ForthError. Nothing is rolled back
    on error, and the interpreter stays usable afterwards.
    """

    def __init__(self, should_log_stack: bool = False) -> None:
        self.vocabulary = Vocabulary.with_builtins()
        self._stack = Stack('stack', should_log_stack)

    @property
    def stack(self) -> List[int]:
        return list(self._stack)

    def evaluate(self, line: str) -> None:
        tokens = minforth.lex.tokenize(line)
        _logger.debug('evaluating {} tokens', len(tokens))
        execute(parse(tokens, self.vocabulary), self._stack)

    def format_stack(self) -> str:
        return self._stack.format()
