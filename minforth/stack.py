from typing import List

from minforth.errors import StackUnderflow
import minforth.logging


_logger = minforth.logging.ForthLogger.get(__name__)


class Stack(List[int]):
    """The data stack.

    Popping or peeking past the bottom raises StackUnderflow. With
    `should_log`, every push and pop is logged at debug level."""

    def __init__(self, name: str = 'stack', should_log=False) -> None:
        super().__init__()
        self._name = name
        self._should_log = should_log

    def append(self, val: int) -> None:
        super().append(val)
        self._should_log and _logger.debug(
            '{} :: after push (.append): {}', self._name, self
        )

    def pop(self, i: int = -1) -> int:
        if not self:
            raise StackUnderflow()
        r = super().pop(i)
        self._should_log and _logger.debug(
            '{} :: after pop (.pop): {}', self._name, self
        )
        return r

    def peek(self, depth: int) -> int:
        """Return the value `depth` places from the top (1 is the top)."""
        if len(self) < depth:
            raise StackUnderflow()
        return self[-depth]

    def format(self) -> str:
        return ' '.join(map(str, self))
