from __future__ import annotations

from io import StringIO
from typing import Callable, Iterator, Optional

from stacklang import StackValue
from stacklang.types.value import display


UNDERFLOW_DEFAULT: StackValue = ""


class ValueStack:
    """LIFO of values shared by every (nested) evaluation of one run.

    Popping an empty stack never fails: the empty String is returned and
    `on_underflow` is told about it.
    """

    __slots__ = ("items", "on_underflow")

    def __init__(self, on_underflow: Optional[Callable[[str], None]] = None):
        self.items: list[StackValue] = []
        self.on_underflow = on_underflow

    def push(self, value: StackValue) -> None:
        self.items.append(value)

    def pop(self) -> StackValue:
        if self.items:
            return self.items.pop()
        if self.on_underflow is not None:
            self.on_underflow("Not enough values on the stack, using the default value")
        return UNDERFLOW_DEFAULT

    def pop_since(self, mark: int) -> list[StackValue]:
        """Pop everything above depth `mark`, returned bottom first."""
        run = [self.pop() for _ in range(mark, len(self.items))]
        run.reverse()
        return run

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[StackValue]:
        return iter(self.items)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("Stack[ ")
            buffer.write(" | ".join(display(x) for x in self.items))
            buffer.write(" ]")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<ValueStack {self.items!r}>"
