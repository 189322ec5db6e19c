"""Variable store for stacklang.

A single flat mapping from names to values. There are no nested scopes:
anything written (by `var` or by a loop binding) stays visible to every
later token of the run, and the last write wins.
"""

from __future__ import annotations

from io import StringIO

from stacklang import StackValue
from stacklang.types.value import display


class Memory:
    """Flat name -> value store owned by one execution context."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, StackValue] = {}

    def define(self, name: str, value: StackValue) -> None:
        """Bind `name`, overwriting any previous value."""
        self.vars[name] = value

    def lookup(self, name: str) -> StackValue:
        return self.vars[name]

    def free(self, name: str) -> None:
        """Remove `name` if it is bound; unknown names are ignored."""
        self.vars.pop(name, None)

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{ ")
        buffer.write(", ".join(f"'{k}': {display(v)}" for k, v in self.vars.items()))
        buffer.write(" }")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("Memory ")
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Memory ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
