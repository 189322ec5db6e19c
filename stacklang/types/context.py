"""Per-run execution state.

One ExecutionContext holds the stack, the variable store and the two text
channels (Output and Log). Nested evaluations of list bodies and quoted
code all share the same context; it is never copied.
"""

from __future__ import annotations

import logging
import time
from io import StringIO
from typing import Callable, Optional

from stacklang.types.memory import Memory
from stacklang.types.stack import ValueStack

logger = logging.getLogger(__name__)

PromptFn = Callable[[str], str]
ClockFn = Callable[[], float]
SleepFn = Callable[[float], None]


class ExecutionContext:
    """Stack, store, Output/Log buffers and the host collaborators of one run."""

    def __init__(
        self,
        prompt: Optional[PromptFn] = None,
        clock: Optional[ClockFn] = None,
        sleeper: Optional[SleepFn] = None,
    ):
        self.stack: ValueStack = ValueStack(on_underflow=self.error)
        self.memory: Memory = Memory()
        self.output: StringIO = StringIO()
        self.log: StringIO = StringIO()
        self.prompt: PromptFn = prompt or input
        self.clock: ClockFn = clock or time.time
        self.sleeper: SleepFn = sleeper or time.sleep

    # -- Output channel -------------------------------------------------

    def print(self, text: str) -> None:
        self.output.write(text)
        self.output.write("\n")

    # -- Log channel ----------------------------------------------------

    def trace(self, token: Optional[str] = None) -> None:
        """Record the stack, optionally followed by the token about to run."""
        if token is None:
            self.log.write(f"{self.stack}\n\n")
        else:
            self.log.write(f"{self.stack} <- {token}\n")

    def comment(self, token: str) -> None:
        self.log.write(f"Comment: {token.replace('#', '')}\n")

    def error(self, message: str) -> None:
        logger.warning("recovered: %s", message)
        self.log.write(f"Error: {message}\n")

    def show_memory(self) -> None:
        self.log.write(f"{self.memory}\n")

    def getvalues(self) -> tuple[str, str]:
        return self.output.getvalue(), self.log.getvalue()
