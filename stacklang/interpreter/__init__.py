from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterator, Literal, Optional

from stacklang import EvaluatorFn
from stacklang.config import configure_logging, get_prelude_path, get_recursion_limit
from stacklang.types.context import ClockFn, ExecutionContext, PromptFn, SleepFn

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """The two text channels produced by a run."""

    output: str
    log: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.output, self.log))


class Interpreter:
    """
    Owns one ExecutionContext and evaluates source text against it.
    The stack and variable store persist across calls to `run`.
    """

    def __init__(
        self,
        eval_fn: EvaluatorFn | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        prompt: Optional[PromptFn] = None,
        clock: Optional[ClockFn] = None,
        sleeper: Optional[SleepFn] = None,
    ):
        configure_logging()
        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        if eval_fn is None:
            from stacklang.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn: EvaluatorFn = eval_fn
        self.ctx: ExecutionContext = ExecutionContext(prompt=prompt, clock=clock, sleeper=sleeper)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        """Evaluate the file named by STACKLANG_PRELUDE_PATH, if any."""
        path = get_prelude_path()
        if path is None:
            return
        if not path.is_file():
            # Be permissive: a missing prelude does not stop the interpreter
            logger.warning("prelude %s not found, continuing without it", path)
            return
        self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> None:
        logger.debug("evaluating prelude (%d chars)", len(code))
        self.eval_fn(code, self.ctx)

    @property
    def stack(self) -> list:
        return self.ctx.stack.items

    @property
    def memory(self) -> dict:
        return self.ctx.memory.vars

    def run(self, code: str) -> RunResult:
        """Evaluate `code` and return only the output and log it produced."""
        out_start = len(self.ctx.output.getvalue())
        log_start = len(self.ctx.log.getvalue())
        self.eval_fn(code, self.ctx)
        output, log = self.ctx.getvalues()
        return RunResult(output[out_start:], log[log_start:])


def run_stack(
    source: str,
    *,
    prompt: Optional[PromptFn] = None,
    clock: Optional[ClockFn] = None,
    sleeper: Optional[SleepFn] = None,
) -> RunResult:
    """Host entry point: run `source` in a fresh interpreter, return (output, log)."""
    return Interpreter(prompt=prompt, clock=clock, sleeper=sleeper).run(source)
