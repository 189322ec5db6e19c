from __future__ import annotations

import math

from stacklang import EvaluatorFn
from stacklang.errors import RecoverableError
from stacklang.types.context import ExecutionContext
from stacklang.types.value import make_value, number_text, to_number


def now_time_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Push wall-clock seconds since the epoch, with the fractional part."""
    ctx.stack.push(make_value(ctx.clock()))


def sleep_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    seconds = to_number(ctx.stack.pop())
    if not math.isfinite(seconds) or seconds < 0:
        raise RecoverableError(f"Cannot sleep for {number_text(seconds)} seconds")
    ctx.sleeper(seconds)
