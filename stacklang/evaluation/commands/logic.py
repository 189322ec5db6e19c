from __future__ import annotations

from stacklang import EvaluatorFn
from stacklang.types.context import ExecutionContext
from stacklang.types.value import to_bool, to_number, to_string


def and_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    b = to_bool(ctx.stack.pop())
    a = to_bool(ctx.stack.pop())
    ctx.stack.push(a and b)


def or_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    b = to_bool(ctx.stack.pop())
    a = to_bool(ctx.stack.pop())
    ctx.stack.push(a or b)


def not_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.stack.push(not to_bool(ctx.stack.pop()))


def equal_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Compare the String forms, so `1 (1) equal` is true."""
    b = to_string(ctx.stack.pop())
    a = to_string(ctx.stack.pop())
    ctx.stack.push(a == b)


def less_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    b = to_number(ctx.stack.pop())
    a = to_number(ctx.stack.pop())
    ctx.stack.push(a < b)
