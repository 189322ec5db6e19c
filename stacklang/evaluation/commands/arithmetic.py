"""Arithmetic commands: add sub mul div mod pow round.

Binary commands pop b (the top) and then a, and push `a op b`. All results
follow IEEE double semantics, so nothing here raises: division by zero gives
an infinity or NaN instead of ZeroDivisionError.
"""

from __future__ import annotations

import math

from stacklang import EvaluatorFn
from stacklang.types.context import ExecutionContext
from stacklang.types.value import to_number


def pop_operands(ctx: ExecutionContext) -> tuple[float, float]:
    b = to_number(ctx.stack.pop())
    a = to_number(ctx.stack.pop())
    return a, b


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == int(x) and int(x) % 2 == 1


def divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def remainder(a: float, b: float) -> float:
    """Truncated remainder: the result has the sign of `a`."""
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        negative = a < 0 and _is_odd_integer(b)
        return -math.inf if negative else math.inf
    except ValueError:
        if a == 0:
            # zero to a negative power
            negative = math.copysign(1.0, a) < 0 and _is_odd_integer(b)
            return -math.inf if negative else math.inf
        return math.nan


def round_half_away(a: float) -> float:
    if not math.isfinite(a):
        return a
    magnitude = abs(a)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), a)


def add_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(a + b)


def sub_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(a - b)


def mul_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(a * b)


def div_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(divide(a, b))


def mod_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(remainder(a, b))


def pow_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    a, b = pop_operands(ctx)
    ctx.stack.push(power(a, b))


def round_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Unary: round to the nearest integer, halves away from zero."""
    ctx.stack.push(round_half_away(to_number(ctx.stack.pop())))
