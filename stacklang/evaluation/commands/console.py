from __future__ import annotations

from stacklang import EvaluatorFn
from stacklang.types.context import ExecutionContext
from stacklang.types.value import to_string


def print_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.print(to_string(ctx.stack.pop()))


def input_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Pop a prompt message and push the host's reply."""
    message = to_string(ctx.stack.pop())
    ctx.stack.push(str(ctx.prompt(message)))
