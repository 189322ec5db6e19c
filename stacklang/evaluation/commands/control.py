"""Control-flow commands: eval if while exit.

Quoted code is a String popped from the stack and fed back to the evaluator
against the same context. Nothing is rolled back if a branch fails halfway.
"""

from __future__ import annotations

import logging

from stacklang import EvaluatorFn
from stacklang.types.context import ExecutionContext
from stacklang.types.value import to_bool, to_number, to_status, to_string

logger = logging.getLogger(__name__)


def eval_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    code = to_string(ctx.stack.pop())
    evaluate_fn(code, ctx)


def if_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """(if-code) (else-code) condition if"""
    condition = to_bool(ctx.stack.pop())
    code_else = to_string(ctx.stack.pop())
    code_if = to_string(ctx.stack.pop())
    evaluate_fn(code_if if condition else code_else, ctx)


def while_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """(condition) (body) while

    The condition runs first on every iteration and must leave one value
    on the stack, which is popped as a Bool.
    """
    body = to_string(ctx.stack.pop())
    condition = to_string(ctx.stack.pop())
    while True:
        evaluate_fn(condition, ctx)
        if not to_bool(ctx.stack.pop()):
            break
        evaluate_fn(body, ctx)


def exit_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Terminate the whole run with the popped status.

    SystemExit is not an Exception subclass, so no command handler can
    swallow it; it unwinds every nested evaluation.
    """
    status = to_status(to_number(ctx.stack.pop()))
    logger.info("exit requested with status %d", status)
    raise SystemExit(status)
