"""Core evaluator for stacklang.

Classifies each token and either pushes a literal, recurses into nested
source against the same context, or dispatches a named command. Every
nested evaluation (list bodies, eval/if/while/for/map/filter) re-enters
`evaluate` with the one shared ExecutionContext.
"""

from __future__ import annotations

import logging

from stacklang.errors import RecoverableError
from stacklang.evaluation.commands import COMMANDS
from stacklang.reader.tokenizer import lex
from stacklang.types.context import ExecutionContext
from stacklang.types.value import parse_number

logger = logging.getLogger(__name__)

BOOLEANS = {"true": True, "false": False}


def evaluate(source: str, ctx: ExecutionContext) -> None:
    """Tokenize `source` and run every token against `ctx`."""
    for token in lex(source):
        ctx.trace(token)
        evaluate_token(token, ctx)
    ctx.trace()


def evaluate_token(token: str, ctx: ExecutionContext) -> None:
    number = parse_number(token)
    if number is not None:
        ctx.stack.push(number)
        return

    if token in BOOLEANS:
        ctx.stack.push(BOOLEANS[token])
        return

    # --- String literal ---
    if len(token) >= 2 and token[0] == "(" and token[-1] == ")":
        ctx.stack.push(token[1:-1])
        return

    # --- List literal: collect whatever the body pushes ---
    if len(token) >= 2 and token[0] == "[" and token[-1] == "]":
        mark = len(ctx.stack)
        logger.debug("entering list body %r at depth %d", token, mark)
        evaluate(token[1:-1], ctx)
        ctx.stack.push(ctx.stack.pop_since(mark))
        return

    if token in ctx.memory:
        ctx.stack.push(ctx.memory.lookup(token))
        return

    if "#" in token:
        ctx.comment(token)
        return

    execute_command(token, ctx)


def execute_command(name: str, ctx: ExecutionContext) -> None:
    """Run the command called `name`; unknown names are pushed as Strings."""
    command = COMMANDS.get(name)
    if command is None:
        ctx.stack.push(name)
        return

    logger.debug("command %s", name)
    try:
        command(ctx, evaluate)
    except RecoverableError as err:
        for value in err.restore:
            ctx.stack.push(value)
        ctx.error(str(err))
