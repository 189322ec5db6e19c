"""Stack and memory commands: pop size-stack var type cast mem free copy swap."""

from __future__ import annotations

from stacklang import EvaluatorFn
from stacklang.types.context import ExecutionContext
from stacklang.types.value import cast, to_string, type_name


def pop_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.stack.pop()


def size_stack_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.stack.push(float(len(ctx.stack)))


def var_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """value (name) var"""
    name = to_string(ctx.stack.pop())
    value = ctx.stack.pop()
    ctx.memory.define(name, value)
    ctx.show_memory()


def type_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.stack.push(type_name(ctx.stack.pop()))


def cast_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """value (kind) cast; an unknown kind leaves the value as it was."""
    kind = to_string(ctx.stack.pop())
    value = ctx.stack.pop()
    ctx.stack.push(cast(value, kind))


def mem_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.stack.push(ctx.memory.names())


def free_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    ctx.memory.free(to_string(ctx.stack.pop()))
    ctx.show_memory()


def copy_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    value = ctx.stack.pop()
    ctx.stack.push(value)
    ctx.stack.push(value)


def swap_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    b = ctx.stack.pop()
    a = ctx.stack.pop()
    ctx.stack.push(b)
    ctx.stack.push(a)
