"""List commands: get set del append insert sort reverse for map filter range len.

Every command builds a new list from `to_list`, so values already on the
stack or in memory are never changed in place. Out-of-range indexes leave the
list untouched and push it back.
"""

from __future__ import annotations

from typing import Iterator

from stacklang import EvaluatorFn, StackValue
from stacklang.errors import IndexOutOfRangeError, RangeStepError, SizeLimitError
from stacklang.types.context import ExecutionContext
from stacklang.types.value import MAX_SEQUENCE_LENGTH, to_bool, to_index, to_list, to_number, to_string


def _out_of_range(index: int, items: list[StackValue]) -> IndexOutOfRangeError:
    return IndexOutOfRangeError(
        f"Index {index} is out of range for a list of length {len(items)}", items
    )


def get_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    index = to_index(to_number(ctx.stack.pop()))
    items = to_list(ctx.stack.pop())
    if index >= len(items):
        raise _out_of_range(index, items)
    ctx.stack.push(items[index])


def set_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """list index value set"""
    value = ctx.stack.pop()
    index = to_index(to_number(ctx.stack.pop()))
    items = to_list(ctx.stack.pop())
    if index >= len(items):
        raise _out_of_range(index, items)
    items[index] = value
    ctx.stack.push(items)


def del_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    index = to_index(to_number(ctx.stack.pop()))
    items = to_list(ctx.stack.pop())
    if index >= len(items):
        raise _out_of_range(index, items)
    del items[index]
    ctx.stack.push(items)


def append_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    value = ctx.stack.pop()
    items = to_list(ctx.stack.pop())
    items.append(value)
    ctx.stack.push(items)


def insert_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """list index value insert; index may equal the length (append)."""
    value = ctx.stack.pop()
    index = to_index(to_number(ctx.stack.pop()))
    items = to_list(ctx.stack.pop())
    if index > len(items):
        raise _out_of_range(index, items)
    items.insert(index, value)
    ctx.stack.push(items)


def sort_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Sort the String forms of the elements; the result is a List of Strings."""
    items = to_list(ctx.stack.pop())
    ctx.stack.push(sorted(to_string(x) for x in items))


def reverse_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    items = to_list(ctx.stack.pop())
    items.reverse()
    ctx.stack.push(items)


class BindingLoop:
    """Runs quoted code once per element of a list.

    Before each run the element is bound to `name` in the flat variable
    store. The binding is not undone afterwards, so the last element stays
    visible once the loop has finished.
    """

    def __init__(
        self,
        items: list[StackValue],
        name: str,
        code: str,
        evaluate_fn: EvaluatorFn,
    ):
        self.items: list[StackValue] = items
        self.name: str = name
        self.code: str = code
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    @classmethod
    def from_stack(cls, ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> BindingLoop:
        """Pop the body, then the variable name, then the source list."""
        code = to_string(ctx.stack.pop())
        name = to_string(ctx.stack.pop())
        items = to_list(ctx.stack.pop())
        return cls(items, name, code, evaluate_fn)

    def run(self, ctx: ExecutionContext) -> Iterator[StackValue]:
        """Yield each element after its body has been evaluated."""
        for item in self.items:
            ctx.memory.define(self.name, item)
            self.evaluate_fn(self.code, ctx)
            yield item


def for_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """[list] (name) (body) for"""
    for _ in BindingLoop.from_stack(ctx, evaluate_fn).run(ctx):
        pass


def map_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """[list] (name) (body) map -> one popped result per element"""
    loop = BindingLoop.from_stack(ctx, evaluate_fn)
    ctx.stack.push([ctx.stack.pop() for _ in loop.run(ctx)])


def filter_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """[list] (name) (predicate) filter -> elements whose predicate was true"""
    loop = BindingLoop.from_stack(ctx, evaluate_fn)
    ctx.stack.push([item for item in loop.run(ctx) if to_bool(ctx.stack.pop())])


def range_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """min max step range -> [min, min+step, ...) with truncated bounds"""
    step = to_index(to_number(ctx.stack.pop()))
    stop = to_index(to_number(ctx.stack.pop()))
    start = to_index(to_number(ctx.stack.pop()))
    if step < 1:
        raise RangeStepError("range step must be at least 1", [])
    numbers = range(start, stop, step)
    if len(numbers) > MAX_SEQUENCE_LENGTH:
        raise SizeLimitError(f"range of {len(numbers)} numbers is too long", [])
    ctx.stack.push([float(i) for i in numbers])


def len_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    value = ctx.stack.pop()
    if isinstance(value, (list, str)):
        ctx.stack.push(float(len(value)))
    else:
        ctx.stack.push(1.0)
