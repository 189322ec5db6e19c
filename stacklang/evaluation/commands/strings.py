"""String commands: repeat decode encode concat replace split join find."""

from __future__ import annotations

from stacklang import EvaluatorFn
from stacklang.errors import CodecError, SizeLimitError
from stacklang.types.context import ExecutionContext
from stacklang.types.value import MAX_SEQUENCE_LENGTH, to_code_point, to_index, to_list, to_number, to_string

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def repeat_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    raw_count = ctx.stack.pop()
    raw_text = ctx.stack.pop()
    count = to_index(to_number(raw_count))
    text = to_string(raw_text)
    if text and count > MAX_SEQUENCE_LENGTH // len(text):
        raise SizeLimitError(f"Cannot repeat a string of length {len(text)} {count} times", raw_text, raw_count)
    ctx.stack.push(text * count)


def decode_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """Number -> one-character String by Unicode scalar value."""
    code = to_number(ctx.stack.pop())
    point = to_code_point(code)
    if point > MAX_CODE_POINT or point in SURROGATES:
        raise CodecError(f"Failed to decode {point} into a character", code)
    ctx.stack.push(chr(point))


def encode_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    """First character of a String -> its scalar value."""
    text = to_string(ctx.stack.pop())
    if not text:
        raise CodecError("Failed to encode an empty string", text)
    ctx.stack.push(float(ord(text[0])))


def concat_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    b = to_string(ctx.stack.pop())
    a = to_string(ctx.stack.pop())
    ctx.stack.push(a + b)


def replace_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    after = to_string(ctx.stack.pop())
    before = to_string(ctx.stack.pop())
    text = to_string(ctx.stack.pop())
    ctx.stack.push(text.replace(before, after))


def split_text(text: str, delimiter: str) -> list[str]:
    if not delimiter:
        # an empty delimiter matches at both ends and between every character
        return ["", *text, ""]
    return text.split(delimiter)


def split_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    delimiter = to_string(ctx.stack.pop())
    text = to_string(ctx.stack.pop())
    ctx.stack.push(split_text(text, delimiter))


def join_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    delimiter = to_string(ctx.stack.pop())
    items = to_list(ctx.stack.pop())
    ctx.stack.push(delimiter.join(to_string(x) for x in items))


def find_command(ctx: ExecutionContext, evaluate_fn: EvaluatorFn) -> None:
    needle = to_string(ctx.stack.pop())
    text = to_string(ctx.stack.pop())
    ctx.stack.push(needle in text)
