"""
  stacklang tokenizer

- Single left-to-right scan, yields raw token strings lazily.
- Whitespace (tab, newline, carriage return, ideographic space) is collapsed
  to a plain space; a space ends a token only at the outermost level.
- Three nesting constructs keep their interior spaces:

    - ( ... )   string literals, depth always tracked
    - [ ... ]   list literals, depth only tracked outside parentheses
    - # ... #   comments, a flag toggled by every '#'

  The delimiters themselves stay in the token text; classifying tokens is
  the evaluator's job.
"""

from __future__ import annotations

from typing import Iterator

WHITESPACE = str.maketrans({"\t": " ", "\n": " ", "\r": " ", "　": " "})


def lex(source: str) -> Iterator[str]:
    """Token generator: yields each token of `source` as a string."""
    buffer: list[str] = []
    paren_depth = 0
    bracket_depth = 0
    in_hash = False

    for ch in source.translate(WHITESPACE):
        if ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth -= 1
        elif ch == "#":
            in_hash = not in_hash
        elif ch == "[" and paren_depth == 0:
            bracket_depth += 1
        elif ch == "]" and paren_depth == 0:
            bracket_depth -= 1
        elif ch == " " and not in_hash and bracket_depth == 0 and paren_depth == 0:
            if buffer:
                yield "".join(buffer)
                buffer.clear()
            continue
        buffer.append(ch)

    if buffer:
        yield "".join(buffer)


def tokenize(source: str) -> list[str]:
    return list(lex(source))
