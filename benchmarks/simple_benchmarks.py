from timeit import timeit

from stacklang.interpreter import Interpreter
from stacklang.reader.tokenizer import tokenize
from stacklang.evaluation.evaluator import evaluate
from stacklang.types.context import ExecutionContext


def time_tokenizer(code: str, rounds: int) -> float:
    """Time the tokenizer alone on the same source text."""
    tokenize(code)
    return timeit(lambda: tokenize(code), number=rounds)


def time_interpreter(code: str, rounds: int) -> float:
    """Time full evaluation; every round gets a fresh context so stacks do not grow."""
    evaluate(code, ExecutionContext())
    return timeit(lambda: evaluate(code, ExecutionContext()), number=rounds)


def bench_variable_lookup(n_vars: int = 1000, n_lookups: int = 10000) -> float:
    itp = Interpreter(prelude=None)
    for i in range(n_vars):
        itp.ctx.memory.define(f"v{i}", float(i))
    # Warmup
    for _ in range(1000):
        itp.ctx.memory.lookup("v500")
    return timeit(lambda: itp.ctx.memory.lookup("v500"), number=n_lookups)


# A few program-level benchmarks

ARITH_CODE = "1 2 add 3 mul 4 sub 5 div"

WHILE_SUM_CODE = r"""
0 (acc) var 0 (i) var
(i 500 less) (acc i add (acc) var i 1 add (i) var) while
acc
"""

MAP_FILTER_CODE = r"""
0 200 1 range (x) (x x mul) map
(y) (y 2 mod 0 equal) filter len
"""

NESTED_LIST_CODE = "[1 [2 [3 [4 [5 (five)]]]] (a b c)] reverse"


def _print_pair(name: str, code: str, rounds: int) -> None:
    tlex = time_tokenizer(code, rounds)
    teval = time_interpreter(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  tokenizer: {tlex:.6f}s  |  evaluate: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: variable lookup (flat memory)")
    print(f"  time: {bench_variable_lookup():.6f}s")

    _print_pair("arithmetic chain", ARITH_CODE, rounds=20000)
    _print_pair("while loop sum 0..500", WHILE_SUM_CODE, rounds=20)
    _print_pair("map + filter over range", MAP_FILTER_CODE, rounds=50)
    _print_pair("nested list literal", NESTED_LIST_CODE, rounds=5000)
