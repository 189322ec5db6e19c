"""Registry of stacklang commands.

Maps command names to handler functions. The evaluator consults this table
for any token that is not a literal, a variable or a comment; a name that is
not listed here is pushed as a String instead.
"""

from stacklang import CommandFn
from stacklang.evaluation.commands.arithmetic import (
    add_command, sub_command, mul_command, div_command, mod_command, pow_command, round_command,
)
from stacklang.evaluation.commands.logic import and_command, or_command, not_command, equal_command, less_command
from stacklang.evaluation.commands.strings import (
    repeat_command, decode_command, encode_command, concat_command,
    replace_command, split_command, join_command, find_command,
)
from stacklang.evaluation.commands.console import print_command, input_command
from stacklang.evaluation.commands.control import eval_command, if_command, while_command, exit_command
from stacklang.evaluation.commands.lists import (
    get_command, set_command, del_command, append_command, insert_command, sort_command,
    reverse_command, for_command, map_command, filter_command, range_command, len_command,
)
from stacklang.evaluation.commands.stack_ops import (
    pop_command, size_stack_command, var_command, type_command, cast_command,
    mem_command, free_command, copy_command, swap_command,
)
from stacklang.evaluation.commands.timing import now_time_command, sleep_command

COMMANDS: dict[str, CommandFn] = {
    # arithmetic
    "add": add_command,
    "sub": sub_command,
    "mul": mul_command,
    "div": div_command,
    "mod": mod_command,
    "pow": pow_command,
    "round": round_command,
    # logic
    "and": and_command,
    "or": or_command,
    "not": not_command,
    "equal": equal_command,
    "less": less_command,
    # strings
    "repeat": repeat_command,
    "decode": decode_command,
    "encode": encode_command,
    "concat": concat_command,
    "replace": replace_command,
    "split": split_command,
    "join": join_command,
    "find": find_command,
    # i/o
    "print": print_command,
    "input": input_command,
    # control flow
    "eval": eval_command,
    "if": if_command,
    "while": while_command,
    "exit": exit_command,
    # lists
    "get": get_command,
    "set": set_command,
    "del": del_command,
    "append": append_command,
    "insert": insert_command,
    "sort": sort_command,
    "reverse": reverse_command,
    "for": for_command,
    "map": map_command,
    "filter": filter_command,
    "range": range_command,
    "len": len_command,
    # stack and memory
    "pop": pop_command,
    "size-stack": size_stack_command,
    "var": var_command,
    "type": type_command,
    "cast": cast_command,
    "mem": mem_command,
    "free": free_command,
    "copy": copy_command,
    "swap": swap_command,
    # time
    "now-time": now_time_command,
    "sleep": sleep_command,
}
