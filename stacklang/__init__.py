# Core type aliases for the stacklang data model.
# Values are plain Python objects: float (Number), str (String), bool (Bool)
# and list (List). There is no wrapper class around them.
#
# Naming guidance:
# - StackValue:  anything that may live on the stack or in the variable store.
# - EvaluatorFn: the recursive evaluation procedure handed to control-flow commands.
# - CommandFn:   handler for a named command, see evaluation/commands.

from typing import Any, Callable, Union

StackValue = Union[float, str, bool, list]

# Evaluates quoted source against a shared ExecutionContext.
EvaluatorFn = Callable[[str, Any], None]

CommandFn = Callable[[Any, EvaluatorFn], None]
