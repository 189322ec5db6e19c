import pytest

from stacklang.evaluation.evaluator import evaluate
from stacklang.types.context import ExecutionContext

FIXED_TIME = 1700000000.25


@pytest.fixture
def prompts():
    """Messages passed to the prompt collaborator."""
    return []


@pytest.fixture
def sleeps():
    """Durations passed to the sleep collaborator."""
    return []


@pytest.fixture
def ctx(prompts, sleeps):
    """Fresh execution context with deterministic host collaborators."""

    def prompt(message):
        prompts.append(message)
        return f"reply to {message}"

    return ExecutionContext(prompt=prompt, clock=lambda: FIXED_TIME, sleeper=sleeps.append)


@pytest.fixture
def run(ctx):
    """Evaluate source against the shared context and return the stack contents."""

    def _run(source: str) -> list:
        evaluate(source, ctx)
        return ctx.stack.items

    return _run


@pytest.fixture
def log(ctx):
    return lambda: ctx.log.getvalue()
