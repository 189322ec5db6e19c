import pytest

from stacklang.evaluation.evaluator import evaluate


def test_if_selects_the_if_branch(run):
    assert run("(1) (2) true if") == [1]


def test_if_selects_the_else_branch(run):
    assert run("(1) (2) false if") == [2]


def test_if_evaluates_only_one_branch(run, ctx):
    run("((yes) print) ((no) print) true if")
    assert ctx.output.getvalue() == "yes\n"


def test_if_condition_is_coerced(run):
    assert run("(a) (b) 0 if (c) (d) (x) if") == ["b", "c"]


def test_eval(run):
    assert run("(1 2 add) eval") == [3]


def test_eval_of_generated_code(run):
    assert run("(2 3) ( mul) concat eval") == [6]


def test_eval_shares_variables(run, ctx):
    run("(7 (seven) var) eval seven")
    assert ctx.stack.items == [7]


def test_while_counts_up(run):
    assert run("0 (i) var (i 3 less) (i 1 add (i) var) while i") == [3]


def test_while_with_false_condition_never_runs_body(run, ctx):
    run("(false) ((never) print) while")
    assert ctx.output.getvalue() == ""
    assert ctx.stack.items == []


def test_while_accumulates(run):
    source = """
        0 (acc) var 1 (n) var
        (n 5 less) (acc n add (acc) var n 1 add (n) var) while
        acc
    """
    assert run(source) == [10]


def test_failed_step_does_not_roll_back_the_branch(run, log):
    assert run("(5 [1] 3 get 6) () true if") == [5, [1], 6]
    assert "Error: Index 3 is out of range" in log()


def test_exit_raises_system_exit_with_status(ctx):
    with pytest.raises(SystemExit) as excinfo:
        evaluate("1 2 exit 3", ctx)
    assert excinfo.value.code == 2
    assert ctx.stack.items == [1]


def test_exit_cannot_be_caught_by_nested_evaluation(ctx):
    with pytest.raises(SystemExit) as excinfo:
        evaluate("((7 exit) eval 99) () true if 100", ctx)
    assert excinfo.value.code == 7
    assert ctx.stack.items == []


def test_exit_inside_loop_stops_iteration(ctx):
    with pytest.raises(SystemExit):
        evaluate("[1 2 3] (x) (x print (0 exit) () x 2 equal if) for", ctx)
    assert ctx.output.getvalue() == "1\n2\n"


def test_exit_status_saturates(ctx):
    with pytest.raises(SystemExit) as excinfo:
        evaluate("1e12 exit", ctx)
    assert excinfo.value.code == 2**31 - 1


def test_exit_on_empty_stack_uses_zero(ctx):
    with pytest.raises(SystemExit) as excinfo:
        evaluate("exit", ctx)
    assert excinfo.value.code == 0
