import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[1 2 3]", [1, 2, 3]),
        ("[]", []),
        ("[1 [2 3] (a b)]", [1, [2, 3], "a b"]),
        ("[(a  b)]", ["a  b"]),  # nested literals keep their spacing
        ("[1 2 add 3]", [3, 3]),
        ("[1 2 3] reverse", [3, 2, 1]),
        ("[1 2 3] 1 get", 2),
        ("(abc) 1 get", "b"),
        ("[1 2 3] 0 (x) set", ["x", 2, 3]),
        ("[1 2 3] 1 del", [1, 3]),
        ("[1 2] 3 append", [1, 2, 3]),
        ("[1 2] [3] append", [1, 2, [3]]),
        ("[1 3] 1 2 insert", [1, 2, 3]),
        ("[1] 1 2 insert", [1, 2]),
        ("[10 9 1] sort", ["1", "10", "9"]),
        ("[(b) (a) true] sort", ["a", "b", "true"]),
        ("0 10 2 range", [0, 2, 4, 6, 8]),
        ("1.9 4.9 1 range", [1, 2, 3]),
        ("5 0 1 range", []),
        ("[1 2 3] len", 3),
        ("(héllo) len", 5),
        ("true len", 1),
        ("5 len", 1),
        ("() len", 0),
    ]
)
def test_list_commands(run, source, expected):
    assert run(source) == [expected]


def test_list_body_shares_the_stack(run):
    # collection is by stack depth: the body consumed 1, so only the value above depth 1 is taken
    assert run("1 [pop 2 3]") == [2, [3]]


def test_list_body_popping_below_start_collects_nothing(run):
    assert run("1 2 [pop]") == [1, []]


def test_list_body_can_read_variables(run):
    assert run("5 (n) var [n n mul n]") == [[25, 5]]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[1 2 3] 5 get", [1, 2, 3]),
        ("[1 2 3] 3 (x) set", [1, 2, 3]),
        ("[1 2 3] 3 del", [1, 2, 3]),
        ("[1] 5 2 insert", [1]),
    ]
)
def test_out_of_range_index_leaves_list_unchanged(run, log, source, expected):
    assert run(source) == [expected]
    assert "Error: Index" in log()


def test_negative_index_truncates_to_zero(run):
    assert run("[7 8] -3 get") == [7]


def test_range_with_zero_step_pushes_empty_list(run, log):
    assert run("0 5 0 range") == [[]]
    assert "Error: range step must be at least 1" in log()


def test_commands_do_not_mutate_shared_lists(run, ctx):
    run("[1 2] (xs) var xs 9 append")
    assert ctx.memory.lookup("xs") == [1, 2]
    assert ctx.stack.items == [[1, 2, 9]]


# -------------------------------
# for / map / filter
# -------------------------------
def test_for_keeps_binding_after_loop(run, ctx):
    assert run("[1 2] (x) (x) for") == [1, 2]
    assert ctx.memory.lookup("x") == 2
    assert run("x") == [1, 2, 2]


def test_for_overwrites_existing_variable(run, ctx):
    run("(old) (i) var [7 8 9] (i) () for")
    assert ctx.memory.lookup("i") == 9


def test_for_over_empty_list_leaves_variable_unbound(run, ctx):
    assert run("[] (x) (x) for") == []
    assert "x" not in ctx.memory


def test_map(run):
    assert run("[1 2 3] (x) (x 2 mul) map") == [[2, 4, 6]]


def test_map_over_string_characters(run):
    assert run("(ab) (c) (c c concat) map") == [["aa", "bb"]]


def test_map_with_empty_body_uses_defaults(run, log):
    assert run("[1 2] (x) () map") == [["", ""]]
    assert log().count("Error: Not enough values") == 2


def test_filter_keeps_original_elements(run):
    assert run("[1 2 3 4] (x) (x 2 mod 0 equal) filter") == [[2, 4]]


def test_filter_with_string_predicate_results(run):
    assert run("[(a) () (b)] (s) (s) filter") == [["a", "b"]]


def test_nested_loops_share_one_store(run, ctx):
    run("[1 2] (x) ([10 20] (y) (x y add) for) for")
    assert ctx.stack.items == [11, 21, 12, 22]
    assert ctx.memory.lookup("x") == 2
    assert ctx.memory.lookup("y") == 20


def test_range_too_long_pushes_empty_list(run, log):
    assert run("0 1e30 1 range") == [[]]
    assert "is too long" in log()
