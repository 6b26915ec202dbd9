import pytest

from bourneshkit.tree import (
    CaseItem,
    CaseNode,
    CommandNode,
    ForkNode,
    ForNode,
    FunctionNode,
    IfNode,
    IONode,
    ListKind,
    ListNode,
    LoopNode,
    ParenNode,
    format_args,
    format_io,
    format_tree,
)


def cmd(*words):
    return CommandNode(list(words))


def test_none_prints_nothing():
    assert format_tree(None) == ""


def test_simple_command_words():
    assert format_tree(cmd("echo", "hi")).split() == ["echo", "hi"]


def test_assignments_precede_arguments():
    node = CommandNode(["env"], assignments=["A=1"])
    assert format_tree(node).split() == ["A=1", "env"]


def test_format_args_round_trips_words():
    words = ["a", "b", "c"]
    assert format_args(words).split(" ") == words


@pytest.mark.parametrize(
    "io, op",
    [
        (IONode(0, "EOF", doc=True), "<<"),
        (IONode(1, "2", move=True, put=True), ">&"),
        (IONode(0, "3", move=True), "<&"),
        (IONode(0, "in"), "<"),
        (IONode(1, "log", put=True, append=True), ">>"),
        (IONode(1, "out", put=True), ">"),
    ],
)
def test_redirection_operators(io, op):
    assert format_io([io]) == " " + str(io.fd) + op + io.name


def test_redirection_without_name_is_skipped():
    assert format_io([IONode(1, "", put=True)]) == ""


def test_command_with_redirection():
    node = CommandNode(["ls"], io=[IONode(1, "out", put=True)])
    assert format_tree(node) == "ls" + format_io(node.io)


def test_pipe_separator():
    a, b = cmd("ls"), cmd("wc")
    node = ListNode(ListKind.PIPE, a, b)
    assert format_tree(node) == format_tree(a) + " | " + format_tree(b)


@pytest.mark.parametrize("kind, sep", [(ListKind.AND, " && "), (ListKind.OR, " || ")])
def test_and_or_separators(kind, sep):
    a, b = cmd("true"), cmd("false")
    assert format_tree(ListNode(kind, a, b)).split(sep) == ["true", "false"]


def test_sequence_depends_on_mode():
    node = ListNode(ListKind.SEQUENCE, cmd("a"), cmd("b"))
    assert format_tree(node).split("\n") == ["a", "b"]
    assert format_tree(node, one_line=True).split("; ") == ["a", "b"]


def test_background_fork():
    assert format_tree(ForkNode(cmd("sleep"), background=True)).endswith(" &")


def test_foreground_fork_prints_inner_command():
    inner = cmd("sleep")
    assert format_tree(ForkNode(inner)) == format_tree(inner)


def test_paren():
    text = format_tree(ParenNode(cmd("pwd")))
    assert text.startswith("(")
    assert text.endswith(")")
    assert text[1:-1] == "pwd"


def test_if_multi_line():
    node = IfNode(cmd("true"), cmd("echo", "yes"), cmd("echo", "no"))
    assert format_tree(node).split("\n") == [
        "if true",
        "then",
        "echo yes",
        "else",
        "echo no",
        "fi",
    ]


def test_if_without_else_has_no_else():
    text = format_tree(IfNode(cmd("true"), cmd("x")), one_line=True)
    assert "else" not in text
    assert text.endswith("fi")
    assert "\n" not in text


@pytest.mark.parametrize("until, word", [(False, "while "), (True, "until ")])
def test_loops(until, word):
    text = format_tree(LoopNode(cmd("c"), cmd("b"), until=until), one_line=True)
    assert text.startswith(word)
    assert text.endswith("done")
    assert "\n" not in text


def test_for_with_words_one_line():
    node = ForNode("i", cmd("echo", "$i"), ["a", "b"])
    assert format_tree(node, one_line=True) == "for i in a b; do echo $i; done"


def test_for_without_words():
    text = format_tree(ForNode("i", cmd("x")))
    assert " in" not in text
    assert text.startswith("for i")
    assert text.endswith("done")


def test_case_patterns():
    node = CaseNode("x", [CaseItem(["a", "b"], cmd("y"))])
    text = format_tree(node)
    assert text.startswith("case x")
    assert "a | b)" in text
    assert text.endswith(";;")


def test_function_one_line():
    node = FunctionNode("f", cmd("echo", "hi"))
    assert format_tree(node, one_line=True) == "f(){ echo hi }"


def test_function_multi_line():
    lines = format_tree(FunctionNode("f", cmd("x"))).split("\n")
    assert lines[0] == "f(){"
    assert lines[-1] == "}"