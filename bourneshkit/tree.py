"""Parsed command trees and their printing as shell text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ListKind(Enum):
    """How the two sides of a list node are joined."""

    PIPE = 0x20
    SEQUENCE = 0x30
    AND = 0x80
    OR = 0x90


@dataclass
class IONode:
    """One redirection: descriptor *fd* and target *name*."""

    fd: int
    name: str
    doc: bool = False
    put: bool = False
    append: bool = False
    move: bool = False
    rdwr: bool = False
    strip: bool = False

    def operator(self) -> str:
        """The redirection operator as written in shell text."""
        if self.doc:
            return "<<"
        if self.move:
            return ">&" if self.put else "<&"
        if not self.put:
            return "<"
        if self.append:
            return ">>"
        return ">"


@dataclass
class CommandNode:
    """A simple command with its arguments, assignments and redirections."""

    args: list[str] = field(default_factory=list)
    assignments: list[str] = field(default_factory=list)
    io: list[IONode] = field(default_factory=list)


@dataclass
class ForkNode:
    """A command run in a child, possibly in the background or in a pipe."""

    tree: Optional["Node"]
    io: list[IONode] = field(default_factory=list)
    background: bool = False
    pipe_in: bool = False
    pipe_out: bool = False


@dataclass
class ParenNode:
    """A parenthesised subshell."""

    tree: Optional["Node"]


@dataclass
class ListNode:
    """Two commands joined by ``;``, ``|``, ``&&`` or ``||``."""

    kind: ListKind
    left: "Node"
    right: "Node"


@dataclass
class IfNode:
    """``if ... then ... else ... fi``."""

    condition: Optional["Node"]
    then_part: Optional["Node"]
    else_part: Optional["Node"] = None


@dataclass
class LoopNode:
    """``while`` or ``until`` loop."""

    condition: Optional["Node"]
    body: Optional["Node"]
    until: bool = False


@dataclass
class ForNode:
    """``for name [in words] do ... done``; *words* is None without ``in``."""

    name: str
    body: Optional["Node"]
    words: Optional[list[str]] = None


@dataclass
class CaseItem:
    """One arm of a ``case``: its patterns and command."""

    patterns: list[str]
    body: Optional["Node"]


@dataclass
class CaseNode:
    """``case word in ...``."""

    word: str
    items: list[CaseItem] = field(default_factory=list)


@dataclass
class FunctionNode:
    """A function definition."""

    name: str
    body: Optional["Node"]


Node = Union[
    CommandNode,
    ForkNode,
    ParenNode,
    ListNode,
    IfNode,
    LoopNode,
    ForNode,
    CaseNode,
    FunctionNode,
]

_SEPARATORS = {
    ListKind.PIPE: " | ",
    ListKind.AND: " && ",
    ListKind.OR: " || ",
}


def format_args(args: Iterable[str]) -> str:
    """Words separated by single spaces."""
    return " ".join(args)


def format_io(ionodes: Iterable[IONode]) -> str:
    """Redirections, each preceded by a space; ones without a name are skipped."""
    return "".join(
        f" {io.fd & 0o17}{io.operator()}{io.name}" for io in ionodes if io.name
    )


def _emit(node: Optional[Node], begin: str, end: str) -> Iterator[str]:
    if node is None:
        return
    match node:
        case FunctionNode():
            yield node.name
            yield "(){"
            yield begin
            yield from _emit(node.body, begin, end)
            yield begin
            yield "}"
        case CommandNode():
            if node.assignments:
                yield format_args(node.assignments)
                yield " "
            yield format_args(node.args)
            yield format_io(node.io)
        case ForkNode():
            yield from _emit(node.tree, begin, end)
            yield format_io(node.io)
            if node.background:
                yield " &"
        case ParenNode():
            yield "("
            yield from _emit(node.tree, begin, end)
            yield ")"
        case ListNode():
            yield from _emit(node.left, begin, end)
            yield _SEPARATORS.get(node.kind, end)
            yield from _emit(node.right, begin, end)
        case ForNode():
            yield "for "
            yield node.name
            if node.words is not None:
                yield " in"
                for word in node.words:
                    yield " "
                    yield word
            yield end
            yield "do"
            yield begin
            yield from _emit(node.body, begin, end)
            yield end
            yield "done"
        case LoopNode():
            yield "until " if node.until else "while "
            yield from _emit(node.condition, begin, end)
            yield end
            yield "do"
            yield begin
            yield from _emit(node.body, begin, end)
            yield end
            yield "done"
        case IfNode():
            yield "if "
            yield from _emit(node.condition, begin, end)
            yield end
            yield "then"
            yield end
            yield from _emit(node.then_part, begin, end)
            if node.else_part is not None:
                yield end
                yield "else"
                yield end
                yield from _emit(node.else_part, begin, end)
            yield end
            yield "fi"
        case CaseNode():
            yield "case "
            yield node.word
            for item in node.items:
                yield " | ".join(item.patterns)
                yield ")"
                yield from _emit(item.body, begin, end)
                yield ";;"


def format_tree(node: Optional[Node], one_line: bool = False) -> str:
    """Render *node* as shell text, on one line or one command per line."""
    if one_line:
        begin, end = " ", "; "
    else:
        begin, end = "\n", "\n"
    return "".join(_emit(node, begin, end))