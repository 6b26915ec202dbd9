"""The ``echo`` builtin."""

from __future__ import annotations

import re
from collections.abc import Iterable

_ESCAPE = re.compile(r"\\(0[0-7]{0,3}|[bcfnrtv\\])")

_SIMPLE = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
}


def _interpret(arg: str) -> tuple[str, bool]:
    """Expand backslash escapes in *arg*.

    Return the expanded text and whether ``\\c`` asked for output to stop.
    """
    pieces: list[str] = []
    pos = 0
    for match in _ESCAPE.finditer(arg):
        pieces.append(arg[pos : match.start()])
        code = match.group(1)
        if code == "c":
            return "".join(pieces), True
        if code.startswith("0"):
            pieces.append(chr(int(code, 8) & 0xFF))
        else:
            pieces.append(_SIMPLE[code])
        pos = match.end()
    pieces.append(arg[pos:])
    return "".join(pieces), False


def format_echo(
    args: Iterable[str], ucb_builtins: bool = False, sysv3: bool = False
) -> str:
    """Return what ``echo`` writes for *args* (the words after the command name).

    In BSD mode (*ucb_builtins* without *sysv3*) a leading ``-n`` suppresses
    the newline and no escapes are interpreted.  Otherwise backslash escapes
    are expanded; with *sysv3* a leading ``-n`` is honoured as well.
    """
    words = list(args)

    if ucb_builtins and not sysv3:
        newline = True
        if words and words[0].startswith("-n"):
            newline = False
            words = words[1:]
        return " ".join(words) + ("\n" if newline else "")

    if not words:
        return "\n"

    no_newline = False
    if sysv3 and len(words) > 1 and words[0].startswith("-n"):
        no_newline = True
        words = words[1:]

    out: list[str] = []
    for index, word in enumerate(words, 1):
        text, stopped = _interpret(word)
        out.append(text)
        if stopped:
            return "".join(out)
        last = index == len(words)
        if not (no_newline and last):
            out.append("\n" if last else " ")
    return "".join(out)