"""Shell pattern matching for file name generation and ``case``."""

from __future__ import annotations


def _at(text: str, i: int) -> str:
    return text[i] if i < len(text) else ""


def _bracket(scc: str, p: str, pi: int) -> int | None:
    """Match *scc* against a bracket expression starting at ``p[pi]``.

    Return the index just past the closing bracket on success, else None.
    """
    excl = _at(p, pi) == "!"
    if excl:
        pi += 1
    ok = False
    lc: str | None = None
    c = _at(p, pi)
    pi += 1
    bp = pi
    while c != "":
        if c == "]" and pi > bp:
            return pi if ok != excl else None
        if c == "-" and pi > bp and _at(p, pi) != "]":
            if _at(p, pi) == "\\":
                pi += 1
            c = _at(p, pi)
            pi += 1
            if c == "":
                break
            if lc is not None and lc <= scc <= c:
                ok = True
        else:
            if c == "\\":
                c = _at(p, pi)
                pi += 1
                if c == "":
                    break
            lc = c
            if scc == c:
                ok = True
        c = _at(p, pi)
        pi += 1
    return None


def _match(s: str, si: int, p: str, pi: int) -> bool:
    while True:
        start = si
        scc = _at(s, si)
        si += 1
        c = _at(p, pi)
        pi += 1

        if c == "":
            return scc == ""
        if c == "*":
            if pi >= len(p):
                return True
            return any(_match(s, k, p, pi) for k in range(start, len(s)))
        if c == "[":
            if scc == "":
                return False
            after = _bracket(scc, p, pi)
            if after is None:
                return False
            pi = after
            continue
        if c == "\\":
            c = _at(p, pi)
            pi += 1
            if c == "":
                return False
        if c != "?" and c != scc:
            return False
        if scc == "":
            return False


def gmatch(s: str, p: str) -> bool:
    """Return True if string *s* matches shell pattern *p*.

    ``*`` matches any string, ``?`` any single character, ``[...]`` a
    character class with ``a-z`` ranges and ``!`` negation, and a
    backslash quotes the next character.
    """
    return _match(s, 0, p, 0)