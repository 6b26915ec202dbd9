"""File name generation: expanding shell patterns against the file system."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence

from .gmatch import gmatch

_ESCAPED = re.compile(r"\\(.)", re.DOTALL)


def _component_has_meta(component: str) -> bool:
    """True if one path component holds ``*``, ``?`` or a closed ``[...]``."""
    open_bracket = False
    chars = iter(component)
    for c in chars:
        if c == "\\":
            next(chars, None)
        elif c == "[":
            open_bracket = True
        elif c == "]":
            if open_bracket:
                return True
        elif c in "?*":
            return True
    return False


def has_metachars(pattern: str) -> bool:
    """True if *pattern* contains unquoted pattern characters.

    ``*`` and ``?`` always count; ``]`` counts only after a ``[`` in the
    same path component.  A backslash quotes the character after it.
    """
    return any(_component_has_meta(part) for part in pattern.split("/"))


def _trim(text: str) -> str:
    """Remove backslash quoting."""
    return _ESCAPED.sub(r"\1", text)


def _join(base: str | None, parts: Sequence[str]) -> str | None:
    if base is None:
        if not parts:
            return None
        return "/".join(parts) or "/"
    if not parts:
        return base
    if base == "/":
        return "/" + "/".join(parts)
    return "/".join([base, *parts])


def _child(directory: str | None, name: str) -> str:
    if directory is None:
        return name
    if directory == "/":
        return "/" + name
    return f"{directory}/{name}"


def _entries(directory: str | None, cwd: str | None) -> list[str]:
    where = directory if directory is not None else "."
    if cwd is not None and not os.path.isabs(where):
        where = os.path.join(cwd, where)
    try:
        names = os.listdir(where)
    except OSError:
        return []
    return [".", "..", *names]


def _expand(
    base: str | None, components: list[str], top: bool, cwd: str | None
) -> Iterator[str]:
    index = next(
        (i for i, part in enumerate(components) if _component_has_meta(part)), None
    )
    if index is None:
        if top:
            return
        # Below the first match, the last component must still name an entry.
        index = len(components) - 1
    directory = _join(base, [_trim(part) for part in components[:index]])
    pattern = components[index]
    rest = components[index + 1 :]
    for name in _entries(directory, cwd):
        if name.startswith(".") and not pattern.startswith("."):
            continue
        if not gmatch(name, pattern):
            continue
        path = _child(directory, name)
        if rest:
            yield from _expand(path, rest, False, cwd)
        else:
            yield path


def expand(pattern: str, cwd: str | os.PathLike[str] | None = None) -> list[str]:
    """Return the paths that *pattern* matches, sorted.

    Relative patterns are looked up under *cwd* (the current directory by
    default) and returned relative.  A pattern without metacharacters, or
    one that matches nothing, gives an empty list.  Names starting with
    ``.`` match only a pattern component that itself starts with ``.``.
    """
    base_dir = os.fspath(cwd) if cwd is not None else None
    return sorted(_expand(None, pattern.split("/"), True, base_dir))