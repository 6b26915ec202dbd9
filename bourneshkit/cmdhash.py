"""The command hash: remembering where commands were found on PATH."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterable, Mapping
from enum import IntEnum
from typing import Optional, Union

from .hashtable import (
    BUILTIN,
    CDMARK,
    COMMAND,
    DATA_MASK,
    DOT_COMMAND,
    FUNCTION,
    HASHZAP,
    NOTFOUND,
    PATH_COMMAND,
    REL_COMMAND,
    TYPE_MASK,
    Entry,
    HashTable,
)
from .tree import Node, format_tree

_NO_DOT = 10000
_PATHNAME = "PATH"


class CommandKind(IntEnum):
    """The type part of a hash data word."""

    NOTFOUND = NOTFOUND
    BUILTIN = BUILTIN
    FUNCTION = FUNCTION
    COMMAND = COMMAND
    REL_COMMAND = REL_COMMAND
    PATH_COMMAND = PATH_COMMAND

    @classmethod
    def of(cls, data: int) -> "CommandKind":
        """The kind encoded in *data*."""
        return cls(data & TYPE_MASK)


def check_access(
    name: Union[str, "os.PathLike[str]"], mode: int = os.X_OK, regflag: bool = True
) -> int:
    """Check whether *name* may be used with access *mode*.

    Return 0 when it may, 2 when execution was asked for with *regflag*
    and the file is not a regular file, 3 when permission is denied and
    1 when the file cannot be found.
    """
    try:
        st = os.stat(name)
    except OSError as exc:
        return 3 if exc.errno == errno.EACCES else 1
    regular = stat.S_ISREG(st.st_mode)
    if mode == os.X_OK and regflag and not regular:
        return 2
    if os.access(name, mode):
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            if not regular or mode != os.X_OK:
                return 0
            # root may run a file as long as someone has execute permission
            if st.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
                return 0
            return 3
        return 0
    return 3


class CommandHash:
    """Hashed locations of commands, builtins and functions.

    Data words combine a :class:`CommandKind` with, for commands, the
    1-based position of the PATH directory the command was found in.
    """

    def __init__(
        self, path: str, builtins: Union[Mapping[str, int], Iterable[str]] = ()
    ) -> None:
        self.table = HashTable()
        self.function_bodies: dict[str, Optional[Node]] = {}
        if isinstance(builtins, Mapping):
            self._builtins = dict(builtins)
        else:
            self._builtins = {name: i for i, name in enumerate(builtins, 1)}
        self._relative: dict[str, Entry] = {}
        self._cost = 0
        self._path: list[str] = []
        self.dotpath = _NO_DOT
        self.multrel = False
        self.set_path(path)

    # -- PATH handling -------------------------------------------------

    def set_path(self, path: str) -> None:
        """Use *path* (colon separated) for searches and forget hashed positions."""
        self._path = path.split(":")
        self.zaphash()
        self.dotpath = _NO_DOT
        self.multrel = False
        count = 1
        last = len(self._path) - 1
        for i, component in enumerate(self._path):
            if component == "" and i == last:
                break
            if component.startswith("/"):
                count += 1
            elif self.dotpath == _NO_DOT:
                self.dotpath = count
            else:
                self.multrel = True
                return

    def _search_path(self, name: str) -> list[str]:
        return [""] if "/" in name else self._path

    @staticmethod
    def _candidate(component: str, name: str) -> str:
        return f"{component}/{name}" if component else name

    def _builtin(self, name: str) -> int:
        return self._builtins.get(name, 0)

    @staticmethod
    def _sets_path(assignments: Optional[Iterable[str]]) -> bool:
        if not assignments:
            return False
        return any(
            "=" in arg and arg.split("=", 1)[0] == _PATHNAME for arg in assignments
        )

    # -- lookups -------------------------------------------------------

    def findpath(self, name: str, oldpath: int = 0) -> int:
        """Search PATH for an executable *name*.

        Return its 1-based PATH position, or minus the worst
        :func:`check_access` code when it is not found.  A non-zero
        *oldpath* restarts the search at the first relative directory.
        """
        self._cost = 0
        components = self._search_path(name)
        start = 0
        count = 1
        if oldpath:
            count = self.dotpath
            start = count - 1
            if start >= len(components):
                return -1
            if oldpath > self.dotpath:
                self._cost = 1
                candidate = self._candidate(components[start], name)
                if check_access(candidate, os.X_OK, True) == 0:
                    return self.dotpath
                return oldpath
        e_code = 1
        for component in components[start:]:
            self._cost += 1
            ok = check_access(self._candidate(component, name), os.X_OK, True)
            if ok == 0:
                return count
            e_code = max(e_code, ok)
            count += 1
        return -e_code

    def pathlook(
        self, name: str, flg: int = 0, assignments: Optional[Iterable[str]] = None
    ) -> int:
        """Find *name* and return its data word, hashing it when found.

        *flg* counts the lookup as a hit.  *assignments* are the command's
        ``NAME=value`` words; one that sets PATH forces a PATH_COMMAND.
        When the command is not found a small positive error code is
        returned, whose kind is NOTFOUND.
        """
        if "/" in name:
            return COMMAND
        h = self.table.find(name)
        oldpath = 0
        data = 0
        search = True

        if h is not None:
            if h.data & (BUILTIN | FUNCTION):
                if flg:
                    h.hits = (h.hits + 1) & 0xFF
                return h.data
            if self._sets_path(assignments):
                return PATH_COMMAND
            if (h.data & DOT_COMMAND) == DOT_COMMAND:
                if not self.multrel and (h.data & DATA_MASK) > self.dotpath:
                    oldpath = h.data & DATA_MASK
                else:
                    oldpath = self.dotpath
                h.data = 0
                count = self.findpath(name, oldpath)
                search = False
            elif h.data & (COMMAND | REL_COMMAND):
                if flg:
                    h.hits = (h.hits + 1) & 0xFF
                return h.data
            else:
                h.data = 0
                h.cost = 0

        if search:
            index = self._builtin(name)
            if index:
                data = BUILTIN | index
                count = 1
            else:
                if self._sets_path(assignments):
                    return PATH_COMMAND
                count = self.findpath(name, oldpath)

        if count <= 0:
            return -count

        if h is None:
            h = self.table.enter(Entry(key=name, data=data, cost=0))
        if h.data == 0:
            if count < self.dotpath:
                h.data = COMMAND | count
            else:
                h.data = REL_COMMAND | count
                self._relative[name] = h
        h.hits = int(flg) & 0xFF
        h.cost = (h.cost + self._cost) & 0xFF
        return h.data

    # -- invalidation --------------------------------------------------

    def zaphash(self) -> None:
        """Forget where every command was found; builtins and functions stay."""
        for entry in self.table.scan():
            entry.data &= HASHZAP
        self._relative.clear()

    def zapcd(self) -> None:
        """Mark commands found in relative directories for a new search."""
        for entry in self._relative.values():
            entry.data |= CDMARK
        self._relative.clear()

    def hash_func(self, name: str) -> None:
        """Record *name* as a function."""
        h = self.table.find(name)
        if h is not None:
            h.data = FUNCTION
        else:
            self.table.enter(Entry(key=name, data=FUNCTION))

    def func_unhash(self, name: str) -> None:
        """Forget that *name* is a function; a builtin of that name returns."""
        h = self.table.find(name)
        if h is not None and h.data & FUNCTION:
            index = self._builtin(name)
            h.data = BUILTIN | index if index else NOTFOUND

    def hash_cmd(self, name: str) -> int:
        """Look *name* up afresh (the ``hash name`` builtin)."""
        if "/" in name:
            return COMMAND
        h = self.table.find(name)
        if h is not None:
            if h.data & (BUILTIN | FUNCTION):
                return h.data
            if (h.data & REL_COMMAND) == REL_COMMAND:
                self._relative.pop(name, None)
            h.data &= HASHZAP
        return self.pathlook(name, 0, None)

    # -- reporting -----------------------------------------------------

    def resolve(self, name: str, count: int) -> str:
        """The path of *name* in the *count*-th PATH directory."""
        components = self._search_path(name)
        index = max(count, 1) - 1
        component = components[index] if index < len(components) else ""
        return self._candidate(component, name)

    def what_is(self, name: str) -> tuple[str, int]:
        """Describe *name* as ``type`` does; return the text and status 0 or 1."""
        h = self.table.find(name)
        if h is not None:
            hashval = h.data & DATA_MASK
            kind = h.data & TYPE_MASK
            if kind == BUILTIN:
                return f"{name} is a shell builtin\n", 0
            if kind == FUNCTION:
                body = format_tree(self.function_bodies.get(name))
                return f"{name} is a function\n{name}(){{\n{body}\n}}\n", 0
            if kind in (REL_COMMAND, COMMAND):
                if kind == REL_COMMAND and (h.data & DOT_COMMAND) == DOT_COMMAND:
                    found = self.pathlook(name, 0, None)
                    if found & TYPE_MASK == NOTFOUND:
                        return f"{name} not found\n", 1
                    hashval = found & DATA_MASK
                return f"{name} is hashed ({self.resolve(name, hashval)})\n", 0

        if self._builtin(name):
            return f"{name} is a shell builtin\n", 0
        count = self.findpath(name, 0)
        if count > 0:
            return f"{name} is {self.resolve(name, count)}\n", 0
        return f"{name} not found\n", 1

    def format_table(self) -> str:
        """The listing printed by ``hash`` without arguments."""
        lines = ["hits\tcost\tcommand\n"]
        for entry in self.table.scan():
            if entry.data & TYPE_MASK == NOTFOUND:
                continue
            if entry.data & (BUILTIN | FUNCTION):
                continue
            mark = "*" if entry.data & REL_COMMAND else ""
            where = self.resolve(entry.key, entry.data & DATA_MASK)
            lines.append(f"{entry.hits}{mark}\t{entry.cost}\t{where}\n")
        return "".join(lines)