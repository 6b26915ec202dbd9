"""Option letter parsing in the manner of getopt(3)."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


class GetOpt:
    """Step through the options of *argv* as described by *optstring*.

    ``optind`` is the index of the next argument to examine, ``optarg``
    the argument of the last option and ``optopt`` the last option letter.
    """

    def __init__(
        self,
        argv: Sequence[str],
        optstring: str,
        opterr: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.argv = list(argv)
        self.optstring = optstring
        self.opterr = opterr
        self.stream = stream
        self.optind = 1
        self.optarg: str | None = None
        self.optopt: str | None = None
        self._sp = 1

    def _error(self, template: str, c: str) -> None:
        if self.opterr and not self.optstring.startswith(":"):
            stream = self.stream if self.stream is not None else sys.stderr
            name = self.argv[0] if self.argv else ""
            stream.write(template % (name, c))

    def _find(self, c: str) -> int | None:
        if c == ":":
            return None
        index = self.optstring.find(c)
        return None if index < 0 else index

    def next(self) -> str | None:
        """Return the next option letter, ``"?"`` or ``":"`` on error, or None at the end."""
        argv = self.argv
        if self._sp == 1:
            if (
                self.optind >= len(argv)
                or not argv[self.optind].startswith("-")
                or argv[self.optind] == "-"
            ):
                return None
            if argv[self.optind] == "--":
                self.optind += 1
                return None

        arg = argv[self.optind]
        c = arg[self._sp]
        self.optopt = c
        self.optarg = None
        index = self._find(c)
        if index is None:
            self._error("%s: illegal option -- %s\n", c)
            self._sp += 1
            if self._sp >= len(arg):
                self.optind += 1
                self._sp = 1
            return "?"

        if self.optstring[index + 1 : index + 2] == ":":
            if self._sp + 1 < len(arg):
                self.optarg = arg[self._sp + 1 :]
                self.optind += 1
            else:
                self.optind += 1
                if self.optind >= len(argv):
                    self._error("%s: option requires an argument -- %s\n", c)
                    self._sp = 1
                    self.optarg = None
                    return ":" if self.optstring.startswith(":") else "?"
                self.optarg = argv[self.optind]
                self.optind += 1
            self._sp = 1
        else:
            self._sp += 1
            if self._sp >= len(arg):
                self._sp = 1
                self.optind += 1
            self.optarg = None
        return c

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(option, optarg)`` pairs until the options end."""
        while (opt := self.next()) is not None:
            yield opt, self.optarg