# bourneshkit

Pieces of a traditional Bourne shell as plain Python objects. You can use
them in your own interpreters, tools and tests.

## What is inside

- `bourneshkit.gmatch.gmatch(s, p)`: shell pattern matching with `*`, `?`,
  `[...]`, `[!...]`, ranges and backslash escapes.
- `bourneshkit.expand`: file name generation. `expand(pattern, cwd)`
  returns the sorted paths that a pattern matches. It returns an empty list
  when the pattern has no metacharacters or matches nothing.
  `has_metachars(pattern)` tells whether a pattern holds unquoted pattern
  characters.
- `bourneshkit.getopt.GetOpt`: the classic `getopt` state machine, with
  `optind`, `optarg` and `optopt`. Call `next()` one step at a time, or
  iterate it to get `(option, optarg)` pairs.
- `bourneshkit.echo.format_echo(args, ucb_builtins, sysv3)`: the text the
  `echo` builtin writes. It covers System V escapes (`\b`, `\c`, `\f`,
  `\n`, `\r`, `\t`, `\v`, `\\`, `\0nnn`) and the BSD-style leading `-n`.
- `bourneshkit.chartype`: the shell's character classes (`is_space`,
  `is_letter`, `is_alphanum`, `is_dipchar`, `is_dolchar`, ...). Each takes a
  character or a character code.
- `bourneshkit.tree`: dataclasses for command trees (`CommandNode`,
  `ForkNode`, `ParenNode`, `ListNode` with `ListKind`, `IfNode`, `LoopNode`,
  `ForNode`, `CaseNode`/`CaseItem`, `FunctionNode`, `IONode`). It also has
  `format_tree`, `format_args` and `format_io`, which print trees back as
  shell text.
- `bourneshkit.hashtable`: `HashTable`, the 64-bucket table of `Entry`
  objects, plus the `crunch` and `bucket_index` hash functions.
- `bourneshkit.cmdhash`: `CommandHash`, the remembered-command table behind
  `hash` and `type`. It provides `pathlook`, `findpath`, `hash_cmd`,
  `hash_func`, `func_unhash`, `zaphash`, `zapcd`, `what_is`, `resolve` and
  `format_table`. The module also has `CommandKind` and `check_access`.

## Installing

```
pip install .
```

## Examples

```python
from bourneshkit.gmatch import gmatch

gmatch("main.c", "*.[ch]")      # True
gmatch("Makefile", "[!A-Z]*")   # False
```

```python
from bourneshkit.getopt import GetOpt

for opt, arg in GetOpt(["prog", "-a", "-o", "out", "file"], "ao:"):
    print(opt, arg)
# a None
# o out
```

```python
from bourneshkit.echo import format_echo

format_echo(["hello\\tworld"], ucb_builtins=False, sysv3=False)
# 'hello\tworld\n'
```

```python
from bourneshkit.tree import CommandNode, ListKind, ListNode, format_tree

format_tree(ListNode(ListKind.AND, CommandNode(["true"]), CommandNode(["echo", "ok"])))
# 'true && echo ok'
```

```python
from bourneshkit.cmdhash import CommandHash

table = CommandHash("/bin:/usr/bin", ["cd", "echo"])
table.what_is("cd")   # ('cd is a shell builtin\n', 0)
```

## What it does not do

This is not a shell you can run. There is no command, no lexer or parser
that builds command trees from text, and no executor. Trees have to be
built by hand. Nothing here handles the shell's option flags or positional
parameters, installs signal traps, or runs commands.

## Running the tests

```
pip install .[test]
pytest
```