import os

import pytest

from bourneshkit.cmdhash import CommandHash, CommandKind, check_access
from bourneshkit.hashtable import (
    BUILTIN,
    CDMARK,
    COMMAND,
    DATA_MASK,
    FUNCTION,
    PATH_COMMAND,
    REL_COMMAND,
    TYPE_MASK,
)
from bourneshkit.tree import CommandNode


def _make_exec(path):
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def dirs(tmp_path):
    bin1 = tmp_path / "bin1"
    bin2 = tmp_path / "bin2"
    bin1.mkdir()
    bin2.mkdir()
    _make_exec(bin2 / "tool")
    return bin1, bin2


@pytest.fixture
def hasher(dirs):
    bin1, bin2 = dirs
    return CommandHash(f"{bin1}:{bin2}", {"cd": 2, "echo": 22})


def test_found_in_second_directory(hasher, dirs):
    data = hasher.pathlook("tool", 1, None)
    assert data == COMMAND | 2
    assert CommandKind.of(data) is CommandKind.COMMAND
    assert hasher.resolve("tool", data & DATA_MASK) == f"{dirs[1]}/tool"


def test_cost_counts_directories_searched(hasher):
    hasher.pathlook("tool", 1, None)
    entry = hasher.table.find("tool")
    assert entry.cost == 2
    assert entry.hits == 1


def test_hits_increase_on_later_lookups(hasher):
    hasher.pathlook("tool", 1, None)
    hasher.pathlook("tool", 1, None)
    hasher.pathlook("tool", 0, None)
    assert hasher.table.find("tool").hits == 2


def test_name_with_slash_is_command(hasher):
    assert hasher.pathlook("./anything", 0, None) == COMMAND
    assert hasher.hash_cmd("a/b") == COMMAND


def test_builtin(hasher):
    assert hasher.pathlook("cd", 0, None) == BUILTIN | 2
    assert CommandKind.of(hasher.pathlook("echo", 0, None)) is CommandKind.BUILTIN


def test_not_found(hasher):
    result = hasher.pathlook("missing", 0, None)
    assert result == 1
    assert CommandKind.of(result) is CommandKind.NOTFOUND
    assert hasher.table.find("missing") is None


def test_not_executable(hasher, dirs):
    (dirs[1] / "plain").write_text("data")
    (dirs[1] / "plain").chmod(0o644)
    assert hasher.pathlook("plain", 0, None) == 3


def test_directory_is_not_a_command(hasher, dirs):
    (dirs[0] / "adir").mkdir()
    assert hasher.pathlook("adir", 0, None) == 2


def test_path_assignment_forces_path_command(hasher):
    assert hasher.pathlook("tool", 0, ["PATH=/nowhere"]) == PATH_COMMAND
    assert hasher.pathlook("tool", 0, ["OTHER=1"]) == COMMAND | 2


def test_zaphash_forgets_commands_keeps_builtins(hasher):
    hasher.pathlook("tool", 0, None)
    hasher.pathlook("cd", 0, None)
    hasher.zaphash()
    assert hasher.table.find("tool").data & TYPE_MASK == 0
    assert hasher.table.find("cd").data == BUILTIN | 2
    assert hasher.pathlook("tool", 0, None) == COMMAND | 2


def test_hash_func_and_unhash(hasher):
    hasher.hash_func("myfunc")
    assert hasher.pathlook("myfunc", 0, None) == FUNCTION
    hasher.func_unhash("myfunc")
    assert hasher.table.find("myfunc").data == 0
    hasher.hash_func("cd")
    assert hasher.pathlook("cd", 0, None) == FUNCTION
    hasher.func_unhash("cd")
    assert hasher.table.find("cd").data == BUILTIN | 2


def test_hash_cmd_looks_up_again(hasher, dirs):
    assert hasher.hash_cmd("tool") == COMMAND | 2
    _make_exec(dirs[0] / "tool")
    assert hasher.pathlook("tool", 0, None) == COMMAND | 2
    assert hasher.hash_cmd("tool") == COMMAND | 1


def test_relative_directory_and_cd(tmp_path, dirs, monkeypatch):
    work = tmp_path / "work"
    other = tmp_path / "other"
    work.mkdir()
    other.mkdir()
    _make_exec(work / "local")
    hasher = CommandHash(f"{dirs[0]}:.")
    assert hasher.dotpath == 2
    monkeypatch.chdir(work)
    assert hasher.pathlook("local", 0, None) == REL_COMMAND | 2
    hasher.zapcd()
    assert hasher.table.find("local").data & CDMARK
    monkeypatch.chdir(other)
    assert hasher.pathlook("local", 0, None) == 1
    monkeypatch.chdir(work)
    assert hasher.pathlook("local", 0, None) == REL_COMMAND | 2


def test_set_path_computes_dotpath(hasher):
    hasher.set_path("/usr/bin:/bin:.:/sbin")
    assert hasher.dotpath == 3
    assert hasher.multrel is False
    hasher.set_path(".:/bin:lib")
    assert hasher.dotpath == 1
    assert hasher.multrel is True


def test_findpath_failure_code(hasher):
    assert hasher.findpath("missing", 0) == -1


def test_what_is(hasher, dirs):
    assert hasher.what_is("cd") == ("cd is a shell builtin\n", 0)
    assert hasher.what_is("nope") == ("nope not found\n", 1)
    assert hasher.what_is("tool") == (f"tool is {dirs[1]}/tool\n", 0)
    hasher.pathlook("tool", 0, None)
    assert hasher.what_is("tool") == (f"tool is hashed ({dirs[1]}/tool)\n", 0)


def test_what_is_function(hasher):
    hasher.hash_func("greet")
    hasher.function_bodies["greet"] = CommandNode(args=["echo", "hi"])
    text, status = hasher.what_is("greet")
    assert status == 0
    assert text == "greet is a function\ngreet(){\necho hi\n}\n"


def test_format_table(hasher, dirs):
    assert hasher.format_table() == "hits\tcost\tcommand\n"
    hasher.pathlook("tool", 1, None)
    hasher.pathlook("cd", 1, None)
    lines = hasher.format_table().splitlines()
    assert len(lines) == 2
    assert lines[1] == f"1\t2\t{dirs[1]}/tool"


def test_check_access(tmp_path):
    exe = _make_exec(tmp_path / "run")
    assert check_access(exe, os.X_OK, True) == 0
    assert check_access(tmp_path / "absent", os.X_OK, True) == 1
    assert check_access(tmp_path, os.X_OK, True) == 2
    assert check_access(tmp_path, os.X_OK, False) == 0
    assert check_access(exe, os.R_OK, True) == 0