import os
import stat

import pytest

from minishellpy.state import ShellState, find_executable, is_builtin, split_path


def test_split_path_drops_empty_entries():
    assert split_path({"PATH": "/bin::/usr/bin:"}) == ["/bin", "/usr/bin"]


def test_split_path_without_path_is_empty():
    assert split_path({"HOME": "/home/x"}) == []


def test_search_paths_uses_state_env():
    state = ShellState(env={"PATH": "/a:/b"})
    assert state.search_paths() == ["/a", "/b"]


def test_default_state_copies_process_environment():
    state = ShellState()
    assert state.env == dict(os.environ)
    assert state.env is not os.environ
    assert state.exit_code == 0


def test_find_executable_returns_first_executable(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    plain = first / "tool"
    plain.write_text("data")
    plain.chmod(stat.S_IRUSR | stat.S_IWUSR)
    runnable = second / "tool"
    runnable.write_text("#!/bin/sh\n")
    runnable.chmod(stat.S_IRWXU)
    found = find_executable("tool", [str(first), str(second)])
    assert found == f"{second}/tool"


def test_find_executable_missing_is_none(tmp_path):
    assert find_executable("no-such-tool", [str(tmp_path)]) is None


def test_find_executable_with_slash_is_unchanged(tmp_path):
    assert find_executable("./whatever", [str(tmp_path)]) == "./whatever"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("cd", True),
        ("echo", True),
        ("pwd", True),
        ("export", True),
        ("unset", True),
        ("env", True),
        ("echoo", True),
        ("ls", False),
        ("exit", False),
        ("", False),
        (None, False),
    ],
)
def test_is_builtin(name, expected):
    assert is_builtin(name) is expected