import pytest

from minishellpy.expansion import dollar_count, expand_dollar, has_dollar
from minishellpy.tokenizer import DOUBLE_QUOTE, NO_QUOTE, SINGLE_QUOTE

ENV = {"HOME": "/home/user", "USER": "user", "MY_VAR1": "value"}


def test_has_dollar():
    assert has_dollar("a$b")
    assert not has_dollar("plain")


def test_dollar_count():
    assert dollar_count("$a$b") == 2
    assert dollar_count("none") == 0


def test_without_dollar_is_unchanged():
    assert expand_dollar("hello", NO_QUOTE, ENV) == "hello"


def test_simple_reference():
    assert expand_dollar("$HOME", NO_QUOTE, ENV) == ENV["HOME"]


def test_braced_reference():
    assert expand_dollar("${USER}", NO_QUOTE, ENV) == ENV["USER"]


def test_underscore_and_digits_in_name():
    assert expand_dollar("$MY_VAR1", NO_QUOTE, ENV) == ENV["MY_VAR1"]


def test_reference_inside_text():
    assert expand_dollar("a$HOME/b", NO_QUOTE, ENV) == "a" + ENV["HOME"] + "/b"


def test_two_references():
    result = expand_dollar("$USER:$HOME", DOUBLE_QUOTE, ENV)
    assert result == ENV["USER"] + ":" + ENV["HOME"]


def test_unknown_variable_is_empty():
    assert expand_dollar("x$NOPE_NOT_SET", NO_QUOTE, ENV) == "x"


def test_single_quote_suppresses_expansion():
    assert expand_dollar("$HOME", SINGLE_QUOTE, ENV) == "$HOME"


@pytest.mark.parametrize("word", ["$$", "$?", "a$$b", "x$?y $HOME"])
def test_special_references_unchanged(word):
    assert expand_dollar(word, NO_QUOTE, ENV) == word


def test_trailing_dollar_kept():
    assert expand_dollar("cost$", NO_QUOTE, ENV) == "cost$"


def test_escaped_dollar_drops_backslash():
    word = "\\$HOME"
    assert expand_dollar(word, NO_QUOTE, ENV) == word[1:]


def test_default_environment(monkeypatch):
    monkeypatch.setenv("MINISHELLPY_TEST_VAR", "from-env")
    assert expand_dollar("$MINISHELLPY_TEST_VAR", NO_QUOTE) == "from-env"


def test_no_dollar_left_when_all_known():
    result = expand_dollar("$HOME$USER", NO_QUOTE, ENV)
    assert not has_dollar(result)
    assert result == ENV["HOME"] + ENV["USER"]