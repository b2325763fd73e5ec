import pytest

from minishellpy.redirection import (
    RedirectionError,
    Streams,
    open_redirections,
    read_heredoc,
)


def _reader(lines):
    remaining = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(remaining, None)

    read.prompts = prompts
    return read


def test_heredoc_collects_until_delimiter():
    reader = _reader(["first", "second", "EOF", "after"])
    assert read_heredoc("EOF", reader) == "first\nsecond\n"


def test_heredoc_uses_prompt_and_may_be_empty():
    reader = _reader(["EOF"])
    assert read_heredoc("EOF", reader) == ""
    assert reader.prompts == ["> "]


def test_heredoc_end_of_input_returns_none():
    assert read_heredoc("EOF", _reader(["only line"])) is None


def test_heredoc_eoferror_returns_none():
    def reader(prompt):
        raise EOFError

    assert read_heredoc("EOF", reader) is None


def test_output_truncates(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content")
    with open_redirections([(">", str(target))]) as streams:
        assert streams.stdin is None
        streams.stdout.write("new\n")
    assert target.read_text() == "new\n"


def test_output_appends(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old\n")
    with open_redirections([(">>", str(target))]) as streams:
        streams.stdout.write("more\n")
    assert target.read_text() == "old\nmore\n"


def test_input_is_readable(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("data\n")
    with open_redirections([("<", str(source))]) as streams:
        assert streams.stdout is None
        assert streams.stdin.read() == "data\n"


def test_created_file_has_no_exec_bits(tmp_path):
    target = tmp_path / "created.txt"
    with open_redirections([(">", str(target))]):
        pass
    assert target.exists()
    assert target.stat().st_mode & 0o111 == 0


def test_missing_input_raises(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(RedirectionError) as info:
        open_redirections([("<", str(missing))])
    assert str(info.value) == f"minishell: {missing}: open error"
    assert info.value.target == str(missing)


def test_last_output_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    with open_redirections([(">", str(first)), (">", str(second))]) as streams:
        streams.stdout.write("x")
    assert first.read_text() == ""
    assert second.read_text() == "x"


def test_heredoc_operator_is_ignored():
    streams = open_redirections([("<<", "END")])
    assert streams == Streams()


def test_streams_close_on_exit(tmp_path):
    streams = open_redirections([(">", str(tmp_path / "f"))])
    with streams:
        assert not streams.stdout.closed
    assert streams.stdout.closed


def test_failure_keeps_earlier_output_file(tmp_path):
    created = tmp_path / "created"
    with pytest.raises(RedirectionError):
        open_redirections([(">", str(created)), ("<", str(tmp_path / "missing"))])
    assert created.exists()