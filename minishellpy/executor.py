"""Running parsed commands: built-ins inside the shell, others as processes."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import threading
from contextlib import contextmanager
from typing import IO, Iterator, TextIO, Union

from .builtins import cd, echo, env_builtin, export, pwd, unset
from .parser import Command
from .redirection import RedirectionError, Streams, open_redirections, read_heredoc
from .state import ShellState, find_executable, is_builtin

NOT_FOUND_STATUS = 127

_Upstream = Union[None, bytes, IO[bytes]]


def run_builtin(state: ShellState, command: Command, line: str, out: TextIO) -> None:
    """Run the built-in named exactly by the command; other names do nothing."""
    args = command.args
    name = command.name
    if name == "cd":
        cd(state, args, out)
    elif name == "echo":
        echo(state, args, command.quote, line, out)
    elif name == "pwd":
        pwd(state, out)
    elif name == "export":
        export(state, args, out)
    elif name == "unset":
        unset(state, args[1] if len(args) > 1 else None, out)
    elif name == "env":
        env_builtin(state, args, out)


@contextmanager
def _isolated(state: ShellState) -> Iterator[ShellState]:
    """A copy of ``state`` whose changes, including the directory, are dropped."""
    cwd = os.getcwd()
    child = ShellState(env=dict(state.env), exit_code=state.exit_code)
    try:
        yield child
    finally:
        os.chdir(cwd)


def _close(upstream: _Upstream) -> None:
    if upstream is not None and not isinstance(upstream, bytes):
        upstream.close()


def _feed(pipe: IO[bytes], data: bytes) -> None:
    try:
        pipe.write(data)
    except BrokenPipeError:
        pass
    finally:
        try:
            pipe.close()
        except BrokenPipeError:
            pass


def _report(message: str) -> None:
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()


def _builtin_stage(
    state: ShellState,
    command: Command,
    line: str,
    upstream: _Upstream,
    streams: Streams,
    last: bool,
) -> tuple[_Upstream, int]:
    _close(upstream)
    with _isolated(state) as child:
        if last:
            out = streams.stdout or sys.stdout
            run_builtin(child, command, line, out)
            out.flush()
            return None, 0
        buffer = io.StringIO()
        run_builtin(child, command, line, buffer)
        return buffer.getvalue().encode(), 0


def _external_stage(
    state: ShellState,
    command: Command,
    upstream: _Upstream,
    heredoc: str | None,
    streams: Streams,
    last: bool,
    feeders: list[threading.Thread],
) -> tuple[_Upstream, int | subprocess.Popen]:
    empty: _Upstream = None if last else b""
    name = command.name
    if name is None:
        _close(upstream)
        return empty, 0
    path = find_executable(name, state.search_paths())
    if path is None:
        _report(f"minishell: {name}: command not found")
        _close(upstream)
        return empty, NOT_FOUND_STATUS

    data = upstream if isinstance(upstream, bytes) else None
    if upstream is None and heredoc is not None:
        data = heredoc.encode()
    if data is not None:
        stdin = subprocess.PIPE
    elif upstream is not None:
        stdin = upstream
    else:
        stdin = streams.stdin
    stdout = streams.stdout if last else subprocess.PIPE

    try:
        proc = subprocess.Popen(
            command.args, executable=path, env=state.env, stdin=stdin, stdout=stdout
        )
    except OSError as exc:
        _report(f"execve: {exc.strerror}")
        _close(upstream)
        return empty, 1
    _close(upstream)
    if data is not None:
        feeder = threading.Thread(target=_feed, args=(proc.stdin, data), daemon=True)
        feeder.start()
        feeders.append(feeder)
    return (None if last else proc.stdout), proc


def run_pipeline(state: ShellState, commands: list[Command], line: str) -> int:
    """Run ``commands`` connected by pipes and return the last stage's status.

    Built-ins in a pipeline work on a copy of the state. A stage whose first
    redirection is a here-document reads it first and skips its other
    redirections. A stage whose redirection fails is skipped with status 0.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    upstream: _Upstream = None
    results: list[int | subprocess.Popen] = []
    feeders: list[threading.Thread] = []
    last_index = len(commands) - 1
    for index, command in enumerate(commands):
        last = index == last_index
        heredoc = None
        if command.redirections and command.redirections[0][0] == "<<":
            heredoc = read_heredoc(command.redirections[0][1], input)
        streams = Streams()
        if heredoc is None and command.redirections:
            try:
                streams = open_redirections(command.redirections)
            except RedirectionError as err:
                _report(str(err))
                _close(upstream)
                upstream = None if last else b""
                results.append(0)
                continue
        with streams:
            if is_builtin(command.name):
                upstream, result = _builtin_stage(
                    state, command, line, upstream, streams, last
                )
            else:
                upstream, result = _external_stage(
                    state, command, upstream, heredoc, streams, last, feeders
                )
        results.append(result)
    for feeder in feeders:
        feeder.join()
    statuses = [r if isinstance(r, int) else r.wait() for r in results]
    return statuses[-1] if statuses else 0


def dispatch(state: ShellState, commands: list[Command], line: str) -> int:
    """Run a parsed line: a lone built-in in the shell, anything else as a pipeline."""
    if not commands:
        return 0
    first = commands[0]
    if len(commands) > 1 or not is_builtin(first.name):
        return run_pipeline(state, commands, line)
    streams = Streams()
    if first.redirections:
        try:
            streams = open_redirections(first.redirections)
        except RedirectionError as err:
            _report(str(err))
    with streams:
        out = streams.stdout or sys.stdout
        run_builtin(state, first, line, out)
        out.flush()
    return state.exit_code