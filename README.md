# minishellpy

A small interactive command shell. It reads one line at a time, splits it
into words, quotes, pipes and redirections, expands `$NAME` variables and
runs either a builtin or a program found on `PATH`.

## Installing

```
pip install .
```

## Running

```
minishellpy
```

The prompt is `minishell$ `. Ctrl-C abandons the current line and shows a
fresh prompt; Ctrl-\ is ignored. End the session with `exit` or Ctrl-D
(which prints `exit`). If Python's `readline` module is available, the
prompt has line editing and in-session history.

## What it understands

- Words separated by spaces. Single quotes keep text literal; double quotes
  allow variable expansion. A quoted part becomes a word of its own.
- A backslash makes a special character literal: space, `|`, `<`, `>`,
  `&`, `;`, `(`, `)`, `$`, quotes, `\`, `*`, `?`, `!`, `#`, `~`, brackets
  and braces.
- `$NAME` and `${NAME}` are replaced by the variable's value, or by nothing
  when it is unset. Words containing `$$` or `$?` are left as they are.
- Pipelines: `ls | grep py | wc -l`. Builtins inside a pipeline work on a
  copy of the shell's state, so `cd` or `export` there has no lasting effect.
- Redirections: `> file`, `>> file` and `< file`. A file that cannot be
  opened is reported as `minishell: FILE: open error`.
- Here-documents: when the first redirection of a pipeline stage is
  `<< END`, lines are read at a `> ` prompt until one equals `END`, and
  they become that stage's input.
- A line that starts with `|`, has unbalanced quotes, ends in a backslash,
  or has a redirection with no target prints `Syntax Error` and sets the
  status to 258.
- A command that is not found is reported as
  `minishell: NAME: command not found`.

## Builtins

| Command  | Effect |
|----------|--------|
| `echo`   | print its arguments; a first argument starting with `-n` suppresses the newline; `$$` prints the shell's process id and `$?` the recorded status (then resets it to 0), except in single quotes |
| `cd`     | change directory; no argument goes to `HOME`, `-` goes to `OLDPWD` and prints it; updates `PWD` and `OLDPWD` |
| `pwd`    | print the working directory |
| `export` | `NAME=VALUE` sets a variable, a bare `NAME` adds it with an empty value; with no argument lists every variable sorted as `declare -x NAME=VALUE` |
| `unset`  | remove a variable; reports one that is not set |
| `env`    | print the environment as `NAME=VALUE` lines |
| `exit`   | print the recorded status and leave the shell |

`echo` separates its arguments with spaces only when the input line holds
more than one space.

## What it does not do

- `exit` is recognised only when the line is exactly `exit`; it takes no
  status argument.
- The exit status of external programs is not recorded, so `$?` reflects
  only `cd`, `pwd` and syntax errors.
- There is no `;`, `&&`, `||`, background jobs, subshells, globbing,
  `~` expansion, or plain `NAME=VALUE` assignment; use `export`.
- History is not saved between sessions.

## Using it as a library

The stages can be used on their own:

```python
from minishellpy.tokenizer import tokenize, syntax_ok
from minishellpy.parser import parse

line = "cat notes.txt | grep todo > out.txt"
tokens = tokenize(line)
assert syntax_ok(tokens, line)
commands = parse(tokens, {"HOME": "/home/user"})
# commands[1].args == ["grep", "todo"]
# commands[1].redirections == [(">", "out.txt")]
```

Other pieces:

- `minishellpy.quoting`: `quotes_balanced`, `unescape`, `char_is_escapable`.
- `minishellpy.expansion`: `expand_dollar(text, quote, env)`, `has_dollar`,
  `dollar_count`.
- `minishellpy.state`: `ShellState` (environment and status),
  `find_executable`, `split_path`, `is_builtin`.
- `minishellpy.redirection`: `open_redirections`, `read_heredoc`,
  `Streams`, `RedirectionError`.
- `minishellpy.executor`: `dispatch`, `run_pipeline`, `run_builtin`.
- `minishellpy.textutil`: `atoi`, `split_words`, `iter_lines`.

`minishellpy.shell.handle_line(state, line)` runs one line against a
`ShellState` and raises `minishellpy.builtins.ShellExit` when the line asks
the shell to stop; the interactive loop is built on it.

## Running the tests

```
pip install .[test]
pytest
```