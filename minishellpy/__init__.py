"""A small interactive command shell with pipes, redirections, quoting and builtins."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "executor",
    "expansion",
    "parser",
    "quoting",
    "redirection",
    "shell",
    "state",
    "textutil",
    "tokenizer",
]