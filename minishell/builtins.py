"""Built-in shell commands: echo, env, pwd and exit."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Sequence, TextIO


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def is_n_option(arg: str | None) -> bool:
    """True for ``-n``, ``-nn``, ``-nnn`` and so on."""
    if not arg or len(arg) < 2 or arg[0] != "-":
        return False
    return all(ch == "n" for ch in arg[1:])


def echo(args: Sequence[str], stream: TextIO | None = None) -> int:
    """Print the arguments after the command name, separated by spaces.

    Leading ``-n`` options suppress the trailing newline.
    """
    words = list(args[1:])
    newline = True
    while words and is_n_option(words[0]):
        newline = False
        words.pop(0)
    target = _out(stream)
    target.write(" ".join(words))
    if newline:
        target.write("\n")
    return 0


def env(entries: Iterable[str] | None, stream: TextIO | None = None) -> int:
    """Print each environment entry on its own line; 1 if there is none."""
    if entries is None:
        return 1
    target = _out(stream)
    for entry in entries:
        target.write(f"{entry}\n")
    return 0


def pwd(stream: TextIO | None = None) -> int:
    """Print the current working directory; 1 if it cannot be found."""
    try:
        cwd = os.getcwd()
    except OSError as error:
        sys.stderr.write(f"Erreur pwd: {error.strerror or error}\n")
        return 1
    _out(stream).write(f"{cwd}\n")
    return 0


def exit_shell(value: int, stream: TextIO | None = None) -> None:
    """Print ``exit`` and leave with the given status."""
    _out(stream).write("exit\n")
    raise SystemExit(value)