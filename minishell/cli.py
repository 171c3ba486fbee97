"""Command entry point: show the environment and a few common variables."""

from __future__ import annotations

import os
from typing import Sequence

from minishell.builtins import env
from minishell.environment import Environment
from minishell.printf import printf


def main(argv: Sequence[str] | None = None) -> int:
    """Print a copy of the environment, then HOME, USER and SHELL."""
    del argv
    environment = Environment.from_mapping(os.environ)
    env(environment)
    printf("\n\n\n HOME = %s\n", os.environ.get("HOME"))
    printf("\n USER = %s\n", os.environ.get("USER"))
    printf("\n SHELL = %s\n", os.environ.get("SHELL"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())