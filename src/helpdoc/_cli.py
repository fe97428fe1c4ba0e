"""The `helpdoc` command-line entry point."""

from __future__ import annotations

import pathlib
import sys
from typing import Literal, Tuple

import termcolor
import tyro

from ._articles import HelpOptions
from ._config import CommandNotFoundError
from ._help import Help
from ._serialization import load_config


def main(
    subject: tyro.conf.Positional[Tuple[str, ...]] = (),
    config: pathlib.Path = pathlib.Path("helpdoc.yml"),
    format: Literal["screen", "markdown", "man"] = "screen",
    all: bool = False,
) -> None:
    """Render help for a command-line program described in a YAML file.

    Args:
        subject: Command to show help for. Root help is shown when omitted.
        config: YAML file describing the program and its commands.
        format: Output format.
        all: Include hidden commands and flags.
    """
    renderer = Help(load_config(config), HelpOptions(format=format, all=all))
    try:
        renderer.show_help(subject)
    except CommandNotFoundError as e:
        print(termcolor.colored(str(e), "red"), file=sys.stderr)
        sys.exit(1)


def entrypoint() -> None:
    tyro.cli(main)
