"""Read-only description of a command-line program, used to build help articles."""

from __future__ import annotations

import dataclasses
from typing import Optional, Tuple


class CommandNotFoundError(Exception):
    """Raised when a help subject doesn't match any command."""

    def __init__(self, command_id: str) -> None:
        super().__init__(f"Command {command_id} not found.")
        self.command_id = command_id


@dataclasses.dataclass(frozen=True)
class Flag:
    name: str
    char: Optional[str] = None
    description: Optional[str] = None
    has_value: bool = False
    """Whether the flag takes a value, as in `--file=file`."""
    hidden: bool = False

    @property
    def label(self) -> str:
        """Invocation text, like `-f, --file=file`."""
        out = f"--{self.name}"
        if self.has_value:
            out += f"={self.name}"
        if self.char is not None:
            out = f"-{self.char}, {out}"
        return out


@dataclasses.dataclass(frozen=True)
class Arg:
    name: str
    description: Optional[str] = None
    required: bool = False


@dataclasses.dataclass(frozen=True)
class Command:
    id: str
    description: Optional[str] = None
    aliases: Tuple[str, ...] = ()
    args: Tuple[Arg, ...] = ()
    flags: Tuple[Flag, ...] = ()
    examples: Tuple[str, ...] = ()
    hidden: bool = False

    @property
    def summary(self) -> Optional[str]:
        """First line of the description."""
        if self.description is None:
            return None
        return self.description.strip().split("\n")[0]


@dataclasses.dataclass(frozen=True)
class CliConfig:
    name: str
    bin: Optional[str] = None
    """Executable name. Defaults to `name`."""
    version: str = "0.0.0"
    description: Optional[str] = None
    commands: Tuple[Command, ...] = ()

    def __post_init__(self) -> None:
        if self.bin is None:
            object.__setattr__(self, "bin", self.name)

    def find_command(self, command_id: str, must: bool = False) -> Optional[Command]:
        """Look up a command by id, then by alias.

        Raises:
            CommandNotFoundError: if nothing matches and `must` is set.
        """
        for command in self.commands:
            if command.id == command_id:
                return command
        for command in self.commands:
            if command_id in command.aliases:
                return command
        if must:
            raise CommandNotFoundError(command_id)
        return None
