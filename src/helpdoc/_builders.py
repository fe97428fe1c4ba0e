"""Build help articles from a `CliConfig`.

Builders decide what goes into an article; layout is left to the renderer.
Strings may contain `{{config.*}}` placeholders, which are substituted at render
time.
"""

from __future__ import annotations

from typing import List, Optional

from ._articles import (
    Article,
    HelpOptions,
    PairList,
    Prose,
    ProseLines,
    Section,
)
from ._config import CliConfig, Command


class RootHelp:
    def __init__(self, config: CliConfig, opts: Optional[HelpOptions] = None) -> None:
        self.config = config
        self.opts = opts if opts is not None else HelpOptions()

    def root(self) -> Article:
        sections = [
            Section("version", Prose("{{config.name}}/{{config.version}}")),
            Section("usage", Prose("$ {{config.bin}} [COMMAND]")),
        ]
        commands = sorted(
            (c for c in self.config.commands if self.opts.all or not c.hidden),
            key=lambda c: c.id,
        )
        if len(commands) > 0:
            sections.append(
                Section(
                    "commands",
                    PairList(tuple((c.id, c.summary) for c in commands)),
                )
            )
        return Article(title=self.config.description, sections=tuple(sections))


class CommandHelp:
    def __init__(self, config: CliConfig, opts: Optional[HelpOptions] = None) -> None:
        self.config = config
        self.opts = opts if opts is not None else HelpOptions()

    def command(self, command: Command) -> Article:
        flags = [f for f in command.flags if self.opts.all or not f.hidden]

        sections: List[Section] = [Section("usage", Prose(self.usage(command)))]
        if len(command.args) > 0:
            rows = tuple((arg.name.upper(), arg.description) for arg in command.args)
            sections.append(Section("arguments", PairList(rows)))
        if len(flags) > 0:
            sections.append(
                Section(
                    "options",
                    PairList(tuple((flag.label, flag.description) for flag in flags)),
                )
            )

        description = self.description(command)
        if len(description) > 0:
            sections.append(Section("description", ProseLines(tuple(description))))
        if len(command.aliases) > 0:
            sections.append(
                Section(
                    "aliases",
                    ProseLines(
                        tuple(f"$ {{{{config.bin}}}} {a}" for a in command.aliases)
                    ),
                    type="code",
                )
            )
        if len(command.examples) > 0:
            sections.append(
                Section("examples", ProseLines(command.examples), type="code")
            )
        return Article(title=command.summary, sections=tuple(sections))

    def usage(self, command: Command) -> str:
        parts = ["$ {{config.bin}}", command.id]
        for arg in command.args:
            parts.append(arg.name.upper() if arg.required else f"[{arg.name.upper()}]")
        if any(self.opts.all or not f.hidden for f in command.flags):
            parts.append("[OPTIONS]")
        return " ".join(parts)

    def description(self, command: Command) -> List[str]:
        """Description lines after the summary, without leading blank lines."""
        if command.description is None:
            return []
        lines = command.description.strip().split("\n")[1:]
        while len(lines) > 0 and lines[0].strip() == "":
            lines.pop(0)
        return lines
