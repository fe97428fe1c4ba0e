"""Render help articles for a terminal screen or as Markdown."""

from __future__ import annotations

from typing import IO, Optional, Sequence, Tuple

from typing_extensions import assert_never

from . import _fmtlib, _layout, _strings, _templating
from ._articles import Article, HelpOptions, PairList, Prose, ProseLines, SectionBody
from ._builders import CommandHelp, RootHelp
from ._config import CliConfig, Command

MARKDOWN_WIDTH = 100
"""Markdown is laid out for a fixed width, so generated docs are reproducible."""

MARGIN = 2


def get_help_subject(argv: Sequence[str]) -> Optional[str]:
    """First argument that isn't a flag or `help`. Nothing after `--` counts."""
    for arg in argv:
        if arg == "--":
            return None
        if arg.startswith("-") or arg == "help":
            continue
        return arg
    return None


def _prose_text(body: Prose | ProseLines) -> str:
    if isinstance(body, Prose):
        return body.text
    return "\n".join(body.lines)


class Help:
    def __init__(self, config: CliConfig, opts: Optional[HelpOptions] = None) -> None:
        self.config = config
        self.opts = opts if opts is not None else HelpOptions()

    def show_help(self, argv: Sequence[str], file: Optional[IO[str]] = None) -> None:
        """Print help for the subject named in `argv`, or root help if there is none.

        Raises:
            CommandNotFoundError: if the subject doesn't match a command.
        """
        subject = get_help_subject(argv)
        if subject is None:
            print(self.root(), file=file)
        else:
            command = self.config.find_command(subject, must=True)
            assert command is not None
            print(self.command(command), file=file)
        if self.opts.format == "screen":
            print(file=file)

    def root(self) -> str:
        article = RootHelp(self.config, self.opts).root()
        return self.render(article)

    def command(self, command: Command) -> str:
        article = CommandHelp(self.config, self.opts).command(command)
        return self.render(article)

    def render(self, article: Article) -> str:
        if self.opts.format == "markdown":
            return self.render_markdown(article)
        return self.render_screen(article)

    def render_markdown(self, article: Article) -> str:
        max_width = MARKDOWN_WIDTH
        title = _strings.strip_ansi_sequences(self.render_template(article.title))
        parts = [title, "-" * _strings.display_width(title), ""]

        for section in article.sections:
            body = "\n" + self._render_markdown_body(section.body, max_width - MARGIN)
            if section.type == "code":
                body = f"\n```sh-session{body}\n```"
            heading = _strings.strip_ansi_sequences(section.heading).capitalize()
            parts.append(f"**{heading}**\n{body}\n")
        return "\n".join(parts).strip()

    def _render_markdown_body(self, body: SectionBody, max_width: int) -> str:
        if body.is_empty():
            return ""
        if isinstance(body, PairList):
            rendered = self.render_list(body.rows, max_width, strip_ansi=True)
            return f"```\n{rendered}\n```"
        if isinstance(body, (Prose, ProseLines)):
            text = _strings.strip_ansi_sequences(
                self.render_template(_prose_text(body))
            )
            return _fmtlib.wrap(text, max_width, trim=False)
        assert_never(body)

    def render_screen(self, article: Article) -> str:
        max_width = _fmtlib.terminal_width()
        parts = [self.render_template(article.title)]

        for section in article.sections:
            body = self._render_screen_body(section.body, max_width - MARGIN)
            heading = _fmtlib.style(section.heading.upper(), "bold")
            parts.append(
                "\n".join(p for p in (heading, _strings.indent(body, MARGIN)) if p)
            )
        return "\n\n".join(p for p in parts if p)

    def _render_screen_body(self, body: SectionBody, max_width: int) -> str:
        if body.is_empty():
            return ""
        if isinstance(body, PairList):
            return self.render_list(body.rows, max_width)
        if isinstance(body, (Prose, ProseLines)):
            text = self.render_template(_prose_text(body))
            return _fmtlib.wrap(text, max_width, trim=False)
        assert_never(body)

    def render_template(self, template: Optional[str]) -> str:
        return _templating.render_template(template, {"config": self.config})

    def render_list(
        self,
        rows: Sequence[Tuple[Optional[str], Optional[str]]],
        max_width: int,
        multiline: bool = False,
        strip_ansi: bool = False,
    ) -> str:
        return _layout.render_list(
            rows,
            max_width,
            multiline=multiline,
            strip_ansi=strip_ansi,
            substitute=self.render_template,
        )
