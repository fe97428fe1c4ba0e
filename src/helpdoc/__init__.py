"""Render help articles for terminals and Markdown documents."""

__version__ = "0.1.0"


from ._articles import Article as Article
from ._articles import HelpOptions as HelpOptions
from ._articles import PairList as PairList
from ._articles import Prose as Prose
from ._articles import ProseLines as ProseLines
from ._articles import Section as Section
from ._articles import SectionBody as SectionBody
from ._articles import section_body_from_raw as section_body_from_raw
from ._builders import CommandHelp as CommandHelp
from ._builders import RootHelp as RootHelp
from ._config import Arg as Arg
from ._config import CliConfig as CliConfig
from ._config import Command as Command
from ._config import CommandNotFoundError as CommandNotFoundError
from ._config import Flag as Flag
from ._fmtlib import wrap as wrap
from ._help import Help as Help
from ._help import get_help_subject as get_help_subject
from ._layout import layout_compact as layout_compact
from ._layout import layout_stacked as layout_stacked
from ._layout import render_list as render_list
from ._serialization import config_from_dict as config_from_dict
from ._serialization import load_config as load_config
from ._settings import _experimental_options as _experimental_options
from ._strings import display_width as display_width
from ._strings import max_line_width as max_line_width
from ._templating import render_template as render_template
from ._warnings import HelpdocWarning as HelpdocWarning
from ._warnings import UnknownPlaceholderWarning as UnknownPlaceholderWarning
