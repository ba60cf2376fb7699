"""Help text wrapping and parsed-argument helpers for command line tools."""

from .arguments import (
    apply_boolean_off_switch,
    get_flag,
    keep_last_of_duplicates,
    last_of_mutually_exclusive,
)
from .errors import ConfigError, HelpGroupError, OptionHelpError
from .help_group import HelpEntry, generate_help_group
from .models import ParserOptions
from .parser_help import format_parser_help, help_group_from_parser
from .wrapping import wrap_line, wrap_text

__all__ = [
    "ConfigError",
    "HelpEntry",
    "HelpGroupError",
    "OptionHelpError",
    "ParserOptions",
    "apply_boolean_off_switch",
    "format_parser_help",
    "generate_help_group",
    "get_flag",
    "help_group_from_parser",
    "keep_last_of_duplicates",
    "last_of_mutually_exclusive",
    "wrap_line",
    "wrap_text",
]
