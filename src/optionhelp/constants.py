"""Literal constants used by optionhelp."""

# Key under which minimist-style parsers store positional arguments.
POSITIONAL_KEY = "_"

# Value that turns a boolean option off, as in `-v -`.
OFF_SWITCH_VALUE = "-"

LONG_OPTION_PREFIX = "--"

DEFAULT_HELP_DELIM = "  "
DEFAULT_HELP_LEFT_MARGIN = 2
DEFAULT_HELP_RIGHT_MARGIN = 79
