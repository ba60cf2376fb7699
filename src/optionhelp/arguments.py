"""Post-processing for minimist-style parsed arguments.

Parsed arguments are a mutable mapping of option name to value, or to a
list of values when the option was given more than once. Positional
arguments live under the "_" key.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping, MutableMapping, Sequence
from typing import Any

from .constants import LONG_OPTION_PREFIX, OFF_SWITCH_VALUE, POSITIONAL_KEY
from .events import log_event
from .models import ParserOptions

ParsedArgs = MutableMapping[str, Any]


def apply_boolean_off_switch(
    args: ParsedArgs,
    config_options: ParserOptions | Mapping[str, Any] | None,
) -> ParsedArgs:
    """Turn boolean options off when their value is "-".

    Parsers already support `--no-<name>`, which gets tedious for an option
    that defaults to true (say from an environment variable) and is often
    switched off. Aliases of a switched-off option are set to False too.

    Modifies args in place and returns it.
    """
    options = ParserOptions.coerce(config_options)
    for name in options.boolean:
        if args.get(name) != OFF_SWITCH_VALUE:
            continue
        args[name] = False
        aliases = options.aliases_of(name)
        for alias in aliases:
            args[alias] = False
        log_event("boolean_off_switch", option=name, aliases=aliases)
    return args


def get_flag(flags: str | None, flag_letter: str) -> bool:
    """Return True if flag_letter appears in flags (case-sensitive)."""
    if flags is None:
        return False
    return flag_letter in flags


def keep_last_of_duplicates(args: ParsedArgs, multiples_allowed: Iterable[str]) -> ParsedArgs:
    """Reduce repeated options to the last value given.

    Applying default option values (e.g. from an environment variable) ahead
    of the user's own makes the last value the intended one. Options named
    in multiples_allowed, and the positional arguments, keep every value.
    Repeated values may come as a list or a tuple.

    Modifies args in place and returns it.
    """
    allowed = set(multiples_allowed)
    allowed.add(POSITIONAL_KEY)
    for key, value in list(args.items()):
        if key in allowed or not isinstance(value, (list, tuple)) or not value:
            continue
        args[key] = value[-1]
        log_event("keep_last_value", option=key, dropped=len(value) - 1)
    return args


def _last_index(argv: Sequence[str], token: str) -> int:
    for index in range(len(argv) - 1, -1, -1):
        if argv[index] == token:
            return index
    return -1


def last_of_mutually_exclusive(argv: Sequence[str], alternatives: Collection[str]) -> str | None:
    """Return the alternative given last in argv as `--<name>`, or None.

    Args:
        argv: Raw argument tokens, as handed to the parser
        alternatives: Names of mutually exclusive options, without dashes

    Examples:
        last_of_mutually_exclusive(["--foo", "--bar", "--foo"], ["foo", "bar"]) → "foo"
        last_of_mutually_exclusive(["-x"], ["foo", "bar"]) → None
    """
    last_option = None
    greatest_index = -1
    for option in alternatives:
        index = _last_index(argv, LONG_OPTION_PREFIX + option)
        if index > greatest_index:
            last_option = option
            greatest_index = index
    return last_option
