"""Help groups built from argparse parsers."""

from __future__ import annotations

import argparse
from typing import Any

from .constants import DEFAULT_HELP_DELIM, DEFAULT_HELP_LEFT_MARGIN, DEFAULT_HELP_RIGHT_MARGIN
from .errors import HelpGroupError
from .help_group import HelpEntry, generate_help_group


def _metavar(action: argparse.Action) -> str | tuple[str, ...]:
    if action.metavar is not None:
        return action.metavar
    if action.choices is not None:
        return "{" + ",".join(str(choice) for choice in action.choices) + "}"
    if action.option_strings:
        return action.dest.upper()
    return action.dest


def _format_value(action: argparse.Action) -> str:
    metavar = _metavar(action)

    def names(count: int) -> tuple[str, ...]:
        # A tuple metavar names each value already.
        if isinstance(metavar, tuple):
            return metavar
        return (metavar,) * count

    nargs = action.nargs
    if nargs is None:
        return "%s" % names(1)
    if nargs == argparse.OPTIONAL:
        return "[%s]" % names(1)
    if nargs == argparse.ZERO_OR_MORE:
        metavars = names(1)
        if len(metavars) == 2:
            return "[%s [%s ...]]" % metavars
        return "[%s ...]" % metavars
    if nargs == argparse.ONE_OR_MORE:
        return "%s [%s ...]" % names(2)
    if nargs == argparse.REMAINDER:
        return "..."
    if nargs == argparse.PARSER:
        return "%s ..." % names(1)
    if isinstance(nargs, int):
        return " ".join(names(nargs))
    return " ".join(names(1))


def _template(action: argparse.Action) -> str:
    if not action.option_strings:
        return _format_value(action)
    options = ", ".join(action.option_strings)
    if action.nargs == 0:
        return options
    return f"{options} {_format_value(action)}"


def _description(action: argparse.Action, prog: str) -> str:
    if not action.help:
        return ""
    params: dict[str, Any] = dict(vars(action), prog=prog)
    for name in list(params):
        if params[name] is argparse.SUPPRESS:
            del params[name]
        elif hasattr(params[name], "__name__"):
            params[name] = params[name].__name__
    if params.get("choices") is not None:
        params["choices"] = ", ".join(str(choice) for choice in params["choices"])
    return action.help % params


def _group_entries(parser: argparse.ArgumentParser, group: argparse._ArgumentGroup) -> list[HelpEntry]:
    return [
        (_template(action), _description(action, parser.prog))
        for action in group._group_actions
        if action.help != argparse.SUPPRESS
    ]


def help_group_from_parser(parser: argparse.ArgumentParser, *, title: str | None = None) -> list[HelpEntry]:
    """Collect (template, description) pairs for a parser's arguments.

    Args:
        parser: Parser whose arguments to describe
        title: Only use the argument group with this title. All groups are
            used when omitted.

    Raises:
        HelpGroupError: If no argument group has the given title
    """
    groups = parser._action_groups
    if title is not None:
        groups = [group for group in groups if group.title == title]
        if not groups:
            raise HelpGroupError(f"Parser {parser.prog!r} has no argument group titled {title!r}.")

    entries: list[HelpEntry] = []
    for group in groups:
        entries.extend(_group_entries(parser, group))
    return entries


def format_parser_help(
    parser: argparse.ArgumentParser,
    *,
    delim: str = DEFAULT_HELP_DELIM,
    left_margin: int = DEFAULT_HELP_LEFT_MARGIN,
    right_margin: int = DEFAULT_HELP_RIGHT_MARGIN,
    space_entries: bool = False,
) -> str:
    """Render every non-empty argument group of parser under its title."""
    sections: list[str] = []
    for group in parser._action_groups:
        entries = _group_entries(parser, group)
        if not entries:
            continue
        table = generate_help_group(entries, delim, left_margin, right_margin, space_entries)
        sections.append(f"{group.title}:\n{table}")
    return "\n".join(sections)
