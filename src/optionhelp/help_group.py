"""Aligned help tables for groups of command line options."""

from __future__ import annotations

from collections.abc import Sequence

from .wrapping import wrap_line

HelpEntry = tuple[str, str]


def generate_help_group(
    group: Sequence[HelpEntry],
    delim: str,
    left_margin: int,
    right_margin: int,
    space_entries: bool,
) -> str:
    """Render option templates and their descriptions as an aligned table.

    Templates start at left_margin and are padded to the longest template.
    Descriptions start after delim and wrap at right_margin. A description
    may span several lines, including blank ones; each line is wrapped on
    its own and all of them align under the description column.

    Args:
        group: (template, description) pairs, rendered in order
        delim: Text placed between a template and its description
        left_margin: Column of the option templates
        right_margin: Column at which descriptions wrap
        space_entries: Put a blank line between consecutive entries

    Returns:
        The rendered table, ending with a single newline ("" for no entries).
    """
    max_arg_length = max((len(template) for template, _ in group), default=0)
    text_margin = left_margin + max_arg_length + len(delim)
    max_text_width = right_margin - text_margin

    left_margin_spaces = " " * left_margin
    continuation_prefix = " " * text_margin

    blocks: list[str] = []
    for template, description in group:
        if description.endswith("\n"):
            description = description[:-1]

        prefix = left_margin_spaces + template.ljust(max_arg_length) + delim
        rendered: list[str] = []
        for line in description.split("\n"):
            for wrapped_line in wrap_line(line, max_text_width):
                rendered.append(prefix + wrapped_line)
                prefix = continuation_prefix
        blocks.append("\n".join(rendered) + "\n")

    separator = "\n" if space_entries else ""
    return separator.join(blocks)
