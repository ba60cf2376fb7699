"""Word wrapping for help text.

Lines are split on single spaces, never on arbitrary whitespace: a run of
spaces yields zero-length words, so the original spacing survives wrapping.
"""

from __future__ import annotations


def wrap_line(line: str, max_width: int, left_margin_size: int = 0) -> list[str]:
    """Wrap one line at max_width, breaking only at spaces.

    Args:
        line: Line to wrap, without a trailing newline
        max_width: Column at which to wrap. Includes the continuation margin.
        left_margin_size: Number of spaces preceding each continuation line.
            The first line never gets the margin.

    Returns:
        The wrapped lines. A word wider than the available width is placed
        on a line of its own and overflows it.

    Examples:
        wrap_line("hello world", 11) → ["hello world"]
        wrap_line("hello world", 10) → ["hello", "world"]
        wrap_line("", 10) → [""]
    """
    if not line:
        return [""]

    left_margin = " " * left_margin_size
    wrapped_lines: list[str] = []
    run = ""
    has_words = False

    for word in line.split(" "):
        if not has_words:
            run = word
            has_words = True
        elif len(run) + 1 + len(word) <= max_width:
            run += " " + word
        else:
            wrapped_lines.append(run)
            run = left_margin + word

    if has_words:
        wrapped_lines.append(run)
    return wrapped_lines


def _leading_space_count(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def wrap_text(text: str, max_width: int, auto_indent_delta: bool | int | None = False) -> str:
    """Wrap every line of text at max_width and return the joined result.

    Args:
        text: One or more lines separated by newlines
        max_width: Column at which to wrap, including any margin
        auto_indent_delta: False or None leaves continuation lines in the
            first column. True indents them to the column where their source
            line starts. An int does the same, offset by that many columns
            (negative values dedent, never below column 0).

    When auto-indenting, a line's leading spaces are removed before wrapping
    and only its continuation lines carry the computed margin.
    """
    if isinstance(auto_indent_delta, bool):
        auto_indenting = auto_indent_delta
        delta = 0
    else:
        auto_indenting = auto_indent_delta is not None
        delta = auto_indent_delta or 0

    wrapped: list[str] = []
    for line in text.split("\n"):
        left_margin_size = 0
        if auto_indenting:
            indent = _leading_space_count(line)
            left_margin_size = max(indent + delta, 0)
            line = line[indent:]
        wrapped.extend(wrap_line(line, max_width, left_margin_size))
    return "\n".join(wrapped)
