"""Tests for help groups built from argparse parsers."""

from __future__ import annotations

import argparse

import pytest

from optionhelp.errors import HelpGroupError
from optionhelp.parser_help import format_parser_help, help_group_from_parser


def _parser(*, add_help: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tool", add_help=add_help)
    parser.add_argument("target", help="What to process.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Talk more.")
    parser.add_argument("--level", type=int, default=3, help="Detail level (default: %(default)s).")
    parser.add_argument("--secret", help=argparse.SUPPRESS)
    return parser


class TestHelpGroupFromParser:
    """Test (template, description) extraction."""

    def test_collects_all_groups_in_order(self) -> None:
        assert help_group_from_parser(_parser()) == [
            ("target", "What to process."),
            ("-h, --help", "show this help message and exit"),
            ("-v, --verbose", "Talk more."),
            ("--level LEVEL", "Detail level (default: 3)."),
        ]

    def test_selects_group_by_title(self) -> None:
        assert help_group_from_parser(_parser(), title="positional arguments") == [
            ("target", "What to process."),
        ]

    def test_unknown_title_raises(self) -> None:
        with pytest.raises(HelpGroupError):
            help_group_from_parser(_parser(), title="nope")

    def test_custom_group(self) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        output = parser.add_argument_group("output")
        output.add_argument("--format", choices=["json", "text"], help="One of %(choices)s.")
        output.add_argument("--files", nargs="+", metavar="F")
        output.add_argument("--pair", nargs=2, metavar=("KEY", "VALUE"), help="%(prog)s pair.")
        output.add_argument("--maybe", nargs="?", help="Optional value.")

        assert help_group_from_parser(parser, title="output") == [
            ("--format {json,text}", "One of json, text."),
            ("--files F [F ...]", ""),
            ("--pair KEY VALUE", "tool pair."),
            ("--maybe [MAYBE]", "Optional value."),
        ]

    def test_type_expands_to_its_name(self) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        parser.add_argument("--level", type=int, help="An %(type)s value.")

        assert help_group_from_parser(parser) == [("--level LEVEL", "An int value.")]

    @pytest.mark.parametrize(
        ("nargs", "expected"),
        [
            ("*", "--pair [KEY [VALUE ...]]"),
            ("+", "--pair KEY [VALUE ...]"),
            (2, "--pair KEY VALUE"),
        ],
    )
    def test_tuple_metavar_follows_nargs(self, nargs, expected) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        parser.add_argument("--pair", nargs=nargs, metavar=("KEY", "VALUE"), help="Pairs.")

        assert help_group_from_parser(parser) == [(expected, "Pairs.")]

    def test_positional_nargs(self) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        parser.add_argument("paths", nargs="*", help="Paths.")
        parser.add_argument("rest", nargs=argparse.REMAINDER, help="Passed through.")

        assert help_group_from_parser(parser) == [
            ("[paths ...]", "Paths."),
            ("...", "Passed through."),
        ]


class TestFormatParserHelp:
    """Test full parser help rendering."""

    def test_renders_titled_sections(self) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        parser.add_argument("target", help="What to process.")
        parser.add_argument("-v", "--verbose", action="store_true", help="Talk more.")

        assert format_parser_help(parser) == (
            "positional arguments:\n"
            "  target  What to process.\n"
            "\n"
            "options:\n"
            "  -v, --verbose  Talk more.\n"
        )

    def test_skips_empty_groups_and_wraps(self) -> None:
        parser = argparse.ArgumentParser(prog="tool", add_help=False)
        parser.add_argument("-q", action="store_true", help="Suppress all output except errors.")

        assert format_parser_help(parser, delim=" ", left_margin=0, right_margin=20) == (
            "options:\n"
            "-q Suppress all\n"
            "   output except\n"
            "   errors.\n"
        )
