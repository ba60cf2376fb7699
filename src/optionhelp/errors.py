"""Typed exceptions for optionhelp."""


class OptionHelpError(Exception):
    """Base exception for optionhelp failures."""


class ConfigError(ValueError, OptionHelpError):
    """Raised when parser configuration cannot be validated."""


class HelpGroupError(ValueError, OptionHelpError):
    """Raised when a help group cannot be built from a parser."""
