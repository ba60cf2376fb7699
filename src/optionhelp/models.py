"""Parser configuration model for the argument transforms."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError


class ParserOptions(BaseModel):
    """Boolean option names and aliases handed to a minimist-style parser.

    Only the keys the transforms read are modeled; other parser settings
    such as `string` or `default` are accepted and ignored.
    """

    model_config = ConfigDict(extra="ignore")

    boolean: list[str] = []
    alias: dict[str, str | list[str]] = {}

    @field_validator("boolean", mode="before")
    @classmethod
    def _wrap_single_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def aliases_of(self, name: str) -> list[str]:
        """Return the alias names declared for name, in declaration order."""
        aliases = self.alias.get(name)
        if aliases is None:
            return []
        if isinstance(aliases, str):
            return [aliases]
        return list(aliases)

    @classmethod
    def coerce(cls, options: ParserOptions | Mapping[str, Any] | None) -> ParserOptions:
        """Return options as a ParserOptions, validating plain mappings."""
        if isinstance(options, cls):
            return options
        if options is None:
            return cls()
        try:
            return cls.model_validate(dict(options))
        except (TypeError, ValueError, ValidationError) as exc:
            raise ConfigError(f"Invalid parser options: {exc}") from exc
