# epv:header:start
#
#   project      : EPV
#   file         : cli_types.py
#   file_relpath : src/epv/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Click parameter types shared by EPV commands."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice over the string values of an Enum.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the choices in help output, e.g. ``[text|json|ndjson]``."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member whose value matches ``value``."""
        if isinstance(value, self.enum_cls):
            return value
        member = self._by_value.get(str(value).strip().lower())
        if member is None:
            self.fail(
                f"{value!r} is not one of {', '.join(self.choices)}.",
                param,
                ctx,
            )
        return member
