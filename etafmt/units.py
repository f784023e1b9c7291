"""Time units and the names they are rendered with."""
from __future__ import annotations
from enum import auto
from typing import Final

from etafmt.misc import StrEnum

__all__ = ["Unit", "UnitsStyle", "render", "separator"]


class Unit(StrEnum):
    """Units a duration can be broken down into."""

    WEEK = auto()
    DAY = auto()
    HOUR = auto()
    MINUTE = auto()
    SECOND = auto()

    @property
    def seconds(self) -> int:
        """Length of the unit in seconds."""
        return _SECONDS[self]


class UnitsStyle(StrEnum):
    """How units are spelled out.

    * ``ABBREVIATED``: ``"1h 1m"``
    * ``SHORT``: ``"1 hr, 1 min"``
    * ``FULL``: ``"1 hour, 1 minute"``
    """

    ABBREVIATED = auto()
    SHORT = auto()
    FULL = auto()


_SECONDS: Final[dict[Unit, int]] = {
    Unit.WEEK: 604_800,
    Unit.DAY: 86_400,
    Unit.HOUR: 3_600,
    Unit.MINUTE: 60,
    Unit.SECOND: 1,
}

_ABBREVIATIONS: Final[dict[Unit, str]] = {
    Unit.WEEK: "w",
    Unit.DAY: "d",
    Unit.HOUR: "h",
    Unit.MINUTE: "m",
    Unit.SECOND: "s",
}

# (singular, plural)
_SHORT_NAMES: Final[dict[Unit, tuple[str, str]]] = {
    Unit.WEEK: ("wk", "wks"),
    Unit.DAY: ("day", "days"),
    Unit.HOUR: ("hr", "hr"),
    Unit.MINUTE: ("min", "min"),
    Unit.SECOND: ("sec", "sec"),
}


def render(unit: Unit, value: int, *, style: UnitsStyle) -> str:
    """Render a single ``value``/``unit`` component, e.g. ``3h`` or ``3 hours``."""
    if style is UnitsStyle.ABBREVIATED:
        return f"{value}{_ABBREVIATIONS[unit]}"
    if style is UnitsStyle.SHORT:
        singular, plural = _SHORT_NAMES[unit]
    else:
        singular, plural = unit.value, f"{unit.value}s"
    return f"{value} {singular if value == 1 else plural}"


def separator(style: UnitsStyle) -> str:
    return " " if style is UnitsStyle.ABBREVIATED else ", "
