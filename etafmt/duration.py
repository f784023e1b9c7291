"""Functions for rendering durations as short ETA strings."""
from __future__ import annotations
from collections.abc import Iterable
import logging
import math
from numbers import Rational, Real
from typing import Any, Final

from etafmt.misc import str_to_enum, unwrap_or
from etafmt.units import Unit, UnitsStyle, render, separator

__all__ = [
    "DurationFormatter",
    "ETA_UNITS",
    "decompose",
    "format_eta",
    "format_eta_or",
]

logger = logging.getLogger(__name__)

ETA_UNITS: Final[tuple[Unit, ...]] = (Unit.DAY, Unit.HOUR, Unit.MINUTE)


def _sort_units(units: Iterable[Unit | str] | str) -> tuple[Unit, ...]:
    if isinstance(units, str):
        units = (units,)
    unique = {str_to_enum(unit, enum=Unit) for unit in units}
    return tuple(sorted(unique, key=lambda unit: unit.seconds, reverse=True))


def decompose(seconds: Any, *, units: Iterable[Unit | str] = ETA_UNITS) -> dict[Unit, int]:
    """Split a number of seconds into whole quantities of ``units``.

    Units are filled largest first; whatever is left over below the smallest unit
    is discarded, so fractional seconds are truncated rather than rounded.

    :param seconds: Non-negative, finite number of seconds.
    :param units: Units to break ``seconds`` down into.

    :returns: Mapping from each unit (in descending order of magnitude) to its quantity.

    :raises TypeError: If ``seconds`` is not a real number.
    :raises ValueError: If ``seconds`` is negative or not finite, or ``units`` is empty.
    """
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        raise TypeError(f"Duration must be a real number, got '{type(seconds).__name__}'.")
    if not isinstance(seconds, Rational) and not math.isfinite(seconds):
        raise ValueError(f"Duration must be finite, got {seconds}.")
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}.")
    sorted_units = _sort_units(units)
    if not sorted_units:
        raise ValueError("At least one unit is needed to decompose a duration.")

    remainder = math.floor(seconds)
    parts: dict[Unit, int] = {}
    for unit in sorted_units:
        parts[unit], remainder = divmod(remainder, unit.seconds)
    return parts


class DurationFormatter:
    """Render durations using at most ``max_unit_count`` of the ``allowed_units``.

    Zero-valued units are always dropped. When every allowed unit is zero the
    smallest allowed unit is rendered with a value of zero, so the result is never
    the empty string. Units beyond the cap are truncated, not rounded.

    :param allowed_units: Units the output may be composed of, as members or names; a single
        name is treated as a one-element collection.
    :param max_unit_count: Maximum number of (non-zero) units to render.
    :param units_style: How the units are spelled out.

    :raises ValueError: If ``allowed_units`` is empty or ``max_unit_count`` is not positive.
    :raises TypeError: If a unit or the style is not a valid option.

    :example:
        >>> formatter = DurationFormatter(units_style="full")
        >>> formatter(3_661)
        '1 hour, 1 minute'
    """

    def __init__(
        self,
        allowed_units: Iterable[Unit | str] | str = ETA_UNITS,
        *,
        max_unit_count: int = 2,
        units_style: UnitsStyle | str = UnitsStyle.ABBREVIATED,
    ) -> None:
        units = _sort_units(allowed_units)
        if not units:
            raise ValueError("'allowed_units' must contain at least one unit.")
        if isinstance(max_unit_count, bool) or not isinstance(max_unit_count, int):
            raise TypeError(
                f"'max_unit_count' must be an int, got '{type(max_unit_count).__name__}'."
            )
        if max_unit_count < 1:
            raise ValueError(f"'max_unit_count' must be positive, got {max_unit_count}.")
        self._allowed_units = units
        self._max_unit_count = max_unit_count
        self._units_style = str_to_enum(units_style, enum=UnitsStyle)

    @property
    def allowed_units(self) -> tuple[Unit, ...]:
        """Allowed units, largest first."""
        return self._allowed_units

    @property
    def max_unit_count(self) -> int:
        return self._max_unit_count

    @property
    def units_style(self) -> UnitsStyle:
        return self._units_style

    def format(self, seconds: Any) -> str | None:
        """Format ``seconds`` as a duration string.

        :param seconds: Non-negative, finite number of seconds.
        :returns: The formatted duration, or ``None`` if ``seconds`` can't be formatted.
        """
        try:
            parts = decompose(seconds, units=self._allowed_units)
        except (TypeError, ValueError) as e:
            logger.debug("Unable to format %r as a duration: %s", seconds, e)
            return None

        selected = [(unit, value) for unit, value in parts.items() if value]
        if not selected:
            selected = [(self._allowed_units[-1], 0)]
        return separator(self._units_style).join(
            render(unit, value, style=self._units_style)
            for unit, value in selected[: self._max_unit_count]
        )

    __call__ = format

    def __repr__(self) -> str:
        units = ", ".join(unit.value for unit in self._allowed_units)
        return (
            f"{type(self).__name__}(allowed_units=[{units}], "
            f"max_unit_count={self._max_unit_count}, units_style={self._units_style.value})"
        )


_ETA_FORMATTER: Final = DurationFormatter()


def format_eta(seconds: Any) -> str | None:
    """Format a time interval as a compact ETA string such as ``"5m"`` or ``"1h 20m"``.

    At most two of days, hours and minutes are shown, largest first, with zero-valued
    units left out. Intervals shorter than a minute are shown as ``"0m"``.

    :param seconds: Non-negative, finite number of seconds.
    :returns: The ETA string, or ``None`` if ``seconds`` is negative, not finite or not a number.
    """
    return _ETA_FORMATTER.format(seconds)


def format_eta_or(seconds: Any, *, default: str = "--") -> str:
    """Like :func:`format_eta` but substitutes ``default`` when formatting fails."""
    return unwrap_or(format_eta(seconds), default=default)
