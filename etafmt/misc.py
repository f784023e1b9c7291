from __future__ import annotations
from enum import Enum
import sys
from typing import TypeVar

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum

__all__ = [
    "StrEnum",
    "str_to_enum",
    "unwrap_or",
]


T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def str_to_enum(str_: str | E, *, enum: type[E]) -> E:
    """Convert a string to an enum based on name instead of value.
    Names are matched case-insensitively, so ``"minute"`` and ``"MINUTE"`` both
    resolve to ``Unit.MINUTE``.

    :param str_: String to be converted to an enum member of type ``enum``.
    :param enum: Enum class to convert ``str_`` to.

    :returns: The enum member of type ``enum`` with name ``str_``.

    :raises TypeError: if the given string is not a valid name of a member of the target enum
    """
    if isinstance(str_, enum):
        return str_
    if not isinstance(str_, str):
        raise TypeError(
            f"Expected a string or a member of '{enum.__name__}', got '{type(str_).__name__}'."
        )
    try:
        return enum[str_.upper()]
    except KeyError:
        valid_ls = [mem.name for mem in enum]
        raise TypeError(
            f"'{str_}' is not a valid option for enum '{enum.__name__}'; must be one of {valid_ls}."
        )


def unwrap_or(value: T | None, /, *, default: T) -> T:
    """
    Returns the input if the input is **not** None else the specified
    ``default`` value.

    :param value: Input to be unwrapped and returned if not ``None``.
    :param default: Default value to use if ``value`` is ``None``.
    :returns: ``default`` if ``value`` is ``None`` otherwise ``value``.
    """
    return default if value is None else value
