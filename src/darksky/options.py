"""Query options accepted by forecast and time machine requests.

Each option validates its own input and writes a single query parameter.
Options are applied in the order they are given, so a later option that
targets the same parameter replaces the earlier value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from darksky.constants import (
    EXCLUDE_KEY,
    EXTEND_KEY,
    EXTEND_VALUE,
    LANGUAGE_KEY,
    SUPPORTED_EXCLUDES,
    SUPPORTED_LANGUAGES,
    SUPPORTED_UNITS,
    UNITS_KEY,
)
from darksky.errors import (
    ExcludeNotUniqueError,
    LanguageNotSupportedError,
    UnitNotSupportedError,
    UnsupportedExcludeValueError,
)


@runtime_checkable
class Option(Protocol):
    """Protocol for a single query parameter override."""

    def apply(self, query: dict[str, str]) -> None:
        """Validate the option and write it into the query parameters.

        Args:
            query: Mutable mapping of query parameter names to values

        Raises:
            OptionValidationError: When the option value is not supported
        """
        ...


@dataclass(frozen=True)
class LanguageOption:
    """Return summary properties in the requested language."""

    language: str

    def apply(self, query: dict[str, str]) -> None:
        lang = self.language.lower()
        if lang not in SUPPORTED_LANGUAGES:
            raise LanguageNotSupportedError(self.language)
        query[LANGUAGE_KEY] = lang


@dataclass(frozen=True, init=False)
class ExcludeOption:
    """Leave some response sections out to reduce the payload size."""

    sections: tuple[str, ...]

    def __init__(self, *sections: str) -> None:
        object.__setattr__(self, "sections", tuple(sections))

    def apply(self, query: dict[str, str]) -> None:
        lowered = [s.lower() for s in self.sections]

        for original, section in zip(self.sections, lowered):
            if section not in SUPPORTED_EXCLUDES:
                raise UnsupportedExcludeValueError(original)
            if lowered.count(section) > 1:
                raise ExcludeNotUniqueError()

        query[EXCLUDE_KEY] = "[" + ",".join(lowered) + "]"


@dataclass(frozen=True)
class ExtendOption:
    """Return hour-by-hour data for the next 168 hours instead of 48."""

    def apply(self, query: dict[str, str]) -> None:
        query[EXTEND_KEY] = EXTEND_VALUE


@dataclass(frozen=True)
class UnitOption:
    """Return weather conditions in the requested units."""

    unit: str

    def apply(self, query: dict[str, str]) -> None:
        unit = self.unit.lower()
        if unit not in SUPPORTED_UNITS:
            raise UnitNotSupportedError(self.unit)
        query[UNITS_KEY] = unit


def apply_options(options: list[Option] | tuple[Option, ...]) -> dict[str, str]:
    """Apply options in order to a fresh set of query parameters.

    Args:
        options: Options to apply, earliest first

    Returns:
        The resulting query parameters

    Raises:
        OptionValidationError: From the first option that fails; nothing
            is returned in that case
    """
    query: dict[str, str] = {}
    for option in options:
        option.apply(query)
    return query
