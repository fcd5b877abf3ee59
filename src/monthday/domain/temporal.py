"""Protocol for pulling calendar fields out of arbitrary date-like objects.

Any object exposing ``is_supported(field)`` and ``get(field)`` is a
:class:`TemporalAccessor`. Standard library ``date`` and ``datetime`` values are
adapted on the fly. Conversions between calendar types go through named
:class:`TemporalQuery` objects kept in a process-wide registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from monthday.domain.errors import DateTimeError
from monthday.domain.fields import TemporalField

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


@runtime_checkable
class TemporalAccessor(Protocol):
    def is_supported(self, field: TemporalField) -> bool: ...

    def get(self, field: TemporalField) -> int: ...


@dataclass(frozen=True, slots=True)
class DateAccessor:
    """Expose a standard library ``date`` (or ``datetime``) as an accessor."""

    value: date

    def is_supported(self, field: TemporalField) -> bool:
        return field in _DATE_GETTERS

    def get(self, field: TemporalField) -> int:
        getter = _DATE_GETTERS.get(field)
        if getter is None:
            raise DateTimeError(f"Unsupported field: {field.display_name}")
        return getter(self.value)


_DATE_GETTERS: dict[TemporalField, Callable[[date], int]] = {
    TemporalField.YEAR: lambda value: value.year,
    TemporalField.MONTH_OF_YEAR: lambda value: value.month,
    TemporalField.DAY_OF_MONTH: lambda value: value.day,
}


def as_accessor(source: object) -> TemporalAccessor | None:
    """Return ``source`` as an accessor, or ``None`` if it exposes no fields."""

    if isinstance(source, TemporalAccessor):
        return source
    if isinstance(source, date):
        return DateAccessor(source)
    return None


@dataclass(frozen=True, slots=True)
class Extracted:
    values: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ExtractionFailure:
    reason: str
    cause: Exception | None = None


type Extraction = Extracted | ExtractionFailure


def extract_fields(source: object, *fields: TemporalField) -> Extraction:
    """Read ``fields`` from ``source`` without raising for unusable inputs."""

    accessor = as_accessor(source)
    if accessor is None:
        return ExtractionFailure(f"{type(source).__name__} does not expose temporal fields")

    missing = [field.display_name for field in fields if not accessor.is_supported(field)]
    if missing:
        return ExtractionFailure(f"unsupported field(s): {', '.join(missing)}")

    values: list[int] = []
    for field in fields:
        try:
            value = accessor.get(field)
        except Exception as exc:  # noqa: BLE001
            return ExtractionFailure(f"reading {field.display_name} failed: {exc!r}", exc)
        if isinstance(value, bool) or not isinstance(value, int):
            return ExtractionFailure(f"{field.display_name} is not an integer: {value!r}")
        values.append(value)
    return Extracted(tuple(values))


@dataclass(frozen=True, slots=True)
class TemporalQuery[R]:
    """A named conversion applied to an accessor, e.g. ``MonthDay.FROM``."""

    name: str
    fn: Callable[[TemporalAccessor], R]

    def __call__(self, temporal: TemporalAccessor) -> R:
        return self.fn(temporal)

    def __str__(self) -> str:
        return self.name


_QUERIES: dict[str, TemporalQuery[Any]] = {}
_PINNED: set[str] = set()


def register_query[R](
    name: str,
    fn: Callable[[TemporalAccessor], R],
    *,
    replace: bool = False,
    pinned: bool = False,
) -> TemporalQuery[R]:
    """Create a query and make it available under ``name``.

    Registering an existing name fails unless ``replace=True`` is given, which
    swaps the stored query for the new one. Queries registered with
    ``pinned=True`` are bound to module constants and can never be replaced.
    """

    if name in _PINNED:
        raise ValueError(f"Temporal query {name} is pinned and cannot be replaced")
    if name in _QUERIES and not replace:
        raise ValueError(f"Temporal query already registered: {name}")
    query = TemporalQuery(name, fn)
    _QUERIES[name] = query
    if pinned:
        _PINNED.add(name)
    log.debug("Registered temporal query %s", name)
    return query


def get_query(name: str) -> TemporalQuery[Any]:
    try:
        return _QUERIES[name]
    except KeyError:
        raise LookupError(f"No temporal query registered under {name!r}") from None


def registered_queries() -> tuple[str, ...]:
    return tuple(sorted(_QUERIES))


__all__ = [
    "DateAccessor",
    "Extracted",
    "Extraction",
    "ExtractionFailure",
    "TemporalAccessor",
    "TemporalQuery",
    "as_accessor",
    "extract_fields",
    "get_query",
    "register_query",
    "registered_queries",
]
