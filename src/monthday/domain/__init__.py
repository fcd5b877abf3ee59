"""Year-less calendar values and the collaborators they are built on."""

from __future__ import annotations

from .clock import Clock, fixed_clock, resolve_zone, system_clock, today
from .errors import (
    ConversionError,
    DateTimeError,
    InvalidCombinationError,
    ParseError,
    RangeError,
)
from .fields import TemporalField, ValueRange
from .formatting import DateTimeFormatter, DateTimeFormatterBuilder, ParsedFields
from .month import Month
from .month_day import FROM, PARSER, MonthDay
from .temporal import (
    DateAccessor,
    Extracted,
    Extraction,
    ExtractionFailure,
    TemporalAccessor,
    TemporalQuery,
    as_accessor,
    extract_fields,
    get_query,
    register_query,
    registered_queries,
)

__all__ = [
    "FROM",
    "PARSER",
    "Clock",
    "ConversionError",
    "DateAccessor",
    "DateTimeError",
    "DateTimeFormatter",
    "DateTimeFormatterBuilder",
    "Extracted",
    "Extraction",
    "ExtractionFailure",
    "InvalidCombinationError",
    "Month",
    "MonthDay",
    "ParseError",
    "ParsedFields",
    "RangeError",
    "TemporalAccessor",
    "TemporalField",
    "TemporalQuery",
    "ValueRange",
    "as_accessor",
    "extract_fields",
    "fixed_clock",
    "get_query",
    "register_query",
    "registered_queries",
    "resolve_zone",
    "system_clock",
    "today",
]
