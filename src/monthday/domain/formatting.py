"""Fixed-pattern formatting and parsing of calendar fields.

A :class:`DateTimeFormatter` is an immutable sequence of literal and numeric
parts. Parsing yields :class:`ParsedFields`, an accessor that a
:class:`~monthday.domain.temporal.TemporalQuery` turns into a calendar value.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from monthday.domain.errors import DateTimeError, ParseError
from monthday.domain.fields import TemporalField
from monthday.domain.temporal import TemporalAccessor, as_accessor

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

_MAX_WIDTH: Final = 10
_PATTERN_FIELDS: Final[dict[str, TemporalField]] = {
    "M": TemporalField.MONTH_OF_YEAR,
    "d": TemporalField.DAY_OF_MONTH,
    "y": TemporalField.YEAR,
    "u": TemporalField.YEAR,
}


@dataclass(frozen=True, slots=True)
class ParsedFields:
    """Field values collected while parsing, exposed as an accessor."""

    values: Mapping[TemporalField, int]

    def is_supported(self, field: TemporalField) -> bool:
        return field in self.values

    def get(self, field: TemporalField) -> int:
        try:
            return self.values[field]
        except KeyError:
            raise DateTimeError(f"Unsupported field: {field.display_name}") from None

    def __repr__(self) -> str:
        rendered = ", ".join(f"{field.display_name}={value}" for field, value in self.values.items())
        return f"ParsedFields({rendered})"


@dataclass(frozen=True, slots=True)
class _Literal:
    text: str

    def format(self, _accessor: TemporalAccessor) -> str:
        return self.text

    def parse(self, text: str, position: int, _values: dict[TemporalField, int]) -> int:
        end = position + len(self.text)
        if text[position:end] != self.text:
            raise ParseError(
                f"Text {text!r} could not be parsed at index {position}",
                text,
                position,
            )
        return end

    def __str__(self) -> str:
        return f"'{self.text}'"


@dataclass(frozen=True, slots=True)
class _Value:
    field: TemporalField
    width: int

    @property
    def max_width(self) -> int:
        return 2 if self.width == 1 else self.width

    def format(self, accessor: TemporalAccessor) -> str:
        if not accessor.is_supported(self.field):
            raise DateTimeError(f"Unable to print field {self.field.display_name}: not supported")
        value = accessor.get(self.field)
        rendered = f"{value:0{self.width}d}"
        if len(rendered) > self.max_width:
            raise DateTimeError(
                f"Field {self.field.display_name} cannot be printed as the value {value} "
                f"exceeds the maximum print width of {self.max_width}"
            )
        return rendered

    def parse(self, text: str, position: int, values: dict[TemporalField, int]) -> int:
        end = position
        limit = min(len(text), position + self.max_width)
        while end < limit and text[end].isascii() and text[end].isdigit():
            end += 1
        if end - position < self.width:
            raise ParseError(
                f"Text {text!r} could not be parsed at index {position}",
                text,
                position,
            )

        value = int(text[position:end])
        if not self.field.range.is_valid(value):
            raise ParseError(
                f"Text {text!r} could not be parsed: value {value} for "
                f"{self.field.display_name} is out of range",
                text,
                position,
            )
        previous = values.setdefault(self.field, value)
        if previous != value:
            raise ParseError(
                f"Text {text!r} could not be parsed: conflicting values for "
                f"{self.field.display_name}",
                text,
                position,
            )
        return end

    def __str__(self) -> str:
        return f"Value({self.field.display_name},{self.width})"


type _Part = _Literal | _Value


@dataclass(frozen=True, slots=True)
class DateTimeFormatter:
    """Immutable formatter built from literal and numeric parts."""

    parts: tuple[_Part, ...]
    pattern: str | None = None

    @classmethod
    def of_pattern(cls, pattern: str) -> DateTimeFormatter:
        """Compile a pattern such as ``"--MM-dd"`` or ``"dd/MM"``.

        Supported letters are ``M`` (month), ``d`` (day) and ``yyyy``/``uuuu``
        (year). Text in single quotes is literal and ``''`` is a quote. Every
        other non-letter character is copied verbatim.
        """

        builder = DateTimeFormatterBuilder()
        index = 0
        while index < len(pattern):
            char = pattern[index]
            if char == "'":
                literal, index = _read_quoted(pattern, index)
                builder.append_literal(literal)
                continue
            if char.isalpha():
                run = 1
                while index + run < len(pattern) and pattern[index + run] == char:
                    run += 1
                field = _PATTERN_FIELDS.get(char)
                if field is None:
                    raise ValueError(f"Unsupported pattern letter: {char!r}")
                if field is TemporalField.YEAR and run != 4:
                    raise ValueError(f"Year must be written as four letters: {char * run!r}")
                if field is not TemporalField.YEAR and run > 2:
                    raise ValueError(f"Too many pattern letters: {char * run!r}")
                builder.append_value(field, run)
                index += run
                continue
            builder.append_literal(char)
            index += 1
        return builder.to_formatter(pattern=pattern)

    def parse_fields(self, text: str) -> ParsedFields:
        """Parse the whole of ``text`` into field values."""

        if text is None:
            raise TypeError("text must not be None")
        values: dict[TemporalField, int] = {}
        position = 0
        for part in self.parts:
            position = part.parse(text, position, values)
        if position != len(text):
            raise ParseError(
                f"Text {text!r} could not be parsed, unparsed text found at index {position}",
                text,
                position,
            )
        return ParsedFields(MappingProxyType(values))

    def parse[R](self, text: str, query: Callable[[TemporalAccessor], R]) -> R:
        """Parse ``text`` and convert the parsed fields with ``query``."""

        parsed = self.parse_fields(text)
        try:
            return query(parsed)
        except ParseError:
            raise
        except DateTimeError as exc:
            raise ParseError(f"Text {text!r} could not be parsed: {exc}", text, 0) from exc

    def format(self, temporal: object) -> str:
        accessor = as_accessor(temporal)
        if accessor is None:
            raise DateTimeError(f"Unable to format {type(temporal).__name__}: no temporal fields")
        return "".join(part.format(accessor) for part in self.parts)

    def __str__(self) -> str:
        if self.pattern is not None:
            return self.pattern
        return "".join(str(part) for part in self.parts)


class DateTimeFormatterBuilder:
    """Mutable builder producing an immutable :class:`DateTimeFormatter`."""

    def __init__(self) -> None:
        self._parts: list[_Part] = []

    def append_literal(self, literal: str) -> DateTimeFormatterBuilder:
        if literal:
            self._parts.append(_Literal(literal))
        return self

    def append_value(self, field: TemporalField, width: int = 1) -> DateTimeFormatterBuilder:
        """Append a numeric field; ``width=1`` accepts one or two digits."""

        if not 1 <= width <= _MAX_WIDTH:
            raise ValueError(f"Field width must be between 1 and {_MAX_WIDTH}: {width}")
        self._parts.append(_Value(field, width))
        return self

    def to_formatter(self, *, pattern: str | None = None) -> DateTimeFormatter:
        return DateTimeFormatter(tuple(self._parts), pattern=pattern)


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at ``start``; return it and the next index."""

    chars: list[str] = []
    index = start + 1
    while True:
        if index >= len(pattern):
            raise ValueError(f"Pattern ends with an incomplete string literal: {pattern!r}")
        if pattern[index] == "'":
            if index + 1 < len(pattern) and pattern[index + 1] == "'":
                chars.append("'")
                index += 2
                continue
            break
        chars.append(pattern[index])
        index += 1
    if index == start + 1:
        # '' outside a literal
        return "'", index + 1
    return "".join(chars), index + 1


__all__ = ["DateTimeFormatter", "DateTimeFormatterBuilder", "ParsedFields"]
