"""Formatter builder.

A Formatter bundles a pattern with everything needed to print and read
it: the token table, the pattern rewrites applied before compilation
(pre-substitutions), the rules that render tokens from the draft output
(post-substitutions), the instant kind it builds and accepts, and the
timezone, locale and year settings used while parsing.

Formatters are frozen. The ``with_*`` functions return modified copies.

Examples:
    >>> from datefmt.core import DateTime
    >>> from datefmt.format.unparse import unparse
    >>> f = formatter("dow, MMMM dth yyyy")
    >>> unparse(f, DateTime(2010, 10, 3))
    'Sunday, October 3rd 2010'
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable

from datefmt.core.date import LocalDate
from datefmt.core.datetime import DateTime, LocalDateTime
from datefmt.format.pattern import Segment, compile_pattern
from datefmt.format.tokens import (
    DEFAULT_TOKENS,
    LOCAL_TOKENS,
    TokenTable,
    blank_zone_tokens,
    ordinal_suffix,
    token_table,
)
from datefmt.units.names import ENGLISH, NameTable
from datefmt.units.timezone import Timezone, format_offset

PostRule = Callable[[str, LocalDate], str]

# Tokens whose rendering depends on the name table
TEXT_TOKENS: tuple[str, ...] = ("dow", "EEE", "EEEE", "MMM", "MMMM", "G", "GGGG")


class InstantKind(Enum):
    """Which instant shape a formatter builds and accepts."""

    UTC = "utc"
    LOCAL = "local"
    DATE = "date"

    @property
    def instant_class(self) -> type[LocalDate]:
        """The class an instant must be an instance of for this kind."""
        if self is InstantKind.UTC:
            return DateTime
        if self is InstantKind.LOCAL:
            return LocalDateTime
        return LocalDate


def _ordinal_day(draft: str, value: LocalDate) -> str:
    return f"{value.day}{ordinal_suffix(value.day)}"


def _zone_rule(extended: bool) -> PostRule:
    def rule(draft: str, value: LocalDate) -> str:
        if value.offset_minutes == 0:
            return "Z"
        return format_offset(value.offset_minutes, extended)

    return rule


DEFAULT_PRE_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (("dow", "EEEE"),)
STRIP_ZONE: tuple[str, str] = ("Z", "")

DEFAULT_POST_SUBSTITUTIONS: tuple[tuple[str, PostRule], ...] = (
    ("dth", _ordinal_day),
    ("ZZ+", _zone_rule(extended=True)),
    ("Z", _zone_rule(extended=False)),
)
LOCAL_POST_SUBSTITUTIONS: tuple[tuple[str, PostRule], ...] = (
    ("dth", _ordinal_day),
)


@dataclass(frozen=True)
class Formatter:
    """An immutable, compiled date/time pattern.

    Attributes:
        pattern: The raw pattern string.
        tokens: Token table in effect.
        pre_substitutions: Ordered (regex, replacement) pattern rewrites.
        post_substitutions: Ordered (regex, rule) pairs; the rule renders
            the matched token from the draft output and the instant.
        default_year: Year used when parsing a pattern without a year.
        kind: Instant shape built by parse and accepted by unparse.
        zone: Offset unparse renders in and parse returns in.
        names: Weekday and month names read while parsing.
        pivot_year: Centre of the century window for two-digit years.
        missing: Set on placeholder formatters to the name of the
            parser they stand for.
        segments: The compiled pattern.
    """

    pattern: str
    tokens: TokenTable = field(
        default_factory=lambda: DEFAULT_TOKENS, compare=False, repr=False
    )
    pre_substitutions: tuple[tuple[str, str], ...] = DEFAULT_PRE_SUBSTITUTIONS
    post_substitutions: tuple[tuple[str, PostRule], ...] = field(
        default=DEFAULT_POST_SUBSTITUTIONS, compare=False, repr=False
    )
    default_year: int | None = None
    kind: InstantKind = InstantKind.UTC
    zone: Timezone = field(default_factory=Timezone.utc)
    names: NameTable = field(default=ENGLISH, repr=False)
    pivot_year: int | None = None
    missing: str | None = None
    segments: tuple[Segment, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.missing is not None:
            segments: tuple[Segment, ...] = ()
        else:
            segments = compile_pattern(
                self.pattern,
                frozenset(self.tokens),
                self.pre_substitutions,
                tuple(matcher for matcher, _ in self.post_substitutions),
            )
        object.__setattr__(self, "segments", segments)

    @property
    def is_implemented(self) -> bool:
        return self.missing is None


def formatter(
    pattern: str,
    zone: Timezone | str | None = None,
    *,
    names: NameTable | None = None,
) -> Formatter:
    """Build a formatter producing and reading offset-bearing DateTimes.

    Args:
        pattern: The pattern, e.g. "yyyy-MM-dd'T'HH:mm:ss.SSSZZ".
        zone: Offset to render in and parse into (default UTC). A string
            is read with Timezone.from_string.
        names: Name table for text tokens (default English).

    Raises:
        PatternError: If the pattern uses an unknown letter.
    """
    return Formatter(
        pattern,
        tokens=DEFAULT_TOKENS if names is None else token_table(names),
        zone=_as_timezone(zone),
        names=names if names is not None else ENGLISH,
    )


def formatter_local(pattern: str) -> Formatter:
    """Build a zone-naive formatter.

    Zone tokens render as nothing and are stripped from the pattern.

    Examples:
        >>> formatter_local("HH:mm Z").segments[-1].text
        ' '
    """
    return Formatter(
        pattern,
        tokens=LOCAL_TOKENS,
        pre_substitutions=DEFAULT_PRE_SUBSTITUTIONS + (STRIP_ZONE,),
        post_substitutions=LOCAL_POST_SUBSTITUTIONS,
        kind=InstantKind.LOCAL,
    )


def not_implemented(name: str) -> Formatter:
    """Return a placeholder formatter that fails whenever it is used."""
    return Formatter("", missing=name)


def as_kind(fmt: Formatter, kind: InstantKind) -> Formatter:
    """Return ``fmt`` bound to another instant kind.

    Binding to LOCAL or DATE blanks the zone tokens and strips them from
    the pattern.
    """
    if fmt.kind is kind:
        return fmt
    if fmt.missing is not None or kind is InstantKind.UTC:
        return dataclasses.replace(fmt, kind=kind)

    pre = fmt.pre_substitutions
    if STRIP_ZONE not in pre:
        pre = pre + (STRIP_ZONE,)
    return dataclasses.replace(
        fmt,
        kind=kind,
        tokens=blank_zone_tokens(fmt.tokens),
        pre_substitutions=pre,
    )


def with_default_year(fmt: Formatter, year: int) -> Formatter:
    """Return a copy of ``fmt`` that seeds parsing with ``year``.

    Examples:
        >>> from datefmt.format.parse import parse
        >>> parse(with_default_year(formatter("MM-dd"), 2012), "02-29").year
        2012
    """
    return dataclasses.replace(fmt, default_year=year)


def with_zone(fmt: Formatter, zone: Timezone | str) -> Formatter:
    """Return a copy of ``fmt`` rendering and parsing at ``zone``."""
    return dataclasses.replace(fmt, zone=_as_timezone(zone))


def with_locale(fmt: Formatter, locale: NameTable | str) -> Formatter:
    """Return a copy of ``fmt`` using another locale's names.

    Args:
        locale: A NameTable, or a locale code loaded through Babel.
    """
    names = locale if isinstance(locale, NameTable) else NameTable.for_locale(locale)
    fresh = token_table(names)
    tokens = dict(fmt.tokens)
    for key in TEXT_TOKENS:
        tokens[key] = fresh[key]
    return dataclasses.replace(fmt, tokens=MappingProxyType(tokens), names=names)


def with_pivot_year(fmt: Formatter, year: int) -> Formatter:
    """Return a copy of ``fmt`` reading two-digit years near ``year``.

    Two-digit years resolve into the window year - 50 to year + 49.
    """
    return dataclasses.replace(fmt, pivot_year=year)


def _as_timezone(zone: Timezone | str | None) -> Timezone:
    if zone is None:
        return Timezone.utc()
    if isinstance(zone, str):
        return Timezone.from_string(zone)
    return zone


__all__ = [
    "DEFAULT_POST_SUBSTITUTIONS",
    "DEFAULT_PRE_SUBSTITUTIONS",
    "Formatter",
    "InstantKind",
    "PostRule",
    "TEXT_TOKENS",
    "as_kind",
    "formatter",
    "formatter_local",
    "not_implemented",
    "with_default_year",
    "with_locale",
    "with_pivot_year",
    "with_zone",
]
