"""Unparse engine: instant to text.

Rendering walks the compiled segments of a formatter. Literal and
standard segments are rendered first; custom segments are left open and
then filled, in pattern order, by their post-substitution rule, which
receives the draft output rendered so far. Because segments are filled
by position, literal text can never be mistaken for a custom token.
"""

from __future__ import annotations

import logging

from datefmt.core.date import LocalDate
from datefmt.errors import InstantTypeError, NotImplementedFormatError
from datefmt.format.formatter import Formatter, InstantKind, as_kind
from datefmt.format.pattern import SegmentKind
from datefmt.format.tokens import printer_for

logger = logging.getLogger(__name__)


def check_implemented(fmt: Formatter) -> None:
    """Raise NotImplementedFormatError for placeholder formatters."""
    if fmt.missing is not None:
        logger.debug("placeholder formatter %s used", fmt.missing)
        raise NotImplementedFormatError(f"{fmt.missing} not implemented yet")


def unparse(fmt: Formatter, instant: LocalDate) -> str:
    """Render an instant with a formatter.

    Args:
        fmt: The formatter.
        instant: A DateTime for UTC formatters, a LocalDateTime (or
            DateTime) for local formatters, any instant for date-only
            formatters.

    Returns:
        The rendered text.

    Raises:
        NotImplementedFormatError: If ``fmt`` is a placeholder.
        InstantTypeError: If ``instant`` is None or of the wrong type.

    Examples:
        >>> from datefmt.core import DateTime
        >>> from datefmt.format.formatter import formatter
        >>> unparse(formatter("yyyy-MM-dd"), DateTime(2010, 10, 3))
        '2010-10-03'
    """
    check_implemented(fmt)

    expected = fmt.kind.instant_class
    if instant is None or not isinstance(instant, expected):
        raise InstantTypeError(
            f"formatter for {fmt.pattern!r} expects {expected.__name__}, "
            f"got {type(instant).__name__}"
        )

    if fmt.kind is InstantKind.UTC:
        instant = instant.astimezone(fmt.zone)  # type: ignore[attr-defined]

    parts: list[str] = []
    open_slots: list[tuple[int, int]] = []
    for segment in fmt.segments:
        if segment.kind is SegmentKind.LITERAL:
            parts.append(segment.text)
        elif segment.kind is SegmentKind.STANDARD:
            parts.append(printer_for(fmt.tokens, segment.text)(instant))
        else:
            open_slots.append((len(parts), segment.rule))  # type: ignore[arg-type]
            parts.append("")

    for position, rule_index in open_slots:
        _, rule = fmt.post_substitutions[rule_index]
        parts[position] = rule("".join(parts), instant)

    return "".join(parts)


def unparse_local(fmt: Formatter, instant: LocalDate) -> str:
    """Render a zone-naive instant; zone tokens render as nothing."""
    return unparse(as_kind(fmt, InstantKind.LOCAL), instant)


def unparse_local_date(fmt: Formatter, instant: LocalDate) -> str:
    """Render a date; clock fields read as zero and zone tokens as nothing."""
    return unparse(as_kind(fmt, InstantKind.DATE), instant)


__all__ = [
    "check_implemented",
    "unparse",
    "unparse_local",
    "unparse_local_date",
]
