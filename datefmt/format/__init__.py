"""Pattern formatting and parsing.

This module provides the formatter builder, the unparse and parse
engines, the offset normalizer and the registry of named formatters.

Functions:
    formatter: Build a formatter for offset-bearing DateTimes.
    formatter_local: Build a zone-naive formatter.
    unparse: Render an instant with a formatter.
    parse: Parse text with a formatter, or guess one from the registry.
    timezone_adjustment: Shift an instant by a trailing offset.
    show_formatters: Print every registry printer's rendering.

Examples:
    >>> from datefmt.format import FORMATTERS, unparse
    >>> from datefmt.core import DateTime
    >>> unparse(FORMATTERS["basic_date"], DateTime(2010, 10, 3))
    '20101003'
"""

from __future__ import annotations

from datefmt.format.formatter import (
    Formatter,
    InstantKind,
    formatter,
    formatter_local,
    not_implemented,
    with_default_year,
    with_locale,
    with_pivot_year,
    with_zone,
)
from datefmt.format.offset import timezone_adjustment
from datefmt.format.parse import (
    ParseAttempt,
    parse,
    parse_attempts,
    parse_local,
    parse_local_date,
)
from datefmt.format.registry import (
    FORMATTERS,
    PARSERS,
    PRINTERS,
    get_formatter,
    show_formatters,
)
from datefmt.format.tokens import DEFAULT_TOKENS, token_table
from datefmt.format.unparse import unparse, unparse_local, unparse_local_date

__all__: list[str] = [
    # Builder
    "Formatter",
    "InstantKind",
    "formatter",
    "formatter_local",
    "not_implemented",
    "with_default_year",
    "with_locale",
    "with_pivot_year",
    "with_zone",
    # Tokens
    "DEFAULT_TOKENS",
    "token_table",
    # Engines
    "unparse",
    "unparse_local",
    "unparse_local_date",
    "ParseAttempt",
    "parse",
    "parse_attempts",
    "parse_local",
    "parse_local_date",
    "timezone_adjustment",
    # Registry
    "FORMATTERS",
    "PARSERS",
    "PRINTERS",
    "get_formatter",
    "show_formatters",
]
