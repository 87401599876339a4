"""Pattern compilation into segments.

A pattern string is compiled once into a tuple of segments:

    LITERAL   text copied verbatim (non-letters, and anything quoted)
    STANDARD  a token table key or a run of one pattern letter (``SS``,
              ``MMMMM``), rendered by its printing function
    CUSTOM    a token claimed by a post-substitution rule, rendered last
              by that rule from the draft output and the instant

Unquoted text is scanned a token at a time: post-substitution matchers
first, then named tokens such as ``dow``, then the whole run of one
repeated letter. A run is never split, so ``SS`` is one token.

Quoting follows the usual pattern conventions: text between single quotes
is literal, and a doubled single quote is one literal quote character.
Pre-substitutions rewrite only the unquoted parts of the pattern, so a
quoted ``'dow'`` stays literal.

Examples:
    >>> [s.text for s in compile_pattern("yyyy-MM-dd'T'HH", frozenset({"yyyy", "MM", "dd", "HH"}))]
    ['yyyy', '-', 'MM', '-', 'dd', 'T', 'HH']
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum

from datefmt.errors import PatternError
from datefmt.format.tokens import PATTERN_LETTERS, UNSUPPORTED_LETTERS, is_letter_run


class SegmentKind(Enum):
    """Classification of a compiled pattern segment."""

    LITERAL = "literal"
    STANDARD = "standard"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Segment:
    """One piece of a compiled pattern.

    Attributes:
        kind: What the segment renders as.
        text: The literal text, or the token as written in the pattern.
        rule: For CUSTOM segments, the index of the post-substitution
            rule that renders it.
    """

    kind: SegmentKind
    text: str
    rule: int | None = None


def split_quoted(pattern: str) -> list[tuple[bool, str]]:
    """Split a pattern into (quoted, text) runs.

    Raises:
        PatternError: If a quote is left open.

    Examples:
        >>> split_quoted("HH 'o''clock'")
        [(False, 'HH '), (True, "o'clock")]
    """
    runs: list[tuple[bool, str]] = []
    buf: list[str] = []
    quoted = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if pattern.startswith("''", i):
                buf.append("'")
                i += 2
                continue
            if buf:
                runs.append((quoted, "".join(buf)))
                buf = []
            quoted = not quoted
            i += 1
            continue
        buf.append(char)
        i += 1

    if quoted:
        raise PatternError(f"unterminated quote in pattern {pattern!r}")
    if buf:
        runs.append((quoted, "".join(buf)))
    return runs


def _is_pattern_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _letter_run(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end] == text[start]:
        end += 1
    return text[start:end]


def _letter_error(text: str, index: int, pattern: str) -> str:
    letter = text[index]
    if letter in UNSUPPORTED_LETTERS:
        return f"pattern letter {letter!r} in {pattern!r}: {UNSUPPORTED_LETTERS[letter]}"
    return f"unknown pattern letter {letter!r} at {text[index:]!r} in {pattern!r}"


def _scan(
    text: str,
    keys: frozenset[str],
    named: list[str],
    post: list[re.Pattern[str]],
    pattern: str,
) -> list[Segment]:
    segments: list[Segment] = []
    literal: list[str] = []
    i = 0
    while i < len(text):
        if not _is_pattern_letter(text[i]):
            literal.append(text[i])
            i += 1
            continue

        if literal:
            segments.append(Segment(SegmentKind.LITERAL, "".join(literal)))
            literal = []

        for index, regex in enumerate(post):
            match = regex.match(text, i)
            if match and match.end() > i:
                segments.append(Segment(SegmentKind.CUSTOM, match.group(), index))
                i = match.end()
                break
        else:
            key = next((k for k in named if text.startswith(k, i)), None)
            if key is None:
                key = _letter_run(text, i)
                if key not in keys and key[0] not in PATTERN_LETTERS:
                    raise PatternError(_letter_error(text, i, pattern))
            segments.append(Segment(SegmentKind.STANDARD, key))
            i += len(key)

    if literal:
        segments.append(Segment(SegmentKind.LITERAL, "".join(literal)))
    return segments


@functools.lru_cache(maxsize=256)
def compile_pattern(
    pattern: str,
    keys: frozenset[str],
    pre_substitutions: tuple[tuple[str, str], ...] = (),
    post_matchers: tuple[str, ...] = (),
) -> tuple[Segment, ...]:
    """Compile a pattern into segments.

    Args:
        pattern: The raw pattern string.
        keys: Token table keys recognised as STANDARD tokens.
        pre_substitutions: Ordered (regex, replacement) rewrites applied
            to unquoted text before scanning.
        post_matchers: Ordered regexes claiming CUSTOM tokens; they are
            tried before the token table at every letter.

    Returns:
        The segments, with adjacent literal text merged.

    Raises:
        PatternError: If an unquoted letter starts no known token, or a
            quote is left open.
    """
    named = sorted((k for k in keys if not is_letter_run(k)), key=len, reverse=True)
    post = [re.compile(matcher) for matcher in post_matchers]

    segments: list[Segment] = []
    for quoted, text in split_quoted(pattern):
        if quoted:
            segments.append(Segment(SegmentKind.LITERAL, text))
            continue
        for regex, replacement in pre_substitutions:
            text = re.sub(regex, replacement, text)
        segments.extend(_scan(text, keys, named, post, pattern))

    return tuple(_merge_literals(segments))


def _merge_literals(segments: list[Segment]) -> list[Segment]:
    merged: list[Segment] = []
    for segment in segments:
        if (
            merged
            and segment.kind is SegmentKind.LITERAL
            and merged[-1].kind is SegmentKind.LITERAL
        ):
            merged[-1] = Segment(SegmentKind.LITERAL, merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return merged


__all__ = [
    "Segment",
    "SegmentKind",
    "compile_pattern",
    "split_quoted",
]
