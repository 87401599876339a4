"""Tests for pattern compilation."""

from __future__ import annotations

import pytest

from datefmt.errors import PatternError
from datefmt.format.pattern import Segment, SegmentKind, compile_pattern, split_quoted
from datefmt.format.tokens import DEFAULT_TOKENS

KEYS = frozenset(DEFAULT_TOKENS)


def kinds(segments: tuple[Segment, ...]) -> list[tuple[str, str]]:
    return [(s.kind.value, s.text) for s in segments]


class TestSplitQuoted:
    """Tests for quote handling."""

    def test_plain(self) -> None:
        """A pattern without quotes is one unquoted run."""
        assert split_quoted("yyyy-MM") == [(False, "yyyy-MM")]

    def test_quoted_run(self) -> None:
        """Quoted text is its own run."""
        assert split_quoted("yyyy'T'HH") == [(False, "yyyy"), (True, "T"), (False, "HH")]

    def test_doubled_quote(self) -> None:
        """'' is one literal quote, inside or outside quotes."""
        assert split_quoted("HH''mm") == [(False, "HH'mm")]
        assert split_quoted("'o''clock'") == [(True, "o'clock")]

    def test_unterminated_quote(self) -> None:
        """An open quote is an error."""
        with pytest.raises(PatternError, match="unterminated"):
            split_quoted("yyyy'T")


class TestCompilePattern:
    """Tests for compile_pattern."""

    def test_standard_and_literal(self) -> None:
        """Tokens become STANDARD segments, punctuation LITERAL."""
        segments = compile_pattern("yyyy-MM-dd", KEYS)
        assert kinds(segments) == [
            ("standard", "yyyy"),
            ("literal", "-"),
            ("standard", "MM"),
            ("literal", "-"),
            ("standard", "dd"),
        ]

    def test_whole_run_is_one_token(self) -> None:
        """MMMM is one token, not four M tokens."""
        assert kinds(compile_pattern("MMMM", KEYS)) == [("standard", "MMMM")]
        assert kinds(compile_pattern("DDD", KEYS)) == [("standard", "DDD")]

    def test_quoted_letters_are_literal(self) -> None:
        """Quoted letters never become tokens and merge with neighbours."""
        segments = compile_pattern("dd'T'-HH", KEYS)
        assert kinds(segments) == [
            ("standard", "dd"),
            ("literal", "T-"),
            ("standard", "HH"),
        ]

    def test_unknown_letter(self) -> None:
        """An unquoted letter that starts no token is an error."""
        with pytest.raises(PatternError, match="unknown pattern letter 'T'"):
            compile_pattern("yyyyTHH", KEYS)

    def test_non_ascii_letters_are_literal(self) -> None:
        """Only ASCII letters are pattern letters."""
        assert kinds(compile_pattern("yyyy年", KEYS)) == [
            ("standard", "yyyy"),
            ("literal", "年"),
        ]

    def test_pre_substitution(self) -> None:
        """Pre-substitutions rewrite the pattern before scanning."""
        segments = compile_pattern("dow", KEYS, (("dow", "EEEE"),))
        assert kinds(segments) == [("standard", "EEEE")]

    def test_pre_substitution_skips_quoted_text(self) -> None:
        """Quoted text is not rewritten."""
        segments = compile_pattern("'dow' dow", KEYS, (("dow", "EEEE"),))
        assert kinds(segments) == [("literal", "dow "), ("standard", "EEEE")]

    def test_post_matchers_claim_custom_tokens(self) -> None:
        """Post-substitution matchers win over the token table."""
        segments = compile_pattern("dth HH:mmZZ", KEYS, (), ("dth", "ZZ+", "Z"))
        assert kinds(segments) == [
            ("custom", "dth"),
            ("literal", " "),
            ("standard", "HH"),
            ("literal", ":"),
            ("standard", "mm"),
            ("custom", "ZZ"),
        ]
        assert segments[0].rule == 0
        assert segments[-1].rule == 1

    def test_single_z_uses_basic_rule(self) -> None:
        """A lone Z is claimed by the third matcher."""
        segments = compile_pattern("HHZ", KEYS, (), ("dth", "ZZ+", "Z"))
        assert segments[-1] == Segment(SegmentKind.CUSTOM, "Z", 2)

    def test_compilation_is_cached(self) -> None:
        """The same arguments return the same segments object."""
        first = compile_pattern("yyyy-'W'ww", KEYS)
        assert compile_pattern("yyyy-'W'ww", KEYS) is first

    def test_compilation_cache_is_bounded(self) -> None:
        """Compiled patterns are kept in a bounded LRU cache."""
        assert compile_pattern.cache_info().maxsize == 256


class TestLetterRuns:
    """Tests for scanning runs of one repeated letter."""

    @pytest.mark.parametrize("pattern", ["SS", "ddd", "HHH", "MMMMM", "yyyyy", "GGG"])
    def test_run_is_one_token(self, pattern: str) -> None:
        """A run of one letter is never split into smaller tokens."""
        assert kinds(compile_pattern(pattern, KEYS)) == [("standard", pattern)]

    def test_run_ends_at_letter_change(self) -> None:
        """Adjacent runs of different letters are separate tokens."""
        assert kinds(compile_pattern("yyyyMMdd", KEYS)) == [
            ("standard", "yyyy"),
            ("standard", "MM"),
            ("standard", "dd"),
        ]

    def test_named_tokens_before_runs(self) -> None:
        """Named tokens such as dow are matched before letter runs."""
        assert kinds(compile_pattern("dow dd", KEYS)) == [
            ("standard", "dow"),
            ("literal", " "),
            ("standard", "dd"),
        ]

    def test_time_zone_names_unsupported(self) -> None:
        """z is reserved but cannot be used."""
        with pytest.raises(PatternError, match="time zone names are not supported"):
            compile_pattern("HH:mm z", KEYS)
