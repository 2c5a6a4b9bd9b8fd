"""Unit tests for the sub-word boundary scanner."""

from __future__ import annotations

import pytest

from subword.scanner import (
    CharCategory,
    Direction,
    InvalidCountError,
    classify,
    find_next_end,
    find_next_start,
    find_prev_end,
    find_prev_start,
    is_subword_end,
    is_subword_start,
    iter_subwords,
    next_end,
    next_start,
    prev_end,
    prev_start,
    scan,
    split_subwords,
    subword_at,
)


def _starts(stream: str) -> list[int]:
    return [i for i in range(len(stream)) if is_subword_start(stream, i)]


def _ends(stream: str) -> list[int]:
    return [i for i in range(len(stream)) if is_subword_end(stream, i)]


class TestClassify:
    """Tests for character categories."""

    def test_ascii_categories(self) -> None:
        assert classify("A") is CharCategory.UPPER
        assert classify("z") is CharCategory.LOWER
        assert classify("7") is CharCategory.DIGIT
        assert classify("_") is CharCategory.UNDERSCORE
        assert classify(" ") is CharCategory.OTHER
        assert classify("\n") is CharCategory.OTHER
        assert classify("(") is CharCategory.OTHER

    def test_accented_letters_keep_case(self) -> None:
        assert classify("É") is CharCategory.UPPER
        assert classify("é") is CharCategory.LOWER

    def test_caseless_letter_continues_lowercase_run(self) -> None:
        assert classify("中") is CharCategory.LOWER

    def test_separators(self) -> None:
        assert CharCategory.UNDERSCORE.is_separator
        assert CharCategory.OTHER.is_separator
        assert not CharCategory.DIGIT.is_separator


class TestGrammar:
    """Tests for the sub-word partition of identifiers."""

    def test_digit_run_is_atomic(self) -> None:
        assert split_subwords("Script31337Path") == ["Script", "31337", "Path"]
        assert _starts("Script31337Path") == [0, 6, 11]

    def test_acronym_split_before_capitalized_word(self) -> None:
        assert split_subwords("PathANDNameWITHOUTExtension") == [
            "Path",
            "AND",
            "Name",
            "WITHOUT",
            "Extension",
        ]

    def test_underscores_are_skipped(self) -> None:
        stream = "script_31337_path"
        assert split_subwords(stream) == ["script", "31337", "path"]
        assert _starts(stream) == [0, 7, 13]
        assert all(stream[i] != "_" for i in _starts(stream) + _ends(stream))

    def test_single_capital_before_digits(self) -> None:
        assert split_subwords("MapP1roblem") == ["Map", "P", "1", "roblem"]
        assert _starts("MapP1roblem") == [0, 3, 4, 5]

    def test_acronym_before_digits(self) -> None:
        assert split_subwords("ABC123") == ["ABC", "123"]

    def test_acronym_prefix(self) -> None:
        assert split_subwords("HTTPServer") == ["HTTP", "Server"]
        assert split_subwords("getHTTPResponseCode") == ["get", "HTTP", "Response", "Code"]

    def test_all_caps_identifier(self) -> None:
        assert split_subwords("MAX_VALUE") == ["MAX", "VALUE"]

    def test_lone_capital_at_token_start(self) -> None:
        assert split_subwords("X y") == ["X", "y"]
        assert _starts("X y") == [0, 2]

    def test_dunder_name(self) -> None:
        assert split_subwords("__init__") == ["init"]
        assert _starts("__init__") == [2]
        assert _ends("__init__") == [5]

    def test_only_separators(self) -> None:
        assert split_subwords("___ -- ") == []
        assert split_subwords("") == []

    def test_punctuation_separates_tokens(self) -> None:
        stream = "x = fooBar(baz_qux)"
        assert split_subwords(stream) == ["x", "foo", "Bar", "baz", "qux"]
        assert _starts(stream) == [0, 4, 7, 11, 15]

    def test_newline_separates_tokens(self) -> None:
        assert _starts("fooBar\nbaz") == [0, 3, 7]

    def test_iter_subwords_spans(self) -> None:
        words = list(iter_subwords("fooBar_1"))
        assert [(w.start, w.end, w.last, w.text) for w in words] == [
            (0, 3, 2, "foo"),
            (3, 6, 5, "Bar"),
            (7, 8, 7, "1"),
        ]
        assert [len(w) for w in words] == [3, 3, 1]


class TestSingleStepFinders:
    """Tests for the single-step boundary finders."""

    def test_find_next_start(self) -> None:
        stream = "Script31337Path"
        assert find_next_start(stream, 0) == 6
        assert find_next_start(stream, 6) == 11
        assert find_next_start(stream, 11) is None

    def test_find_next_start_excludes_current_offset(self) -> None:
        assert find_next_start("fooBar", 3) is None
        assert find_next_start("fooBar", 2) == 3

    def test_find_next_start_from_before_buffer(self) -> None:
        assert find_next_start("fooBar", -1) == 0
        assert find_next_start("fooBar", -10) == 0

    def test_find_prev_start(self) -> None:
        stream = "Script31337Path"
        assert find_prev_start(stream, 15) == 11
        assert find_prev_start(stream, 11) == 6
        assert find_prev_start(stream, 6) == 0
        assert find_prev_start(stream, 0) is None

    def test_find_prev_start_from_inside_word(self) -> None:
        assert find_prev_start("fooBar", 5) == 3

    def test_find_prev_start_past_buffer_end(self) -> None:
        assert find_prev_start("fooBar", 100) == 3

    def test_find_next_end(self) -> None:
        stream = "Script31337Path"
        assert find_next_end(stream, 0) == 5
        assert find_next_end(stream, 5) == 10
        assert find_next_end(stream, 10) == 14

    def test_find_next_end_at_buffer_end(self) -> None:
        stream = "fooBar"
        assert find_next_end(stream, 2) == 5
        assert find_next_end(stream, 3) == 5
        assert find_next_end(stream, 5) is None

    def test_find_next_end_single_character_buffer(self) -> None:
        assert find_next_end("A", -1) == 0
        assert find_next_end("A", 0) is None

    def test_find_next_end_skips_underscores(self) -> None:
        assert find_next_end("foo_bar", 2) == 6

    def test_find_prev_end(self) -> None:
        stream = "Script31337Path"
        assert find_prev_end(stream, 14) == 10
        assert find_prev_end(stream, 10) == 5
        assert find_prev_end(stream, 5) is None

    def test_empty_stream(self) -> None:
        assert find_next_start("", 0) is None
        assert find_prev_start("", 0) is None
        assert find_next_end("", 0) is None
        assert find_prev_end("", 0) is None


class TestScan:
    """Tests for repeated scans and clamping."""

    def test_count_advances_from_previous_match(self) -> None:
        result = scan("Script31337Path", 0, Direction.NEXT_START, count=2)
        assert result.offset == 11
        assert result.steps == 2
        assert not result.clamped
        assert result.moved

    def test_single_capital_then_digit_steps(self) -> None:
        stream = "MapP1roblem"
        assert next_start(stream, 0).offset == 3
        assert next_start(stream, 3).offset == 4
        assert next_start(stream, 4).offset == 5

    def test_forward_start_clamps_to_buffer_end(self) -> None:
        result = next_start("Script31337Path", 0, count=3)
        assert result.offset == 15
        assert result.steps == 2
        assert result.clamped

    def test_partial_run_lands_on_edge_not_last_match(self) -> None:
        result = next_end("fooBar  ", 0, count=3)
        assert next_end("fooBar  ", 0, count=2).offset == 5
        assert result.steps == 2
        assert result.offset == 7
        assert result.clamped

    def test_forward_end_clamps_to_last_character(self) -> None:
        result = next_end("fooBar", 5)
        assert result.offset == 5
        assert result.steps == 0
        assert result.clamped
        assert not result.moved

    def test_forward_end_reaches_last_character(self) -> None:
        result = next_end("fooBar", 2)
        assert result.offset == 5
        assert not result.clamped

    def test_backward_clamps_to_zero(self) -> None:
        result = prev_start("  fooBar", 5, count=5)
        assert result.offset == 0
        assert result.steps == 1
        assert result.clamped

    def test_prev_end(self) -> None:
        result = prev_end("fooBar baz", 8)
        assert result.offset == 5
        assert result.direction is Direction.PREV_END

    def test_empty_stream_clamps(self) -> None:
        for direction in Direction:
            result = scan("", 0, direction)
            assert result.offset == 0
            assert result.clamped

    @pytest.mark.parametrize("count", [0, -1, True, 1.5, "2"])
    def test_invalid_count_raises(self, count: object) -> None:
        with pytest.raises(InvalidCountError) as exc_info:
            scan("fooBar", 0, Direction.NEXT_START, count)  # type: ignore[arg-type]
        assert exc_info.value.count == count

    def test_invalid_count_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            next_end("fooBar", 0, count=0)


class TestSubwordAt:
    """Tests for looking up the sub-word under an offset."""

    def test_inside_word(self) -> None:
        word = subword_at("fooBarBaz", 4)
        assert word is not None
        assert (word.start, word.end, word.text) == (3, 6, "Bar")

    def test_on_separator(self) -> None:
        assert subword_at("foo_bar", 3) is None
        assert subword_at("foo bar", 3) is None

    def test_out_of_range(self) -> None:
        assert subword_at("foo", 3) is None
        assert subword_at("foo", -1) is None

    def test_digit_run(self) -> None:
        word = subword_at("Script31337Path", 8)
        assert word is not None
        assert word.text == "31337"
