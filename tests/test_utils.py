"""
Tests for hashing and string analysis.
"""

import hashlib

from string_analyzer.utils import (
    analyze_string,
    canonicalize,
    compute_sha256,
    count_words,
    get_character_frequency,
    is_palindrome,
)


class TestComputeSha256:
    """Tests for the identity hash."""

    def test_matches_hashlib_digest(self):
        assert compute_sha256("hello") == hashlib.sha256(b"hello").hexdigest()

    def test_is_deterministic(self):
        assert compute_sha256("same input") == compute_sha256("same input")

    def test_known_value_is_stable(self):
        # SHA-256 of the empty string
        assert compute_sha256("") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_fixed_length_hex(self):
        digest = compute_sha256("a much longer string with ünïcode ✓")
        assert len(digest) == 64
        assert all(c in "0123456789abcdef" for c in digest)

    def test_distinguishes_case_and_whitespace(self):
        assert compute_sha256("Racecar") != compute_sha256("racecar")
        assert compute_sha256("racecar ") != compute_sha256("racecar")


class TestPalindrome:
    """Tests for palindrome detection."""

    def test_canonicalize_lowercases_and_collapses_whitespace(self):
        assert canonicalize("  A \t man\n\n a  ") == "a man a"

    def test_simple_palindrome(self):
        assert is_palindrome("racecar") is True

    def test_case_insensitive(self):
        assert is_palindrome("RaceCar") is True

    def test_whitespace_runs_are_collapsed_not_removed(self):
        assert is_palindrome("ab  c   ba") is True
        assert is_palindrome("a  b a") is True
        assert is_palindrome("ab cba") is False

    def test_punctuation_is_not_stripped(self):
        assert is_palindrome("Madam, I'm Adam") is False

    def test_a_man_a_is_not_a_palindrome(self):
        assert is_palindrome("A man a") is False

    def test_empty_string_is_palindrome(self):
        assert is_palindrome("") is True


class TestWordCount:
    """Tests for word counting."""

    def test_single_word(self):
        assert count_words("hello") == 1

    def test_multiple_whitespace_runs(self):
        assert count_words("  hello \t  big\nworld  ") == 3

    def test_empty_string_counts_one(self):
        assert count_words("") == 1

    def test_whitespace_only_counts_one(self):
        assert count_words("   \t\n ") == 1


class TestAnalyzeString:
    """Tests for the full analysis."""

    def test_racecar(self):
        props = analyze_string("racecar")

        assert props.length == 7
        assert props.is_palindrome is True
        assert props.unique_characters == 4
        assert props.word_count == 1
        assert props.character_frequency_map == {"r": 2, "a": 2, "c": 2, "e": 1}

    def test_empty_string(self):
        props = analyze_string("")

        assert props.length == 0
        assert props.unique_characters == 0
        assert props.word_count == 1
        assert props.is_palindrome is True
        assert props.character_frequency_map == {}

    def test_raw_counts_are_case_and_whitespace_sensitive(self):
        props = analyze_string("Aa a")

        assert props.length == 4
        assert props.unique_characters == 3
        assert get_character_frequency("Aa a") == {"A": 1, "a": 2, " ": 1}
        assert props.character_frequency_map == {"A": 1, "a": 2, " ": 1}

    def test_sha256_hash_matches_identity(self):
        value = "hello world"
        assert analyze_string(value).sha256_hash == compute_sha256(value)

    def test_length_counts_code_points(self):
        assert analyze_string("héllo✓").length == 6


class TestLoneSurrogates:
    """Strings that cannot be encoded as UTF-8 as-is."""

    def test_hash_treats_lone_surrogate_as_replacement_character(self):
        assert compute_sha256("\ud800") == compute_sha256("\ufffd")
        assert compute_sha256("a\udfffb") == hashlib.sha256("a\ufffdb".encode("utf-8")).hexdigest()

    def test_analyze_lone_surrogate(self):
        props = analyze_string("\ud800")

        assert props.length == 1
        assert props.is_palindrome is True
        assert props.unique_characters == 1
        assert props.word_count == 1
        assert props.sha256_hash == compute_sha256("\ufffd")
        assert props.character_frequency_map == {"\ud800": 1}


def test_analyze_uses_given_hasher():
    props = analyze_string("abc", hasher=lambda value: hashlib.sha512(value.encode()).hexdigest())
    assert props.sha256_hash == hashlib.sha512(b"abc").hexdigest()
