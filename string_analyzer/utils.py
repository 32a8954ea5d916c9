import hashlib
import re
from collections import Counter
from typing import Callable, Dict

from string_analyzer.models import StringProperties

WHITESPACE_RUN = re.compile(r"\s+")
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    # lone surrogates hash as U+FFFD, the way UTF-8 encoders on the web do
    encoded = LONE_SURROGATE.sub("\ufffd", text).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


def canonicalize(text: str) -> str:
    """Lowercase, collapse whitespace runs to one space and trim"""
    return WHITESPACE_RUN.sub(" ", text.lower()).strip()


def is_palindrome(text: str) -> bool:
    """
    Check if string is palindrome, ignoring case and whitespace-run differences.
    Punctuation is kept, so "Madam, I'm Adam" is not a palindrome.
    """
    cleaned = canonicalize(text)
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count whitespace separated tokens of the trimmed string"""
    # an empty or all-whitespace string still splits into one (empty) token
    return len(WHITESPACE_RUN.split(text.strip()))


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str, hasher: Callable[[str], str] = compute_sha256) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=hasher(value),
        character_frequency_map=get_character_frequency(value),
    )
