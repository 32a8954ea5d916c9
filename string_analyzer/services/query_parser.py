"""
Natural language query parsing.

Translates a small fixed vocabulary of phrases into FilterCriteria. Each rule
is checked independently against the lowercased query, in order, and every
rule that fires contributes its filters (a later rule overwrites an earlier
one on the same key). Examples:

- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters"   -> {min_length: 11}
- "strings containing the letter z"     -> {contains_character: "z"}
"""

import logging
import re
import sys
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from string_analyzer.errors import UnrecognizedQueryError
from string_analyzer.schemas import FilterCriteria

logger = logging.getLogger(__name__)

LONGER_THAN = re.compile(r"longer than ([0-9]+)")
# bounds with more digits than this are treated as unbounded
MAX_BOUND_DIGITS = 18
LETTER = re.compile(r"letter\s([a-z])")


class QueryRule(NamedTuple):
    name: str
    apply: Callable[[str], Optional[Dict[str, Any]]]


def _palindromic(query: str) -> Optional[Dict[str, Any]]:
    if "palindromic" in query:
        return {"is_palindrome": True}
    return None


def _single_word(query: str) -> Optional[Dict[str, Any]]:
    if "single word" in query:
        return {"word_count": 1}
    return None


def _longer_than(query: str) -> Optional[Dict[str, Any]]:
    match = LONGER_THAN.search(query)
    if match:
        digits = match.group(1).lstrip("0") or "0"
        bound = int(digits) if len(digits) <= MAX_BOUND_DIGITS else sys.maxsize
        # strictly longer than N
        return {"min_length": bound + 1}
    return None


def _containing_letter(query: str) -> Optional[Dict[str, Any]]:
    if "containing the letter" not in query:
        return None
    match = LETTER.search(query)
    if match:
        return {"contains_character": match.group(1)}
    return None


def _first_vowel(query: str) -> Optional[Dict[str, Any]]:
    if "containing the first vowel" in query:
        return {"contains_character": "a"}
    return None


RULES: List[QueryRule] = [
    QueryRule("palindromic", _palindromic),
    QueryRule("single_word", _single_word),
    QueryRule("longer_than", _longer_than),
    QueryRule("containing_letter", _containing_letter),
    QueryRule("first_vowel", _first_vowel),
]


def parse_natural_language_query(query: str) -> FilterCriteria:
    """
    Parse natural language query into filter criteria.
    Raises UnrecognizedQueryError when no rule matches.
    """
    lowered = query.lower()
    filters: Dict[str, Any] = {}
    matched = []

    for rule in RULES:
        contribution = rule.apply(lowered)
        if contribution:
            filters.update(contribution)
            matched.append(rule.name)

    if not filters:
        raise UnrecognizedQueryError()

    logger.info(f"Interpreted '{query}' via rules {matched}: {filters}")
    return FilterCriteria(**filters)
