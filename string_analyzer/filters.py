from typing import Callable, Iterable, List

from string_analyzer.models import StringRecord
from string_analyzer.schemas import FilterCriteria

Predicate = Callable[[StringRecord], bool]


def build_predicates(criteria: FilterCriteria) -> List[Predicate]:
    """Turn each present criterion into a predicate over a record"""
    predicates: List[Predicate] = []

    if criteria.is_palindrome is not None:
        predicates.append(lambda r: r.properties.is_palindrome == criteria.is_palindrome)

    if criteria.min_length is not None:
        predicates.append(lambda r: r.properties.length >= criteria.min_length)

    if criteria.max_length is not None:
        predicates.append(lambda r: r.properties.length <= criteria.max_length)

    if criteria.word_count is not None:
        predicates.append(lambda r: r.properties.word_count == criteria.word_count)

    if criteria.contains_character is not None:
        # plain substring containment, any length accepted
        predicates.append(lambda r: criteria.contains_character in r.value)

    return predicates


def filter_records(
    records: Iterable[StringRecord], criteria: FilterCriteria
) -> List[StringRecord]:
    """Keep records matching every present criterion"""
    predicates = build_predicates(criteria)
    return [r for r in records if all(p(r) for p in predicates)]
