from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from string_analyzer.api.responses import RecordJSONResponse
from string_analyzer.errors import MissingFieldError
from string_analyzer.filters import filter_records
from string_analyzer.models import StringRecord
from string_analyzer.schemas import (
    FilterCriteria,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
)
from string_analyzer.services.query_parser import parse_natural_language_query
from string_analyzer.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record = store.create(string_data.value)
    logger.info(f"Created string analysis {record.id}")
    return RecordJSONResponse(record, status_code=status.HTTP_201_CREATED)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None),
    max_length: Optional[int] = Query(None),
    word_count: Optional[int] = Query(None),
    contains_character: Optional[str] = Query(None),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    criteria = FilterCriteria(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    data = filter_records(store.list(), criteria)
    logger.info(f"Filtered {len(store)} strings with {criteria.applied()} -> {len(data)}")

    return RecordJSONResponse(StringListResponse(
        data=data,
        count=len(data),
        filters_applied=criteria.applied(),
    ))


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise MissingFieldError("Missing 'query' parameter")

    criteria = parse_natural_language_query(query)
    data = filter_records(store.list(), criteria)

    return RecordJSONResponse(NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=criteria.applied(),
        ),
    ))


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return RecordJSONResponse(store.get(string_value))


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    store.delete(string_value)
    logger.info(f"Deleted string {store.identity_of(string_value)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
