from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictStr

from string_analyzer.models import StringRecord


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class FilterCriteria(BaseModel):
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the criteria that were actually set"""
        return self.model_dump(exclude_none=True)


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    records: int
