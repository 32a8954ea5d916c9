from datetime import datetime
from typing import Dict

from pydantic import BaseModel


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    id: str  # SHA-256 hash of value
    value: str
    properties: StringProperties
    created_at: datetime

    model_config = {"frozen": True}
