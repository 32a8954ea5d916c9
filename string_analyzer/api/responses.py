import json
from datetime import datetime
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


def encode_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class RecordJSONResponse(JSONResponse):
    """
    JSON response for stored strings.

    Stored values may hold any Python string, lone surrogates included, so the
    body is rendered ASCII-escaped ("\\ud800") instead of raw UTF-8.
    """

    def __init__(self, content: Any, status_code: int = 200, **kwargs):
        if isinstance(content, BaseModel):
            content = content.model_dump()
        super().__init__(content=content, status_code=status_code, **kwargs)

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
            default=encode_default,
        ).encode("utf-8")
