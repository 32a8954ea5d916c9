"""
In-memory record store.

Records are keyed by the content hash of their raw value. The store is a plain
object owned by the app (``app.state.store``) and handed to routes through the
``get_store`` dependency, so tests can build isolated instances.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List

from fastapi import Request

from string_analyzer.errors import ConflictError, NotFoundError
from string_analyzer.models import StringRecord
from string_analyzer.utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StringStore:
    """Create-once mapping from identity hash to StringRecord."""

    def __init__(
        self,
        hasher: Callable[[str], str] = compute_sha256,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._hasher = hasher
        self._clock = clock
        self._records: Dict[str, StringRecord] = {}

    def identity_of(self, value: str) -> str:
        return self._hasher(value)

    def create(self, value: str) -> StringRecord:
        """Analyze and store a string. Raises ConflictError if it already exists."""
        string_id = self.identity_of(value)
        if string_id in self._records:
            raise ConflictError()

        record = StringRecord(
            id=string_id,
            value=value,
            properties=analyze_string(value, hasher=self._hasher),
            created_at=self._clock(),
        )
        self._records[string_id] = record
        logger.debug(f"Stored string {string_id[:12]}")
        return record

    def get(self, value: str) -> StringRecord:
        """Get a record by its raw value. Raises NotFoundError if absent."""
        try:
            return self._records[self.identity_of(value)]
        except KeyError:
            raise NotFoundError() from None

    def delete(self, value: str) -> None:
        """Delete a record by its raw value. Raises NotFoundError if absent."""
        string_id = self.identity_of(value)
        if string_id not in self._records:
            raise NotFoundError()
        del self._records[string_id]
        logger.debug(f"Removed string {string_id[:12]}")

    def list(self) -> List[StringRecord]:
        """All records in insertion order"""
        return list(self._records.values())

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.identity_of(value) in self._records


def get_store(request: Request) -> StringStore:
    """Dependency to provide the app's string store."""
    return request.app.state.store
