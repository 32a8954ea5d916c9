"""Error kinds raised by the string analyzer core and rendered by the API."""

from fastapi import status


class StringAnalyzerError(Exception):
    """Base error, carries the HTTP status the API answers with."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MissingFieldError(StringAnalyzerError):
    """Required field absent from the request body."""

    def __init__(self, message: str = 'Missing "value" field'):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class InvalidTypeError(StringAnalyzerError):
    """Field present but of the wrong type."""

    def __init__(self, message: str = '"value" must be a string'):
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)


class ConflictError(StringAnalyzerError):
    """String already exists in the system."""

    def __init__(self, message: str = "String already exists in the system"):
        super().__init__(message, status.HTTP_409_CONFLICT)


class NotFoundError(StringAnalyzerError):
    """String does not exist in the system."""

    def __init__(self, message: str = "String does not exist in the system"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class UnrecognizedQueryError(StringAnalyzerError):
    """Natural language query matched none of the known phrases."""

    def __init__(self, message: str = "Unable to parse natural language query"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)
