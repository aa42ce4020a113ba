"""
Service Errors

Custom exception classes shared across the progress and vocabulary services.

Only two situations are errors in this project:
- A raw collection that cannot be deserialized (MalformedRecordsError).
  The record loader raises and catches this itself, replacing the domain
  with an empty collection, so it never reaches presentation code.
- A vocabulary review for a word id that does not exist (WordNotFoundError).
  This is an input-contract violation and propagates to the caller.

Everything else (empty collections, zero denominators, unparsable dates)
degrades to a neutral value instead of raising.

Usage:
    from journey.errors import WordNotFoundError

    try:
        await service.mark_reviewed(word_id)
    except WordNotFoundError as e:
        logger.warning(e.message)
"""

from typing import Optional


class ServiceError(Exception):
    """
    Base exception for service errors.

    Provides consistent error handling with:
    - Error code for categorization
    - Optional details for debugging

    Example:
        raise ServiceError("Record store unavailable", error_code="store_error")
    """

    error_code: str = "service_error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details


class NotFoundError(ServiceError):
    """
    Resource not found error.

    Raised when a requested record doesn't exist.
    """

    error_code = "not_found"


class WordNotFoundError(NotFoundError):
    """Raised when a vocabulary operation names a word id that doesn't exist."""

    def __init__(self, word_id: str):
        self.word_id = word_id
        super().__init__(
            f"Vocabulary word {word_id} not found",
            details={"word_id": word_id},
        )


class MalformedRecordsError(ServiceError):
    """
    Raw collection could not be deserialized.

    Raised when stored JSON is invalid, has the wrong container type, or
    fails record validation.
    """

    error_code = "malformed_records"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(
            f"Malformed records under '{key}': {reason}",
            details={"key": key},
        )
