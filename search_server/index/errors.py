"""
Error taxonomy for the search engine.

Two kinds of failure exist:
- INVALID_INPUT: negative/duplicate document id, control characters in a
  document, stop word or query term, malformed exclusion syntax ("-", "--x"),
  unknown document id in match_document, non-positive page size
- OUT_OF_RANGE: get_document_id() called with an index outside [0, count)

Unknown query terms are never an error - they simply match nothing.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable category attached to every engine error"""
    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"


class SearchServerError(Exception):
    """Base class for all errors raised by the search engine"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(SearchServerError, ValueError):
    """Caller passed a value the engine refuses to index or parse"""

    kind = ErrorKind.INVALID_INPUT


class OutOfRangeError(SearchServerError, IndexError):
    """Positional lookup outside the insertion sequence"""

    kind = ErrorKind.OUT_OF_RANGE
