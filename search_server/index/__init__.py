"""
In-memory full-text index with TF-IDF ranking.

Components:
- tokenizer: Space-delimited splitting and control-character validation
- stop_words: Immutable set of words excluded from indexing and queries
- document_store: Per-document rating/status and insertion order
- inverted_index: Term → {document id → normalized term frequency}
- query: Raw query → inclusion/exclusion term sets
- scorer: TF-IDF relevance, filtering, tie-breaking, top-5 truncation
- paginator: Fixed-size page views over ranked results
- engine: SearchServer facade tying everything together
"""

from .document_store import DocumentRecord, DocumentStatus
from .engine import SearchServer
from .errors import ErrorKind, InvalidInputError, OutOfRangeError, SearchServerError
from .paginator import Page, Paginator, paginate
from .query import Query, parse_query
from .scorer import MAX_RESULT_DOCUMENT_COUNT, Document, TfIdfRanker, status_is
from .stop_words import StopWordSet
from .tokenizer import is_valid_word, split_into_words

__all__ = [
    "SearchServer",
    "Document",
    "DocumentRecord",
    "DocumentStatus",
    "StopWordSet",
    "Query",
    "parse_query",
    "TfIdfRanker",
    "status_is",
    "MAX_RESULT_DOCUMENT_COUNT",
    "Page",
    "Paginator",
    "paginate",
    "split_into_words",
    "is_valid_word",
    "ErrorKind",
    "SearchServerError",
    "InvalidInputError",
    "OutOfRangeError",
]
