"""
SearchServer - in-memory document indexer and ranked query engine.

Ingestion:
    add_document() → tokenize → validate → drop stop words → InvertedIndex
                                                          → DocumentStore
Query:
    find_top_documents() → parse_query → TfIdfRanker (index + store)

Not thread-safe: callers sharing one instance across threads must
serialize add_document() against all readers.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .document_store import DocumentStatus, DocumentStore
from .errors import InvalidInputError
from .inverted_index import InvertedIndex
from .query import Query, parse_query
from .scorer import Document, DocumentPredicate, TfIdfRanker, status_is
from .stop_words import StopWordSet
from .tokenizer import split_into_words, validate_words

logger = logging.getLogger(__name__)


class SearchServer:
    """
    Full-text search over short documents with TF-IDF ranking.

    Example:
        >>> server = SearchServer("and with")
        >>> server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
        >>> server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2, 3])
        >>> [doc.id for doc in server.find_top_documents("curly")]
        [2]
    """

    def __init__(self, stop_words: Union[str, Iterable[str], StopWordSet, None] = None, ranker: Optional[TfIdfRanker] = None):
        """
        Initialize an empty engine.

        Args:
            stop_words: Space-delimited string, iterable of words, or StopWordSet
            ranker: Custom ranker (default: top 5, ties within 1e-6)

        Raises:
            InvalidInputError: If a stop word contains a control character
        """
        if isinstance(stop_words, StopWordSet):
            self.stop_words = stop_words
        else:
            self.stop_words = StopWordSet(stop_words)
        self.ranker = ranker or TfIdfRanker()
        self._index = InvertedIndex()
        self._store = DocumentStore()

    @classmethod
    def from_text(cls, stop_words: str) -> "SearchServer":
        """Engine with stop words given as a space-delimited string"""
        return cls(StopWordSet.from_text(stop_words))

    @classmethod
    def from_words(cls, stop_words: Iterable[str]) -> "SearchServer":
        """Engine with stop words given as an iterable of strings"""
        return cls(StopWordSet.from_words(stop_words))

    def _split_into_words_no_stop(self, text: str) -> List[str]:
        words = split_into_words(text)
        validate_words(words)
        return [word for word in words if word not in self.stop_words]

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = ()
    ) -> None:
        """
        Index a new document.

        All validation happens before anything is stored, so a failed call
        leaves the engine unchanged.

        Args:
            document_id: Non-negative unique id
            document: Space-delimited text
            status: Document status
            ratings: Raw ratings (average truncated toward zero, 0 if empty)

        Raises:
            InvalidInputError: Negative/duplicate id or control characters in text
        """
        self._store.check_new_id(document_id)
        words = self._split_into_words_no_stop(document)

        self._index.add(document_id, words)
        self._store.register(document_id, status, ratings)

        logger.debug(f"Added document {document_id} ({len(words)} indexed words, status={status})")

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self.stop_words)

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: Union[DocumentStatus, DocumentPredicate, None] = None
    ) -> List[Document]:
        """
        Top documents for a query.

        Args:
            raw_query: Query string ("curly -dog")
            status_or_predicate:
                None - only ACTUAL documents
                DocumentStatus - only documents with that status
                callable(document_id, status, rating) -> bool - custom filter

        Returns:
            Up to 5 Documents ordered by relevance, then rating

        Raises:
            InvalidInputError: Malformed query syntax
        """
        if status_or_predicate is None:
            predicate = status_is(DocumentStatus.ACTUAL)
        elif isinstance(status_or_predicate, DocumentStatus):
            predicate = status_is(status_or_predicate)
        elif callable(status_or_predicate):
            predicate = status_or_predicate
        else:
            raise InvalidInputError(
                f"Expected DocumentStatus or predicate, got {type(status_or_predicate).__name__}"
            )

        query = self.parse_query(raw_query)
        return self.ranker.rank(query, self._index, self._store, predicate)

    def get_document_count(self) -> int:
        return len(self._store)

    def get_document_id(self, index: int) -> int:
        """
        Id of the document added at insertion position index.

        Raises:
            OutOfRangeError: If index is outside [0, document count)
        """
        return self._store.id_at(index)

    def get_document(self, document_id: int):
        """Stored DocumentRecord or None"""
        return self._store.get(document_id)

    def get_word_frequencies(self, document_id: int):
        """{term: tf} for one document (empty for unknown ids)"""
        return self._index.get_word_frequencies(document_id)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Inclusion terms of a query found in one document.

        Args:
            raw_query: Query string
            document_id: Registered document id

        Returns:
            (matched_words, status) - matched_words sorted, and empty if the
            document contains any exclusion term

        Raises:
            InvalidInputError: Unknown document id or malformed query
        """
        record = self._store.get(document_id)
        if record is None:
            raise InvalidInputError(f"There is no document with ID: {document_id}")

        query = self.parse_query(raw_query)

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return [], record.status

        matched_words = sorted(
            word for word in query.plus_words
            if self._index.contains(word, document_id)
        )
        return matched_words, record.status

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[int]:
        return iter(self._store)
