"""
TF-IDF ranker.

TF-IDF (term frequency × inverse document frequency) is the classic
vector-space relevance measure: a term counts for more when it is frequent
inside a document and rare across the collection.

Formula:
    relevance(doc) = Σ tf(term, doc) × idf(term)   over inclusion terms
    idf(term)      = ln(N / df(term))

Where:
    tf = normalized term frequency (occurrences / document token count)
    N  = total number of documents
    df = number of documents containing the term

Ranking:
    1. Sort by relevance (descending)
    2. Relevances closer than 1e-6 are ties, broken by rating (descending)
    3. Remaining ties keep ascending document id order
    4. Keep the top 5
"""

import logging
import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Dict, List

from .document_store import DocumentStatus, DocumentStore
from .inverted_index import InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

# predicate(document_id, status, rating) -> keep document?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class Document:
    """Single ranked search result"""
    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


def status_is(status: DocumentStatus) -> DocumentPredicate:
    """Predicate keeping only documents with the given status"""
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status
    return predicate


class TfIdfRanker:
    """
    Scores, filters, sorts and truncates candidate documents.

    Reads the inverted index and document store, never mutates them.
    """

    def __init__(self, max_results: int = MAX_RESULT_DOCUMENT_COUNT, epsilon: float = RELEVANCE_EPSILON):
        """
        Initialize ranker.

        Args:
            max_results: Number of top documents to return
                Default: 5

            epsilon: Relevance difference below which two documents tie
                Ties are broken by rating
                Default: 1e-6
        """
        self.max_results = max_results
        self.epsilon = epsilon

    @staticmethod
    def inverse_document_freq(index: InvertedIndex, store: DocumentStore, word: str) -> float:
        """ln(N / df) for a word that is present in the index"""
        return math.log(len(store) / index.document_frequency(word))

    def score(
        self,
        query: Query,
        index: InvertedIndex,
        store: DocumentStore,
        predicate: DocumentPredicate
    ) -> Dict[int, float]:
        """
        Compute relevance for every document matching the query.

        Args:
            query: Parsed query
            index: Inverted index to read term frequencies from
            store: Document store to read status/rating from
            predicate: Filter applied before a document accumulates score

        Returns:
            {document_id: relevance} in ascending document id order.
            Documents holding any exclusion term are removed even if they
            never passed the predicate.
        """
        document_to_relevance: Dict[int, float] = {}

        for word in query.plus_words:
            if word not in index:
                continue

            idf = self.inverse_document_freq(index, store, word)
            for document_id, term_freq in index.documents_with(word).items():
                record = store[document_id]
                if predicate(document_id, record.status, record.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_freq * idf
                    )

        for word in query.minus_words:
            if word not in index:
                continue
            for document_id in index.documents_with(word):
                document_to_relevance.pop(document_id, None)

        return dict(sorted(document_to_relevance.items()))

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            # Higher rating first
            return (rhs.rating > lhs.rating) - (rhs.rating < lhs.rating)
        return -1 if lhs.relevance > rhs.relevance else 1

    def rank(
        self,
        query: Query,
        index: InvertedIndex,
        store: DocumentStore,
        predicate: DocumentPredicate
    ) -> List[Document]:
        """
        Top documents for a parsed query.

        Returns:
            At most max_results Documents, best first. Empty list when
            nothing matches.
        """
        relevances = self.score(query, index, store, predicate)

        matched_documents = [
            Document(id=document_id, relevance=relevance, rating=store[document_id].rating)
            for document_id, relevance in relevances.items()
        ]

        # sorted() is stable, so full ties keep ascending id order
        matched_documents = sorted(matched_documents, key=cmp_to_key(self._compare))

        logger.debug(f"Ranked {len(matched_documents)} matching documents, returning top {self.max_results}")

        return matched_documents[:self.max_results]
