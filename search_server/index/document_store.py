"""
Per-document metadata storage.

Holds one DocumentRecord (average rating + status) per document id and
the append-only sequence of ids in the order they were added.
Records are never updated or removed once registered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence

from .errors import InvalidInputError, OutOfRangeError

logger = logging.getLogger(__name__)


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"
    
    def __str__(self) -> str:
        return self.name
    
    @classmethod
    def parse(cls, value: str) -> "DocumentStatus":
        """Case-insensitive lookup by name ("actual", "BANNED", ...)"""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(status.name for status in cls)
            raise InvalidInputError(f"Unknown document status: {value!r}. Valid options: {valid}")


@dataclass(frozen=True)
class DocumentRecord:
    """Stored metadata for a single document"""
    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.
    
    Truncation (not floor) matters for negative sums:
        >>> compute_average_rating([-7, 2])
        -2
        >>> compute_average_rating([7, 2, 7])
        5
        >>> compute_average_rating([])
        0
    """
    if not ratings:
        return 0
    
    rating_sum = sum(ratings)
    # Floor division rounds toward -inf, so divide magnitudes and restore the sign
    average = abs(rating_sum) // len(ratings)
    return average if rating_sum >= 0 else -average


class DocumentStore:
    """Document id → DocumentRecord map plus insertion order"""
    
    def __init__(self):
        self._documents: Dict[int, DocumentRecord] = {}
        self._added_ids: List[int] = []
    
    def check_new_id(self, document_id: int) -> None:
        """Raise InvalidInputError if the id is negative or already registered"""
        if document_id < 0:
            raise InvalidInputError(f"Document was not added. Negative ID: {document_id}")
        if document_id in self._documents:
            raise InvalidInputError(f"Document was not added. ID {document_id} already exists")
    
    def register(self, document_id: int, status: DocumentStatus, ratings: Sequence[int]) -> DocumentRecord:
        """
        Register metadata for a new document.
        
        Args:
            document_id: Non-negative, not yet registered id
            status: Document status (immutable afterwards)
            ratings: Raw ratings, averaged with truncation toward zero
            
        Returns:
            The stored DocumentRecord
        """
        self.check_new_id(document_id)
        
        record = DocumentRecord(rating=compute_average_rating(ratings), status=status)
        self._documents[document_id] = record
        self._added_ids.append(document_id)
        
        logger.debug(f"Registered document {document_id}: rating={record.rating}, status={status}")
        return record
    
    def get(self, document_id: int) -> Optional[DocumentRecord]:
        return self._documents.get(document_id)
    
    def __getitem__(self, document_id: int) -> DocumentRecord:
        return self._documents[document_id]
    
    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents
    
    def __len__(self) -> int:
        return len(self._documents)
    
    def __iter__(self) -> Iterator[int]:
        return iter(self._added_ids)
    
    def id_at(self, index: int) -> int:
        """
        Document id at a given insertion position.
        
        Raises:
            OutOfRangeError: If index is outside [0, count)
        """
        if index < 0 or index >= len(self._added_ids):
            raise OutOfRangeError(
                f"There is no document at position {index} (document count: {len(self._added_ids)})"
            )
        return self._added_ids[index]
