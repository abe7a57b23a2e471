"""
Inverted index - maps terms to per-document normalized term frequencies.

Structure:
    {
        "curly": {2: 0.25},
        "funny": {1: 0.25, 2: 0.25},
        ...
    }

Each occurrence of a term adds 1/(document token count) to its frequency,
so the frequencies of one document sum to 1.0 across its distinct terms.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)


class InvertedIndex:
    """Term → {document id → normalized term frequency}"""
    
    def __init__(self):
        self._word_to_document_freqs: Dict[str, Dict[int, float]] = defaultdict(dict)
    
    def add(self, document_id: int, words: List[str]) -> None:
        """
        Index the (already validated, stop-word free) words of a document.
        
        Args:
            document_id: Id of the document being indexed
            words: Document tokens after stop-word removal
        
        Example:
            >>> index = InvertedIndex()
            >>> index.add(1, ["funny", "pet", "nasty", "rat"])
            >>> index.get_word_frequencies(1)
            {'funny': 0.25, 'pet': 0.25, 'nasty': 0.25, 'rat': 0.25}
        """
        if not words:
            logger.debug(f"Document {document_id} has no indexable words")
            return
        
        inv_word_count = 1.0 / len(words)
        for word in words:
            document_freqs = self._word_to_document_freqs[word]
            document_freqs[document_id] = document_freqs.get(document_id, 0.0) + inv_word_count
        
        logger.debug(f"Indexed document {document_id}: {len(set(words))} unique terms from {len(words)} words")
    
    def __contains__(self, word: object) -> bool:
        return word in self._word_to_document_freqs
    
    def __len__(self) -> int:
        return len(self._word_to_document_freqs)
    
    def documents_with(self, word: str) -> Mapping[int, float]:
        """
        Documents containing a word, ordered by ascending document id.
        
        Returns an empty mapping for unknown words.
        """
        document_freqs = self._word_to_document_freqs.get(word)
        if not document_freqs:
            return {}
        return dict(sorted(document_freqs.items()))
    
    def document_frequency(self, word: str) -> int:
        """Number of documents containing the word"""
        return len(self._word_to_document_freqs.get(word, ()))
    
    def contains(self, word: str, document_id: int) -> bool:
        """True if the word is indexed for the document"""
        return document_id in self._word_to_document_freqs.get(word, ())
    
    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        """{term: tf} map for one document (empty for unknown ids)"""
        return {
            word: document_freqs[document_id]
            for word, document_freqs in self._word_to_document_freqs.items()
            if document_id in document_freqs
        }
