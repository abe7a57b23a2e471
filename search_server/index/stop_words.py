"""
Immutable stop-word set.

Stop words are dropped from documents before indexing and from queries
before matching, so they can never appear in the inverted index or in a
parsed Query.
"""

from typing import Iterable, Iterator, Union

from .errors import InvalidInputError
from .tokenizer import is_valid_word, split_into_words


class StopWordSet:
    """
    Set of tokens excluded from indexing and query matching.
    
    Accepts either a space-delimited string ("and with") or any iterable
    of strings (["and", "with"]). Empty strings in an iterable are skipped.
    """
    
    def __init__(self, stop_words: Union[str, Iterable[str], None] = None):
        if stop_words is None:
            words = []
        elif isinstance(stop_words, str):
            words = split_into_words(stop_words)
        else:
            words = [word for word in stop_words if word]
        
        for word in words:
            if not is_valid_word(word):
                raise InvalidInputError("Some of stop words contain special symbols")
        
        self._words = frozenset(words)
    
    @classmethod
    def from_text(cls, text: str) -> "StopWordSet":
        """Build from a space-delimited string"""
        return cls(split_into_words(text))
    
    @classmethod
    def from_words(cls, words: Iterable[str]) -> "StopWordSet":
        """Build from an iterable of words"""
        return cls(list(words))
    
    def is_stop_word(self, word: str) -> bool:
        return word in self._words
    
    def __contains__(self, word: object) -> bool:
        return word in self._words
    
    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
    
    def __len__(self) -> int:
        return len(self._words)
    
    def __repr__(self) -> str:
        return f"StopWordSet({sorted(self._words)!r})"
