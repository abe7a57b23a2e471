"""
Query parser - raw query string → Query(plus_words, minus_words).

Syntax:
- "word"   inclusion term (document should contain it)
- "-word"  exclusion term (document must NOT contain it)

Rejected with InvalidInputError:
- bare "-"
- doubled "--word"
- any term with a control character

Stop words are dropped from both sets, whatever their sign.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .errors import InvalidInputError
from .stop_words import StopWordSet
from .tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    """Parsed query with deduplicated inclusion and exclusion terms"""
    plus_words: FrozenSet[str] = frozenset()
    minus_words: FrozenSet[str] = frozenset()
    
    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words


def parse_query_word(text: str) -> Tuple[str, bool]:
    """
    Parse a single query token.
    
    Returns:
        (word, is_minus) tuple
        
    Raises:
        InvalidInputError: On "-", "--word" or control characters
    """
    is_minus = False
    if text.startswith("-"):
        text = text[1:]
        if not text:
            raise InvalidInputError("There is no word after '-' symbol in query")
        if text.startswith("-"):
            raise InvalidInputError("There are many '-' symbols in a row in query")
        is_minus = True
    
    if not is_valid_word(text):
        raise InvalidInputError(f"In query word {text!r} contains special symbol")
    
    return text, is_minus


def parse_query(raw_query: str, stop_words: StopWordSet) -> Query:
    """
    Parse a raw query string.
    
    Args:
        raw_query: Space-delimited query ("curly -dog")
        stop_words: Words to drop from both sets
        
    Returns:
        Query with plus_words/minus_words
        
    Example:
        >>> parse_query("curly -dog and curly", StopWordSet("and"))
        Query(plus_words=frozenset({'curly'}), minus_words=frozenset({'dog'}))
    """
    plus_words = set()
    minus_words = set()
    
    for token in split_into_words(raw_query):
        word, is_minus = parse_query_word(token)
        if word in stop_words:
            continue
        if is_minus:
            minus_words.add(word)
        else:
            plus_words.add(word)
    
    query = Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
    logger.debug(f"Parsed query {raw_query!r}: plus={sorted(plus_words)}, minus={sorted(minus_words)}")
    return query
