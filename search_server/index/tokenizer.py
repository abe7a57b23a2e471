"""
Tokenizer for document and query text.

Tokenization rules:
1. Split on the space character only (tabs/newlines are NOT separators)
2. Drop empty tokens produced by repeated spaces
3. Preserve original order and case

Validation:
A token is invalid if it contains any control character (code < 0x20).
Control characters are rejected rather than stripped so that ingestion
and query parsing fail loudly on malformed input.
"""

from typing import Iterable, List

from .errors import InvalidInputError


def split_into_words(text: str) -> List[str]:
    """
    Split text into space-delimited tokens.
    
    Args:
        text: Raw document or query text
        
    Returns:
        List of non-empty tokens in original order
        
    Examples:
        >>> split_into_words("funny  pet and nasty rat")
        ['funny', 'pet', 'and', 'nasty', 'rat']
        
        >>> split_into_words("   ")
        []
    """
    if not text:
        return []
    
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """
    Check that a token has no control characters.
    
    Examples:
        >>> is_valid_word("curly")
        True
        >>> is_valid_word("cur\\x12ly")
        False
    """
    return not any(ord(char) < 0x20 for char in word)


def validate_words(words: Iterable[str], context: str = "Word") -> None:
    """
    Raise InvalidInputError for the first token containing a control character.
    
    Args:
        words: Tokens to check
        context: Prefix for the error message ("Word", "Stop word", ...)
    """
    for word in words:
        if not is_valid_word(word):
            raise InvalidInputError(f"{context} {word!r} contains special symbol")
