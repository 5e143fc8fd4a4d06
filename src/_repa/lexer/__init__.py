"""
The lexer matches the terminals a recognizer expects at the start of an input
buffer, and offers every match to the recognizer as an alternative. This way
the grammar, not the lexer, decides between ambiguous tokens.

A token is either a literal string or a compiled regular expression, which
must never match the empty string. The buffer is read from the stream in
chunks. A pattern match that runs up to the end of the buffer is only
accepted once the buffer could not be grown any further, so a token is not cut
short by a chunk boundary. It can still be cut short by the end of the stream.
"""

from .errors import InvalidStoreMode, InvalidTokenSpec, LexerConfigurationError
from .lexer import Lexer, Outcome, Recognition
from .store import DISCARD, StoreMode, TokenValue, is_discarded

__all__ = [
    "DISCARD",
    "InvalidStoreMode",
    "InvalidTokenSpec",
    "Lexer",
    "LexerConfigurationError",
    "Outcome",
    "Recognition",
    "StoreMode",
    "TokenValue",
    "is_discarded",
]
