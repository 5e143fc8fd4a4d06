import repa.version
from _repa.lexer import (
    DISCARD,
    InvalidStoreMode,
    InvalidTokenSpec,
    Lexer,
    LexerConfigurationError,
    Outcome,
    Recognition,
    StoreMode,
    TokenValue,
    is_discarded,
)
from _repa.recognizer import Advance, AdvanceKind, EarlemeRecognizer, Recognizer

__version__ = repa.version.version

__all__ = [
    "DISCARD",
    "Advance",
    "AdvanceKind",
    "EarlemeRecognizer",
    "InvalidStoreMode",
    "InvalidTokenSpec",
    "Lexer",
    "LexerConfigurationError",
    "Outcome",
    "Recognition",
    "Recognizer",
    "StoreMode",
    "TokenValue",
    "is_discarded",
]
