"""
A store mode decides what value a matched token carries when it is handed to
the recognizer. The mode is resolved once per token into a ValueEncoder, so
matching never has to look at the user given spelling again.

>>> encoder = ValueEncoder.resolve("tuple")
>>> encoder.encode("word", "hello")
('word', 'hello')

"""

from dataclasses import dataclass
from enum import Enum, auto, unique

from _repa.lexer.errors import InvalidStoreMode


@unique
class StoreMode(Enum):
    STRUCT = auto()
    TUPLE = auto()
    SCALAR = auto()
    DISCARD = auto()
    CUSTOM = auto()

    @classmethod
    def names(cls):
        return {
            "struct": cls.STRUCT,
            "tuple": cls.TUPLE,
            "scalar": cls.SCALAR,
            "discard": cls.DISCARD,
        }


@dataclass(frozen=True)
class TokenValue:
    """
    The value stored for a token in StoreMode.STRUCT.
    """

    token: str
    value: str


class _Discarded:
    def __repr__(self):
        return "DISCARD"

    def __bool__(self):
        return False


# Stored in StoreMode.DISCARD, tells later consumers of the
# parse that the token carries no meaning, e.g. punctuation.
DISCARD = _Discarded()


def is_discarded(value):
    return value is DISCARD


@dataclass(frozen=True)
class ValueEncoder:
    mode: StoreMode
    callback: object = None

    @classmethod
    def resolve(cls, how):
        """
        :param how: A StoreMode, one of the names in StoreMode.names() or a
            callable taking the token name and the matched text.
        :returns: The ValueEncoder for that store mode.
        """
        if isinstance(how, ValueEncoder):
            return how
        if callable(how):
            return cls(StoreMode.CUSTOM, how)
        if isinstance(how, str) and how.lower() in StoreMode.names():
            return cls(StoreMode.names()[how.lower()])
        if isinstance(how, StoreMode) and how != StoreMode.CUSTOM:
            return cls(how)
        raise InvalidStoreMode(f"Unknown store variant - {how!r}")

    def encode(self, token, text):
        """
        :param token: Name of the matched terminal.
        :param text: The matched text.
        :returns: The value to submit to the recognizer for the token.
        """
        if self.mode == StoreMode.STRUCT:
            return TokenValue(token, text)
        elif self.mode == StoreMode.TUPLE:
            return (token, text)
        elif self.mode == StoreMode.SCALAR:
            return text
        elif self.mode == StoreMode.DISCARD:
            return DISCARD
        elif self.mode == StoreMode.CUSTOM:
            return self.callback(token, text)
        else:
            raise ValueError(f"Unexpected store mode {self.mode}")
