from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    SINGLE_CHAR = auto()
    LITERAL = auto()
    PATTERN = auto()

    @classmethod
    def classify(cls, match):
        """
        :param match: Either a literal string or a compiled pattern.
        :returns: The kind of token matching that string or pattern, or None
            if match is neither.
        """
        if isinstance(match, str):
            return cls.SINGLE_CHAR if len(match) == 1 else cls.LITERAL
        if hasattr(match, "match") and hasattr(match, "pattern"):
            return cls.PATTERN
        return None
