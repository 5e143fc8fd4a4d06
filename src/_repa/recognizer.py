"""
The lexer does not parse, it hands tokens to a recognizer implementing the
alternative input model: at every position of the input, any number of
terminals of possibly different lengths can be offered as alternatives, and
the recognizer decides which of them fit the grammar.

A recognizer implements Recognizer. Engines following the classic stepwise
API, where completing a position raises an exception at a dead end, can be
wrapped in EarlemeRecognizer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto, unique


@unique
class AdvanceKind(Enum):
    MORE_NEEDED = auto()
    NEXT_EXPECTED = auto()
    EXHAUSTED = auto()
    FAILURE = auto()


@dataclass(frozen=True)
class Advance:
    """
    The result of completing one position of the input.

    MORE_NEEDED: nothing is expected at the new position, but tokens offered
        earlier end further ahead, so complete the next position too.
    NEXT_EXPECTED: terminals holds what is expected at the new position.
    EXHAUSTED: the grammar can not accept any more tokens.
    FAILURE: no alternative can continue the parse, detail says why.
    """

    kind: AdvanceKind
    terminals: tuple = ()
    detail: str = None

    @classmethod
    def more_needed(cls):
        return cls(AdvanceKind.MORE_NEEDED)

    @classmethod
    def next_expected(cls, terminals):
        return cls(AdvanceKind.NEXT_EXPECTED, tuple(terminals))

    @classmethod
    def exhausted(cls):
        return cls(AdvanceKind.EXHAUSTED)

    @classmethod
    def failure(cls, detail):
        return cls(AdvanceKind.FAILURE, detail=detail)


class Recognizer(ABC):
    @abstractmethod
    def terminals_expected(self):
        """
        :returns: The names of the terminals expected at the current
            position.
        """
        pass

    @abstractmethod
    def alternative(self, terminal, value, length):
        """
        Offer a token of the given terminal, spanning length characters
        from the current position. Called once for every matching terminal.
        """
        pass

    @abstractmethod
    def complete_position(self):
        """
        Finish the current position and move to the next one.

        :returns: An Advance.
        """
        pass

    @abstractmethod
    def exhausted(self):
        pass


class EarlemeRecognizer(Recognizer):
    """
    Adapts an engine with the methods terminals_expected, alternative,
    earleme_complete and exhausted, where earleme_complete raises when the
    parse can not continue. With failures=(EngineError,), an EngineError
    raised by earleme_complete is returned as Advance.failure(str(err)),
    other exceptions propagate.
    """

    def __init__(self, engine, failures=(Exception,)):
        """
        :param engine: The wrapped engine.
        :param failures: Exception types raised by engine.earleme_complete
            that mean the parse failed.
        """
        self.engine = engine
        self.failures = failures

    def terminals_expected(self):
        return self.engine.terminals_expected()

    def alternative(self, terminal, value, length):
        self.engine.alternative(terminal, value, length)

    def complete_position(self):
        try:
            self.engine.earleme_complete()
        except self.failures as err:
            return Advance.failure(str(err))
        if self.engine.exhausted():
            return Advance.exhausted()
        expected = self.engine.terminals_expected()
        if expected:
            return Advance.next_expected(expected)
        return Advance.more_needed()

    def exhausted(self):
        return self.engine.exhausted()
