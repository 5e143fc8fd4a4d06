import io
import logging
import pathlib
import warnings
from dataclasses import dataclass
from enum import Enum, auto, unique

from _repa.lexer.buffer import InputBuffer
from _repa.lexer.matching import match_token
from _repa.lexer.token_spec import compile_token_table
from _repa.recognizer import AdvanceKind

logger = logging.getLogger(__name__)


@unique
class Outcome(Enum):
    EXHAUSTED = auto()
    FAILED = auto()
    END_OF_INPUT = auto()


@dataclass
class Recognition:
    """
    What happened when the lexer fed a recognizer.

    EXHAUSTED: the recognizer accepts no more tokens, the grammar is
        satisfied.
    FAILED: the recognizer found no way to continue, detail holds its
        message.
    END_OF_INPUT: the input ended while expected still holds terminals, which
        may or may not be a complete parse depending on the grammar.

    In all cases the recognizer is left as the lexer last used it, so a
    partial result can still be evaluated.
    """

    outcome: Outcome
    recognizer: object
    position: int = 0
    detail: str = None
    expected: tuple = ()


class Lexer:
    """
    Feeds a recognizer with tokens from a stream, see recognize.

    >>> import re
    >>> lexer = Lexer(
    ...     tokens={
    ...         "word": {"match": re.compile(r"\\w+"), "store": "scalar"},
    ...         "OP": re.compile(r"\\s+OR\\s+|\\s+"),
    ...         "NOT": "!",
    ...     },
    ... )
    >>> sorted(lexer.tokens)
    ['NOT', 'OP', 'word']

    lexer.recognize(recognizer, "query.txt") then offers these tokens to
    the recognizer, one position of the file at a time.

    Ambiguity is left for the recognizer to resolve: every expected terminal
    that matches is offered. Note that for a pattern only one match is tried,
    so "x OR y" gives a single OP token with r"\\s+OR\\s+|\\s+" but an OP
    token " " with r"\\s+|\\s+OR\\s+".
    """

    def __init__(
        self,
        tokens,
        store="struct",
        min_buffer=4096,
        debug=False,
        buffer_filter=None,
        diagnostics=None,
    ):
        """
        :param tokens: dict of terminal names to token definitions, see
            compile_token_spec.
        :param store: The default store mode, see StoreMode.
        :param min_buffer: Refill the buffer when it gets shorter than this
            many characters. 0 reads the whole stream before matching.
        :param debug: Whether to emit diagnostic lines.
        :param buffer_filter: Function applied to every chunk read from the
            stream, eg. to strip line endings.
        :param diagnostics: Called with each diagnostic line, defaults to
            logging them at debug level.
        """
        self.tokens = compile_token_table(tokens, store)
        self._min_buffer = None
        self.min_buffer = min_buffer
        self.debug = debug
        self.buffer_filter = buffer_filter
        if diagnostics is not None and not debug:
            warnings.warn(
                "diagnostics given to Lexer with debug=False will not be called",
                stacklevel=2,
            )
        self.diagnostics = diagnostics or logger.debug

    @property
    def min_buffer(self):
        return self._min_buffer

    @min_buffer.setter
    def min_buffer(self, value):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"min_buffer has to be a non-negative int, got {value!r}")
        self._min_buffer = value

    def match(self, name, buffer):
        """
        :returns: The MatchResult for the terminal with the given name at the
            start of the buffer, None if unknown or not found.
        """
        spec = self.tokens.get(name)
        if spec is None:
            if self.debug:
                self.diagnostics(f"Unknown token: {name!r}")
            return None
        found = match_token(spec, buffer)
        if self.debug:
            if found is None:
                self.diagnostics(f"No {name!r} in {buffer.preview()}")
            else:
                self.diagnostics(
                    f"Token {name!r} matched {buffer.preview(found.length)}"
                )
        return found

    def recognize(self, recognizer, stream):
        """
        Tokenize the stream and feed the tokens to the recognizer, until
        the recognizer is exhausted, fails or the stream ends.

        Raises LexerConfigurationError on invalid tokens, but not when the
        recognizer fails, which is returned as Outcome.FAILED.

        :param recognizer: A Recognizer, see _repa.recognizer.
        :param stream: A text stream, or the name of a file to read.
        :returns: A Recognition.
        """
        if isinstance(stream, (str, pathlib.Path)):
            with open(stream, "r") as file_stream:
                return self.recognize(recognizer, file_stream)

        expected = tuple(recognizer.terminals_expected())
        if not expected:
            return Recognition(Outcome.EXHAUSTED, recognizer)

        buffer = InputBuffer(stream, self.min_buffer, self.buffer_filter)
        buffer.refill()

        while len(buffer):
            if self.debug:
                self.diagnostics(
                    "Expect token(s): " + ", ".join(repr(t) for t in expected)
                )
                self.diagnostics(f"Buffer start: {buffer.preview()}...")

            for name in expected:
                found = self.match(name, buffer)
                if found is None:
                    continue
                value = self.tokens[name].encode(found.text)
                recognizer.alternative(name, value, found.length)

            skip = 0
            while True:
                skip += 1
                advance = recognizer.complete_position()
                if advance.kind == AdvanceKind.EXHAUSTED:
                    buffer.consume(skip)
                    return Recognition(Outcome.EXHAUSTED, recognizer, buffer.consumed)
                elif advance.kind == AdvanceKind.FAILURE:
                    if self.debug:
                        self.diagnostics(f"Failed to parse: {advance.detail}")
                    return Recognition(
                        Outcome.FAILED,
                        recognizer,
                        buffer.consumed,
                        detail=advance.detail,
                    )
                elif advance.kind == AdvanceKind.NEXT_EXPECTED:
                    expected = advance.terminals
                    break
                elif advance.kind != AdvanceKind.MORE_NEEDED:
                    raise ValueError(f"Unexpected advance {advance}")

            buffer.consume(skip)
            if len(buffer) < self.min_buffer:
                buffer.refill()

        return Recognition(
            Outcome.END_OF_INPUT, recognizer, buffer.consumed, expected=expected
        )

    def recognize_string(self, recognizer, text):
        return self.recognize(recognizer, io.StringIO(text))
