from dataclasses import dataclass

from _repa.lexer.errors import InvalidTokenSpec
from _repa.lexer.token_kind import TokenKind


@dataclass(frozen=True)
class MatchResult:
    """
    A token found at the start of the buffer.
    """

    name: str
    text: str

    @property
    def length(self):
        return len(self.text)


def match_pattern(spec, buffer):
    """
    Match a pattern token at the start of the buffer.

    When the match takes up the whole buffer and the stream is not yet at
    its end, the token might continue in the data not read yet, so the buffer
    is grown and the match retried. When the stream ends the match is
    accepted as is, even if the token was cut short by the end of input.
    """
    while True:
        found = spec.match.match(buffer.text)
        if found is None:
            return None
        if found.end() == 0:
            raise InvalidTokenSpec(
                f"Token {spec.name!r} matched empty string. This is not supported."
            )
        if found.end() == len(buffer) and buffer.may_grow:
            buffer.grow()
            continue
        return MatchResult(spec.name, found.group())


def match_token(spec, buffer):
    """
    :param spec: The TokenSpec of the token to look for.
    :param buffer: The InputBuffer, may be grown for pattern tokens.
    :returns: MatchResult for the token at the start of the buffer,
        None if the token is not there.
    """
    if spec.kind == TokenKind.SINGLE_CHAR:
        if buffer.text[:1] == spec.match:
            return MatchResult(spec.name, spec.match)
        return None
    elif spec.kind == TokenKind.LITERAL:
        # the literal may continue past a chunk boundary
        while len(buffer) < len(spec.match) and buffer.may_grow:
            buffer.grow()
        if buffer.text.startswith(spec.match):
            return MatchResult(spec.name, spec.match)
        return None
    elif spec.kind == TokenKind.PATTERN:
        return match_pattern(spec, buffer)
    else:
        raise ValueError(f"Unknown token kind {spec.kind}")
