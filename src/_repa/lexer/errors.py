class LexerConfigurationError(Exception):
    """
    Base class for errors in the token definitions given to a Lexer. These
    are programming errors in the grammar setup and are never retried.
    """

    pass


class InvalidTokenSpec(LexerConfigurationError):
    """
    Raised when a token definition can not be used for matching, either
    because it is malformed or because its pattern matched the empty string
    at some position in the input.
    """

    pass


class InvalidStoreMode(LexerConfigurationError):
    """
    Raised when a store mode is neither one of the StoreMode variants
    nor a callable.
    """

    pass
