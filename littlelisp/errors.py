from __future__ import annotations


class LispError(Exception):
    """ Base class for all littlelisp errors"""
    pass


class LispReaderError(LispError):
    """ Raised while turning source text into a tree"""

    def __init__(self, message: str, *, position: int | None = None):
        super().__init__(message)
        self.position = position


class LispLexError(LispReaderError):
    """ Raised when the source cannot be split into tokens (unterminated string)"""


class LispSyntaxError(LispReaderError):
    """ Raised on unbalanced parentheses, empty input or a malformed special form"""


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""
