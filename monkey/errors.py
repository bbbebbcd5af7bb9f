from __future__ import annotations


class MonkeyError(Exception):
    """ Base class for all Monkey errors"""
    pass


class MonkeySyntaxError(MonkeyError):
    """ Raised when source text could not be parsed.

    Carries every diagnostic collected by the parser, not just the first one.
    """

    def __init__(self, diagnostics: list[str]):
        self.diagnostics: list[str] = list(diagnostics)
        super().__init__("\n".join(self.diagnostics))


class MonkeyEvaluationError(MonkeyError):
    """ Raised when evaluation of a well-formed program fails"""


class MonkeyUnboundIdentifier(MonkeyEvaluationError):
    """ Raised when an identifier is used before it is bound"""


class MonkeyArityError(MonkeyEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MonkeyTypeError(MonkeyEvaluationError):
    """ Raised when an operator or builtin receives operands of the wrong kind"""


class MonkeyIndexError(MonkeyEvaluationError):
    """ Raised when an array index is out of range"""


class MonkeyZeroDivisionError(MonkeyEvaluationError):
    """ Raised on integer division by zero"""


class MonkeyOverflowError(MonkeyEvaluationError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class MonkeyQuoteError(MonkeyEvaluationError):
    """ Raised when a value cannot be turned back into an AST node"""


class MonkeyMacroContractError(MonkeyError):
    """ Raised when a macro body does not produce a quoted AST node.

    This is an internal invariant violation, not a user input error, so it does
    not derive from MonkeyEvaluationError.
    """
