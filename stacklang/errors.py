

class StackLangError(Exception):
    """ Base class for all stacklang errors"""
    pass


class RecoverableError(StackLangError):
    """ Raised by a command that failed but can be recovered from.

    `restore` holds the values pushed back onto the stack, bottom first,
    before the run continues with the next token.
    """

    def __init__(self, message: str, *restore):
        super().__init__(message)
        self.restore: tuple = restore


class IndexOutOfRangeError(RecoverableError):
    """ Raised when a list index is outside the list"""


class CodecError(RecoverableError):
    """ Raised when encode/decode cannot convert between text and code points"""


class RangeStepError(RecoverableError):
    """ Raised when range is given a step that would never terminate"""


class SizeLimitError(RecoverableError):
    """ Raised when a command would build a String or List that is too long"""
