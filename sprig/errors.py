class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass


class SprigUnboundVariable(SprigError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or f"variable {name} is unbound")
        self.name = name


class SprigTypeError(SprigError):
    """ Raised when a value has the wrong type, e.g. a non-number given to +"""


class SprigArityError(SprigError):
    """ Raised when a form or procedure receives too few arguments"""


class SprigDivisionByZero(SprigError):
    """ Raised by / when a divisor is zero"""


class SprigParseError(SprigError):
    """ Raised when textual input is malformed or unbalanced"""


class SprigRecursionError(SprigError):
    """ Raised when evaluation exhausts the interpreter stack"""
