class LisError(Exception):
    """ Base class for all lis errors"""
    pass


class LisSyntaxError(LisError):
    """ Raised when the token stream is malformed"""


class LisUnboundVariable(LisError):
    """ Raised when a symbol is looked up or set! before it is bound"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"unbound variable: {name}")
        self.name = name


class LisTypeError(LisError):
    """ Raised when a primitive gets arguments of the wrong type or count,
    or when a non-procedure is applied"""


class LisArityError(LisError):
    """ Raised when the number of arguments passed to a closure is incorrect"""


class LisEvalError(LisError):
    """ Raised when an expression is structurally invalid"""
