"""
Custom exceptions for the algorithms package.
"""

class MvpolyError(Exception):
    """Base exception for mvpoly errors.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NotUnivariateError(MvpolyError, ValueError):
    """Raised when an operation needs a univariate polynomial.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class VariableNameError(MvpolyError, ValueError):
    """Raised when a variable name or index cannot be encoded, or when
    no variable can be inferred for an operation.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)


class MissingVariableError(MvpolyError, KeyError):
    """Raised when a full evaluation is missing a variable value.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class ConversionError(MvpolyError, TypeError):
    """Raised when an expression cannot be converted to a polynomial.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)
