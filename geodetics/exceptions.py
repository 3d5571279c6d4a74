"""Exceptions raised by geodetics"""

__all__ = ['GeodeticError', 'InvalidParameter', 'NonConvergence']


class GeodeticError(Exception):
    """Base class for all geodetics errors"""


class InvalidParameter(GeodeticError, ValueError):
    """Raised for non-physical or unknown model parameters"""


class NonConvergence(GeodeticError, ArithmeticError):
    """
    Raised when an iterative solver exceeds its iteration cap.

    Args:
        message:
            Description of the failed computation

        iterations:
            The number of iterations performed

        residual:
            The magnitude of the last update
    """

    def __init__(self, message: str, iterations: int, residual: float):
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual
