"""
Factorial Calculator Exceptions

This module defines the error hierarchy used by the calculator, the conveyance
and the verification harness.
"""


class FactorialError(Exception):
    """Base class for all factorial calculator errors."""


class InvalidInputError(FactorialError, ValueError):
    """Raised when n is negative or above the configured cap."""

    def __init__(self, n: int, message: str):
        self.n = n
        super().__init__(message)


class ConveyanceError(FactorialError, RuntimeError):
    """Raised when a conveyance is written or read more than once."""


class ResultMismatchError(FactorialError, AssertionError):
    """Raised by the verification harness when a computed value is wrong.

    Attributes:
        input (int): The n that was computed.
        expected (int): The value from the oracle table.
        actual (int): The value the calculator returned.
    """

    def __init__(self, input: int, expected: int, actual: int):
        self.input = input
        self.expected = expected
        self.actual = actual
        super().__init__(f"For input {input}, expected {expected}, but got {actual}")
