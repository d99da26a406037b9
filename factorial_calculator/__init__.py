"""
Factorial Calculator Module

This module computes factorials of non-negative integers on dedicated threads,
handing each result back through a single-use conveyance, and ships a
verification harness that checks the calculator against a fixed table and
measures its latency.
"""

from .conveyance import Conveyance
from .exceptions import ConveyanceError, FactorialError, InvalidInputError, ResultMismatchError
from .factorial_calculator import ConcurrentFactorialCalculator, compute_factorial
from .harness import FACTORIAL_CASES, VerificationHarness
from .interfaces import IConveyance, IFactorialCalculator

__all__ = [
    "IFactorialCalculator",
    "IConveyance",
    "Conveyance",
    "ConcurrentFactorialCalculator",
    "compute_factorial",
    "VerificationHarness",
    "FACTORIAL_CASES",
    "FactorialError",
    "InvalidInputError",
    "ConveyanceError",
    "ResultMismatchError",
]
