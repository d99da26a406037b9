"""
Factorial Calculator Implementation

This module contains the computation unit, which multiplies 1..n and hands the
product over through a conveyance, and the ConcurrentFactorialCalculator class,
which runs that unit on a dedicated thread for every call.
"""

import logging
import threading
from typing import Optional

from .conveyance import Conveyance
from .exceptions import InvalidInputError
from .interfaces import IConveyance, IFactorialCalculator

logger = logging.getLogger(__name__)


def compute_factorial(n: int, out: IConveyance) -> None:
    """Compute n! iteratively and send the result to ``out`` exactly once.

    The input is expected to be validated by the caller; for n < 2 the loop
    body never runs and the result is 1.
    """
    result = 1
    for i in range(2, n + 1):
        result *= i
    out.send(result)


class ConcurrentFactorialCalculator(IFactorialCalculator):
    """
    Concrete implementation of IFactorialCalculator that computes each factorial
    on its own thread.

    Every call creates a new Conveyance, starts a thread running
    compute_factorial and blocks until the single result arrives. Instances hold
    no mutable state, so one calculator can serve many concurrent callers.

    Attributes:
        max_n (Optional[int]): Largest accepted input, or None for no cap.
    """

    def __init__(self, max_n: Optional[int] = None):
        """
        Initialize the calculator.

        Args:
            max_n (Optional[int]): Largest accepted input. None, zero or a negative
                value disables the cap.
        """
        self.max_n = max_n if max_n is not None and max_n > 0 else None

    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer on a worker thread.

        Args:
            n (int): A non-negative integer for which to compute the factorial.

        Returns:
            int: The factorial of n (n!).

        Raises:
            InvalidInputError: If n is negative or greater than max_n.
            TypeError: If n is not an integer.

        Examples:
            >>> calculator = ConcurrentFactorialCalculator()
            >>> calculator.compute_factorial(0)
            1
            >>> calculator.compute_factorial(5)
            120
        """
        self._validate(n)

        out = Conveyance()
        worker = threading.Thread(
            target=compute_factorial,
            args=(n, out),
            name=f"factorial-{n}",
            daemon=True,
        )
        worker.start()
        result = out.receive()
        worker.join()

        logger.debug("Computed factorial of %d on %s", n, worker.name)
        return result

    def _validate(self, n: int) -> None:
        # bool is an int subclass but never a meaningful input here
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Expected an integer, got {type(n).__name__}")
        if n < 0:
            raise InvalidInputError(n, "Factorial is not defined for negative numbers")
        if self.max_n is not None and n > self.max_n:
            raise InvalidInputError(n, f"n must not exceed {self.max_n}, got {n}")
