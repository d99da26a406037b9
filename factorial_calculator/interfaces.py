"""
Factorial Calculator Interfaces

This module defines the abstract contracts for computing factorials and for
the single-value handoff between a computing thread and its caller.
"""

from abc import ABC, abstractmethod


class IFactorialCalculator(ABC):
    """
    Abstract interface for factorial computation.

    Implementations return n! for a non-negative integer n. How the value is
    produced (inline, on a worker thread, remotely) is up to the implementation;
    from the caller's point of view the call is synchronous.
    """

    @abstractmethod
    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer (>= 0) for which to compute the factorial.

        Returns:
            int: The factorial of n (n!).

        Raises:
            InvalidInputError: If n is negative or exceeds the configured cap.
            TypeError: If n is not an integer.
        """
        pass


class IConveyance(ABC):
    """Interface for a one-shot, single-value channel.

    The producer calls ``send`` exactly once, the consumer calls ``receive``
    exactly once.
    """

    @abstractmethod
    def send(self, value: int) -> None:
        """Hand the value over to the consumer.

        Raises:
            ConveyanceError: If a value was already sent.
        """
        ...

    @abstractmethod
    def receive(self) -> int:
        """Block until the value is available and return it.

        Raises:
            ConveyanceError: If the value was already received.
        """
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        """True once the single value has been consumed."""
        ...
