import threading
from typing import Optional

from .exceptions import ConveyanceError
from .interfaces import IConveyance


class Conveyance(IConveyance):
    """Single-use handoff of one integer from a worker thread to its caller.

    A fresh conveyance is created for every invocation and discarded after the
    value has been read. It is never shared between invocations.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._value: Optional[int] = None
        self._sent = False
        self._received = False

    def send(self, value: int) -> None:
        """Store the value and wake the receiver.

        Raises:
            ConveyanceError: If a value was already sent.
        """
        with self._lock:
            if self._sent:
                raise ConveyanceError("Conveyance already carries a value")
            self._value = value
            self._sent = True
        self._ready.set()

    def receive(self) -> int:
        """Wait for the value, return it and close the conveyance.

        Raises:
            ConveyanceError: If the value was already received.
        """
        with self._lock:
            if self._received:
                raise ConveyanceError("Conveyance value already received")
            self._received = True
        self._ready.wait()
        value = self._value
        self._value = None
        return value

    @property
    def closed(self) -> bool:
        """True once the single value has been received."""
        return self._received and self._ready.is_set()
