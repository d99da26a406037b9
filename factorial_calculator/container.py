from dependency_injector import containers, providers

from .config import get_settings
from .factorial_calculator import ConcurrentFactorialCalculator
from .harness import VerificationHarness


class Container(containers.DeclarativeContainer):
    """DI Container for managing dependencies."""

    settings = providers.Singleton(get_settings)

    calculator = providers.Singleton(
        ConcurrentFactorialCalculator,
        max_n=settings.provided.effective_max_n,
    )

    harness = providers.Factory(VerificationHarness, calculator=calculator)
