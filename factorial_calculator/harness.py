"""
Verification Harness

Checks a calculator against a fixed oracle table and measures its per-call
latency, both sequentially and with several concurrent callers.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Tuple

from .exceptions import ResultMismatchError
from .interfaces import IFactorialCalculator
from .models import BenchmarkResult, CaseResult, VerificationCase, VerificationReport

logger = logging.getLogger(__name__)

FACTORIAL_CASES: Tuple[VerificationCase, ...] = (
    VerificationCase(input=0, expected=1),
    VerificationCase(input=1, expected=1),
    VerificationCase(input=5, expected=120),
    VerificationCase(input=10, expected=3628800),
)


class VerificationHarness:
    """Runs the oracle table and the timing loops against a calculator.

    Attributes:
        calculator (IFactorialCalculator): The calculator under test.
    """

    def __init__(self, calculator: IFactorialCalculator):
        self.calculator = calculator

    def verify(self, cases: Iterable[VerificationCase] = FACTORIAL_CASES) -> VerificationReport:
        """Check every case and collect the outcomes.

        A wrong value or an exception from the calculator fails that case only;
        the remaining cases are still evaluated.

        Args:
            cases (Iterable[VerificationCase]): Input/expected pairs to check.

        Returns:
            VerificationReport: One CaseResult per case, in order.
        """
        report = VerificationReport()
        for case in cases:
            report.results.append(self._check_case(case))

        logger.info(
            "Verification finished: %d passed, %d failed",
            report.passed,
            report.failed,
        )
        return report

    def _check_case(self, case: VerificationCase) -> CaseResult:
        try:
            actual = self.calculator.compute_factorial(case.input)
        except Exception as e:
            logger.warning("Case n=%d raised %s: %s", case.input, type(e).__name__, e)
            return CaseResult(
                input=case.input,
                expected=case.expected,
                passed=False,
                error=f"{type(e).__name__}: {e}",
            )

        if actual != case.expected:
            mismatch = ResultMismatchError(case.input, case.expected, actual)
            logger.warning(str(mismatch))
            return CaseResult(
                input=case.input,
                expected=case.expected,
                actual=actual,
                passed=False,
                error=str(mismatch),
            )

        return CaseResult(input=case.input, expected=case.expected, actual=actual, passed=True)

    def benchmark(self, n: int = 10, iterations: int = 1000, name: str = "factorial") -> BenchmarkResult:
        """Time ``iterations`` sequential calls with the same input.

        Args:
            n (int): Input passed to every call.
            iterations (int): Number of calls, must be positive.
            name (str): Label for the result.

        Returns:
            BenchmarkResult: Total and mean wall-clock seconds.

        Raises:
            ValueError: If iterations is not positive.
        """
        if iterations < 1:
            raise ValueError("iterations must be positive")

        results = set()
        start = time.perf_counter()
        for _ in range(iterations):
            results.add(self.calculator.compute_factorial(n))
        total = time.perf_counter() - start

        return self._result(name, n, iterations, 1, total, results)

    def benchmark_parallel(
        self,
        n: int = 10,
        iterations: int = 1000,
        workers: int = 8,
        name: str = "factorial_parallel",
    ) -> BenchmarkResult:
        """Time ``iterations`` calls issued from ``workers`` concurrent callers.

        Raises:
            ValueError: If iterations or workers is not positive.
        """
        if iterations < 1:
            raise ValueError("iterations must be positive")
        if workers < 1:
            raise ValueError("workers must be positive")

        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="factorial-caller") as executor:
            results = set(executor.map(self.calculator.compute_factorial, [n] * iterations))
        total = time.perf_counter() - start

        return self._result(name, n, iterations, workers, total, results)

    def run_benchmarks(self, iterations: int = 1000, workers: int = 8) -> List[BenchmarkResult]:
        """Run the standard benchmark set: n=10, n=20 and n=10 in parallel."""
        return [
            self.benchmark(10, iterations, name="factorial"),
            self.benchmark(20, iterations, name="factorial_large_input"),
            self.benchmark_parallel(10, iterations, workers, name="factorial_parallel"),
        ]

    @staticmethod
    def _result(name, n, iterations, workers, total, results) -> BenchmarkResult:
        result = BenchmarkResult(
            name=name,
            n=n,
            iterations=iterations,
            workers=workers,
            total_seconds=total,
            mean_seconds=total / iterations,
            consistent=len(results) == 1,
        )
        if not result.consistent:
            logger.warning("Benchmark %s saw %d distinct results for n=%d", name, len(results), n)
        logger.info(
            "Benchmark %s: %d calls, %d worker(s), mean %.3f ms",
            name,
            iterations,
            workers,
            result.mean_seconds * 1000,
        )
        return result
