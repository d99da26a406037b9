from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FactorialRequest(BaseModel):
    """Request model for computing a factorial.

    Attributes:
        n (int): The non-negative integer to compute n! for.
    """
    n: int = Field(..., ge=0, description="Non-negative integer to compute the factorial of")


class FactorialResponse(BaseModel):
    """Response model for a computed factorial.

    Attributes:
        n (int): The input value.
        result (int): n!.
        elapsed_seconds (float): Wall-clock time spent on the computation.
    """
    n: int = Field(..., description="The input value")
    result: int = Field(..., description="The factorial of n")
    elapsed_seconds: float = Field(..., ge=0, description="Wall-clock time of the computation")


class VerificationCase(BaseModel):
    """One row of the oracle table: an input and its known factorial."""
    model_config = ConfigDict(frozen=True)

    input: int = Field(..., ge=0, description="Input value")
    expected: int = Field(..., ge=1, description="Expected factorial of the input")


class CaseResult(BaseModel):
    """Outcome of checking a single verification case.

    Attributes:
        input (int): The input that was computed.
        expected (int): The oracle value.
        actual (Optional[int]): The computed value, None when the calculator raised.
        passed (bool): True when actual equals expected.
        error (Optional[str]): Mismatch or exception message for failed cases.
    """
    input: int
    expected: int
    actual: Optional[int] = None
    passed: bool
    error: Optional[str] = None


class VerificationReport(BaseModel):
    """Pass/fail report over all verification cases."""
    results: List[CaseResult] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.results)

    @computed_field
    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @computed_field
    @property
    def failed(self) -> int:
        return self.total - self.passed

    @computed_field
    @property
    def success(self) -> bool:
        return self.failed == 0

    def failures(self) -> List[CaseResult]:
        return [result for result in self.results if not result.passed]


class BenchmarkRequest(BaseModel):
    """Request model for a timing run.

    Attributes:
        n (int): Input passed to every call.
        iterations (int): Number of calls to time.
        workers (int): Number of concurrent callers; 1 means sequential.
    """
    n: int = Field(10, ge=0, description="Input passed to every call")
    iterations: int = Field(1000, ge=1, description="Number of calls to time")
    workers: int = Field(1, ge=1, description="Number of concurrent callers")


class BenchmarkResult(BaseModel):
    """Latency figures of a timing run.

    Attributes:
        name (str): Benchmark name.
        n (int): Input passed to every call.
        iterations (int): Number of calls made.
        workers (int): Number of concurrent callers.
        total_seconds (float): Wall-clock time of the whole run.
        mean_seconds (float): total_seconds / iterations.
        consistent (bool): True when every call returned the same value.
    """
    name: str
    n: int = Field(..., ge=0)
    iterations: int = Field(..., ge=1)
    workers: int = Field(1, ge=1)
    total_seconds: float = Field(..., ge=0)
    mean_seconds: float = Field(..., ge=0)
    consistent: bool = True
