"""Tests for the factorial request, response and report models."""

import pytest
from pydantic import ValidationError

from factorial_calculator.models import (
    BenchmarkRequest,
    BenchmarkResult,
    CaseResult,
    FactorialRequest,
    FactorialResponse,
    VerificationCase,
    VerificationReport,
)


class TestFactorialRequest:

    def test_accepts_zero(self):
        assert FactorialRequest(n=0).n == 0

    def test_rejects_negative(self):
        with pytest.raises(ValidationError):
            FactorialRequest(n=-1)

    def test_requires_n(self):
        with pytest.raises(ValidationError):
            FactorialRequest()


class TestFactorialResponse:

    def test_large_result_serializes(self):
        response = FactorialResponse(n=25, result=15511210043330985984000000, elapsed_seconds=0.001)
        assert response.model_dump()["result"] == 15511210043330985984000000

    def test_rejects_negative_elapsed(self):
        with pytest.raises(ValidationError):
            FactorialResponse(n=1, result=1, elapsed_seconds=-0.1)


class TestVerificationModels:

    def test_case_expected_must_be_positive(self):
        with pytest.raises(ValidationError):
            VerificationCase(input=3, expected=0)

    def test_case_is_immutable(self):
        case = VerificationCase(input=5, expected=120)
        with pytest.raises(ValidationError):
            case.expected = 121
        assert case.expected == 120

    def test_empty_report_is_successful(self):
        report = VerificationReport()
        assert report.total == 0
        assert report.success is True

    def test_report_counts(self):
        report = VerificationReport(results=[
            CaseResult(input=0, expected=1, actual=1, passed=True),
            CaseResult(input=5, expected=120, actual=119, passed=False, error="mismatch"),
        ])

        assert report.total == 2
        assert report.passed == 1
        assert report.failed == 1
        assert report.success is False
        assert [case.input for case in report.failures()] == [5]

    def test_report_dump_includes_summary(self):
        dumped = VerificationReport(results=[
            CaseResult(input=0, expected=1, actual=1, passed=True),
        ]).model_dump()

        assert dumped["total"] == 1
        assert dumped["passed"] == 1
        assert dumped["failed"] == 0
        assert dumped["success"] is True


class TestBenchmarkModels:

    def test_request_defaults(self):
        request = BenchmarkRequest()
        assert (request.n, request.iterations, request.workers) == (10, 1000, 1)

    @pytest.mark.parametrize("field", ["iterations", "workers"])
    def test_request_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            BenchmarkRequest(**{field: 0})

    def test_result_defaults(self):
        result = BenchmarkResult(name="factorial", n=10, iterations=1, total_seconds=0.5, mean_seconds=0.5)
        assert result.workers == 1
        assert result.consistent is True
