"""
Factorial Calculator HTTP service.

Exposes the concurrent calculator, the verification harness and the benchmarks
over HTTP, with Prometheus metrics on /metrics.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from .config import Settings
from .container import Container
from .exceptions import InvalidInputError
from .harness import VerificationHarness
from .interfaces import IFactorialCalculator
from .models import (
    BenchmarkRequest,
    BenchmarkResult,
    FactorialRequest,
    FactorialResponse,
    VerificationReport,
)

logger = logging.getLogger(__name__)

# ============================================================================
# PROMETHEUS METRICS
# ============================================================================

REQUESTS_TOTAL = Counter(
    'factorial_requests_total', 'Total HTTP requests', ['method', 'endpoint', 'status']
)
REQUEST_DURATION_SECONDS = Histogram(
    'factorial_request_duration_seconds', 'HTTP request duration',
    labelnames=['method', 'endpoint'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5, 30],
)
COMPUTATIONS_TOTAL = Counter(
    'factorial_computations_total', 'Factorial computations by outcome', ['outcome']
)

# ============================================================================
# DEPENDENCIES
# ============================================================================

container = Container()


def get_settings() -> Settings:
    return container.settings()


def get_calculator() -> IFactorialCalculator:
    return container.calculator()


def get_harness() -> VerificationHarness:
    return container.harness()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager"""
    settings = container.settings()
    logger.info("Factorial service started (max_n=%s)", settings.effective_max_n)
    yield
    logger.info("Factorial service stopped")


app = FastAPI(
    title="Factorial Calculator",
    description="Computes factorials on dedicated threads and verifies them against a fixed table",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def prometheus_middleware(request: Request, call_next):
    """Middleware tracking HTTP metrics"""
    if request.url.path in ["/health", "/metrics"]:
        return await call_next(request)

    start_time = time.perf_counter()
    status = "500"
    try:
        response = await call_next(request)
        status = str(response.status_code)
        return response
    finally:
        duration = time.perf_counter() - start_time
        REQUEST_DURATION_SECONDS.labels(method=request.method, endpoint=request.url.path).observe(duration)
        REQUESTS_TOTAL.labels(method=request.method, endpoint=request.url.path, status=status).inc()


# ============================================================================
# ENDPOINTS
# ============================================================================

@app.post("/factorial", response_model=FactorialResponse)
def factorial_endpoint(
    request: FactorialRequest,
    calculator: IFactorialCalculator = Depends(get_calculator),
) -> FactorialResponse:
    """Compute n! for the requested n.

    Raises:
        HTTPException: 400 if n exceeds the configured cap, 500 on unexpected errors.
    """
    start_time = time.perf_counter()
    try:
        result = calculator.compute_factorial(request.n)
    except InvalidInputError as e:
        COMPUTATIONS_TOTAL.labels(outcome="rejected").inc()
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        COMPUTATIONS_TOTAL.labels(outcome="error").inc()
        logger.error(f"Unexpected error in factorial: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal server error")

    COMPUTATIONS_TOTAL.labels(outcome="ok").inc()
    return FactorialResponse(
        n=request.n,
        result=result,
        elapsed_seconds=time.perf_counter() - start_time,
    )


@app.get("/verify", response_model=VerificationReport)
def verify_endpoint(harness: VerificationHarness = Depends(get_harness)) -> VerificationReport:
    """Run the oracle table against the calculator."""
    return harness.verify()


@app.post("/benchmark", response_model=BenchmarkResult)
def benchmark_endpoint(
    request: BenchmarkRequest,
    harness: VerificationHarness = Depends(get_harness),
    settings: Settings = Depends(get_settings),
) -> BenchmarkResult:
    """Time repeated calls, sequentially for one worker and concurrently otherwise.

    Raises:
        HTTPException: 400 if iterations or workers exceed the configured limits
            or n is rejected.
    """
    if request.iterations > settings.benchmark_max_iterations:
        raise HTTPException(
            status_code=400,
            detail=f"iterations must not exceed {settings.benchmark_max_iterations}",
        )
    if request.workers > settings.benchmark_max_workers:
        raise HTTPException(
            status_code=400,
            detail=f"workers must not exceed {settings.benchmark_max_workers}",
        )

    try:
        if request.workers == 1:
            return harness.benchmark(request.n, request.iterations)
        return harness.benchmark_parallel(request.n, request.iterations, request.workers)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
def health():
    """Health check"""
    settings = container.settings()
    return {
        "status": "ok",
        "service": "factorial-calculator",
        "max_n": settings.effective_max_n,
        "timestamp": int(time.time()),
    }


@app.get("/metrics")
def metrics():
    """Prometheus metrics"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)
