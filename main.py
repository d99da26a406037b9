import argparse
import sys
import time
from typing import List, Optional

from factorial_calculator.container import Container
from logging_config import setup_logging


def _factorial_text(container: Container, n: int) -> str:
    """Compute n! and render it as decimal text.

    Raises:
        ValueError: If n is rejected, or n! has more digits than the
            interpreter's int-to-string limit allows.
    """
    result = container.calculator().compute_factorial(n)
    return str(result)


def _run(container: Container, args: argparse.Namespace) -> int:
    """Compute a factorial on a worker thread and report how long it took."""
    start_time = time.perf_counter()
    try:
        text = _factorial_text(container, args.n)
    except ValueError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start_time

    print(f'Factorial of {args.n} is {text}')
    print(f'Execution time: {elapsed * 1e6:.1f}µs')
    return 0


def _compute(container: Container, args: argparse.Namespace) -> int:
    try:
        text = _factorial_text(container, args.n)
    except ValueError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    print(text)
    return 0


def _verify(container: Container, args: argparse.Namespace) -> int:
    report = container.harness().verify()
    for case in report.results:
        status = 'PASS' if case.passed else 'FAIL'
        line = f'{status} factorial({case.input}) = {case.actual}'
        if not case.passed:
            line += f' ({case.error})'
        print(line)

    print(f'{report.passed}/{report.total} cases passed')
    if not report.success:
        print('Tests Failed!')
        return 1
    return 0


def _benchmark(container: Container, args: argparse.Namespace) -> int:
    settings = container.settings()
    iterations = args.iterations or settings.benchmark_iterations
    workers = args.workers or settings.benchmark_workers

    print('Running Benchmarks:')
    results = container.harness().run_benchmarks(iterations=iterations, workers=workers)
    for result in results:
        print(
            f'{result.name:<24} n={result.n:<3} {result.iterations} calls '
            f'x{result.workers} workers  {result.mean_seconds * 1e6:10.1f} µs/op'
        )

    if not all(result.consistent for result in results):
        print('Benchmarks Failed!')
        return 1
    print('Benchmarks Passed!')
    return 0


def _serve(container: Container, args: argparse.Namespace) -> int:
    import uvicorn

    settings = container.settings()
    uvicorn.run(
        'factorial_calculator.server:app',
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Concurrent factorial calculator and verification harness.')
    subparsers = parser.add_subparsers(dest='command')

    run_parser = subparsers.add_parser('run', help='Compute a factorial on a worker thread and time it')
    run_parser.add_argument('n', type=int, nargs='?', default=5, help='Target integer (default: 5)')
    run_parser.set_defaults(handler=_run)

    compute_parser = subparsers.add_parser('compute', help='Print n!')
    compute_parser.add_argument('n', type=int, help='Target integer')
    compute_parser.set_defaults(handler=_compute)

    verify_parser = subparsers.add_parser('verify', help='Check the calculator against the known table')
    verify_parser.set_defaults(handler=_verify)

    benchmark_parser = subparsers.add_parser('benchmark', help='Measure mean latency per call')
    benchmark_parser.add_argument('--iterations', type=int, help='Calls per benchmark')
    benchmark_parser.add_argument('--workers', type=int, help='Concurrent callers for the parallel benchmark')
    benchmark_parser.set_defaults(handler=_benchmark)

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP service')
    serve_parser.add_argument('--host', help='Bind host')
    serve_parser.add_argument('--port', type=int, help='Bind port')
    serve_parser.set_defaults(handler=_serve)

    return parser


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    """Dispatch a command line; without a command the demo computation runs."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(['run'])

    container = container or Container()
    settings = container.settings()
    logger = setup_logging('factorial_calculator', settings.log_dir, settings.log_level)

    try:
        return args.handler(container, args)
    except Exception as e:
        logger.error(f'Command {args.command} failed: {type(e).__name__}: {e}')
        raise


if __name__ == '__main__':
    sys.exit(main())
