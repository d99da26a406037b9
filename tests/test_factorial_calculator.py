import threading
import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from factorial_calculator import (
    ConcurrentFactorialCalculator,
    Conveyance,
    IFactorialCalculator,
    InvalidInputError,
    compute_factorial,
)


class TestComputeFactorial(unittest.TestCase):
    """Tests for the computation unit that writes into a conveyance."""

    def test_known_values(self):
        """Each known input produces its factorial through the conveyance."""
        for n, expected in [(0, 1), (1, 1), (5, 120), (10, 3628800)]:
            with self.subTest(n=n):
                out = Conveyance()
                compute_factorial(n, out)
                self.assertEqual(out.receive(), expected)

    def test_runs_on_separate_thread(self):
        """The caller blocks on receive until the worker thread delivers."""
        out = Conveyance()
        worker = threading.Thread(target=compute_factorial, args=(20, out))
        worker.start()
        self.assertEqual(out.receive(), 2432902008176640000)
        worker.join()
        self.assertTrue(out.closed)

    def test_no_wraparound_past_64_bits(self):
        """21! does not fit in 64 bits and must still be exact."""
        out = Conveyance()
        compute_factorial(21, out)
        self.assertEqual(out.receive(), 51090942171709440000)


class TestConcurrentFactorialCalculator(unittest.TestCase):
    """
    Unit tests for the ConcurrentFactorialCalculator class.

    This test suite verifies the correctness of the factorial computation
    for various inputs, including edge cases and error handling.
    """

    def setUp(self):
        """
        Set up the test fixture.

        Initializes a new uncapped calculator for each test.
        """
        self.calculator = ConcurrentFactorialCalculator()

    def test_implements_interface(self):
        self.assertIsInstance(self.calculator, IFactorialCalculator)

    def test_factorial_of_zero(self):
        """
        Test factorial of 0.

        The factorial of 0 is the empty product, 1.
        """
        self.assertEqual(self.calculator.compute_factorial(0), 1)

    def test_factorial_of_one(self):
        self.assertEqual(self.calculator.compute_factorial(1), 1)

    def test_factorial_of_small_positive_integer(self):
        self.assertEqual(self.calculator.compute_factorial(5), 120)

    def test_factorial_of_larger_integer(self):
        self.assertEqual(self.calculator.compute_factorial(10), 3628800)

    def test_repeated_calls_return_same_value(self):
        """The computation is pure: the same n always gives the same result."""
        results = {self.calculator.compute_factorial(10) for _ in range(50)}
        self.assertEqual(results, {3628800})

    def test_concurrent_callers_do_not_interfere(self):
        """100 parallel callers with n=10 all receive 3628800."""
        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(self.calculator.compute_factorial, [10] * 100))
        self.assertEqual(len(results), 100)
        self.assertTrue(all(result == 3628800 for result in results))

    def test_concurrent_callers_with_mixed_inputs(self):
        """Each caller receives the value for its own input."""
        inputs = [0, 1, 5, 10, 20] * 20
        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(self.calculator.compute_factorial, inputs))
        expected = {0: 1, 1: 1, 5: 120, 10: 3628800, 20: 2432902008176640000}
        self.assertEqual(results, [expected[n] for n in inputs])

    def test_fresh_conveyance_per_call(self):
        """Every invocation creates its own conveyance."""
        created = []

        class RecordingConveyance(Conveyance):
            def __init__(self):
                super().__init__()
                created.append(self)

        with patch('factorial_calculator.factorial_calculator.Conveyance', RecordingConveyance):
            self.calculator.compute_factorial(3)
            self.calculator.compute_factorial(3)

        self.assertEqual(len(created), 2)
        self.assertIsNot(created[0], created[1])
        self.assertTrue(all(conveyance.closed for conveyance in created))

    def test_factorial_of_negative_integer(self):
        """
        Test factorial of a negative integer.

        Should raise InvalidInputError, which is also a ValueError.
        """
        with self.assertRaises(InvalidInputError) as ctx:
            self.calculator.compute_factorial(-1)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(ctx.exception.n, -1)

    def test_factorial_of_non_integer(self):
        with self.assertRaises(TypeError):
            self.calculator.compute_factorial(5.5)

    def test_factorial_of_bool(self):
        with self.assertRaises(TypeError):
            self.calculator.compute_factorial(True)

    def test_input_above_cap_is_rejected(self):
        calculator = ConcurrentFactorialCalculator(max_n=20)
        self.assertEqual(calculator.compute_factorial(20), 2432902008176640000)
        with self.assertRaises(InvalidInputError):
            calculator.compute_factorial(21)

    def test_non_positive_cap_disables_limit(self):
        self.assertIsNone(ConcurrentFactorialCalculator(max_n=0).max_n)
        self.assertIsNone(ConcurrentFactorialCalculator(max_n=-5).max_n)
        self.assertEqual(ConcurrentFactorialCalculator(max_n=0).compute_factorial(25), 15511210043330985984000000)

    def test_rejected_input_spawns_no_thread(self):
        with patch('factorial_calculator.factorial_calculator.threading.Thread') as thread_cls:
            with self.assertRaises(InvalidInputError):
                self.calculator.compute_factorial(-3)
        thread_cls.assert_not_called()


if __name__ == '__main__':
    unittest.main()
