"""Benchmarks for Result creation, chaining and exception bridging.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from fallible import Err, Ok, attempt, try_, with_attempt

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Ok/Err creation."""

    def test_ok_creation(self, benchmark):
        """Benchmark Ok creation."""
        benchmark(Ok, 42)

    def test_err_creation(self, benchmark):
        """Benchmark Err creation."""
        benchmark(Err, 'error')


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_map(self, benchmark):
        """Benchmark map on Ok."""
        res = Ok(5)
        benchmark(res.map, lambda x: x * 2)

    def test_and_then(self, benchmark):
        """Benchmark and_then on Ok."""
        res = Ok(5)
        benchmark(res.and_then, lambda x: Ok(x * 2))

    def test_map_on_err(self, benchmark):
        """Benchmark the pass-through path of map on Err."""
        res = Err('error')
        benchmark(res.map, lambda x: x * 2)

    def test_chain(self, benchmark):
        """Benchmark a five-step chain."""

        def chain():
            return Ok(1).map(lambda x: x + 1).and_then(lambda x: Ok(x * 2)).map(str).unwrap_or('')

        benchmark(chain)

    def test_str(self, benchmark):
        """Benchmark JSON rendering of a payload."""
        res = Ok({'id': 1, 'tags': ['a', 'b']})
        benchmark(str, res)


# =============================================================================
# Exception bridging and blocks
# =============================================================================


class TestBridging:
    """Benchmark attempt, with_attempt and try_."""

    def test_attempt_success(self, benchmark):
        """Benchmark attempt on a function that returns."""
        benchmark(attempt, lambda: 42)

    def test_attempt_failure(self, benchmark):
        """Benchmark attempt on a function that raises."""

        def fail():
            raise ValueError('boom')

        benchmark(attempt, fail)

    def test_with_attempt_call(self, benchmark):
        """Benchmark calling a with_attempt-wrapped function."""
        safe_int = with_attempt(lambda s: int(s))
        benchmark(safe_int, '123')

    def test_try_block(self, benchmark):
        """Benchmark a three-step try_ block."""

        def body():
            a = yield Ok(1)
            b = yield Ok(2)
            c = yield Ok(3)
            return Ok(a + b + c)

        benchmark(try_, body)
