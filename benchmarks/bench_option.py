"""Benchmarks for Option creation, chaining and maybe blocks.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from fallible import Nothing, Some, from_nullable, maybe


class TestCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_from_nullable(self, benchmark):
        """Benchmark from_nullable on a present value."""
        benchmark(from_nullable, 42)


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_map(self, benchmark):
        """Benchmark map on Some."""
        opt = Some(5)
        benchmark(opt.map, lambda x: x * 2)

    def test_map_on_nothing(self, benchmark):
        """Benchmark the pass-through path of map on Nothing."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_filter(self, benchmark):
        """Benchmark filter on Some."""
        opt = Some(5)
        benchmark(opt.filter, lambda x: x > 3)

    def test_ok_or(self, benchmark):
        """Benchmark conversion to Result."""
        opt = Some(5)
        benchmark(opt.ok_or, 'missing')


class TestBlocks:
    """Benchmark maybe blocks."""

    def test_maybe_block(self, benchmark):
        """Benchmark a three-step maybe block."""

        def body():
            a = yield Some(1)
            b = yield Some(2)
            c = yield Some(3)
            return Some(a + b + c)

        benchmark(maybe, body)

    def test_maybe_short_circuit(self, benchmark):
        """Benchmark a maybe block that stops at the first step."""

        def body():
            a = yield Nothing
            return Some(a)

        benchmark(maybe, body)
