"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given

from fallible import Err, Nothing, Ok, ResultError, Some, err, ok

from .strategies import errs, integers, oks, payloads, results


class TestResultCreation:
    """Tests for Ok/Err instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_err_creation(self):
        """Err wraps an error of any type."""
        assert Err('boom').error == 'boom'
        exc = ValueError('bad')
        assert Err(exc).error is exc

    def test_factories(self):
        """ok() and err() build the same values as the constructors."""
        assert ok(1) == Ok(1)
        assert err('x') == Err('x')

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        res = Ok(1)
        with pytest.raises(AttributeError):
            res.value = 2  # type: ignore[misc]

    def test_ok_and_err_never_equal(self):
        """Ok and Err with the same payload are different values."""
        assert Ok(1) != Err(1)


class TestResultPredicates:
    """Tests for is_ok, is_err, is_ok_and and is_err_and."""

    def test_is_ok_is_err(self):
        """Exactly one of is_ok/is_err holds."""
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False
        assert Err('e').is_ok() is False
        assert Err('e').is_err() is True

    def test_is_ok_and(self, calls):
        """is_ok_and only consults the predicate for Ok."""
        assert Ok(5).is_ok_and(lambda x: x > 3) is True
        assert Ok(1).is_ok_and(lambda x: x > 3) is False
        assert Err(5).is_ok_and(calls.append) is False
        assert calls == []

    def test_is_err_and(self, calls):
        """is_err_and only consults the predicate for Err."""
        assert Err('boom').is_err_and(lambda e: e == 'boom') is True
        assert Ok('boom').is_err_and(calls.append) is False
        assert calls == []

    def test_bool_is_refused(self):
        """Results have no implicit truth value."""
        with pytest.raises(TypeError):
            bool(Ok(1))
        with pytest.raises(TypeError):
            bool(Err('e'))

    @given(results)
    def test_exactly_one_variant(self, res):
        """is_ok and is_err are mutually exclusive and exhaustive."""
        assert res.is_ok() != res.is_err()


class TestResultToOption:
    """Tests for ok(), err() and into_option()."""

    def test_ok_on_ok(self):
        """Ok.ok() is Some(value), Ok.err() is Nothing."""
        assert Ok(3).ok() == Some(3)
        assert Ok(3).err() is Nothing

    def test_ok_none_is_some_none(self):
        """A successful None is still Some(None)."""
        assert Ok(None).ok() == Some(None)

    def test_err_on_err(self):
        """Err.ok() is Nothing, Err.err() is Some(error)."""
        assert Err('e').ok() is Nothing
        assert Err('e').err() == Some('e')

    def test_into_option(self):
        """into_option keeps Ok values and drops errors."""
        assert Ok(1).into_option() == Some(1)
        assert Err('e').into_option() is Nothing


class TestResultUnwrap:
    """Tests for unwrap, unwrap_err, expect and expect_err."""

    def test_unwrap_ok(self):
        """unwrap returns the Ok value."""
        assert Ok('v').unwrap() == 'v'

    def test_unwrap_err_raises(self):
        """unwrap on Err raises ResultError naming the Err."""
        with pytest.raises(ResultError) as exc_info:
            Err('bad').unwrap()
        assert str(exc_info.value) == 'Unwrapping value on Err("bad")'

    def test_unwrap_err_chains_exception(self):
        """An exception payload becomes the cause of the ResultError."""
        cause = ValueError('bad')
        with pytest.raises(ResultError) as exc_info:
            Err(cause).unwrap()
        assert exc_info.value.__cause__ is cause
        assert str(exc_info.value) == 'Unwrapping value on Err(ValueError: bad)'

    def test_unwrap_err_on_err(self):
        """unwrap_err returns the error of Err."""
        assert Err('e').unwrap_err() == 'e'

    def test_unwrap_err_on_ok_raises(self):
        """unwrap_err on Ok raises ResultError naming the Ok."""
        with pytest.raises(ResultError) as exc_info:
            Ok(42).unwrap_err()
        assert str(exc_info.value) == 'Unwrapping error value on Ok(42)'

    def test_expect(self):
        """expect returns Ok values and prefixes the message on Err."""
        assert Ok(1).expect('needed') == 1
        with pytest.raises(ResultError) as exc_info:
            Err('disk full').expect('write failed')
        assert str(exc_info.value) == 'write failed: "disk full"'

    def test_expect_err(self):
        """expect_err returns errors and prefixes the message on Ok."""
        assert Err('e').expect_err('needed') == 'e'
        with pytest.raises(ResultError) as exc_info:
            Ok(7).expect_err('should have failed')
        assert str(exc_info.value) == 'should have failed: 7'

    def test_unwrap_or(self):
        """unwrap_or returns the default only for Err."""
        assert Ok(1).unwrap_or(0) == 1
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_or_else_receives_error(self, calls):
        """unwrap_or_else passes the error to the fallback, and only on Err."""
        assert Ok(1).unwrap_or_else(calls.append) == 1
        assert calls == []
        assert Err('abc').unwrap_or_else(len) == 3

    @given(payloads)
    def test_unwrap_or_on_ok_ignores_default(self, value):
        """Ok(x).unwrap_or(anything) is x."""
        assert Ok(value).unwrap_or(object()) == value


class TestResultTransform:
    """Tests for map, map_err, map_or and map_or_else."""

    def test_map(self):
        """map transforms Ok and leaves Err untouched."""
        assert Ok(2).map(lambda x: x + 1) == Ok(3)
        res = Err('e')
        assert res.map(lambda x: x + 1) is res

    def test_map_skips_callback_on_err(self, calls):
        """map never calls f on Err."""
        Err('e').map(calls.append)
        assert calls == []

    def test_map_err(self, calls):
        """map_err transforms Err and leaves Ok untouched."""
        assert Err('e').map_err(str.upper) == Err('E')
        res = Ok(1)
        assert res.map_err(calls.append) is res
        assert calls == []

    def test_map_or(self):
        """map_or applies f to Ok and returns the default for Err."""
        assert Ok(2).map_or(0, lambda x: x * 3) == 6
        assert Err('e').map_or(0, lambda x: x * 3) == 0

    def test_map_or_else(self):
        """map_or_else feeds the error to the default function."""
        assert Ok(2).map_or_else(len, lambda x: x * 3) == 6
        assert Err('four').map_or_else(len, lambda x: x * 3) == 4

    @given(integers)
    def test_map_composition(self, value):
        """Mapping f then g equals mapping their composition."""
        f = lambda x: x + 1  # noqa: E731
        g = lambda x: x * 2  # noqa: E731
        assert Ok(value).map(f).map(g) == Ok(value).map(lambda x: g(f(x)))


class TestResultCombinators:
    """Tests for and_, and_then, or_ and or_else."""

    def test_and(self):
        """and_ returns other for Ok and self for Err."""
        assert Ok(1).and_(Ok('b')) == Ok('b')
        assert Ok(1).and_(Err('x')) == Err('x')
        res = Err('first')
        assert res.and_(Ok('b')) is res

    def test_and_then(self):
        """and_then chains Result-returning functions."""

        def parse(s):
            return Ok(int(s)) if s.isdigit() else Err(f'not a number: {s}')

        assert Ok('12').and_then(parse).map(lambda x: x + 1) == Ok(13)
        assert Ok('ab').and_then(parse) == Err('not a number: ab')

    def test_and_then_short_circuits(self, calls):
        """and_then on Err returns the same Err without calling f."""
        res = Err('e')
        assert res.and_then(calls.append) is res
        assert calls == []

    def test_or(self):
        """or_ keeps Ok and falls back for Err."""
        res = Ok(1)
        assert res.or_(Ok(2)) is res
        assert Err('e').or_(Ok(2)) == Ok(2)
        assert Err('e').or_(Err('f')) == Err('f')

    def test_or_else(self, calls):
        """or_else recovers from Err using the error."""
        assert Err('e').or_else(lambda e: Ok(f'recovered {e}')) == Ok('recovered e')
        res = Ok(1)
        assert res.or_else(calls.append) is res
        assert calls == []

    @given(oks)
    def test_and_then_right_identity(self, res):
        """res.and_then(Ok) equals res."""
        assert res.and_then(Ok) == res

    @given(errs)
    def test_err_passes_through_chain(self, res):
        """Err survives map and and_then unchanged."""
        assert res.map(lambda x: x).and_then(Ok) is res


class TestResultTranspose:
    """Tests for Result.transpose."""

    def test_transpose_ok_none(self):
        """Ok(None) transposes to Nothing."""
        assert Ok(None).transpose() is Nothing

    def test_transpose_ok_value(self):
        """Ok(x) transposes to Some(Ok(x))."""
        assert Ok(1).transpose() == Some(Ok(1))
        res = Ok(1)
        assert res.transpose().value is res

    @pytest.mark.parametrize('value', [0, '', False])
    def test_transpose_keeps_falsy(self, value):
        """Only None is dropped; falsy values stay."""
        assert Ok(value).transpose() == Some(Ok(value))

    def test_transpose_err(self):
        """An Err is never dropped."""
        assert Err('e').transpose() == Some(Err('e'))
        assert Err(None).transpose() == Some(Err(None))


class TestResultMatch:
    """Tests for Result.match."""

    def test_match_ok(self):
        """match calls the ok handler with the value."""
        assert Ok(2).match(ok=lambda v: v * 10, err=lambda e: -1) == 20

    def test_match_err(self):
        """match calls the err handler with the error."""
        assert Err('bad').match(ok=lambda v: v * 10, err=lambda e: f'error: {e}') == 'error: bad'

    def test_match_requires_both_handlers(self):
        """Both handlers are required keyword arguments."""
        with pytest.raises(TypeError):
            Ok(1).match(ok=lambda v: v)  # type: ignore[call-arg]


class TestResultFormatting:
    """Tests for str() and repr() of Results."""

    def test_str_ok(self):
        """str renders the payload in JSON."""
        assert str(Ok(42)) == 'Ok(42)'
        assert str(Ok({'a': 1})) == 'Ok({"a":1})'
        assert str(Ok(None)) == 'Ok(null)'

    def test_str_err(self):
        """String errors are quoted."""
        assert str(Err('x')) == 'Err("x")'

    def test_str_err_exception(self):
        """Exception payloads render as type and message."""
        assert str(Err(ValueError('boom'))) == 'Err(ValueError: boom)'

    def test_str_nested(self):
        """Nested variants use their own rendering."""
        assert str(Ok(Some(1))) == 'Ok(Some(1))'
        assert str(Err(Ok('y'))) == 'Err(Ok("y"))'

    def test_str_big_int(self):
        """Ints beyond 64 bits still render their digits."""
        assert str(Ok(2**70)) == f'Ok({2**70})'
        assert str(Err(-(2**64))) == f'Err({-(2**64)})'

    def test_str_non_serializable(self):
        """Unencodable payloads never raise from str()."""
        circular: list[object] = []
        circular.append(circular)
        assert str(Ok(lambda: 1)) == 'Ok(<non-serializable>)'
        assert str(Err(circular)) == 'Err(<non-serializable>)'

    def test_repr(self):
        """repr uses Python reprs of the payload."""
        assert repr(Ok(42)) == 'Ok(42)'
        assert repr(Err('x')) == "Err('x')"
