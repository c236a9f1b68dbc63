import mpmath
import pytest

from intervalarith.core import Interval, Mode, get_mode, get_precision, set_mode, set_precision
from intervalarith.elementary import (
    di_cos,
    di_exp,
    di_sin,
    di_sqr,
    i_cos,
    i_exp,
    i_sin,
    i_sqr,
    i_sqrt,
)


@pytest.fixture(autouse=True)
def _restore_settings():
    precision, mode = get_precision(), get_mode()
    yield
    set_precision(precision)
    set_mode(mode)


def _reference(fn, point):
    with mpmath.mp.workprec(600):
        return fn(mpmath.mpf(point))


def _distance(value, ref):
    with mpmath.mp.workprec(600):
        return abs(mpmath.mpf(value) - ref)


POINTS = [0.5, 1.0, -0.75, 2.0]


@pytest.mark.parametrize("point", POINTS)
def test_i_sin_close_to_sine(point):
    result = i_sin(Interval(point, point))
    ref = _reference(mpmath.sin, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-9
    assert _distance(result.b, ref) < 1e-9


@pytest.mark.parametrize("point", POINTS)
def test_i_sin_high_precision(point):
    set_precision(256)
    result = i_sin(Interval(point, point))
    ref = _reference(mpmath.sin, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-16
    assert _distance(result.b, ref) < 1e-16


@pytest.mark.parametrize("point", POINTS)
def test_i_cos_close_to_cosine(point):
    result = i_cos(Interval(point, point))
    ref = _reference(mpmath.cos, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-9
    assert _distance(result.b, ref) < 1e-9


@pytest.mark.parametrize("point", [0.25, 1.0, -1.0, 3.0])
def test_i_exp_close_to_exponential(point):
    result = i_exp(Interval(point, point))
    ref = _reference(mpmath.exp, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-8
    assert _distance(result.b, ref) < 1e-8


def test_i_sin_of_zero_is_zero():
    assert i_sin(Interval(0, 0)) == Interval(0, 0)


def test_i_sin_of_improper_is_zero():
    assert i_sin(Interval(2, 1)) == Interval(0, 0)


def test_i_sin_is_clamped_to_unit_range():
    result = i_sin(Interval(1.5, 1.6))
    assert result.b <= 1
    assert result.a >= -1
    assert result.a <= result.b


def test_i_cos_of_zero_is_one():
    assert i_cos(Interval(0, 0)) == Interval(1, 1)


def test_i_exp_of_zero_is_one():
    assert i_exp(Interval(0, 0)) == Interval(1, 1)


def test_i_exp_straddling_zero_returns_one():
    assert i_exp(Interval(-0.5, 0.5)) == Interval(1, 1)


def test_i_exp_of_improper_is_zero():
    assert i_exp(Interval(1, 0.5)) == Interval(0, 0)


def test_i_exp_of_interval_covers_range():
    result = i_exp(Interval(0.25, 0.5))
    assert result.a <= _reference(mpmath.exp, 0.25) + mpmath.mpf(1e-9)
    assert result.b >= _reference(mpmath.exp, 0.5) - mpmath.mpf(1e-9)
    assert result.a < result.b


@pytest.mark.parametrize(
    "given, expected",
    [
        (Interval(2, 3), Interval(4, 9)),
        (Interval(-3, 2), Interval(0, 9)),
        (Interval(-3, -2), Interval(4, 9)),
    ],
)
def test_i_sqr_values(given, expected):
    assert i_sqr(given) == expected


def test_i_sqr_rejects_improper():
    with pytest.raises(ValueError):
        i_sqr(Interval(3, 2))


def test_i_sqrt_exact_squares():
    assert i_sqrt(Interval(4, 9)) == Interval(2, 3)


def test_i_sqrt_encloses_root_of_two():
    result = i_sqrt(Interval(2, 2))
    assert result.a < result.b
    with mpmath.mp.workprec(400):
        assert mpmath.mpf(result.a) ** 2 <= 2 <= mpmath.mpf(result.b) ** 2


def test_i_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        i_sqrt(Interval(-1, 4))


def test_i_sqrt_rejects_improper():
    with pytest.raises(ValueError):
        i_sqrt(Interval(9, 4))


def test_sqrt_of_sqr_round_trip():
    result = i_sqrt(i_sqr(Interval(1.5, 2.5)))
    assert result == Interval(1.5, 2.5)


@pytest.mark.parametrize("point", POINTS)
def test_di_sin_matches_proper_sine(point):
    set_mode(Mode.DINT)
    result = di_sin(Interval(point, point))
    ref = _reference(mpmath.sin, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-9
    assert _distance(result.b, ref) < 1e-9


@pytest.mark.parametrize("point", POINTS)
def test_di_cos_matches_proper_cosine(point):
    set_mode(Mode.DINT)
    result = di_cos(Interval(point, point))
    ref = _reference(mpmath.cos, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-9
    assert _distance(result.b, ref) < 1e-9


@pytest.mark.parametrize("point", [0.25, 1.0, -1.0])
def test_di_exp_close_to_exponential(point):
    set_mode(Mode.DINT)
    result = di_exp(Interval(point, point))
    ref = _reference(mpmath.exp, point)
    assert result.a <= result.b
    assert _distance(result.a, ref) < 1e-8
    assert _distance(result.b, ref) < 1e-8


def test_di_functions_of_improper_are_zero():
    improper = Interval(2, 1)
    assert di_sin(improper) == Interval(0, 0)
    assert di_cos(improper) == Interval(0, 0)
    assert di_exp(improper) == Interval(0, 0)
    assert di_sqr(improper) == Interval(0, 0)


def test_di_sin_of_zero_is_zero():
    assert di_sin(Interval(0, 0)) == Interval(0, 0)


def test_di_exp_straddling_zero_is_series():
    result = di_exp(Interval(-0.5, 0.5))
    assert result != Interval(1, 1)
    assert result.a <= _reference(mpmath.exp, -0.5)
    assert result.b > _reference(mpmath.exp, 0.4)


def test_di_sqr_matches_i_sqr_on_proper():
    for given in (Interval(2, 3), Interval(-3, 2), Interval(-3, -2)):
        assert di_sqr(given) == i_sqr(given)