"""Elementary functions on intervals: power series and squares and roots."""

from __future__ import annotations

from typing import Callable

from mpmath import libmp

from . import core
from .arithmetic import di_add, di_div, di_mul, di_sub
from .core import Interval, get_precision, i_add, i_div, i_mul, i_sub

_DOWN = "f"
_UP = "c"
_EPS = 1e-18
_K_LIMIT = (2**31 - 1) // 2

_Binary = Callable[[Interval, Interval], Interval]


def _zero() -> Interval:
    return Interval(0, 0)


def _tolerance():
    """Convergence threshold: 1e-18, or a few ulps where precision cannot resolve it."""
    ctx = core._ctx
    return max(ctx.mpf(_EPS), ctx.ldexp(ctx.one, 3 - get_precision()))


def _close(old, new, eps) -> bool:
    diff = abs(old - new)
    if old == 0:
        return diff < eps
    return diff / abs(old) < eps


def _relative_close(old, new, eps) -> bool:
    return old != 0 and abs(old - new) / abs(old) < eps


def _trig_converged(w: Interval, w1: Interval, eps) -> bool:
    if _close(w.a, w1.a, eps) and _close(w.b, w1.b, eps):
        return True
    if w.a != 0 and w.b == 0:
        return abs(w.a - w1.a) < eps and abs(w.b - w1.b) < eps
    return False


def _clamp_unit(w: Interval) -> Interval:
    a, b = w.a, w.b
    if b > 1:
        b = 1
        if a > 1:
            a = 1
    if a < -1:
        a = -1
        if b < -1:
            b = -1
    return Interval(a, b)


def _sin_series(
    x: Interval,
    mul: _Binary,
    div: _Binary,
    add: _Binary,
    sub: _Binary,
    zero_shortcut: bool,
) -> Interval:
    if x.a > x.b:
        return _zero()
    eps = _tolerance()
    term = partial = x
    square = mul(x, x)
    k = 1
    subtract = True
    while k <= _K_LIMIT:
        denominator = (k + 1) * (k + 2)
        term = mul(term, div(square, Interval(denominator, denominator)))
        following = sub(partial, term) if subtract else add(partial, term)
        if zero_shortcut and partial.a == 0 and partial.b == 0:
            return _zero()
        if _trig_converged(partial, following, eps):
            return _clamp_unit(following)
        partial = following
        k += 2
        subtract = not subtract
    return _zero()


def _cos_series(
    x: Interval, mul: _Binary, div: _Binary, add: _Binary, sub: _Binary
) -> Interval:
    eps = _tolerance()
    term = partial = Interval(1, 1)
    square = mul(x, x)
    k = 1
    subtract = True
    while k <= _K_LIMIT:
        denominator = k * (k + 1)
        term = mul(term, div(square, Interval(denominator, denominator)))
        following = sub(partial, term) if subtract else add(partial, term)
        if _trig_converged(partial, following, eps):
            return _clamp_unit(following)
        partial = following
        k += 2
        subtract = not subtract
    return _zero()


def _exp_series(x: Interval, div: _Binary, add: _Binary) -> Interval:
    if x.a > x.b:
        return _zero()
    eps = _tolerance()
    term = partial = Interval(1, 1)
    k = 1
    while k <= _K_LIMIT:
        term = i_mul(term, div(x, Interval(k, k)))
        following = add(partial, term)
        if _relative_close(partial.a, following.a, eps) and _relative_close(
            partial.b, following.b, eps
        ):
            return following
        partial = following
        k += 1
    return _zero()


def _square(x: Interval) -> Interval:
    if x.a <= 0 <= x.b:
        smallest = core._ctx.zero
    elif x.a > 0:
        smallest = x.a
    else:
        smallest = x.b
    largest = max(abs(x.a), abs(x.b))
    fmul = core._ctx.fmul
    return Interval(
        fmul(smallest, smallest, rounding=_DOWN),
        fmul(largest, largest, rounding=_UP),
    )


def i_sin(x: Interval) -> Interval:
    """Sine by its Taylor series; [0, 0] for an improper argument."""
    return _sin_series(x, i_mul, i_div, i_add, i_sub, zero_shortcut=True)


def i_cos(x: Interval) -> Interval:
    """Cosine by its Taylor series."""
    return _cos_series(x, i_mul, i_div, i_add, i_sub)


def i_exp(x: Interval) -> Interval:
    """Exponential by its Taylor series.

    An argument straddling zero yields [1, 1]; an improper one yields [0, 0].
    """
    if x.a < 0 and x.b > 0:
        return Interval(1, 1)
    return _exp_series(x, i_div, i_add)


def i_sqr(x: Interval) -> Interval:
    """Outward-rounded square; raises ValueError for an improper interval."""
    if x.a > x.b:
        raise ValueError("square of an improper interval")
    return _square(x)


def i_sqrt(x: Interval) -> Interval:
    """Outward-rounded square root of a proper, non-negative interval."""
    if x.a > x.b:
        raise ValueError("square root of an improper interval")
    if x.a < 0:
        raise ValueError("square root of an interval with negative values")
    ctx = core._ctx
    prec = get_precision()
    lower = ctx.make_mpf(libmp.mpf_sqrt(x.a._mpf_, prec, _DOWN))
    upper = ctx.make_mpf(libmp.mpf_sqrt(x.b._mpf_, prec, _UP))
    return Interval(lower, upper)


def di_sin(x: Interval) -> Interval:
    """Sine by its Taylor series in directed arithmetic."""
    return _sin_series(x, di_mul, di_div, di_add, di_sub, zero_shortcut=False)


def di_cos(x: Interval) -> Interval:
    """Cosine by its Taylor series in directed arithmetic; [0, 0] if improper."""
    if x.a > x.b:
        return _zero()
    return _cos_series(x, di_mul, di_div, di_add, di_sub)


def di_exp(x: Interval) -> Interval:
    """Exponential by its Taylor series in directed arithmetic; [0, 0] if improper."""
    return _exp_series(x, di_div, di_add)


def di_sqr(x: Interval) -> Interval:
    """Outward-rounded square; [0, 0] for an improper interval."""
    if x.a > x.b:
        return _zero()
    return _square(x)