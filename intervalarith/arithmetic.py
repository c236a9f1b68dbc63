"""Directed (Kaucher) interval arithmetic and mode-dispatched operators."""

from __future__ import annotations

from typing import Any

from . import core
from .core import Interval, Mode, get_mode, i_add, i_div, i_mul, i_sub

_DOWN = "f"
_UP = "c"


def _as_interval(value: Any) -> Interval:
    if isinstance(value, Interval):
        return value
    return Interval(value, value)


def _is_proper(x: Interval) -> bool:
    return x.a <= x.b


def _positive(x: Interval) -> bool:
    return x.a > 0 and x.b > 0


def _negative(x: Interval) -> bool:
    return x.a < 0 and x.b < 0


def _holds_zero(x: Interval) -> bool:
    return (x.a <= 0 <= x.b) or (x.a >= 0 >= x.b)


def _improper_zero(x: Interval) -> bool:
    return x.a >= 0 and x.b <= 0


def _wider(first: Interval, second: Interval) -> Interval:
    return first if first.width() >= second.width() else second


def _candidates(operation, lower_pair, upper_pair) -> Interval:
    """Build both rounding candidates from the endpoint pairs and keep the wider."""
    lower = operation(*lower_pair, rounding=_DOWN), operation(*lower_pair, rounding=_UP)
    upper = operation(*upper_pair, rounding=_UP), operation(*upper_pair, rounding=_DOWN)
    return _wider(Interval(lower[0], upper[0]), Interval(lower[1], upper[1]))


def di_add(x: Interval, y: Interval) -> Interval:
    """Directed interval sum."""
    if _is_proper(x) and _is_proper(y):
        return i_add(x, y)
    return _candidates(core._ctx.fadd, (x.a, y.a), (x.b, y.b))


def di_sub(x: Interval, y: Interval) -> Interval:
    """Directed interval difference."""
    if _is_proper(x) and _is_proper(y):
        return i_sub(x, y)
    return _candidates(core._ctx.fsub, (x.a, y.b), (x.b, y.a))


def _both_improper_zero_product(x: Interval, y: Interval) -> Interval:
    fmul = core._ctx.fmul
    first = Interval(
        max(fmul(x.a, y.a, rounding=_DOWN), fmul(x.b, y.b, rounding=_DOWN)),
        min(fmul(x.a, y.b, rounding=_UP), fmul(x.b, y.a, rounding=_UP)),
    )
    second = Interval(
        max(fmul(x.a, y.a, rounding=_UP), fmul(x.b, y.b, rounding=_UP)),
        min(fmul(x.a, y.b, rounding=_DOWN), fmul(x.b, y.a, rounding=_DOWN)),
    )
    return _wider(first, second)


def di_mul(x: Interval, y: Interval) -> Interval:
    """Directed interval product."""
    if _is_proper(x) and _is_proper(y):
        return i_mul(x, y)
    fmul = core._ctx.fmul
    xn, xp = _negative(x), _positive(x)
    yn, yp = _negative(y), _positive(y)
    if (xn or xp) and (yn or yp):
        if xp and yp:
            pairs = (x.a, y.a), (x.b, y.b)
        elif xp and yn:
            pairs = (x.b, y.a), (x.a, y.b)
        elif xn and yp:
            pairs = (x.a, y.b), (x.b, y.a)
        else:
            pairs = (x.b, y.b), (x.a, y.a)
    elif (xn or xp) and _holds_zero(y):
        if xp and y.a <= y.b:
            pairs = (x.b, y.a), (x.b, y.b)
        elif xp:
            pairs = (x.a, y.a), (x.a, y.b)
        elif xn and y.a <= y.b:
            pairs = (x.a, y.b), (x.a, y.a)
        else:
            pairs = (x.b, y.b), (x.b, y.a)
    elif _holds_zero(x) and (yn or yp):
        if x.a <= x.b and yp:
            pairs = (x.a, y.b), (x.b, y.b)
        elif x.a <= 0 and yn:
            pairs = (x.b, y.a), (x.a, y.a)
        elif x.a > x.b and yp:
            pairs = (x.a, y.a), (x.b, y.a)
        else:
            pairs = (x.b, y.b), (x.a, y.b)
    elif _improper_zero(x) and _improper_zero(y):
        return _both_improper_zero_product(x, y)
    else:
        return Interval(0, 0)
    return _candidates(fmul, *pairs)


def di_div(x: Interval, y: Interval) -> Interval:
    """Directed interval quotient; raises ZeroDivisionError where no quotient exists."""
    if _is_proper(x) and _is_proper(y):
        return i_div(x, y)
    fdiv = core._ctx.fdiv
    xn, xp = _negative(x), _positive(x)
    yn, yp = _negative(y), _positive(y)
    if (xn or xp) and (yn or yp):
        if xp and yp:
            pairs = (x.a, y.b), (x.b, y.a)
        elif xp and yn:
            pairs = (x.b, y.b), (x.a, y.a)
        elif xn and yp:
            pairs = (x.a, y.a), (x.b, y.b)
        else:
            pairs = (x.b, y.a), (x.a, y.b)
    elif (x.a <= 0 <= x.b) or (_improper_zero(x) and (yn or yp)):
        if x.a <= x.b and yp:
            pairs = (x.a, y.a), (x.b, y.a)
        elif x.a <= x.b and yn:
            pairs = (x.b, y.b), (x.a, y.b)
        elif x.a > x.b and yp:
            pairs = (x.a, y.b), (x.b, y.b)
        else:
            pairs = (x.b, y.a), (x.a, y.a)
    else:
        raise ZeroDivisionError("Division by an interval containing 0.")
    return _candidates(fdiv, *pairs)


def _directed() -> bool:
    return get_mode() is Mode.DINT


def add(x: Any, y: Any) -> Interval:
    """Sum in the current mode."""
    x, y = _as_interval(x), _as_interval(y)
    return di_add(x, y) if _directed() else i_add(x, y)


def sub(x: Any, y: Any) -> Interval:
    """Difference in the current mode."""
    x, y = _as_interval(x), _as_interval(y)
    return di_sub(x, y) if _directed() else i_sub(x, y)


def mul(x: Any, y: Any) -> Interval:
    """Product in the current mode; numbers are taken as point intervals."""
    x, y = _as_interval(x), _as_interval(y)
    return di_mul(x, y) if _directed() else i_mul(x, y)


def div(x: Any, y: Any) -> Interval:
    """Quotient in the current mode."""
    x, y = _as_interval(x), _as_interval(y)
    return di_div(x, y) if _directed() else i_div(x, y)