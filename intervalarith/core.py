"""Interval numbers with outward-rounded endpoint arithmetic."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

import mpmath
from mpmath import libmp

DEFAULT_PRECISION = 40
OUT_DIGITS = 17

_DOWN = "f"
_UP = "c"

_ctx = mpmath.MPContext()
_ctx.prec = DEFAULT_PRECISION


class Mode(enum.Enum):
    """Arithmetic flavour used by mode-dependent operations."""

    DINT = "dint"
    PINT = "pint"


class _Settings:
    mode: Mode = Mode.PINT


_settings = _Settings()


def _to_mpf(value: Any):
    if hasattr(value, "_mpf_"):
        return _ctx.make_mpf(value._mpf_)
    return _ctx.mpf(value)


def _rational(value) -> Fraction:
    p, q = libmp.to_rational(value._mpf_)
    return Fraction(p, q)


def _format_end(value, upward: bool) -> str:
    """Format one endpoint with OUT_DIGITS significant digits, rounded outward."""
    if not _ctx.isfinite(value):
        return str(value)
    exact = _rational(value)
    if exact == 0:
        return "0." + "0" * (OUT_DIGITS - 1) + "E0"
    negative = exact < 0
    magnitude = abs(exact)
    exp10 = len(str(magnitude.numerator)) - len(str(magnitude.denominator))
    while Fraction(10) ** exp10 > magnitude:
        exp10 -= 1
    while Fraction(10) ** (exp10 + 1) <= magnitude:
        exp10 += 1
    scaled = magnitude / Fraction(10) ** (exp10 - OUT_DIGITS + 1)
    grow = upward != negative
    digits = math.ceil(scaled) if grow else math.floor(scaled)
    if digits == 10**OUT_DIGITS:
        digits //= 10
        exp10 += 1
    text = str(digits)
    sign = "-" if negative else ""
    return f"{sign}{text[0]}.{text[1:]}E{exp10}"


@dataclass(frozen=True)
class Interval:
    """A closed interval [a, b]; a > b is allowed for directed intervals."""

    a: Any = 0
    b: Any = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", _to_mpf(self.a))
        object.__setattr__(self, "b", _to_mpf(self.b))

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}]"

    def projection(self) -> Interval:
        """Return the proper interval spanned by the endpoints."""
        if self.a > self.b:
            return Interval(self.b, self.a)
        return Interval(self.a, self.b)

    def opposite(self) -> Interval:
        """Return [-a, -b]."""
        return Interval(-self.a, -self.b)

    def dual(self) -> Interval:
        """Return [b, a]."""
        return Interval(self.b, self.a)

    def inverse(self) -> Interval:
        """Return the wider of the two outward-rounded [1/a, 1/b] candidates."""
        first = Interval(
            _ctx.fdiv(1, self.a, rounding=_DOWN), _ctx.fdiv(1, self.b, rounding=_UP)
        )
        second = Interval(
            _ctx.fdiv(1, self.a, rounding=_UP), _ctx.fdiv(1, self.b, rounding=_DOWN)
        )
        if dint_width(first) >= dint_width(second):
            return first
        return second

    def mid(self):
        """Return the midpoint of the endpoints."""
        return (self.b + self.a) / 2

    def width(self):
        """Return the width according to the current mode."""
        if _settings.mode is Mode.DINT:
            return dint_width(self)
        return int_width(self)

    def ends_to_strings(self) -> tuple[str, str]:
        """Return the endpoints as scientific strings, rounded outward."""
        return _format_end(self.a, upward=False), _format_end(self.b, upward=True)


def set_mode(mode: Mode) -> None:
    """Select the arithmetic mode."""
    _settings.mode = Mode(mode)


def get_mode() -> Mode:
    """Return the current arithmetic mode."""
    return _settings.mode


def set_precision(bits: int) -> None:
    """Set the working precision in bits."""
    bits = int(bits)
    if bits < 2:
        raise ValueError(f"precision must be at least 2 bits, got {bits}")
    _ctx.prec = bits


def get_precision() -> int:
    """Return the working precision in bits."""
    return _ctx.prec


def int_read(text: str) -> Interval:
    """Parse a decimal string into the tightest enclosing interval."""
    source = text.strip()
    try:
        lower = _ctx.mpf(source, rounding=_DOWN)
        upper = _ctx.mpf(source, rounding=_UP)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"not a decimal number: {text!r}") from exc
    return Interval(lower, upper)


def left_read(text: str):
    """Return the lower bound of the decimal number in text."""
    return int_read(text).a


def right_read(text: str):
    """Return the upper bound of the decimal number in text."""
    return int_read(text).b


def int_width(x: Interval):
    """Return b - a rounded upward."""
    return _ctx.fsub(x.b, x.a, rounding=_UP)


def dint_width(x: Interval):
    """Return the larger of |b - a| rounded up and rounded down."""
    upper = abs(_ctx.fsub(x.b, x.a, rounding=_UP))
    lower = abs(_ctx.fsub(x.b, x.a, rounding=_DOWN))
    return upper if upper > lower else lower


def i_add(x: Interval, y: Interval) -> Interval:
    """Outward-rounded interval sum."""
    return Interval(
        _ctx.fadd(x.a, y.a, rounding=_DOWN), _ctx.fadd(x.b, y.b, rounding=_UP)
    )


def i_sub(x: Interval, y: Interval) -> Interval:
    """Outward-rounded interval difference."""
    return Interval(
        _ctx.fsub(x.a, y.b, rounding=_DOWN), _ctx.fsub(x.b, y.a, rounding=_UP)
    )


def _endpoint_pairs(x: Interval, y: Interval):
    return ((x.a, y.a), (x.a, y.b), (x.b, y.a), (x.b, y.b))


def i_mul(x: Interval, y: Interval) -> Interval:
    """Outward-rounded interval product."""
    pairs = _endpoint_pairs(x, y)
    lower = min(_ctx.fmul(p, q, rounding=_DOWN) for p, q in pairs)
    upper = max(_ctx.fmul(p, q, rounding=_UP) for p, q in pairs)
    return Interval(lower, upper)


def i_div(x: Interval, y: Interval) -> Interval:
    """Outward-rounded interval quotient; y must not contain zero."""
    if y.a <= 0 <= y.b:
        raise ZeroDivisionError("Division by an interval containing 0.")
    pairs = _endpoint_pairs(x, y)
    lower = min(_ctx.fdiv(p, q, rounding=_DOWN) for p, q in pairs)
    upper = max(_ctx.fdiv(p, q, rounding=_UP) for p, q in pairs)
    return Interval(lower, upper)


def hull(x: Interval, y: Interval) -> Interval:
    """Smallest proper interval containing all four endpoints."""
    ends = (x.a, x.b, y.a, y.b)
    return Interval(min(ends), max(ends))


def i_abs(x: Interval) -> Interval:
    """Absolute values of the endpoints, ordered."""
    first, second = abs(x.a), abs(x.b)
    if second < first:
        first, second = second, first
    return Interval(first, second)


def _constant(lower_text: str, upper_text: str) -> Interval:
    return Interval(left_read(lower_text), right_read(upper_text))


def sqrt2() -> Interval:
    """An interval enclosing the square root of 2."""
    return _constant("1.414213562373095048", "1.414213562373095049")


def sqrt3() -> Interval:
    """An interval enclosing the square root of 3."""
    return _constant("1.732050807568877293", "1.732050807568877294")


def pi() -> Interval:
    """An interval enclosing pi."""
    return _constant("3.141592653589793238", "3.141592653589793239")