# intervalarith

Interval arithmetic on multiple-precision real numbers, built on `mpmath`.

An interval is a pair of end points `[a, b]`. The arithmetic operations
compute the lower end rounded downward and the upper end rounded upward,
so that the result encloses the exact value. Intervals with `a > b`
(improper, or directed, intervals) may be built and are handled by the
directed operations.

## Modules

### `intervalarith.core`

- `Interval(a, b)`: a frozen dataclass; the end points are stored as
  `mpmath` numbers. Methods:
  - `projection()` – the proper interval spanned by the ends,
  - `opposite()` – `[-a, -b]`,
  - `dual()` – `[b, a]`,
  - `inverse()` – the wider of the two outward-rounded `[1/a, 1/b]` candidates,
  - `mid()` – `(a + b) / 2`,
  - `width()` – `int_width` or `dint_width`, depending on the mode,
  - `ends_to_strings()` – both ends as 17-significant-digit scientific
    text such as `"1.4142135623730950E0"`, the lower end rounded down and
    the upper end rounded up.
- `Mode` (`Mode.PINT`, `Mode.DINT`), `set_mode`, `get_mode`. The default
  mode is `Mode.PINT`.
- `set_precision(bits)`, `get_precision()`: the working precision in bits
  (default 40; at least 2, otherwise `ValueError`).
- `int_read(text)`: the narrowest interval holding the decimal number in
  `text`; `left_read` and `right_read` return its lower and upper end.
  Text that is not a number raises `ValueError`.
- `int_width(x)` – `b - a` rounded up; `dint_width(x)` – the larger of
  `|b - a|` rounded up and rounded down.
- `i_add`, `i_sub`, `i_mul`, `i_div`: proper interval operations.
  `i_div` raises `ZeroDivisionError` if the divisor contains zero.
- `hull(x, y)`: the smallest proper interval holding all four ends.
- `i_abs(x)`: the absolute values of the ends, in order.
- `sqrt2()`, `sqrt3()`, `pi()`: intervals enclosing these constants.

### `intervalarith.arithmetic`

- `di_add`, `di_sub`, `di_mul`, `di_div`: directed (Kaucher) operations.
  For two proper intervals they give the same result as the proper ones.
  `di_div` raises `ZeroDivisionError` where no quotient exists.
- `add`, `sub`, `mul`, `div`: use the directed operations in `Mode.DINT`
  and the proper ones otherwise. Plain numbers are taken as point
  intervals.

### `intervalarith.elementary`

- `i_sin`, `i_cos`, `i_exp` and their directed forms `di_sin`, `di_cos`,
  `di_exp`: Taylor series summed until consecutive partial sums agree to
  about `1e-18` (or a few units in the last place at low precision).
  Sine and cosine results are clipped to `[-1, 1]`.
  - An improper argument gives `[0, 0]` for `i_sin`, `i_exp`, `di_sin`,
    `di_cos` and `di_exp`.
  - `i_sin` gives `[0, 0]` for `[0, 0]`.
  - `i_exp` of an interval with `a < 0 < b` gives `[1, 1]`.
- `i_sqr(x)`: outward-rounded square; raises `ValueError` for an improper
  interval. `di_sqr(x)` gives `[0, 0]` for an improper interval instead.
- `i_sqrt(x)`: outward-rounded square root; raises `ValueError` for an
  improper interval or one with a negative lower end.

### `intervalarith.gui`

`InputForm` holds the state of a small number-input form: the chosen
`DataKind` (`REAL`, `POINT_INTERVAL`, `REAL_INTERVAL`), the labels of its
two input fields, and the result text. `on_choice_change(choice)`
switches the kind and relabels the fields; `on_calculate(a, b)` stores
and returns `"You entered: <a>, <b> for choice <n>"`.

## Usage

```python
from intervalarith.core import Interval, int_read, i_add, i_mul, hull, set_precision
from intervalarith.arithmetic import di_add
from intervalarith.elementary import i_exp, i_sqrt

set_precision(128)

tenth = int_read("0.1")          # narrowest interval holding 0.1
x = i_add(tenth, Interval(1, 2))
y = i_mul(x, x)
print(y.ends_to_strings())       # lower and upper end as decimal text

print(hull(Interval(1, 2), Interval(5, 6)))
print(i_exp(Interval(0, 1)))
print(i_sqrt(Interval(2, 2)))

# Directed intervals may have their ends reversed.
print(di_add(Interval(3, 1), Interval(1, 2)))
```

## What the package does not do

It is a library only: there is no command to run and no graphical
window. `InputForm` keeps the form's state and produces its message,
but draws nothing and does not evaluate the entered values.