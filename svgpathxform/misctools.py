"""This submodule contains miscellaneous tools that are used internally, but
aren't specific to paths or path segments: number canonicalization for
d-string output and a float comparison helper."""

# External dependencies:
from math import floor, copysign, isfinite


# Default Parameters ##########################################################

# number of digits kept after the decimal point in generated d-strings
DIGITS = 3


def isclose(a, b, rtol=1e-5, atol=1e-8):
    """This is essentially np.isclose, but slightly faster."""
    return abs(a - b) < (atol + rtol * abs(b))


def round3(x, digits=DIGITS):
    """Rounds `x` to `digits` digits after the decimal point, rounding halves
    away from zero (unlike the builtin round(), which rounds to even).

    EXAMPLE
    -------
    >>> round3(1.23456)
    1.235
    >>> round3(2.0004)
    2.0
    """
    scale = 10.0**digits
    if not isfinite(abs(x) * scale):
        # so large that it has no fractional part (or not a finite number)
        return x
    r = copysign(floor(abs(x) * scale + 0.5), x) / scale
    if r == 0:
        return 0.0  # drop the sign of -0.0
    return r


def format_number(x, digits=DIGITS):
    """Formats an already rounded number with as few characters as possible.
    Infinities and NaN, which have no place in path data, are written as 0.

    EXAMPLE
    -------
    >>> format_number(2.0)
    '2'
    >>> format_number(-0.25)
    '-0.25'
    """
    if not isfinite(x):
        return '0'
    s = '{:.{}f}'.format(x, digits)
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    if s in ('-0', ''):
        s = '0'
    return s


def fmt(x, digits=DIGITS):
    """Rounds, then formats, `x` for d-string output."""
    return format_number(round3(x, digits), digits)


BugException = Exception("This code should never be reached.  You've found a "
                         "bug.  Please submit an issue with an easily "
                         "reproducible example.")
