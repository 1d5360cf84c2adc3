"""This submodule contains the tokenizer used by parse_path() to split SVG
path element d-strings into command letters, numbers and arc flags.

Unlike a regular expression split of the whole d-string, items are read one
at a time so that the parser can ask for an arc flag (a single '0' or '1'
that may be glued to the next number, as in "a1,1 0 0110,10") instead of a
general number."""

# External dependencies
from math import isfinite
import re

WHITESPACE = frozenset(' \t\n\v\f\r')
SEPARATORS = WHITESPACE | {','}
DIGITS = frozenset('0123456789')
NUMBER_START = DIGITS | {'+', '-', '.'}
ARC_FLAGS = frozenset('01')

# An exponent marker needs digits: in "1e" or "3em" the number ends before
# the "e", which is then read as an unknown command letter.
NUMBER_RE = re.compile(r"[-+]?[0-9]*(?:\.[0-9]*)?(?:[eE][-+]?[0-9]+)?")
LITERAL_RE = re.compile(r"([-+]?)([0-9]*)(?:\.([0-9]*))?(?:[eE]([-+]?[0-9]+))?")
COORDINATE_RE = re.compile(r"[-+]?[0-9.]")

# fraction digits past this many do not change a float
MAX_FRACTION_DIGITS = 18


def _skip_separators(s, pos):
    end = len(s)
    while pos < end and s[pos] in SEPARATORS:
        pos += 1
    return pos


def next_item(s, pos=0):
    """Returns the next item of `s` starting at index `pos` together with the
    index just past it.  An item is either a number or a single character
    (a command letter, or something unrecognized).  An empty item means the
    end of `s` was reached."""
    pos = _skip_separators(s, pos)
    if pos >= len(s):
        return '', pos
    if s[pos] in NUMBER_START:
        match = NUMBER_RE.match(s, pos)
        return match.group(), match.end()
    return s[pos], pos + 1


def next_arc_flag(s, pos=0):
    """Returns a single '0' or '1' character as a complete item, even if it is
    immediately followed by more digits.  If the next character is not a
    flag, an empty item is returned and `pos` is left pointing at it, so the
    caller can fall back to next_item()."""
    pos = _skip_separators(s, pos)
    if pos < len(s) and s[pos] in ARC_FLAGS:
        return s[pos], pos + 1
    return '', pos


def is_coordinate(item):
    """Checks if an item read by next_item() is a number (an optional sign
    followed by a digit or a decimal point)."""
    return COORDINATE_RE.match(item) is not None


def str2float(item):
    """Converts a number item to a float.  The integer and fraction digits are
    accumulated separately as integers, the fraction is rescaled by a power
    of ten, then the exponent and sign are applied.  Anything without integer
    or fraction digits, or too large for a float, converts to 0.0."""
    match = LITERAL_RE.match(item)
    sign, int_digits, frac_digits, exponent = match.groups()
    if not int_digits and not frac_digits:
        return 0.0

    try:
        res = float(int(int_digits)) if int_digits else 0.0
        if frac_digits:
            frac_digits = frac_digits[:MAX_FRACTION_DIGITS]
            res += int(frac_digits) / 10**len(frac_digits)
        if exponent:
            res *= 10.0**int(exponent)
    except (OverflowError, ValueError):
        # ValueError: more digits than int() accepts
        return 0.0
    if not isfinite(res):
        return 0.0
    if sign == '-':
        res = -res
    return res


def tokenize(pathdef):
    """Yields every item of `pathdef` in general (non arc flag) mode."""
    pos = 0
    while True:
        item, pos = next_item(pathdef, pos)
        if not item:
            return
        yield item
