"""
Tolerance-Aware Floating-Point Comparison.

Every projector compares floating-point parameters through this module
instead of ``==``, so that, e.g., a clone whose central latitude went
through a degree/radian round trip still compares equal to its source.

References
----------
- Squassabia, A. (2000). Comparing Floats. C++ Report, 12(2), 30-32, 39.
"""

import numpy as np

from common.constants import TOLERANCE


_DOUBLE_MAX = float(np.finfo(np.float64).max)
_DOUBLE_MIN = float(np.finfo(np.float64).tiny)


def is_nan(x: float) -> bool:
    """Is x a NaN (Not a Number)?"""
    return x != x


def is_finite(x: float) -> bool:
    """Is x neither NaN nor +/-infinity?"""
    return bool(np.isfinite(x))


def safe_difference(x: float, y: float) -> float:
    """NaN-free difference: exactly 0.0 when ``x == y`` (even for infinities)."""
    if is_nan(x) or is_nan(y):
        raise ValueError(f"safe_difference requires non-NaN operands, got {x}, {y}")
    return 0.0 if x == y else x - y


def safe_quotient(numerator: float, denominator: float) -> float:
    """NaN-free quotient.

    Unit and equal/opposite ratios are returned exactly so that, e.g.,
    ``safe_quotient(x, x)`` is ``1.0`` even for infinite ``x``.

    Raises
    ------
    ZeroDivisionError
        If ``denominator`` is zero.
    """
    if is_nan(numerator) or is_nan(denominator):
        raise ValueError(
            f"safe_quotient requires non-NaN operands, got {numerator}, {denominator}"
        )
    if denominator == 0.0:
        raise ZeroDivisionError("safe_quotient denominator is zero")

    if numerator == 0.0:
        return 0.0
    if denominator == 1.0:
        return numerator
    if denominator == -1.0:
        return -numerator
    if numerator == denominator:
        return 1.0
    if numerator == -denominator:
        return -1.0
    return numerator / denominator


def _same_bits(x: float, y: float) -> bool:
    return np.float64(x).view(np.int64) == np.float64(y).view(np.int64)


def within_tolerance(x: float, y: float, tolerance: float) -> bool:
    """Do x and y differ by no more than tolerance, or only in digits beyond it?

    For large magnitudes the ratio is compared instead, so with
    ``tolerance=1e-6`` the values ``1.0000000001e30`` and ``1.0000000002e30``
    are considered equal.

    Parameters
    ----------
    x, y : float
        Values to compare.
    tolerance : float
        Threshold in ``(0, 0.1]``.

    Returns
    -------
    bool
        True if x and y are close.

    Notes
    -----
    The relation is commutative but NOT transitive. Values are pivoted
    about zero: with ``x = 0``, ``y = -tolerance`` and ``z = +tolerance``,
    x ~ y and x ~ z, yet y !~ z.
    """
    if is_nan(tolerance) or not 0.0 < tolerance <= 0.1:
        raise ValueError(f"tolerance must be in (0, 0.1], got {tolerance}")

    # Bitwise first: handles identical NaNs and signed zeros.
    if _same_bits(x, y):
        return True

    if x == 0.0:
        return -tolerance <= y <= tolerance
    if y == 0.0:
        return -tolerance <= x <= tolerance
    if y - tolerance <= x <= y + tolerance:
        return True
    if x - tolerance <= y <= x + tolerance:
        return True

    ax = abs(x)
    ay = abs(y)
    if ay < 1.0 and ax > ay * _DOUBLE_MAX:  # Ratio would overflow.
        return False
    if ay > 1.0 and ax < ay * _DOUBLE_MIN:  # Ratio would underflow.
        return False
    ratio = x / y
    return 1.0 - tolerance <= ratio <= 1.0 + tolerance


def about_equal(x: float, y: float) -> bool:
    """``within_tolerance(x, y, TOLERANCE)``."""
    return within_tolerance(x, y, TOLERANCE)


def radians(the_degrees: float) -> float:
    """Convert degrees to radians, preserving sign."""
    return float(the_degrees) * (np.pi / 180.0)


def degrees(the_radians: float) -> float:
    """Convert radians to degrees, preserving sign."""
    return float(the_radians) * (180.0 / np.pi)
