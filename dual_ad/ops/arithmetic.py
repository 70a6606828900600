# dual_ad/ops/arithmetic.py
import numpy as np
from ..core.dual import Dual, as_dual, _real


def _is_active(*xs):
    """True if any operand is a Dual (otherwise plain-real arithmetic applies)."""
    return any(isinstance(x, Dual) for x in xs)


def add(x, y):
    if not _is_active(x, y):
        return np.add(_real(x), _real(y))
    x, y = as_dual(x, like=y), as_dual(y, like=x)
    return Dual(x.value + y.value, x.deriv + y.deriv)


def sub(x, y):
    if not _is_active(x, y):
        return np.subtract(_real(x), _real(y))
    x, y = as_dual(x, like=y), as_dual(y, like=x)
    return Dual(x.value - y.value, x.deriv - y.deriv)


def mul(x, y):
    """Product rule: d(x*y) = x*y' + x'*y"""
    if not _is_active(x, y):
        return np.multiply(_real(x), _real(y))
    x, y = as_dual(x, like=y), as_dual(y, like=x)
    return Dual(x.value * y.value, x.value * y.deriv + x.deriv * y.value)


def div(x, y):
    """
    Quotient rule: d(x/y) = (x'*y - x*y') / y^2

    No zero guard: y == 0 gives inf/nan (and NumPy's RuntimeWarning), exactly
    as plain float64 division does.
    """
    if not _is_active(x, y):
        return np.divide(_real(x), _real(y))
    x, y = as_dual(x, like=y), as_dual(y, like=x)
    return Dual(x.value / y.value,
                (x.deriv * y.value - x.value * y.deriv) / (y.value * y.value))


def neg(x):
    if not _is_active(x):
        return np.negative(_real(x))
    return Dual(-x.value, -x.deriv)


def pos(x):
    if not _is_active(x):
        return _real(x)
    return x


def absolute(x):
    """
    |x| with derivative sign(x)*x'.

    At x == 0 the derivative is 0 (sign(0) = 0).
    """
    if not _is_active(x):
        return np.abs(_real(x))
    return Dual(np.abs(x.value), np.sign(x.value) * x.deriv)


def pow(x, y):
    """
    Power x**y.

    Three cases, depending on which operand carries a tangent:
      Dual ** real   : power rule       p * x^(p-1) * x'        (p == 0 -> 0)
      real ** Dual   : exponential rule c^y * log(c) * y'
      Dual ** Dual   : both             x^y * (y'*log(x) + y*x'/x)

    Out-of-domain inputs (negative base with fractional exponent, log of a
    non-positive base) propagate nan/inf.
    """
    if not _is_active(x, y):
        return np.power(_real(x), _real(y))

    if not isinstance(y, Dual):
        # Python scalars stay weak so a float32 Dual keeps its dtype
        p = y if isinstance(y, (int, float)) else _real(y)
        v = x.value ** p
        if p == 0:
            return Dual(v, 0)
        return Dual(v, p * x.value ** (p - 1) * x.deriv)

    if not isinstance(x, Dual):
        c = _real(x)
        v = c ** y.value
        return Dual(v, v * np.log(c) * y.deriv)

    v = x.value ** y.value
    return Dual(v, v * (y.deriv * np.log(x.value) + y.value * x.deriv / x.value))
