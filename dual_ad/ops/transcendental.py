# dual_ad/ops/transcendental.py
import numpy as np
from scipy.special import erf as scipy_erf
from ..core.dual import Dual, _real

TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def sin(x):
    if not isinstance(x, Dual):
        return np.sin(_real(x))
    s, c = np.sin(x.value), np.cos(x.value)
    return Dual(s, c * x.deriv)


def cos(x):
    if not isinstance(x, Dual):
        return np.cos(_real(x))
    s, c = np.sin(x.value), np.cos(x.value)
    return Dual(c, -s * x.deriv)


def tan(x):
    if not isinstance(x, Dual):
        return np.tan(_real(x))
    t = np.tan(x.value)
    return Dual(t, (1 + t * t) * x.deriv)


def exp(x):
    if not isinstance(x, Dual):
        return np.exp(_real(x))
    ex = np.exp(x.value)
    return Dual(ex, ex * x.deriv)


def log(x):
    """Natural log; x <= 0 gives nan/-inf, not an error."""
    if not isinstance(x, Dual):
        return np.log(_real(x))
    return Dual(np.log(x.value), x.deriv / x.value)


def sqrt(x):
    if not isinstance(x, Dual):
        return np.sqrt(_real(x))
    s = np.sqrt(x.value)
    return Dual(s, x.deriv / (2 * s))


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    if not isinstance(x, Dual):
        return scipy_erf(_real(x))
    d = TWO_OVER_SQRT_PI * np.exp(-x.value * x.value)
    return Dual(scipy_erf(x.value), d * x.deriv)
