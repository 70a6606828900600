# dual_ad/ops/special.py
import numpy as np
from scipy.special import ndtr
from ..core.dual import Dual, _real

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)


def _phi(x0):
    return np.exp(-0.5 * x0 * x0) / SQRT_TWO_PI


def norm_pdf(x):
    """Standard normal density phi(x); d/dx phi(x) = -x * phi(x)."""
    if not isinstance(x, Dual):
        return _phi(_real(x))
    p = _phi(x.value)
    return Dual(p, -x.value * p * x.deriv)


def norm_cdf(x):
    """Standard normal CDF N(x); d/dx N(x) = phi(x)."""
    if not isinstance(x, Dual):
        return ndtr(_real(x))
    return Dual(ndtr(x.value), _phi(x.value) * x.deriv)
