# dual_ad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dx/dx = 1) in the tangent of the input and let the
# derivative grow forwards through every operation of f.
#-----------------------------------------------------------------------------
from __future__ import annotations
import numbers
from typing import Any, Callable, Optional, Tuple, Union
import numpy as np

from .dual import Dual, _real


def value(x: Any) -> Any:
    """Return the primal value of a Dual; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Dual) else x


def tangent(x: Any) -> Any:
    """Return the derivative part of a Dual; a plain real has tangent 0."""
    if isinstance(x, Dual):
        return x.deriv
    return _real(x).dtype.type(0)


def _seed(x0: Any) -> Dual:
    if isinstance(x0, Dual):
        raise TypeError("derivative(f, x) expects a plain real x, not a Dual")
    return Dual(x0, 1)


def _evaluate(f: Callable[[Dual], Any], x0: Any) -> Dual:
    """Evaluate f on the seeded Dual and return the result as a Dual."""
    y = f(_seed(x0))
    if isinstance(y, Dual):
        return y
    if isinstance(y, numbers.Real):
        # f ignored its argument: constant, zero sensitivity
        return Dual(y, 0)
    if np.ndim(y) > 0:
        raise ValueError("derivative(f, x) expects scalar output.")
    raise TypeError(f"f must return a real number or Dual, but returned {type(y).__name__}")


def derivative(f: Callable[[Dual], Any],
               x: Optional[Union[float, np.ndarray]] = None):
    """
    Forward-mode derivative of a scalar function f at x.

    derivative(f, x) -> f'(x)
    derivative(f)    -> the function x -> f'(x)

    f must be written generically: Python operators and the dual_ad (or NumPy)
    elementary functions, not the math module. If x is array-like, f' is
    evaluated at each point and an ndarray of the same shape is returned.

    Example
    -------
    derivative(lambda x: 3 * x**2 + 4 * x + 5, 2)  -> 16.0
    """
    if x is None:
        def df(x0):
            return derivative(f, x0)
        df.__name__ = "d" + getattr(f, "__name__", "f")
        df.__doc__ = f"Derivative of {getattr(f, '__name__', 'f')} (forward mode)."
        return df

    if isinstance(x, np.ndarray) and x.ndim == 0:
        x = x[()]

    if np.ndim(x) > 0:
        xs = np.asarray(x)
        out = np.array([derivative(f, xi) for xi in xs.ravel()], dtype=np.float64)
        return out.reshape(xs.shape)

    return _evaluate(f, x).deriv


def value_and_derivative(f: Callable[[Dual], Any], x: Any) -> Tuple[Any, Any]:
    """(f(x), f'(x)) from a single forward evaluation."""
    y = _evaluate(f, x)
    return y.value, y.deriv
