"""
Derivative checking by bumping.

Compares the forward-mode derivative with a finite difference of f itself:

    forward : [f(x+h) - f(x)] / h
    central : [f(x+h) - f(x-h)] / (2h)
"""

import warnings
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .config import FDConfig
from .core.seeds import derivative


@dataclass(frozen=True)
class DerivativeCheck:
    """Result of check_derivative at a single point."""
    x: float
    ad: float
    fd: float
    abs_error: float
    rel_error: float
    passed: bool


def finite_difference(f: Callable, x: float, h: Optional[float] = None,
                      scheme: str = "forward") -> float:
    """Finite-difference approximation of f'(x); f is evaluated on plain reals."""
    if h is None:
        h = FDConfig.compute_step(x, scheme)
    elif scheme not in FDConfig.SCHEMES:
        raise ValueError(f"scheme must be one of {FDConfig.SCHEMES}, got {scheme!r}")
    if not np.isfinite(h) or h <= 0:
        raise ValueError(f"step h must be positive and finite, got {h!r}")

    x = np.float64(x)
    h = np.float64(h)
    if x + h == x:
        warnings.warn(
            f"Finite-difference step h={h:g} is below the resolution of x={x:g}; "
            f"the difference quotient will be 0 or nan.",
            RuntimeWarning,
            stacklevel=2,
        )

    if scheme == "forward":
        return (f(x + h) - f(x)) / h
    return (f(x + h) - f(x - h)) / (2 * h)


def check_derivative(f: Callable, x: float, rtol: Optional[float] = None,
                     atol: Optional[float] = None, h: Optional[float] = None,
                     scheme: str = "forward") -> DerivativeCheck:
    """
    Validate derivative(f, x) against a finite difference.

    passed  <=>  |ad - fd| <= atol + rtol * |fd|
    """
    rtol = FDConfig.RTOL if rtol is None else rtol
    atol = FDConfig.ATOL if atol is None else atol

    ad = float(derivative(f, x))
    fd = float(finite_difference(f, x, h=h, scheme=scheme))
    abs_err = abs(ad - fd)
    rel_err = abs_err / abs(fd) if fd != 0 else abs_err
    return DerivativeCheck(
        x=float(x), ad=ad, fd=fd,
        abs_error=abs_err, rel_error=rel_err,
        passed=bool(abs_err <= atol + rtol * abs(fd)),
    )
