# dual_ad/core/dual.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any, Tuple


def _real(x: Any) -> np.floating:
    """Return a plain real as a NumPy floating scalar (ints widen to float64)."""
    if isinstance(x, np.floating):
        return x
    if isinstance(x, Dual) or not isinstance(x, numbers.Real):
        raise TypeError(f"expected a real number, but got {type(x).__name__}")
    if isinstance(x, (int, float, np.integer)):
        return np.float64(x)
    # other numbers.Real implementations (Fraction, ...)
    return np.float64(float(x))


def _promote(value: Any, deriv: Any) -> Tuple[np.floating, np.floating]:
    """
    Unify value and deriv to one shared floating dtype.

    The dtype is numpy.result_type of the two components, widened to float64
    when that is not a floating type (e.g. two Python ints).
    """
    for comp in (value, deriv):
        if isinstance(comp, Dual):
            raise TypeError("nested Dual numbers are not supported")
        if not isinstance(comp, numbers.Real):
            raise TypeError(
                f"Dual only accepts real components, but got {type(comp).__name__}"
            )
    if not isinstance(value, (int, float, np.number)):
        value = float(value)
    if not isinstance(deriv, (int, float, np.number)):
        deriv = float(deriv)
    dtype = np.result_type(value, deriv)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return dtype.type(value), dtype.type(deriv)


class Dual:
    """
    Dual number x + eps*x' with eps^2 = 0, for forward-mode AD.

    Attributes
    ----------
    value : np.floating
        Primal value at the evaluation point.
    deriv : np.floating
        Tangent: derivative w.r.t. the single independent variable.
        Always the same dtype as `value`.

    Duals are immutable; every operation returns a new Dual. Comparisons and
    hashing only look at `value`.
    """

    __slots__ = ("value", "deriv")
    __array_priority__ = 1000  # binary ops with NumPy scalars go through __array_ufunc__

    def __init__(self, value: Any, deriv: Any = 0.0):
        value, deriv = _promote(value, deriv)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "deriv", deriv)

    def __setattr__(self, name, val):
        raise AttributeError(f"Dual is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Dual is immutable; cannot delete {name!r}")

    def __reduce__(self):
        return (Dual, (self.value, self.deriv))

    def __repr__(self):
        return f"Dual({self.value!r}, {self.deriv!r})"

    # --- comparisons on the primal value only ---
    def __eq__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value == o

    def __ne__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value != o

    def __lt__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value < o

    def __le__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value <= o

    def __gt__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value > o

    def __ge__(self, other):
        o = _primal(other)
        return NotImplemented if o is None else self.value >= o

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return bool(self.value)

    def __float__(self):
        raise TypeError(
            "cannot convert Dual to float without dropping its derivative; "
            "use dual_ad.sin/cos/exp/log/... instead of the math module"
        )

    def __int__(self):
        raise TypeError("cannot convert Dual to int without dropping its derivative")

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        from ..ops.arithmetic import pos
        return pos(self)

    def __abs__(self):
        from ..ops.arithmetic import absolute
        return absolute(self)

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        # np.sin(d), np.float64(2.0) * d, ... -> the rule set
        from ..ops import UFUNC_RULES
        rule = UFUNC_RULES.get(ufunc)
        if method != "__call__" or rule is None or kwargs:
            return NotImplemented
        # NumPy scalars may arrive wrapped as 0-d arrays
        inputs = tuple(i[()] if isinstance(i, np.ndarray) and i.ndim == 0 else i
                       for i in inputs)
        if any(isinstance(i, np.ndarray) for i in inputs):
            return NotImplemented
        return rule(*inputs)


def _primal(x: Any):
    """Value used for comparisons, or None when x is not comparable with a Dual."""
    if isinstance(x, Dual):
        return x.value
    if isinstance(x, numbers.Real):
        return x
    return None


def make_dual(value: Any, deriv: Any = 0.0) -> Dual:
    """Construct Dual(value, deriv); both components are promoted to a common dtype."""
    return Dual(value, deriv)


def as_dual(x: Any, like: Any = None) -> Dual:
    """
    Widen a plain real to the constant Dual(x, 0); Duals pass through unchanged.

    When `like` is a Dual, a Python int/float is cast with NumPy's rules for
    mixing it with like.value (a weak scalar under NumPy 2, so a float32 Dual
    stays float32).
    """
    if isinstance(x, Dual):
        return x
    if isinstance(like, Dual) and isinstance(x, (int, float)) and not isinstance(x, bool):
        dtype = np.result_type(like.value, x)
        if np.issubdtype(dtype, np.floating):
            return Dual(dtype.type(x), 0)
    return Dual(x, 0)
