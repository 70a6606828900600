# dual_ad/core/__init__.py

"""
Core public API for the dual_ad package.

Exports:
    Dual                 : Immutable (value, deriv) pair for forward-mode AD.
    make_dual            : Construct a Dual, promoting both parts to one dtype.
    as_dual              : Widen a plain real to the constant Dual(x, 0).
    derivative           : Lift f to f' (or evaluate f'(x) directly).
    value_and_derivative : (f(x), f'(x)) from one forward evaluation.
    value, tangent       : Extract the two components (plain reals pass through).
"""

from .dual import Dual, make_dual, as_dual
from .seeds import derivative, value_and_derivative, value, tangent

__all__ = [
    "Dual", "make_dual", "as_dual",
    "derivative", "value_and_derivative",
    "value", "tangent",
]
