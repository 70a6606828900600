# dual_ad/__init__.py
# Forward-mode automatic differentiation with dual numbers

from .core.dual import Dual, make_dual, as_dual
from .core.seeds import derivative, value_and_derivative, value, tangent

# Elementary operations (accept plain reals and Duals)
from . import ops
from .ops import (
    add, sub, mul, div, neg, pos, absolute, pow,
    sin, cos, tan, exp, log, sqrt, erf,
    norm_pdf, norm_cdf,
)

# Finite-difference validation
from .config import FDConfig
from .check import finite_difference, check_derivative, DerivativeCheck

__all__ = [
    # Core
    'Dual',
    'make_dual',
    'as_dual',
    'derivative',
    'value_and_derivative',
    'value',
    'tangent',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pos', 'absolute', 'pow',
    'sin', 'cos', 'tan', 'exp', 'log', 'sqrt', 'erf',
    'norm_pdf', 'norm_cdf',
    # Checking
    'FDConfig',
    'finite_difference',
    'check_derivative',
    'DerivativeCheck',
]
