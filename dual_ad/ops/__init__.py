# dual_ad/ops/__init__.py

# Generic numeric interface: every op accepts plain reals and Duals alike,
# so the same user function runs on floats or is differentiated.
import operator
import numpy as np

from .arithmetic import add, sub, mul, div, neg, pos, absolute, pow
from .transcendental import sin, cos, tan, exp, log, sqrt, erf
from .special import norm_pdf, norm_cdf
from ..core.dual import Dual


def _compare(op):
    def rule(x, y):
        x = x.value if isinstance(x, Dual) else x
        y = y.value if isinstance(y, Dual) else y
        return op(x, y)
    return rule


def _predicate(ufunc):
    def rule(x):
        return ufunc(x.value if isinstance(x, Dual) else x)
    return rule


# NumPy ufunc -> rule, used by Dual.__array_ufunc__
UFUNC_RULES = {
    np.add: add,
    np.subtract: sub,
    np.multiply: mul,
    np.divide: div,
    np.negative: neg,
    np.positive: pos,
    np.absolute: absolute,
    np.power: pow,
    np.square: lambda x: mul(x, x),
    np.sin: sin,
    np.cos: cos,
    np.tan: tan,
    np.exp: exp,
    np.log: log,
    np.sqrt: sqrt,
    np.equal: _compare(operator.eq),
    np.not_equal: _compare(operator.ne),
    np.less: _compare(operator.lt),
    np.less_equal: _compare(operator.le),
    np.greater: _compare(operator.gt),
    np.greater_equal: _compare(operator.ge),
    np.isfinite: _predicate(np.isfinite),
    np.isnan: _predicate(np.isnan),
    np.isinf: _predicate(np.isinf),
    np.signbit: _predicate(np.signbit),
}

__all__ = [
    "add", "sub", "mul", "div", "neg", "pos", "absolute", "pow",
    "sin", "cos", "tan", "exp", "log", "sqrt", "erf",
    "norm_pdf", "norm_cdf",
    "UFUNC_RULES",
]
