"""Shared fixtures for the dual_ad test suite."""

import numpy as np
import pytest
from hypothesis import settings

from dual_ad import exp, log, sin

# Float operations are fast but the first example can trip the deadline on cold imports.
settings.register_profile("default", deadline=None, max_examples=200)
settings.load_profile("default")


@pytest.fixture
def composite():
    """f(x) = log(x² + exp(sin x)) and its closed-form derivative."""
    def f(x):
        return log(x**2 + exp(sin(x)))

    def f_prime(x):
        return 1 / (x**2 + np.exp(np.sin(x))) * (2 * x + np.exp(np.sin(x)) * np.cos(x))

    return f, f_prime
