"""
Tests for finite-difference validation (config + check).
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dual_ad import FDConfig, DerivativeCheck, check_derivative, finite_difference, sin, exp


class TestFDConfig:

    def test_default_steps(self):
        assert_allclose(FDConfig.compute_step(1.0), math.sqrt(np.finfo(float).eps))
        assert_allclose(FDConfig.compute_step(0.0, "central"), np.finfo(float).eps ** (1 / 3))

    def test_step_scales_with_magnitude(self):
        assert_allclose(FDConfig.compute_step(-1e4), 1e4 * FDConfig.FORWARD_STEP)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError, match="scheme"):
            FDConfig.compute_step(1.0, "backward")


class TestFiniteDifference:

    def test_forward(self):
        assert_allclose(finite_difference(sin, 0.5), math.cos(0.5), rtol=1e-7)

    def test_central_is_more_accurate(self):
        x = 0.5
        err_fwd = abs(finite_difference(exp, x) - math.exp(x))
        err_ctr = abs(finite_difference(exp, x, scheme="central") - math.exp(x))
        assert err_ctr < err_fwd

    def test_explicit_step(self):
        assert_allclose(finite_difference(lambda x: x * x, 3.0, h=1e-3), 6.001, rtol=1e-9)

    @pytest.mark.parametrize("h", [0.0, -1e-6, float("nan"), float("inf")])
    def test_invalid_step(self, h):
        with pytest.raises(ValueError, match="step"):
            finite_difference(sin, 1.0, h=h)

    def test_invalid_scheme_with_step(self):
        with pytest.raises(ValueError, match="scheme"):
            finite_difference(sin, 1.0, h=1e-6, scheme="backward")

    def test_step_underflow_warns(self):
        with pytest.warns(RuntimeWarning, match="resolution"):
            fd = finite_difference(sin, 1e10, h=1e-12)
        assert fd == 0.0


class TestCheckDerivative:

    def test_passes_for_composite(self, composite):
        f, f_prime = composite
        result = check_derivative(f, 1.0)
        assert isinstance(result, DerivativeCheck)
        assert result.passed
        assert_allclose(result.ad, f_prime(1.0), rtol=1e-12)
        assert result.abs_error < 1e-6

    def test_fails_at_kink(self):
        # abs is not differentiable at 0: AD reports 0, a forward bump sees 1
        result = check_derivative(abs, 0.0)
        assert not result.passed
        assert result.ad == 0.0
        assert_allclose(result.fd, 1.0)

    def test_custom_tolerance(self):
        assert not check_derivative(abs, 0.0).passed
        assert check_derivative(abs, 0.0, atol=2.0).passed

    def test_result_is_frozen(self):
        result = check_derivative(sin, 0.1)
        with pytest.raises(AttributeError):
            result.passed = False
