"""
Finite-Difference Configuration

Shared step-size and tolerance defaults used when validating forward-mode
derivatives against finite differences (see dual_ad.check).
"""

import numpy as np


class FDConfig:
    """Shared configuration for finite-difference checks"""

    EPS = float(np.finfo(np.float64).eps)

    # Optimal steps for O(h) forward and O(h²) central differences
    FORWARD_STEP = float(np.sqrt(EPS))
    CENTRAL_STEP = float(EPS ** (1.0 / 3.0))

    RTOL = 1e-6
    ATOL = 1e-8

    SCHEMES = ("forward", "central")

    @staticmethod
    def compute_step(x: float, scheme: str = "forward") -> float:
        """
        Compute a step scaled to the magnitude of x

        Theory:
            Forward difference error ≈ h·|f''|/2 + eps·|f|/h, minimized at
            h ~ sqrt(eps). Central difference error ≈ h²·|f'''|/6 + eps·|f|/h,
            minimized at h ~ eps^(1/3). Both are scaled by max(1, |x|) so the
            bump stays representable for large x.

        Args:
            x: Evaluation point
            scheme: "forward" or "central"

        Returns:
            h: Step size (> 0)

        Example:
            x=1.0,   forward: h ≈ 1.49e-8
            x=1e4,   forward: h ≈ 1.49e-4
        """
        if scheme not in FDConfig.SCHEMES:
            raise ValueError(f"scheme must be one of {FDConfig.SCHEMES}, got {scheme!r}")
        base = FDConfig.FORWARD_STEP if scheme == "forward" else FDConfig.CENTRAL_STEP
        return base * max(1.0, abs(float(x)))
