"""
Pytest configuration and shared fixtures for fresneleq tests.
"""
import numpy as np
import pytest

PI = np.pi


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def incidence_angles_rad():
    """Standard incidence angles for Fresnel tests (in radians)."""
    return np.array([0, PI/6, PI/4, PI/3])


@pytest.fixture
def ref45():
    """Regression values for n1=1, n2=2, theta_i=45 deg."""
    return dict(
        R_s=0.20377661238703051,
        R_p=0.04152490775593412,
        T_s=0.7962233876129692,
        T_p=0.9584750922440658,
        r_s=-0.4514162296451364,
        r_p=0.20377661238703063,
        t_s=0.5485837703548635,
        t_p=0.6018883061935153,
    )
