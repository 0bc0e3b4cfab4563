"""
Fresnel equations for a planar interface between two non-magnetic, isotropic,
homogeneous and non-absorbing media.

All angles are measured from the surface normal, in radian (astropy Quantity
of any angular unit is also accepted). Every public function takes
``(n1, n2, theta_i, theta_t=None)``; if `theta_t` is `None`, it is derived
from Snell's law, otherwise it is used as given.

Transmittance is calculated from the transmission coefficient and the ratio
of the normal Poynting fluxes, not as ``1 - R``, so that ``T`` keeps its
precision when ``R`` approaches 1. Hence ``R + T = 1`` holds only up to
floating point rounding.
"""
from warnings import warn

import numpy as np
from numba import njit

from ..constants import HALFPI
from ..util import F_OR_ARR, F_OR_Q_OR_ARR, to_index, to_rad

__all__ = [
    "InvalidAngleError", "TotalInternalReflectionWarning",
    "snell_angle", "check_angles",
    "r_s", "r_p", "t_s", "t_p",
    "R_s", "R_p", "T_s", "T_p",
    "fresnel_coeff", "fresnel_intensity",
    "brewster_angle", "critical_angle"
]

# |sin(theta_t)| within this of 1 is rounding, not total internal reflection.
_SIN_TOL = 8*np.finfo(float).eps


class InvalidAngleError(ValueError):
    """Incidence or transmitted angle larger than pi/2 (light arriving from
    behind the interface).
    """


class TotalInternalReflectionWarning(UserWarning):
    """No real transmitted angle exists (``n1/n2*sin(theta_i) > 1``).
    """


# With error_model="numpy", a zero denominator gives inf/nan as in numpy
# instead of ZeroDivisionError.
@njit(error_model="numpy")
def _amp_s_nb(n1, n2, cos_i, cos_t):
    n1cos_i = n1*cos_i
    denom = n1cos_i + n2*cos_t
    return (n1cos_i - n2*cos_t)/denom, 2*n1cos_i/denom


@njit(error_model="numpy")
def _amp_p_nb(n1, n2, cos_i, cos_t):
    n2cos_i = n2*cos_i
    denom = n2cos_i + n1*cos_t
    return (n2cos_i - n1*cos_t)/denom, 2*n1*cos_i/denom


@njit(error_model="numpy")
def _flux_nb(n1, n2, cos_i, cos_t, t_abs2):
    return (n2*cos_t)/(n1*cos_i)*t_abs2


def snell_angle(n1: F_OR_Q_OR_ARR, n2: F_OR_Q_OR_ARR, theta_i: F_OR_Q_OR_ARR) -> F_OR_ARR:
    """ The transmitted angle from Snell's law, ``arcsin(n1/n2*sin(theta_i))``.

    Parameters
    ----------
    n1, n2 : float, array, or `~Quantity`
        The refractive indices of the incidence and transmission media.

    theta_i : float, array, or `~Quantity`
        The incidence angle. In radian if not Quantity.

    Return
    ------
    theta_t : float or ndarray
        The transmitted angle in radian. Where total internal reflection
        occurs (``|n1/n2*sin(theta_i)| > 1`` beyond rounding), it is `NaN` and
        a `TotalInternalReflectionWarning` is issued. At the critical angle
        itself it is pi/2.
    """
    n1 = to_index(n1)
    n2 = to_index(n2)
    theta_i = to_rad(theta_i)
    with np.errstate(divide="ignore", invalid="ignore"):
        sin_t = np.divide(n1, n2)*np.sin(theta_i)
        sin_t = np.where(np.abs(sin_t) - 1 <= _SIN_TOL, np.clip(sin_t, -1, 1), sin_t)[()]
        theta_t = np.arcsin(sin_t)
    if np.any(np.abs(sin_t) > 1):
        warn(f"Total internal reflection for n1={n1}, n2={n2}, theta_i={theta_i}: "
             + "no real transmitted angle, NaN is used.",
             TotalInternalReflectionWarning)
    return theta_t


def check_angles(theta_i: F_OR_Q_OR_ARR, theta_t: F_OR_Q_OR_ARR) -> None:
    """ Raise `InvalidAngleError` if any angle exceeds pi/2.

    Negative and NaN angles pass.
    """
    theta_i = to_rad(theta_i)
    theta_t = to_rad(theta_t)
    bad_t = np.any(np.asarray(theta_t) > HALFPI)
    if np.any(np.asarray(theta_i) > HALFPI):
        if bad_t:
            raise InvalidAngleError(
                f"theta_i ({theta_i}) and theta_t ({theta_t}) must be <= pi/2 rad."
            )
        raise InvalidAngleError(f"theta_i ({theta_i}) must be <= pi/2 rad.")
    if bad_t:
        raise InvalidAngleError(f"theta_t ({theta_t}) must be <= pi/2 rad.")


def _cosines(n1, n2, theta_i, theta_t=None, check=True):
    """Normalized indices and the cosines of the (derived, validated) angles.
    """
    n1 = to_index(n1)
    n2 = to_index(n2)
    theta_i = to_rad(theta_i)
    if theta_t is None:
        theta_t = snell_angle(n1, n2, theta_i)
    else:
        theta_t = to_rad(theta_t)
    if check:
        check_angles(theta_i, theta_t)
    return n1, n2, np.cos(theta_i), np.cos(theta_t)


def r_s(n1, n2, theta_i, theta_t=None, check=True):
    """ Reflection coefficient for s-polarized light.

    The factor gained by the E-field amplitude by the reflection:
    ``(n1 cos(theta_i) - n2 cos(theta_t))/(n1 cos(theta_i) + n2 cos(theta_t))``.

    Parameters
    ----------
    n1 : float, array, or `~Quantity`
        The refractive index of the incidence medium.

    n2 : float, array, or `~Quantity`
        The refractive index of the transmission medium.

    theta_i : float, array, or `~Quantity`
        The incidence angle, measured from the surface normal. In radian if
        not Quantity.

    theta_t : float, array, `~Quantity` or None, optional
        The transmitted angle. If `None` (default), it is calculated by
        `snell_angle`. Otherwise used as is.

    check : bool, optional
        Whether to run `check_angles` before the calculation.
        Default is `True`.
    """
    return _amp_s_nb(*_cosines(n1, n2, theta_i, theta_t, check))[0]


def t_s(n1, n2, theta_i, theta_t=None, check=True):
    """ Transmission coefficient for s-polarized light.

    ``2 n1 cos(theta_i)/(n1 cos(theta_i) + n2 cos(theta_t))``. See `r_s` for
    the parameters.
    """
    return _amp_s_nb(*_cosines(n1, n2, theta_i, theta_t, check))[1]


def r_p(n1, n2, theta_i, theta_t=None, check=True):
    """ Reflection coefficient for p-polarized light.

    ``(n2 cos(theta_i) - n1 cos(theta_t))/(n2 cos(theta_i) + n1 cos(theta_t))``.
    Note the sign convention: at normal incidence ``r_p = -r_s``. See `r_s`
    for the parameters.
    """
    return _amp_p_nb(*_cosines(n1, n2, theta_i, theta_t, check))[0]


def t_p(n1, n2, theta_i, theta_t=None, check=True):
    """ Transmission coefficient for p-polarized light.

    ``2 n1 cos(theta_i)/(n2 cos(theta_i) + n1 cos(theta_t))``. See `r_s` for
    the parameters.
    """
    return _amp_p_nb(*_cosines(n1, n2, theta_i, theta_t, check))[1]


def R_s(n1, n2, theta_i, theta_t=None, check=True):
    """ Reflectance for s-polarized light, ``|r_s|^2``.
    """
    return np.abs(r_s(n1, n2, theta_i, theta_t, check))**2


def R_p(n1, n2, theta_i, theta_t=None, check=True):
    """ Reflectance for p-polarized light, ``|r_p|^2``.
    """
    return np.abs(r_p(n1, n2, theta_i, theta_t, check))**2


def T_s(n1, n2, theta_i, theta_t=None, check=True):
    """ Transmittance for s-polarized light.

    ``(n2 cos(theta_t))/(n1 cos(theta_i)) |t_s|^2``, i.e., the fraction of the
    incident energy flux through the interface that is transmitted.
    """
    n1, n2, cos_i, cos_t = _cosines(n1, n2, theta_i, theta_t, check)
    ts = _amp_s_nb(n1, n2, cos_i, cos_t)[1]
    return _flux_nb(n1, n2, cos_i, cos_t, np.abs(ts)**2)


def T_p(n1, n2, theta_i, theta_t=None, check=True):
    """ Transmittance for p-polarized light.

    ``(n2 cos(theta_t))/(n1 cos(theta_i)) |t_p|^2``.
    """
    n1, n2, cos_i, cos_t = _cosines(n1, n2, theta_i, theta_t, check)
    tp = _amp_p_nb(n1, n2, cos_i, cos_t)[1]
    return _flux_nb(n1, n2, cos_i, cos_t, np.abs(tp)**2)


def fresnel_coeff(n1, n2, theta_i, theta_t=None, check=True):
    """ All four amplitude coefficients at once.

    Parameters are identical to `r_s`. The transmitted angle is derived and
    checked only once.

    Return
    ------
    rs, ts, rp, tp : float or ndarray
        The reflection and transmission coefficients of s- and p-polarized
        light.
    """
    args = _cosines(n1, n2, theta_i, theta_t, check)
    rs, ts = _amp_s_nb(*args)
    rp, tp = _amp_p_nb(*args)
    return rs, ts, rp, tp


def fresnel_intensity(n1, n2, theta_i, theta_t=None, check=True):
    """ All four reflectances and transmittances at once.

    Return
    ------
    Rs, Ts, Rp, Tp : float or ndarray
        The reflectance and transmittance of s- and p-polarized light.
    """
    n1, n2, cos_i, cos_t = _cosines(n1, n2, theta_i, theta_t, check)
    rs, ts = _amp_s_nb(n1, n2, cos_i, cos_t)
    rp, tp = _amp_p_nb(n1, n2, cos_i, cos_t)
    return (np.abs(rs)**2, _flux_nb(n1, n2, cos_i, cos_t, np.abs(ts)**2),
            np.abs(rp)**2, _flux_nb(n1, n2, cos_i, cos_t, np.abs(tp)**2))


def brewster_angle(n1, n2):
    """The incidence angle [rad] at which ``r_p = 0``, ``arctan(n2/n1)``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.arctan(np.divide(to_index(n2), to_index(n1)))


def critical_angle(n1, n2):
    """ The critical angle [rad] of total internal reflection.

    ``arcsin(n2/n1)`` if ``n1 > n2``, otherwise `NaN` (no total internal
    reflection for any incidence angle).
    """
    n1 = to_index(n1)
    n2 = to_index(n2)
    with np.errstate(divide="ignore", invalid="ignore"):
        theta_c = np.where(np.asarray(n1) > np.asarray(n2),
                           np.arcsin(np.divide(n2, n1)), np.nan)
    return theta_c[()]
