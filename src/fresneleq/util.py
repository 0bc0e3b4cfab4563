from typing import Union

import numpy as np
from astropy import units as u
from astropy.units import Quantity

from .constants import NOUNIT, RADU

__all__ = ["F_OR_ARR", "F_OR_Q_OR_ARR", "to_val", "to_rad", "to_index"]


F_OR_ARR = Union[np.ndarray, float]
F_OR_Q_OR_ARR = Union[u.Quantity, float, np.ndarray]


def to_val(
    x: F_OR_Q_OR_ARR,
    desired: str | u.Unit = NOUNIT
) -> F_OR_ARR:
    """ Value(s) of a quantity-like object in the desired unit.

    Parameters
    ----------
    x : float, quantity, array
        The input. If a Quantity is given, it is converted to `desired`, i.e.,
        ``x.to_value(desired)``. A bare number or array is understood to be in
        `desired` already.

    desired : str or astropy Unit
        The desired unit for `x`.
        Default is ``u.dimensionless_unscaled``.

    Return
    ------
    val : float or ndarray
    """
    if isinstance(x, (float, int)):
        return x*1

    try:
        return Quantity(x, desired).value
    except u.UnitConversionError:
        raise ValueError(
            "If you use astropy.Quantity, you should use unit convertible to `desired`. \n"
            + f'Now it is in "{x.unit}", unconvertible with "{desired}": {x}.'
        )


def to_rad(angle: F_OR_Q_OR_ARR) -> F_OR_ARR:
    """Angle(s) in radian. Bare numbers are taken as radian already.
    """
    return to_val(angle, RADU)


def to_index(n: F_OR_Q_OR_ARR) -> F_OR_ARR:
    """Refractive index as a plain (dimensionless) number or array.
    """
    return to_val(n, NOUNIT)
