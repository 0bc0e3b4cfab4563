import numpy as np
from astropy import units as u

__all__ = ["PI", "HALFPI", "D2R", "R2D", "NOUNIT", "RADU"]

PI = np.pi
HALFPI = PI/2
D2R = PI/180
R2D = 180/PI

NOUNIT = u.dimensionless_unscaled
RADU = u.rad
