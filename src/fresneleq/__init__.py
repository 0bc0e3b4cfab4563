from .constants import *
from .util import *
from .scat.fresnel import *

__version__ = "0.1.0"
