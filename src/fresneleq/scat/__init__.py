from .fresnel import *
