"""Compact, human-readable ETA strings."""
from .duration import *
from .misc import *
from .units import *
