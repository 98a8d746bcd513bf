"""Tax Calc - progressive income tax, preferential rates, surtaxes and credits."""

__version__ = "0.1.0"

from .sdk import *  # noqa: F401,F403
from .sdk import __all__
