"""doctags package root."""

from doctags.exceptions import NeverRaise, NeverThrown
from doctags.invariants import never

__all__ = ["__version__", "NeverRaise", "NeverThrown", "never"]

__version__ = "0.1.0"
