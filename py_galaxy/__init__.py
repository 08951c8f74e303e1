"""
Procedural galaxy generator.

Derives sectors, star systems, stars and planets from a single 64-bit seed.
"""

from .core import Galaxy, GalaxyConfig, GalaxyConfigError, UnknownSeedError

__version__ = "0.1.0"

__all__ = ["Galaxy", "GalaxyConfig", "GalaxyConfigError", "UnknownSeedError", "__version__"]
