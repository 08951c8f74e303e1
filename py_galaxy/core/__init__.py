"""
Core galaxy generation functionality.
"""

from .pcg_prng import PCG32
from .models import Atmosphere, Planet, Star, System, Sector
from .galaxy import Galaxy, GalaxyConfig, GalaxyConfigError, UnknownSeedError
from .habitability import HabitabilityScore, planet_habitability

__all__ = ['PCG32', 'Atmosphere', 'Planet', 'Star', 'System', 'Sector',
           'Galaxy', 'GalaxyConfig', 'GalaxyConfigError', 'UnknownSeedError',
           'HabitabilityScore', 'planet_habitability']
