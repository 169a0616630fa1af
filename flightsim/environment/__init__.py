"""
Environment models for flight simulation.

This module provides the atmosphere model.
"""

from .atmosphere import ExponentialAtmosphere, air_density

__all__ = ['ExponentialAtmosphere', 'air_density']
