"""
Core flight dynamics components.

This module provides the data records, force and moment models and the
per-tick integrator for single-aircraft flight simulation.
"""

from .vector import Vector3
from .properties import AircraftProperties, AIRCRAFT_PRESETS, DEFAULT_AIRCRAFT_TYPE, f16_properties
from .state import AircraftState
from .aerodynamics import AerodynamicsModel, dynamic_pressure
from .moments import MomentModel
from .propulsion import thrust_force, fuel_burned
from .dynamics import FlightDynamics, wrap_angle

__all__ = [
    'Vector3',
    'AircraftProperties',
    'AIRCRAFT_PRESETS',
    'DEFAULT_AIRCRAFT_TYPE',
    'f16_properties',
    'AircraftState',
    'AerodynamicsModel',
    'dynamic_pressure',
    'MomentModel',
    'thrust_force',
    'fuel_burned',
    'FlightDynamics',
    'wrap_angle'
]
