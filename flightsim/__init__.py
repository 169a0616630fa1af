"""
Single-aircraft flight dynamics simulation.

Sub-packages:
- core: data records, aerodynamic/moment models and the per-tick integrator
- environment: atmosphere model
- io: YAML configuration
- simulation: fixed-step driver and time history recording
- visualization: matplotlib plots of recorded histories
"""

from .core import FlightDynamics, AircraftProperties, AircraftState, Vector3

__version__ = "0.1.0"

__all__ = ['FlightDynamics', 'AircraftProperties', 'AircraftState', 'Vector3']
