"""
Propulsion helpers: throttle-scaled thrust along the aircraft's nose and
the fuel it burns.
"""

import numpy as np

from .state import AircraftState
from .vector import Vector3


def thrust_force(state: AircraftState) -> Vector3:
    """
    Thrust vector in the world frame (N).

    Thrust acts along the nose direction given by pitch and heading;
    roll does not change it.
    """
    T = state.thrust
    cos_theta = np.cos(state.pitch)
    return Vector3(
        T * cos_theta * np.cos(state.heading),
        T * np.sin(state.pitch),
        T * cos_theta * np.sin(state.heading),
    )


def fuel_burned(thrust: float, sfc: float, dt: float) -> float:
    """
    Fuel mass consumed over dt.

    Parameters
    ----------
    thrust : float
        Thrust (N)
    sfc : float
        Specific fuel consumption (kg/N/s)
    dt : float
        Time step (s)

    Returns
    -------
    float
        Fuel mass (kg)
    """
    return thrust * sfc * dt
