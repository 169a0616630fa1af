"""
Roll/pitch/yaw moment model.

Control moments from aileron, elevator and rudder, rate damping on each
axis, adverse yaw from aileron deflection and a nose-down speed stability
term near max speed.
"""

from typing import Callable

from .aerodynamics import dynamic_pressure
from .constants import MOMENT_SCALE
from .properties import AircraftProperties
from .state import AircraftState
from .vector import Vector3
from ..environment.atmosphere import air_density


class MomentModel:
    """
    Moments about the roll, pitch and yaw axes.

    Returned as Vector3(roll, pitch, yaw), scaled by MOMENT_SCALE.
    """

    def __init__(self, density_func: Callable[[float], float] = air_density,
                 moment_scale: float = MOMENT_SCALE):
        self.density_func = density_func
        self.moment_scale = moment_scale

    def compute_moments(self, state: AircraftState,
                        props: AircraftProperties) -> Vector3:
        """
        Compute the moment vector for the current state.

        Parameters:
        -----------
        state : AircraftState
            Current aircraft state
        props : AircraftProperties
            Aircraft configuration

        Returns:
        --------
        Vector3
            Scaled (roll, pitch, yaw) moments
        """
        q_bar = dynamic_pressure(state, self.density_func)
        S = props.wing_area
        b = props.wing_span
        c = props.mean_chord

        roll_moment = q_bar * S * b * state.aileron * props.aileron_effect
        roll_moment -= q_bar * S * b**2 * state.roll_rate * 0.1

        adverse_yaw = -state.aileron * props.aileron_effect * 0.2

        pitch_moment = q_bar * S * c * state.elevator * props.elevator_effect
        pitch_moment -= q_bar * S * c**2 * state.pitch_rate * 0.2

        # Nose-down tendency at high speed
        if state.airspeed > 0.7 * props.max_speed:
            speed_factor = (state.airspeed - 0.7 * props.max_speed) / (0.3 * props.max_speed)
            pitch_moment -= q_bar * S * c * speed_factor * 0.1

        yaw_moment = q_bar * S * b * state.rudder * props.rudder_effect
        yaw_moment -= q_bar * S * b**2 * state.heading_rate * 0.15
        yaw_moment += q_bar * S * b * adverse_yaw

        return Vector3(roll_moment, pitch_moment, yaw_moment) * self.moment_scale
