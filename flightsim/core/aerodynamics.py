"""
Aerodynamic force model for the flight dynamics core.

Provides:
- Dynamic pressure from the exponential atmosphere
- Lift, drag and rudder side force with stall and high-speed drag effects
- Projection of those forces into the world frame
"""

import numpy as np
from typing import Callable, Dict

from .constants import VELOCITY_EPSILON
from .properties import AircraftProperties
from .state import AircraftState
from .vector import Vector3
from ..environment.atmosphere import air_density


def dynamic_pressure(state: AircraftState,
                     density_func: Callable[[float], float] = air_density) -> float:
    """q = 0.5 * rho(altitude) * V^2 (Pa)."""
    rho = density_func(state.altitude)
    return 0.5 * rho * state.airspeed**2


class AerodynamicsModel:
    """
    Lift/drag/side-force model with linear lift, stall degradation and
    parabolic drag polar.

    Forces are returned in the world frame (y up).
    """

    def __init__(self, density_func: Callable[[float], float] = air_density):
        """
        Parameters:
        -----------
        density_func : Callable
            Altitude (m) -> air density (kg/m^3)
        """
        self.density_func = density_func

    def angle_of_attack(self, state: AircraftState,
                        props: AircraftProperties) -> float:
        """
        Flight path angle below the horizon plus pitch, clamped to the
        critical AoA interval.

        Zero when horizontal speed is too small to define a flight path.
        """
        alpha = 0.0
        horizontal_speed = state.horizontal_speed
        if horizontal_speed > VELOCITY_EPSILON:
            alpha = np.arctan2(-state.velocity.y, horizontal_speed) + state.pitch

        return float(np.clip(alpha, props.critical_aoa_negative,
                             props.critical_aoa_positive))

    def lift_coefficient(self, alpha: float, props: AircraftProperties) -> float:
        """Linear lift curve with post-stall reduction, limited to +/- ClMax."""
        cl = props.cl0 + props.cl_alpha * alpha

        stall_onset = 0.8 * props.critical_aoa_positive
        if alpha > stall_onset:
            stall_factor = 1.0 - (alpha - stall_onset) / (0.2 * props.critical_aoa_positive)
            cl *= max(0.3, stall_factor)

        return float(np.clip(cl, -props.cl_max, props.cl_max))

    def drag_coefficient(self, cl: float, airspeed: float,
                         props: AircraftProperties) -> float:
        """Cd = Cd0 + K*Cl^2, plus a drag rise above 80% of max speed."""
        cd = props.cd0 + props.k * cl**2

        if airspeed > 0.8 * props.max_speed:
            speed_factor = (airspeed - 0.8 * props.max_speed) / (0.2 * props.max_speed)
            cd += 0.1 * speed_factor

        return cd

    def coefficients(self, state: AircraftState,
                     props: AircraftProperties) -> Dict[str, float]:
        """
        Intermediate aerodynamic quantities for the current state.

        Returns:
        --------
        dict
            alpha (rad), cl, cd, q_bar (Pa), lift, drag, side_force (N)
        """
        q_bar = dynamic_pressure(state, self.density_func)
        S = props.wing_area

        alpha = self.angle_of_attack(state, props)
        cl = self.lift_coefficient(alpha, props)
        cd = self.drag_coefficient(cl, state.airspeed, props)

        return {
            'alpha': alpha,
            'cl': cl,
            'cd': cd,
            'q_bar': q_bar,
            'lift': q_bar * S * cl,
            'drag': q_bar * S * cd,
            'side_force': q_bar * S * state.rudder * props.rudder_effect * 0.2,
        }

    def compute_force(self, state: AircraftState,
                      props: AircraftProperties) -> Vector3:
        """
        Total aerodynamic force in the world frame (N).

        Drag opposes the velocity, lift is perpendicular to it in the
        heading-aligned vertical plane, and side force is horizontal and
        perpendicular to the heading.
        """
        if state.velocity.length() <= VELOCITY_EPSILON:
            return Vector3()

        coeffs = self.coefficients(state, props)
        psi = state.heading
        cos_psi, sin_psi = np.cos(psi), np.sin(psi)

        velocity_dir = state.velocity.normalized()

        lift_dir = Vector3(
            -velocity_dir.y * cos_psi,
            velocity_dir.x * cos_psi + velocity_dir.z * sin_psi,
            -velocity_dir.y * sin_psi,
        ).normalized()

        side = coeffs['side_force']
        side_vector = Vector3(-side * sin_psi, 0.0, side * cos_psi)

        return (lift_dir * coeffs['lift']
                + velocity_dir * (-coeffs['drag'])
                + side_vector)
