"""
Aerodynamic Force and Moment Model Tests

Tests for:
- Angle of attack, lift and drag coefficients (stall, high-speed drag)
- World-frame force assembly
- Roll/pitch/yaw moments with damping and cross-coupling
- Thrust vector and fuel burn helpers
"""

import pytest
import numpy as np
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flightsim.core.vector import Vector3
from flightsim.core.properties import AircraftProperties
from flightsim.core.state import AircraftState
from flightsim.core.aerodynamics import AerodynamicsModel, dynamic_pressure
from flightsim.core.moments import MomentModel
from flightsim.core.propulsion import thrust_force, fuel_burned


def level_state(speed=100.0, pitch=0.0, heading=0.0, **kwargs):
    """Sea level state flying along heading at speed."""
    velocity = Vector3(speed * np.cos(heading), 0.0, speed * np.sin(heading))
    return AircraftState(velocity=velocity, airspeed=velocity.length(),
                         pitch=pitch, heading=heading, **kwargs)


@pytest.fixture
def props():
    return AircraftProperties()


@pytest.fixture
def aero():
    return AerodynamicsModel()


class TestDynamicPressure:

    def test_sea_level(self):
        state = level_state(100.0)
        assert np.isclose(dynamic_pressure(state), 0.5 * 1.225 * 100.0**2)

    def test_uses_altitude(self):
        state = level_state(100.0)
        state.altitude = 8000.0
        assert np.isclose(dynamic_pressure(state), 0.5 * 1.225 / np.e * 100.0**2)


class TestAngleOfAttack:

    def test_level_flight_equals_pitch(self, aero, props):
        state = level_state(100.0, pitch=0.1)
        assert np.isclose(aero.angle_of_attack(state, props), 0.1)

    def test_descending_flight_path(self, aero, props):
        state = AircraftState(velocity=Vector3(100.0, -10.0, 0.0))
        assert np.isclose(aero.angle_of_attack(state, props), np.arctan2(10.0, 100.0))

    def test_clamped_to_critical(self, aero, props):
        assert np.isclose(aero.angle_of_attack(level_state(pitch=1.0), props), 0.384)
        assert np.isclose(aero.angle_of_attack(level_state(pitch=-1.0), props), -0.262)

    def test_zero_below_horizontal_speed_threshold(self, aero, props):
        """Vertical fall gives no defined flight path angle."""
        state = AircraftState(velocity=Vector3(0.05, -50.0, 0.0), pitch=0.2)
        assert aero.angle_of_attack(state, props) == 0.0


class TestCoefficients:

    def test_linear_lift(self, aero, props):
        assert np.isclose(aero.lift_coefficient(0.1, props), 0.55)

    def test_stall_reduction(self, aero, props):
        """At critical AoA the stall factor reaches its 0.3 floor."""
        cl = aero.lift_coefficient(0.384, props)
        assert np.isclose(cl, 5.5 * 0.384 * 0.3)

    def test_partial_stall(self, aero, props):
        alpha = 0.9 * 0.384
        factor = 1.0 - (alpha - 0.8 * 0.384) / (0.2 * 0.384)
        cl = aero.lift_coefficient(alpha, props)
        assert np.isclose(cl, min(1.4, 5.5 * alpha * factor))
        assert cl < 5.5 * alpha

    def test_cl_max_limit(self, aero, props):
        assert np.isclose(aero.lift_coefficient(-0.262, props), -1.4)

    def test_drag_polar(self, aero, props):
        cd = aero.drag_coefficient(0.55, 100.0, props)
        assert np.isclose(cd, 0.02 + 0.042 * 0.55**2)

    def test_high_speed_drag_rise(self, aero, props):
        cd = aero.drag_coefficient(0.0, 0.9 * 686.0, props)
        assert np.isclose(cd, 0.02 + 0.1 * 0.5)

    def test_coefficients_dict(self, aero, props):
        state = level_state(100.0, pitch=0.1, rudder=0.5)
        coeffs = aero.coefficients(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        assert np.isclose(coeffs['q_bar'], q_bar)
        assert np.isclose(coeffs['lift'], q_bar * 27.87 * 0.55)
        assert np.isclose(coeffs['side_force'], q_bar * 27.87 * 0.5 * 0.3 * 0.2)


class TestAerodynamicForce:

    def test_zero_velocity_gives_zero_force(self, aero, props):
        force = aero.compute_force(AircraftState(pitch=0.2, rudder=1.0), props)
        assert np.allclose(force.to_array(), 0.0)

    def test_zero_alpha_pure_drag(self, aero, props):
        state = level_state(100.0)
        force = aero.compute_force(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        drag = q_bar * 27.87 * 0.02
        assert np.allclose(force.to_array(), [-drag, 0.0, 0.0])

    def test_lift_points_up_in_level_flight(self, aero, props):
        state = level_state(100.0, pitch=0.1)
        force = aero.compute_force(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        assert np.isclose(force.y, q_bar * 27.87 * 0.55)
        assert force.x < 0

    def test_lift_plane_follows_heading(self, aero, props):
        """Heading of 90 deg moves drag onto the z axis."""
        state = level_state(100.0, pitch=0.1, heading=np.pi / 2)
        force = aero.compute_force(state, props)

        assert force.y > 0
        assert force.z < 0
        assert np.isclose(force.x, 0.0, atol=1e-6)

    def test_rudder_side_force(self, aero, props):
        base = aero.compute_force(level_state(100.0), props)
        with_rudder = aero.compute_force(level_state(100.0, rudder=1.0), props)

        q_bar = 0.5 * 1.225 * 100.0**2
        side = q_bar * 27.87 * 0.3 * 0.2
        assert np.isclose(with_rudder.z - base.z, side)


class TestMomentModel:

    def test_no_airspeed_no_moment(self, props):
        state = AircraftState(aileron=1.0, elevator=1.0, rudder=1.0)
        moments = MomentModel().compute_moments(state, props)
        assert np.allclose(moments.to_array(), 0.0)

    def test_aileron_roll_and_adverse_yaw(self, props):
        state = level_state(100.0, aileron=1.0)
        moments = MomentModel().compute_moments(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        S, b = 27.87, 9.96
        assert np.isclose(moments.x, q_bar * S * b * 0.5 * 0.001)
        assert np.isclose(moments.y, 0.0)
        assert np.isclose(moments.z, q_bar * S * b * (-0.5 * 0.2) * 0.001)

    def test_elevator_pitch(self, props):
        state = level_state(100.0, elevator=-1.0)
        moments = MomentModel().compute_moments(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        c = 27.87 / 9.96
        assert np.isclose(moments.y, -q_bar * 27.87 * c * 0.4 * 0.001)

    def test_rate_damping(self, props):
        state = level_state(100.0, roll_rate=1.0, pitch_rate=1.0, heading_rate=1.0)
        moments = MomentModel().compute_moments(state, props)

        q_bar = 0.5 * 1.225 * 100.0**2
        S, b = 27.87, 9.96
        c = S / b
        assert np.isclose(moments.x, -q_bar * S * b**2 * 0.1 * 0.001)
        assert np.isclose(moments.y, -q_bar * S * c**2 * 0.2 * 0.001)
        assert np.isclose(moments.z, -q_bar * S * b**2 * 0.15 * 0.001)

    def test_high_speed_nose_down(self, props):
        slow = MomentModel().compute_moments(level_state(0.6 * 686.0), props)
        fast = MomentModel().compute_moments(level_state(0.85 * 686.0), props)

        assert np.isclose(slow.y, 0.0)
        assert fast.y < 0

    def test_custom_scale(self, props):
        state = level_state(100.0, aileron=1.0)
        unscaled = MomentModel(moment_scale=1.0).compute_moments(state, props)
        scaled = MomentModel().compute_moments(state, props)
        assert np.isclose(scaled.x, unscaled.x * 0.001)


class TestPropulsion:

    def test_thrust_along_heading(self):
        state = AircraftState(thrust=1000.0, heading=np.pi / 2)
        force = thrust_force(state)
        assert np.allclose(force.to_array(), [0.0, 0.0, 1000.0], atol=1e-9)

    def test_thrust_with_pitch(self):
        state = AircraftState(thrust=1000.0, pitch=0.3)
        force = thrust_force(state)
        assert np.allclose(force.to_array(), [1000.0 * np.cos(0.3), 1000.0 * np.sin(0.3), 0.0])

    def test_roll_does_not_change_thrust(self):
        a = thrust_force(AircraftState(thrust=500.0, pitch=0.2, heading=1.0))
        b = thrust_force(AircraftState(thrust=500.0, pitch=0.2, heading=1.0, roll=1.2))
        assert np.allclose(a.to_array(), b.to_array())

    def test_fuel_burned(self):
        assert np.isclose(fuel_burned(127000.0, 0.00008, 0.1), 1.016)
        assert fuel_burned(0.0, 0.00008, 0.1) == 0.0
