"""
Core Data Model Tests

Tests for the value types and environment:
- Vector3 arithmetic
- Exponential atmosphere
- Aircraft properties preset and derived geometry
- Aircraft state defaults and snapshots
"""

import pytest
import numpy as np
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flightsim.core.vector import Vector3
from flightsim.core.properties import AircraftProperties, AIRCRAFT_PRESETS, f16_properties
from flightsim.core.state import AircraftState
from flightsim.environment.atmosphere import ExponentialAtmosphere, air_density


class TestVector3:
    """Test vector arithmetic."""

    def test_default_is_zero(self):
        v = Vector3()
        assert (v.x, v.y, v.z) == (0.0, 0.0, 0.0)

    def test_addition_and_scaling(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-1.0, 0.5, 2.0)

        c = a + b
        assert np.allclose(c.to_array(), [0.0, 2.5, 5.0])

        d = a * 2.0
        assert np.allclose(d.to_array(), [2.0, 4.0, 6.0])
        assert np.allclose((2.0 * a).to_array(), d.to_array())

        # Operands are untouched
        assert np.allclose(a.to_array(), [1.0, 2.0, 3.0])

    def test_subtraction_and_division(self):
        a = Vector3(4.0, 2.0, -2.0)
        assert np.allclose((a - Vector3(1.0, 1.0, 1.0)).to_array(), [3.0, 1.0, -3.0])
        assert np.allclose((a / 2.0).to_array(), [2.0, 1.0, -1.0])
        assert np.allclose((-a).to_array(), [-4.0, -2.0, 2.0])

    def test_length_and_normalization(self):
        v = Vector3(3.0, 4.0, 0.0)
        assert np.isclose(v.length(), 5.0)

        n = v.normalized()
        assert np.isclose(n.length(), 1.0)
        assert np.allclose(n.to_array(), [0.6, 0.8, 0.0])

    def test_zero_vector_normalization(self):
        """Zero vector has no direction and is returned unchanged."""
        n = Vector3().normalized()
        assert np.allclose(n.to_array(), [0.0, 0.0, 0.0])

    def test_dot_product(self):
        assert np.isclose(Vector3(1, 2, 3).dot(Vector3(4, -5, 6)), 12.0)

    def test_array_conversion(self):
        v = Vector3.from_array(np.array([1.5, -2.0, 0.25]))
        assert isinstance(v, Vector3)
        assert list(v) == [1.5, -2.0, 0.25]


class TestAtmosphere:
    """Test exponential atmosphere model."""

    def test_sea_level_density(self):
        assert np.isclose(air_density(0.0), 1.225)

    def test_scale_height(self):
        """Density falls by a factor e every 8000 m."""
        assert np.isclose(air_density(8000.0), 1.225 / np.e)
        assert np.isclose(air_density(16000.0), 1.225 / np.e**2)

    def test_monotonic_decrease(self):
        altitudes = np.linspace(-2000, 20000, 50)
        densities = [air_density(h) for h in altitudes]
        assert np.all(np.diff(densities) < 0)

    def test_below_sea_level_not_clamped(self):
        assert air_density(-1000.0) > 1.225

    def test_atmosphere_object(self):
        atm = ExponentialAtmosphere(5000.0)
        assert np.isclose(atm.density, air_density(5000.0))
        assert np.isclose(atm.density_ratio, atm.density / 1.225)
        assert np.isclose(atm.get_dynamic_pressure(100.0), 0.5 * atm.density * 100.0**2)

        atm.update(0.0)
        assert np.isclose(atm.density, 1.225)
        assert 'density' in atm.get_properties()

    def test_density_altitude_inverse(self):
        rho = air_density(3500.0)
        assert np.isclose(ExponentialAtmosphere.get_density_altitude(rho), 3500.0)


class TestAircraftProperties:
    """Test aircraft configuration record."""

    def test_f16_defaults(self):
        props = f16_properties()

        assert props.name == "F-16 Fighting Falcon"
        assert props.empty_mass == 8570.0
        assert props.max_fuel == 3175.0
        assert props.wing_area == 27.87
        assert props.wing_span == 9.96
        assert props.max_thrust == 127000.0
        assert props.cl_alpha == 5.5
        assert props.critical_aoa_positive == 0.384
        assert props.critical_aoa_negative == -0.262
        assert props.max_speed == 686.0

    def test_derived_geometry(self):
        props = AircraftProperties()
        assert np.isclose(props.mean_chord, 27.87 / 9.96)
        assert np.isclose(props.aspect_ratio, 9.96**2 / 27.87)

    def test_induced_drag_factor(self):
        props = AircraftProperties()
        K = props.induced_drag_factor(0.8)
        assert np.isclose(K, 1.0 / (np.pi * 0.8 * props.aspect_ratio))

    def test_copy_is_independent(self):
        props = AircraftProperties()
        other = props.copy()
        other.empty_mass = 1.0

        assert props.empty_mass == 8570.0

    def test_single_preset(self):
        assert list(AIRCRAFT_PRESETS) == ["F-16"]
        assert AIRCRAFT_PRESETS["F-16"]().to_dict() == AircraftProperties().to_dict()

    def test_field_names(self):
        names = AircraftProperties.field_names()
        assert 'wing_span' in names
        assert 'k' in names
        assert 'mean_chord' not in names


class TestAircraftState:
    """Test aircraft state record."""

    def test_default_state(self):
        state = AircraftState()

        assert np.allclose(state.position.to_array(), 0.0)
        assert np.allclose(state.velocity.to_array(), 0.0)
        assert state.heading == 0.0 and state.pitch == 0.0 and state.roll == 0.0
        assert state.throttle == 0.0 and state.thrust == 0.0
        assert state.mass == 10000.0
        assert state.altitude == 0.0 and state.airspeed == 0.0

    def test_derived_arrays(self):
        state = AircraftState(velocity=Vector3(3.0, 10.0, 4.0),
                              roll=0.1, pitch=0.2, heading=0.3,
                              roll_rate=1.0, pitch_rate=2.0, heading_rate=3.0)

        assert np.isclose(state.horizontal_speed, 5.0)
        assert np.allclose(state.euler_angles, [0.1, 0.2, 0.3])
        assert np.allclose(state.angular_rates, [1.0, 2.0, 3.0])

    def test_copy_and_dict(self):
        state = AircraftState(position=Vector3(1.0, 2.0, 3.0))
        copy = state.copy()
        copy.heading = 1.0

        assert state.heading == 0.0

        data = state.to_dict()
        assert data['position'] == {'x': 1.0, 'y': 2.0, 'z': 3.0}
        assert data['mass'] == 10000.0

    def test_string_representation(self):
        assert 'Airspeed' in str(AircraftState())
