"""
Per-tick flight dynamics integrator.

Implements:
- Translational dynamics (Newton's 2nd law, explicit Euler)
- Rotational dynamics about decoupled roll/pitch/yaw axes with an
  inertia estimate from mass and wing span
- Euler angle kinematics with angle wrapping and pitch limiting
- Fuel burn and mass update
"""

import logging

import numpy as np
from typing import Union, Sequence

from .aerodynamics import AerodynamicsModel, dynamic_pressure
from .constants import (
    GRAVITY,
    INERTIA_FACTOR_PITCH,
    INERTIA_FACTOR_ROLL,
    INERTIA_FACTOR_YAW,
    INITIAL_AIRSPEED,
    INITIAL_FUEL_FRACTION,
    MAX_PITCH,
    MAX_PITCH_RATE,
    MAX_ROLL_RATE,
    MAX_YAW_RATE,
    OSWALD_EFFICIENCY,
)
from .moments import MomentModel
from .properties import AIRCRAFT_PRESETS, AircraftProperties
from .propulsion import fuel_burned, thrust_force
from .state import AircraftState
from .vector import Vector3
from ..environment.atmosphere import air_density

logger = logging.getLogger(__name__)


def wrap_angle(angle: float) -> float:
    """Wrap an angle (rad) into (-pi, pi]."""
    wrapped = np.pi - np.mod(np.pi - angle, 2.0 * np.pi)
    if wrapped <= -np.pi:
        wrapped += 2.0 * np.pi
    return float(wrapped)


def clamp(value: float, lower: float, upper: float) -> float:
    return float(min(upper, max(lower, value)))


class FlightDynamics:
    """
    Single-aircraft flight dynamics.

    Owns one AircraftProperties record, one AircraftState and the fuel
    quantity. The caller drives the simulation by calling update(dt) once
    per tick; control inputs are clamped rather than rejected.

    Not thread-safe: one instance per simulated aircraft.
    """

    def __init__(self, properties: AircraftProperties = None):
        """
        Parameters:
        -----------
        properties : AircraftProperties, optional
            Aircraft configuration (default: F-16 preset)
        """
        self._props = properties.copy() if properties is not None else AircraftProperties()
        self._state = AircraftState()
        self._fuel = 0.0

        self.aero_model = AerodynamicsModel(air_density)
        self.moment_model = MomentModel(air_density)

        self.reset()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> AircraftState:
        """Snapshot of the current state."""
        return self._state.copy()

    @property
    def properties(self) -> AircraftProperties:
        """Snapshot of the aircraft configuration."""
        return self._props.copy()

    @property
    def fuel(self) -> float:
        """Current fuel (kg)."""
        return self._fuel

    def get_air_density(self, altitude: float) -> float:
        """Air density (kg/m^3) at altitude (m)."""
        return air_density(altitude)

    def get_dynamic_pressure(self) -> float:
        """Dynamic pressure (Pa) at the current altitude and airspeed."""
        return dynamic_pressure(self._state, air_density)

    def snapshot(self) -> dict:
        """Plain dictionary of the state fields plus fuel."""
        data = self._state.to_dict()
        data['fuel'] = self._fuel
        return data

    # ------------------------------------------------------------------
    # Setup and control inputs
    # ------------------------------------------------------------------

    def initialize(self, position: Union[Vector3, Sequence[float]], heading: float):
        """
        Place the aircraft at position flying at 100 m/s along heading,
        with half fuel.
        """
        if not isinstance(position, Vector3):
            position = Vector3.from_array(position)

        self._state.position = position
        self._state.heading = heading
        self._state.altitude = position.y
        self._state.velocity = Vector3(
            INITIAL_AIRSPEED * np.cos(heading),
            0.0,
            INITIAL_AIRSPEED * np.sin(heading),
        )
        self._state.airspeed = self._state.velocity.length()
        self._fuel = self._props.max_fuel * INITIAL_FUEL_FRACTION

    def set_aircraft_type(self, name: str):
        """
        Replace the aircraft configuration with a known preset.

        Unknown names leave the current configuration untouched.
        """
        factory = AIRCRAFT_PRESETS.get(name)
        if factory is None:
            logger.debug("Ignoring unknown aircraft type %r", name)
            return

        self._props = factory()
        self._fuel = clamp(self._fuel, 0.0, self._props.max_fuel)
        logger.debug("Aircraft type set to %s (%s)", name, self._props.name)

    def set_aircraft_properties(self, **fields):
        """
        Overwrite individual configuration fields.

        The induced drag factor is rederived from the (possibly new) span
        and area with an Oswald efficiency of 0.8. Fuel is clamped to the
        (possibly new) max_fuel and mass is recomputed from it.

        Raises:
        -------
        TypeError
            If a field name is not part of AircraftProperties
        """
        unknown = set(fields) - set(AircraftProperties.field_names())
        if unknown:
            raise TypeError(f"Unknown aircraft property: {', '.join(sorted(unknown))}")

        for name, value in fields.items():
            setattr(self._props, name, value)

        self._fuel = clamp(self._fuel, 0.0, self._props.max_fuel)
        self._state.mass = self._props.empty_mass + self._fuel
        self._props.k = self._props.induced_drag_factor(OSWALD_EFFICIENCY)

    def set_throttle(self, throttle: float):
        """Throttle setting, clamped to [0, 1]."""
        self._state.throttle = clamp(throttle, 0.0, 1.0)

    def set_control_surfaces(self, aileron: float, elevator: float, rudder: float):
        """Normalized deflections, each clamped to [-1, 1]."""
        self._state.aileron = clamp(aileron, -1.0, 1.0)
        self._state.elevator = clamp(elevator, -1.0, 1.0)
        self._state.rudder = clamp(rudder, -1.0, 1.0)

    def reset(self):
        """Default state and half fuel."""
        self._state = AircraftState()
        self._fuel = self._props.max_fuel * INITIAL_FUEL_FRACTION

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def update(self, dt: float):
        """
        Advance the simulation by dt seconds.

        dt is integrated as given; negative or very large steps are the
        caller's responsibility.
        """
        state = self._state
        props = self._props

        # Mass and propulsion
        state.mass = props.empty_mass + self._fuel
        state.thrust = state.throttle * props.max_thrust

        if state.thrust > 0 and self._fuel > 0:
            burned = fuel_burned(state.thrust, props.thrust_sfc, dt)
            self._fuel = clamp(self._fuel - burned, 0.0, props.max_fuel)
            if self._fuel == 0.0:
                logger.debug("Fuel exhausted")

        # === Translational dynamics ===
        thrust_vec = thrust_force(state)
        weight = Vector3(0.0, -state.mass * GRAVITY, 0.0)
        aero_force = self.aero_model.compute_force(state, props)

        acceleration = (thrust_vec + weight + aero_force) * (1.0 / state.mass)

        state.velocity = state.velocity + acceleration * dt
        state.position = state.position + state.velocity * dt

        state.altitude = state.position.y
        state.airspeed = state.velocity.length()

        # === Rotational dynamics ===
        moments = self.moment_model.compute_moments(state, props)

        span_sq = props.wing_span**2
        Ixx = INERTIA_FACTOR_ROLL * state.mass * span_sq
        Iyy = INERTIA_FACTOR_PITCH * state.mass * span_sq
        Izz = INERTIA_FACTOR_YAW * state.mass * span_sq

        state.roll_rate += moments.x / Ixx * dt
        state.pitch_rate += moments.y / Iyy * dt
        state.heading_rate += moments.z / Izz * dt

        state.roll_rate = clamp(state.roll_rate, -MAX_ROLL_RATE, MAX_ROLL_RATE)
        state.pitch_rate = clamp(state.pitch_rate, -MAX_PITCH_RATE, MAX_PITCH_RATE)
        state.heading_rate = clamp(state.heading_rate, -MAX_YAW_RATE, MAX_YAW_RATE)

        # === Kinematics ===
        state.roll = wrap_angle(state.roll + state.roll_rate * dt)
        state.pitch = clamp(state.pitch + state.pitch_rate * dt, -MAX_PITCH, MAX_PITCH)
        state.heading = wrap_angle(state.heading + state.heading_rate * dt)

        # Mass reflects this tick's burn
        state.mass = props.empty_mass + self._fuel

    def __repr__(self) -> str:
        return (f"FlightDynamics(aircraft='{self._props.name}', "
                f"altitude={self._state.altitude:.1f} m, "
                f"airspeed={self._state.airspeed:.1f} m/s, fuel={self._fuel:.1f} kg)")


if __name__ == "__main__":
    print("=== Flight Dynamics Test ===\n")

    fdm = FlightDynamics()
    fdm.initialize(Vector3(0.0, 1000.0, 0.0), 0.0)
    fdm.set_throttle(0.6)
    fdm.set_control_surfaces(0.0, 0.1, 0.0)

    print(fdm.properties)
    print()

    dt = 0.02
    for step in range(500):
        fdm.update(dt)
        if step % 100 == 0:
            print(f"t = {(step + 1) * dt:5.2f} s")
            print(fdm.state)
            print(f"  Fuel:           {fdm.fuel:9.1f} kg")
            print()
