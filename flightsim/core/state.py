"""
Dynamic state of one aircraft.

State includes:
- Position and velocity in the world frame (y up)
- Euler attitude (heading, pitch, roll) and their rates
- Throttle, thrust and control surface deflections
- Mass, altitude and airspeed (derived each tick)
"""

import dataclasses

import numpy as np

from archimedes import struct, field

from .vector import Vector3


@struct(frozen=False)
class AircraftState:
    """
    Mutable per-tick aircraft state.

    Angles in radians, rates in rad/s, position in m, velocity in m/s.
    """

    # World frame
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)

    # Orientation (rad)
    heading: float = 0.0  # Yaw, wrapped to (-pi, pi]
    pitch: float = 0.0  # Clamped to [-0.45 pi, 0.45 pi]
    roll: float = 0.0  # Wrapped to (-pi, pi]

    # Angular rates (rad/s)
    heading_rate: float = 0.0
    pitch_rate: float = 0.0
    roll_rate: float = 0.0

    # Engine
    throttle: float = 0.0  # [0, 1]
    thrust: float = 0.0  # N

    # Control surfaces [-1, 1]
    aileron: float = 0.0
    elevator: float = 0.0
    rudder: float = 0.0

    mass: float = 10000.0  # kg
    altitude: float = 0.0  # m
    airspeed: float = 0.0  # m/s

    @property
    def euler_angles(self) -> np.ndarray:
        """[roll, pitch, heading] (rad)."""
        return np.array([self.roll, self.pitch, self.heading])

    @property
    def angular_rates(self) -> np.ndarray:
        """[roll_rate, pitch_rate, heading_rate] (rad/s)."""
        return np.array([self.roll_rate, self.pitch_rate, self.heading_rate])

    @property
    def horizontal_speed(self) -> float:
        """Speed in the horizontal (x-z) plane (m/s)."""
        return float(np.hypot(self.velocity.x, self.velocity.z))

    def copy(self) -> 'AircraftState':
        """Independent copy (vectors are immutable, so a shallow copy suffices)."""
        return dataclasses.replace(self)

    def to_dict(self) -> dict:
        """Flat dictionary with vectors expanded to x/y/z sub-dictionaries."""
        data = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Vector3):
                value = {'x': value.x, 'y': value.y, 'z': value.z}
            data[f.name] = value
        return data

    def __str__(self) -> str:
        return (
            f"Aircraft State:\n"
            f"  Position:       [{self.position.x:9.1f}, {self.position.y:9.1f}, {self.position.z:9.1f}] m\n"
            f"  Velocity:       [{self.velocity.x:8.2f}, {self.velocity.y:8.2f}, {self.velocity.z:8.2f}] m/s\n"
            f"  Airspeed:       {self.airspeed:8.2f} m/s\n"
            f"  Altitude:       {self.altitude:9.1f} m\n"
            f"  Hdg/Pitch/Roll: [{np.degrees(self.heading):7.2f}, {np.degrees(self.pitch):7.2f}, "
            f"{np.degrees(self.roll):7.2f}] deg\n"
            f"  Rates:          [{self.heading_rate:7.4f}, {self.pitch_rate:7.4f}, {self.roll_rate:7.4f}] rad/s\n"
            f"  Throttle:       {self.throttle:5.2f}  (thrust {self.thrust:9.0f} N)\n"
            f"  Mass:           {self.mass:9.1f} kg"
        )
