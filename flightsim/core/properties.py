"""
Static aircraft configuration record and the default aircraft preset.

Units: SI (kg, m, m^2, N, rad, m/s)
"""

import dataclasses

import numpy as np

from archimedes import struct


@struct(frozen=False)
class AircraftProperties:
    """
    Per-aircraft-type configuration.

    Mass/geometry, engine, aerodynamic coefficients, flight envelope and
    control effectiveness. Defaults are the F-16 preset.
    """

    name: str = "F-16 Fighting Falcon"

    # Mass and geometry
    empty_mass: float = 8570.0  # kg
    max_fuel: float = 3175.0  # kg
    wing_area: float = 27.87  # m^2
    wing_span: float = 9.96  # m

    # Engine
    max_thrust: float = 127000.0  # N, with afterburner
    thrust_military: float = 76000.0  # N, military power
    thrust_sfc: float = 0.00008  # kg/N/s

    # Aerodynamic coefficients
    cl0: float = 0.0  # Lift coefficient at zero AoA
    cl_alpha: float = 5.5  # Lift curve slope (1/rad)
    cd0: float = 0.02  # Parasitic drag
    k: float = 0.042  # Induced drag factor
    cl_max: float = 1.4

    # Envelope
    critical_aoa_positive: float = 0.384  # ~22 deg
    critical_aoa_negative: float = -0.262  # ~-15 deg
    min_maneuverable_speed: float = 20.0  # m/s
    max_speed: float = 686.0  # m/s, ~Mach 2 at sea level

    # Control effectiveness
    aileron_effect: float = 0.5
    elevator_effect: float = 0.4
    rudder_effect: float = 0.3

    @property
    def mean_chord(self) -> float:
        """Mean aerodynamic chord c = S / b (m)."""
        return self.wing_area / self.wing_span

    @property
    def aspect_ratio(self) -> float:
        """Aspect ratio AR = b^2 / S."""
        return self.wing_span**2 / self.wing_area

    def induced_drag_factor(self, oswald_efficiency: float) -> float:
        """K = 1 / (pi * e * AR)."""
        return 1.0 / (np.pi * oswald_efficiency * self.aspect_ratio)

    def copy(self) -> 'AircraftProperties':
        """Independent copy of this record."""
        return dataclasses.replace(self)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in dataclasses.fields(cls))

    def __str__(self) -> str:
        return (
            f"Aircraft: {self.name}\n"
            f"  Empty mass:       {self.empty_mass:10.1f} kg\n"
            f"  Max fuel:         {self.max_fuel:10.1f} kg\n"
            f"  Wing area/span:   {self.wing_area:7.2f} m^2 / {self.wing_span:5.2f} m\n"
            f"  Max thrust:       {self.max_thrust:10.0f} N\n"
            f"  Critical AoA:     [{np.degrees(self.critical_aoa_negative):6.1f}, "
            f"{np.degrees(self.critical_aoa_positive):6.1f}] deg\n"
            f"  Speed range:      [{self.min_maneuverable_speed:6.1f}, {self.max_speed:6.1f}] m/s"
        )


def f16_properties() -> AircraftProperties:
    """Simplified F-16 Fighting Falcon."""
    return AircraftProperties(name="F-16 Fighting Falcon")


DEFAULT_AIRCRAFT_TYPE = "F-16"

# Preset name -> factory
AIRCRAFT_PRESETS = {
    DEFAULT_AIRCRAFT_TYPE: f16_properties,
}
