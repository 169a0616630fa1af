"""
Exponential atmosphere model.

Density decays exponentially with altitude from the sea level value:

    rho(h) = rho0 * exp(-h / H)

Units: SI (meters, kg/m^3, Pa)
"""

import numpy as np

SEA_LEVEL_DENSITY = 1.225  # kg/m^3
SCALE_HEIGHT = 8000.0  # m


def air_density(altitude: float) -> float:
    """
    Air density at altitude.

    Parameters
    ----------
    altitude : float
        Geometric altitude in meters

    Returns
    -------
    float
        Air density (kg/m^3)

    Notes
    -----
    Not clamped below sea level: negative altitudes give densities above
    the sea level value.
    """
    return float(SEA_LEVEL_DENSITY * np.exp(-altitude / SCALE_HEIGHT))


class ExponentialAtmosphere:
    """
    Single-scale-height exponential atmosphere.

    Parameters
    ----------
    altitude : float
        Geometric altitude in meters

    Attributes
    ----------
    density : float
        Air density (kg/m^3)
    density_ratio : float
        Density relative to sea level (sigma)
    """

    rho0 = SEA_LEVEL_DENSITY
    scale_height = SCALE_HEIGHT

    def __init__(self, altitude: float = 0.0):
        self.altitude = altitude
        self._compute_properties()

    def _compute_properties(self):
        self.density = air_density(self.altitude)
        self.density_ratio = self.density / self.rho0

    def update(self, altitude: float):
        """Recompute properties for a new altitude (m)."""
        self.altitude = altitude
        self._compute_properties()

    def get_dynamic_pressure(self, velocity: float) -> float:
        """
        Compute dynamic pressure.

        Parameters
        ----------
        velocity : float
            True airspeed in m/s

        Returns
        -------
        float
            Dynamic pressure q = 0.5 * rho * V^2 (Pa)
        """
        return 0.5 * self.density * velocity**2

    def get_properties(self) -> dict:
        """Atmospheric properties as a dictionary."""
        return {
            'altitude': self.altitude,
            'density': self.density,
            'density_ratio': self.density_ratio,
        }

    @staticmethod
    def get_density_altitude(density: float) -> float:
        """Altitude (m) at which the model produces the given density."""
        return -SCALE_HEIGHT * np.log(density / SEA_LEVEL_DENSITY)

    def __repr__(self):
        return (f"ExponentialAtmosphere(altitude={self.altitude:.0f} m, "
                f"rho={self.density:.4f} kg/m^3)")
