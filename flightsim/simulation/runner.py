"""
Fixed-step simulation driver.

Calls FlightDynamics.update(dt) once per tick and records the time
history of the aircraft state.
"""

import logging

import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.dynamics import FlightDynamics

logger = logging.getLogger(__name__)

# Signature of the per-tick control callback: (t, dynamics) -> None
ControlFunc = Callable[[float, FlightDynamics], None]


@dataclass
class SimulationHistory:
    """
    Recorded time history.

    Vector quantities have shape (N, 3); angles are ordered
    [roll, pitch, heading] and rates [roll_rate, pitch_rate, heading_rate].
    """

    time: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    euler_angles: np.ndarray
    angular_rates: np.ndarray
    throttle: np.ndarray
    aileron: np.ndarray
    elevator: np.ndarray
    rudder: np.ndarray
    fuel: np.ndarray
    mass: np.ndarray
    airspeed: np.ndarray
    altitude: np.ndarray

    def __len__(self) -> int:
        return len(self.time)

    @property
    def controls(self) -> dict:
        return {
            'throttle': self.throttle,
            'aileron': self.aileron,
            'elevator': self.elevator,
            'rudder': self.rudder,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per recorded tick."""
        data = {'time': self.time}
        for name, columns in (('position', ('x', 'y', 'z')),
                              ('velocity', ('vx', 'vy', 'vz')),
                              ('euler_angles', ('roll', 'pitch', 'heading')),
                              ('angular_rates', ('roll_rate', 'pitch_rate', 'heading_rate'))):
            values = getattr(self, name)
            for i, column in enumerate(columns):
                data[column] = values[:, i]

        for name in ('throttle', 'aileron', 'elevator', 'rudder',
                     'fuel', 'mass', 'airspeed', 'altitude'):
            data[name] = getattr(self, name)

        return pd.DataFrame(data)


class SimulationRunner:
    """
    Drives a FlightDynamics instance with a fixed time step.

    Parameters
    ----------
    dynamics : FlightDynamics
        Aircraft to simulate (mutated in place)
    dt : float
        Time step (s)
    controls : Callable, optional
        Called as controls(t, dynamics) before every tick
    """

    def __init__(self, dynamics: FlightDynamics, dt: float = 0.02,
                 controls: Optional[ControlFunc] = None):
        self.dynamics = dynamics
        self.dt = dt
        self.controls = controls

    def run(self, n_steps: int) -> SimulationHistory:
        """
        Advance n_steps ticks.

        Returns
        -------
        SimulationHistory
            n_steps + 1 samples, including the initial state
        """
        n = n_steps + 1

        # Preallocate
        time = np.arange(n) * self.dt
        position = np.zeros((n, 3))
        velocity = np.zeros((n, 3))
        euler_angles = np.zeros((n, 3))
        angular_rates = np.zeros((n, 3))
        scalars = {name: np.zeros(n) for name in
                   ('throttle', 'aileron', 'elevator', 'rudder',
                    'fuel', 'mass', 'airspeed', 'altitude')}

        def record(i):
            state = self.dynamics.state
            position[i] = state.position.to_array()
            velocity[i] = state.velocity.to_array()
            euler_angles[i] = state.euler_angles
            angular_rates[i] = state.angular_rates
            for name in ('throttle', 'aileron', 'elevator', 'rudder',
                         'mass', 'airspeed', 'altitude'):
                scalars[name][i] = getattr(state, name)
            scalars['fuel'][i] = self.dynamics.fuel

        record(0)
        for i in range(1, n):
            if self.controls is not None:
                self.controls(time[i - 1], self.dynamics)
            self.dynamics.update(self.dt)
            record(i)

        logger.debug("Simulated %d steps (%.2f s)", n_steps, n_steps * self.dt)

        return SimulationHistory(
            time=time,
            position=position,
            velocity=velocity,
            euler_angles=euler_angles,
            angular_rates=angular_rates,
            **scalars,
        )

    def run_for(self, duration: float) -> SimulationHistory:
        """Advance by duration seconds (rounded to whole ticks)."""
        return self.run(int(round(duration / self.dt)))


def run_from_config(config, controls: Optional[ControlFunc] = None) -> SimulationHistory:
    """
    Build the aircraft described by a SimulationConfig and fly it.

    Parameters
    ----------
    config : SimulationConfig
        Loaded configuration
    controls : Callable, optional
        Per-tick control callback

    Returns
    -------
    SimulationHistory
    """
    dynamics = config.create_dynamics()
    runner = SimulationRunner(dynamics, dt=config.dt, controls=controls)
    return runner.run(config.n_steps)
