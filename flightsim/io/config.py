"""
Simulation Configuration System

Provides YAML-based configuration loading for the aircraft preset,
property overrides, initial conditions and simulation timing.
"""

import yaml
import numpy as np
from typing import Dict, Any

from ..core.constants import OSWALD_EFFICIENCY
from ..core.dynamics import FlightDynamics
from ..core.properties import AIRCRAFT_PRESETS, AircraftProperties, DEFAULT_AIRCRAFT_TYPE
from ..core.vector import Vector3


class SimulationConfig:
    """
    Simulation configuration loaded from YAML.

    Attributes
    ----------
    aircraft_type : str
        Preset the aircraft properties start from
    property_overrides : dict
        Per-field AircraftProperties overrides
    position : Vector3
        Initial position (m)
    heading : float
        Initial heading (rad)
    throttle : float
        Initial throttle setting
    controls : dict
        Initial aileron/elevator/rudder deflections
    dt : float
        Time step (s)
    duration : float
        Simulated time (s)
    """

    def __init__(self, config_dict: Dict[str, Any]):
        """
        Initialize configuration from dictionary.

        Parameters
        ----------
        config_dict : dict
            Configuration dictionary (typically from YAML)

        Raises
        ------
        ValueError
            If the configuration names an unknown preset or property, or
            holds non-physical values
        """
        self.raw_config = config_dict or {}
        self._parse_config()

    def _parse_config(self):
        """Parse and validate configuration dictionary."""
        aircraft = self.raw_config.get('aircraft', {})
        initial = self.raw_config.get('initial_state', {})
        simulation = self.raw_config.get('simulation', {})

        # Aircraft
        self.aircraft_type = aircraft.get('type', DEFAULT_AIRCRAFT_TYPE)
        if self.aircraft_type not in AIRCRAFT_PRESETS:
            raise ValueError(f"Unknown aircraft type: {self.aircraft_type}. "
                             f"Known types: {', '.join(AIRCRAFT_PRESETS)}")

        self.property_overrides = dict(aircraft.get('properties', {}) or {})
        unknown = set(self.property_overrides) - set(AircraftProperties.field_names())
        if unknown:
            raise ValueError(f"Unknown aircraft properties: {', '.join(sorted(unknown))}")

        for key in ('wing_area', 'wing_span', 'empty_mass'):
            if key in self.property_overrides and self.property_overrides[key] <= 0:
                raise ValueError(f"Aircraft property '{key}' must be positive")

        # Initial state
        self.position = Vector3.from_array(initial.get('position', [0.0, 1000.0, 0.0]))
        self.heading = float(initial.get('heading', 0.0))
        self.throttle = float(initial.get('throttle', 0.0))

        controls = initial.get('controls', {}) or {}
        self.controls = {
            'aileron': float(controls.get('aileron', 0.0)),
            'elevator': float(controls.get('elevator', 0.0)),
            'rudder': float(controls.get('rudder', 0.0)),
        }

        # Timing
        self.dt = float(simulation.get('dt', 0.02))
        self.duration = float(simulation.get('duration', 10.0))
        if self.dt <= 0:
            raise ValueError(f"Time step must be positive, got {self.dt}")
        if self.duration < 0:
            raise ValueError(f"Duration must be non-negative, got {self.duration}")

    def create_properties(self) -> AircraftProperties:
        """
        Build the aircraft properties: preset plus overrides.

        When the wing geometry is overridden and no explicit 'k' is given,
        the induced drag factor is rederived from the new span and area.
        Otherwise the preset's (or the configured) 'k' is kept.

        Returns
        -------
        AircraftProperties
        """
        props = AIRCRAFT_PRESETS[self.aircraft_type]()
        for key, value in self.property_overrides.items():
            setattr(props, key, value)

        geometry = {'wing_span', 'wing_area'} & set(self.property_overrides)
        if geometry and 'k' not in self.property_overrides:
            props.k = props.induced_drag_factor(OSWALD_EFFICIENCY)
        return props

    def create_dynamics(self) -> FlightDynamics:
        """
        Create a FlightDynamics instance ready to fly.

        Returns
        -------
        FlightDynamics
            Built from create_properties(), aircraft initialized and
            control inputs applied
        """
        dynamics = FlightDynamics(properties=self.create_properties())
        dynamics.initialize(self.position, self.heading)
        dynamics.set_throttle(self.throttle)
        dynamics.set_control_surfaces(self.controls['aileron'],
                                      self.controls['elevator'],
                                      self.controls['rudder'])
        return dynamics

    @property
    def n_steps(self) -> int:
        """Number of update ticks covering the duration."""
        return int(round(self.duration / self.dt))

    def __repr__(self):
        return (f"SimulationConfig(aircraft_type='{self.aircraft_type}', "
                f"dt={self.dt}, duration={self.duration}, "
                f"heading={np.degrees(self.heading):.1f} deg)")


def load_simulation_config(yaml_file: str) -> SimulationConfig:
    """
    Load simulation configuration from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    SimulationConfig
        Loaded configuration

    Examples
    --------
    >>> config = load_simulation_config('configs/f16_cruise.yaml')
    >>> dynamics = config.create_dynamics()
    """
    with open(yaml_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    return SimulationConfig(config_dict)


def save_simulation_config(config: SimulationConfig, yaml_file: str):
    """
    Save simulation configuration to YAML file.

    Parameters
    ----------
    config : SimulationConfig
        Configuration to save
    yaml_file : str
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)

    print(f"Configuration saved to: {yaml_file}")


def create_example_config() -> Dict[str, Any]:
    """
    Create example simulation configuration dictionary.

    Returns
    -------
    dict
        Example configuration
    """
    config = {
        'aircraft': {
            'type': 'F-16',
            'properties': {
                'max_fuel': 3175.0,  # kg
            }
        },
        'initial_state': {
            'position': [0.0, 1000.0, 0.0],  # m, y up
            'heading': 0.0,   # rad
            'throttle': 0.5,
            'controls': {
                'aileron': 0.0,
                'elevator': 0.0,
                'rudder': 0.0
            }
        },
        'simulation': {
            'dt': 0.02,       # s
            'duration': 10.0  # s
        }
    }

    return config
