"""
Visualization Module

Provides plotting capabilities for recorded flight simulations.
"""

from .plotting import (
    plot_trajectory_3d,
    plot_states_vs_time,
    plot_controls_vs_time,
    plot_fuel_and_mass,
    setup_plotting_style
)

__all__ = [
    'plot_trajectory_3d',
    'plot_states_vs_time',
    'plot_controls_vs_time',
    'plot_fuel_and_mass',
    'setup_plotting_style'
]
