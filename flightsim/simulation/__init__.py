"""
Simulation drivers.
"""

from .runner import SimulationRunner, SimulationHistory, run_from_config

__all__ = ['SimulationRunner', 'SimulationHistory', 'run_from_config']
