"""
F-16 Flight Demonstration

Loads a YAML configuration, flies a short climbing turn and plots the
recorded history.
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flightsim.io.config import load_simulation_config, create_example_config, SimulationConfig
from flightsim.simulation.runner import SimulationRunner
from flightsim.visualization.plotting import (
    plot_trajectory_3d,
    plot_states_vs_time,
    plot_controls_vs_time,
    plot_fuel_and_mass,
    setup_plotting_style
)


def climbing_turn(t, fdm):
    """Level for 2 s, then bank right and pull."""
    if t < 2.0:
        fdm.set_control_surfaces(0.0, 0.05, 0.0)
    elif t < 4.0:
        fdm.set_control_surfaces(0.4, 0.3, 0.1)
    else:
        fdm.set_control_surfaces(0.0, 0.3, 0.1)


def main():
    """Run flight demonstration."""
    print("=" * 70)
    print("F-16 Flight Demonstration")
    print("=" * 70)
    print()

    # 1. Load configuration
    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'f16_cruise.yaml')
    try:
        config = load_simulation_config(config_path)
    except FileNotFoundError:
        print("   Warning: Config file not found, using example config...")
        config = SimulationConfig(create_example_config())

    print(f"1. Configuration: {config}")
    print()

    # 2. Build aircraft
    dynamics = config.create_dynamics()
    dynamics.set_throttle(0.9)
    print("2. Aircraft:")
    print(dynamics.properties)
    print()

    # 3. Simulate
    print(f"3. Simulating {config.duration:.1f} s at dt = {config.dt} s...")
    runner = SimulationRunner(dynamics, dt=config.dt, controls=climbing_turn)
    history = runner.run(config.n_steps)

    print(dynamics.state)
    print(f"  Fuel used:      {history.fuel[0] - history.fuel[-1]:8.1f} kg")
    print(f"  Altitude gain:  {history.altitude[-1] - history.altitude[0]:8.1f} m")
    print(f"  Heading change: {np.degrees(history.euler_angles[-1, 2] - history.euler_angles[0, 2]):8.1f} deg")
    print()

    # 4. Plot
    output_dir = os.path.join(os.path.dirname(__file__), '..', 'output')
    os.makedirs(output_dir, exist_ok=True)

    setup_plotting_style()

    plot_trajectory_3d(history, save_path=os.path.join(output_dir, 'f16_trajectory.png'))
    plot_states_vs_time(history, save_path=os.path.join(output_dir, 'f16_states.png'))
    plot_controls_vs_time(history, save_path=os.path.join(output_dir, 'f16_controls.png'))
    plot_fuel_and_mass(history, save_path=os.path.join(output_dir, 'f16_fuel.png'))
    print(f"4. Plots saved to: {os.path.abspath(output_dir)}")

    plt.show()


if __name__ == "__main__":
    main()
