"""
Standard Plotting Functions

Provides visualization of recorded flight simulation histories:
trajectory, state histories, control inputs and fuel/mass.

World frame: x and z horizontal, y up.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Optional, Tuple

from ..simulation.runner import SimulationHistory


def plot_trajectory_3d(
    history: SimulationHistory,
    title: str = "3D Flight Trajectory",
    show_markers: bool = True,
    marker_interval: int = 50,
    figsize: Tuple[float, float] = (10, 8),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot 3D flight trajectory.

    Parameters
    ----------
    history : SimulationHistory
        Recorded simulation
    title : str, optional
        Plot title
    show_markers : bool, optional
        Whether to show position markers along trajectory
    marker_interval : int, optional
        Interval between markers (if show_markers=True)
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure (if None, figure is not saved)

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection='3d')

    # Plot altitude (world y) on the vertical axis
    x = history.position[:, 0]
    z = history.position[:, 2]
    alt = history.position[:, 1]

    ax.plot(x, z, alt, 'b-', linewidth=2, label='Trajectory')

    if show_markers and len(history) > marker_interval:
        idx = np.arange(0, len(history), marker_interval)
        ax.scatter(x[idx], z[idx], alt[idx], c='r', marker='o', s=30, label='Waypoints')

    ax.scatter(x[0], z[0], alt[0], c='g', marker='o', s=100, label='Start', edgecolors='k')
    ax.scatter(x[-1], z[-1], alt[-1], c='r', marker='s', s=100, label='End', edgecolors='k')

    ax.set_xlabel('X (m)', fontsize=11)
    ax.set_ylabel('Z (m)', fontsize=11)
    ax.set_zlabel('Altitude (m)', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_states_vs_time(
    history: SimulationHistory,
    title: str = "State Variables vs Time",
    figsize: Tuple[float, float] = (12, 10),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot position, velocity, attitude and angular rates vs time.

    Parameters
    ----------
    history : SimulationHistory
        Recorded simulation
    title : str, optional
        Main plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    fig, axes = plt.subplots(4, 1, figsize=figsize, sharex=True)
    t = history.time

    panels = [
        (history.position, ('X', 'Y (Altitude)', 'Z'), 'Position (m)', 'Position', False),
        (history.velocity, ('Vx', 'Vy', 'Vz'), 'Velocity (m/s)', 'World Frame Velocity', False),
        (history.euler_angles, ('Roll', 'Pitch', 'Heading'), 'Angle (deg)', 'Euler Angles', True),
        (history.angular_rates, ('Roll rate', 'Pitch rate', 'Heading rate'), 'Rate (deg/s)',
         'Angular Rates', True),
    ]

    for ax, (data, labels, ylabel, panel_title, to_degrees) in zip(axes, panels):
        values = np.degrees(data) if to_degrees else data
        for i, (label, color) in enumerate(zip(labels, ('r-', 'g-', 'b-'))):
            ax.plot(t, values[:, i], color, label=label, linewidth=1.5)
        ax.set_ylabel(ylabel, fontsize=11)
        ax.legend(loc='best', ncol=3)
        ax.grid(True, alpha=0.3)
        ax.set_title(panel_title, fontsize=11, fontweight='bold')

    axes[-1].set_xlabel('Time (s)', fontsize=11)

    fig.suptitle(title, fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_controls_vs_time(
    history: SimulationHistory,
    title: str = "Control Inputs vs Time",
    figsize: Tuple[float, float] = (12, 8),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot throttle and normalized control surface deflections vs time.

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    controls = history.controls
    fig, axes = plt.subplots(len(controls), 1, figsize=figsize, sharex=True)

    for ax, (name, color) in zip(axes, zip(controls, ('k-', 'g-', 'b-', 'r-'))):
        ax.plot(history.time, controls[name], color, linewidth=2)
        ax.set_ylabel(name.capitalize(), fontsize=11)
        ax.set_ylim(-1.1 if name != 'throttle' else -0.05, 1.1)
        ax.grid(True, alpha=0.3)
        ax.set_title(name.capitalize(), fontsize=11, fontweight='bold')

    axes[-1].set_xlabel('Time (s)', fontsize=11)

    fig.suptitle(title, fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_fuel_and_mass(
    history: SimulationHistory,
    title: str = "Fuel and Mass vs Time",
    figsize: Tuple[float, float] = (10, 6),
    save_path: Optional[str] = None
) -> Figure:
    """Plot remaining fuel and total mass vs time."""
    fig, (ax_fuel, ax_mass) = plt.subplots(2, 1, figsize=figsize, sharex=True)

    ax_fuel.plot(history.time, history.fuel, 'b-', linewidth=2)
    ax_fuel.set_ylabel('Fuel (kg)', fontsize=11)
    ax_fuel.grid(True, alpha=0.3)

    ax_mass.plot(history.time, history.mass, 'r-', linewidth=2)
    ax_mass.set_ylabel('Mass (kg)', fontsize=11)
    ax_mass.set_xlabel('Time (s)', fontsize=11)
    ax_mass.grid(True, alpha=0.3)

    fig.suptitle(title, fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def setup_plotting_style():
    """Light grid style shared by the flight history plots."""
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.rcParams.update({
        'axes.grid': True,
        'grid.alpha': 0.3,
        'font.size': 10,
        'lines.linewidth': 1.5,
        'savefig.dpi': 150,
    })
