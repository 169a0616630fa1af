"""
Physical constants and model limits for the flight dynamics core.

Units: SI (meters, kilograms, seconds, Newtons, radians).
"""

import numpy as np

# Environment
GRAVITY = 9.81  # m/s^2

# Below this speed (m/s) flow direction is treated as undefined
VELOCITY_EPSILON = 0.1

# Angular rate limits (rad/s)
MAX_ROLL_RATE = 5.0
MAX_PITCH_RATE = 3.0
MAX_YAW_RATE = 2.0

# Pitch attitude limit, keeps Euler integration away from gimbal lock
MAX_PITCH = 0.45 * np.pi

# Overall scaling applied to aerodynamic moments
MOMENT_SCALE = 0.001

# Oswald span efficiency used when deriving the induced drag factor
OSWALD_EFFICIENCY = 0.8

# Inertia approximation: I = factor * mass * span^2
INERTIA_FACTOR_ROLL = 0.1
INERTIA_FACTOR_PITCH = 0.2
INERTIA_FACTOR_YAW = 0.3

# Fraction of max fuel loaded by initialize()/reset()
INITIAL_FUEL_FRACTION = 0.5

# Forward speed given by initialize() (m/s)
INITIAL_AIRSPEED = 100.0
