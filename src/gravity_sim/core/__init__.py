# MIT License (see LICENSE)
"""
Core gravitational dynamics.

This subpackage provides:
    - Force law: pairwise Newtonian acceleration and its sums.
    - Integrators: Euler derivative evaluation and the RK4 step.
    - Invariants: energy, momentum and non-finite state detection.

Typical usage:
    from gravity_sim.core import rk4_step

    bodies = rk4_step(bodies)
"""
from .forces import (
    force_from,
    cumulative_force,
    cumulative_force_and_velocity,
)
from .integrators import (
    SCHEMES,
    euler_step_delta,
    apply_system_delta,
    rk4_step_delta,
    rk4_step,
)
from .invariants import (
    DegenerateStateError,
    check_finite,
    non_finite_bodies,
    kinetic_energy,
    potential_energy,
    total_energy,
    linear_momentum,
    angular_momentum,
    center_of_mass,
)

__all__ = [
    # Forces
    "force_from",
    "cumulative_force",
    "cumulative_force_and_velocity",
    # Integrators
    "SCHEMES",
    "euler_step_delta",
    "apply_system_delta",
    "rk4_step_delta",
    "rk4_step",
    # Invariants
    "DegenerateStateError",
    "check_finite",
    "non_finite_bodies",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "linear_momentum",
    "angular_momentum",
    "center_of_mass",
]
