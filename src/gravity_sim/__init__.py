# MIT License (see LICENSE)
"""
gravity_sim - RK4 integration of gravitationally interacting point masses.

The canonical system is three stars and one planet in 2D, advanced one
unit of time per step. Any number of bodies is supported.

Main entry points:
    - BodyState: Mass, position and velocity of one point mass.
    - SystemState: All bodies at one instant; rk4_step() advances it.
    - SimConfig: Gravitational constant, step size and RK4 scheme.
    - Simulation: Driver that steps a state and feeds renderers.

Submodules:
    - core: Force law, integrators and invariants.
    - io: JSON loading/saving of initial conditions.
    - renderer: Optional visualization adapters.

Example:
    from gravity_sim import BodyState, SystemState

    state = SystemState.four_body(
        BodyState(333000.0, -1.0, 0.0),
        BodyState(333000.0, 1.0, 0.0),
        BodyState(333000.0, 0.0, 1.5),
        BodyState(1.0, 5.0, 0.0),
    )
    state = state.rk4_step()
"""
from .types import Acceleration, AccelerationVelocity, BodyState, apply_delta, sum_accelerations
from .system import SystemState, SystemDerivative
from .config import SimConfig
from .simulation import Simulation
from .core.invariants import DegenerateStateError

__all__ = [
    # Values
    "Acceleration",
    "AccelerationVelocity",
    "BodyState",
    "SystemState",
    "SystemDerivative",
    "apply_delta",
    "sum_accelerations",
    # Driving
    "SimConfig",
    "Simulation",
    "DegenerateStateError",
]
