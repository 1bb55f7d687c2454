# MIT License (see LICENSE)
"""
Runge-Kutta integration of the coupled N-body system.

The system state is an ordered sequence of BodyState values and its
derivative is the positionally paired sequence of AccelerationVelocity
values. The equations of motion are
    dx/dt = v,         dv/dt = Σ g·M_j / r_ij²  (toward body j)

Available schemes:
- "rk4": samples k1..k4 and advances the state by k4 alone. Intermediate
  points are built by applying half (k1, k2) or whole (k3) derivatives.
  With dt = 1 this is the historical unit-step integrator, reproduced
  bit for bit.
- "rk4_classic": same samples, combined with weights (1, 2, 2, 1)/6.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
from typing import Sequence

from ..constants import G
from ..types import AccelerationVelocity, BodyState, apply_delta
from .forces import cumulative_force_and_velocity

SCHEMES: tuple[str, ...] = ("rk4", "rk4_classic")


def euler_step_delta(
    bodies: Sequence[BodyState],
    g: float = G,
) -> tuple[AccelerationVelocity, ...]:
    """
    Evaluate the derivative of every body at one snapshot.

    Body i feels every other body in index order (i itself skipped). All
    bodies read the same snapshot; nothing is updated in between.
    """
    return tuple(
        cumulative_force_and_velocity(body, bodies[:i] + bodies[i + 1:], g)
        for i, body in enumerate(bodies)
    )


def apply_system_delta(
    bodies: Sequence[BodyState],
    deltas: Sequence[AccelerationVelocity],
) -> tuple[BodyState, ...]:
    """
    Apply one derivative per body, paired by position.

    Raises:
        ValueError: If the two sequences differ in length.
    """
    if len(bodies) != len(deltas):
        raise ValueError(
            f"Derivative count {len(deltas)} does not match body count {len(bodies)}"
        )
    return tuple(apply_delta(b, d) for b, d in zip(bodies, deltas))


def halve_all(deltas: Sequence[AccelerationVelocity]) -> tuple[AccelerationVelocity, ...]:
    """Halve every derivative in the sequence."""
    return tuple(d.halve() for d in deltas)


def scale_all(
    deltas: Sequence[AccelerationVelocity],
    factor: float,
) -> tuple[AccelerationVelocity, ...]:
    """Multiply every derivative in the sequence by `factor`."""
    return tuple(d.scale(factor) for d in deltas)


def _weighted(
    k1: Sequence[AccelerationVelocity],
    k2: Sequence[AccelerationVelocity],
    k3: Sequence[AccelerationVelocity],
    k4: Sequence[AccelerationVelocity],
) -> tuple[AccelerationVelocity, ...]:
    """Classical combination (k1 + 2·k2 + 2·k3 + k4) / 6, per body."""
    return tuple(
        a.add(b.scale(2.0)).add(c.scale(2.0)).add(d).scale(1.0 / 6.0)
        for a, b, c, d in zip(k1, k2, k3, k4)
    )


def rk4_step_delta(
    bodies: Sequence[BodyState],
    g: float = G,
    dt: float = 1.0,
    scheme: str = "rk4",
) -> tuple[AccelerationVelocity, ...]:
    """
    Derivative used to advance the system by one step.

    Args:
        bodies: System snapshot S0.
        g: Gravitational constant.
        dt: Step size. Each intermediate derivative is scaled by dt before it
            is applied; dt = 1 reproduces the unit-step integrator exactly.
        scheme: "rk4" (return k4) or "rk4_classic" (weighted average).

    Raises:
        ValueError: If `scheme` is unknown.
    """
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown integration scheme: {scheme}")

    s0 = tuple(bodies)

    # RK4 stages
    k1 = euler_step_delta(s0, g)
    k2 = euler_step_delta(apply_system_delta(s0, scale_all(halve_all(k1), dt)), g)
    k3 = euler_step_delta(apply_system_delta(s0, scale_all(halve_all(k2), dt)), g)
    k4 = euler_step_delta(apply_system_delta(s0, scale_all(k3, dt)), g)

    if scheme == "rk4_classic":
        return _weighted(k1, k2, k3, k4)
    return k4


def rk4_step(
    bodies: Sequence[BodyState],
    g: float = G,
    dt: float = 1.0,
    scheme: str = "rk4",
) -> tuple[BodyState, ...]:
    """
    Advance the system by one step of size dt.

    Returns S0 + dt · rk4_step_delta(S0). Non-finite values produced by
    coincident bodies are propagated, never raised.
    """
    s0 = tuple(bodies)
    delta = rk4_step_delta(s0, g, dt, scheme)
    return apply_system_delta(s0, scale_all(delta, dt))
