# MIT License (see LICENSE)
"""
Conserved quantities and state sanity checks.

Used for verifying simulation correctness and debugging stability issues.
In an isolated gravitating system, total energy, linear momentum and
angular momentum should remain constant (within integration error).

Functions accept any iterable of BodyState, including a SystemState.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..constants import G
from ..types import BodyState


class DegenerateStateError(ArithmeticError):
    """
    Raised when a system state holds non-finite values.

    Attributes:
        step: Step counter at which the state was detected (-1 if unknown).
        indices: Indices of the offending bodies.
    """

    def __init__(self, step: int, indices: list[int]):
        self.step = step
        self.indices = indices
        super().__init__(
            f"Non-finite state at step {step} for bodies {indices}"
        )


def _columns(bodies: Iterable[BodyState]) -> np.ndarray:
    """Stack bodies into an (N, 5) array of mass, x, y, vx, vy."""
    rows = [(b.mass, b.x, b.y, b.vx, b.vy) for b in bodies]
    return np.array(rows, dtype=np.float64).reshape(-1, 5)


def kinetic_energy(bodies: Iterable[BodyState]) -> float:
    """
    Total kinetic energy.

    T = Σ 0.5 · m · v²
    """
    arr = _columns(bodies)
    m, vx, vy = arr[:, 0], arr[:, 3], arr[:, 4]
    return float(np.sum(0.5 * m * (vx * vx + vy * vy)))


def potential_energy(bodies: Iterable[BodyState], g: float = G) -> float:
    """
    Total gravitational potential energy.

    U = -Σ_{i<j} g · m_i · m_j / r_ij
    """
    arr = _columns(bodies)
    n = arr.shape[0]
    u = 0.0
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        for i in range(n):
            for j in range(i + 1, n):
                dx = arr[j, 1] - arr[i, 1]
                dy = arr[j, 2] - arr[i, 2]
                r = np.sqrt(dx * dx + dy * dy)
                u -= g * arr[i, 0] * arr[j, 0] / r
    return float(u)


def total_energy(bodies: Iterable[BodyState], g: float = G) -> float:
    """Kinetic plus potential energy."""
    bodies = list(bodies)
    return kinetic_energy(bodies) + potential_energy(bodies, g)


def linear_momentum(bodies: Iterable[BodyState]) -> np.ndarray:
    """
    Total linear momentum P = Σ m · v.

    Returns:
        Momentum vector [Px, Py].
    """
    arr = _columns(bodies)
    return arr[:, 0] @ arr[:, 3:5]


def angular_momentum(bodies: Iterable[BodyState]) -> float:
    """
    Total angular momentum about the origin (z-component).

    L = Σ m · (x·vy - y·vx)
    """
    arr = _columns(bodies)
    m, x, y, vx, vy = arr.T
    return float(np.sum(m * (x * vy - y * vx)))


def center_of_mass(bodies: Iterable[BodyState]) -> np.ndarray:
    """
    Mass-weighted mean position [x, y].

    Returns nan components when the total mass is zero.
    """
    arr = _columns(bodies)
    total = arr[:, 0].sum()
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return (arr[:, 0] @ arr[:, 1:3]) / total


def non_finite_bodies(bodies: Iterable[BodyState]) -> list[int]:
    """Indices of bodies that have any inf or nan field."""
    arr = _columns(bodies)
    bad = ~np.isfinite(arr).all(axis=1)
    return [int(i) for i in np.flatnonzero(bad)]


def check_finite(bodies: Iterable[BodyState], step: int = -1) -> None:
    """
    Raise DegenerateStateError if any body has a non-finite field.

    Args:
        bodies: State to inspect.
        step: Step counter reported in the error.
    """
    bad = non_finite_bodies(bodies)
    if bad:
        raise DegenerateStateError(step, bad)
