# MIT License (see LICENSE)
"""
Whole-system value types.

SystemState is the unit of integration: an ordered tuple of BodyState
values, optionally named. SystemDerivative is the positionally paired tuple
of AccelerationVelocity values. Pairing is by index, never by name.

Structure:
    - Build a state with SystemState(bodies) or SystemState.four_body(...).
    - Call state.rk4_step() to get the state one step later.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .config import SimConfig
from .constants import FOUR_BODY_NAMES
from .core.integrators import (
    apply_system_delta,
    euler_step_delta,
    halve_all,
    rk4_step,
    rk4_step_delta,
    scale_all,
)
from .types import AccelerationVelocity, BodyState
from .util import f64

DEFAULT_CONFIG = SimConfig()


@dataclass(frozen=True)
class SystemDerivative:
    """Derivative vectors of a whole system, one per body, in body order."""
    deltas: tuple[AccelerationVelocity, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "deltas", tuple(self.deltas))

    def __len__(self) -> int:
        return len(self.deltas)

    def __iter__(self) -> Iterator[AccelerationVelocity]:
        return iter(self.deltas)

    def __getitem__(self, index: int) -> AccelerationVelocity:
        return self.deltas[index]

    def halve(self) -> SystemDerivative:
        """Halve every member."""
        return SystemDerivative(halve_all(self.deltas))

    def scale(self, factor: float) -> SystemDerivative:
        return SystemDerivative(scale_all(self.deltas, factor))

    def add(self, other: SystemDerivative) -> SystemDerivative:
        """
        Member-wise sum with another system derivative.

        Raises:
            ValueError: If the lengths differ.
        """
        if len(self) != len(other):
            raise ValueError(f"Cannot add derivatives of length {len(self)} and {len(other)}")
        return SystemDerivative(tuple(a.add(b) for a, b in zip(self.deltas, other.deltas)))


@dataclass(frozen=True)
class SystemState:
    """
    Configuration of every body at one instant.

    Attributes:
        bodies: Body states in integration order.
        names: Optional labels, one per body. Empty when unnamed.

    Note:
        Bodies feel each other in index order, so reordering the bodies
        can change the last bits of the result.
    """
    bodies: tuple[BodyState, ...]
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Freeze sequences to tuples and validate names."""
        object.__setattr__(self, "bodies", tuple(self.bodies))
        object.__setattr__(self, "names", tuple(self.names))
        if not self.bodies:
            raise ValueError("A system needs at least one body")
        if self.names and len(self.names) != len(self.bodies):
            raise ValueError(
                f"Got {len(self.names)} names for {len(self.bodies)} bodies"
            )

    @classmethod
    def four_body(
        cls,
        star_a: BodyState,
        star_b: BodyState,
        star_c: BodyState,
        planet: BodyState,
    ) -> SystemState:
        """The canonical three-star, one-planet system."""
        return cls((star_a, star_b, star_c, planet), FOUR_BODY_NAMES)

    @classmethod
    def from_array(cls, arr, names: Sequence[str] = ()) -> SystemState:
        """
        Build a state from an (N, 5) array of mass, x, y, vx, vy.

        Raises:
            ValueError: If the array is not (N, 5).
        """
        arr = f64(arr)
        if arr.ndim != 2 or arr.shape[1] != 5:
            raise ValueError(f"Expected an (N, 5) array, got shape {arr.shape}")
        bodies = tuple(BodyState(*(float(v) for v in row)) for row in arr)
        return cls(bodies, tuple(names))

    def to_array(self) -> np.ndarray:
        """(N, 5) float64 array with columns mass, x, y, vx, vy."""
        return np.array(
            [(b.mass, b.x, b.y, b.vx, b.vy) for b in self.bodies],
            dtype=np.float64,
        )

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[BodyState]:
        return iter(self.bodies)

    def __getitem__(self, index: int) -> BodyState:
        return self.bodies[index]

    def by_name(self, name: str) -> BodyState:
        """
        Look up a body by label.

        Raises:
            KeyError: If no body carries that name.
        """
        try:
            return self.bodies[self.names.index(name)]
        except ValueError:
            raise KeyError(name) from None

    def name_of(self, index: int) -> str:
        """Label of body `index`, or its index as text when unnamed."""
        return self.names[index] if self.names else str(index)

    def _with(self, bodies: tuple[BodyState, ...]) -> SystemState:
        return SystemState(bodies, self.names)

    def apply(self, derivative: SystemDerivative) -> SystemState:
        """
        Displace every body by its paired derivative (state + derivative).

        Raises:
            ValueError: If the derivative length differs from the body count.
        """
        return self._with(apply_system_delta(self.bodies, derivative.deltas))

    def euler_step_delta(self, config: SimConfig | None = None) -> SystemDerivative:
        """Derivative of every body at this snapshot."""
        config = config or DEFAULT_CONFIG
        return SystemDerivative(euler_step_delta(self.bodies, config.g))

    def rk4_step_delta(self, config: SimConfig | None = None) -> SystemDerivative:
        """Derivative that rk4_step applies, per the configured scheme."""
        config = config or DEFAULT_CONFIG
        return SystemDerivative(
            rk4_step_delta(self.bodies, config.g, config.dt, config.scheme)
        )

    def rk4_step(self, config: SimConfig | None = None) -> SystemState:
        """
        The state one step later.

        With the default config this is one unit of simulated time using
        the k4-only scheme.
        """
        config = config or DEFAULT_CONFIG
        return self._with(rk4_step(self.bodies, config.g, config.dt, config.scheme))
