# MIT License (see LICENSE)
"""
Core value types for the gravitational integrator.

Defines the per-body data structures:
- Acceleration: a 2D acceleration accumulator.
- AccelerationVelocity: one body's derivative (slope) vector.
- BodyState: mass, position and velocity of one point mass.

Every type is a frozen dataclass; operations return new instances.
Arithmetic between the types goes through named functions
(sum_accelerations, apply_delta) rather than operator overloads, because
"state + derivative" crosses fields:
    x  += d.vx,   y  += d.vy      (dx/dt = v)
    vx += d.ax,   vy += d.ay      (dv/dt = a)
"""
from __future__ import annotations
from dataclasses import dataclass


# =============================================================================
# Acceleration
# =============================================================================

@dataclass(frozen=True)
class Acceleration:
    """
    Instantaneous 2D acceleration.

    Attributes:
        ax: x-component.
        ay: y-component.
    """
    ax: float
    ay: float


ZERO_ACCELERATION = Acceleration(0.0, 0.0)


def sum_accelerations(a: Acceleration, b: Acceleration) -> Acceleration:
    """Component-wise sum of two accelerations."""
    return Acceleration(ax=a.ax + b.ax, ay=a.ay + b.ay)


# =============================================================================
# Derivative vector
# =============================================================================

@dataclass(frozen=True)
class AccelerationVelocity:
    """
    Rate of change of one body's state at a sampled instant.

    `ax, ay` is dv/dt and `vx, vy` is dx/dt. RK4 needs both at every
    sample point, so they travel together.
    """
    ax: float
    ay: float
    vx: float
    vy: float

    def halve(self) -> AccelerationVelocity:
        """Divide every field by 2 (exact for binary floats)."""
        return AccelerationVelocity(
            ax=self.ax / 2.0,
            ay=self.ay / 2.0,
            vx=self.vx / 2.0,
            vy=self.vy / 2.0,
        )

    def scale(self, factor: float) -> AccelerationVelocity:
        """Multiply every field by `factor`."""
        return AccelerationVelocity(
            ax=self.ax * factor,
            ay=self.ay * factor,
            vx=self.vx * factor,
            vy=self.vy * factor,
        )

    def add(self, other: AccelerationVelocity) -> AccelerationVelocity:
        """Component-wise sum with another derivative vector."""
        return AccelerationVelocity(
            ax=self.ax + other.ax,
            ay=self.ay + other.ay,
            vx=self.vx + other.vx,
            vy=self.vy + other.vy,
        )

    @property
    def acceleration(self) -> Acceleration:
        return Acceleration(self.ax, self.ay)


# =============================================================================
# Body state
# =============================================================================

@dataclass(frozen=True)
class BodyState:
    """
    Full physical state of one point mass.

    Attributes:
        mass: Mass in Earth masses. Never changed by integration.
        x, y: Position.
        vx, vy: Velocity.

    Note:
        Fields are not validated. Zero or negative masses and non-finite
        coordinates are accepted and simply flow through the arithmetic.
    """
    mass: float
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    def derivative(self, acceleration: Acceleration) -> AccelerationVelocity:
        """Pair an acceleration with this body's current velocity."""
        return AccelerationVelocity(
            ax=acceleration.ax,
            ay=acceleration.ay,
            vx=self.vx,
            vy=self.vy,
        )


def apply_delta(state: BodyState, delta: AccelerationVelocity) -> BodyState:
    """
    Displace a body by a derivative vector.

    Position moves by the derivative's velocity field and velocity moves by
    its acceleration field. Mass is carried over unchanged.
    """
    return BodyState(
        mass=state.mass,
        x=state.x + delta.vx,
        y=state.y + delta.vy,
        vx=state.vx + delta.ax,
        vy=state.vy + delta.ay,
    )
