# MIT License (see LICENSE)
"""
Newtonian gravity between point masses.

All functions are pure: they read BodyState values and return new
Acceleration / AccelerationVelocity values.

Key concepts:
- force_from returns an acceleration (F/m of the attracted body), so it
  scales with the mass of the *other* body only.
- Summation over the other bodies is left-to-right in the order given,
  which keeps repeated evaluations bit-identical.
- Coincident or near-coincident bodies are not guarded: dividing by a zero
  or subnormal squared distance yields inf (or nan for zero mass) without
  a numpy warning, and the value propagates into the result.
"""
from __future__ import annotations
import math
from functools import reduce
from typing import Sequence

import numpy as np

from ..constants import G
from ..types import (
    Acceleration,
    AccelerationVelocity,
    BodyState,
    ZERO_ACCELERATION,
    sum_accelerations,
)
from ..util import norm


def force_from(body: BodyState, other: BodyState, g: float = G) -> Acceleration:
    """
    Acceleration imparted on `body` by the gravity of `other`.

    Implements a = g * M_other / r², directed from `body` toward `other`.
    Additional force terms (drag, relativistic corrections) belong here and
    must be summed into the returned acceleration.

    Args:
        body: The attracted body.
        other: The attracting body.
        g: Gravitational constant.
    """
    dx = other.x - body.x
    dy = other.y - body.y

    distance = norm(dx, dy)
    # F = g*m*M_other/r**2 = m*a  ->  a = g*M_other/r**2
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        intensity = float(np.divide(g * other.mass, distance * distance))
    theta = math.atan2(dy, dx)

    return Acceleration(
        ax=intensity * math.cos(theta),
        ay=intensity * math.sin(theta),
    )


def cumulative_force(
    body: BodyState,
    others: Sequence[BodyState],
    g: float = G,
) -> Acceleration:
    """
    Net acceleration on `body` from every body in `others`.

    Returns the zero acceleration when `others` is empty.
    """
    if not others:
        return ZERO_ACCELERATION
    return reduce(sum_accelerations, (force_from(body, o, g) for o in others))


def cumulative_force_and_velocity(
    body: BodyState,
    others: Sequence[BodyState],
    g: float = G,
) -> AccelerationVelocity:
    """
    Slope function f(state) for one body: net acceleration plus current velocity.
    """
    return body.derivative(cumulative_force(body, others, g))
