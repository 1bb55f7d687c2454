# MIT License (see LICENSE)
import pytest

from gravity_sim.core.integrators import (
    apply_system_delta,
    euler_step_delta,
    rk4_step,
    rk4_step_delta,
)
from gravity_sim.core.invariants import non_finite_bodies
from gravity_sim.types import AccelerationVelocity, BodyState


def test_single_body_feels_no_force():
    """A lone body drifts: the zero acceleration is applied, velocity unchanged."""
    (nxt,) = rk4_step([BodyState(5.0, 1.0, 1.0, 0.25, -0.5)])
    assert nxt == BodyState(5.0, 1.25, 0.5, 0.25, -0.5)


def test_euler_step_delta_accepts_lists_and_tuples():
    bodies = [BodyState(2.0, 0.0, 0.0), BodyState(3.0, 4.0, 3.0)]
    assert euler_step_delta(bodies) == euler_step_delta(tuple(bodies))


def test_apply_system_delta_length_mismatch():
    with pytest.raises(ValueError):
        apply_system_delta(
            [BodyState(1.0, 0.0, 0.0)],
            [AccelerationVelocity(0.0, 0.0, 0.0, 0.0)] * 2,
        )


def test_unknown_scheme():
    with pytest.raises(ValueError):
        rk4_step_delta([BodyState(1.0, 0.0, 0.0)], scheme="euler")


def test_unit_dt_matches_default():
    """Passing dt=1 explicitly is the same arithmetic as the default."""
    bodies = (
        BodyState(3e5, -2.0e4, 0.0, 0.0, -1.0),
        BodyState(3e5, 2.0e4, 0.0, 0.0, 1.0),
        BodyState(1.0, 0.0, 5.0e4, 0.5, 0.0),
    )
    assert rk4_step(bodies) == rk4_step(bodies, dt=1.0, scheme="rk4")


def test_coincident_bodies_propagate_non_finite():
    """Degenerate states flow through the step without raising."""
    bodies = (
        BodyState(1.0, 0.0, 0.0),
        BodyState(1.0, 0.0, 0.0),
        BodyState(1.0, 10.0, 0.0),
    )
    nxt = rk4_step(bodies)
    assert non_finite_bodies(nxt) == [0, 1, 2]

    # Keeps going
    again = rk4_step(nxt)
    assert non_finite_bodies(again) == [0, 1, 2]
