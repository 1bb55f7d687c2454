# MIT License (see LICENSE)
"""
The simulation driver.

The Simulation class owns the current SystemState and repeatedly applies
the RK4 step. It manages:
- The integrator configuration (constants, dt, scheme).
- Elapsed time and step count.
- Optional detection of non-finite states (DegenerateStateError).
- Forwarding each new state to a renderer.

Structure:
    - User builds a SystemState (or loads one via gravity_sim.io).
    - User creates Simulation(state, config).
    - User calls sim.step() or sim.run(n, renderer) in a loop.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import SimConfig
from .core.invariants import DegenerateStateError, non_finite_bodies, total_energy
from .profiler import Profiler
from .system import SystemState

if TYPE_CHECKING:
    from .renderer.adapter import RendererAdapter

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Drives a SystemState forward in time.

    Attributes:
        state: Current system state (replaced, never mutated, on each step).
        config: Integrator constants and options.
        time: Simulated time elapsed (sum of config.dt over all steps).
        steps: Number of completed steps.
        profiler: Optional Profiler instance for timing statistics.
    """
    state: SystemState
    config: SimConfig = field(default_factory=SimConfig)
    time: float = 0.0
    steps: int = 0
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        """Remember the starting energy for drift reporting."""
        self._initial_energy = total_energy(self.state, self.config.g)
        self._degenerate_reported = False

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def step(self) -> SystemState:
        """
        Advance the system by one step and return the new state.

        Raises:
            DegenerateStateError: If config.check_finite is set and the new
                state holds inf or nan. The degenerate state has already
                been stored and `steps`/`time` already advanced when it is
                raised, so `state` shows what went wrong.
        """
        with self._section("integrate"):
            new_state = self.state.rk4_step(self.config)

        self.state = new_state
        self.steps += 1
        self.time += self.config.dt

        with self._section("check"):
            bad = non_finite_bodies(new_state)

        if bad:
            if self.config.check_finite:
                raise DegenerateStateError(self.steps, bad)
            if not self._degenerate_reported:
                # Later steps stay non-finite; warn once.
                logger.warning(
                    "Non-finite state at step %d for bodies %s",
                    self.steps,
                    [new_state.name_of(i) for i in bad],
                )
                self._degenerate_reported = True

        logger.debug("step %d t=%.6g", self.steps, self.time)
        return new_state

    def run(self, n: int, renderer: RendererAdapter | None = None) -> SystemState:
        """
        Take `n` steps, handing each new state to `renderer` if given.

        Returns:
            The final state.
        """
        if n < 0:
            raise ValueError(f"Step count must be non-negative, got {n}")
        for _ in range(n):
            state = self.step()
            if renderer is not None:
                renderer.render_state(state, self.time)
        return self.state

    def energy_drift(self) -> float:
        """
        Relative change of total energy since the simulation was created.

        Returns the absolute change when the starting energy is zero.
        """
        e = total_energy(self.state, self.config.g)
        e0 = self._initial_energy
        if e0 == 0.0:
            return abs(e - e0)
        return abs(e - e0) / abs(e0)
