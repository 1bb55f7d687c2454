# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Times named phases of a simulation run (integration, finite-state checks)
without external dependencies.

Example:
    profiler = Profiler()
    sim = Simulation(state, profiler=profiler)
    sim.run(1000)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Stores raw timing data and provides summary statistics.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics for every recorded section.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'total_ms': summed time in milliseconds
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Usage:
        profiler = Profiler()
        with profiler.section("integrate"):
            state = state.rk4_step()
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the enclosed block and record it under `name`.

        The sample is recorded even if the block raises.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
