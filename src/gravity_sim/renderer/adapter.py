# MIT License (see LICENSE)
"""
Renderer adapters for trajectory visualization.

This module provides an abstract base class for rendering and a few
concrete implementations. The integrator has no rendering dependency;
these adapters are optional and are fed by Simulation.run().
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

import numpy as np

from ..system import SystemState
from ..types import BodyState


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (matplotlib, a web canvas, a terminal, ...).

    Usage:
        renderer.begin_frame(time)
        for i, body in enumerate(state):
            renderer.draw_body(i, state.name_of(i), body)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_state(state, time)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulated time of the state being drawn.
        """
        ...

    @abstractmethod
    def draw_body(self, index: int, name: str, body: BodyState) -> None:
        """
        Draw a single body.

        Args:
            index: Position of the body in the system.
            name: Body label (its index as text when unnamed).
            body: The body state.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_state(self, state: SystemState, time: float) -> None:
        """Render every body of `state` as one frame."""
        self.begin_frame(time)
        for i, body in enumerate(state):
            self.draw_body(i, state.name_of(i), body)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame t=3.0000 ===
        [0] star_a m=333000 @ (-1.00e+00, 0.00e+00) v=(0.00e+00, 1.20e-03)
        [3] planet m=1 @ (5.00e+00, 0.00e+00) v=(0.00e+00, 2.00e-03)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocities.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_body(self, index: int, name: str, body: BodyState) -> None:
        line = f"[{index}] {name} m={body.mass:g} @ ({body.x:.2e}, {body.y:.2e})"
        if self.verbose:
            line += f" v=({body.vx:.2e}, {body.vy:.2e})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing runs without drawing overhead."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, index: int, name: str, body: BodyState) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame it receives.

    This is where trajectory history lives; the integrator itself keeps none.

    Example:
        renderer = BufferedRenderer()
        sim.run(100, renderer)
        xy = renderer.positions()   # shape (100, N, 2)
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "bodies": []}

    def draw_body(self, index: int, name: str, body: BodyState) -> None:
        if self._current_frame is None:
            return
        self._current_frame["bodies"].append({
            "index": index,
            "name": name,
            "position": [body.x, body.y],
            "velocity": [body.vx, body.vy],
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def times(self) -> np.ndarray:
        """Frame times as a 1D array."""
        return np.array([f["time"] for f in self.frames], dtype=np.float64)

    def positions(self) -> np.ndarray:
        """
        Recorded positions as an array of shape (frames, bodies, 2).

        Assumes every frame holds the same number of bodies.
        """
        if not self.frames:
            return np.zeros((0, 0, 2), dtype=np.float64)
        return np.array(
            [[b["position"] for b in f["bodies"]] for f in self.frames],
            dtype=np.float64,
        )

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
