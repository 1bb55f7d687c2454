# MIT License (see LICENSE)
"""
Integrator configuration.

SimConfig bundles the constants the integrator needs so tests and callers
can swap them without touching module globals. The defaults reproduce the
fixed behaviour: G = 6.67408e-11, unit time step, k4-only RK4 scheme.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any

from .constants import G
from .core.integrators import SCHEMES


@dataclass(frozen=True)
class SimConfig:
    """
    Physical constants and integration options.

    Attributes:
        g: Gravitational constant.
        dt: Step size. 1.0 is the historical unit step.
        scheme: "rk4" (advance by k4) or "rk4_classic" (weighted average).
        check_finite: If True, the Simulation driver raises
                      DegenerateStateError after a step that leaves any
                      non-finite field in the state.
    """
    g: float = G
    dt: float = 1.0
    scheme: str = "rk4"
    check_finite: bool = False

    def __post_init__(self) -> None:
        """Validate dt and scheme name."""
        if not self.dt > 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.scheme not in SCHEMES:
            raise ValueError(
                f"Unknown integration scheme: '{self.scheme}' (expected one of {SCHEMES})"
            )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> SimConfig:
        """
        Build a config from JSON data; missing keys take the defaults.

        Raises:
            ValueError: If 'check_finite' is not a JSON boolean, or any other
                field is invalid.
        """
        check_finite = d.get("check_finite", False)
        if not isinstance(check_finite, bool):
            raise ValueError(f"check_finite must be true or false, got {check_finite!r}")
        return cls(
            g=float(d.get("g", G)),
            dt=float(d.get("dt", 1.0)),
            scheme=str(d.get("scheme", "rk4")),
            check_finite=check_finite,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
