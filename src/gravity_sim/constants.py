# MIT License (see LICENSE)
"""
Physical constants used throughout the simulation.

Masses are expressed in Earth masses; G keeps its SI numeric value so the
canonical three-star system evolves slowly under the unit time step.
"""
from __future__ import annotations

# Newtonian constant of gravitation, 6.67408 × 10⁻¹¹ m³·kg⁻¹·s⁻² (CODATA 2014).
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: float = 6.67408e-11

# Solar mass expressed in Earth masses (≈ 333 000).
STAR_MASS: float = 333000.0

EARTH_MASS: float = 1.0

# Body names of the canonical four-body configuration, in integration order.
FOUR_BODY_NAMES: tuple[str, str, str, str] = ("star_a", "star_b", "star_c", "planet")
