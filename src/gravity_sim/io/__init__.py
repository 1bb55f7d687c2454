# MIT License (see LICENSE)
"""
Input/Output utilities for supplying initial conditions.

Typical usage:
    from gravity_sim.io import load_simulation, save_simulation

    sim = load_simulation("three_stars.json")
    sim.run(1000)
    save_simulation(sim, "after_1000.json")
"""
from .json_io import (
    load_simulation,
    load_system_raw,
    save_simulation,
    simulation_to_json,
    system_to_json,
    system_from_json,
    body_to_json,
    body_from_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_system_raw",
    # Saving
    "save_simulation",
    # Serialization
    "simulation_to_json",
    "system_to_json",
    "system_from_json",
    "body_to_json",
    "body_from_json",
]
