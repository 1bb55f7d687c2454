# MIT License (see LICENSE)
"""
JSON serialization and deserialization for gravitating systems.

This module supplies initial conditions to the integrator and writes
snapshots back out. The format is human-readable and round-trips.

JSON Schema Overview:
---------------------
{
  "config": {                      # Optional
    "g": float,                    # Default: 6.67408e-11
    "dt": float,                   # Default: 1.0
    "scheme": string,              # "rk4" or "rk4_classic"
    "check_finite": bool           # Default: false
  },
  "time": float,                   # Optional, default: 0
  "bodies": [                      # Required, at least one
    {
      "name": string,              # Optional (all or none)
      "mass": float,               # Required
      "position": [x, y],          # Default: [0, 0]
      "velocity": [vx, vy]         # Default: [0, 0]
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..config import SimConfig
from ..simulation import Simulation
from ..system import SystemState
from ..types import BodyState
from ..util import pair

logger = logging.getLogger(__name__)


def load_system_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scene file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> Simulation:
    """
    Load a ready-to-run Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the bodies are missing or malformed.
    """
    data = load_system_raw(path)
    config = SimConfig.from_dict(data.get("config", {}))
    state = system_from_json(data)
    sim = Simulation(state=state, config=config, time=float(data.get("time", 0.0)))
    logger.info("Loaded %d bodies from %s (scheme=%s, dt=%g)",
                len(state), path, config.scheme, config.dt)
    return sim


def body_from_json(d: dict[str, Any]) -> BodyState:
    """
    Parse a single body definition.

    Raises:
        ValueError: If 'mass' is missing or not a number, or a vector is
            malformed.
    """
    if "mass" not in d:
        raise ValueError("Body definition missing required 'mass' field.")
    try:
        mass = float(d["mass"])
    except (TypeError, ValueError):
        raise ValueError(f"Body mass must be a number, got {d['mass']!r}") from None
    x, y = pair(d.get("position", [0.0, 0.0]), "position")
    vx, vy = pair(d.get("velocity", [0.0, 0.0]), "velocity")
    return BodyState(mass=mass, x=x, y=y, vx=vx, vy=vy)


def system_from_json(data: dict[str, Any]) -> SystemState:
    """
    Parse the 'bodies' list into a SystemState.

    Names are kept only when every body has one.
    """
    bodies_data = data.get("bodies", [])
    if not bodies_data:
        raise ValueError("Scene must define at least one body.")
    bodies = tuple(body_from_json(b) for b in bodies_data)
    names = [b.get("name") for b in bodies_data]
    if all(n is not None for n in names):
        return SystemState(bodies, tuple(str(n) for n in names))
    return SystemState(bodies)


def body_to_json(body: BodyState, name: str | None = None) -> dict[str, Any]:
    """Serialize a body to a dictionary (round-trip compatible)."""
    result: dict[str, Any] = {}
    if name is not None:
        result["name"] = name
    result["mass"] = body.mass
    result["position"] = [body.x, body.y]
    result["velocity"] = [body.vx, body.vy]
    return result


def system_to_json(state: SystemState) -> dict[str, Any]:
    """Serialize a SystemState to {'bodies': [...]}."""
    return {
        "bodies": [
            body_to_json(b, state.names[i] if state.names else None)
            for i, b in enumerate(state)
        ]
    }


def simulation_to_json(sim: Simulation) -> dict[str, Any]:
    """
    Serialize a Simulation: config, elapsed time and current state.

    Config is written only when it differs from the defaults.
    """
    result: dict[str, Any] = {}
    if sim.config != SimConfig():
        result["config"] = sim.config.to_dict()
    if sim.time != 0.0:
        result["time"] = sim.time
    result.update(system_to_json(sim.state))
    return result


def save_simulation(sim: Simulation, path: str, indent: int = 2) -> None:
    """
    Save a Simulation to a JSON file on disk.

    Raises:
        ValueError: If the state holds inf or nan, which standard JSON
            cannot represent. Nothing is written in that case.
    """
    data = simulation_to_json(sim)
    # Serialize first so a failure leaves no partial file behind
    text = json.dumps(data, indent=indent, allow_nan=False)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Saved %d bodies at t=%g to %s", len(sim.state), sim.time, path)
