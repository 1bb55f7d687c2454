# MIT License (see LICENSE)
import json

import pytest

from gravity_sim import SimConfig, Simulation
from gravity_sim.io import (
    body_from_json,
    load_simulation,
    save_simulation,
    simulation_to_json,
    system_from_json,
)
from gravity_sim.system import SystemState
from gravity_sim.types import BodyState

SCENE = {
    "config": {"dt": 0.5, "scheme": "rk4_classic"},
    "bodies": [
        {"name": "star_a", "mass": 333000, "position": [-1e4, 0], "velocity": [0, -0.8]},
        {"name": "star_b", "mass": 333000, "position": [1e4, 0], "velocity": [0, 0.8]},
        {"name": "star_c", "mass": 333000, "position": [0, 2e4], "velocity": [0.6, 0]},
        {"name": "planet", "mass": 1, "position": [3e4, -1e4]},
    ],
}


def test_load_simulation(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(SCENE), encoding="utf-8")

    sim = load_simulation(str(path))
    assert sim.config == SimConfig(dt=0.5, scheme="rk4_classic")
    assert sim.state.names == ("star_a", "star_b", "star_c", "planet")
    assert sim.state.by_name("planet") == BodyState(1.0, 3e4, -1e4, 0.0, 0.0)
    assert sim.time == 0.0


def test_save_and_reload(tmp_path):
    state = SystemState((BodyState(2.0, 1.0, 2.0, 3.0, 4.0), BodyState(1.0, -1.0, 0.5)))
    sim = Simulation(state, SimConfig(g=1.0, dt=0.1))
    sim.run(3)

    path = tmp_path / "out.json"
    save_simulation(sim, str(path))
    loaded = load_simulation(str(path))

    assert loaded.state == sim.state
    assert loaded.config == sim.config
    assert loaded.time == sim.time


def test_defaults_are_omitted():
    sim = Simulation(SystemState((BodyState(1.0, 0.0, 0.0),)))
    data = simulation_to_json(sim)
    assert "config" not in data
    assert "time" not in data
    assert data["bodies"] == [{"mass": 1.0, "position": [0.0, 0.0], "velocity": [0.0, 0.0]}]


def test_partial_names_are_dropped():
    state = system_from_json({"bodies": [{"name": "a", "mass": 1}, {"mass": 2}]})
    assert state.names == ()


def test_invalid_input():
    with pytest.raises(ValueError):
        body_from_json({"position": [0, 0]})
    with pytest.raises(ValueError):
        body_from_json({"mass": 1, "position": [0, 0, 0]})
    with pytest.raises(ValueError):
        system_from_json({"bodies": []})
    with pytest.raises(ValueError):
        SimConfig.from_dict({"scheme": "verlet"})


def test_null_mass_is_a_value_error():
    with pytest.raises(ValueError):
        body_from_json({"mass": None})
    with pytest.raises(ValueError):
        body_from_json({"mass": "heavy"})


def test_save_refuses_non_finite_state(tmp_path):
    sim = Simulation(SystemState((BodyState(1.0, 0.0, 0.0), BodyState(1.0, 0.0, 0.0))))
    sim.step()

    path = tmp_path / "broken.json"
    with pytest.raises(ValueError):
        save_simulation(sim, str(path))
    assert not path.exists()
