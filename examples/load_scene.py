# examples/load_scene.py
import logging
from pathlib import Path

from gravity_sim.io import load_simulation, save_simulation

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

here = Path(__file__).parent
sim = load_simulation(str(here / "scenes" / "three_stars.json"))
sim.run(1000)
save_simulation(sim, str(here / "three_stars_t1000.json"))

for i, body in enumerate(sim.state):
    print(sim.state.name_of(i), body.position, body.velocity)
