# examples/three_stars.py
from gravity_sim import BodyState, SystemState, Simulation
from gravity_sim.constants import STAR_MASS, EARTH_MASS
from gravity_sim.renderer import DebugRenderer

state = SystemState.four_body(
    BodyState(STAR_MASS, -1.0e4, 0.0, 0.0, -0.8),
    BodyState(STAR_MASS, 1.0e4, 0.0, 0.0, 0.8),
    BodyState(STAR_MASS, 0.0, 2.0e4, 0.6, 0.0),
    BodyState(EARTH_MASS, 3.0e4, -1.0e4, -0.2, 0.4),
)

sim = Simulation(state)
renderer = DebugRenderer()

for _ in range(10):
    sim.run(100)
    renderer.render_state(sim.state, sim.time)

print("energy drift:", sim.energy_drift())
