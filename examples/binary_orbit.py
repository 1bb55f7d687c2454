from gravity_sim import BodyState, SystemState, SimConfig, Simulation
from gravity_sim.renderer import BufferedRenderer
import numpy as np

# Equal masses, separation 2, g = 1 -> circular speed 0.5, period 4π
state = SystemState(
    (BodyState(1.0, -1.0, 0.0, 0.0, -0.5), BodyState(1.0, 1.0, 0.0, 0.0, 0.5)),
    ("left", "right"),
)

for scheme in ("rk4", "rk4_classic"):
    sim = Simulation(state, SimConfig(g=1.0, dt=0.01, scheme=scheme))
    rec = BufferedRenderer()
    sim.run(int(4 * np.pi / 0.01), rec)

    xy = rec.positions()
    sep = np.linalg.norm(xy[:, 1] - xy[:, 0], axis=1)
    print(scheme, "separation min/max:", sep.min(), sep.max(), "energy drift:", sim.energy_drift())
