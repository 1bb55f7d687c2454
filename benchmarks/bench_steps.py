"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sim import BodyState, SystemState, SimConfig, Simulation
from gravity_sim.profiler import Profiler


def run(n: int, steps: int = 200, scheme: str = "rk4"):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # scatter bodies on a disc with small random velocities
    r = 1.0e4 * np.sqrt(rng.random(n))
    phi = 2 * np.pi * rng.random(n)
    bodies = [
        BodyState(
            3.33e5,
            float(r[i] * np.cos(phi[i])),
            float(r[i] * np.sin(phi[i])),
            float(0.1 * rng.normal()),
            float(0.1 * rng.normal()),
        )
        for i in range(n)
    ]
    sim = Simulation(SystemState(bodies), SimConfig(scheme=scheme), profiler=prof)

    # warmup
    sim.run(5)

    t0 = time.perf_counter()
    sim.run(steps)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [4, 8, 16, 32, 64]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["integrate", "check"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
