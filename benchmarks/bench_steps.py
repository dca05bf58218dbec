"""
Microbenchmark: time per tick vs number of vertices.
Run:
  python benchmarks/bench_steps.py
"""
import time

from softbody_sim.scene import SoftBodyScene
from softbody_sim.params import SoftBodyParams
from softbody_sim.profiler import Profiler


def run(n: int, ticks: int = 600):
    prof = Profiler()
    scene = SoftBodyScene(params=SoftBodyParams(n_points=n), profiler=prof)

    # inflate first so the timed ticks include gravity and wall contacts
    scene.run(300)
    prof.stats.reset()

    t0 = time.perf_counter()
    scene.run(ticks)
    t1 = time.perf_counter()

    per_tick = (t1 - t0) / ticks
    return per_tick, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 20, 50, 100, 250]:
        per_tick, summary = run(n)
        print(f"N={n:4d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["forces", "integrate", "ramp"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
