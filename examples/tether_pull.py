# examples/tether_pull.py
"""
Drag the inflated ball around with the tether at a real-time 120 ticks/s.
Run:
  python examples/tether_pull.py
"""
import logging

from softbody_sim.scene import SoftBodyScene
from softbody_sim.loop import FixedRateLoop
from softbody_sim.renderer import BufferedRenderer
from softbody_sim.logging_config import setup_logging

setup_logging(logging.DEBUG)

scene = SoftBodyScene()
scene.run(300)  # inflate without pacing

renderer = BufferedRenderer()
loop = FixedRateLoop(scene, renderer=renderer)

for anchor in [(60.0, 120.0), (320.0, 120.0), (190.0, 40.0)]:
    scene.set_tether(True, *anchor)
    loop.run(ticks=240)

scene.set_tether(False, 0.0, 0.0)
loop.run(ticks=120)

last = renderer.frames[-1]
print("frames:", len(renderer.frames))
print("last frame t:", round(last["time"], 2), "vertex 0:", last["vertices"][0])
