# examples/inflate_and_drop.py
"""
Inflate the ball, let it fall, then push it up for a second.
Run:
  python examples/inflate_and_drop.py
"""
import logging

from softbody_sim.scene import SoftBodyScene
from softbody_sim.renderer import DebugRenderer
from softbody_sim.core.invariants import centroid, max_speed
from softbody_sim.logging_config import setup_logging

setup_logging(logging.INFO)

scene = SoftBodyScene()
renderer = DebugRenderer()

for k in range(1500):
    if k == 1300:
        scene.set_input(up=True, down=False, left=False, right=False)
    scene.tick()
    if scene.tick_count % 150 == 0:
        renderer.render_scene(scene)

print("t:", round(scene.time, 2))
print("pressure:", scene.pressure)
print("centroid:", centroid(scene.body.points))
print("max speed:", max_speed(scene.body.points))
