# MIT License (see LICENSE)
import io
import numpy as np
import pytest
from softbody_sim.scene import SoftBodyScene
from softbody_sim.renderer import BufferedRenderer, DebugRenderer, NullRenderer, to_pixels


def test_vertices_view_is_read_only_snapshot():
    scene = SoftBodyScene()
    v = scene.vertices()
    assert v.shape == (20, 2)
    with pytest.raises(ValueError):
        v[0, 0] = 1.0
    scene.run(10)
    # snapshot does not follow the simulation
    assert not np.array_equal(v, scene.vertices())


def test_to_pixels_truncates():
    px = to_pixels(np.array([[1.9, 2.1], [379.99, 0.5]]))
    assert px.tolist() == [[1, 2], [379, 0]]


def test_buffered_renderer_records_frames():
    scene = SoftBodyScene()
    renderer = BufferedRenderer()
    renderer.render_scene(scene)
    scene.set_tether(True, 10.0, 20.0)
    scene.tick()
    renderer.render_scene(scene)

    assert len(renderer.frames) == 2
    first, second = renderer.frames
    assert first["time"] == 0.0
    assert first["arena"] == ((190.0, 190.0), 190.0)
    assert len(first["vertices"]) == 20
    assert first["tether"] is None
    assert second["tether"][0] == (10.0, 20.0)
    assert second["tether"][1] == pytest.approx(tuple(second["vertices"][0]))

    renderer.clear()
    assert renderer.frames == []


def test_buffered_renderer_ignores_draws_outside_frame():
    renderer = BufferedRenderer()
    renderer.draw_body(np.zeros((3, 2)))
    renderer.end_frame()
    assert renderer.frames == []


def test_debug_renderer_output():
    scene = SoftBodyScene()
    scene.set_tether(True, 10.0, 10.0)
    out = io.StringIO()
    DebugRenderer(output=out, verbose=True).render_scene(scene)
    text = out.getvalue()
    assert "=== Frame t=0.0000 ===" in text
    assert "arena c=(190.0, 190.0) R=190.0" in text
    assert "body n=20" in text
    assert "tether (10.0, 10.0)" in text
    assert "  [19] (" in text


def test_null_renderer():
    NullRenderer().render_scene(SoftBodyScene())
