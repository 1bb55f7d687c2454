# MIT License (see LICENSE)
import io

from gravity_sim.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from gravity_sim.system import SystemState
from gravity_sim.types import BodyState


def state() -> SystemState:
    return SystemState.four_body(
        BodyState(333000.0, -1.0, 0.0),
        BodyState(333000.0, 1.0, 0.0),
        BodyState(333000.0, 0.0, 1.5),
        BodyState(1.0, 5.0, 0.0, 0.0, 2e-3),
    )


def test_debug_renderer_writes_named_frame():
    out = io.StringIO()
    DebugRenderer(output=out).render_state(state(), 3.0)
    text = out.getvalue()
    print(text)

    assert text.startswith("=== Frame t=3.0000 ===")
    assert "[0] star_a m=333000" in text
    assert "[3] planet m=1 @ (5.00e+00, 0.00e+00) v=(0.00e+00, 2.00e-03)" in text


def test_debug_renderer_terse():
    out = io.StringIO()
    DebugRenderer(output=out, verbose=False).render_state(state(), 0.0)
    assert " v=(" not in out.getvalue()


def test_unnamed_bodies_use_index():
    out = io.StringIO()
    DebugRenderer(output=out).render_state(SystemState((BodyState(1.0, 0.0, 0.0),)), 0.0)
    assert "[0] 0 m=1" in out.getvalue()


def test_buffered_renderer_records_frames():
    r = BufferedRenderer()
    assert r.positions().shape == (0, 0, 2)

    s = state()
    r.render_state(s, 0.0)
    r.render_state(s.rk4_step(), 1.0)

    assert r.times().tolist() == [0.0, 1.0]
    assert r.positions().shape == (2, 4, 2)
    assert r.frames[0]["bodies"][3]["velocity"] == [0.0, 2e-3]

    r.clear()
    assert r.frames == []


def test_null_renderer_is_silent():
    NullRenderer().render_state(state(), 0.0)
