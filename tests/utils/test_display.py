import pytest
from rendercanvas.offscreen import RenderCanvas

from lightrig.demo import bind_light_controls, create_context
from lightrig.utils.show import Display

from ..testutils import can_use_wgpu_lib


def test_draw_when_stopped_does_nothing():
    context = create_context()
    display = Display(context)
    context.token.cancel()
    display.draw()
    assert display.loop.tick_count == 0


def test_stop_without_canvas():
    context = create_context()
    display = Display(context)
    display.stop()
    assert context.stopped


@pytest.mark.skipif(not can_use_wgpu_lib, reason="Needs the wgpu lib")
def test_display_offscreen():
    context = create_context()
    canvas = RenderCanvas(size=(120, 80), pixel_ratio=1)
    display = Display(context, canvas=canvas, max_ticks=2)
    display.setup()

    # The viewport follows the canvas
    assert context.viewport.state.width == 120
    assert context.camera.aspect == 120 / 80
    assert context.renderer.target.canvas is canvas

    canvas.draw()
    assert display.loop.tick_count == 1
    assert context.renderer.frame_count == 1
    assert context.renderer.snapshot().shape == (80, 120, 4)

    canvas.draw()
    assert display.loop.tick_count == 2
    assert context.stopped


@pytest.mark.skipif(not can_use_wgpu_lib, reason="Needs the wgpu lib")
def test_display_offscreen_with_panel():
    context = create_context()
    panel = bind_light_controls(context.lights)
    canvas = RenderCanvas(size=(200, 150), pixel_ratio=1)
    display = Display(context, canvas=canvas, panel=panel)
    display.setup()
    canvas.draw()
    assert display.loop.tick_count == 1
    display.stop()
    assert context.stopped


@pytest.mark.skipif(not can_use_wgpu_lib, reason="Needs the wgpu lib")
def test_display_without_panel_draws_every_frame():
    context = create_context()
    canvas = RenderCanvas(size=(64, 48), pixel_ratio=1)
    display = Display(context, canvas=canvas)
    display.setup()

    for _ in range(5):
        canvas.draw()
    assert display.loop.tick_count == 5
    assert context.renderer.frame_count == 5
