from imgui_bundle import imgui
from wgpu.utils.imgui import ImguiRenderer


class ImguiPanel:
    """Draws a ControlPanel with imgui, on top of what is rendered on a canvas.

    Each binding is shown as a float slider. Moving a slider calls the
    binding's ``set_value()``, within the canvas' event handling, so the
    next frame sees the new value.

    Parameters
    ----------
    panel : ControlPanel
        The sliders to show.
    device : wgpu.GPUDevice
        The device to render the gui with, i.e. that of the scene's renderer.
    canvas : rendercanvas.BaseRenderCanvas
        The canvas to draw on, and to receive input events from.
    width : int
        The width of the panel window in logical pixels.

    """

    def __init__(self, panel, device, canvas, *, width=300):
        self._panel = panel
        self._width = width
        self._gui_renderer = ImguiRenderer(device, canvas)
        self._gui_renderer.set_gui(self._draw)

    @property
    def panel(self):
        """The ControlPanel that is shown."""
        return self._panel

    def render(self):
        """Draw the panel onto the canvas' current texture."""
        self._gui_renderer.render()

    def _draw(self):
        imgui.set_next_window_size((self._width, 0), imgui.Cond_.always)
        imgui.set_next_window_pos((0, 0), imgui.Cond_.always)
        imgui.begin(self._panel.title)

        for binding in self._panel:
            value = binding.value
            if value is None:
                continue
            changed, value = imgui.slider_float(
                binding.label, value, binding.min, binding.max, binding.format
            )
            if changed:
                binding.set_value(value)

        imgui.end()
