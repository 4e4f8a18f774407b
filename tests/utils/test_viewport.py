import pytest

from lightrig.cameras import PerspectiveCamera
from lightrig.utils.surface import OffscreenSurface
from lightrig.utils.viewport import ViewportManager, ViewportState


class FakeCanvas:
    def __init__(self):
        self.handlers = []

    def add_event_handler(self, handler, *types):
        self.handlers.append((handler, types))


def test_resize_updates_camera_aspect():
    camera = PerspectiveCamera(75, 1)
    surface = OffscreenSurface(100, 100)
    viewport = ViewportManager(camera, surface)
    assert viewport.state is None

    viewport.resize(800, 600)
    assert camera.aspect == 800 / 600
    assert viewport.state == ViewportState(800, 600, 1)
    assert viewport.state.aspect == 800 / 600
    assert surface.logical_size == (800, 600)

    viewport.resize(300, 600)
    assert camera.aspect == 0.5


@pytest.mark.parametrize("dpr, expected", [(1, 1), (2, 2), (3, 2), (1.5, 1.5)])
def test_resize_caps_pixel_ratio(dpr, expected):
    camera = PerspectiveCamera()
    surface = OffscreenSurface()
    viewport = ViewportManager(camera, surface)

    viewport.resize(640, 480, dpr)
    assert viewport.state.pixel_ratio == expected
    assert surface.pixel_ratio == expected
    assert surface.physical_size == (int(640 * expected), int(480 * expected))


def test_resize_custom_max_pixel_ratio():
    viewport = ViewportManager(PerspectiveCamera(), max_pixel_ratio=1)
    viewport.resize(640, 480, 3)
    assert viewport.state.pixel_ratio == 1

    with pytest.raises(ValueError):
        ViewportManager(PerspectiveCamera(), max_pixel_ratio=0)


def test_resize_is_idempotent():
    camera = PerspectiveCamera()
    surface = OffscreenSurface()
    viewport = ViewportManager(camera, surface)

    viewport.resize(640, 480, 2)
    state1 = viewport.state
    matrix1 = camera.projection_matrix.copy()
    viewport.resize(640, 480, 2)
    assert viewport.state == state1
    assert (camera.projection_matrix == matrix1).all()
    assert surface.physical_size == (1280, 960)


def test_resize_to_zero_is_ignored():
    camera = PerspectiveCamera()
    surface = OffscreenSurface()
    viewport = ViewportManager(camera, surface)
    viewport.resize(640, 480)

    viewport.resize(0, 0)
    viewport.resize(640, 0)
    assert viewport.state == ViewportState(640, 480, 1)
    assert camera.aspect == 640 / 480
    assert surface.logical_size == (640, 480)


def test_resize_without_surface():
    camera = PerspectiveCamera()
    viewport = ViewportManager(camera)
    viewport.resize(200, 100, 2)
    assert camera.aspect == 2

    # A surface that is attached later gets the current state
    surface = OffscreenSurface()
    viewport.surface = surface
    assert surface.logical_size == (200, 100)
    assert surface.pixel_ratio == 2


def test_resize_events():
    camera = PerspectiveCamera()
    surface = OffscreenSurface()
    viewport = ViewportManager(camera, surface)

    canvas = FakeCanvas()
    viewport.register_events(canvas)
    (handler, types), = canvas.handlers
    assert types == ("resize",)

    handler({"event_type": "resize", "width": 400, "height": 100, "pixel_ratio": 3})
    assert camera.aspect == 4
    assert surface.pixel_ratio == 2

    # Other events are ignored
    viewport.handle_event({"event_type": "pointer_down", "x": 1, "y": 1})
    assert viewport.state == ViewportState(400, 100, 2)
