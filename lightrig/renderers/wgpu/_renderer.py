"""
The main renderer class. This class wraps a surface and it manages the
rendering process.
"""

import time
import weakref

import numpy as np
import wgpu

from .. import Renderer
from ...materials import MeshStandardMaterial
from ...utils import array_from_shadertype, logger
from ...utils.surface import CanvasSurface
from ._flusher import RenderFlusher
from ._meshpipeline import (
    MeshPipeline,
    MeshResources,
    create_geometry_buffers,
    stdinfo_uniform_type,
)
from ._shared import get_shared


class WgpuRenderer(Renderer):
    """Object used to render scenes using wgpu.

    The purpose of a renderer is to render (i.e. draw) a scene to a
    surface. The rendered image is stored internally in a texture at the
    physical size of the surface. When the target is a ``CanvasSurface``,
    the image is then flushed (resampled) onto the canvas. The image can
    be read back with ``snapshot()``.

    The GPU device is obtained on the first render, or when a
    ``CanvasSurface`` becomes the target, whose canvas context is then
    configured right away. So a renderer with an offscreen target (or none)
    can be created on a machine without a GPU.

    Parameters:
        target (Surface): The surface to render to. Can be None, in which
            case ``render()`` raises ``ResourceUnavailable`` until a target
            is set.
        show_fps (bool): Whether to log the frames per second at the info
            level. Beware that depending on the GUI toolkit, the canvas may
            impose a frame rate limit.
        clear_color (tuple): The RGBA color to clear the image with.
    """

    color_format = wgpu.TextureFormat.rgba8unorm_srgb
    depth_format = wgpu.TextureFormat.depth32float

    def __init__(self, target=None, *, show_fps=False, clear_color=(0, 0, 0, 1)):
        super().__init__(target)
        self._show_fps = bool(show_fps)
        self._clear_color = tuple(float(c) for c in clear_color)

        self._device = None
        self._color_tex = self._depth_tex = None
        self._color_view = self._depth_view = None

        # Pipelines are per set of light kinds
        self._pipelines = {}
        self._stdinfo_data = array_from_shadertype(stdinfo_uniform_type)
        self._stdinfo_buffer = None

        # GPU objects bound to the lifetime of scene objects
        self._mesh_resources = weakref.WeakKeyDictionary()
        self._geometry_buffers = weakref.WeakKeyDictionary()
        self._material_buffers = weakref.WeakKeyDictionary()

        # Flushing to a canvas
        self._canvas_context = None
        self._flusher = None
        self._gamma = 1.0

        self._frame_count = 0

        if isinstance(target, CanvasSurface):
            self._configure_canvas(target)

    @property
    def device(self):
        """A reference to the used wgpu device."""
        if self._device is None:
            self._device = get_shared().device
        return self._device

    @Renderer.target.setter
    def target(self, target):
        self._target = target
        self._canvas_context = None
        if isinstance(target, CanvasSurface):
            self._configure_canvas(target)

    @property
    def show_fps(self):
        """Whether the frames per second are logged."""
        return self._show_fps

    @show_fps.setter
    def show_fps(self, value):
        self._show_fps = bool(value)

    @property
    def frame_count(self):
        """The number of frames rendered so far."""
        return self._frame_count

    def render(self, scene, camera):
        """Render a scene with the specified camera as the viewpoint.

        Raises ``ResourceUnavailable`` if there is no target, or the target
        is closed.
        """
        target = self._check_target()
        device = self.device

        if self._show_fps:
            self._update_fps()

        self._ensure_render_targets(target.physical_size)

        lights = list(scene.traverse_lights())
        for light in lights:
            light.update_uniform_data()
        pipeline = self._get_pipeline(lights)
        pipeline.update_lights(lights)

        self._update_stdinfo_buffer(camera, target.physical_size, target.logical_size)

        command_encoder = device.create_command_encoder()
        render_pass = command_encoder.begin_render_pass(
            color_attachments=[
                {
                    "view": self._color_view,
                    "resolve_target": None,
                    "clear_value": self._clear_color,
                    "load_op": wgpu.LoadOp.clear,
                    "store_op": wgpu.StoreOp.store,
                }
            ],
            depth_stencil_attachment={
                "view": self._depth_view,
                "depth_clear_value": 1.0,
                "depth_load_op": wgpu.LoadOp.clear,
                "depth_store_op": wgpu.StoreOp.store,
            },
        )
        render_pass.set_pipeline(pipeline.pipeline)

        updated_materials = set()
        for wobject in scene.traverse_renderables():
            material = wobject.material
            if not isinstance(material, MeshStandardMaterial):
                raise TypeError(
                    f"Cannot render {wobject!r}: expected a MeshStandardMaterial, not {material!r}"
                )
            if id(material) not in updated_materials:
                updated_materials.add(id(material))
                self._update_material_buffer(material)
            resources = self._get_mesh_resources(wobject, pipeline)
            resources.update(device, wobject)
            vertex_buffer, index_buffer, index_count = self._get_geometry_buffers(
                wobject.geometry
            )
            render_pass.set_bind_group(0, resources.bind_group)
            render_pass.set_vertex_buffer(0, vertex_buffer)
            render_pass.set_index_buffer(index_buffer, wgpu.IndexFormat.uint32)
            render_pass.draw_indexed(index_count, 1)

        render_pass.end()
        device.queue.submit([command_encoder.finish()])
        self._frame_count += 1

        if isinstance(target, CanvasSurface):
            self.flush()

    def flush(self):
        """Render the internal image onto the canvas.

        This is called automatically by ``render()`` when the target is a
        ``CanvasSurface``.
        """
        target = self._check_target()
        if not isinstance(target, CanvasSurface):
            return

        dst_view = self._canvas_context.get_current_texture().create_view()
        command_buffers = self._flusher.render(self._color_view, dst_view, self._gamma)
        self.device.queue.submit(command_buffers)

    def snapshot(self):
        """Create a snapshot of the currently rendered image.

        Returns a uint8 array with shape (height, width, 4).
        """
        if self._color_tex is None:
            raise RuntimeError("Cannot take a snapshot before anything is rendered.")

        device = self.device
        texture = self._color_tex
        size = texture.size
        bytes_per_pixel = 4

        data = device.queue.read_texture(
            {
                "texture": texture,
                "mip_level": 0,
                "origin": (0, 0, 0),
            },
            {
                "offset": 0,
                "bytes_per_row": bytes_per_pixel * size[0],
                "rows_per_image": size[1],
            },
            size,
        )

        return np.frombuffer(data, np.uint8).reshape(size[1], size[0], 4)

    def request_draw(self, draw_function=None):
        """Forwards a request_draw call to the target surface. If the
        target cannot draw on request (e.g. an offscreen surface), this
        function does nothing.
        """
        request_draw = getattr(self.target, "request_draw", None)
        if request_draw:
            request_draw(draw_function)

    # %% Internals

    def _configure_canvas(self, surface):
        # The canvas skips its draws until it has a context
        device = self.device
        self._canvas_context = surface.get_context()
        fmt = self._canvas_context.get_preferred_format(get_shared().adapter)
        self._gamma = 1.0 if fmt.endswith("srgb") else 1 / 2.2  # poor man's srgb
        self._canvas_context.configure(device=device, format=fmt)
        if self._flusher is None or self._flusher.target_format != fmt:
            self._flusher = RenderFlusher(device, fmt)

    def _update_fps(self):
        now = time.perf_counter()
        if not hasattr(self, "_fps"):
            self._fps = now, now, 1
        elif now > self._fps[0] + 1:
            logger.info(f"FPS: {self._fps[2]/(now - self._fps[0]):0.1f}")
            self._fps = now, now, 1
        else:
            self._fps = self._fps[0], now, self._fps[2] + 1

    def _ensure_render_targets(self, physical_size):
        width, height = physical_size
        if self._color_tex is not None and self._color_tex.size[:2] == (width, height):
            return
        logger.debug(f"Creating render textures of {width}x{height}")
        device = self.device
        self._color_tex = device.create_texture(
            size=(width, height, 1),
            usage=wgpu.TextureUsage.RENDER_ATTACHMENT
            | wgpu.TextureUsage.TEXTURE_BINDING
            | wgpu.TextureUsage.COPY_SRC,
            dimension="2d",
            format=self.color_format,
        )
        self._depth_tex = device.create_texture(
            size=(width, height, 1),
            usage=wgpu.TextureUsage.RENDER_ATTACHMENT,
            dimension="2d",
            format=self.depth_format,
        )
        self._color_view = self._color_tex.create_view()
        self._depth_view = self._depth_tex.create_view()

    def _get_pipeline(self, lights):
        signature = tuple(light.kind for light in lights)
        pipeline = self._pipelines.get(signature)
        if pipeline is None:
            pipeline = MeshPipeline(
                self.device, self.color_format, self.depth_format, lights
            )
            self._pipelines[signature] = pipeline
        return pipeline

    def _update_stdinfo_buffer(self, camera, physical_size, logical_size):
        device = self.device
        if self._stdinfo_buffer is None:
            self._stdinfo_buffer = device.create_buffer(
                size=self._stdinfo_data.nbytes,
                usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
            )
        stdinfo_data = self._stdinfo_data
        stdinfo_data["cam_transform"] = camera.view_matrix.T
        stdinfo_data["projection_transform"] = camera.projection_matrix.T
        stdinfo_data["cam_position"] = (*camera.world_position, 1)
        stdinfo_data["physical_size"] = physical_size
        stdinfo_data["logical_size"] = logical_size
        device.queue.write_buffer(self._stdinfo_buffer, 0, stdinfo_data)

    def _update_material_buffer(self, material):
        device = self.device
        data = material.uniform_data
        buffer = self._material_buffers.get(material)
        if buffer is None:
            buffer = device.create_buffer(
                size=data.nbytes,
                usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
            )
            self._material_buffers[material] = buffer
        device.queue.write_buffer(buffer, 0, data)

    def _get_mesh_resources(self, wobject, pipeline):
        resources = self._mesh_resources.get(wobject)
        if resources is None:
            resources = MeshResources(self.device)
            self._mesh_resources[wobject] = resources
        material_buffer = self._material_buffers[wobject.material]
        # The bind group refers to the pipeline's lights buffer and the material
        if (
            resources.pipeline_signature != pipeline.signature
            or resources.material_buffer is not material_buffer
        ):
            resources.pipeline_signature = pipeline.signature
            resources.material_buffer = material_buffer
            resources.bind_group = pipeline.create_bind_group(
                self._stdinfo_buffer, material_buffer, resources.wobject_buffer
            )
        return resources

    def _get_geometry_buffers(self, geometry):
        buffers = self._geometry_buffers.get(geometry)
        if buffers is None:
            buffers = create_geometry_buffers(self.device, geometry)
            self._geometry_buffers[geometry] = buffers
        return buffers
