"""
The flusher renders the renderer's internal image onto the canvas texture,
resampling it when the sizes differ (e.g. because the pixel ratio of the
render is capped below that of the screen).
"""

import wgpu

from ...utils import array_from_shadertype, generate_uniform_struct
from .templating import load_wgsl


flush_uniform_type = dict(
    gamma="f4",
)


class RenderFlusher:
    """Draws a texture onto another texture, with bilinear filtering.

    Parameters
    ----------
    device : wgpu.GPUDevice
        The device to create the GPU objects with.
    target_format : str
        The format of the texture that is flushed to.

    """

    def __init__(self, device, target_format):
        self._device = device
        self._target_format = target_format

        self._uniform_data = array_from_shadertype(flush_uniform_type)
        self._uniform_buffer = device.create_buffer(
            size=self._uniform_data.nbytes,
            usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
        )
        self._sampler = device.create_sampler(
            mag_filter=wgpu.FilterMode.linear,
            min_filter=wgpu.FilterMode.linear,
        )

        self._pipeline = self._create_pipeline()
        # The bind group refers to the source view, renew if that changes
        self._src_view = None
        self._bind_group = None

    @property
    def target_format(self):
        """The format of the texture that is flushed to."""
        return self._target_format

    def render(self, src_view, dst_view, gamma=1.0):
        """Render the source texture view onto the destination texture view.

        Returns a list of command buffers to submit.
        """
        device = self._device
        if src_view is not self._src_view:
            self._src_view = src_view
            self._bind_group = self._create_bind_group(src_view)

        self._uniform_data["gamma"] = gamma
        device.queue.write_buffer(self._uniform_buffer, 0, self._uniform_data)

        command_encoder = device.create_command_encoder()
        render_pass = command_encoder.begin_render_pass(
            color_attachments=[
                {
                    "view": dst_view,
                    "resolve_target": None,
                    "clear_value": (0, 0, 0, 0),
                    "load_op": wgpu.LoadOp.clear,
                    "store_op": wgpu.StoreOp.store,
                }
            ],
        )
        render_pass.set_pipeline(self._pipeline)
        render_pass.set_bind_group(0, self._bind_group)
        render_pass.draw(3, 1)
        render_pass.end()
        return [command_encoder.finish()]

    def _create_pipeline(self):
        device = self._device
        wgsl = load_wgsl(
            "flush.wgsl",
            flush_struct=generate_uniform_struct(flush_uniform_type, "Flush"),
        )
        shader_module = device.create_shader_module(code=wgsl)

        self._bind_group_layout = device.create_bind_group_layout(
            entries=[
                {
                    "binding": 0,
                    "visibility": wgpu.ShaderStage.FRAGMENT,
                    "buffer": {"type": wgpu.BufferBindingType.uniform},
                },
                {
                    "binding": 1,
                    "visibility": wgpu.ShaderStage.FRAGMENT,
                    "sampler": {"type": wgpu.SamplerBindingType.filtering},
                },
                {
                    "binding": 2,
                    "visibility": wgpu.ShaderStage.FRAGMENT,
                    "texture": {
                        "sample_type": wgpu.TextureSampleType.float,
                        "view_dimension": wgpu.TextureViewDimension.d2,
                        "multisampled": False,
                    },
                },
            ]
        )
        pipeline_layout = device.create_pipeline_layout(
            bind_group_layouts=[self._bind_group_layout]
        )

        return device.create_render_pipeline(
            layout=pipeline_layout,
            vertex={
                "module": shader_module,
                "entry_point": "vs_main",
                "buffers": [],
            },
            primitive={"topology": wgpu.PrimitiveTopology.triangle_list},
            depth_stencil=None,
            multisample=None,
            fragment={
                "module": shader_module,
                "entry_point": "fs_main",
                "targets": [{"format": self._target_format}],
            },
        )

    def _create_bind_group(self, src_view):
        return self._device.create_bind_group(
            layout=self._bind_group_layout,
            entries=[
                {
                    "binding": 0,
                    "resource": {
                        "buffer": self._uniform_buffer,
                        "offset": 0,
                        "size": self._uniform_data.nbytes,
                    },
                },
                {"binding": 1, "resource": self._sampler},
                {"binding": 2, "resource": src_view},
            ],
        )
