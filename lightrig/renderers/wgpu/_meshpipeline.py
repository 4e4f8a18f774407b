"""
The pipeline that draws meshes with a MeshStandardMaterial, lit by the
lights in the scene.

The shader is composed (with jinja2) for the specific set of lights in the
scene. The uniform data of all lights is packed into a single struct, whose
layout depends on that same set. So when lights are added, a new pipeline
is created.
"""

import numpy as np
import wgpu

from ...materials import MeshStandardMaterial
from ...utils import array_from_shadertype, generate_uniform_struct, logger
from .templating import load_wgsl


# Uniform with info related to the camera and the output, updated once per render.
stdinfo_uniform_type = dict(
    cam_transform="4x4xf4",
    projection_transform="4x4xf4",
    cam_position="4xf4",
    physical_size="2xf4",
    logical_size="2xf4",
)

# Uniform with the transform of a single object.
wobject_uniform_type = dict(
    world_transform="4x4xf4",
    normal_transform="4x4xf4",
)

# Position, normal and texcoord, as float32's
VERTEX_STRIDE = 8 * 4


def get_lights_shadertype(lights):
    """Get the (shadertype, light_infos) that pack the uniforms of the given lights.

    Each field of a light's uniform_type gets a prefix that is unique for
    that light, e.g. "point3_position".
    """
    shadertype = {"count": "u4"}
    light_infos = []
    for i, light in enumerate(lights):
        prefix = f"{light.kind}{i}_"
        for name, format in light.uniform_type.items():
            shadertype[prefix + name] = format
        light_infos.append({"kind": light.kind, "prefix": prefix})
    return shadertype, light_infos


def compose_mesh_shader(lights):
    """Get the wgsl code for a mesh lit by the given lights."""
    lights_shadertype, light_infos = get_lights_shadertype(lights)
    return load_wgsl(
        "mesh.wgsl",
        stdinfo_struct=generate_uniform_struct(stdinfo_uniform_type, "StdInfo"),
        lights_struct=generate_uniform_struct(lights_shadertype, "Lights"),
        material_struct=generate_uniform_struct(
            MeshStandardMaterial.uniform_type, "Material"
        ),
        wobject_struct=generate_uniform_struct(wobject_uniform_type, "WorldObject"),
        lights=light_infos,
    )


class MeshPipeline:
    """The render pipeline, plus the lights buffer, for one set of light kinds.

    Parameters
    ----------
    device : wgpu.GPUDevice
        The device to create the GPU objects with.
    color_format : str
        The format of the color texture that is rendered to.
    depth_format : str
        The format of the depth texture.
    lights : list of Light
        The lights that the shader is composed for.

    """

    def __init__(self, device, color_format, depth_format, lights):
        self._device = device
        self.signature = tuple(light.kind for light in lights)
        logger.info(f"Creating mesh pipeline for lights {self.signature}")

        lights_shadertype, self._light_infos = get_lights_shadertype(lights)
        self.lights_data = array_from_shadertype(lights_shadertype)
        self.lights_data["count"] = len(lights)
        self.lights_buffer = device.create_buffer(
            size=self.lights_data.nbytes,
            usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
        )

        wgsl = compose_mesh_shader(lights)
        shader_module = device.create_shader_module(code=wgsl)

        uniform_entry = {"type": wgpu.BufferBindingType.uniform}
        visibility = wgpu.ShaderStage.VERTEX | wgpu.ShaderStage.FRAGMENT
        self.bind_group_layout = device.create_bind_group_layout(
            entries=[
                {"binding": i, "visibility": visibility, "buffer": uniform_entry}
                for i in range(4)
            ]
        )
        pipeline_layout = device.create_pipeline_layout(
            bind_group_layouts=[self.bind_group_layout]
        )

        self.pipeline = device.create_render_pipeline(
            layout=pipeline_layout,
            vertex={
                "module": shader_module,
                "entry_point": "vs_main",
                "buffers": [
                    {
                        "array_stride": VERTEX_STRIDE,
                        "step_mode": wgpu.VertexStepMode.vertex,
                        "attributes": [
                            {
                                "format": wgpu.VertexFormat.float32x3,
                                "offset": 0,
                                "shader_location": 0,
                            },
                            {
                                "format": wgpu.VertexFormat.float32x3,
                                "offset": 12,
                                "shader_location": 1,
                            },
                            {
                                "format": wgpu.VertexFormat.float32x2,
                                "offset": 24,
                                "shader_location": 2,
                            },
                        ],
                    }
                ],
            },
            primitive={
                "topology": wgpu.PrimitiveTopology.triangle_list,
                "cull_mode": wgpu.CullMode.none,
            },
            depth_stencil={
                "format": depth_format,
                "depth_write_enabled": True,
                "depth_compare": wgpu.CompareFunction.less,
            },
            multisample=None,
            fragment={
                "module": shader_module,
                "entry_point": "fs_main",
                "targets": [{"format": color_format}],
            },
        )

    def update_lights(self, lights):
        """Copy the uniform data of the lights into the packed struct and upload it."""
        for light, info in zip(lights, self._light_infos):
            prefix = info["prefix"]
            data = light.uniform_data
            for name in light.uniform_type:
                self.lights_data[prefix + name] = data[name]
        self._device.queue.write_buffer(self.lights_buffer, 0, self.lights_data)

    def create_bind_group(self, stdinfo_buffer, material_buffer, wobject_buffer):
        buffers = [stdinfo_buffer, self.lights_buffer, material_buffer, wobject_buffer]
        return self._device.create_bind_group(
            layout=self.bind_group_layout,
            entries=[
                {
                    "binding": i,
                    "resource": {"buffer": buffer, "offset": 0, "size": buffer.size},
                }
                for i, buffer in enumerate(buffers)
            ],
        )


class MeshResources:
    """The GPU objects that are specific to one mesh."""

    def __init__(self, device):
        self.wobject_data = array_from_shadertype(wobject_uniform_type)
        self.wobject_buffer = device.create_buffer(
            size=self.wobject_data.nbytes,
            usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
        )
        self.pipeline_signature = None
        self.material_buffer = None
        self.bind_group = None

    def update(self, device, wobject):
        world_matrix = wobject.world_matrix
        self.wobject_data["world_transform"] = world_matrix.T
        # The normal matrix is the transposed inverse, stored column-major
        self.wobject_data["normal_transform"] = np.linalg.inv(world_matrix)
        device.queue.write_buffer(self.wobject_buffer, 0, self.wobject_data)


def create_geometry_buffers(device, geometry):
    """Upload a geometry, returning (vertex_buffer, index_buffer, index_count)."""
    vertex_data = geometry.interleaved()
    index_data = np.ascontiguousarray(geometry.indices, dtype=np.uint32)
    vertex_buffer = device.create_buffer_with_data(
        data=vertex_data, usage=wgpu.BufferUsage.VERTEX
    )
    index_buffer = device.create_buffer_with_data(
        data=index_data, usage=wgpu.BufferUsage.INDEX
    )
    return vertex_buffer, index_buffer, index_data.size
