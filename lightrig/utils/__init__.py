"""
Utility functions for lightrig.

.. currentmodule:: lightrig.utils

.. autosummary::
    :toctree: utils/

    Color
    errors
    viewport.ViewportManager
    loop.RenderLoop
    show.Display

"""

import os
import logging

import numpy as np

from .color import Color  # noqa: F401
from .errors import InvalidConfiguration, ResourceUnavailable  # noqa: F401

logger = logging.getLogger("lightrig")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("LIGHTRIG_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid lightrig log level: {level}")


_set_log_level()


_primitives = {
    "i4": ("int32", "i32"),
    "u4": ("uint32", "u32"),
    "f4": ("float32", "f32"),
}


def _parse_format(format):
    if format[-2:] not in _primitives:
        raise RuntimeError(
            f"Values in a uniform must have a 32bit primitive type, not {format}"
        )
    shape = [int(i) for i in format[:-2].split("x") if i]
    return shape or [1]


def _field_align_and_size(shape):
    # The alignment is based on the last element of the shape, snapped to 4, 8 or 16.
    align = shape[-1] * 4
    for ref_align in [4, 8, 16]:
        if align <= ref_align:
            align = ref_align
            break
    if len(shape) == 2:
        # Matrices are stored as columns, each aligned like a vector
        return align, shape[0] * align
    return align, shape[-1] * 4


def array_from_shadertype(shadertype):
    """Get a numpy array object from a dict shadertype.

    In contrast to a plain structured array, padding is inserted so
    that each field sits at the offset that the WGSL struct layout rules
    dictate. The order of the fields is preserved, so that the struct
    produced by ``generate_uniform_struct()`` matches byte for byte.
    See https://www.w3.org/TR/WGSL/#structure-layout-rules

    WGSL matrices are column-major, while numpy arrays are row-major,
    so setting a matrix goes like this::

        uniform["a_matrix"] = numpy_array.T

    """
    assert isinstance(shadertype, dict)

    dtype_fields = []
    pad_index = 0
    struct_alignment = 4
    i = 0  # bytes processed

    for name, format in shadertype.items():
        shape = _parse_format(format)
        if len(shape) > 2:
            raise ValueError(f"Unsupported uniform format {format!r} for {name!r}")
        if len(shape) == 2 and shape[-1] != 4:
            raise ValueError(f"Only 4-row matrices are supported, not {format!r}")
        align, size = _field_align_and_size(shape)
        struct_alignment = max(struct_alignment, align)
        too_many_bytes = i % align
        if too_many_bytes:
            need_bytes = align - too_many_bytes
            pad_index += 1
            dtype_fields.append((f"__padding{pad_index}", "uint8", (need_bytes,)))
            i += need_bytes
        primitive = _primitives[format[-2:]][0]
        numpy_shape = () if shape == [1] else tuple(shape)
        dtype_fields.append((name, primitive, numpy_shape))
        i += size

    # Add padding to the struct
    too_many_bytes = i % struct_alignment
    if too_many_bytes:
        need_bytes = struct_alignment - too_many_bytes
        pad_index += 1
        dtype_fields.append((f"__padding{pad_index}", "uint8", (need_bytes,)))

    return np.zeros((), dtype=dtype_fields)


def generate_uniform_struct(shadertype, structname):
    """Generate the WGSL struct definition that matches ``array_from_shadertype()``."""
    code = f"struct {structname} {{"
    for name, format in shadertype.items():
        shape = _parse_format(format)
        wgsl_primitive = _primitives[format[-2:]][1]
        if shape == [1]:
            wgsl_type = wgsl_primitive
        elif len(shape) == 1:
            wgsl_type = f"vec{shape[0]}<{wgsl_primitive}>"
        else:
            wgsl_type = f"mat{shape[0]}x{shape[1]}<{wgsl_primitive}>"
        code += f"\n    {name}: {wgsl_type},"
    code += "\n};\n"
    return code
