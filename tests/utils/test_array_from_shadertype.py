import numpy as np
import pytest

from lightrig.utils import array_from_shadertype, generate_uniform_struct


def test_array_from_shadertype_scalar():
    # A simple dict with two floats
    d = dict(
        foo="f4",
        bar="f4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("foo", "bar")
    assert a.nbytes == 8  # 4 + 4

    # Order is preserved
    d = dict(
        bar="f4",
        foo="f4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("bar", "foo")
    assert a.nbytes == 8  # 4 + 4


def test_array_from_shadertype_vec2():
    # A 2-vector and a float
    d = dict(
        foo="2xf4",
        bar="f4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("foo", "bar", "__padding1")
    assert a.nbytes == 16  # 8 + 4 + padding to 8

    # The order is kept, so padding goes in between
    d = dict(
        bar="f4",
        foo="2xf4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("bar", "__padding1", "foo")
    assert a.nbytes == 16  # 4 + 4 + 8


def test_array_from_shadertype_vec3_and_vec4():
    # A vec3 aligns to 16 bytes, but a scalar can follow in its last slot
    d = dict(
        foo="3xf4",
        bar="f4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("foo", "bar")
    assert a.nbytes == 16

    d = dict(
        bar="f4",
        foo="4xf4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.names == ("bar", "__padding1", "foo")
    assert a.nbytes == 32
    assert a.dtype.fields["foo"][1] == 16  # offset


def test_array_from_shadertype_matrix():
    d = dict(
        count="u4",
        transform="4x4xf4",
    )
    a = array_from_shadertype(d)
    assert a.dtype.fields["transform"][1] == 16
    assert a["transform"].shape == (4, 4)
    assert a.nbytes == 80

    # Matrices are stored column-major
    m = np.arange(16, dtype=np.float32).reshape(4, 4)
    a["transform"] = m.T
    assert a["transform"][0].tolist() == [0, 4, 8, 12]


def test_array_from_shadertype_fails():
    with pytest.raises(RuntimeError):
        array_from_shadertype(dict(foo="f8"))
    with pytest.raises(ValueError):
        array_from_shadertype(dict(foo="4x3xf4"))
    with pytest.raises(ValueError):
        array_from_shadertype(dict(foo="2x2x4xf4"))


def test_generate_uniform_struct():
    d = dict(
        a="f4",
        b="4xf4",
        c="u4",
        d="i4",
        m="4x4xf4",
    )
    code = generate_uniform_struct(d, "Foo")
    assert code.startswith("struct Foo {")
    assert "a: f32," in code
    assert "b: vec4<f32>," in code
    assert "c: u32," in code
    assert "d: i32," in code
    assert "m: mat4x4<f32>," in code
    assert "padding" not in code

    # The fields appear in the order of the dict
    assert code.index("a:") < code.index("b:") < code.index("m:")
