import numpy as np
import pytest

from mat73_reader import (ElementKind, InvalidShapeError, StructDescriptor,
                          TypedArray)


class TestTypedArray:

    def test_column_major_reshape_law(self):
        c, r = 4, 3
        data = np.arange(c * r, dtype=np.float64)
        var = TypedArray("/m", (c, r), data)

        m = var.to_matrix()
        assert m.shape == (r, c)
        for i in range(r):
            for j in range(c):
                assert m[i, j] == data[j * r + i]

    def test_data_is_read_only_and_raw_is_a_copy(self):
        var = TypedArray("/m", (2, 2), [1.0, 2.0, 3.0, 4.0])

        with pytest.raises(ValueError):
            var.data[0] = 10.0

        raw = var.raw()
        raw[0] = 10.0
        assert var.data[0] == 1.0

    def test_matrix_is_independent(self):
        var = TypedArray("/m", (2, 2), [1.0, 2.0, 3.0, 4.0])
        m = var.to_matrix()
        m[0, 0] = -1.0
        assert var.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_size_must_match_shape(self):
        with pytest.raises(ValueError, match="do not fill"):
            TypedArray("/m", (2, 2), [1.0, 2.0, 3.0])

    def test_scalar_shape(self):
        var = TypedArray("/x", (), [5.0])
        assert len(var) == 1
        assert var.ndim == 0
        with pytest.raises(InvalidShapeError) as exc_info:
            var.n_column
        assert exc_info.value.shape == ()

    def test_empty_array(self):
        var = TypedArray("/e", (0, 3), [])
        assert var.n_row == 3
        assert var.to_matrix().shape == (3, 0)

    def test_kind_coerced(self):
        var = TypedArray("/m", (2, ), [1, 2], kind="uint8")
        assert var.kind is ElementKind.UINT8
        assert var.data.dtype == np.uint8

    def test_float_data_not_truncated_to_integers(self):
        with pytest.raises(TypeError, match="cannot store float64"):
            TypedArray("/m", (2, ), [1.5, 2.0], kind="uint8")

    def test_integer_and_float_widths_convert(self):
        assert TypedArray("/m", (2, ), [1.0, 2.5],
                          kind="float32").tolist() == [1.0, 2.5]
        assert TypedArray("/m", (2, ), np.array([1, 2], dtype=np.int64),
                          kind="float64").tolist() == [1.0, 2.0]

    def test_non_numeric_data_rejected(self):
        with pytest.raises(TypeError):
            TypedArray("/m", (2, ), ["a", "b"])

    def test_equality(self):
        a = TypedArray("/m", (2, ), [1.0, 2.0])

        assert a == TypedArray("/m", (2, ), np.array([1.0, 2.0]))
        assert a != TypedArray("/n", (2, ), [1.0, 2.0])
        assert a != TypedArray("/m", (2, ), [1.0, 2.0], kind="float32")
        assert a != TypedArray("/m", (1, 2), [1.0, 2.0])
        assert a != [1.0, 2.0]


class TestStructDescriptor:

    def test_iteration_and_membership(self):
        desc = StructDescriptor("/s", ["x", "y"])

        assert desc.field_names == ("x", "y")
        assert list(desc) == ["x", "y"]
        assert "y" in desc and "z" not in desc

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            StructDescriptor("/s", ["x", ""])

    def test_value_semantics(self):
        assert StructDescriptor("/s", ["x"]) == StructDescriptor("/s", ("x", ))
        assert hash(StructDescriptor("/s", ["x"])) == hash(
            StructDescriptor("/s", ("x", )))


class TestElementKind:

    @pytest.mark.parametrize("value,expected", [
        ("float64", ElementKind.FLOAT64),
        (" Int16 ", ElementKind.INT16),
        (np.float32, ElementKind.FLOAT32),
        (np.dtype("uint64"), ElementKind.UINT64),
        (ElementKind.INT8, ElementKind.INT8),
    ])
    def test_coerce(self, value, expected):
        assert ElementKind.coerce(value) is expected

    @pytest.mark.parametrize("value", [None, "double", np.complex128, ">f8", 3.5])
    def test_coerce_rejects(self, value):
        with pytest.raises(ValueError, match="Unsupported element kind"):
            ElementKind.coerce(value)

    def test_dtype_is_native(self):
        for kind in ElementKind:
            assert kind.dtype.isnative
            assert kind.dtype.name == kind.value
