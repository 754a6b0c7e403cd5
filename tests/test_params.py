"""Tests for parameter coercion and shape parameter models."""

import numpy as np
import pytest
from pydantic import ValidationError

from voxel_shapes.models.errors import FailureKind, InvalidOperands, InvalidParameterType
from voxel_shapes.models.params import (
    DiskParams,
    SphereParams,
    TorusParams,
    coerce_floats,
)


class TestCoerceFloats:
    def test_mixed_ints_and_floats(self):
        result = coerce_floats([1, 2.5, -3])
        assert result == [1.0, 2.5, -3.0]
        assert all(type(v) is float for v in result)

    def test_empty(self):
        assert coerce_floats([]) == []

    def test_numpy_scalars(self):
        assert coerce_floats([np.int64(2), np.float32(0.5)]) == [2.0, 0.5]

    def test_rejects_string_with_index(self):
        with pytest.raises(InvalidParameterType) as exc:
            coerce_floats([1, "two", 3])
        assert exc.value.index == 1
        assert exc.value.actual_type == "str"
        assert exc.value.kind is FailureKind.INVALID_PARAMETER_TYPE

    def test_rejects_bool(self):
        with pytest.raises(InvalidParameterType) as exc:
            coerce_floats([True])
        assert exc.value.index == 0
        assert exc.value.actual_type == "bool"

    def test_rejects_none(self):
        with pytest.raises(InvalidParameterType, match="NoneType at 2"):
            coerce_floats([0, 1, None])

    @pytest.mark.parametrize("values", [None, 5, "1.5", b"12"])
    def test_rejects_non_list(self, values):
        with pytest.raises(InvalidOperands):
            coerce_floats(values)

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            coerce_floats(["x"])


class TestShapeParams:
    def test_from_values(self):
        p = DiskParams.from_values([3, 1, 2.0])
        assert p.radius == 3.0
        assert p.inner_radius == 1.0
        assert p.height == 2.0

    def test_no_range_check(self):
        p = DiskParams.from_values([-1, 5, -2])
        assert p.radius == -1.0

    def test_extra_values_ignored(self):
        p = TorusParams.from_values([4, 1, 99])
        assert (p.major_radius, p.minor_radius) == (4.0, 1.0)

    def test_extra_values_still_checked(self):
        with pytest.raises(InvalidParameterType) as exc:
            SphereParams.from_values([3, 1, "x"])
        assert exc.value.index == 2

    def test_missing_value(self):
        with pytest.raises(InvalidParameterType) as exc:
            DiskParams.from_values([3, 1])
        assert exc.value.index == 2
        assert exc.value.actual_type == "missing"

    def test_from_values_returns_subclass(self):
        assert type(TorusParams.from_values([3, 1])) is TorusParams

    def test_from_values_non_list(self):
        with pytest.raises(InvalidOperands):
            DiskParams.from_values(None)

    def test_frozen(self):
        p = SphereParams.from_values([3, 1])
        with pytest.raises(ValidationError):
            p.radius = 5.0
