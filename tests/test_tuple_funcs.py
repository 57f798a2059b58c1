"""Unit tests for the Taichi-side tuple helpers.

Each test runs a small kernel and checks its output against the host Tuple
semantics.

Note: Imports are done inside test methods to avoid Taichi initialization issues.
The conftest.py fixture initializes Taichi before tests run.
"""

import math

import pytest
import taichi as ti


class TestConstructors:
    """Tests for make_point4 and make_vector4."""

    def test_make_point4(self):
        """Test a kernel-built point has w = 1 and classifies as a point."""
        from src.python.core.tuple_funcs import is_point4, is_vector4, make_point4

        result = ti.Vector.field(4, dtype=ti.f64, shape=())
        flags = ti.field(dtype=ti.i32, shape=2)

        @ti.kernel
        def test_kernel():
            p = make_point4(4.3, -4.2, 3.1)
            result[None] = p
            flags[0] = is_point4(p)
            flags[1] = is_vector4(p)

        test_kernel()
        r = result[None]
        assert r[0] == pytest.approx(4.3)
        assert r[1] == pytest.approx(-4.2)
        assert r[2] == pytest.approx(3.1)
        assert r[3] == 1.0
        assert flags[0] == 1
        assert flags[1] == 0

    def test_make_vector4(self):
        """Test a kernel-built vector has w = 0 and classifies as a vector."""
        from src.python.core.tuple_funcs import is_point4, is_vector4, make_vector4

        result = ti.Vector.field(4, dtype=ti.f64, shape=())
        flags = ti.field(dtype=ti.i32, shape=2)

        @ti.kernel
        def test_kernel():
            v = make_vector4(4.3, -4.2, 3.1)
            result[None] = v
            flags[0] = is_point4(v)
            flags[1] = is_vector4(v)

        test_kernel()
        assert result[None][3] == 0.0
        assert flags[0] == 0
        assert flags[1] == 1

    def test_point_plus_vector_is_point(self):
        """Test native vec4 addition keeps point/vector rules."""
        from src.python.core.tuple_funcs import is_point4, make_point4, make_vector4

        result = ti.Vector.field(4, dtype=ti.f64, shape=())
        flag = ti.field(dtype=ti.i32, shape=())

        @ti.kernel
        def test_kernel():
            p = make_point4(3.0, -2.0, 5.0) + make_vector4(-2.0, 3.0, 1.0)
            result[None] = p
            flag[None] = is_point4(p)

        test_kernel()
        assert list(result[None].to_numpy()) == pytest.approx([1.0, 1.0, 6.0, 1.0])
        assert flag[None] == 1


class TestClassification:
    """Tests for is_point4 and is_vector4 on arbitrary w."""

    def test_other_w_is_neither(self):
        """Test w = 2 is neither a point nor a vector."""
        from src.python.core.tuple_funcs import is_point4, is_vector4, make_point4

        flags = ti.field(dtype=ti.i32, shape=2)

        @ti.kernel
        def test_kernel():
            t = make_point4(1.0, 2.0, 3.0) + make_point4(4.0, 5.0, 6.0)
            flags[0] = is_point4(t)
            flags[1] = is_vector4(t)

        test_kernel()
        assert flags[0] == 0
        assert flags[1] == 0


class TestVectorOperations:
    """Tests for dot4 and magnitude4."""

    def test_dot4(self):
        """Test dot product of (1, 2, 3) and (2, 3, 4) is 20."""
        from src.python.core.tuple_funcs import dot4, make_vector4

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = dot4(make_vector4(1.0, 2.0, 3.0), make_vector4(2.0, 3.0, 4.0))

        test_kernel()
        assert result[None] == pytest.approx(20.0)

    def test_dot4_includes_w(self):
        """Test dot product spans all four components."""
        from src.python.core.tuple_funcs import dot4, vec4

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = dot4(vec4(1.0, 2.0, 3.0, 4.0), vec4(1.0, 1.0, 1.0, 2.0))

        test_kernel()
        assert result[None] == pytest.approx(14.0)

    def test_magnitude4_matches_host(self):
        """Test kernel magnitude agrees with Tuple.magnitude."""
        from src.python.core.tuple import make_vector
        from src.python.core.tuple_funcs import magnitude4, make_vector4

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = magnitude4(make_vector4(1.0, 2.0, 3.0))

        test_kernel()
        assert result[None] == pytest.approx(math.sqrt(14))
        assert result[None] == pytest.approx(make_vector(1, 2, 3).magnitude())


class TestApproxEq4:
    """Tests for approx_eq4."""

    def test_equal_within_epsilon(self):
        """Test tiny differences compare equal."""
        from src.python.core.approx import EPSILON
        from src.python.core.tuple_funcs import approx_eq4, vec4

        result = ti.field(dtype=ti.i32, shape=())

        @ti.kernel
        def test_kernel():
            a = vec4(1.0, 2.0, 3.0, 1.0)
            b = vec4(1.0 + 1e-7, 2.0, 3.0 - 1e-7, 1.0)
            result[None] = approx_eq4(a, b, EPSILON)

        test_kernel()
        assert result[None] == 1

    def test_all_components_must_match(self):
        """Test one matching component does not make tuples equal."""
        from src.python.core.approx import EPSILON
        from src.python.core.tuple_funcs import approx_eq4, vec4

        result = ti.field(dtype=ti.i32, shape=2)

        @ti.kernel
        def test_kernel():
            result[0] = approx_eq4(vec4(5.0, 0.0, 0.0, 0.0), vec4(5.0, 7.0, 8.0, 9.0), EPSILON)
            result[1] = approx_eq4(vec4(0.0, 0.0, 0.0, 0.0), vec4(0.0, 0.0, 0.0, 999.0), EPSILON)

        test_kernel()
        assert result[0] == 0
        assert result[1] == 0
