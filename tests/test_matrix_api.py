"""
Tests for 2x3 affine matrix primitives.
"""

import math

import numpy as np
import pytest

from reltransform.matrix.api import (
    as_matrix,
    determinant,
    identity,
    invert,
    is_identity,
    multiply,
    orient,
    rotate_radians,
    scale,
    shear,
    to_3x3,
    transform_points,
    transform_vectors,
    translate,
)

ATOL = 1e-9


@pytest.fixture
def rng():
    return np.random.default_rng(7)


@pytest.fixture
def random_matrix(rng):
    """Well-conditioned random affine matrix."""
    m = rng.standard_normal((2, 3))
    m[:, :2] += np.eye(2) * 3.0
    return as_matrix(m)


# ============================================================================
# Elementary Matrices
# ============================================================================


class TestElementaryMatrices:
    """Test constructors of elementary transforms."""

    def test_identity(self):
        np.testing.assert_array_equal(identity(), [[1, 0, 0], [0, 1, 0]])

    def test_translate(self):
        np.testing.assert_array_equal(translate(3.0, 4.0), [[1, 0, 3], [0, 1, 4]])

    def test_rotate_radians_quarter_turn(self):
        """Rotation is counter-clockwise: x axis goes to y axis."""
        m = rotate_radians(math.pi / 2)
        np.testing.assert_allclose(m, [[0, -1, 0], [1, 0, 0]], atol=ATOL)

    def test_scale(self):
        np.testing.assert_array_equal(scale(2.0, -3.0), [[2, 0, 0], [0, -3, 0]])

    def test_shear(self):
        np.testing.assert_array_equal(shear(0.5, 0.25), [[1, 0.5, 0], [0.25, 1, 0]])

    def test_orient_points_x_axis_at_target(self):
        m = orient(3.0, 4.0)
        np.testing.assert_allclose(m, [[0.6, -0.8, 0], [0.8, 0.6, 0]], atol=ATOL)
        np.testing.assert_allclose(transform_vectors(m, [5.0, 0.0]), [3.0, 4.0], atol=ATOL)

    def test_orient_origin_is_identity(self):
        np.testing.assert_array_equal(orient(0.0, 0.0), identity())

    def test_orient_matches_rotation(self):
        angle = 2.1
        np.testing.assert_allclose(
            orient(math.cos(angle) * 7, math.sin(angle) * 7), rotate_radians(angle), atol=ATOL
        )

    def test_matrices_are_read_only(self):
        m = translate(1.0, 2.0)
        assert m.dtype == np.float64
        assert m.shape == (2, 3)
        with pytest.raises(ValueError):
            m[0, 0] = 5.0

    def test_numpy_scalars_accepted(self):
        m = scale(np.float32(2.0), np.int64(3))
        np.testing.assert_array_equal(m, [[2, 0, 0], [0, 3, 0]])

    def test_nan_propagates(self):
        m = translate(float("nan"), 0.0)
        assert math.isnan(m[0, 2])

    @pytest.mark.parametrize("bad", ["1.0", None, 1j, [1.0]])
    def test_non_real_rejected(self, bad):
        with pytest.raises(TypeError, match="real number"):
            translate(bad, 0.0)
        with pytest.raises(TypeError, match="real number"):
            rotate_radians(bad)


# ============================================================================
# Composition
# ============================================================================


class TestMultiply:
    """Test matrix composition order and algebra."""

    def test_identity_is_neutral(self, random_matrix):
        np.testing.assert_allclose(multiply(identity(), random_matrix), random_matrix, atol=ATOL)
        np.testing.assert_allclose(multiply(random_matrix, identity()), random_matrix, atol=ATOL)

    def test_right_operand_applies_first(self):
        """multiply(T, S) scales first, then translates."""
        m = multiply(translate(10.0, 0.0), scale(2.0, 2.0))
        np.testing.assert_allclose(transform_points(m, [1.0, 1.0]), [12.0, 2.0], atol=ATOL)

        m = multiply(scale(2.0, 2.0), translate(10.0, 0.0))
        np.testing.assert_allclose(transform_points(m, [1.0, 1.0]), [22.0, 2.0], atol=ATOL)

    def test_matches_homogeneous_product(self, rng):
        a = as_matrix(rng.standard_normal((2, 3)))
        b = as_matrix(rng.standard_normal((2, 3)))
        expected = (to_3x3(a) @ to_3x3(b))[:2]
        np.testing.assert_allclose(multiply(a, b), expected, atol=ATOL)

    def test_associative(self, rng):
        a, b, c = (as_matrix(rng.standard_normal((2, 3))) for _ in range(3))
        np.testing.assert_allclose(
            multiply(multiply(a, b), c), multiply(a, multiply(b, c)), atol=1e-12
        )

    def test_translations_add(self):
        m = multiply(translate(1.0, 2.0), translate(3.0, 4.0))
        np.testing.assert_allclose(m, translate(4.0, 6.0), atol=ATOL)

    def test_does_not_modify_inputs(self):
        a = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        b = a.copy()
        multiply(a, b)
        np.testing.assert_array_equal(a, b)


# ============================================================================
# Conversion and Inspection
# ============================================================================


class TestConversion:
    """Test as_matrix / to_3x3."""

    def test_as_matrix_accepts_lists(self):
        m = as_matrix([[1, 0, 5], [0, 1, 6]])
        assert m.dtype == np.float64
        assert not m.flags.writeable

    def test_as_matrix_returns_frozen_input_unchanged(self):
        m = translate(1.0, 1.0)
        assert as_matrix(m) is m

    def test_as_matrix_copies_read_only_view(self):
        """A read-only view must not track writes to its writable base."""
        base = np.eye(2, 3)
        view = base.view()
        view.setflags(write=False)

        m = as_matrix(view)
        base[0, 2] = 5.0

        assert m is not view
        assert m[0, 2] == 0.0
        assert not m.flags.writeable

    def test_as_matrix_copies_writable_input(self):
        src = np.eye(2, 3)
        m = as_matrix(src)
        src[0, 2] = 9.0
        assert m[0, 2] == 0.0

    def test_as_matrix_accepts_homogeneous(self):
        m = as_matrix([[1, 0, 5], [0, 1, 6], [0, 0, 1]])
        np.testing.assert_array_equal(m, translate(5.0, 6.0))

    def test_as_matrix_rejects_projective(self):
        with pytest.raises(ValueError, match="bottom row"):
            as_matrix([[1, 0, 0], [0, 1, 0], [0.5, 0, 1]])

    @pytest.mark.parametrize("shape", [(2, 2), (3, 2), (6,), (4, 4)])
    def test_as_matrix_rejects_bad_shape(self, shape):
        with pytest.raises(ValueError, match="2x3 or 3x3"):
            as_matrix(np.zeros(shape))

    def test_to_3x3(self):
        np.testing.assert_array_equal(
            to_3x3(translate(1.0, 2.0)), [[1, 0, 1], [0, 1, 2], [0, 0, 1]]
        )


class TestInspection:
    """Test determinant / invert / is_identity."""

    def test_determinant(self):
        assert determinant(scale(2.0, 3.0)) == pytest.approx(6.0)
        assert determinant(rotate_radians(0.7)) == pytest.approx(1.0)
        assert determinant(scale(-1.0, 0.0)) == 0.0

    def test_invert_round_trip(self, random_matrix):
        np.testing.assert_allclose(multiply(random_matrix, invert(random_matrix)), identity(), atol=ATOL)
        np.testing.assert_allclose(multiply(invert(random_matrix), random_matrix), identity(), atol=ATOL)

    def test_invert_translation(self):
        np.testing.assert_allclose(invert(translate(3.0, -4.0)), translate(-3.0, 4.0), atol=ATOL)

    def test_invert_singular_raises(self):
        with pytest.raises(ValueError, match="singular"):
            invert(scale(-1.0, 0.0))

    def test_is_identity(self):
        assert is_identity(identity())
        assert is_identity(rotate_radians(2 * math.pi))
        assert not is_identity(translate(1e-3, 0.0))


# ============================================================================
# Application
# ============================================================================


class TestApplication:
    """Test mapping points and vectors."""

    def test_transform_points_batch(self, rng):
        m = multiply(translate(1.0, 2.0), rotate_radians(0.3))
        points = rng.standard_normal((50, 2))

        result = transform_points(m, points)

        expected = points @ m[:, :2].T + m[:, 2]
        assert result.shape == (50, 2)
        np.testing.assert_allclose(result, expected, atol=ATOL)

    def test_transform_points_single(self):
        result = transform_points(translate(1.0, 2.0), (3.0, 4.0))
        assert result.shape == (2,)
        np.testing.assert_allclose(result, [4.0, 6.0])

    def test_transform_points_does_not_modify_input(self):
        points = np.array([[1.0, 1.0]])
        transform_points(scale(5.0, 5.0), points)
        np.testing.assert_array_equal(points, [[1.0, 1.0]])

    def test_transform_vectors_ignores_translation(self):
        result = transform_vectors(translate(100.0, 100.0), [[1.0, 2.0]])
        np.testing.assert_allclose(result, [[1.0, 2.0]])

    def test_transform_points_empty(self):
        assert transform_points(identity(), np.empty((0, 2))).shape == (0, 2)

    @pytest.mark.parametrize("bad", [np.zeros((4, 3)), [1.0, 2.0, 3.0]])
    def test_bad_point_shape(self, bad):
        with pytest.raises(ValueError, match=r"\(N, 2\)"):
            transform_points(identity(), bad)

    def test_points_must_be_array_like(self):
        with pytest.raises(TypeError, match="array-like"):
            transform_points(identity(), 3.0)
