import numpy as np
import pytest
from skyframes.rotation import (
    is_rotation_matrix,
    rotation_x,
    rotation_y,
    rotation_z,
)


class TestAxisRotation:
    @pytest.mark.parametrize("angle", np.linspace(-2 * np.pi, 2 * np.pi, 9))
    def test_proper_rotation(self, angle):
        for func in (rotation_x, rotation_y, rotation_z):
            assert is_rotation_matrix(func(angle))

    def test_matrices(self):
        s, c = np.sin(0.3), np.cos(0.3)
        assert np.array_equal(
            rotation_x(0.3), [[1, 0, 0], [0, c, -s], [0, s, c]]
        )
        assert np.array_equal(
            rotation_y(0.3), [[c, 0, s], [0, 1, 0], [-s, 0, c]]
        )
        assert np.array_equal(
            rotation_z(0.3), [[c, -s, 0], [s, c, 0], [0, 0, 1]]
        )

    def test_quarter_turns(self):
        x = np.array([1.0, 0.0, 0.0])
        y = np.array([0.0, 1.0, 0.0])
        z = np.array([0.0, 0.0, 1.0])
        quarter = np.pi / 2
        assert np.allclose(rotation_z(quarter) @ x, y)
        assert np.allclose(rotation_x(quarter) @ y, z)
        assert np.allclose(rotation_y(quarter) @ z, x)

    def test_transpose_is_inverse(self):
        for func in (rotation_x, rotation_y, rotation_z):
            mat = func(1.234)
            assert np.allclose(mat.T, func(-1.234))
            assert np.allclose(mat @ mat.T, np.eye(3))

    def test_read_only(self):
        mat = rotation_z(0.1)
        with pytest.raises(ValueError):
            mat[0, 0] = 2.0

    def test_is_rotation_matrix_rejects(self):
        assert not is_rotation_matrix(np.eye(2))
        assert not is_rotation_matrix(2 * np.eye(3))
        # A reflection is orthonormal but has a determinant of -1.
        assert not is_rotation_matrix(np.diag([1.0, 1.0, -1.0]))
