import numpy as np
import pytest
from skyframes import constants
from skyframes.frames import (
    FK5,
    FK5J2000_TO_GAL,
    FK5J2000_TO_ICRS,
    GAL_TO_FK5J2000,
    GAL_TO_ICRS,
    GALACTIC,
    ICRS,
    ICRS_TO_FK5J2000,
    ICRS_TO_GAL,
    Frame,
    FrameKind,
    rotation_matrix,
)
from skyframes.precession import precess_from_j2000
from skyframes.rotation import is_rotation_matrix

ALL_FRAMES = [ICRS, GALACTIC, FK5(2000.0), FK5(1950.0), FK5(2100.5)]

CONSTANT_MATRICES = [
    ICRS_TO_FK5J2000,
    FK5J2000_TO_ICRS,
    FK5J2000_TO_GAL,
    GAL_TO_FK5J2000,
    GAL_TO_ICRS,
    ICRS_TO_GAL,
]


class TestFrame:
    def test_equality(self):
        assert FK5(2000) == FK5(2000.0)
        assert FK5(2000.0) != FK5(1950.0)
        assert ICRS == Frame(FrameKind.ICRS)
        assert ICRS != GALACTIC
        assert FK5(2000.0) != ICRS
        assert len({FK5(2000.0), FK5(2000), ICRS, GALACTIC}) == 3

    def test_epoch_validation(self):
        with pytest.raises(ValueError, match="epoch"):
            Frame(FrameKind.FK5)
        with pytest.raises(ValueError, match="epoch"):
            Frame(FrameKind.ICRS, 2000.0)
        with pytest.raises(TypeError):
            Frame("ICRS")

    def test_str(self):
        assert str(ICRS) == "ICRS"
        assert str(GALACTIC) == "Galactic"
        assert str(FK5(1950.0)) == "FK5(J1950.0)"


class TestFrameConstants:
    @pytest.mark.parametrize("mat", CONSTANT_MATRICES)
    def test_proper_rotation(self, mat):
        assert is_rotation_matrix(mat)

    @pytest.mark.parametrize("mat", CONSTANT_MATRICES)
    def test_read_only(self, mat):
        with pytest.raises(ValueError):
            mat[0, 0] = 0.0

    def test_transposes(self):
        assert np.array_equal(FK5J2000_TO_ICRS, ICRS_TO_FK5J2000.T)
        assert np.array_equal(GAL_TO_FK5J2000, FK5J2000_TO_GAL.T)
        assert np.array_equal(ICRS_TO_GAL, GAL_TO_ICRS.T)
        assert np.allclose(GAL_TO_ICRS, FK5J2000_TO_ICRS @ GAL_TO_FK5J2000)

    def test_frame_tie_is_small(self):
        # The ICRS and FK5 J2000 frames differ by tens of milliarcseconds.
        offset = ICRS_TO_FK5J2000 - np.eye(3)
        assert np.max(np.abs(offset)) < np.radians(0.1 / 3600)
        assert np.max(np.abs(offset)) > 0

    def test_galactic_pole(self):
        # The north Galactic pole is the z axis of the Galactic frame.
        ra = np.radians(constants.NGP_FK5J2000_RA_DEG)
        dec = np.radians(constants.NGP_FK5J2000_DEC_DEG)
        ngp = [np.cos(dec) * np.cos(ra), np.cos(dec) * np.sin(ra), np.sin(dec)]
        assert np.allclose(FK5J2000_TO_GAL @ ngp, [0, 0, 1], atol=1e-14)

    def test_celestial_pole_longitude(self):
        # The FK5 J2000 north pole sits at Galactic longitude lon0.
        pole = GAL_TO_FK5J2000.T @ [0, 0, 1]
        lon = np.degrees(np.arctan2(pole[1], pole[0]))
        assert np.isclose(lon, constants.LON0_FK5J2000_DEG)


class TestRotationMatrix:
    @pytest.mark.parametrize("to_frame", ALL_FRAMES)
    @pytest.mark.parametrize("from_frame", ALL_FRAMES)
    def test_proper_rotation(self, to_frame, from_frame):
        assert is_rotation_matrix(rotation_matrix(to_frame, from_frame))

    @pytest.mark.parametrize("to_frame", ALL_FRAMES)
    @pytest.mark.parametrize("from_frame", ALL_FRAMES)
    def test_reverse_is_transpose(self, to_frame, from_frame):
        forward = rotation_matrix(to_frame, from_frame)
        reverse = rotation_matrix(from_frame, to_frame)
        assert np.allclose(forward.T, reverse, atol=1e-14)

    @pytest.mark.parametrize("frame", ALL_FRAMES)
    def test_same_frame(self, frame):
        assert np.array_equal(rotation_matrix(frame, frame), np.eye(3))

    def test_fixed_pairs(self):
        assert rotation_matrix(GALACTIC, ICRS) is ICRS_TO_GAL
        assert rotation_matrix(ICRS, GALACTIC) is GAL_TO_ICRS

    def test_fk5_pairs(self):
        p = precess_from_j2000(1950.0)
        assert np.allclose(rotation_matrix(FK5(1950.0), ICRS), p @ ICRS_TO_FK5J2000)
        assert np.allclose(
            rotation_matrix(ICRS, FK5(1950.0)), FK5J2000_TO_ICRS @ p.T
        )
        assert np.allclose(
            rotation_matrix(FK5(1950.0), GALACTIC), p @ GAL_TO_FK5J2000
        )
        assert np.allclose(
            rotation_matrix(GALACTIC, FK5(1950.0)), FK5J2000_TO_GAL @ p.T
        )
        q = precess_from_j2000(2100.0)
        assert np.allclose(rotation_matrix(FK5(2100.0), FK5(1950.0)), q @ p.T)

    def test_fk5_j2000(self):
        assert np.array_equal(rotation_matrix(FK5(2000.0), ICRS), ICRS_TO_FK5J2000)
        assert np.array_equal(
            rotation_matrix(GALACTIC, FK5(2000.0)), FK5J2000_TO_GAL
        )

    @pytest.mark.parametrize("epoch", [1900.0, 1950.0, 2000.0, 2024.5])
    def test_composite_path(self, epoch):
        # Galactic -> FK5 -> ICRS matches Galactic -> ICRS directly.
        via = rotation_matrix(ICRS, FK5(epoch)) @ rotation_matrix(FK5(epoch), GALACTIC)
        assert np.allclose(via, GAL_TO_ICRS, atol=1e-14)

    def test_type_error(self):
        with pytest.raises(TypeError):
            rotation_matrix("ICRS", GALACTIC)
        with pytest.raises(TypeError):
            rotation_matrix(ICRS, None)
