'''Unit tests for construction of elementary affine matrices'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
from typing import Callable

import numpy as np
from scipy.spatial.transform import Rotation

from astrocoord.aunits import DimensionalityError, ureg
from astrocoord.transforms.affine.matrices import (
    NonAffineMatrixError,
    affine_matrix_from_linear_and_center,
    is_affine_matrix,
    validate_affine_matrix,
    validate_float_dtype,
    translation,
    scaling,
    shearing,
    rotation_x,
    rotation_y,
    rotation_z,
)


ELEMENTARY_MATRIX_FNS = (translation, scaling, shearing, rotation_x, rotation_y, rotation_z)
ANGLES = (0.0, np.pi / 6, np.pi / 2, 2.0, -np.pi)

@pytest.mark.parametrize('matrix_fn', ELEMENTARY_MATRIX_FNS)
def test_elementary_defaults_are_identity(matrix_fn : Callable[..., np.ndarray]) -> None:
    '''Test that every elementary matrix constructor yields the identity when called with no arguments'''
    assert np.allclose(matrix_fn(), np.eye(4))

@pytest.mark.parametrize('matrix_fn', ELEMENTARY_MATRIX_FNS)
def test_elementary_matrices_are_affine(matrix_fn : Callable[..., np.ndarray]) -> None:
    '''Test that every elementary matrix keeps the bottom row of an affine transformation'''
    assert is_affine_matrix(matrix_fn(0.7))

@pytest.mark.parametrize(
    'axis, matrix_fn',
    [
        ('x', rotation_x),
        ('y', rotation_y),
        ('z', rotation_z),
    ]
)
@pytest.mark.parametrize('angle', ANGLES)
def test_rotations_match_scipy(axis : str, matrix_fn : Callable[..., np.ndarray], angle : float) -> None:
    '''Test that the axis rotations agree with the (active, counterclockwise) convention used by scipy'''
    expected = np.eye(4)
    expected[:3, :3] = Rotation.from_euler(axis, angle).as_matrix()
    assert np.allclose(matrix_fn(angle), expected)

@pytest.mark.parametrize('matrix_fn', (rotation_x, rotation_y, rotation_z))
def test_rotation_degrees_flag(matrix_fn : Callable[..., np.ndarray]) -> None:
    '''Test that plain-number angles are only read as degrees when explicitly requested'''
    assert np.allclose(matrix_fn(90.0, degrees=True), matrix_fn(np.pi / 2))
    assert not np.allclose(matrix_fn(90.0), matrix_fn(np.pi / 2))

@pytest.mark.parametrize('matrix_fn', (rotation_x, rotation_y, rotation_z))
def test_rotation_angle_quantity(matrix_fn : Callable[..., np.ndarray]) -> None:
    '''Test that angles with explicit units are converted regardless of the degrees flag'''
    assert np.allclose(matrix_fn(90.0 * ureg.degree), matrix_fn(np.pi / 2))
    assert np.allclose(matrix_fn(90.0 * ureg.degree, degrees=True), matrix_fn(np.pi / 2))

def test_rotation_rejects_non_angular_quantity() -> None:
    '''Test that lengths cannot be passed off as rotation angles'''
    with pytest.raises(DimensionalityError):
        _ = rotation_z(1.0 * ureg.meter)

def test_translation_entries() -> None:
    '''Test that the translation offsets occupy the last column'''
    matrix = translation(1.0, -2.0, 3.5)
    assert np.allclose(matrix[:3, 3], [1.0, -2.0, 3.5]) and np.allclose(matrix[:3, :3], np.eye(3))

def test_scaling_entries() -> None:
    '''Test that scaling factors lie on the diagonal'''
    assert np.allclose(scaling(2.0, 3.0, 4.0), np.diag([2.0, 3.0, 4.0, 1.0]))

def test_shearing_entries() -> None:
    '''Test that each shear coefficient lands in its own off-diagonal slot'''
    matrix = shearing(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert np.allclose(matrix[:3, :3], [
        [1.0, 1.0, 2.0],
        [3.0, 1.0, 4.0],
        [5.0, 6.0, 1.0],
    ])

@pytest.mark.parametrize('matrix_fn', ELEMENTARY_MATRIX_FNS)
def test_elementary_matrix_dtype(matrix_fn : Callable[..., np.ndarray]) -> None:
    '''Test that extended-precision matrices can be requested'''
    assert matrix_fn(dtype=np.longdouble).dtype == np.dtype(np.longdouble)

@pytest.mark.parametrize(
    'matrix, expected_value',
    [
        (np.eye(4), True),
        (translation(1.0, 2.0, 3.0), True),
        (np.array([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 1e-16, 1.0000000000000002],
        ]), True), # within rounding error of affine
        (np.eye(3), False),
        (np.ones((4, 4)), False),
        (np.array([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 1, 1],
        ]), False), # projective bottom row
    ]
)
def test_affinity_check(matrix : np.ndarray, expected_value : bool) -> None:
    '''Test that only 4x4 matrices with the affine bottom row are recognized as affine'''
    assert is_affine_matrix(matrix) == expected_value

@pytest.mark.parametrize('matrix', (np.eye(3), np.ones((4, 4)), np.zeros((4, 5))))
def test_validate_affine_matrix(matrix : np.ndarray) -> None:
    '''Test that non-affine matrices are rejected'''
    with pytest.raises(NonAffineMatrixError):
        validate_affine_matrix(matrix)

@pytest.mark.parametrize('dtype', (int, np.int32, bool, complex))
def test_validate_float_dtype_rejects(dtype : type) -> None:
    '''Test that only floating-point types are accepted as matrix precisions'''
    with pytest.raises(TypeError):
        _ = validate_float_dtype(dtype)

def test_affine_matrix_from_linear_and_center() -> None:
    '''Test that a linear part and a center are placed into the correct blocks of an affine matrix'''
    linear = Rotation.from_euler('z', np.pi / 3).as_matrix()
    center = np.array([1.0, 2.0, 3.0])
    matrix = affine_matrix_from_linear_and_center(linear, center)

    assert is_affine_matrix(matrix)
    assert np.allclose(matrix[:3, :3], linear) and np.allclose(matrix[:3, 3], center)

def test_validate_affine_matrix_sets_exact_bottom_row() -> None:
    '''Test that validation hands back a copy whose bottom row is exactly affine, without touching the input'''
    matrix = scaling(2.0, 2.0, 2.0)
    matrix[-1] = [1e-15, 0.0, 0.0, 1.0 - 1e-15]
    validated = validate_affine_matrix(matrix, dtype=np.longdouble)

    assert validated.dtype == np.dtype(np.longdouble)
    assert np.array_equal(validated[-1], [0.0, 0.0, 0.0, 1.0])
    assert matrix[-1, 0] == 1e-15
