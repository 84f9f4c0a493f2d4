'''For construction of elementary affine transformation matrices in 3 dimensions'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Union
import numpy as np

from ...arraytypes import Shape, Numeric, Dims, DimsPlus
from ...aunits import Quantity, angle_in_radians

AffineMatrix4x4 = np.ndarray[Shape[4, 4], Numeric]
DTypeLike = Union[str, type, np.dtype]

AFFINE_ROW : tuple[float, ...] = (0.0, 0.0, 0.0, 1.0) # bottom row shared by all affine (non-projective) matrices
AFFINE_ROW_TOLERANCE : float = 1e-12 # absolute slack on the bottom row, for matrices derived numerically (e.g. by inversion)


class NonAffineMatrixError(ValueError):
    '''Raised when a matrix which does not describe an affine transformation of 3D space is supplied'''
    pass

def is_affine_matrix(matrix : np.ndarray) -> bool:
    '''Whether a matrix is a 4x4 affine transformation matrix, i.e. has a bottom row of [0, 0, 0, 1] (up to rounding error)'''
    matrix = np.asarray(matrix)
    return (matrix.shape == (4, 4)) and bool(np.allclose(matrix[-1], AFFINE_ROW, rtol=0.0, atol=AFFINE_ROW_TOLERANCE))

def validate_affine_matrix(matrix : np.ndarray, dtype : DTypeLike=None) -> AffineMatrix4x4:
    '''
    Check that a matrix is a 4x4 affine transformation matrix, raising NonAffineMatrixError if not

    Returns a copy (in the requested dtype, if given) whose bottom row is set to exactly
    [0, 0, 0, 1], so that rounding error there does not accumulate over compositions
    '''
    matrix = np.array(matrix, dtype=dtype) # always copies, so the caller's matrix is never altered
    if matrix.shape != (4, 4):
        raise NonAffineMatrixError(f'Affine transformation of 3D space requires a 4x4 matrix, not one of shape {matrix.shape}')

    if not np.allclose(matrix[-1], AFFINE_ROW, rtol=0.0, atol=AFFINE_ROW_TOLERANCE):
        raise NonAffineMatrixError(f'Bottom row of an affine matrix must be {list(AFFINE_ROW)}, not {matrix[-1].tolist()} (projective transformations are not supported)')
    matrix[-1] = AFFINE_ROW

    return matrix

def validate_float_dtype(dtype : DTypeLike) -> np.dtype:
    '''Normalize a dtype specifier, raising TypeError if it is not a floating-point type'''
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f'Transformation matrices must have a floating-point dtype, not "{dtype}"')
    return dtype

def affine_matrix_from_linear_and_center(
        matrix : np.ndarray[Shape[Dims, Dims], Numeric],
        center : np.ndarray[Shape[Dims], Numeric]=None,
        dtype : DTypeLike=None,
    ) -> np.ndarray[Shape[DimsPlus, DimsPlus], Numeric]:
        '''
        Instantiate an affine transformation matrix from a linear transformation and a new origin location

        Parameters
        ----------
        matrix : Array[[D, D], Numeric]
            A D-dimensional linear transformation matrix
        center : Array[[D,], Numeric]
            A D-dimensional vector representing the new origin location
            If None, the origin is left in place
        dtype : type
            The data type of the output matrix
            If None, will be the same as the input matrix

        Returns
        -------
        Array[[D + 1, D + 1], Numeric]
            The corresponding [D + 1] dimensional affine transformation matrix
        '''
        matrix = np.asarray(matrix)
        (n_rows, n_cols) = matrix.shape
        if n_rows != n_cols:
            raise NonAffineMatrixError(f'Linear part of an affine transformation must be square, not of shape {matrix.shape}')
        dimension = n_cols

        if dtype is None:
            dtype = matrix.dtype

        affine_matrix = np.zeros((dimension + 1, dimension + 1), dtype=dtype)
        affine_matrix[:-1, :-1] = matrix
        if center is not None:
            affine_matrix[:-1, -1] = center
        affine_matrix[-1, -1] = 1

        return affine_matrix

# CONSTRUCTION OF ELEMENTARY MATRICES
def identity(dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''The affine matrix which leaves every point where it is'''
    return np.eye(4, dtype=dtype)

def translation(dx : float=0.0, dy : float=0.0, dz : float=0.0, dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''
    Generates an affine matrix which shifts every point by (dx, dy, dz)

    Parameters
    ----------
    dx : float, default 0.0
        The displacement along the x-axis
    dy : float, default 0.0
        The displacement along the y-axis
    dz : float, default 0.0
        The displacement along the z-axis
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    translation_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the translation
        With no arguments, returns the Identity matrix
    '''
    return np.array([
        [1, 0, 0, dx],
        [0, 1, 0, dy],
        [0, 0, 1, dz],
        [0, 0, 0,  1],
    ], dtype=dtype)

def scaling(sx : float=1.0, sy : float=1.0, sz : float=1.0, dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''
    Generates an affine matrix which scales the basis by factors
    of (sx, sy, sz) along the x, y, and z axes, respectively

    Parameters
    ----------
    sx : float, default 1.0
        The scaling factor in the x-direction
    sy : float, default 1.0
        The scaling factor in the y-direction
    sz : float, default 1.0
        The scaling factor in the z-direction
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    scaling_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the scaling
        With no arguments, returns the Identity matrix
    '''
    return np.array([
        [sx,  0,  0, 0],
        [ 0, sy,  0, 0],
        [ 0,  0, sz, 0],
        [ 0,  0,  0, 1],
    ], dtype=dtype)

def shearing(
        hxy : float=0.0,
        hxz : float=0.0,
        hyx : float=0.0,
        hyz : float=0.0,
        hzx : float=0.0,
        hzy : float=0.0,
        dtype : DTypeLike='float64',
    ) -> AffineMatrix4x4:
    '''
    Generates an affine matrix which shears space, with "hij" giving
    how much the i-coordinate of a point grows per unit of its j-coordinate

    Parameters
    ----------
    hxy, hxz : float, default 0.0
        Shear of the x-coordinate along y and along z
    hyx, hyz : float, default 0.0
        Shear of the y-coordinate along x and along z
    hzx, hzy : float, default 0.0
        Shear of the z-coordinate along x and along y
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    shear_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the shear
        With no arguments, returns the Identity matrix
    '''
    return np.array([
        [  1, hxy, hxz, 0],
        [hyx,   1, hyz, 0],
        [hzx, hzy,   1, 0],
        [  0,   0,   0, 1],
    ], dtype=dtype)

def _sin_and_cos(angle : Any, degrees : bool, dtype : DTypeLike) -> tuple[Any, Any]:
    '''Sine and cosine of an angle, evaluated at the precision of the target dtype'''
    if not isinstance(angle, Quantity):
        angle = np.asarray(angle, dtype=dtype) # promote before any degree conversion, so extended precision is kept
    angle_rad = np.asarray(angle_in_radians(angle, degrees=degrees), dtype=dtype)
    return np.sin(angle_rad), np.cos(angle_rad)

def rotation_x(angle : Any=0.0, degrees : bool=False, dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''
    Generates an affine matrix which rotates counterclockwise about the positive x-axis

    Parameters
    ----------
    angle : float or Quantity, default 0.0
        The angle of rotation about the x-axis
        Plain numbers are in radians unless "degrees" is set; Quantities carry their own angular unit
    degrees : bool, default False
        Whether plain-number angles are given in degrees rather than radians
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    rotation_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the rotation
        With no arguments, returns the Identity matrix
    '''
    s, c = _sin_and_cos(angle, degrees=degrees, dtype=dtype)

    return np.array([
        [1, 0,  0, 0],
        [0, c, -s, 0],
        [0, s,  c, 0],
        [0, 0,  0, 1],
    ], dtype=dtype)

def rotation_y(angle : Any=0.0, degrees : bool=False, dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''
    Generates an affine matrix which rotates counterclockwise about the positive y-axis

    Parameters
    ----------
    angle : float or Quantity, default 0.0
        The angle of rotation about the y-axis
        Plain numbers are in radians unless "degrees" is set; Quantities carry their own angular unit
    degrees : bool, default False
        Whether plain-number angles are given in degrees rather than radians
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    rotation_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the rotation
        With no arguments, returns the Identity matrix
    '''
    s, c = _sin_and_cos(angle, degrees=degrees, dtype=dtype)

    return np.array([
        [ c, 0, s, 0],
        [ 0, 1, 0, 0],
        [-s, 0, c, 0],
        [ 0, 0, 0, 1],
    ], dtype=dtype)

def rotation_z(angle : Any=0.0, degrees : bool=False, dtype : DTypeLike='float64') -> AffineMatrix4x4:
    '''
    Generates an affine matrix which rotates counterclockwise about the positive z-axis

    Parameters
    ----------
    angle : float or Quantity, default 0.0
        The angle of rotation about the z-axis
        Plain numbers are in radians unless "degrees" is set; Quantities carry their own angular unit
    degrees : bool, default False
        Whether plain-number angles are given in degrees rather than radians
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    rotation_matrix : Array[[4, 4], float]
        The affine transformation matrix representing the rotation
        With no arguments, returns the Identity matrix
    '''
    s, c = _sin_and_cos(angle, degrees=degrees, dtype=dtype)

    return np.array([
        [c, -s, 0, 0],
        [s,  c, 0, 0],
        [0,  0, 1, 0],
        [0,  0, 0, 1],
    ], dtype=dtype)
