'''Accumulation of elementary affine transformations into a single matrix, and application of it to points in any representation'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Any, Self, TypeVar

import numpy as np
from scipy.spatial.transform import Rotation

from .homogeneous import to_homogeneous_coords, from_homogeneous_coords
from .matrices import (
    AffineMatrix4x4,
    DTypeLike,
    affine_matrix_from_linear_and_center,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    validate_affine_matrix,
    validate_float_dtype,
)
from ...aunits import ureg
from ...autils.copyable import copy_of
from ...representations.base import CartesianConvertible

DEFAULT_DTYPE : np.dtype = np.dtype(np.float64)
PointT = TypeVar('PointT', bound=CartesianConvertible)


class AffineTransformation:
    '''
    A running affine transformation of 3D space, built up one elementary
    operation (scaling, shear, rotation, translation) at a time

    Each new operation is multiplied onto the RIGHT of the accumulated matrix,
    i.e. M <- M @ E. Since points are column vectors multiplied on the right of M,
    the most recently added operation is the first to act on a point, e.g.
        AffineTransformation().translate(5, 0, 0).scale(2, 2, 2)
    takes (1, 0, 0) first to (2, 0, 0) and then to (7, 0, 0)

    Parameters
    ----------
    dtype : type, default numpy.float64
        The floating-point type of the matrix; pass numpy.longdouble
        to reduce rounding error accumulated over many compositions
    '''
    def __init__(self, dtype : DTypeLike=DEFAULT_DTYPE) -> None:
        self._dtype = validate_float_dtype(dtype)
        self._matrix = identity(dtype=self._dtype)

    @property
    def dtype(self) -> np.dtype:
        '''The floating-point type of the transformation matrix'''
        return self._dtype

    @property
    def matrix(self) -> AffineMatrix4x4:
        '''A copy of the accumulated 4x4 transformation matrix'''
        return self._matrix.copy()

    @classmethod
    def from_matrix(cls, matrix : AffineMatrix4x4, dtype : DTypeLike=DEFAULT_DTYPE) -> Self:
        '''Initialize a transformation from an existing 4x4 affine matrix'''
        transformation = cls(dtype=dtype)
        return transformation.compose(matrix)

    def copy(self) -> Self:
        clone = self.__class__(dtype=self._dtype)
        clone._matrix = self._matrix.copy()

        return clone

    # composition
    def compose(self, matrix : AffineMatrix4x4) -> Self:
        '''
        Multiply an affine matrix onto the right of the accumulated transformation matrix

        Raises NonAffineMatrixError if the matrix is not 4x4 or its bottom row is not [0, 0, 0, 1];
        a bottom row within rounding error of [0, 0, 0, 1] is accepted and set to it exactly
        Returns this transformation, so that compositions can be chained
        '''
        matrix = validate_affine_matrix(matrix, dtype=self._dtype)
        self._matrix = self._matrix @ matrix
        LOGGER.debug(f'Composed affine matrix into transformation; accumulated matrix is now:\n{self._matrix}')

        return self

    def scale(self, sx : float, sy : float, sz : float) -> Self:
        '''Compose a scaling by factors of (sx, sy, sz) along the x, y, and z axes'''
        return self.compose(scaling(sx, sy, sz, dtype=self._dtype))

    def shear(self, hxy : float, hxz : float, hyx : float, hyz : float, hzx : float, hzy : float) -> Self:
        '''Compose a shear; "hij" is how much the i-coordinate of a point grows per unit of its j-coordinate'''
        return self.compose(shearing(hxy, hxz, hyx, hyz, hzx, hzy, dtype=self._dtype))

    def rotate_x(self, angle : Any, degrees : bool=False) -> Self:
        '''
        Compose a counterclockwise rotation about the x-axis
        Plain-number angles are in radians unless "degrees" is set; pint Quantities carry their own angular unit
        '''
        return self.compose(rotation_x(angle, degrees=degrees, dtype=self._dtype))

    def rotate_y(self, angle : Any, degrees : bool=False) -> Self:
        '''
        Compose a counterclockwise rotation about the y-axis
        Plain-number angles are in radians unless "degrees" is set; pint Quantities carry their own angular unit
        '''
        return self.compose(rotation_y(angle, degrees=degrees, dtype=self._dtype))

    def rotate_z(self, angle : Any, degrees : bool=False) -> Self:
        '''
        Compose a counterclockwise rotation about the z-axis
        Plain-number angles are in radians unless "degrees" is set; pint Quantities carry their own angular unit
        '''
        return self.compose(rotation_z(angle, degrees=degrees, dtype=self._dtype))

    def rotate(self, rotation : Rotation) -> Self:
        '''Compose an arbitrary rotation about the origin'''
        return self.compose(affine_matrix_from_linear_and_center(rotation.as_matrix(), dtype=self._dtype))

    def translate(self, dx : float, dy : float, dz : float) -> Self:
        '''Compose a translation by (dx, dy, dz)'''
        return self.compose(translation(dx, dy, dz, dtype=self._dtype))

    # application
    def apply(self, point : PointT) -> PointT:
        '''
        Transform a point in any representation which can be expressed in Cartesian form

        The point is converted to Cartesian form and the accumulated matrix applied to
        its homogeneous coordinates; the result is returned in the same representation
        and units as the original point, which is itself left unchanged.
        Errors raised by the point's representation propagate as-is
        '''
        cartesian = copy_of(point.to_cartesian()) # working copy, so no point handed to us is mutated
        common_unit = cartesian.x.units # mixed (but convertible) axis units are brought together before transforming
        homogeneous = to_homogeneous_coords(cartesian.as_vector(common_unit), projection=1.0, dtype=self._dtype)
        (x, y, z) = from_homogeneous_coords(self._matrix @ homogeneous, normalize=False)

        cartesian.x = ureg.Quantity(x, common_unit).to(cartesian.x.units) # return each axis to the unit it had going in
        cartesian.y = ureg.Quantity(y, common_unit).to(cartesian.y.units)
        cartesian.z = ureg.Quantity(z, common_unit).to(cartesian.z.units)
        LOGGER.debug(f'Transformed {point!r} to Cartesian point {cartesian!r}')

        return point.from_cartesian_like(cartesian)
    __call__ = apply

    # display
    def __str__(self) -> str:
        return '\n'.join(
            ' '.join(str(value) for value in row)
                for row in self._matrix
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(dtype={self._dtype}, matrix={self._matrix.tolist()})'

    def display(self) -> None:
        '''Print the accumulated matrix, one row per line with space-separated values'''
        print(str(self))
