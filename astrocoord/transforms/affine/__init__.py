'''
Transformations from the affine group of 3D space (scaling, shear, rotation, and translation),
accumulated into a single matrix and applied to points in any supported representation,
as well as utilities for converting to and from homogeneous coordinates
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .matrices import (
    AffineMatrix4x4,
    NonAffineMatrixError,
    is_affine_matrix,
    affine_matrix_from_linear_and_center,
    identity,
    translation,
    scaling,
    shearing,
    rotation_x,
    rotation_y,
    rotation_z,
)
from .homogeneous import (
    to_homogeneous_coords,
    from_homogeneous_coords,
)
from .transformation import AffineTransformation
from .application import apply_affine_transformation_recursive
