'''Affine transformations of points in 3D space, across Cartesian, spherical, and spherical-equatorial representations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .aunits import ureg
from .representations import (
    CartesianConvertible,
    CartesianRepresentation,
    SphericalRepresentation,
    SphericalEquatorialRepresentation,
)
from .transforms.affine import (
    AffineTransformation,
    NonAffineMatrixError,
    apply_affine_transformation_recursive,
)
