'''
Representations of points in 3D space, each of which can be converted to and from Cartesian form
(and can therefore have affine transformations applied to them)
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .base import CartesianConvertible
from .cartesian import CartesianRepresentation
from .spherical import (
    SphericalRepresentation,
    SphericalEquatorialRepresentation,
    cartesian_to_polar,
    polar_to_cartesian,
)
