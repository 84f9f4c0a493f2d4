'''Unit tests for applying affine transformations throughout containers of points'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np

from astrocoord.representations import CartesianRepresentation, SphericalRepresentation
from astrocoord.transforms.affine import AffineTransformation, apply_affine_transformation_recursive


SHIFT = AffineTransformation().translate(1.0, 0.0, 0.0)

def test_recursive_single_point() -> None:
    '''Test that a bare point is transformed just as by apply()'''
    point = CartesianRepresentation(1.0, 2.0, 3.0)
    assert apply_affine_transformation_recursive(point, SHIFT) == SHIFT.apply(point)

def test_recursive_preserves_container_types() -> None:
    '''Test that nested lists, tuples, and dicts are rebuilt around their transformed points'''
    points = {
        'pair' : (CartesianRepresentation(0.0, 0.0, 0.0), CartesianRepresentation(0.0, 1.0, 0.0)),
        'list' : [SphericalRepresentation(azimuth=0.0, polar=0.0, distance=1.0)],
    }
    transformed = apply_affine_transformation_recursive(points, SHIFT)

    assert isinstance(transformed, dict) and isinstance(transformed['pair'], tuple) and isinstance(transformed['list'], list)
    assert np.allclose(transformed['pair'][0].as_vector(), (1.0, 0.0, 0.0))
    assert np.allclose(transformed['pair'][1].as_vector(), (1.0, 1.0, 0.0))
    assert np.allclose(transformed['list'][0].to_cartesian().as_vector(), (1.0, 0.0, 1.0))

def test_recursive_passes_over_non_points() -> None:
    '''Test that members which are not points are returned untouched'''
    labels = ['origin', 42, None]
    assert apply_affine_transformation_recursive(labels, SHIFT) == labels
