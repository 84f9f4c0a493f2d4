'''Unit tests for copyability protocols'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest

from astrocoord.autils.copyable import Copyable, NotCopyableError, copy_of
from astrocoord.representations import CartesianRepresentation


def test_copy_of_copyable() -> None:
    '''Test that copying an object which knows how to copy itself yields an equal but distinct object'''
    point = CartesianRepresentation(1.0, 2.0, 3.0)
    clone = copy_of(point)
    assert isinstance(point, Copyable) and (clone == point) and (clone is not point)

def test_copy_of_not_copyable() -> None:
    '''Test that requesting a copy of an object with no copy() method raises a clear error'''
    with pytest.raises(NotCopyableError):
        _ = copy_of(object())
