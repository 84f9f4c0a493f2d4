'''Interface through which points in any coordinate representation can be transformed'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from .cartesian import CartesianRepresentation


@runtime_checkable
class CartesianConvertible(Protocol):
    '''
    Interface for points which can be expressed in, and rebuilt from, Cartesian form
    
    This is the full set of capabilities needed to push a point through an
    affine transformation, whatever representation the point is stored in
    '''
    def to_cartesian(self) -> 'CartesianRepresentation':
        '''The Cartesian form of this point, with each axis carrying its own unit'''
        ...
        
    def from_cartesian_like(self, cartesian : 'CartesianRepresentation') -> Self:
        '''
        Rebuild a Cartesian point in the same representation as this one,
        in the same units as this one; this point is left unchanged
        '''
        ...
