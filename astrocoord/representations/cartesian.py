'''Points represented by their unit-tagged projections onto the x, y, and z axes'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Optional, Self

import numpy as np

from ..aunits import DIMENSIONLESS, DimensionalityError, Quantity, UnitLike, as_quantity, ureg
from ..arraytypes import Vector3


class CartesianRepresentation:
    '''
    A point in 3D space given by its x, y, and z components

    Each axis keeps whatever unit it was given, but all three must share a
    dimensionality (i.e. must be convertible to one another); plain numbers
    are taken to be dimensionless
    '''
    AXES : tuple[str, ...] = ('x', 'y', 'z')

    def __init__(self, x : Any=0.0, y : Any=0.0, z : Any=0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def _set_axis(self, axis : str, value : Any) -> None:
        '''Tag a component with units, and check it agrees dimensionally with the other components already set'''
        component = as_quantity(value, DIMENSIONLESS)
        for other_axis in self.AXES:
            if other_axis == axis:
                continue

            other_component : Optional[Quantity] = getattr(self, f'_{other_axis}', None)
            if (other_component is not None) and (other_component.dimensionality != component.dimensionality):
                raise DimensionalityError(
                    component.units,
                    other_component.units,
                    extra_msg=f' (the {axis}- and {other_axis}-components of a Cartesian point must be mutually convertible)',
                )
        setattr(self, f'_{axis}', component)

    # component access
    @property
    def x(self) -> Quantity:
        '''The x-component of the point'''
        return self._x

    @x.setter
    def x(self, value : Any) -> None:
        self._set_axis('x', value)

    @property
    def y(self) -> Quantity:
        '''The y-component of the point'''
        return self._y

    @y.setter
    def y(self, value : Any) -> None:
        self._set_axis('y', value)

    @property
    def z(self) -> Quantity:
        '''The z-component of the point'''
        return self._z

    @z.setter
    def z(self, value : Any) -> None:
        self._set_axis('z', value)

    @property
    def components(self) -> tuple[Quantity, Quantity, Quantity]:
        return (self.x, self.y, self.z)

    @property
    def magnitudes(self) -> tuple[float, float, float]:
        '''Numeric value of each component, each in its own unit'''
        return tuple(component.magnitude for component in self.components)

    @property
    def units(self) -> tuple[Any, Any, Any]:
        return tuple(component.units for component in self.components)

    def as_vector(self, unit : Optional[UnitLike]=None) -> Vector3:
        '''
        The components of the point as an array, all expressed in a single unit
        If no unit is given, the unit of the x-component is used
        '''
        if unit is None:
            unit = self.x.units
        return np.array([component.m_as(unit) for component in self.components])

    @classmethod
    def from_vector(cls, vector : Vector3, unit : UnitLike=DIMENSIONLESS) -> Self:
        '''Build a point from an array of 3 components which all share one unit'''
        (x, y, z) = vector # implicitly enforce 3-component vector
        return cls(
            x=ureg.Quantity(x, unit),
            y=ureg.Quantity(y, unit),
            z=ureg.Quantity(z, unit),
        )

    # conversions
    def copy(self) -> Self:
        return self.__class__(x=self.x, y=self.y, z=self.z) # Quantities are never mutated in-place here, so sharing them is safe

    def to_cartesian(self) -> 'CartesianRepresentation':
        return self.copy()

    def from_cartesian_like(self, cartesian : 'CartesianRepresentation') -> Self:
        return self.__class__(
            x=cartesian.x.to(self.x.units),
            y=cartesian.y.to(self.y.units),
            z=cartesian.z.to(self.z.units),
        )

    # comparison and display
    def __eq__(self, other : object) -> bool:
        if not isinstance(other, CartesianRepresentation):
            return NotImplemented
        return all(
            component == other_component
                for (component, other_component) in zip(self.components, other.components)
        )

    def isclose(self, other : 'CartesianRepresentation', rtol : float=1e-05, atol : float=1e-08) -> bool:
        '''Whether two points coincide within floating-point tolerance, after accounting for units'''
        return np.allclose(
            self.as_vector(),
            other.as_vector(self.x.units),
            rtol=rtol,
            atol=atol,
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(x={self.x!r}, y={self.y!r}, z={self.z!r})'
