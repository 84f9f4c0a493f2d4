'''Subpackage for determining how units and quantities are implemented internally'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

# all unit-tagged values pass through pint, via the application-wide registry;
# quantities built from any other registry will refuse to combine with these
from typing import Any, Union

import numpy as np
import pint
from pint import DimensionalityError, Quantity, Unit

ureg = pint.get_application_registry()

RADIAN = ureg.radian
DEGREE = ureg.degree
DIMENSIONLESS = ureg.dimensionless

UnitLike = Union[str, Unit]


def as_quantity(value : Any, default_unit : UnitLike) -> Quantity:
    '''Tag a plain number with a default unit; values which are already Quantities are passed through unchanged'''
    if isinstance(value, Quantity):
        return value
    return ureg.Quantity(value, default_unit)

def as_angle(value : Any) -> Quantity:
    '''Interpret a value as an angle, with plain numbers taken to be in radians'''
    angle = as_quantity(value, RADIAN)
    if not angle.dimensionless: # angular units are dimensionless in pint
        raise DimensionalityError(angle.units, RADIAN, extra_msg=' (angles must have angular units)')
    return angle

def angle_in_radians(value : Any, degrees : bool=False) -> float:
    '''
    Numeric value of an angle in radians
    Quantities are converted from whatever angular unit they carry;
    plain numbers are taken as radians, or as degrees if "degrees" is set
    '''
    if isinstance(value, Quantity):
        return as_angle(value).m_as(RADIAN)
    return np.deg2rad(value) if degrees else value
