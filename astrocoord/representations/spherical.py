'''Points represented by a radial distance and a pair of angles, under either the polar or the equatorial convention'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Self

import numpy as np

from .cartesian import CartesianRepresentation
from ..aunits import DIMENSIONLESS, RADIAN, Quantity, as_angle, as_quantity, ureg


FULL_TURN : float = 2 * np.pi
ANGLE_TOLERANCE : float = 1e-12 # slack on angular bounds, to absorb rounding from unit conversions

def wrapped_azimuth(angle_rad : float) -> float:
    '''Map an angle in radians onto the interval [0, 2pi)'''
    wrapped = np.mod(angle_rad, FULL_TURN)
    if wrapped >= FULL_TURN: # tiny negative inputs can round up to exactly one full turn
        wrapped = 0.0
    return wrapped

def cartesian_to_polar(cartesian : CartesianRepresentation) -> tuple[Quantity, float, float]:
    '''
    Decompose a Cartesian point into its radial distance (in the unit of the x-component),
    its azimuthal angle in [0, 2pi) and its polar angle from the +z axis in [0, pi], both in radians

    The origin is assigned both angles as zero
    '''
    (x, y, z) = vector = cartesian.as_vector()
    distance = np.linalg.norm(vector)
    if distance == 0.0:
        return ureg.Quantity(distance, cartesian.x.units), 0.0, 0.0

    azimuth = wrapped_azimuth(np.arctan2(y, x))
    polar = np.arccos(np.clip(z / distance, -1.0, 1.0)) # clip out rounding error which would otherwise produce NaN

    return ureg.Quantity(distance, cartesian.x.units), azimuth, polar

def polar_to_cartesian(distance : Quantity, azimuth_rad : float, polar_rad : float) -> CartesianRepresentation:
    '''Build a Cartesian point from a radial distance and azimuthal and polar angles in radians; all axes share the unit of the distance'''
    r = distance.magnitude
    return CartesianRepresentation.from_vector(
        np.array([
            r * np.sin(polar_rad) * np.cos(azimuth_rad),
            r * np.sin(polar_rad) * np.sin(azimuth_rad),
            r * np.cos(polar_rad),
        ]),
        unit=distance.units,
    )

def _as_distance(value : Any) -> Quantity:
    distance = as_quantity(value, DIMENSIONLESS)
    if distance.magnitude < 0:
        raise ValueError(f'Radial distance must be non-negative, not {distance}')
    return distance

def _as_bounded_angle(value : Any, lower_rad : float, upper_rad : float, name : str) -> Quantity:
    angle = as_angle(value)
    if not (lower_rad - ANGLE_TOLERANCE <= angle.m_as(RADIAN) <= upper_rad + ANGLE_TOLERANCE):
        raise ValueError(f'{name} must lie in the interval [{lower_rad}, {upper_rad}] radians, not {angle}')
    return angle


class SphericalRepresentation:
    '''
    A point in 3D space given by its radial distance from the origin, its azimuthal
    angle in the x-y plane (measured from the +x axis towards +y) and its polar angle
    (measured down from the +z axis)

    Plain numbers are taken to be in radians for angles and dimensionless for distance;
    the polar angle must lie in [0, pi] and the distance must be non-negative
    '''
    def __init__(self, azimuth : Any=0.0, polar : Any=0.0, distance : Any=0.0) -> None:
        self.azimuth = azimuth
        self.polar = polar
        self.distance = distance

    @property
    def azimuth(self) -> Quantity:
        return self._azimuth

    @azimuth.setter
    def azimuth(self, value : Any) -> None:
        self._azimuth = as_angle(value)

    @property
    def polar(self) -> Quantity:
        return self._polar

    @polar.setter
    def polar(self, value : Any) -> None:
        self._polar = _as_bounded_angle(value, 0.0, np.pi, name='Polar angle')

    @property
    def distance(self) -> Quantity:
        return self._distance

    @distance.setter
    def distance(self, value : Any) -> None:
        self._distance = _as_distance(value)

    @property
    def magnitudes(self) -> tuple[float, float, float]:
        return (self.azimuth.magnitude, self.polar.magnitude, self.distance.magnitude)

    # conversions
    def copy(self) -> Self:
        return self.__class__(azimuth=self.azimuth, polar=self.polar, distance=self.distance)

    def to_cartesian(self) -> CartesianRepresentation:
        return polar_to_cartesian(self.distance, self.azimuth.m_as(RADIAN), self.polar.m_as(RADIAN))

    def from_cartesian_like(self, cartesian : CartesianRepresentation) -> Self:
        distance, azimuth, polar = cartesian_to_polar(cartesian)
        return self.__class__(
            azimuth=ureg.Quantity(azimuth, RADIAN).to(self.azimuth.units),
            polar=ureg.Quantity(polar, RADIAN).to(self.polar.units),
            distance=distance.to(self.distance.units),
        )

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SphericalRepresentation):
            return NotImplemented
        return (self.azimuth == other.azimuth) and (self.polar == other.polar) and (self.distance == other.distance)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(azimuth={self.azimuth!r}, polar={self.polar!r}, distance={self.distance!r})'


class SphericalEquatorialRepresentation:
    '''
    A point in 3D space given by its radial distance from the origin, its longitude
    in the x-y plane (measured from the +x axis towards +y) and its latitude
    (measured up from the x-y plane towards +z)

    Plain numbers are taken to be in radians for angles and dimensionless for distance;
    the latitude must lie in [-pi/2, pi/2] and the distance must be non-negative
    '''
    def __init__(self, lon : Any=0.0, lat : Any=0.0, distance : Any=0.0) -> None:
        self.lon = lon
        self.lat = lat
        self.distance = distance

    @property
    def lon(self) -> Quantity:
        return self._lon

    @lon.setter
    def lon(self, value : Any) -> None:
        self._lon = as_angle(value)

    @property
    def lat(self) -> Quantity:
        return self._lat

    @lat.setter
    def lat(self, value : Any) -> None:
        self._lat = _as_bounded_angle(value, -np.pi / 2, np.pi / 2, name='Latitude')

    @property
    def distance(self) -> Quantity:
        return self._distance

    @distance.setter
    def distance(self, value : Any) -> None:
        self._distance = _as_distance(value)

    @property
    def magnitudes(self) -> tuple[float, float, float]:
        return (self.lon.magnitude, self.lat.magnitude, self.distance.magnitude)

    # conversions
    def copy(self) -> Self:
        return self.__class__(lon=self.lon, lat=self.lat, distance=self.distance)

    def to_cartesian(self) -> CartesianRepresentation:
        return polar_to_cartesian(self.distance, self.lon.m_as(RADIAN), np.pi / 2 - self.lat.m_as(RADIAN))

    def from_cartesian_like(self, cartesian : CartesianRepresentation) -> Self:
        distance, lon, polar = cartesian_to_polar(cartesian)
        lat = np.clip(np.pi / 2 - polar, -np.pi / 2, np.pi / 2)

        return self.__class__(
            lon=ureg.Quantity(lon, RADIAN).to(self.lon.units),
            lat=ureg.Quantity(lat, RADIAN).to(self.lat.units),
            distance=distance.to(self.distance.units),
        )

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SphericalEquatorialRepresentation):
            return NotImplemented
        return (self.lon == other.lon) and (self.lat == other.lat) and (self.distance == other.distance)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(lon={self.lon!r}, lat={self.lat!r}, distance={self.distance!r})'
