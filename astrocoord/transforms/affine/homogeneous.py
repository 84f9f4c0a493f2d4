'''Lifting points into homogeneous coordinates (so translations can act by matrix product) and projecting them back down'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Optional, Union

import numpy as np
from ...arraytypes import Shape, N, Dims, DimsPlus, Numeric


def to_homogeneous_coords(
        positions : np.ndarray[Shape[N, Dims], Numeric],
        projection : float=1.0,
        dtype : Optional[Union[str, type]]=None,
    ) -> np.ndarray[Shape[N, DimsPlus], Numeric]:
    '''
    Append a projective component to every point in an array of points

    Parameters
    ----------
    positions : Array[[..., D], Numeric]
        A single D-dimensional point, or an array of them nested to any depth
    projection : float, default 1.0
        The value of the appended component; 1.0 places each point on the affine hyperplane
    dtype : type, optional
        The data type of the output array
        If None, will be the same as the input array

    Returns
    -------
    Array[[..., D + 1], Numeric]
        The points in [D + 1]-dimensional homogeneous coordinates
    '''
    positions = np.asarray(positions, dtype=dtype)
    pad_widths = np.zeros((positions.ndim, 2), dtype=int) # pad nowhere...
    pad_widths[-1, -1] = 1 # ...EXCEPT exactly one layer AFTER the final dimension (and 0 before)

    return np.pad(positions, pad_width=pad_widths, mode='constant', constant_values=projection)

def from_homogeneous_coords(positions : np.ndarray[Shape[N, DimsPlus], Numeric], normalize : bool=True) -> np.ndarray[Shape[N, Dims], Numeric]:
    '''Project an array of [D + 1]-dimensional homogeneous points back down to D dimensions
    By default this divides out by the projective component; with "normalize" unset, that component
    is simply dropped, which is exact for affine matrices (whose projective component stays 1) and keeps
    non-finite coordinates from poisoning the other axes via a NaN projective component'''
    positions = np.asarray(positions)
    if not normalize:
        return positions[..., :-1]
    return positions[..., :-1] / positions[..., -1, None] # strip off and normalize by the projective part (via broadcast)
