'''Typehints specific to numpy and other array-related functionality'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Annotated, TypeVar

import numpy as np
import numpy.typing as npt
from numbers import Number


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

Dims = TypeVar('Dims', bound=int) # intended to typehint the number of dimensions
DimsPlus = TypeVar('DimsPlus', bound=int) # intended to typehint the number of dimensions +1 (no easy way to do arithmetic to generic types yet)
N = TypeVar('N', bound=int) # typehint the size of a given dimension

# Fixed-size vector annotations
## DEV: this type of hard-coding sucks, but is the best we can do with the current Python type system
Vector3 = Annotated[npt.NDArray[DType], Shape[3]]
