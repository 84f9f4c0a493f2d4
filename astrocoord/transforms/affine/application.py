'''Utilities for applying affine transformations to collections of points, rather than just single points'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Mapping, Sequence, Union

from .transformation import AffineTransformation
from ...representations.base import CartesianConvertible


def apply_affine_transformation_recursive(
        obj : Union[object, Sequence[Any], Mapping[str, Any]],
        transformation : AffineTransformation,
    ) -> Union[object, Sequence[Any], dict[str, Any]]:
    '''Apply an affine transformation to an object, if it is a point which supports such a transformation,
    and, if the object is a Sequence or Mapping, attempt to transform its members recursively
    
    Parameters
    ----------
    obj : Any
        The object to be transformed, which may be a single point, a Sequence, or a Mapping
    transformation : AffineTransformation
        The affine transformation to apply to each point found
        
    Returns
    -------
    Any
        A copy of the object with every point found replaced by its transformed counterpart
        Objects which are neither points nor containers are returned as-is
    '''
    if isinstance(obj, CartesianConvertible):
        return transformation.apply(obj)

    # recursive iteration, as necessary
    if isinstance(obj, str): # DEVNOTE: strings are Sequences of strings, and would recurse forever
        return obj
    elif isinstance(obj, Sequence):  # DEVNOTE: specifically opted for Sequence over Iterable here to avoid double-covering Mappings and unpacking generators
        return type(obj)( # DEVNOTE: most common Sequence types (e.g. tuple, list) support init from comprehension; may revisit if this is not always the case
            apply_affine_transformation_recursive(value, transformation)
                for value in obj
        ) 
    elif isinstance(obj, Mapping):
        return {
            key : apply_affine_transformation_recursive(value, transformation)
                for (key, value) in obj.items()
        }
        
    return obj
