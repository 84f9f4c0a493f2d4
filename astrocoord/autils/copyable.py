'''Generic Protocols for copyable objects'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Protocol, Self, runtime_checkable


class NotCopyableError(TypeError):
    '''Raised when a copy is requested from an object which provides no means of copying itself'''
    pass

@runtime_checkable
class Copyable(Protocol):
    '''Any class which supports creating a copy of instances of the class'''
    def copy(self) -> Self:
        ...

def copy_of(obj : Any) -> Any:
    '''Return a copy of an object via its own copy() method, raising NotCopyableError if it has none'''
    if not isinstance(obj, Copyable):
        raise NotCopyableError(f'Class "{obj.__class__.__name__}" does not implement mechanism for copying objects')
    return obj.copy()
