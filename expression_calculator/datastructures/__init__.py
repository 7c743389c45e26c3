"""Containers used by the engine: the bindings dictionary and the sample sequence."""

from .array_dictionary import ArrayDictionary
from .growable_array import GrowableArray

__all__ = ['ArrayDictionary', 'GrowableArray']
