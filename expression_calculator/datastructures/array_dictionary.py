from collections.abc import MutableMapping
from typing import Any, Hashable, Iterator, List, Optional

from ..errors import NoSuchKey


class _Pair:
  __slots__ = ('key', 'value')

  def __init__(self, key: Hashable, value: Any):
    self.key = key
    self.value = value

  def __repr__(self) -> str:
    return f"{self.key!r}={self.value!r}"


class ArrayDictionary(MutableMapping):
  """Array-backed dictionary with linear key lookup and insertion-ordered entries.

  Live pairs always occupy the prefix ``pairs[:size]``. The backing array doubles when
  a new key arrives and it is full; removing a key shifts the tail left by one slot, so
  the relative order of the remaining entries is kept and the freed slot is reused by
  the next insertion.
  """

  __slots__ = ('_pairs', '_size')

  def __init__(self, initial_capacity: int = 1, **entries):
    if initial_capacity < 1:
      raise ValueError("initial_capacity must be at least 1")
    self._pairs: List[Optional[_Pair]] = [None] * initial_capacity
    self._size = 0
    for key, value in entries.items():
      self.put(key, value)

  @property
  def capacity(self) -> int:
    return len(self._pairs)

  def _index_of(self, key: Hashable) -> int:
    for i in range(self._size):
      if self._pairs[i].key == key:
        return i
    return -1

  def get(self, key: Hashable, *default):
    """Return the value stored under ``key``.

    Raises NoSuchKey when the key is absent, unless a default is supplied, in which
    case the default is returned (``dict.get`` behaviour).
    """
    index = self._index_of(key)
    if index == -1:
      if default:
        return default[0]
      raise NoSuchKey(key)
    return self._pairs[index].value

  def put(self, key: Hashable, value: Any) -> None:
    index = self._index_of(key)
    if index != -1:
      self._pairs[index].value = value
      return

    if self._size == len(self._pairs):
      self._pairs.extend([None] * len(self._pairs))
    self._pairs[self._size] = _Pair(key, value)
    self._size += 1

  def remove(self, key: Hashable) -> Any:
    index = self._index_of(key)
    if index == -1:
      raise NoSuchKey(key)

    value = self._pairs[index].value
    for i in range(index, self._size - 1):
      self._pairs[i] = self._pairs[i + 1]
    self._pairs[self._size - 1] = None
    self._size -= 1
    return value

  def contains_key(self, key: Hashable) -> bool:
    return self._index_of(key) != -1

  def size(self) -> int:
    return self._size

  # MutableMapping protocol

  def __getitem__(self, key: Hashable) -> Any:
    return self.get(key)

  def __setitem__(self, key: Hashable, value: Any) -> None:
    self.put(key, value)

  def __delitem__(self, key: Hashable) -> None:
    self.remove(key)

  def __contains__(self, key) -> bool:
    return self.contains_key(key)

  def __iter__(self) -> Iterator[Hashable]:
    for i in range(self._size):
      yield self._pairs[i].key

  def __len__(self) -> int:
    return self._size

  def __repr__(self) -> str:
    entries = ", ".join(repr(self._pairs[i]) for i in range(self._size))
    return f"ArrayDictionary({entries})"
