import numpy as np
from typing import Iterable, Iterator


class GrowableArray:
  """Append-friendly float64 sequence backed by a numpy buffer with amortized doubling"""

  __slots__ = ('_buffer', '_size')

  def __init__(self, values: Iterable[float] = (), initial_capacity: int = 16):
    self._buffer = np.empty(max(1, initial_capacity), dtype=np.float64)
    self._size = 0
    for value in values:
      self.append(value)

  @property
  def capacity(self) -> int:
    return self._buffer.shape[0]

  def append(self, value: float):
    if self._size == self._buffer.shape[0]:
      grown = np.empty(self._buffer.shape[0] * 2, dtype=np.float64)
      grown[:self._size] = self._buffer[:self._size]
      self._buffer = grown
    self._buffer[self._size] = value
    self._size += 1

  def _check_index(self, index: int) -> int:
    if index < 0:
      index += self._size
    if not 0 <= index < self._size:
      raise IndexError(f"index {index} out of range for sequence of length {self._size}")
    return index

  def __getitem__(self, index: int) -> float:
    return float(self._buffer[self._check_index(index)])

  def __setitem__(self, index: int, value: float):
    self._buffer[self._check_index(index)] = value

  def __len__(self) -> int:
    return self._size

  def __iter__(self) -> Iterator[float]:
    for i in range(self._size):
      yield float(self._buffer[i])

  def to_numpy(self) -> np.ndarray:
    """Read-only view of the live prefix"""
    view = self._buffer[:self._size]
    view.flags.writeable = False
    return view

  def __repr__(self) -> str:
    return f"GrowableArray({list(self)})"
