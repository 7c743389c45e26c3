from contextlib import contextmanager
from typing import Iterator, Optional

from .datastructures import ArrayDictionary
from .expression_tree import Node
from .sinks import RecordingSink, SamplingSink


class Environment:
    """Variable bindings plus the sink that plot sweeps are sent to.

    ``variables`` is the live container, not a copy: whatever the caller and the
    engine put there is visible to both.
    """

    __slots__ = ('_variables', '_sink')

    def __init__(self, variables: Optional[ArrayDictionary] = None,
                 sink: Optional[SamplingSink] = None):
        self._variables = variables if variables is not None else ArrayDictionary()
        self._sink = sink if sink is not None else RecordingSink()

    @property
    def variables(self) -> ArrayDictionary:
        return self._variables

    @property
    def sink(self) -> SamplingSink:
        return self._sink

    def bind(self, name: str, node: Node):
        self._variables.put(name, node)

    def unbind(self, name: str) -> Node:
        return self._variables.remove(name)

    def is_bound(self, name: str) -> bool:
        return self._variables.contains_key(name)

    @contextmanager
    def temporary_binding(self, name: str, node: Node) -> Iterator[None]:
        """Bind ``name`` for the duration of the block and remove it afterwards.

        The name must be unbound on entry; the binding is removed even when the block
        raises.
        """
        self._variables.put(name, node)
        try:
            yield
        finally:
            self._variables.remove(name)
