"""Base scene-graph node with a process-wide unique id."""

from __future__ import annotations

import copy
import itertools
import threading
from typing import ClassVar, TypeVar

_N = TypeVar("_N", bound="Node")

_id_counter = itertools.count()
_id_lock = threading.Lock()


def _next_node_id() -> int:
    with _id_lock:
        return next(_id_counter)


class Node:
    """Named node; every instance, including clones, gets a fresh id."""

    default_name: ClassVar[str] = "Node"

    def __init__(self, name: str = "") -> None:
        self._global_node_id = _next_node_id()
        self.name = name or self.default_name

    @property
    def global_node_id(self) -> int:
        """Unique id assigned at creation."""
        return self._global_node_id

    def clone(self: _N) -> _N:
        """Return a deep copy of this node carrying a new unique id."""
        duplicate = copy.deepcopy(self)
        duplicate._global_node_id = _next_node_id()
        return duplicate

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._global_node_id < other._global_node_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self._global_node_id})"