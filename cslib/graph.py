"""A directed graph made of named nodes connected by arcs.

Undirected connections are modelled with one arc in each direction.
Nodes are enumerated by name and arcs by the names of their start and
end nodes unless another ordering is set.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Graph", "Node", "Arc"]


def _node_name(node: Node) -> Any:
    return node.name


def _arc_names(arc: Arc) -> Any:
    return (arc.start.name, arc.end.name)


@dataclass(eq=False)
class Arc:
    """A directed connection from ``start`` to ``end`` with a traversal cost."""

    start: Node
    end: Node
    cost: float = 0.0
    data: Any = None

    def __repr__(self) -> str:
        return f"Arc({self.start.name!r} -> {self.end.name!r}, cost={self.cost!r})"


@dataclass(eq=False)
class Node:
    """A named node; ``data`` is free for client use."""

    name: str
    data: Any = None
    _graph: Graph | None = field(default=None, repr=False)
    _out: list[Arc] = field(default_factory=list, repr=False)

    def arcs(self) -> list[Arc]:
        """Return the arcs leaving this node in the graph's arc ordering."""
        key = self._graph._arc_key if self._graph is not None else _arc_names
        return sorted(self._out, key=key)

    def neighbors(self) -> list[Node]:
        """Return the distinct nodes this node has arcs to, in node ordering."""
        unique: dict[int, Node] = {}
        for arc in self._out:
            unique.setdefault(id(arc.end), arc.end)
        key = self._graph._node_key if self._graph is not None else _node_name
        return sorted(unique.values(), key=key)

    def is_connected(self, other: Node) -> bool:
        """Return True if an arc leads from this node to ``other``."""
        return any(arc.end is other for arc in self._out)

    def __repr__(self) -> str:
        return f"Node({self.name!r})"


class Graph:
    """A set of named nodes and the arcs between them."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._arcs: list[Arc] = []
        self._node_key: Callable[[Node], Any] = _node_name
        self._arc_key: Callable[[Arc], Any] = _arc_names

    def add_node(self, name: str) -> Node:
        """Add and return a new node; a duplicate name raises ValueError."""
        if name in self._nodes:
            raise ValueError(f"add_node: node {name!r} already exists")
        node = Node(name, _graph=self)
        self._nodes[name] = node
        return node

    def remove_node(self, node: Node) -> None:
        """Remove a node together with every arc entering or leaving it."""
        self._check_node(node, "remove_node")
        for arc in [a for a in self._arcs if a.start is node or a.end is node]:
            self.remove_arc(arc)
        del self._nodes[node.name]
        node._graph = None

    def get_node(self, name: str) -> Node | None:
        """Return the node with the given name, or None."""
        return self._nodes.get(name)

    def add_arc(self, n1: Node, n2: Node) -> Arc:
        """Add and return a new arc from ``n1`` to ``n2``."""
        self._check_node(n1, "add_arc")
        self._check_node(n2, "add_arc")
        arc = Arc(n1, n2)
        self._arcs.append(arc)
        n1._out.append(arc)
        return arc

    def remove_arc(self, arc: Arc) -> None:
        """Remove an arc from the graph."""
        if arc not in self._arcs:
            raise ValueError("remove_arc: arc is not in this graph")
        self._arcs.remove(arc)
        arc.start._out.remove(arc)

    def nodes(self) -> list[Node]:
        """Return every node in the current node ordering."""
        return sorted(self._nodes.values(), key=self._node_key)

    def arcs(self) -> list[Arc]:
        """Return every arc in the current arc ordering."""
        return sorted(self._arcs, key=self._arc_key)

    def set_node_ordering(self, key: Callable[[Node], Any] | None) -> None:
        """Set the sort key for enumerating nodes; None restores name order."""
        self._node_key = key if key is not None else _node_name

    def set_arc_ordering(self, key: Callable[[Arc], Any] | None) -> None:
        """Set the sort key for enumerating arcs; None restores name order."""
        self._arc_key = key if key is not None else _arc_names

    def _check_node(self, node: Node, where: str) -> None:
        if self._nodes.get(node.name) is not node:
            raise ValueError(f"{where}: node {node.name!r} is not in this graph")

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return self._nodes.get(item.name) is item
        return item in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, arcs={len(self._arcs)})"