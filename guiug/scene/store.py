"""Append-only scene graph store."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from guiug.scene.nodes import Node, NodeId

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Scene:
    """Node table indexed by id, plus the designated root.

    Ids are handed out from a monotonic counter and never reused. Nodes are
    never replaced or removed once inserted.
    """

    root: NodeId | None = None
    _nodes: dict[NodeId, Node] = field(default_factory=dict, init=False, repr=False)
    _next_id: NodeId = field(default=0, init=False, repr=False)

    def insert_node(self, node: Node) -> NodeId:
        """Store a node and return its fresh id."""
        node_id = self._next_id
        self._nodes[node_id] = node
        self._next_id += 1
        logger.debug("scene_node_inserted id=%d kind=%s", node_id, type(node).__name__)
        return node_id

    def get_node(self, node_id: NodeId) -> Node | None:
        """Return the node for an id, or ``None`` when it was never inserted."""
        return self._nodes.get(node_id)

    def set_root(self, node_id: NodeId) -> None:
        """Designate the node laid out against the full screen."""
        self.root = node_id

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[tuple[NodeId, Node]]:
        return iter(self._nodes.items())
