"""
Document Node Objects

In-memory node tree standing in for the host document. Nodes load from and
dump to plain dictionaries, so a whole document can be round-tripped through
JSON.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional

from .protocol import (
    Guide,
    NodeType,
    Number,
    Positioned,
    ResizeRejectedError,
)

GEOMETRY_KEYS = ("x", "y", "width", "height")

# Smallest size the host accepts for a container edge.
MIN_SIZE = 0.01


def _number(d: Dict[str, Any], key: str, node_id: str) -> Number:
    value = d[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Node {node_id}: {key} must be a number, got {value!r}")
    return value


class SceneNode:
    """A node in the document tree. Carries no geometry of its own."""

    def __init__(
        self,
        node_id: str,
        node_type: str,
        name: str = "",
        children: Optional[List["SceneNode"]] = None,
    ):
        self.id = node_id
        self.type = node_type
        self.name = name
        self.children: List[SceneNode] = children if children is not None else []
        self.extra: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, type={self.type!r})"

    def walk(self) -> Iterator["SceneNode"]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = dict(self.extra)
        d.update({"id": self.id, "type": self.type, "name": self.name})
        if self.children:
            d["children"] = [c.to_dict() for c in self.children]
        return d


class ComponentNode(SceneNode, Positioned):
    """A positioned node, typically one variant of a component set."""

    def __init__(
        self,
        node_id: str,
        x: Number,
        y: Number,
        width: Number,
        height: Number,
        node_type: str = NodeType.COMPONENT.value,
        name: str = "",
        children: Optional[List[SceneNode]] = None,
    ):
        super().__init__(node_id, node_type, name, children)
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({"x": self.x, "y": self.y, "width": self.width, "height": self.height})
        return d


class ComponentSetNode(ComponentNode):
    """Container whose children are the variants of one component."""

    def __init__(
        self,
        node_id: str,
        x: Number = 0,
        y: Number = 0,
        width: Number = 100,
        height: Number = 100,
        name: str = "",
        children: Optional[List[SceneNode]] = None,
        corner_radius: Number = 0,
        strokes: Optional[List[Dict[str, Any]]] = None,
        guides: Optional[List[Guide]] = None,
        resizable: bool = True,
    ):
        super().__init__(
            node_id,
            x,
            y,
            width,
            height,
            node_type=NodeType.COMPONENT_SET.value,
            name=name,
            children=children,
        )
        self.corner_radius = corner_radius
        self.strokes: List[Dict[str, Any]] = strokes if strokes is not None else []
        self.guides: List[Guide] = guides if guides is not None else []
        self.resizable = resizable

    def resize(self, width: Number, height: Number):
        """Resize the container, keeping its position."""
        if not self.resizable:
            raise ResizeRejectedError(self.id, width, height, "container is locked")
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ResizeRejectedError(
                self.id, width, height, f"dimensions must be at least {MIN_SIZE}"
            )
        self.width = width
        self.height = height

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "cornerRadius": self.corner_radius,
                "strokes": list(self.strokes),
                "guides": [g.to_dict() for g in self.guides],
                "resizable": self.resizable,
            }
        )
        return d


_KNOWN_KEYS = set(GEOMETRY_KEYS) | {
    "id",
    "type",
    "name",
    "children",
    "cornerRadius",
    "strokes",
    "guides",
    "resizable",
}


def node_from_dict(d: Dict[str, Any]) -> SceneNode:
    """
    Build a node from its dictionary form.

    COMPONENT_SET nodes become ComponentSetNode. Any other node carrying all
    four geometry keys becomes a ComponentNode; the rest stay plain
    SceneNodes and are ignored by the grid layout.
    """
    if "id" not in d:
        raise ValueError(f"Node without id: {d!r}")
    node_id = str(d["id"])
    node_type = str(d.get("type", NodeType.FRAME.value))
    name = str(d.get("name", ""))
    children = [node_from_dict(c) for c in d.get("children", [])]

    node: SceneNode
    if node_type == NodeType.COMPONENT_SET:
        geometry = {k: _number(d, k, node_id) for k in GEOMETRY_KEYS if k in d}
        node = ComponentSetNode(
            node_id,
            name=name,
            children=children,
            corner_radius=_number(d, "cornerRadius", node_id) if "cornerRadius" in d else 0,
            strokes=list(d.get("strokes", [])),
            guides=[Guide.from_dict(g) for g in d.get("guides", [])],
            resizable=bool(d.get("resizable", True)),
            **geometry,
        )
    elif all(k in d for k in GEOMETRY_KEYS):
        node = ComponentNode(
            node_id,
            *(_number(d, k, node_id) for k in GEOMETRY_KEYS),
            node_type=node_type,
            name=name,
            children=children,
        )
    else:
        node = SceneNode(node_id, node_type, name, children)

    node.extra = {k: v for k, v in d.items() if k not in _KNOWN_KEYS}
    return node


class Document:
    """A page of top-level nodes plus the current selection."""

    def __init__(
        self,
        nodes: Optional[List[SceneNode]] = None,
        selection: Optional[List[SceneNode]] = None,
    ):
        self.nodes: List[SceneNode] = nodes if nodes is not None else []
        self.selection: List[SceneNode] = selection if selection is not None else []

    def walk(self) -> Iterator[SceneNode]:
        for node in self.nodes:
            yield from node.walk()

    def find(self, node_id: str) -> Optional[SceneNode]:
        """Find a node anywhere in the tree by id."""
        for node in self.walk():
            if node.id == node_id:
                return node
        return None

    def select(self, node_ids: List[str]) -> List[SceneNode]:
        """Replace the selection with the given ids, in the given order."""
        selection = []
        for node_id in node_ids:
            node = self.find(node_id)
            if node is None:
                raise ValueError(f"Selected node not found: {node_id}")
            selection.append(node)
        self.selection = selection
        return selection

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Document":
        doc = cls(nodes=[node_from_dict(n) for n in d.get("nodes", [])])
        seen = set()
        for node in doc.walk():
            if node.id in seen:
                raise ValueError(f"Duplicate node id: {node.id}")
            seen.add(node.id)
        doc.select([str(i) for i in d.get("selection", [])])
        return doc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "selection": [n.id for n in self.selection],
        }
