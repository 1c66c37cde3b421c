"""
Component Set Grid (csgrid)

Arranges the variants of a component set into an aligned grid.

This package provides:
- Tolerance-based row/column clustering of loosely placed rectangles
- Alignment of every row and column to its first member
- Padding, container fitting and row/column guide lines
- A host interface for committing results, with an in-memory JSON host

Example usage:
    from csgrid import ComponentSetArranger, DocumentHost, Document, GridConfig

    doc = Document.from_dict(data)
    arranger = ComponentSetArranger(DocumentHost(), GridConfig(padding=40))
    summary = arranger.run(doc.selection)

Or run directly:
    python -m csgrid --input page.json
"""

__version__ = "0.1.0"

from .protocol import (
    NodeType,
    GuideAxis,
    Guide,
    Positioned,
    HostError,
    ResizeRejectedError,
)

from .objects import (
    SceneNode,
    ComponentNode,
    ComponentSetNode,
    Document,
    node_from_dict,
)

from .host import LayoutHost, DocumentHost

from .layouts import (
    Layout,
    LayoutGeometry,
    GridPlan,
    GridLayout,
    Cluster,
    group_by_axis,
)

from .arranger import (
    ComponentSetArranger,
    GridConfig,
    RunSummary,
    MESSAGES,
)

from . import topics

__all__ = [
    # Version
    "__version__",
    # Protocol types
    "NodeType",
    "GuideAxis",
    "Guide",
    "Positioned",
    "HostError",
    "ResizeRejectedError",
    # Objects
    "SceneNode",
    "ComponentNode",
    "ComponentSetNode",
    "Document",
    "node_from_dict",
    # Host
    "LayoutHost",
    "DocumentHost",
    # Layouts
    "Layout",
    "LayoutGeometry",
    "GridPlan",
    "GridLayout",
    "Cluster",
    "group_by_axis",
    # Arranger
    "ComponentSetArranger",
    "GridConfig",
    "RunSummary",
    "MESSAGES",
    # Event topics
    "topics",
]
