"""
Host Mutation Boundary

The host owns the node tree. Layouts never touch host nodes directly; they
hand a GridPlan to a LayoutHost, which writes it back.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

from .protocol import Guide, Number, Positioned

if TYPE_CHECKING:
    from .layouts import GridPlan
    from .objects import ComponentSetNode


class LayoutHost(ABC):
    """Abstract host that commits layout results."""

    @abstractmethod
    def set_position(self, node: Positioned, x: Number, y: Number):
        """Move a node within its parent."""
        pass

    @abstractmethod
    def resize(self, container: "ComponentSetNode", width: Number, height: Number):
        """Resize a container. Raises ResizeRejectedError when refused."""
        pass

    @abstractmethod
    def set_corner_radius(self, container: "ComponentSetNode", radius: Number):
        pass

    @abstractmethod
    def clear_strokes(self, container: "ComponentSetNode"):
        pass

    @abstractmethod
    def set_guides(self, container: "ComponentSetNode", guides: List[Guide]):
        """Replace the container's guide list as a whole."""
        pass

    def commit(self, container: "ComponentSetNode", plan: "GridPlan"):
        """
        Apply a plan to a container.

        Positions are written first. If the resize is rejected the error
        propagates and the positions stay written; styling and guides are
        left untouched.
        """
        for node, geometry in plan.geometries:
            self.set_position(node, geometry.x, geometry.y)
        self.resize(container, plan.width, plan.height)
        self.set_corner_radius(container, plan.corner_radius)
        self.clear_strokes(container)
        self.set_guides(container, list(plan.guides))


class DocumentHost(LayoutHost):
    """Host backed by the in-memory nodes of csgrid.objects."""

    def set_position(self, node: Positioned, x: Number, y: Number):
        node.x = x
        node.y = y

    def resize(self, container: "ComponentSetNode", width: Number, height: Number):
        container.resize(width, height)

    def set_corner_radius(self, container: "ComponentSetNode", radius: Number):
        container.corner_radius = radius

    def clear_strokes(self, container: "ComponentSetNode"):
        container.strokes = []

    def set_guides(self, container: "ComponentSetNode", guides: List[Guide]):
        container.guides = guides
