"""
Layout Base Classes

Provides the Layout interface and the plan a layout hands to the host.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from ..protocol import Guide, Number, Positioned

if TYPE_CHECKING:
    from ..objects import SceneNode


@dataclass
class LayoutGeometry:
    """Working geometry for a variant in a layout."""

    x: Number
    y: Number
    width: Number
    height: Number

    @classmethod
    def of(cls, node: Positioned) -> "LayoutGeometry":
        """Snapshot the current geometry of a positioned node."""
        return cls(node.x, node.y, node.width, node.height)


@dataclass
class GridPlan:
    """
    Everything the host has to commit for one container.

    ``geometries`` pairs each variant with its new geometry, in document
    order. Variants are matched by position in the list, never by hash or
    equality, so unhashable and value-equal nodes each keep their own entry.
    """

    geometries: List[Tuple[Positioned, LayoutGeometry]]
    width: Number
    height: Number
    corner_radius: Number
    guides: List[Guide] = field(default_factory=list)

    def geometry_of(self, node: Positioned) -> LayoutGeometry:
        """Return the planned geometry of ``node`` (matched by identity)."""
        for candidate, geometry in self.geometries:
            if candidate is node:
                return geometry
        raise KeyError(node)


class Layout(ABC):
    """Abstract base class for container layouts."""

    @abstractmethod
    def calculate(self, children: Sequence["SceneNode"]) -> Optional[GridPlan]:
        """
        Calculate the new arrangement of a container's children.

        Args:
            children: Direct children of the container, in document order

        Returns:
            The plan to commit, or None when there is nothing to arrange
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass
