"""
Host Protocol Types for csgrid

Value types and capabilities shared between the layout algorithm and the
host that owns the node tree.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

Number = Union[int, float]


class NodeType(str, Enum):
    """Host node type tags."""

    COMPONENT_SET = "COMPONENT_SET"
    COMPONENT = "COMPONENT"
    FRAME = "FRAME"
    INSTANCE = "INSTANCE"
    TEXT = "TEXT"


class GuideAxis(str, Enum):
    """Guide orientation. X guides are vertical lines, Y guides horizontal."""

    X = "X"
    Y = "Y"


@dataclass(frozen=True)
class Guide:
    """Layout guide line at an offset from the container origin."""

    axis: GuideAxis
    offset: Number

    def to_dict(self) -> Dict[str, Any]:
        return {"axis": self.axis.value, "offset": self.offset}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Guide":
        return cls(axis=GuideAxis(d["axis"]), offset=d["offset"])


class Positioned(ABC):
    """
    Capability of a node that exposes ``x``, ``y``, ``width`` and ``height``.

    Host node classes inherit from it, or foreign classes are registered as
    virtual subclasses with ``Positioned.register(cls)``. Only positioned
    children take part in grid arrangement.
    """

    x: Number
    y: Number
    width: Number
    height: Number


class HostError(Exception):
    """Base class for errors raised by the host mutation boundary."""


class ResizeRejectedError(HostError):
    """The host refused to resize a container (locked or unsupported)."""

    def __init__(self, node_id: str, width: Number, height: Number, reason: str):
        super().__init__(
            f"Cannot resize {node_id} to {width}x{height}: {reason}"
        )
        self.node_id = node_id
        self.width = width
        self.height = height
        self.reason = reason
