"""
Grid Layout

Variants snapped into aligned rows and columns, with padding and guides.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple

from .clustering import DEFAULT_ALIGNMENT_THRESHOLD, group_by_axis
from .layout_base import GridPlan, Layout, LayoutGeometry
from ..protocol import Guide, GuideAxis, Number, Positioned

DEFAULT_PADDING = 80
DEFAULT_CORNER_RADIUS = 32


def filter_variants(children: Iterable[object]) -> List[Positioned]:
    """Return the children exposing a position and size, in order."""
    return [child for child in children if isinstance(child, Positioned)]


def apply_padding(items: Sequence[LayoutGeometry], padding: Number):
    """Translate items so their top-left bound sits at (padding, padding)."""
    dx = padding - min(g.x for g in items)
    dy = padding - min(g.y for g in items)
    for g in items:
        g.x += dx
        g.y += dy


def align_rows(items: Sequence[LayoutGeometry], threshold: Number):
    """Give every member of a row the y of the row's first member."""
    for row in group_by_axis(items, "x", threshold):
        reference_y = row.members[0].y
        for g in row.members:
            g.y = reference_y


def align_columns(items: Sequence[LayoutGeometry], threshold: Number):
    """Give every member of a column the x of the column's first member."""
    for column in group_by_axis(items, "y", threshold):
        reference_x = column.members[0].x
        for g in column.members:
            g.x = reference_x


def fit_size(items: Sequence[LayoutGeometry], padding: Number) -> Tuple[Number, Number]:
    """Container size enclosing all items plus padding on the far edges."""
    max_x = max(g.x + g.width for g in items)
    max_y = max(g.y + g.height for g in items)
    return max_x + padding, max_y + padding


def derive_guides(items: Sequence[LayoutGeometry], threshold: Number) -> List[Guide]:
    """
    Guides along the outer edges of every row and column.

    Rows and columns are clustered again from the given geometry. X guides
    come first, then Y guides, each ascending with duplicates removed.
    """
    x_offsets = set()
    y_offsets = set()

    for column in group_by_axis(items, "y", threshold):
        x_offsets.add(min(g.x for g in column.members))
        x_offsets.add(max(g.x + g.width for g in column.members))

    for row in group_by_axis(items, "x", threshold):
        y_offsets.add(min(g.y for g in row.members))
        y_offsets.add(max(g.y + g.height for g in row.members))

    return [Guide(GuideAxis.X, offset) for offset in sorted(x_offsets)] + [
        Guide(GuideAxis.Y, offset) for offset in sorted(y_offsets)
    ]


class GridLayout(Layout):
    """
    Grid layout - variants snapped into rows and columns inside a padded
    container.
    """

    def __init__(
        self,
        padding: Number = DEFAULT_PADDING,
        corner_radius: Number = DEFAULT_CORNER_RADIUS,
        alignment_threshold: Number = DEFAULT_ALIGNMENT_THRESHOLD,
    ):
        self.padding = padding
        self.corner_radius = corner_radius
        self.alignment_threshold = alignment_threshold

    @property
    def name(self) -> str:
        return "grid"

    def calculate(self, children: Sequence[object]) -> Optional[GridPlan]:
        variants = filter_variants(children)
        if not variants:
            return None

        geometries = [(v, LayoutGeometry.of(v)) for v in variants]
        items = [geometry for _, geometry in geometries]

        apply_padding(items, self.padding)
        align_rows(items, self.alignment_threshold)
        align_columns(items, self.alignment_threshold)
        # A row or column whose first member is not its top/left-most one
        # drags the content off the padding; shift it back. Final positions
        # then differ from plain pad-then-align by that shift.
        apply_padding(items, self.padding)

        width, height = fit_size(items, self.padding)

        return GridPlan(
            geometries=geometries,
            width=width,
            height=height,
            corner_radius=self.corner_radius,
            guides=derive_guides(items, self.alignment_threshold),
        )
