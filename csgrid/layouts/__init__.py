"""
Layout System

Grid inference and alignment for component set variants.
"""

from .layout_base import (
    Layout,
    LayoutGeometry,
    GridPlan,
)
from .clustering import Cluster, group_by_axis
from .layout_grid import (
    GridLayout,
    filter_variants,
    apply_padding,
    align_rows,
    align_columns,
    fit_size,
    derive_guides,
)

__all__ = [
    # Base classes
    "Layout",
    "LayoutGeometry",
    "GridPlan",
    # Clustering
    "Cluster",
    "group_by_axis",
    # Grid layout
    "GridLayout",
    "filter_variants",
    "apply_padding",
    "align_rows",
    "align_columns",
    "fit_size",
    "derive_guides",
]
