"""
Geometry primitives for 2-dimensional R-tree indexes.

R-trees group objects by their axis-aligned minimum bounding boxes. Building
and querying such a tree relies on a small algebra of boxes: containment and
intersection to prune range queries, union, area and margin to choose where
to insert and how to split, and lower and upper bounds on distances to drive
nearest neighbour search.

This package provides that algebra on immutable values: :class:`Point`,
:class:`BBox`, and :class:`BBoxes` to evaluate a predicate against many boxes
at once with numpy.
"""
import logging

from .errors import DistError  # noqa: F401
from .point import Point, distance, mindist, minmaxdist  # noqa: F401
from .envelope import (  # noqa: F401
    BBox, new_bbox, bbox_of, intersect, bounding_box, bounding_box_n)
from .vectorized import BBoxes  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
