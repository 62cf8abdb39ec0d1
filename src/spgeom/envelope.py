# Copyright (C) 2018 DataStorm
#
# This file is part of spgeom.
#
# spgeom is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# spgeom is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Axis-aligned bounding boxes.

Spatial indexes are built using simplifications of geometrical shapes. The
classical simplification, used by R-trees, is the axis-aligned minimum bounding
rectangle. A :class:`BBox` is such a rectangle in the plane, given by its
minimum and maximum corners. Boxes are immutable values with a positive extent
along both axes; every operation below returns a new box.
'''
import collections
import logging

import shapely.geometry
import toolz

from . import point
from .errors import DistError


logger = logging.getLogger(__name__)


class BBox(collections.namedtuple("BBox", "min max")):
    """
    Subset of the plane of the form [min.x, max.x] x [min.y, max.y], where
    min.x < max.x and min.y < max.y.

    Args:
        min: minimum (most-negative) corner, any pair of coordinates.
        max: maximum corner.

    Raises:
        DistError: if the box would have a non-positive extent along an axis.

    As for :class:`Point`, a box is a (min, max) tuple without tuple
    arithmetic. Every way of building one, `_make` and `_replace` included,
    goes through the validation above.
    """
    __slots__ = ()

    def _not_a_sequence(self, other):
        raise TypeError("BBox does not support tuple arithmetic")

    __add__ = __radd__ = __mul__ = __rmul__ = _not_a_sequence

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def __new__(cls, min, max):
        low = point.Point(*min)
        high = point.Point(*max)
        for extent in (high.x - low.x, high.y - low.y):
            if not extent > 0:
                logger.debug("Rejected box %s x %s with extent %s",
                             low, high, extent)
                raise DistError(extent)
        return super().__new__(cls, low, high)

    @classmethod
    def from_corner(cls, corner, width, height):
        """
        Box with minimum corner `corner` and side lengths `width` along x and
        `height` along y. Both lengths must be positive.
        """
        for length in (width, height):
            if not length > 0:
                logger.debug("Rejected side length %s for box at %s",
                             length, corner)
                raise DistError(length)
        corner = point.Point(*corner)
        return cls(corner, (corner.x + width, corner.y + height))

    @classmethod
    def from_bounds(cls, bounds):
        """Box from a (minx, miny, maxx, maxy) tuple, as shapely gives."""
        minx, miny, maxx, maxy = bounds
        return cls((minx, miny), (maxx, maxy))

    def __repr__(self):
        return "BBox(minx={}, miny={}, maxx={}, maxy={})".format(*self.bounds)

    def __str__(self):
        return "{}x{}".format(self.min, self.max)

    @property
    def bounds(self):
        return (self.min.x, self.min.y, self.max.x, self.max.y)

    @property
    def center(self):
        return point.Point((self.min.x + self.max.x) / 2,
                           (self.min.y + self.max.y) / 2)

    def size(self):
        """Area of the box."""
        return (self.max.x - self.min.x) * (self.max.y - self.min.y)

    def margin(self):
        """Sum of the edge lengths of the box."""
        return 2 * ((self.max.x - self.min.x) + (self.max.y - self.min.y))

    def enlargement(self, other):
        """Increase of area needed for `self` to also cover `other`."""
        return bounding_box(self, other).size() - self.size()

    def contains_point(self, p):
        """
        True if `p` lies in the interior of the box. Points on the boundary
        are not contained.
        """
        return (self.min.x < p[0] < self.max.x
                and self.min.y < p[1] < self.max.y)

    def contains_bbox(self, other):
        """True if `other` lies inside or on the boundary of the box."""
        return (self.min.x <= other.min.x and self.max.x >= other.max.x
                and self.min.y <= other.min.y and self.max.y >= other.max.y)

    def intersects(self, other):
        """True if the interiors of the two boxes overlap."""
        return (self.max.x > other.min.x and other.max.x > self.min.x
                and self.max.y > other.min.y and other.max.y > self.min.y)

    def to_polygon(self):
        return shapely.geometry.box(*self.bounds)


def new_bbox(corner, width, height):
    return BBox.from_corner(corner, width, height)


def bbox_of(geom):
    """Minimum bounding box of a geometry exposing `bounds` (e.g. shapely)."""
    return BBox.from_bounds(geom.bounds)


def intersect(bbox1, bbox2):
    """
    Intersection of two bounding boxes, or None if there is none.

    There are four cases of overlap along an axis:

        1.  a1------------b1        2.       a1------------b1
                 a2------------b2       a2------------b2
                 p--------q                  p--------q

        3.  a1-----------------b1   4.       a1-------b1
                 a2-------b2            a2-----------------b2
                 p--------q                  p--------q

    and two of non-overlap, where one interval ends before the other starts.
    Boxes which only share an edge or a corner have no intersection.
    """
    if not bbox1.intersects(bbox2):
        return None
    return BBox(
        (max(bbox1.min.x, bbox2.min.x), max(bbox1.min.y, bbox2.min.y)),
        (min(bbox1.max.x, bbox2.max.x), min(bbox1.max.y, bbox2.max.y)),
    )


def bounding_box(bbox1, bbox2):
    """Smallest bounding box containing both `bbox1` and `bbox2`."""
    return BBox(
        (min(bbox1.min.x, bbox2.min.x), min(bbox1.min.y, bbox2.min.y)),
        (max(bbox1.max.x, bbox2.max.x), max(bbox1.max.y, bbox2.max.y)),
    )


def bounding_box_n(*bboxes):
    """
    Smallest bounding box containing all of `bboxes`.

    Accepts the boxes as arguments or as a single iterable. A single box is
    returned as is.
    """
    if len(bboxes) == 1 and not isinstance(bboxes[0], BBox):
        bboxes = tuple(bboxes[0])
    if not bboxes:
        raise ValueError("bounding_box_n needs at least one bounding box.")
    if len(bboxes) == 1:
        return bboxes[0]
    return toolz.reduce(bounding_box, bboxes)
