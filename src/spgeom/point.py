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
Points of the euclidean plane and their distances to bounding boxes.

The two bounds `mindist` and `minmaxdist` are the ones used by branch-and-bound
nearest neighbour search in R-trees, as defined in "Nearest Neighbor Queries"
by N. Roussopoulos, S. Kelley and F. Vincent, ACM SIGMOD, pages 71-79, 1995.
Both are squared distances: they are only ever compared to each other.
'''
import collections
import logging
import math

from . import envelope
from .errors import DistError


logger = logging.getLogger(__name__)


class Point(collections.namedtuple("Point", "x y")):
    """
    A point in 2-dimensional euclidean space.

    Points are tuples: they unpack and index as (x, y) and compare equal to
    plain tuples with the same coordinates. Tuple concatenation and
    repetition are disabled, so `p + q` and `2 * p` raise TypeError.
    """
    __slots__ = ()

    def _not_a_sequence(self, other):
        raise TypeError("{} does not support tuple arithmetic"
                        .format(type(self).__name__))

    __add__ = __radd__ = __mul__ = __rmul__ = _not_a_sequence

    def __str__(self):
        return "[{:.2f}, {:.2f}]".format(self.x, self.y)

    def distance(self, other):
        return distance(self, other)

    def to_bbox(self, tol):
        """
        Square bounding box centered on `self` with side lengths 2*tol.

        Turns a point query into a search region. `tol` must be positive.
        A tolerance lost to rounding against large coordinates, as in
        Point(1e17, 0).to_bbox(1.), gives a flat box and raises DistError.
        """
        if not tol > 0:
            logger.debug("Rejected tolerance %s around %s", tol, self)
            raise DistError(tol)
        return envelope.BBox(Point(self.x - tol, self.y - tol),
                             Point(self.x + tol, self.y + tol))

    def mindist(self, bbox):
        return mindist(self, bbox)

    def minmaxdist(self, bbox):
        return minmaxdist(self, bbox)


def distance(p, q):
    """Euclidean distance between the points `p` and `q`."""
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return math.sqrt(dx*dx + dy*dy)


def mindist(p, bbox):
    """
    Squared distance from the point `p` to the bounding box `bbox`.

    Zero if `p` lies inside or on the boundary of `bbox`. No point of `bbox`
    is closer to `p` than sqrt(mindist(p, bbox)) (Definition 2).
    """
    total = 0.
    for coord, low, high in zip(p, bbox.min, bbox.max):
        if coord < low:
            total += (coord - low)**2
        elif coord > high:
            total += (coord - high)**2
    return total


def _near_far(coord, low, high):
    # Edges of [low, high] nearest to and farthest from coord.
    mid = (low + high) / 2
    near = low if coord <= mid else high
    far = low if coord >= mid else high
    return near, far


def minmaxdist(p, bbox):
    """
    Minimum over the axes of the maximum distance from `p` to the face of
    `bbox` nearest to `p` along that axis (Definition 4).

    If `bbox` is the minimum bounding box of some geometric objects, at
    least one of them lies within sqrt(minmaxdist(p, bbox)) of `p`.
    """
    rmx, rMx = _near_far(p[0], bbox.min.x, bbox.max.x)
    rmy, rMy = _near_far(p[1], bbox.min.y, bbox.max.y)
    return min(
        (p[0] - rmx)**2 + (p[1] - rMy)**2,
        (p[1] - rmy)**2 + (p[0] - rMx)**2,
    )
