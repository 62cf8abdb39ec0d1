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
Vectorized operations on collections of bounding boxes.

A :class:`BBoxes` stores N boxes as two N x 2 arrays of minimum and maximum
corners, so that a predicate or a distance bound is evaluated against all of
them in a single numpy call. Results agree with their :class:`BBox`
counterparts box by box.
'''
import logging

import numpy
import toolz

from . import envelope
from .errors import DistError


logger = logging.getLogger(__name__)


class BBoxes:
    """
    Array of axis-aligned bounding boxes.

    Either pass coords and optionally interleaved, or pass mins and maxs
    separately.

    Args:
        coords: N x 4 array of bounds. If interleaved is False (default),
            rows are (minx, miny, maxx, maxy) as shapely bounds. If True, rows
            are (minx, maxx, miny, maxy).
        mins: N x 2 array of minimum corners.
        maxs: N x 2 array of maximum corners.

    Raises:
        DistError: if some box has a non-positive extent along an axis.

    The corner arrays are read-only and cannot be reassigned.
    """
    __slots__ = ('_mins', '_maxs')

    def __init__(self, coords=None, mins=None, maxs=None, interleaved=False):
        if coords is not None and mins is None and maxs is None:
            self._from_array(coords, interleaved)
        elif coords is None and mins is not None and maxs is not None:
            self._from_mins_maxs(mins, maxs)
        else:
            raise ValueError(
                "Either coords or both mins and maxs must be given (but not "
                "all together)."
            )

    @classmethod
    def from_bboxes(cls, bboxes):
        """Packs a sequence of :class:`BBox`."""
        bboxes = list(bboxes)
        logger.debug("Packing %d boxes", len(bboxes))
        # A BBox is a (min, max) pair of points.
        return cls(mins=list(toolz.pluck(0, bboxes)),
                   maxs=list(toolz.pluck(1, bboxes)))

    def _from_array(self, coords, interleaved=False):
        coords = numpy.asarray(coords, dtype=float).reshape(-1, 4)
        if interleaved:
            coords = coords[:, [0, 2, 1, 3]]
        self._from_mins_maxs(coords[:, :2], coords[:, 2:])

    def _from_mins_maxs(self, mins, maxs):
        mins = numpy.array(mins, dtype=float).reshape(-1, 2)
        maxs = numpy.array(maxs, dtype=float).reshape(-1, 2)
        if mins.shape != maxs.shape:
            raise ValueError("Mins and maxs must be of same shape")
        extents = maxs - mins
        invalid = ~(extents > 0)
        if invalid.any():
            extent = extents[invalid][0]
            logger.debug("Rejected %d boxes out of %d",
                         invalid.any(axis=1).sum(), len(mins))
            raise DistError(float(extent))
        mins.flags.writeable = False
        maxs.flags.writeable = False
        self._mins = mins
        self._maxs = maxs

    def __len__(self):
        return self.mins.shape[0]

    def __getitem__(self, idx):
        if numpy.ndim(idx) == 0 and not isinstance(idx, slice):
            return envelope.BBox(self.mins[idx].tolist(),
                                 self.maxs[idx].tolist())
        return self.__class__(mins=self.mins[idx], maxs=self.maxs[idx])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return "BBoxes(<{} boxes>)".format(len(self))

    @property
    def mins(self):
        """N x 2 read-only array of minimum corners."""
        return self._mins

    @property
    def maxs(self):
        """N x 2 read-only array of maximum corners."""
        return self._maxs

    @property
    def centers(self):
        return 0.5 * (self.mins + self.maxs)

    def size(self):
        return (self.maxs - self.mins).prod(axis=1)

    def margin(self):
        return 2 * (self.maxs - self.mins).sum(axis=1)

    def bbox(self):
        """Smallest :class:`BBox` containing all the boxes."""
        if not len(self):
            raise ValueError("Empty BBoxes have no bounding box.")
        return envelope.BBox(self.mins.min(axis=0).tolist(),
                             self.maxs.max(axis=0).tolist())

    def contains_point(self, p):
        """Mask of the boxes having `p` in their interior."""
        p = numpy.asarray(p, dtype=float)
        return ((self.mins < p) & (self.maxs > p)).all(axis=1)

    def contains_bbox(self, bbox):
        """Mask of the boxes containing `bbox`, boundaries included."""
        return ((self.mins <= bbox.min) & (self.maxs >= bbox.max)).all(axis=1)

    def intersects(self, bbox):
        """Mask of the boxes whose interior overlaps `bbox`'s."""
        return ((self.mins < bbox.max) & (self.maxs > bbox.min)).all(axis=1)

    def mindist(self, p):
        """Squared distances from `p` to each box."""
        p = numpy.asarray(p, dtype=float)
        gaps = (numpy.maximum(self.mins - p, 0.)
                + numpy.maximum(p - self.maxs, 0.))
        return (gaps**2).sum(axis=1)

    def minmaxdist(self, p):
        """Squared minmaxdist bounds from `p` to each box."""
        p = numpy.asarray(p, dtype=float)
        mids = self.centers
        near = numpy.where(p <= mids, self.mins, self.maxs)
        far = numpy.where(p >= mids, self.mins, self.maxs)
        # Candidate along an axis: near face on that axis, far on the other.
        candidates = (p - near)**2 + ((p - far)**2)[:, ::-1]
        return candidates.min(axis=1)
