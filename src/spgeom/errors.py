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
"""
Exceptions raised by spgeom.
"""


class DistError(ValueError):
    """
    Improper distance measurement.

    Raised when a side length, tolerance or extent that must be strictly
    positive is not. The offending value is kept in the `length` attribute.
    """
    def __init__(self, length):
        self.length = length
        super().__init__("spgeom: improper distance {}".format(length))
