# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Segment3D - Finite 3D line segment between two endpoints."""

from .tolerance import EPSILON
from .vector3d import Vector3D


class Segment3D:
    """
    Represent a 3D line segment defined by start and end points.

    Endpoints are held by value and copied on construction, assignment and
    access. Equality is order-sensitive, so a segment and its reversal are
    not equal. Zero-length segments are accepted.
    """

    __hash__ = None

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point, Vector3D or [x, y, z]
            end: End point, Vector3D or [x, y, z]

        Raises
        ------
        ValueError
            If points are not 3D

        """
        self._start = Vector3D.of(start)
        self._end = Vector3D.of(end)

    @property
    def start(self):
        return Vector3D.of(self._start)

    @start.setter
    def start(self, value):
        self._start = Vector3D.of(value)

    @property
    def end(self):
        return Vector3D.of(self._end)

    @end.setter
    def end(self, value):
        self._end = Vector3D.of(value)

    def directional_vector(self):
        """Return the vector from start to end."""
        return self._end - self._start

    def length(self):
        """Calculate segment length."""
        return self.directional_vector().length()

    def tangent(self):
        """
        Calculate normalized tangent vector along the segment.

        Returns
        -------
        Vector3D
            Unit direction vector from start to end

        Raises
        ------
        ValueError
            If segment is degenerate (zero length)

        """
        length = self.length()
        if length < EPSILON:
            raise ValueError("Segment is degenerate (zero length)")
        return self.directional_vector() * (1.0 / length)

    def midpoint(self):
        """Calculate midpoint of the segment."""
        return (self._start + self._end) * 0.5

    def point_at(self, t):
        """
        Get point along segment at parameter t.

        Args:
            t: Parameter value (0 = start, 1 = end)

        Returns
        -------
        Vector3D
            Point at parameter t

        """
        return self._start + self.directional_vector() * t

    def __eq__(self, other):
        if not isinstance(other, Segment3D):
            return NotImplemented
        return self._start == other.start and self._end == other.end

    def __repr__(self):
        """Return string representation of line segment."""
        return f"Segment3D(start={self._start}, end={self._end})"
