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

"""Segment intersection - classify how two 3D segments meet."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .tolerance import EPSILON
from .vector3d import Vector3D, cross_product, dot_product

logger = logging.getLogger(__name__)


class IntersectionKind(enum.Enum):
    """Outcome of intersecting two segments."""

    POINT = 'point'
    IDENTICAL = 'identical'
    SAME_LINE_NO_OVERLAP = 'same_line_no_overlap'
    COLLINEAR_OVERLAP = 'collinear_overlap'
    PARALLEL = 'parallel'
    SKEW = 'skew'


@dataclass(frozen=True)
class IntersectionResult:
    """
    Result of intersecting two segments.

    Attributes
    ----------
    kind : IntersectionKind
        Classification of the pair
    point : Vector3D or None
        Intersection point, set for POINT only
    interval : tuple of Vector3D or None
        (start, end) of the shared interval, set for IDENTICAL and
        COLLINEAR_OVERLAP only

    Unhashable, like the Vector3D values it holds.

    """

    __hash__ = None

    kind: IntersectionKind
    point: Optional[Vector3D] = None
    interval: Optional[Tuple[Vector3D, Vector3D]] = None

    @property
    def intersects(self):
        """True if the segments meet in a single point."""
        return self.kind is IntersectionKind.POINT

    @property
    def message(self):
        """Human-readable description of the outcome."""
        if self.kind is IntersectionKind.POINT:
            return f"Segments intersect at {self.point}"
        if self.kind is IntersectionKind.IDENTICAL:
            start, end = self.interval
            return ("Segments are the same and the intersection is an interval "
                    f"with start {start} and end {end}")
        if self.kind is IntersectionKind.COLLINEAR_OVERLAP:
            start, end = self.interval
            return f"Segments intersection is an interval with start {start} and end {end}"
        if self.kind is IntersectionKind.SAME_LINE_NO_OVERLAP:
            return "Segments are on the same line and do not intersect"
        if self.kind is IntersectionKind.PARALLEL:
            return "Segments are parallel and do not intersect"
        return "Segments do not intersect"

    def unwrap(self):
        """
        Return the intersection point or raise for any other outcome.

        Returns
        -------
        Vector3D
            Intersection point

        Raises
        ------
        IntersectionError
            Subclass matching the kind, if the segments do not meet in a
            single point

        """
        if self.intersects:
            return self.point
        raise _ERRORS[self.kind](self)


class IntersectionError(ValueError):
    """Segments do not meet in a single point."""

    def __init__(self, result):
        super().__init__(result.message)
        self.result = result


class IdenticalSegmentsError(IntersectionError):
    """Both segments are the same."""


class SameLineNoOverlapError(IntersectionError):
    """Segments lie on one line but are disjoint."""


class CollinearOverlapError(IntersectionError):
    """Segments lie on one line and share an interval."""


class ParallelSegmentsError(IntersectionError):
    """Segments lie on distinct parallel lines."""


class SkewSegmentsError(IntersectionError):
    """Segments do not meet."""


_ERRORS = {
    IntersectionKind.IDENTICAL: IdenticalSegmentsError,
    IntersectionKind.SAME_LINE_NO_OVERLAP: SameLineNoOverlapError,
    IntersectionKind.COLLINEAR_OVERLAP: CollinearOverlapError,
    IntersectionKind.PARALLEL: ParallelSegmentsError,
    IntersectionKind.SKEW: SkewSegmentsError,
}


def intersect(first, second):
    """
    Classify the intersection of two segments.

    Rules are evaluated in order and the first match wins:

    1. Equal segments (order-sensitive) are IDENTICAL.
    2. If the start-to-start and end-to-end displacements are both uniform
       vectors, the segments are treated as lying on the same line. They are
       SAME_LINE_NO_OVERLAP when their X extents are disjoint, otherwise
       COLLINEAR_OVERLAP with the per-axis max of the starts and per-axis
       min of the ends as the interval.
    3. A shared endpoint is returned directly as the POINT.
    4. Otherwise the lines are solved through the cross product of their
       directions: PARALLEL when it vanishes, POINT when both line
       parameters lie in [0, 1], SKEW otherwise.

    Notes
    -----
    The collinearity test in rule 2 only recognises displacements along the
    x = y = z direction; collinear segments on other lines fall through to
    rule 4 and are reported as PARALLEL. The overlap interval assumes both
    segments run with non-decreasing coordinates from start to end. Rule 4
    does not verify that the lines are coplanar, so skew lines whose
    parameters both fall in [0, 1] are reported as a POINT on the first
    segment.

    The outcome kind does not depend on argument order, but the point can:
    a shared endpoint is reported as the matching endpoint of `first`, so a
    segment and its reversal meet at `first.start` when rule 2 does not
    apply, and the skew POINT above always lies on `first`.

    Args:
        first: First segment
        second: Second segment

    Returns
    -------
    IntersectionResult
        Classified outcome

    """
    first_start, first_end = first.start, first.end
    second_start, second_end = second.start, second.end

    if first == second:
        logger.debug("Identical segments %r", first)
        return IntersectionResult(
            IntersectionKind.IDENTICAL, interval=(first_start, second_end)
        )

    start_diff = second_start - first_start
    end_diff = second_end - first_end

    if start_diff.is_uniform() and end_diff.is_uniform():
        if first_end.x < second_start.x or first_start.x > second_end.x:
            logger.debug("Segments on the same line without overlap")
            return IntersectionResult(IntersectionKind.SAME_LINE_NO_OVERLAP)

        interval_start = Vector3D(
            max(first_start.x, second_start.x),
            max(first_start.y, second_start.y),
            max(first_start.z, second_start.z),
        )
        interval_end = Vector3D(
            min(first_end.x, second_end.x),
            min(first_end.y, second_end.y),
            min(first_end.z, second_end.z),
        )
        logger.debug("Collinear overlap from %s to %s", interval_start, interval_end)
        return IntersectionResult(
            IntersectionKind.COLLINEAR_OVERLAP, interval=(interval_start, interval_end)
        )

    if first_start == second_start or first_start == second_end:
        logger.debug("Shared endpoint %s", first_start)
        return IntersectionResult(IntersectionKind.POINT, point=first_start)
    if first_end == second_end or first_end == second_start:
        logger.debug("Shared endpoint %s", first_end)
        return IntersectionResult(IntersectionKind.POINT, point=first_end)

    first_direction = first.directional_vector()
    second_direction = second.directional_vector()
    normal = cross_product(first_direction, second_direction)

    if normal.length() < EPSILON:
        logger.debug("Parallel segments")
        return IntersectionResult(IntersectionKind.PARALLEL)

    normal_sq = dot_product(normal, normal)
    t1 = dot_product(cross_product(start_diff, second_direction), normal) / normal_sq
    t2 = dot_product(cross_product(start_diff, first_direction), normal) / normal_sq

    if 0 <= t1 <= 1 and 0 <= t2 <= 1:
        point = first.point_at(t1)
        logger.debug("Segments intersect at %s (t1=%g, t2=%g)", point, t1, t2)
        return IntersectionResult(IntersectionKind.POINT, point=point)

    logger.debug("Segments do not intersect (t1=%g, t2=%g)", t1, t2)
    return IntersectionResult(IntersectionKind.SKEW)


def intersect_or_raise(first, second):
    """
    Intersect two segments and return the point.

    Raises
    ------
    IntersectionError
        If the segments do not meet in a single point

    """
    return intersect(first, second).unwrap()
