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

"""Vector3D - Point/direction value in 3D space with tolerance equality."""

import numbers

import numpy as np

from .tolerance import EPSILON


class Vector3D:
    """
    Represent a point or a displacement in 3D space.

    Coordinates are stored as a numpy float array. Equality is absolute and
    per coordinate: two vectors are equal when every coordinate differs by
    less than EPSILON. This is not transitive near the tolerance boundary,
    so vectors are not hashable.
    """

    __hash__ = None

    def __init__(self, x, y, z):
        """
        Initialize vector from three coordinates.

        Args:
            x: X coordinate
            y: Y coordinate
            z: Z coordinate

        """
        self._coords = np.array([x, y, z], dtype=float)

    @classmethod
    def of(cls, value):
        """
        Build a vector from another vector or a 3D point.

        Args:
            value: Vector3D, or a point [x, y, z]

        Returns
        -------
        Vector3D
            New vector; the input is copied, never referenced

        Raises
        ------
        ValueError
            If value is not a 3D point

        """
        if isinstance(value, cls):
            return cls(*value._coords)

        coords = np.asarray(value, dtype=float)
        if coords.shape != (3,):
            raise ValueError("Point must be 3D [x, y, z]")
        return cls(*coords)

    @property
    def x(self):
        return float(self._coords[0])

    @x.setter
    def x(self, value):
        self._coords[0] = value

    @property
    def y(self):
        return float(self._coords[1])

    @y.setter
    def y(self, value):
        self._coords[1] = value

    @property
    def z(self):
        return float(self._coords[2])

    @z.setter
    def z(self, value):
        self._coords[2] = value

    def to_array(self):
        """Return a copy of the coordinates as a numpy array."""
        return self._coords.copy()

    def length(self):
        """Calculate Euclidean norm of the vector."""
        return float(np.linalg.norm(self._coords))

    def is_uniform(self):
        """
        Check whether all three coordinates are (approximately) the same.

        Compares x with y and y with z only; x and z may differ by up to
        twice EPSILON and still count as uniform.

        Returns
        -------
        bool
            True if |x - y| < EPSILON and |y - z| < EPSILON

        """
        x, y, z = self._coords
        return bool(abs(x - y) < EPSILON and abs(y - z) < EPSILON)

    def __add__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(*(self._coords + other._coords))

    def __sub__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(*(self._coords - other._coords))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector3D(*(self._coords * float(scalar)))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(np.all(np.abs(self._coords - other._coords) < EPSILON))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self):
        """Return string in {x, y, z} form."""
        return f"{{{self.x}, {self.y}, {self.z}}}"

    def __repr__(self):
        """Return string representation of vector."""
        return f"Vector3D(x={self.x}, y={self.y}, z={self.z})"


def cross_product(first, second):
    """
    Calculate the cross product of two vectors.

    Zero vector when the inputs are parallel or either of them is zero.

    Args:
        first: Left operand
        second: Right operand

    Returns
    -------
    Vector3D
        first x second

    """
    return Vector3D(*np.cross(first.to_array(), second.to_array()))


def dot_product(first, second):
    """Calculate the scalar (dot) product of two vectors."""
    return float(np.dot(first.to_array(), second.to_array()))
