#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
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
#
#
#
"""
Growable vectors of RealNumber elements.

The elements live in a numpy object array that is owned by the vector. When
an append exceeds the capacity, the buffer is reallocated with twice the
capacity. All arithmetic is delegated element-wise to RealNumber, so the
promotion rules of linalgebra.realnum carry over: a vector of exact fractions
stays exact under addition, scaling by fractions and dot products.
"""

from typing import Iterable, List, Optional
import logging

import numpy as np

from .names import *
from .errors import DimensionMismatchError, DivisionByZeroError
from .realnum import RealNumber, Approximation, Numeric, ZERO, ONE

LOG = logging.getLogger(__name__)


class Vector:
    """
    Ordered, growable sequence of RealNumber.

    Operations returning vectors never modify their operands. The only
    mutating operation is append().

    Example:
        >>> u = Vector.new(3, 1.0, 2.0, 3.0)
        >>> v = Vector.new(3, 4.0, 5.0, 6.0)
        >>> (u + v).format(3)
        '[5.000, 7.000, 9.000]'
    """

    def __init__(self, capacity: int = DEFAULT_VECTOR_CAPACITY):
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}.")
        self._elements = np.empty(capacity, dtype=object)
        self._length = 0

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls, count: int, *values) -> 'Vector':
        """Build a vector of count approximations from count scalar arguments."""
        if len(values) != count:
            raise DimensionMismatchError(f"Expected {count} values but got {len(values)}.",
                                         expected=count,
                                         actual=len(values))
        vector = cls(count + 1)
        for value in values:
            vector.append(Approximation(value))
        return vector

    @classmethod
    def with_capacity(cls, capacity: int) -> 'Vector':
        return cls(capacity)

    @classmethod
    def with_size(cls, length: int) -> 'Vector':
        """Vector of length exact zeros with capacity == length"""
        vector = cls(length)
        vector._elements[:length] = ZERO
        vector._length = length
        return vector

    @classmethod
    def zero(cls, size: int) -> 'Vector':
        return cls.with_size(size)

    @classmethod
    def from_numbers(cls, values: Iterable[Numeric]) -> 'Vector':
        """Build a vector keeping the representation of each value (ints and fractions stay exact)."""
        values = [RealNumber.value_of(value) for value in values]
        vector = cls(len(values))
        vector._elements[:len(values)] = values
        vector._length = len(values)
        return vector

    def clone(self) -> 'Vector':
        return Vector.from_numbers(self)

    # =========================================================================
    # Storage
    # =========================================================================

    @property
    def capacity(self) -> int:
        return self._elements.shape[0]

    def append(self, value: Numeric) -> None:
        """Add value at the end, doubling the capacity if the buffer is full."""
        if self._length == self.capacity:
            self._reserve(max(1, 2 * self.capacity))
        self._elements[self._length] = RealNumber.value_of(value)
        self._length += 1

    def _reserve(self, capacity: int) -> None:
        LOG.debug("Growing vector storage from %d to %d elements.", self.capacity, capacity)
        elements = np.empty(capacity, dtype=object)
        elements[:self._length] = self._elements[:self._length]
        self._elements = elements

    def __len__(self) -> int:
        return self._length

    def dim(self) -> int:
        return self._length

    def __iter__(self):
        return iter(self._elements[:self._length].tolist())

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector.from_numbers(self._elements[:self._length][index])
        if index < -self._length or index >= self._length:
            raise IndexError(f"Index {index} out of range for a vector of length {self._length}.")
        return self._elements[index % self._length]

    def to_list(self) -> List[RealNumber]:
        return self._elements[:self._length].tolist()

    # =========================================================================
    # Element-wise and scalar arithmetic
    # =========================================================================

    def _check_same_length(self, other: 'Vector', action: str) -> None:
        if len(self) != len(other):
            raise DimensionMismatchError(f"Vectors must have the same size to {action} "
                                         f"({len(self)} != {len(other)}).",
                                         expected=len(self),
                                         actual=len(other))

    def _check_three_dimensional(self, other: Optional['Vector'], action: str) -> None:
        for vector in (self, other):
            if vector is not None and len(vector) != 3:
                raise DimensionMismatchError(f"{action} is only applicable to 3D vectors, got {len(vector)} elements.",
                                             expected=3,
                                             actual=len(vector))

    def add(self, other: 'Vector') -> 'Vector':
        self._check_same_length(other, 'be added')
        return Vector.from_numbers(a.add(b) for a, b in zip(self, other))

    def subtract(self, other: 'Vector') -> 'Vector':
        self._check_same_length(other, 'be subtracted')
        return Vector.from_numbers(a.subtract(b) for a, b in zip(self, other))

    def multiply(self, scalar: Numeric) -> 'Vector':
        scalar = RealNumber.value_of(scalar)
        return Vector.from_numbers(element.multiply(scalar) for element in self)

    def divide(self, scalar: Numeric) -> 'Vector':
        scalar = RealNumber.value_of(scalar)
        if scalar.is_zero():
            raise DivisionByZeroError("Division of a vector by zero.")
        return Vector.from_numbers(element.divide(scalar) for element in self)

    def negate(self) -> 'Vector':
        return Vector.from_numbers(element.negate() for element in self)

    def translate(self, offset: 'Vector') -> 'Vector':
        self._check_same_length(offset, 'be translated')
        return self.add(offset)

    def to_approximate(self) -> 'Vector':
        return Vector.from_numbers(element.as_approximate() for element in self)

    def to_fractions(self, max_denominator: Optional[int] = None) -> 'Vector':
        """
        Convert every element into a fraction.

        Without max_denominator approximations are truncated (as_fraction),
        otherwise they are replaced by the closest fraction with a bounded
        denominator.
        """
        if max_denominator is None:
            return Vector.from_numbers(element.as_fraction() for element in self)
        return Vector.from_numbers(element.limit_fraction(max_denominator) for element in self)

    # =========================================================================
    # Geometry
    # =========================================================================

    def dot(self, other: 'Vector') -> RealNumber:
        self._check_same_length(other, 'calculate the dot product')
        result = ZERO
        for a, b in zip(self, other):
            result = result.add(a.multiply(b))
        return result

    def norm(self, policy: Optional[str] = None) -> RealNumber:
        """
        Euclidean norm sqrt(v . v).

        The square root follows the root policy: under 'promote' the norm of
        an exact vector is exact only if the dot product is a perfect square,
        under 'truncate' it is the element-wise truncated root.
        """
        return self.dot(self).sqrt(policy)

    def normalize(self, policy: Optional[str] = None) -> 'Vector':
        norm = self.norm(policy)
        if norm.is_zero():
            raise DivisionByZeroError("Cannot normalize a vector with zero norm.")
        return self.divide(norm)

    def cross(self, other: 'Vector') -> 'Vector':
        self._check_three_dimensional(other, 'Cross product')
        a0, a1, a2 = self
        b0, b1, b2 = other
        return Vector.from_numbers([
            a1.multiply(b2).subtract(a2.multiply(b1)),
            a2.multiply(b0).subtract(a0.multiply(b2)),
            a0.multiply(b1).subtract(a1.multiply(b0)),
        ])

    def angle(self, other: 'Vector') -> RealNumber:
        """Angle between both vectors in radians, computed in quad precision"""
        self._check_same_length(other, 'calculate the angle')
        # quad precision norms whatever the root policy
        norms = self.to_approximate().norm().multiply(other.to_approximate().norm())
        if norms.is_zero():
            raise DivisionByZeroError("The angle to a zero vector is undefined.")
        cosine = self.dot(other).divide(norms)
        # rounding can push the cosine marginally outside [-1, 1]
        if cosine > ONE:
            cosine = ONE
        elif cosine < ONE.negate():
            cosine = ONE.negate()
        return cosine.acos()

    def distance(self, other: 'Vector', policy: Optional[str] = None) -> RealNumber:
        self._check_same_length(other, 'calculate the distance')
        return self.subtract(other).norm(policy)

    def project(self, onto: 'Vector') -> 'Vector':
        """Projection of this vector onto the line spanned by onto"""
        self._check_same_length(onto, 'be projected')
        length_squared = onto.dot(onto)
        if length_squared.is_zero():
            raise DivisionByZeroError("Cannot project onto a zero vector.")
        return onto.multiply(self.dot(onto).divide(length_squared))

    def reject(self, onto: 'Vector') -> 'Vector':
        """Component of this vector orthogonal to onto"""
        return self.subtract(self.project(onto))

    def reflect(self, normal: 'Vector') -> 'Vector':
        """Mirror image across the hyperplane orthogonal to normal"""
        return self.subtract(self.project(normal).multiply(2))

    def rotate(self, axis: 'Vector', angle: Numeric) -> 'Vector':
        """
        Rotate a 3D vector by angle (radians) around axis with Rodrigues' formula.

            v cos(t) + (k x v) sin(t) + k (k . v) (1 - cos(t))

        where k is the normalized axis. The result consists of approximations.
        """
        self._check_three_dimensional(axis, 'Rotation')
        angle = RealNumber.value_of(angle)
        unit = axis.to_approximate().normalize()
        cosine, sine = angle.cos(), angle.sin()
        return (self.multiply(cosine)
                .add(unit.cross(self).multiply(sine))
                .add(unit.multiply(unit.dot(self).multiply(ONE.subtract(cosine)))))

    def rotate_x(self, angle: Numeric) -> 'Vector':
        return self.rotate(Vector.from_numbers([1, 0, 0]), angle)

    def rotate_y(self, angle: Numeric) -> 'Vector':
        return self.rotate(Vector.from_numbers([0, 1, 0]), angle)

    def rotate_z(self, angle: Numeric) -> 'Vector':
        return self.rotate(Vector.from_numbers([0, 0, 1]), angle)

    def is_close(self, other: 'Vector', rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        return len(self) == len(other) and all(a.is_close(b, rel_tol, abs_tol) for a, b in zip(self, other))

    # =========================================================================
    # Printing
    # =========================================================================

    def format(self, precision: Optional[int] = None) -> str:
        return '[' + ', '.join(element.format(precision) for element in self) + ']'

    def write_to(self, writer, precision: Optional[int] = None) -> None:
        writer.write(self.format(precision))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return 'Vector([' + ', '.join(repr(element) for element in self) + '])'

    # =========================================================================
    # Python operator overloading
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, Vector):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None
