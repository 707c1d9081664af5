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
Dense matrices of RealNumber entries.

Entries are stored in a numpy object array. Like vectors, matrices delegate
all arithmetic to RealNumber, so a matrix of exact fractions keeps exact
sums, products and determinants.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .names import *
from .errors import DimensionMismatchError, DivisionByZeroError
from .realnum import RealNumber, Numeric, ZERO, ONE
from .vector import Vector


class Matrix:
    """
    rows x cols matrix of RealNumber.

    Args:
        rows: Number of rows
        cols: Number of columns

    The new matrix is filled with exact zeros.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self.data = np.empty((rows, cols), dtype=object)
        self.data.fill(ZERO)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> 'Matrix':
        return cls(rows, cols)

    @classmethod
    def identity(cls, size: int) -> 'Matrix':
        matrix = cls(size, size)
        for i in range(size):
            matrix.data[i, i] = ONE
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Numeric]]) -> 'Matrix':
        """
        Create a matrix from nested sequences, converting entries with RealNumber.value_of.

        Raises:
            DimensionMismatchError: if the rows differ in length
        """
        rows = [[RealNumber.value_of(value) for value in row] for row in rows]
        cols = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != cols:
                raise DimensionMismatchError(f"All rows must have {cols} entries, found a row with {len(row)}.",
                                             expected=cols,
                                             actual=len(row))
        matrix = cls(len(rows), cols)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                matrix.data[i, j] = value
        return matrix

    def dim(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def get(self, row: int, col: int) -> RealNumber:
        return self.data[row, col]

    def set(self, row: int, col: int, value: Numeric) -> None:
        self.data[row, col] = RealNumber.value_of(value)

    def __getitem__(self, position: Tuple[int, int]) -> RealNumber:
        row, col = position
        return self.get(row, col)

    def __setitem__(self, position: Tuple[int, int], value: Numeric) -> None:
        row, col = position
        self.set(row, col, value)

    def row(self, index: int) -> Vector:
        return Vector.from_numbers(self.data[index, :])

    def column(self, index: int) -> Vector:
        return Vector.from_numbers(self.data[:, index])

    def to_lists(self) -> List[List[RealNumber]]:
        return self.data.tolist()

    def clone(self) -> 'Matrix':
        return Matrix.from_rows(self.to_lists()) if self.rows else Matrix(0, self.cols)

    def transpose(self) -> 'Matrix':
        result = Matrix(self.cols, self.rows)
        result.data[:, :] = self.data.T
        return result

    def _check_same_shape(self, other: 'Matrix', action: str) -> None:
        if self.dim() != other.dim():
            raise DimensionMismatchError(f"Matrices must have the same dimensions to {action} "
                                         f"({self.rows}x{self.cols} != {other.rows}x{other.cols}).",
                                         expected=self.dim(),
                                         actual=other.dim())

    def _map(self, function) -> 'Matrix':
        result = Matrix(self.rows, self.cols)
        for i in range(self.rows):
            for j in range(self.cols):
                result.data[i, j] = function(i, j)
        return result

    def add(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'be added')
        return self._map(lambda i, j: self.data[i, j].add(other.data[i, j]))

    def subtract(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'be subtracted')
        return self._map(lambda i, j: self.data[i, j].subtract(other.data[i, j]))

    def multiply(self, scalar: Numeric) -> 'Matrix':
        scalar = RealNumber.value_of(scalar)
        return self._map(lambda i, j: self.data[i, j].multiply(scalar))

    def divide(self, scalar: Numeric) -> 'Matrix':
        scalar = RealNumber.value_of(scalar)
        if scalar.is_zero():
            raise DivisionByZeroError("Division of a matrix by zero.")
        return self._map(lambda i, j: self.data[i, j].divide(scalar))

    def matmul(self, other: 'Matrix') -> 'Matrix':
        """Matrix product self @ other"""
        if self.cols != other.rows:
            raise DimensionMismatchError(f"Cannot multiply a {self.rows}x{self.cols} by a "
                                         f"{other.rows}x{other.cols} matrix.",
                                         expected=self.cols,
                                         actual=other.rows)
        return Matrix(self.rows, other.cols)._map(lambda i, j: self.row(i).dot(other.column(j)))

    def apply(self, vector: Vector) -> Vector:
        """Matrix-vector product self @ vector"""
        if self.cols != len(vector):
            raise DimensionMismatchError(f"Cannot apply a {self.rows}x{self.cols} matrix to a vector "
                                         f"of length {len(vector)}.",
                                         expected=self.cols,
                                         actual=len(vector))
        return Vector.from_numbers(self.row(i).dot(vector) for i in range(self.rows))

    def determinant(self) -> RealNumber:
        """
        Determinant by Laplace expansion along the first row.

        The result is exact if all entries are exact fractions.

        Raises:
            DimensionMismatchError: if the matrix is not square
        """
        if self.rows != self.cols:
            raise DimensionMismatchError(f"Determinant requires a square matrix, got {self.rows}x{self.cols}.",
                                         expected=(self.rows, self.rows),
                                         actual=self.dim())
        if self.rows == 0:
            return ONE
        if self.rows == 1:
            return self.data[0, 0]
        if self.rows == 2:
            return self.data[0, 0].multiply(self.data[1, 1]).subtract(self.data[0, 1].multiply(self.data[1, 0]))
        det = ZERO
        for i in range(self.cols):
            minor = Matrix(self.rows - 1, self.cols - 1)
            minor.data[:, :] = np.delete(self.data[1:, :], i, axis=1)
            term = self.data[0, i].multiply(minor.determinant())
            det = det.add(term) if i % 2 == 0 else det.subtract(term)
        return det

    def format(self, precision: Optional[int] = None) -> str:
        return ''.join('[ ' + ''.join(self.data[i, j].format(precision) + ' ' for j in range(self.cols)) + ']\n'
                       for i in range(self.rows))

    def write_to(self, writer, precision: Optional[int] = None) -> None:
        writer.write(self.format(precision))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.data.tolist()!r})"

    # Python operator overloading
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        return self.divide(scalar)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, Vector):
            return self.apply(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dim() == other.dim() and all(self.data[i, j] == other.data[i, j]
                                                 for i in range(self.rows)
                                                 for j in range(self.cols))

    __hash__ = None
