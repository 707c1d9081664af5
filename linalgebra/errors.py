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
"""Exception types raised by linalgebra operations"""


class LinearAlgebraError(Exception):
    """Base class of all errors raised by the linalgebra package"""


class DimensionMismatchError(LinearAlgebraError, ValueError):
    """Operands have unequal lengths or the wrong dimensionality"""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DegenerateValueError(LinearAlgebraError, ArithmeticError):
    """An operation has no real, finite result for its operands"""


class DivisionByZeroError(DegenerateValueError, ZeroDivisionError):
    """An operation would produce a zero denominator or divide by zero"""


class NumberOverflowError(LinearAlgebraError, OverflowError):
    """An exact result does not fit into a signed 64-bit integer"""
