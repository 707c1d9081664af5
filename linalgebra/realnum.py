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
Real numbers with an exact and an approximate representation.

A RealNumber is either an ExactFraction, a pair of signed 64-bit integers, or
an Approximation, a binary floating point value with quad precision (113 bit
significand). Binary operations on two fractions are carried out in exact
integer arithmetic. As soon as one operand is an approximation, both operands
are converted to quad precision floats and the result is an approximation.
Exactness is therefore lost monotonically along a chain of operations.

Fractions are never reduced implicitly:

    >>> third = ExactFraction(1, 3)
    >>> str(third + third)
    '6/9'
    >>> str((third + third).fracsimp())
    '2/3'

Roots, powers and the exponential function on fractions depend on the active
root policy, see linalgebra.config.
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Optional, Union
import logging
import math
import numbers
import operator

from mpmath.ctx_mp import MPContext
from sympy import Rational, integer_nthroot

from .names import *
from .config import get_default_precision, resolve_root_policy
from .errors import DegenerateValueError, DivisionByZeroError, NumberOverflowError

LOG = logging.getLogger(__name__)

# private mpmath context, the global mpmath precision is left untouched
QUAD = MPContext()
QUAD.prec = QUAD_PRECISION_BITS
_QUAD_OVERFLOW = QUAD.ldexp(1, QUAD_MAX_EXPONENT)
_QUAD_UNDERFLOW = QUAD.ldexp(1, QUAD_MIN_EXPONENT)

Numeric = Union['RealNumber', int, float, Fraction, Rational, str]


# =============================================================================
# Helpers
# =============================================================================


def _check_int64(value: int, role: str) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise NumberOverflowError(f"The {role} {value} does not fit into a signed 64-bit integer.")
    return value


def _truncate_to_int64(value, role: str) -> int:
    """Truncate a quad float towards zero, refusing results beyond the int64 range."""
    if QUAD.isnan(value) or QUAD.isinf(value):
        raise DegenerateValueError(f"Cannot truncate the non-finite value {value} to an integer.")
    if abs(value) >= INT64_MAX + 1:
        raise NumberOverflowError(f"The {role} {QUAD.nstr(value, 20)} does not fit into a signed 64-bit integer.")
    return int(value)


def _mpf_to_fraction(value) -> Fraction:
    # every quad float is a dyadic rational m * 2**e with |m| < 2**113
    mantissa, exponent = QUAD.frexp(value)
    scaled = int(QUAD.ldexp(mantissa, QUAD_PRECISION_BITS))
    return Fraction(scaled) * Fraction(2)**(exponent - QUAD_PRECISION_BITS)


def _format_fixed(value: Fraction, precision: int) -> str:
    scaled = round(value * 10**precision)
    sign = '-' if value < 0 else ''
    digits = str(abs(scaled))
    if precision == 0:
        return sign + digits
    digits = digits.rjust(precision + 1, '0')
    return sign + digits[:-precision] + '.' + digits[-precision:]


def _resolve_precision(precision: Optional[int]) -> int:
    if precision is None:
        return get_default_precision()
    if not isinstance(precision, int) or precision < 0:
        raise ValueError(f"Precision must be a non-negative integer, got {precision!r}.")
    return precision


def _quad_power(base, exponent):
    """base ** exponent in quad precision, refusing complex and infinite results."""
    if base == 0:
        if exponent < 0:
            raise DivisionByZeroError("Zero cannot be raised to a negative power.")
        return QUAD.mpf(1) if exponent == 0 else QUAD.mpf(0)
    if QUAD.isint(exponent):
        return base**int(exponent)
    if base < 0:
        raise DegenerateValueError(f"A negative base cannot be raised to the non-integer power {exponent}.")
    return base**exponent


def _quad_cbrt(value):
    if value < 0:
        return -QUAD.cbrt(-value)
    return QUAD.cbrt(value)


def _quad_sqrt(value):
    if value < 0:
        raise DegenerateValueError("Square root of a negative value.")
    return QUAD.sqrt(value)


def _coerce(value) -> Optional['RealNumber']:
    # strings are only accepted by value_of, not by the operators
    if isinstance(value, str):
        return None
    try:
        return RealNumber.value_of(value)
    except TypeError:
        return None


# =============================================================================
# RealNumber
# =============================================================================


class RealNumber(ABC):
    """
    A real number held either as an exact fraction or as a quad precision approximation.

    Instances are immutable. All operations return new objects. Operands of
    binary operations may also be plain Python numbers, they are converted
    with RealNumber.value_of.
    """

    __slots__ = ()

    @staticmethod
    def value_of(value: Numeric) -> 'RealNumber':
        """
        Factory method creating a RealNumber from various types.

        ints, fractions.Fraction, sympy.Rational and strings of the form "n/d"
        or "n" become exact fractions. floats, mpmath floats and other
        decimal strings become approximations.
        """
        if isinstance(value, RealNumber):
            return value
        if hasattr(value, '_mpf_'):
            return Approximation(value)
        if isinstance(value, Rational):
            return ExactFraction(int(value.p), int(value.q))
        if isinstance(value, Fraction):
            return ExactFraction(value.numerator, value.denominator)
        if isinstance(value, numbers.Integral):
            return ExactFraction(int(value), 1)
        if isinstance(value, numbers.Real):
            return Approximation(float(value))
        if isinstance(value, str):
            text = value.strip()
            if '/' in text:
                parts = text.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return ExactFraction(int(parts[0]), int(parts[1]))
            try:
                return ExactFraction(int(text), 1)
            except ValueError:
                return Approximation(text)
        raise TypeError(f"Cannot convert {type(value).__name__} to a RealNumber")

    # Variant inspection
    @property
    @abstractmethod
    def kind(self) -> str:
        pass

    def is_fraction(self) -> bool:
        return self.kind == FRACTION

    def is_approximate(self) -> bool:
        return self.kind == APPROXIMATE

    @abstractmethod
    def quad(self):
        """The value as a quad precision mpmath float"""

    @abstractmethod
    def exact_value(self) -> Fraction:
        """The exact rational value this object stands for (binary value for approximations)"""

    def signum(self) -> int:
        value = self.exact_value()
        return (value > 0) - (value < 0)

    def is_zero(self) -> bool:
        return self.signum() == 0

    # Binary arithmetic
    def add(self, other: Numeric) -> 'RealNumber':
        other = RealNumber.value_of(other)
        if isinstance(self, ExactFraction) and isinstance(other, ExactFraction):
            return ExactFraction(self.numerator * other.denominator + other.numerator * self.denominator,
                                 self.denominator * other.denominator)
        return Approximation(self.quad() + other.quad())

    def subtract(self, other: Numeric) -> 'RealNumber':
        other = RealNumber.value_of(other)
        if isinstance(self, ExactFraction) and isinstance(other, ExactFraction):
            return ExactFraction(self.numerator * other.denominator - other.numerator * self.denominator,
                                 self.denominator * other.denominator)
        return Approximation(self.quad() - other.quad())

    def multiply(self, other: Numeric) -> 'RealNumber':
        other = RealNumber.value_of(other)
        if isinstance(self, ExactFraction) and isinstance(other, ExactFraction):
            return ExactFraction(self.numerator * other.numerator, self.denominator * other.denominator)
        return Approximation(self.quad() * other.quad())

    def divide(self, other: Numeric) -> 'RealNumber':
        """
        Divide by other.

        (a/b) / (c/d) = (a*d) / (b*c) for two fractions, quad precision
        division otherwise.

        Raises:
            DivisionByZeroError: if other is zero
        """
        other = RealNumber.value_of(other)
        if other.is_zero():
            raise DivisionByZeroError(f"Division of {self} by zero.")
        if isinstance(self, ExactFraction) and isinstance(other, ExactFraction):
            return ExactFraction(self.numerator * other.denominator, self.denominator * other.numerator)
        return Approximation(self.quad() / other.quad())

    def pow(self, exponent: Numeric, policy: Optional[str] = None) -> 'RealNumber':
        """
        Raise this number to the power of exponent.

        If either operand is an approximation, the power is computed in quad
        precision. For two fractions the root policy applies:

            promote:  exact if the result is a fraction (integer exponents,
                      or exponents p/q where numerator and denominator of the
                      base are perfect q-th powers), approximation otherwise.
            truncate: numerator and denominator are raised separately and
                      truncated back to integers.
        """
        exponent = RealNumber.value_of(exponent)
        policy = resolve_root_policy(policy)
        if isinstance(self, ExactFraction) and isinstance(exponent, ExactFraction):
            if policy == TRUNCATE:
                power = exponent.quad()
                # the sign belongs to the numerator, -4/-9 is raised like 4/9
                base = self if self.denominator > 0 else ExactFraction(-self.numerator, -self.denominator)
                return base._truncated(lambda element: _quad_power(element, power))
            return self._exact_pow(exponent.exact_value())
        return Approximation(_quad_power(self.quad(), exponent.quad()))

    # Unary operations
    @abstractmethod
    def negate(self) -> 'RealNumber':
        pass

    @abstractmethod
    def invert(self) -> 'RealNumber':
        pass

    @abstractmethod
    def abs(self) -> 'RealNumber':
        pass

    @abstractmethod
    def sqrt(self, policy: Optional[str] = None) -> 'RealNumber':
        pass

    @abstractmethod
    def cbrt(self, policy: Optional[str] = None) -> 'RealNumber':
        pass

    @abstractmethod
    def exp(self, policy: Optional[str] = None) -> 'RealNumber':
        pass

    def cos(self) -> 'Approximation':
        return Approximation(QUAD.cos(self.quad()))

    def sin(self) -> 'Approximation':
        return Approximation(QUAD.sin(self.quad()))

    def acos(self) -> 'Approximation':
        """Arc cosine in radians, defined on [-1, 1]"""
        value = self.quad()
        if value < -1 or value > 1:
            raise DegenerateValueError(f"Arc cosine is undefined for {self.format()}.")
        return Approximation(QUAD.acos(value))

    # Conversions
    @abstractmethod
    def as_fraction(self) -> 'ExactFraction':
        pass

    @abstractmethod
    def as_approximate(self) -> 'Approximation':
        pass

    @abstractmethod
    def fracsimp(self) -> 'RealNumber':
        pass

    def limit_fraction(self, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> 'ExactFraction':
        """Closest fraction whose denominator does not exceed max_denominator"""
        value = self.exact_value().limit_denominator(max_denominator)
        return ExactFraction(value.numerator, value.denominator)

    def is_close(self, other: Numeric, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        other = RealNumber.value_of(other)
        a, b = self.quad(), other.quad()
        return abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    # Printing
    @abstractmethod
    def format(self, precision: Optional[int] = None) -> str:
        pass

    def format_as_fraction(self) -> str:
        return self.as_fraction().format()

    def format_as_approximate(self, precision: Optional[int] = None) -> str:
        return self.as_approximate().format(precision)

    def write_to(self, writer, precision: Optional[int] = None) -> None:
        """Write the printed form to a text stream"""
        writer.write(self.format(precision))

    def __str__(self) -> str:
        return self.format()

    # Python operator overloading
    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __pow__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.pow(other)

    def __rpow__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.pow(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __float__(self) -> float:
        return float(self.quad())

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Comparisons use the exact value, so 1/2 == 2/4 == Approximation(0.5)
    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.exact_value() == other.exact_value()

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.exact_value() < other.exact_value()

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.exact_value() <= other.exact_value()

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.exact_value() > other.exact_value()

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.exact_value() >= other.exact_value()

    def __hash__(self) -> int:
        return hash(self.exact_value())


# =============================================================================
# Exact variant
# =============================================================================


class ExactFraction(RealNumber):
    """
    numerator/denominator with both parts in the signed 64-bit range.

    The fraction is stored as given, fracsimp() reduces it to lowest terms.

    Raises:
        DivisionByZeroError: for a zero denominator
        NumberOverflowError: if a part leaves the signed 64-bit range
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise DivisionByZeroError(f"The fraction {numerator}/0 has a zero denominator.")
        self._numerator = _check_int64(numerator, 'numerator')
        self._denominator = _check_int64(denominator, 'denominator')

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def kind(self) -> str:
        return FRACTION

    def quad(self):
        return QUAD.mpf(self._numerator) / QUAD.mpf(self._denominator)

    def exact_value(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def negate(self) -> 'ExactFraction':
        return ExactFraction(-self._numerator, self._denominator)

    def invert(self) -> 'ExactFraction':
        """Swap numerator and denominator"""
        if self._numerator == 0:
            raise DivisionByZeroError(f"The fraction {self} has no inverse.")
        return ExactFraction(self._denominator, self._numerator)

    def abs(self) -> 'ExactFraction':
        return ExactFraction(abs(self._numerator), abs(self._denominator))

    def sqrt(self, policy: Optional[str] = None) -> RealNumber:
        if self.signum() < 0:
            raise DegenerateValueError(f"Square root of the negative value {self}.")
        if resolve_root_policy(policy) == TRUNCATE:
            return self._truncated_root(2)
        root = self._exact_root(2)
        if root is not None:
            return root
        LOG.debug("sqrt(%s) is irrational, promoting to an approximation.", self)
        return Approximation(QUAD.sqrt(self.quad()))

    def cbrt(self, policy: Optional[str] = None) -> RealNumber:
        if resolve_root_policy(policy) == TRUNCATE:
            return self._truncated_root(3)
        root = self._exact_root(3)
        if root is not None:
            return root
        LOG.debug("cbrt(%s) is irrational, promoting to an approximation.", self)
        return Approximation(_quad_cbrt(self.quad()))

    def exp(self, policy: Optional[str] = None) -> RealNumber:
        if resolve_root_policy(policy) == TRUNCATE:
            return self._truncated(QUAD.exp)
        if self._numerator == 0:
            return ExactFraction(1, 1)
        return Approximation(QUAD.exp(self.quad()))

    def as_fraction(self) -> 'ExactFraction':
        return self

    def as_approximate(self) -> 'Approximation':
        return Approximation(self.quad())

    def fracsimp(self) -> 'ExactFraction':
        """
        Reduce to lowest terms with the Euclidean greatest common divisor.

        The sign is moved to the numerator, so the result has a positive
        denominator and gcd(numerator, denominator) == 1.
        """
        divisor = math.gcd(self._numerator, self._denominator)
        if divisor == 0:
            raise DegenerateValueError(f"Cannot simplify the degenerate fraction {self}.")
        numerator, denominator = self._numerator // divisor, self._denominator // divisor
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return ExactFraction(numerator, denominator)

    def format(self, precision: Optional[int] = None) -> str:
        return f"{self._numerator}/{self._denominator}"

    def _exact_root(self, degree: int) -> Optional['ExactFraction']:
        """The exact degree-th root, or None if numerator or denominator is no perfect power"""
        negative = (self._numerator < 0) != (self._denominator < 0)
        if negative and degree % 2 == 0:
            return None
        numerator, exact_numerator = integer_nthroot(abs(self._numerator), degree)
        denominator, exact_denominator = integer_nthroot(abs(self._denominator), degree)
        if not (exact_numerator and exact_denominator):
            return None
        return ExactFraction(-int(numerator) if negative else int(numerator), int(denominator))

    def _integer_pow(self, exponent: int) -> 'ExactFraction':
        numerator, denominator = self._numerator, self._denominator
        if exponent == 0:
            return ExactFraction(1, 1)
        if exponent < 0:
            if numerator == 0:
                raise DivisionByZeroError("Zero cannot be raised to a negative power.")
            numerator, denominator, exponent = denominator, numerator, -exponent
        # |x| >= 2 raised to more than 64 always leaves the int64 range
        if exponent > 64 and (abs(numerator) > 1 or abs(denominator) > 1):
            raise NumberOverflowError(f"{self} raised to {exponent} does not fit into signed 64-bit integers.")
        return ExactFraction(numerator**exponent, denominator**exponent)

    def _exact_pow(self, exponent: Fraction) -> RealNumber:
        p, q = exponent.numerator, exponent.denominator
        if self._numerator == 0:
            if p < 0:
                raise DivisionByZeroError("Zero cannot be raised to a negative power.")
            return ExactFraction(1, 1) if p == 0 else ExactFraction(0, 1)
        if q == 1:
            return self._integer_pow(p)
        root = self._exact_root(q)
        if root is not None:
            return root._integer_pow(p)
        LOG.debug("%s ** (%s) is irrational, promoting to an approximation.", self, exponent)
        power = QUAD.mpf(p) / q
        if self.signum() < 0 and q % 2 == 1:
            # odd roots of negative values are real
            magnitude = _quad_power(-self.quad(), power)
            return Approximation(-magnitude if p % 2 else magnitude)
        return Approximation(_quad_power(self.quad(), power))

    def _truncated(self, function) -> 'ExactFraction':
        """Apply function to numerator and denominator separately and truncate both results"""
        numerator = _truncate_to_int64(function(QUAD.mpf(self._numerator)), 'numerator')
        denominator = _truncate_to_int64(function(QUAD.mpf(self._denominator)), 'denominator')
        if denominator == 0:
            raise DivisionByZeroError(f"Truncating the denominator of {self} produced zero.")
        return ExactFraction(numerator, denominator)

    def _truncated_root(self, degree: int) -> 'ExactFraction':
        """Integer roots of numerator and denominator, truncated towards zero"""
        parts = []
        for part in (self._numerator, self._denominator):
            root = int(integer_nthroot(abs(part), degree)[0])
            parts.append(-root if part < 0 and degree % 2 == 1 else root)
        return ExactFraction(*parts)

    def __repr__(self) -> str:
        return f"ExactFraction({self._numerator}, {self._denominator})"


# =============================================================================
# Approximate variant
# =============================================================================


class Approximation(RealNumber):
    """A finite quad precision floating point value"""

    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, RealNumber):
            value = value.quad()
        elif isinstance(value, Fraction):
            value = QUAD.mpf(value.numerator) / QUAD.mpf(value.denominator)
        else:
            value = QUAD.mpf(value)
        if QUAD.isnan(value) or QUAD.isinf(value):
            raise DegenerateValueError(f"Approximations must be finite, got {value}.")
        if abs(value) >= _QUAD_OVERFLOW:
            raise DegenerateValueError(f"{QUAD.nstr(value, 10)} exceeds the range of quad precision floats.")
        if abs(value) < _QUAD_UNDERFLOW:
            value = QUAD.mpf(0)
        self._value = value

    @property
    def value(self):
        return self._value

    @property
    def kind(self) -> str:
        return APPROXIMATE

    def quad(self):
        return self._value

    def exact_value(self) -> Fraction:
        return _mpf_to_fraction(self._value)

    def signum(self) -> int:
        return int(QUAD.sign(self._value))

    def negate(self) -> 'Approximation':
        return Approximation(-self._value)

    def invert(self) -> 'Approximation':
        if self._value == 0:
            raise DivisionByZeroError("Reciprocal of zero.")
        return Approximation(1 / self._value)

    def abs(self) -> 'Approximation':
        return Approximation(abs(self._value))

    def sqrt(self, policy: Optional[str] = None) -> 'Approximation':
        return Approximation(_quad_sqrt(self._value))

    def cbrt(self, policy: Optional[str] = None) -> 'Approximation':
        return Approximation(_quad_cbrt(self._value))

    def exp(self, policy: Optional[str] = None) -> 'Approximation':
        return Approximation(QUAD.exp(self._value))

    def as_fraction(self) -> ExactFraction:
        """Truncate towards zero into n/1, the fractional part is discarded"""
        return ExactFraction(_truncate_to_int64(self._value, 'numerator'), 1)

    def as_approximate(self) -> 'Approximation':
        return self

    def fracsimp(self) -> 'Approximation':
        return self

    def format(self, precision: Optional[int] = None) -> str:
        return _format_fixed(self.exact_value(), _resolve_precision(precision))

    def __repr__(self) -> str:
        return f"Approximation('{QUAD.nstr(self._value, 34)}')"


ZERO = ExactFraction(0, 1)
ONE = ExactFraction(1, 1)
