"""Vector tests: growth, element-wise arithmetic, geometry and printing."""
import io
import math
import pytest
from fractions import Fraction

from linalgebra import *


@pytest.fixture
def u():
    return Vector.new(3, 1.0, 2.0, 3.0)


@pytest.fixture
def v():
    return Vector.new(3, 4.0, 5.0, 6.0)


INTEGER_TRIPLES = [
    ([1, 2, 3], [4, 5, 6]),
    ([-7, 0, 2], [3, 3, -1]),
    ([10, -20, 30], [0, 0, 1]),
    ([5, 5, 5], [5, 5, 5]),
]

# =============================================================================
# Construction and growth
# =============================================================================


def test_new_builds_approximations(u):
    assert len(u) == u.dim() == 3
    assert all(element.is_approximate() for element in u)
    assert u.capacity == 4
    assert u == Vector.from_numbers([1, 2, 3])


def test_new_with_wrong_count():
    with pytest.raises(DimensionMismatchError) as error:
        Vector.new(3, 1.0, 2.0)
    assert error.value.expected == 3
    assert error.value.actual == 2


def test_with_size_is_exact_zero():
    zeros = Vector.with_size(4)
    assert len(zeros) == zeros.capacity == 4
    assert all(element.is_fraction() and element.is_zero() for element in zeros)
    assert Vector.zero(2) == Vector.from_numbers([0, 0])


def test_with_capacity_is_empty():
    empty = Vector.with_capacity(5)
    assert len(empty) == 0
    assert empty.capacity == 5
    assert empty.format() == "[]"


def test_append_doubles_capacity():
    vector = Vector.with_capacity(2)
    capacities = []
    for i in range(5):
        vector.append(i)
        capacities.append(vector.capacity)
    assert capacities == [2, 2, 4, 4, 8]
    assert vector.to_list() == [0, 1, 2, 3, 4]


def test_append_to_zero_capacity():
    vector = Vector.with_capacity(0)
    vector.append(ExactFraction(1, 2))
    assert vector.capacity == 1
    assert vector[0].format() == "1/2"


def test_negative_capacity():
    with pytest.raises(ValueError):
        Vector(-1)


def test_from_numbers_keeps_representation():
    mixed = Vector.from_numbers([Fraction(1, 2), 3, 0.25])
    assert mixed[0].is_fraction()
    assert mixed[1].is_fraction()
    assert mixed[2].is_approximate()


def test_clone_is_independent(u):
    copy = u.clone()
    copy.append(4.0)
    assert len(u) == 3
    assert len(copy) == 4
    assert copy[:3] == u


def test_indexing(u):
    assert u[0] == 1
    assert u[-1] == 3
    assert u[1:] == Vector.new(2, 2.0, 3.0)
    with pytest.raises(IndexError):
        u[3]
    with pytest.raises(IndexError):
        u[-4]


# =============================================================================
# Arithmetic
# =============================================================================


def test_sum_and_difference(u, v):
    assert u.add(v) == Vector.from_numbers([5, 7, 9])
    assert u.subtract(v) == Vector.from_numbers([-3, -3, -3])
    assert (u + v) - v == u


def test_scaling(u):
    assert u * 2 == Vector.from_numbers([2, 4, 6])
    assert 2 * u == u.multiply(Approximation(2.0))
    assert u / 2 == Vector.from_numbers([0.5, 1, 1.5])
    assert -u == Vector.from_numbers([-1, -2, -3])
    with pytest.raises(DivisionByZeroError):
        u / 0


def test_operations_do_not_modify_operands(u, v):
    u + v
    u.normalize()
    u.cross(v)
    assert u == Vector.new(3, 1.0, 2.0, 3.0)
    assert v == Vector.new(3, 4.0, 5.0, 6.0)


def test_exact_vectors_stay_exact():
    a = Vector.from_numbers([ExactFraction(1, 3), ExactFraction(1, 2)])
    b = Vector.from_numbers([ExactFraction(2, 3), ExactFraction(1, 4)])
    assert all(element.is_fraction() for element in a + b)
    assert all(element.is_fraction() for element in a * ExactFraction(3, 1))
    assert a.dot(b).is_fraction()
    assert a.dot(b) == Fraction(2, 9) + Fraction(1, 8)


@pytest.mark.parametrize("operation", ['add', 'subtract', 'dot', 'translate', 'distance', 'angle'])
def test_size_mismatch(operation, u):
    other = Vector.new(2, 1.0, 2.0)
    with pytest.raises(DimensionMismatchError):
        getattr(u, operation)(other)
    # dimension errors are also value errors
    with pytest.raises(ValueError):
        getattr(other, operation)(u)


def test_translate(u, v):
    assert u.translate(v) == u + v


def test_conversions():
    values = Vector.new(3, 2.5, -1.75, 0.5)
    assert values.to_fractions().format() == "[2/1, -1/1, 0/1]"
    assert values.to_fractions(10).format() == "[5/2, -7/4, 1/2]"
    exact = Vector.from_numbers([1, ExactFraction(1, 4)])
    assert all(element.is_approximate() for element in exact.to_approximate())
    assert exact.to_approximate() == exact


# =============================================================================
# Dot, cross and norm
# =============================================================================


def test_dot_and_cross(u, v):
    assert u.dot(v) == 32
    assert u.cross(v) == Vector.from_numbers([-3, 6, -3])


@pytest.mark.parametrize("first,second", INTEGER_TRIPLES)
def test_dot_is_symmetric(first, second):
    a, b = Vector.from_numbers(first), Vector.from_numbers(second)
    assert a.dot(b) == b.dot(a)


@pytest.mark.parametrize("first,second", INTEGER_TRIPLES)
def test_cross_is_orthogonal(first, second):
    a, b = Vector.from_numbers(first), Vector.from_numbers(second)
    product = a.cross(b)
    assert product.dot(a) == 0
    assert product.dot(b) == 0
    assert b.cross(a) == -product


def test_cross_requires_3d():
    with pytest.raises(DimensionMismatchError):
        Vector.new(2, 1.0, 2.0).cross(Vector.new(2, 3.0, 4.0))
    with pytest.raises(DimensionMismatchError):
        Vector.new(3, 1.0, 2.0, 3.0).cross(Vector.new(4, 1.0, 2.0, 3.0, 4.0))


@pytest.mark.parametrize("values", [[0, 0, 0], [1, 0, 0], [-3, 4, 12], [0.5, -0.25, 2.0]])
def test_norm_is_non_negative(values, curr_policy):
    vector = Vector.from_numbers(values)
    norm = vector.norm(curr_policy)
    assert norm >= 0
    assert norm.is_zero() == all(value == 0 for value in values)


def test_norm_of_perfect_square_is_exact(curr_policy):
    norm = Vector.from_numbers([3, 4]).norm(curr_policy)
    assert norm.is_fraction()
    assert norm == 5


def test_norm_of_non_square():
    vector = Vector.from_numbers([1, 1])
    promoted = vector.norm(PROMOTE)
    assert promoted.is_approximate()
    assert promoted.is_close(math.sqrt(2))
    truncated = vector.norm(TRUNCATE)
    assert truncated.is_fraction()
    assert truncated == 1


def test_normalize(u):
    unit = u.normalize()
    assert unit.norm().is_close(1)
    assert unit.format(3) == "[0.267, 0.535, 0.802]"


def test_normalize_exact_vector():
    unit = Vector.from_numbers([0, 3, 4]).normalize(PROMOTE)
    assert all(element.is_fraction() for element in unit)
    assert unit == Vector.from_numbers([0, Fraction(3, 5), Fraction(4, 5)])


def test_normalize_zero_vector(curr_policy):
    with pytest.raises(DivisionByZeroError):
        Vector.zero(3).normalize(curr_policy)


# =============================================================================
# Geometry
# =============================================================================


def test_angle():
    x = Vector.from_numbers([1, 0, 0])
    y = Vector.from_numbers([0, 1, 0])
    assert x.angle(y).is_close(math.pi / 2)
    assert x.angle(-x).is_close(math.pi)
    diagonal = Vector.new(3, 1.0, 1.0, 0.0)
    assert x.angle(diagonal).is_close(math.pi / 4)


def test_angle_to_itself(u):
    assert u.angle(u).is_close(0)


def test_angle_to_zero_vector(u):
    with pytest.raises(DivisionByZeroError):
        u.angle(Vector.zero(3))


def test_distance(u, v):
    assert Vector.from_numbers([0, 0]).distance(Vector.from_numbers([3, 4])) == 5
    assert u.distance(v).is_close(math.sqrt(27))
    assert u.distance(v) == v.distance(u)


def test_project_and_reject():
    a = Vector.from_numbers([3, 4])
    b = Vector.from_numbers([1, 0])
    assert a.project(b) == Vector.from_numbers([3, 0])
    assert a.reject(b) == Vector.from_numbers([0, 4])
    assert a.project(b) + a.reject(b) == a
    assert a.reject(b).dot(b) == 0
    with pytest.raises(DivisionByZeroError):
        a.project(Vector.zero(2))


def test_reflect():
    a = Vector.from_numbers([1, 2])
    mirrored = a.reflect(Vector.from_numbers([0, 1]))
    assert mirrored == Vector.from_numbers([1, -2])
    assert mirrored.dot(mirrored) == a.dot(a)


def test_rotate_about_coordinate_axes():
    x = Vector.from_numbers([1, 0, 0])
    y = Vector.from_numbers([0, 1, 0])
    z = Vector.from_numbers([0, 0, 1])
    assert x.rotate_z(math.pi / 2).is_close(y)
    assert y.rotate_x(math.pi / 2).is_close(z)
    assert z.rotate_y(math.pi / 2).is_close(x)
    assert x.rotate_x(1.234).is_close(x)


def test_rotate_about_arbitrary_axis(u):
    axis = Vector.new(3, 1.0, 1.0, 1.0)
    rotated = u.rotate(axis, 2 * math.pi / 3)
    # a third of a full turn around the diagonal permutes the coordinates
    assert rotated.is_close(Vector.from_numbers([3, 1, 2]))
    assert rotated.norm().is_close(u.norm())


def test_angle_ignores_root_policy(curr_policy):
    x = Vector.from_numbers([1, 0, 0])
    diagonal = Vector.from_numbers([1, 1, 0])
    with root_policy(curr_policy):
        assert x.angle(diagonal).is_close(math.pi / 4)
        assert diagonal.angle(Vector.from_numbers([0, 2, 2])).is_close(math.pi / 3)


def test_rotate_about_exact_axis_preserves_length(curr_policy):
    u = Vector.from_numbers([1, 2, 3])
    axis = Vector.from_numbers([1, 1, 1])
    with root_policy(curr_policy):
        rotated = u.rotate(axis, 2 * math.pi / 3)
    assert rotated.is_close(Vector.from_numbers([3, 1, 2]))
    assert rotated.dot(rotated).is_close(14)


def test_rotate_requires_3d():
    with pytest.raises(DimensionMismatchError):
        Vector.new(2, 1.0, 0.0).rotate(Vector.new(3, 0.0, 0.0, 1.0), 1.0)


# =============================================================================
# Printing
# =============================================================================


def test_format(u, v):
    assert (u + v).format(3) == "[5.000, 7.000, 9.000]"
    assert Vector.from_numbers([Fraction(1, 2), 3]).format() == "[1/2, 3/1]"
    assert str(Vector.new(1, 0.5)) == "[0.500000]"


def test_write_to(u):
    writer = io.StringIO()
    u.write_to(writer, 1)
    assert writer.getvalue() == "[1.0, 2.0, 3.0]"


def test_comparison_with_other_types(u):
    assert u != [1, 2, 3]
    assert u != Vector.new(2, 1.0, 2.0)
