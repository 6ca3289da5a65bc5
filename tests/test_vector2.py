import pytest

from progbasics.vector2 import Vector, add, scale, subtract


def test_worked_example_with_operators():
    a, b = Vector(1, 2), Vector(3, 4)
    result = a + b
    result = result * 5 - a
    result = result + b
    assert result == Vector(22, 32)


def test_procedural_matches_operators():
    a, b = Vector(1, 2), Vector(3, 4)
    procedural = add(subtract(scale(add(a, b), 5), a), b)
    assert procedural == (a + b) * 5 - a + b


def test_augmented_assignment_matches_operators():
    a, b = Vector(1, 2), Vector(3, 4)
    result = a + b
    result *= 5
    result -= a
    result += b
    assert result == (a + b) * 5 - a + b


def test_addition_commutes():
    a, b = Vector(-3, 8), Vector(5, -1)
    assert add(a, b) == add(b, a)


def test_subtract_undoes_add():
    a, b = Vector(7, -2), Vector(4, 9)
    assert subtract(add(a, b), b) == a


def test_scale_by_zero_and_one():
    v = Vector(6, -4)
    assert scale(v, 0) == Vector(0, 0)
    assert scale(v, 1) == v
    assert 3 * v == v * 3


def test_addition_leaves_operands_unchanged():
    a, b = Vector(1, 1), Vector(2, 2)
    a + b
    assert a == Vector(1, 1)


def test_non_integer_scalar_rejected():
    with pytest.raises(TypeError):
        Vector(1, 2) * 1.5
    with pytest.raises(TypeError):
        Vector(1, 2) + 3