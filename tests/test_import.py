"""Test if package imports successfully."""

import pytest


def test1():
    import linalgebra
    third = linalgebra.ExactFraction(1, 3)
    assert str((third + third).fracsimp()) == "2/3"
    assert linalgebra.Vector.new(3, 1.0, 2.0, 3.0).dim() == 3


def test_namespace():
    import linalgebra
    assert not hasattr(linalgebra, 'np')
    assert linalgebra.INT64_MAX == 2**63 - 1
    assert linalgebra.QUAD_MAX_EXPONENT == 16384
