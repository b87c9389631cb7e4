import pytest
from epsgeom.tolerance import *
## unit tests for epsgeom tolerance.py

class TestSign:
    """three-way sign classification"""

    def test_sign(self):
        assert sign(1.0) == POSITIVE
        assert sign(-1.0) == NEGATIVE
        assert sign(0.0) == ZERO
        assert sign(epsilon / 2) == ZERO
        assert sign(-epsilon / 2) == ZERO
        assert sign(epsilon * 2) == POSITIVE
        assert sign(-epsilon * 2) == NEGATIVE

    def test_symmetric_threshold(self):
        for v in (epsilon * 0.999, epsilon * 1.001, epsilon * 10):
            assert sign(v) == -sign(-v)

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(epsilon / 10)
        assert not is_zero(epsilon)
        assert not is_zero(-epsilon * 2)

    def test_close(self):
        assert close(1.0, 1.0 + epsilon / 2)
        assert not close(1.0, 1.0 + epsilon * 2)


class TestIsGoodNum:
    def test_numbers(self):
        assert isgoodnum(1)
        assert isgoodnum(-2.5)

    def test_not_numbers(self):
        assert not isgoodnum(True)
        assert not isgoodnum('1')
        assert not isgoodnum(None)
