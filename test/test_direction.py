"""
Unit tests for the compass ring and grid vectors.

Tests cover:
- Vector arithmetic and 8-bit range
- Direction ring arithmetic, reversal and vectors
- Exhaustive interpolation over all 8x8 direction pairs
"""

import pytest
from gridsail.vector import Vector, VectorOverflow
from gridsail.direction import (
    Direction, InvalidDirection, add, sub, ALL,
    RIGHT, UPRIGHT, UP, UPLEFT, LEFT, DOWNLEFT, DOWN, DOWNRIGHT,
)


PAIRS = [(a, b) for a in ALL for b in ALL]


class TestVector:
    """Test Vector arithmetic and range."""

    def test_add_sub(self):
        """Test component-wise addition and subtraction."""
        assert Vector(1, 2) + Vector(3, -4) == Vector(4, -2)
        assert Vector(1, 2) - Vector(3, -4) == Vector(-2, 6)

    def test_default_is_zero(self):
        """Test that the default vector is the origin."""
        assert Vector() == Vector.zero() == Vector(0, 0)

    def test_range_limits(self):
        """Test the signed 8-bit component range."""
        Vector(127, -128)
        with pytest.raises(VectorOverflow):
            Vector(128, 0)
        with pytest.raises(VectorOverflow):
            Vector(0, -129)

    def test_overflow_is_not_wrapped(self):
        """Test that arithmetic past the range raises instead of wrapping."""
        with pytest.raises(VectorOverflow):
            Vector(127, 0) + RIGHT.vector()

    def test_fits(self):
        """Test the range check used before moving."""
        assert Vector.fits(127, -128)
        assert not Vector.fits(128, 0)
        assert not Vector.fits(0, -129)


class TestDirection:
    """Test Direction ring arithmetic."""

    def test_invalid_value(self):
        """Test that values outside the ring are rejected."""
        with pytest.raises(InvalidDirection):
            Direction(8)
        with pytest.raises(InvalidDirection):
            Direction(-1)

    def test_vectors(self):
        """Test the displacement for each direction."""
        assert RIGHT.vector() == Vector(1, 0)
        assert UPRIGHT.vector() == Vector(1, 1)
        assert UP.vector() == Vector(0, 1)
        assert UPLEFT.vector() == Vector(-1, 1)
        assert LEFT.vector() == Vector(-1, 0)
        assert DOWNLEFT.vector() == Vector(-1, -1)
        assert DOWN.vector() == Vector(0, -1)
        assert DOWNRIGHT.vector() == Vector(1, -1)

    def test_add_wraps(self):
        """Test that addition wraps modulo 8."""
        assert DOWNRIGHT + UP == UPRIGHT
        assert add(Direction(5), Direction(5)) == Direction(2)

    def test_sub_is_ring_distance(self):
        """Test that subtraction is ring distance, not vector math."""
        assert RIGHT - UP == DOWN
        assert sub(Direction(1), Direction(7)) == Direction(2)
        assert sub(Direction(7), Direction(1)) == Direction(6)

    @pytest.mark.parametrize("d", ALL)
    def test_reverse(self, d):
        """Test that reverse is an involution adding four steps."""
        assert d.reverse().reverse() == d
        assert d.reverse() == d + Direction(4)
        assert d.reverse().vector() == Vector(-d.vector().x, -d.vector().y)

    def test_arrows(self):
        """Test arrow glyphs and integer conversion."""
        assert "".join(str(d) for d in ALL) == "→↗↑↖←↙↓↘"
        assert int(UPLEFT) == 3


class TestInterpolate:
    """Test interpolation between headings."""

    def test_forward(self):
        """Test the counter-clockwise shorter path."""
        assert RIGHT.interpolate(UP) == [RIGHT, UPRIGHT, UP]

    def test_backward(self):
        """Test the clockwise shorter path."""
        assert UP.interpolate(RIGHT) == [UP, UPRIGHT, RIGHT]
        assert RIGHT.interpolate(DOWNRIGHT) == [RIGHT, DOWNRIGHT]
        assert UPRIGHT.interpolate(DOWN) == [UPRIGHT, RIGHT, DOWNRIGHT, DOWN]

    def test_same_direction(self):
        """Test that a direction interpolates to itself alone."""
        assert LEFT.interpolate(LEFT) == [LEFT]

    def test_reversal_has_no_path(self):
        """Test that opposite directions have no path."""
        assert RIGHT.interpolate(LEFT) is None
        assert DOWNRIGHT.interpolate(UPLEFT) is None

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_all_pairs(self, a, b):
        """Test endpoints, length and step size for every pair."""
        n = (b - a).value
        path = a.interpolate(b)
        if n == 4:
            assert path is None
            return
        assert path is not None
        assert path[0] == a
        assert path[-1] == b
        assert len(path) == min(n, 8 - n) + 1
        steps = {(nxt - prev).value for prev, nxt in zip(path, path[1:])}
        # one ring step each time, always the same way round
        assert steps in (set(), {1}, {7})
        if len(path) > 1:
            assert steps == ({1} if n < 4 else {7})
