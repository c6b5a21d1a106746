"""Points in a D-dimensional coordinate space."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from numbers import Real


class DPosition:
    """A mutable coordinate in D-dimensional space.

    The dimension is the number of coordinates given at construction and
    never changes afterwards. Ordering is lexicographic from the first
    coordinate to the last.
    """

    __slots__ = ("_coords",)

    def __init__(self, *args: Real) -> None:
        if not args:
            raise ValueError("a position needs at least one coordinate")
        for value in args:
            if not isinstance(value, Real):
                raise TypeError(f"coordinate must be a real number, not {type(value).__name__}")
        self._coords: list[Real] = list(args)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def filled(cls, dimension: int, value: Real) -> DPosition:
        """Return a position of ``dimension`` coordinates all set to ``value``."""
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        return cls(*([value] * dimension))

    @classmethod
    def zero(cls, dimension: int) -> DPosition:
        """Return the origin."""
        return cls.filled(dimension, 0.0)

    @classmethod
    def min_positive(cls, dimension: int) -> DPosition:
        """Return a position at the smallest positive normalised float."""
        return cls.filled(dimension, sys.float_info.min)

    @classmethod
    def min_negative(cls, dimension: int) -> DPosition:
        """Return a position at the most negative finite float."""
        return cls.filled(dimension, -sys.float_info.max)

    @classmethod
    def max_positive(cls, dimension: int) -> DPosition:
        """Return a position at the largest finite float."""
        return cls.filled(dimension, sys.float_info.max)

    # ------------------------------------------------------------------
    # Named accessors
    # ------------------------------------------------------------------
    @property
    def x(self) -> Real:
        """The first coordinate."""
        return self._coords[0]

    @x.setter
    def x(self, value: Real) -> None:
        self._coords[0] = value

    @property
    def y(self) -> Real:
        """The second coordinate."""
        return self._coords[1]

    @y.setter
    def y(self, value: Real) -> None:
        self._coords[1] = value

    def clear(self) -> None:
        """Set every coordinate to zero, keeping its numeric type."""
        self._coords = [type(c)(0) for c in self._coords]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def _check(self, other: object) -> DPosition:
        if not isinstance(other, DPosition):
            raise TypeError(f"expected a DPosition, not {type(other).__name__}")
        if len(other) != len(self):
            raise ValueError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )
        return other

    def dot(self, other: DPosition) -> Real:
        """Return the inner product with ``other``."""
        other = self._check(other)
        return sum((a * b for a, b in zip(self._coords, other._coords)), 0)

    def spatially_less_equal(self, other: DPosition) -> bool:
        """True when no coordinate is greater than the matching one of ``other``."""
        other = self._check(other)
        return not any(a > b for a, b in zip(self._coords, other._coords))

    def spatially_greater_equal(self, other: DPosition) -> bool:
        """True when no coordinate is less than the matching one of ``other``."""
        other = self._check(other)
        return not any(a < b for a, b in zip(self._coords, other._coords))

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Real]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> Real:
        return self._coords[index]

    def __setitem__(self, index: int, value: Real) -> None:
        self._coords[index] = value

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DPosition):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(a == b for a, b in zip(self._coords, other._coords))

    def _lexicographic(self, other: DPosition, on_tie: bool) -> bool:
        for a, b in zip(self._coords, other._coords):
            if a < b:
                return True
            if a > b:
                return False
        return on_tie

    def __lt__(self, other: DPosition) -> bool:
        if not isinstance(other, DPosition):
            return NotImplemented
        return self._lexicographic(self._check(other), False)

    def __le__(self, other: DPosition) -> bool:
        if not isinstance(other, DPosition):
            return NotImplemented
        return self._lexicographic(self._check(other), True)

    def __gt__(self, other: DPosition) -> bool:
        if not isinstance(other, DPosition):
            return NotImplemented
        return not self._lexicographic(self._check(other), True)

    def __ge__(self, other: DPosition) -> bool:
        if not isinstance(other, DPosition):
            return NotImplemented
        return not self._lexicographic(self._check(other), False)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: DPosition) -> DPosition:
        if not isinstance(other, DPosition):
            return NotImplemented
        other = self._check(other)
        return DPosition(*(a + b for a, b in zip(self._coords, other._coords)))

    def __sub__(self, other: DPosition) -> DPosition:
        if not isinstance(other, DPosition):
            return NotImplemented
        other = self._check(other)
        return DPosition(*(a - b for a, b in zip(self._coords, other._coords)))

    def __neg__(self) -> DPosition:
        return DPosition(*(-a for a in self._coords))

    def __mul__(self, scalar: Real) -> DPosition:
        if not isinstance(scalar, Real):
            return NotImplemented
        return DPosition(*(a * scalar for a in self._coords))

    def __rmul__(self, scalar: Real) -> DPosition:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> DPosition:
        if not isinstance(scalar, Real):
            return NotImplemented
        return DPosition(*(a / scalar for a in self._coords))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return " ".join(f"{c:g}" for c in self._coords)

    def __repr__(self) -> str:
        return f"DPosition({', '.join(repr(c) for c in self._coords)})"