"""
This module contains the definition of the Vector class, an immutable
real vector of fixed dimension, along with the elementary operations
needed by the simplex method.
"""

import numbers

import numpy as np


class DimensionMismatchError(ValueError):
    """Raised when an operation combines vectors of different dimension."""


class Vector:
    """
    An immutable element of n-dimensional real space.

    The components are held in a read-only numpy array of shape (dim,).
    Vectors compare and hash by value, and the usual overloads (+,-,*)
    return new instances. Operations between vectors of different
    dimension raise a DimensionMismatchError.
    """

    __slots__ = ("_components",)

    # numpy defers to the reflected operators, so k * v stays a Vector
    __array_ufunc__ = None

    def __init__(self, *components):
        """
        Args:
            *components: Either the coordinates given one by one, or a
                single one-dimensional array-like holding them.

        Raises:
            ValueError: If no coordinates are given or the input is not
                one-dimensional.
        """
        if len(components) == 1 and not isinstance(components[0], numbers.Real):
            data = np.array(components[0], dtype=float)
        else:
            data = np.array(components, dtype=float)
        if data.ndim != 1:
            raise ValueError("Vector components must be one-dimensional")
        if data.size == 0:
            raise ValueError("Vector must have at least one component")
        data.flags.writeable = False
        self._components = data

    @property
    def dimension(self):
        """The number of components."""
        return self._components.shape[0]

    @property
    def components(self):
        """A read-only view of the components."""
        return self._components

    def __len__(self):
        return self.dimension

    def __iter__(self):
        return (float(x) for x in self._components)

    def __getitem__(self, i):
        return float(self._components[i])

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            if dtype is not None and np.dtype(dtype) != self._components.dtype:
                raise ValueError("Converting the components to a new dtype requires a copy")
            return self._components
        if dtype is None:
            return self._components.copy()
        return self._components.astype(dtype)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.all(self._components == other._components)
        )

    def __hash__(self):
        # adding zero maps -0.0 to 0.0 so equal vectors hash alike
        return hash((self._components + 0.0).tobytes())

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, k):
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    __rmul__ = __mul__

    def __neg__(self):
        return scale(self, -1.0)

    def __repr__(self):
        return "Vector(" + ", ".join(repr(float(x)) for x in self._components) + ")"

    def __str__(self):
        return "[" + ", ".join(f"{x:.4f}" for x in self._components) + "]"


def _check_dimensions(a, b):
    if a.dimension != b.dimension:
        raise DimensionMismatchError(
            f"Dimensions must match ({a.dimension} != {b.dimension})"
        )


def add(a, b):
    """Returns the element-wise sum a + b."""
    _check_dimensions(a, b)
    return Vector(a.components + b.components)


def subtract(a, b):
    """Returns the element-wise difference a - b."""
    _check_dimensions(a, b)
    return Vector(a.components - b.components)


def scale(v, k):
    """Returns the vector v multiplied by the scalar k."""
    return Vector(v.components * float(k))


def distance(a, b):
    """Returns the Euclidean distance between a and b."""
    _check_dimensions(a, b)
    return float(np.linalg.norm(a.components - b.components))


def centroid(points):
    """
    Returns the coordinate-wise mean of a collection of vectors.

    Args:
        points: A non-empty iterable of vectors sharing one dimension.

    Raises:
        ValueError: If the collection is empty.
        DimensionMismatchError: If the dimensions differ.
    """
    points = list(points)
    if not points:
        raise ValueError("At least one vector is required")
    first = points[0]
    for point in points[1:]:
        _check_dimensions(first, point)
    return Vector(np.mean([p.components for p in points], axis=0))


def as_vector(x):
    """Returns x unchanged if it is a Vector, otherwise converts it."""
    if isinstance(x, Vector):
        return x
    return Vector(x)
