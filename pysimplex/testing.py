"""
Reference objectives with known minima, used to exercise the optimiser.
"""

import numpy as np
from scipy.optimize import rosen

from .vector import Vector, as_vector


class TestProblem:
    """
    An objective function packaged with its known minimiser.

    Args:
        mapping (callable): Function taking a numpy array of components
            and returning a float.
        solution: The known minimiser as a one-dimensional array-like.
        name (str): Label used in reprs and test ids.
    """

    __test__ = False

    def __init__(self, mapping, solution, /, *, name="problem"):
        self._mapping = mapping
        self._solution = as_vector(solution)
        self._name = name

    @property
    def dimension(self):
        return self._solution.dimension

    @property
    def solution(self):
        """The known minimiser."""
        return self._solution

    @property
    def minimum(self):
        """The objective value at the known minimiser."""
        return self(self._solution)

    @property
    def name(self):
        return self._name

    def __call__(self, x):
        return float(self._mapping(np.asarray(x, dtype=float)))

    def __repr__(self):
        return f"TestProblem({self._name!r}, dimension={self.dimension})"


def quadratic_bowl(centre, /, *, weights=None):
    """
    Returns f(x) = sum_i w_i * (x_i - c_i)^2 with its minimum at the centre.

    Args:
        centre: The minimiser c.
        weights: Positive weights w. Defaults to ones.
    """
    c = np.array(as_vector(centre))
    w = np.ones_like(c) if weights is None else np.asarray(weights, dtype=float)
    if w.shape != c.shape:
        raise ValueError("weights must match the dimension of the centre")
    if np.any(w <= 0):
        raise ValueError("weights must be positive")
    return TestProblem(lambda x: np.sum(w * (x - c) ** 2), c, name="quadratic_bowl")


def rosenbrock(dim=2):
    """Returns the Rosenbrock function in dim >= 2 dimensions, minimum at ones."""
    if dim < 2:
        raise ValueError("The Rosenbrock function needs at least two dimensions")
    return TestProblem(rosen, np.ones(dim), name="rosenbrock")


def exponential_well(sign=1):
    """
    Returns f(x, y) = -x^2 exp(1 - x^2 - (x - y)^2).

    The function has two global minima of value -1 at (1, 1) and (-1, -1);
    sign selects which one is reported as the solution.
    """
    if sign not in (1, -1):
        raise ValueError("sign must be 1 or -1")

    def mapping(c):
        x, y = c
        return -(x**2) * np.exp(1.0 - x**2 - (x - y) ** 2)

    return TestProblem(mapping, Vector(sign, sign), name="exponential_well")
