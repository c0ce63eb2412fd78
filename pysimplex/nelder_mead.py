"""
Derivative-free minimisation using the simplex (Nelder-Mead) method.

The simplex is a list of N+1 vectors in N-dimensional space. Each iteration
ranks the vertices by objective value and replaces the worst one with a
reflected, expanded or contracted point, or shrinks the whole simplex
towards the best vertex. Iteration stops when every vertex lies within
`precision` of the best one, or after `max_steps` iterations.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .vector import Vector, as_vector, centroid, distance

logger = logging.getLogger(__name__)


REFLECTION = 1.0
EXPANSION = 2.0
CONTRACTION = 0.5
SHRINK = 0.5

MIN_SIMPLEX_SIZE = 3

Objective = Callable[[Vector], float]


class InvalidConfigurationError(ValueError):
    """Raised when a starting simplex or solver setting is unusable."""


@dataclass
class NelderMeadResult:
    """Result from a Nelder-Mead run.

    Attributes:
        x_best: Best vertex of the final simplex.
        f_best: Objective value at x_best.
        num_iterations: Number of simplex transformations performed.
        num_evaluations: Number of calls made to the objective.
        converged: Whether the simplex diameter fell below the precision.
        simplex: Final simplex, ranked best first.
        function_values: Best objective value at the start of each iteration.
        steps: Name of the transformation applied in each iteration.
    """

    x_best: Vector
    f_best: float
    num_iterations: int
    num_evaluations: int
    converged: bool
    simplex: List[Vector]
    function_values: List[float] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)


def rank_simplex(
    objective: Objective, simplex: Sequence[Vector]
) -> Tuple[List[Vector], List[float]]:
    """
    Sorts the vertices by ascending objective value.

    The sort is stable, so vertices with equal values keep their order.

    Returns:
        The sorted vertices and their objective values.
    """
    values = [objective(vertex) for vertex in simplex]
    order = sorted(range(len(simplex)), key=values.__getitem__)
    return [simplex[i] for i in order], [values[i] for i in order]


def simplex_diameter(simplex: Sequence[Vector]) -> float:
    """Largest distance from the first vertex to any other vertex."""
    best = simplex[0]
    return max(distance(vertex, best) for vertex in simplex[1:])


def nelder_mead_step(
    objective: Objective,
    simplex: Sequence[Vector],
    values: Optional[Sequence[float]] = None,
) -> Tuple[List[Vector], str]:
    """
    Applies a single Nelder-Mead transformation to a ranked simplex.

    Args:
        objective: The function being minimised.
        simplex: Vertices sorted by ascending objective value.
        values: Objective values of the vertices. Evaluated if not given.

    Returns:
        The new list of vertices and the name of the transformation
        applied: "reflect", "expand", "contract" or "shrink".

    Notes:
        The input sequence is not modified. The new simplex is not
        re-ranked.
    """
    if values is None:
        values = [objective(vertex) for vertex in simplex]

    best, worst = simplex[0], simplex[-1]
    f_best, f_second_worst, f_worst = values[0], values[-2], values[-1]

    new_simplex = list(simplex)
    center = centroid(simplex[:-1])

    reflected = center + (center - worst) * REFLECTION
    f_reflected = objective(reflected)

    if f_reflected < f_best:
        expanded = center + (reflected - center) * EXPANSION
        if objective(expanded) < f_reflected:
            new_simplex[-1] = expanded
            return new_simplex, "expand"
        new_simplex[-1] = reflected
        return new_simplex, "reflect"

    if f_reflected < f_second_worst:
        new_simplex[-1] = reflected
        return new_simplex, "reflect"

    contracted = center + (worst - center) * CONTRACTION
    if objective(contracted) < f_worst:
        new_simplex[-1] = contracted
        return new_simplex, "contract"

    for i in range(1, len(new_simplex)):
        new_simplex[i] = best + (new_simplex[i] - best) * SHRINK
    return new_simplex, "shrink"


def axial_simplex(x0, step=1.0) -> List[Vector]:
    """
    Builds a starting simplex around x0.

    The simplex holds x0 followed by x0 + step_i * e_i for each coordinate
    direction e_i.

    Args:
        x0: The starting point as a Vector or one-dimensional array-like.
        step: A scalar step used for every direction, or one step per
            coordinate.

    Raises:
        InvalidConfigurationError: If a step is zero or the number of steps
            does not match the dimension.
    """
    x0 = as_vector(x0)
    dim = x0.dimension
    steps = np.asarray(step, dtype=float)
    if steps.ndim == 0:
        steps = np.full(dim, float(steps))
    if steps.shape != (dim,):
        raise InvalidConfigurationError(
            f"Expected {dim} step sizes, got an array of shape {steps.shape}"
        )
    if np.any(steps == 0):
        raise InvalidConfigurationError("Step sizes must be non-zero")

    simplex = [x0]
    for i in range(dim):
        components = np.array(x0)
        components[i] += steps[i]
        simplex.append(Vector(components))
    return simplex


class NelderMeadOptimiser:
    """
    Simplex (Nelder-Mead) minimiser for functions of several real variables.

    The reflection, expansion, contraction and shrink coefficients are the
    module constants of the standard method. The objective is treated as a
    black box and no gradient information is used.

    Parameters:
        precision: The run stops once every vertex lies closer than this
            distance to the best vertex.
        max_steps: Maximum number of iterations. Reaching it is not an
            error; the best vertex found so far is returned.
    """

    def __init__(self, /, *, precision: float = 1e-6, max_steps: int = 1000) -> None:
        if not isinstance(precision, numbers.Real) or not precision > 0:
            raise InvalidConfigurationError("precision must be positive")
        if (
            isinstance(max_steps, bool)
            or not isinstance(max_steps, numbers.Integral)
            or max_steps < 0
        ):
            raise InvalidConfigurationError("max_steps must be a non-negative integer")

        self._precision = float(precision)
        self._max_steps = int(max_steps)

    @property
    def precision(self) -> float:
        return self._precision

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @staticmethod
    def check_simplex(starting_simplex) -> List[Vector]:
        """
        Validates a starting simplex and returns it as a list of vectors.

        Raises:
            InvalidConfigurationError: If there are fewer than three points,
                fewer than dimension + 1 points, or the dimensions differ.
        """
        try:
            simplex = [as_vector(point) for point in starting_simplex]
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError(f"Invalid simplex vertex: {e}") from e

        if len(simplex) < MIN_SIMPLEX_SIZE:
            raise InvalidConfigurationError(
                f"Starting simplex must contain at least {MIN_SIMPLEX_SIZE} points"
            )

        dim = simplex[0].dimension
        if any(point.dimension != dim for point in simplex):
            raise InvalidConfigurationError(
                "All points of the starting simplex must have the same dimension"
            )
        if len(simplex) < dim + 1:
            raise InvalidConfigurationError(
                f"A simplex in dimension {dim} needs at least {dim + 1} points"
            )
        return simplex

    def solve(self, objective: Objective, starting_simplex) -> NelderMeadResult:
        """
        Runs the method from a starting simplex.

        Args:
            objective: Callable mapping a Vector to a float.
            starting_simplex: Sequence of points given as vectors or
                one-dimensional array-likes. It is not modified.

        Returns:
            NelderMeadResult: The best vertex together with diagnostics.
        """
        simplex = self.check_simplex(starting_simplex)

        num_evaluations = 0

        def counted(x: Vector) -> float:
            nonlocal num_evaluations
            num_evaluations += 1
            return objective(x)

        function_values: List[float] = []
        steps: List[str] = []
        converged = False

        for _ in range(self._max_steps):
            simplex, values = rank_simplex(counted, simplex)

            if simplex_diameter(simplex) < self._precision:
                converged = True
                break

            function_values.append(float(values[0]))
            simplex, step = nelder_mead_step(counted, simplex, values)
            steps.append(step)
            logger.debug(
                "Iteration %d: %s, best value %.6e", len(steps), step, values[0]
            )
        else:
            simplex, values = rank_simplex(counted, simplex)

        if converged:
            logger.info(
                "Converged after %d iterations (%d evaluations)",
                len(steps),
                num_evaluations,
            )
        else:
            logger.info(
                "Stopped after reaching max_steps=%d without convergence",
                self._max_steps,
            )

        return NelderMeadResult(
            x_best=simplex[0],
            f_best=float(values[0]),
            num_iterations=len(steps),
            num_evaluations=num_evaluations,
            converged=converged,
            simplex=simplex,
            function_values=function_values,
            steps=steps,
        )

    def minimize(self, objective: Objective, starting_simplex) -> Vector:
        """
        Finds a local minimum of the objective.

        Returns:
            Vector: The best vertex of the final simplex.
        """
        return self.solve(objective, starting_simplex).x_best


def optimize(
    objective: Objective,
    starting_simplex,
    precision: float = 1e-6,
    max_steps: int = 1000,
) -> Vector:
    """
    Minimises an objective with the Nelder-Mead method.

    Args:
        objective: Callable mapping a Vector to a float.
        starting_simplex: At least N+1 (and at least three) points of
            dimension N.
        precision: Simplex size below which the run is considered converged.
        max_steps: Maximum number of iterations.

    Returns:
        Vector: The best point found. Evaluate the objective on it to get
            the corresponding value.

    Raises:
        InvalidConfigurationError: If the simplex or settings are invalid.
    """
    optimiser = NelderMeadOptimiser(precision=precision, max_steps=max_steps)
    return optimiser.minimize(objective, starting_simplex)
