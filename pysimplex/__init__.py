from pysimplex.vector import (
    Vector,
    DimensionMismatchError,
    add,
    subtract,
    scale,
    distance,
    centroid,
)

from pysimplex.nelder_mead import (
    REFLECTION,
    EXPANSION,
    CONTRACTION,
    SHRINK,
    InvalidConfigurationError,
    NelderMeadOptimiser,
    NelderMeadResult,
    axial_simplex,
    nelder_mead_step,
    optimize,
)
