from pysimplex import Vector, distance, optimize
from pysimplex.testing import exponential_well

# f(x, y) = -x^2 exp(1 - x^2 - (x - y)^2) has a minimum in each of the
# first and third quadrants. Start one triangle near each.
objective = exponential_well()

starting_simplices = [
    [Vector(0.5, 0.5), Vector(1.0, 0.5), Vector(0.5, 1.0)],
    [Vector(-0.5, -0.5), Vector(-1.0, -0.5), Vector(-0.5, -1.0)],
]
minima = [Vector(1.0, 1.0), Vector(-1.0, -1.0)]

precision = 1e-9
max_steps = 10000

for region, simplex in enumerate(starting_simplices, start=1):
    optimum = optimize(objective, simplex, precision=precision, max_steps=max_steps)
    print(f"Local minimum in region {region}: {optimum}")
    print(f"Function value there:        {objective(optimum):.10f}")
    error = min(distance(optimum, m) for m in minima)
    print(f"Distance to nearest minimum:  {error:.2e}")
