"""
Example: Overlap of two class-conditional distributions
-------------------------------------------------------

Compares a Normal against a Poisson on a shared grid, prints the plotting
range, the series a chart would draw and the overlap estimate, then runs the
fixed Normal-vs-Gamma Bayes error demo.

The overlap is the area under min(p1, p2); for two continuous densities with
equal priors this is the region a Bayes classifier gets wrong.
"""

import logging

from probviz import compare, normal_vs_gamma
from probviz.diagnostics import approximation_error
from probviz.presentation import cdf_series, format_error_rate, format_tick, pdf_series

logging.basicConfig(level=logging.INFO)


def main():
    result = compare(
        ("Normal", {"mu": 5.0, "sigma": 2.0}),
        ("Poisson", {"lambda": 4.0}),
    )
    print(f"x-range: [{format_tick(result.x_range.min)}, {format_tick(result.x_range.max)}]")
    print(f"{len(result.grid)} grid points, step {result.grid.step}")
    for series in pdf_series(result) + cdf_series(result):
        print(f"  {series.label:<12} {series.style:<4} stepped={series.stepped}")
    print("overlap:", result.overlap.formatted())

    errors = approximation_error(result.first_distribution, result.grid.x)
    print("Normal vs scipy:", errors)

    demo = normal_vs_gamma(mu=5.0, sigma=1.5, alpha=2.0, beta=1.0)
    print(format_error_rate(demo.error_rate))


if __name__ == "__main__":
    main()
