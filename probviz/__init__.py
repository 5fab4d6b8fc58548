from probviz.special import gamma, log_gamma, erf, factorial, combination, log_combination, beta_function
from probviz.distributions import (
    DistributionKind,
    DistributionSpec,
    ParameterSpec,
    SPECS,
    Distribution,
    make_distribution,
    Normal,
    Exponential,
    Gamma,
    Beta,
    Pareto,
    UniformContinuous,
    UniformDiscrete,
    Bernoulli,
    Binomial,
    Geometric,
    NegativeBinomial,
    Poisson,
    Hypergeometric,
)
from probviz.exceptions import (
    ProbVizError,
    ParameterDomainError,
    NumericalDegeneracy,
    UnsupportedRange,
    UnknownDistribution,
)
from probviz.config import GridConfig
from probviz.ranges import Range, union_range
from probviz.validation import ValidationResult, validate_parameters, validate_pair
from probviz.sampling import (
    Selection,
    SampleGrid,
    CurveResult,
    OverlapResult,
    Comparison,
    build_grid,
    evaluate_curve,
    compute_overlap,
    compare,
)
from probviz.bayes import normal_vs_gamma

__version__ = "0.1.0"
