import numpy as np
import pytest

from probviz.presentation import (
    PlotSeries,
    cdf_series,
    format_error_rate,
    format_tick,
    overlap_series,
    pdf_series,
    series_name,
)
from probviz.sampling import compare


@pytest.fixture
def mixed():
    return compare(("Normal", {"mu": 5.0, "sigma": 2.0}), ("Poisson", {"lambda": 4.0}))


def test_pdf_series_styles(mixed):
    normal, poisson = pdf_series(mixed)
    assert normal.label == "Normal PDF"
    assert normal.style == "line" and normal.fill
    assert poisson.label == "Poisson PMF"
    assert poisson.style == "bar"
    np.testing.assert_array_equal(poisson.values, mixed.second.pdf)


def test_cdf_series_steps_discrete_sides(mixed):
    normal, poisson = cdf_series(mixed)
    assert normal.label == "Normal CDF" and not normal.stepped
    assert poisson.label == "Poisson CDF" and poisson.stepped
    assert all(s.style == "line" for s in (normal, poisson))


def test_custom_names(mixed):
    first, second = pdf_series(mixed, names=("Class A", "Class B"))
    assert first.label == "Class A PDF"
    assert second.label == "Class B PMF"
    with pytest.raises(ValueError):
        cdf_series(mixed, names=("only one",))


def test_overlap_series(mixed):
    series = overlap_series(mixed)
    assert isinstance(series, PlotSeries)
    assert series.label == "Overlap (Error Region)"
    assert series.values is mixed.overlap.min_curve


def test_series_name_drops_qualifier():
    result = compare(
        ("Uniform (continuous)", {"a": 0, "b": 1}),
        ("Uniform (discrete)", {"a": 0, "b": 5}),
    )
    assert series_name(result.first_distribution) == "Uniform"
    labels = [s.label for s in pdf_series(result)]
    assert labels == ["Uniform PDF", "Uniform PMF"]


@pytest.mark.parametrize("value,text", [
    (3.0, "3"),
    (-2, "-2"),
    (0.1, "0.10"),
    (2.346, "2.35"),
    (np.float64(7.0), "7"),
])
def test_format_tick(value, text):
    assert format_tick(value) == text


def test_format_error_rate():
    assert format_error_rate(0.123456) == "Bayes Error Rate: 0.1235"
    assert format_error_rate(0) == "Bayes Error Rate: 0.0000"
