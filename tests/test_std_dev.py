import numpy as np
import pytest

from natural_breaks import InvalidInput, standard_deviation, std_dev_breaks


def test_standard_deviation():
    values = [14.0, 18, 12, 15, 11, 19, 13, 22]
    assert round(standard_deviation(values), 2) == 3.57


def test_breaks():
    values = np.array([79.0, 78, 77, 75, 75, 74, 74, 74, 74, 70])
    breaks = std_dev_breaks(values)
    expected = [
        -np.inf,
        67.7750432527246224,
        70.1833621684830816,
        72.5916810842415408,
        77.4083189157584592,
        79.8166378315169184,
        82.2249567472753776,
        np.inf,
    ]

    assert breaks.shape == (8,)
    np.testing.assert_allclose(breaks, expected, rtol=0, atol=1e-6)
    assert np.all(np.diff(breaks) > 0)


def test_breaks_with_stats():
    values = [79.0, 78, 77, 75, 75, 74, 74, 74, 74, 70]
    breaks, mean, std = std_dev_breaks(values, return_stats=True)

    assert mean == pytest.approx(75.0)
    assert std == pytest.approx(np.sqrt(5.8))
    assert breaks[3] == pytest.approx(mean - std)
    assert breaks[4] == pytest.approx(mean + std)


def test_unsorted_input():
    values = np.array([70.0, 79, 74, 78, 74, 77, 74, 75, 74, 75])
    np.testing.assert_allclose(std_dev_breaks(values), std_dev_breaks(np.sort(values)))


def test_constant_data():
    breaks = std_dev_breaks([4.0, 4.0, 4.0])
    np.testing.assert_array_equal(breaks[1:-1], [4.0] * 6)


@pytest.mark.parametrize(
    "values", [[], [1.0, np.nan], [1.0, np.inf], [-np.inf, 1.0]]
)
def test_invalid(values):
    with pytest.raises(InvalidInput):
        std_dev_breaks(values)
