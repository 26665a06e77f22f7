import numpy as np

from natural_breaks.exceptions import InvalidInput
from natural_breaks.pairs import as_1d_data


def standard_deviation(data) -> float:
    """Population standard deviation (divides by n, not n - 1)."""
    arr = as_1d_data(data)
    if arr.size == 0:
        raise InvalidInput("standard deviation of empty data is undefined")
    return float(np.std(arr))


def std_dev_breaks(data, return_stats: bool = False):
    """
    Classify data into bands of one standard deviation around the mean.

    Parameters
    ----------
    data : array-like
        1D values, in any order
    return_stats : bool
        Also return the mean and standard deviation used

    Returns
    -------
    np.ndarray or tuple[np.ndarray, float, float]
        Breaks [-inf, m-3s, m-2s, m-s, m+s, m+2s, m+3s, +inf], followed by
        (mean, std) when return_stats is set
    """
    arr = as_1d_data(data)
    std = standard_deviation(arr)
    mean = float(arr.mean())

    breaks = np.array(
        [
            -np.inf,
            mean - 3 * std,
            mean - 2 * std,
            mean - std,
            mean + std,
            mean + 2 * std,
            mean + 3 * std,
            np.inf,
        ]
    )
    if return_stats:
        return breaks, mean, std
    return breaks
