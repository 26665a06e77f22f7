import warnings

import numpy as np

from natural_breaks import loglinear, quadratic
from natural_breaks.exceptions import InvalidInput
from natural_breaks.pairs import (
    ValueCountPair,
    as_break_count,
    check_value_count_pairs,
    pairs_to_arrays,
    unique_counts,
    value_count_pairs,
)
from natural_breaks.std_dev import standard_deviation, std_dev_breaks
from natural_breaks.utils import breaks_if_too_few_values

__all__ = [
    "InvalidInput",
    "ValueCountPair",
    "natural_breaks",
    "natural_breaks_from_pairs",
    "natural_breaks_quadratic",
    "standard_deviation",
    "std_dev_breaks",
    "value_count_pairs",
]

_ENGINES = {
    "loglinear": loglinear.jenks_fisher_loglinear,
    "quadratic": quadratic.jenks_fisher_quadratic,
}


def _get_engine(method: str):
    try:
        return _ENGINES[method]
    except KeyError:
        raise ValueError(
            f"Unknown method: {method!r}, expected one of {sorted(_ENGINES)}"
        ) from None


def natural_breaks_from_pairs(
    pairs,
    n_breaks: int,
    method: str = "loglinear",
) -> np.ndarray:
    """
    Compute Fisher-Jenks natural breaks for distinct values with counts.

    Parameters
    ----------
    pairs : sequence of ValueCountPair or (value, count) tuples
        Strictly ascending by value, every count positive
    n_breaks : int
        Number of breaks (= number of classes), at most len(pairs)
    method : str
        "loglinear" (default) or "quadratic"

    Returns
    -------
    np.ndarray
        n_breaks values: the minimum, then the lowest value of every
        following class

    Raises
    ------
    InvalidInput
        If the pairs or n_breaks violate the preconditions above
    """
    engine = _get_engine(method)
    n_breaks = as_break_count(n_breaks)
    values, counts = pairs_to_arrays(pairs)
    check_value_count_pairs(values, counts, n_breaks)
    return engine(values, counts, n_breaks)


def _natural_breaks(data, n_breaks: int, method: str) -> np.ndarray:
    engine = _get_engine(method)
    n_breaks = as_break_count(n_breaks)

    values, counts = unique_counts(data)

    if (early_ret := breaks_if_too_few_values(values, n_breaks)) is not None:
        n_unique = values.shape[0]
        if n_unique < n_breaks:
            warnings.warn(
                f"Not possible to find {n_breaks} breaks in this data, "
                f"number of unique values is {n_unique}. "
                f"Returning the {n_unique} unique values instead.",
                UserWarning,
                stacklevel=3,
            )
        return early_ret

    return engine(values, counts, n_breaks)


def natural_breaks(data, n_breaks: int) -> np.ndarray:
    """
    Compute Fisher-Jenks natural breaks for raw 1D data.

    Duplicate values are merged into weighted pairs before the
    O(k * m log m) divide-and-conquer search runs.

    Parameters
    ----------
    data : array-like
        1D data, in any order, without NaNs
    n_breaks : int
        Number of breaks (= number of classes) to find

    Returns
    -------
    np.ndarray
        Ascending breaks, breaks[0] being the minimum. If the data holds
        no more than n_breaks unique values, those values are returned.
    """
    return _natural_breaks(data, n_breaks, "loglinear")


def natural_breaks_quadratic(data, n_breaks: int) -> np.ndarray:
    """
    Compute Fisher-Jenks natural breaks for raw 1D data with the plain
    O(k * m^2) dynamic program.

    Same parameters and return value as natural_breaks.
    """
    return _natural_breaks(data, n_breaks, "quadratic")
