"""
Distinct values with occurrence counts, the input shape of the break engines.
"""

import operator
from typing import Iterable, NamedTuple

import numpy as np

from natural_breaks.exceptions import InvalidInput


class ValueCountPair(NamedTuple):
    value: float
    count: int


def as_1d_data(data, name: str = "data") -> np.ndarray:
    """Return ``data`` as a float64 vector, rejecting other shapes, NaNs and infinities."""
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be one-dimensional, got shape {arr.shape}")
    not_finite = np.flatnonzero(~np.isfinite(arr))
    if not_finite.size:
        i = int(not_finite[0])
        raise InvalidInput(f"{name} value at index {i} is not finite: {arr[i]}")
    return arr


def as_break_count(n_breaks) -> int:
    """Return ``n_breaks`` as a non-negative int."""
    try:
        n_breaks = operator.index(n_breaks)
    except TypeError:
        raise InvalidInput(
            f"n_breaks must be an integer, got {n_breaks!r}"
        ) from None
    if n_breaks < 0:
        raise InvalidInput(f"n_breaks must be non-negative, got {n_breaks}")
    return n_breaks


def unique_counts(data) -> tuple[np.ndarray, np.ndarray]:
    """
    Ascending distinct values of ``data`` and how often each occurs.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        ``(values, counts)``, float64 and int64 arrays of equal length.
    """
    arr = as_1d_data(data)
    values, counts = np.unique(arr, return_counts=True)
    return values, counts.astype(np.int64)


def value_count_pairs(data) -> list[ValueCountPair]:
    """Deduplicate ``data`` into ascending ``(value, count)`` pairs."""
    values, counts = unique_counts(data)
    return [ValueCountPair(float(v), int(c)) for v, c in zip(values, counts)]


def pairs_to_arrays(pairs: Iterable) -> tuple[np.ndarray, np.ndarray]:
    """Split a sequence of ``(value, count)`` pairs into value and count arrays."""
    pairs = list(pairs)
    if not pairs:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.int64)

    try:
        values = np.array([p[0] for p in pairs], dtype=np.float64)
        raw_counts = np.array([p[1] for p in pairs], dtype=np.float64)
    except (TypeError, IndexError, ValueError) as exc:
        raise InvalidInput(f"expected (value, count) pairs: {exc}") from exc

    bad = np.flatnonzero(
        ~np.isfinite(raw_counts) | (raw_counts != np.round(raw_counts))
    )
    if bad.size:
        i = int(bad[0])
        raise InvalidInput(f"count at index {i} is not an integer: {pairs[i][1]!r}")
    return values, raw_counts.astype(np.int64)


def check_value_count_pairs(
    values: np.ndarray, counts: np.ndarray, n_breaks: int
) -> None:
    """
    Validate the preconditions of the break engines.

    Raises
    ------
    InvalidInput
        If the arrays are not matching vectors, a value is not finite,
        values are not strictly ascending, a count is not positive, or
        ``n_breaks`` is negative or exceeds the number of pairs.
    """
    if values.ndim != 1 or counts.ndim != 1:
        raise InvalidInput("values and counts must be one-dimensional")
    if values.shape != counts.shape:
        raise InvalidInput(
            f"got {values.shape[0]} values but {counts.shape[0]} counts"
        )
    n_breaks = as_break_count(n_breaks)
    if n_breaks > values.shape[0]:
        raise InvalidInput(
            f"cannot find {n_breaks} breaks among {values.shape[0]} distinct values"
        )

    not_finite = np.flatnonzero(~np.isfinite(values))
    if not_finite.size:
        i = int(not_finite[0])
        raise InvalidInput(f"value at index {i} is not finite: {values[i]}")

    not_ascending = np.flatnonzero(values[1:] <= values[:-1])
    if not_ascending.size:
        i = int(not_ascending[0]) + 1
        raise InvalidInput(
            f"values must be strictly ascending, but value {values[i]} at index {i} "
            f"follows {values[i - 1]}"
        )

    not_positive = np.flatnonzero(counts <= 0)
    if not_positive.size:
        i = int(not_positive[0])
        raise InvalidInput(f"count at index {i} must be positive, got {counts[i]}")
