import numba as nb
import numpy as np


@nb.njit(cache=True, inline="always")
def break_offset(row: int, i: int, buffer_size: int) -> int:
    """Flat position of entry ``i`` of ``row`` in a row-major break-index table."""
    return row * buffer_size + i


@nb.njit(cache=True, inline="always")
def ssm(b: int, e: int, c_wv: np.ndarray, c_w: np.ndarray) -> float:
    """
    Sum of squared means for the closed index range [b, e]:
        (sum of weight * value)^2 / (sum of weight)
    c_wv and c_w are inclusive prefix sums of length m.
    """
    s = c_wv[e]
    w = c_w[e]
    if b > 0:
        s -= c_wv[b - 1]
        w -= c_w[b - 1]
    return s * s / w


@nb.njit(cache=True)
def calculate_cumulative_weights(
    values: np.ndarray, counts: np.ndarray, c_wv: np.ndarray, c_w: np.ndarray
) -> None:
    """
    Compute cumulative weighted sums and cumulative weights for sorted pairs.
    c_wv and c_w must be preallocated with length m; entry i covers 0..i.
    """
    M = values.shape[0]
    cwv = 0.0
    cw = 0
    for i in range(M):
        w = counts[i]
        cw += w
        cwv += w * values[i]
        c_wv[i] = cwv
        c_w[i] = cw


def breaks_if_too_few_values(values: np.ndarray, n_breaks: int) -> np.ndarray | None:
    """Returns the distinct values as breaks if there are no more than n_breaks, None otherwise."""
    if len(values) > n_breaks:
        return None
    return values.astype(np.float64)
