import numba as nb
import numpy as np

from natural_breaks.utils import calculate_cumulative_weights, ssm


@nb.njit(cache=True)
def _fill_row_quadratic(
    c: int,
    S: np.ndarray,
    J: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> None:
    """
    Fill DP row c for every reachable i in [c, m),

    S[c, i] := best sum of squared means of x[0..i] split into (c+1) classes.
    J[c, i] := start index (p) of the last class (p in [c..i]).

    Recurrence for c > 0:
        S[c, i] = max_{p in [c .. i]} S[c-1, p-1] + ssm(p, i)
    """
    _, M = S.shape
    for i in range(c, M):
        best_ssm = -np.inf
        best_p = -1
        # p = start index of last class
        for p in range(c, i + 1):
            s = S[c - 1, p - 1] + ssm(p, i, c_wv, c_w)
            if s > best_ssm:
                best_ssm = s
                best_p = p
        S[c, i] = best_ssm
        J[c, i] = best_p


@nb.njit(cache=True)
def jenks_fisher_quadratic(values: np.ndarray, counts: np.ndarray, K: int) -> np.ndarray:
    """
    Returns K break values: [min, first value of class 1, ..., of class K-1].
    Uses 0-based DP tables S,J of shape (K, m), no speedups.
    """
    M = values.size
    breaks = np.empty(K, dtype=np.float64)
    if K == 0:
        return breaks
    breaks[0] = values[0]
    if K == 1:
        return breaks

    c_wv = np.empty(M, dtype=np.float64)
    c_w = np.empty(M, dtype=np.int64)
    calculate_cumulative_weights(values, counts, c_wv, c_w)

    S = np.full((K, M), -np.inf, dtype=np.float64)
    J = np.full((K, M), -1, dtype=np.int64)

    # base row c = 0 (one class)
    for i in range(M):
        S[0, i] = ssm(0, i, c_wv, c_w)
        J[0, i] = 0

    for c in range(1, K):
        _fill_row_quadratic(c, S, J, c_wv, c_w)

    # backtrack from the class holding the last value.
    end = M - 1
    for c in range(K - 1, 0, -1):
        start = J[c, end]
        breaks[c] = values[start]
        end = start - 1
    return breaks
