import numba as nb
import numpy as np

from natural_breaks.utils import break_offset, calculate_cumulative_weights, ssm


@nb.njit(cache=True)
def _find_max_break_index(
    i: int,
    bp: int,
    ep: int,
    completed_rows: int,
    ssm_prev: np.ndarray,
    ssm_curr: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> int:
    """
    Best predecessor p in [bp, ep) for entry i of the current DP row:
        ssm_curr[i] = max_{p in [bp, ep)} ssm_prev[p] + SSM(p + r, i + r)
    with r = completed_rows. Stores the maximum in ssm_curr[i] and returns p.
    Only a strictly greater score replaces the best, so the lowest maximizing
    p in the range is kept on ties.
    """
    best_ssm = ssm_prev[bp] + ssm(bp + completed_rows, i + completed_rows, c_wv, c_w)
    best_p = bp

    for p in range(bp + 1, ep):
        s = ssm_prev[p] + ssm(p + completed_rows, i + completed_rows, c_wv, c_w)
        if s > best_ssm:
            best_ssm = s
            best_p = p

    ssm_curr[i] = best_ssm
    return best_p


# Not cached: this recursive kernel crashes when reloaded from numba's disk cache.
@nb.njit
def _calc_range(
    bi: int,
    ei: int,
    bp: int,
    ep: int,
    row: int,
    buffer_size: int,
    ssm_prev: np.ndarray,
    ssm_curr: np.ndarray,
    class_breaks: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> None:
    """
    Divide-and-conquer fill of DP row (row + 1) for targets i in [bi, ei)
    (half-open), given that every optimal predecessor lies in [bp, ep).
    Optimal predecessors are non-decreasing in i, so the midpoint's argmax
    splits the candidate range for both halves.
    """
    if bi == ei:
        return

    mi = (bi + ei) // 2
    completed_rows = row + 1
    mp = _find_max_break_index(
        mi, bp, min(ep, mi + 1), completed_rows, ssm_prev, ssm_curr, c_wv, c_w
    )

    # lower half of the targets draws from the lower half of the predecessors
    _calc_range(
        bi,
        mi,
        bp,
        min(mi, mp + 1),
        row,
        buffer_size,
        ssm_prev,
        ssm_curr,
        class_breaks,
        c_wv,
        c_w,
    )

    class_breaks[break_offset(row, mi, buffer_size)] = mp

    _calc_range(
        mi + 1,
        ei,
        mp,
        ep,
        row,
        buffer_size,
        ssm_prev,
        ssm_curr,
        class_breaks,
        c_wv,
        c_w,
    )


@nb.njit
def jenks_fisher_loglinear(values: np.ndarray, counts: np.ndarray, K: int) -> np.ndarray:
    """
    Log-linear (O(k * m log m)) Fisher-Jenks natural breaks on validated,
    strictly ascending distinct values with positive counts, 0 <= K <= m.
    Returns K break values: values[0] followed by the lowest value of each
    class after the first.
    """
    M = values.size
    breaks = np.empty(K, dtype=np.float64)
    if K == 0:
        return breaks
    breaks[0] = values[0]
    if K == 1:
        return breaks

    # the last (K - 1) values can never close the first class
    buffer_size = M - (K - 1)

    c_wv = np.empty(M, dtype=np.float64)
    c_w = np.empty(M, dtype=np.int64)
    calculate_cumulative_weights(values, counts, c_wv, c_w)

    # ssm_prev[i] := best SSM of (r + 1) classes over [0, i + r] after r passes.
    ssm_prev = np.empty(buffer_size, dtype=np.float64)
    ssm_curr = np.empty(buffer_size, dtype=np.float64)
    for i in range(buffer_size):
        ssm_prev[i] = c_wv[i] * c_wv[i] / c_w[i]

    # one row of predecessor indices per pass; row r belongs to r + 1 completed classes.
    class_breaks = np.empty(buffer_size * (K - 2), dtype=np.int64)

    for row in range(K - 2):
        _calc_range(
            0,
            buffer_size,
            0,
            buffer_size,
            row,
            buffer_size,
            ssm_prev,
            ssm_curr,
            class_breaks,
            c_wv,
            c_w,
        )
        ssm_prev, ssm_curr = ssm_curr, ssm_prev

    # best split before the last class, over the whole final row.
    last = _find_max_break_index(
        buffer_size - 1, 0, buffer_size, K - 1, ssm_prev, ssm_curr, c_wv, c_w
    )

    # backtrack: break b is the first value of class b.
    for b in range(K - 1, 0, -1):
        breaks[b] = values[last + b]
        if b > 1:
            last = class_breaks[break_offset(b - 2, last, buffer_size)]
    return breaks
