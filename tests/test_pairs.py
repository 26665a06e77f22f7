import numpy as np
import pytest

from natural_breaks import InvalidInput, ValueCountPair, value_count_pairs
from natural_breaks.pairs import check_value_count_pairs, pairs_to_arrays, unique_counts
from natural_breaks.utils import breaks_if_too_few_values, calculate_cumulative_weights


class TestDeduplication:
    def test_counts_occurrences_in_ascending_order(self):
        pairs = value_count_pairs([2.5, -1.0, 2.5, 7.0, -1.0, 2.5])
        assert pairs == [
            ValueCountPair(-1.0, 2),
            ValueCountPair(2.5, 3),
            ValueCountPair(7.0, 1),
        ]
        assert all(isinstance(p, ValueCountPair) for p in pairs)

    def test_empty(self):
        assert value_count_pairs([]) == []

    def test_array_form(self):
        values, counts = unique_counts(np.array([3, 3, 1], dtype=np.int32))
        assert values.dtype == np.float64
        assert counts.dtype == np.int64
        np.testing.assert_array_equal(values, [1.0, 3.0])
        np.testing.assert_array_equal(counts, [1, 2])

    def test_nan_rejected(self):
        with pytest.raises(InvalidInput):
            value_count_pairs([1.0, float("nan")])


class TestPairArrays:
    def test_round_trip_from_pairs(self):
        values, counts = pairs_to_arrays([ValueCountPair(1.0, 2), (4.0, 1)])
        np.testing.assert_array_equal(values, [1.0, 4.0])
        np.testing.assert_array_equal(counts, [2, 1])
        assert counts.dtype == np.int64

    def test_empty(self):
        values, counts = pairs_to_arrays([])
        assert values.shape == counts.shape == (0,)

    def test_integral_float_counts_accepted(self):
        _, counts = pairs_to_arrays([(1.0, 2.0)])
        np.testing.assert_array_equal(counts, [2])

    def test_non_numeric_value(self):
        with pytest.raises(InvalidInput, match="expected"):
            pairs_to_arrays([("a", 1)])

    def test_nan_count(self):
        with pytest.raises(InvalidInput, match="index 1"):
            pairs_to_arrays([(1.0, 1), (2.0, float("nan"))])

    def test_length_mismatch(self):
        with pytest.raises(InvalidInput, match="2 values but 1 counts"):
            check_value_count_pairs(
                np.array([1.0, 2.0]), np.array([1], dtype=np.int64), 1
            )

    def test_error_names_offending_index(self):
        values = np.array([0.0, 1.0, 3.0, 2.0])
        counts = np.ones(4, dtype=np.int64)
        with pytest.raises(InvalidInput, match="index 3"):
            check_value_count_pairs(values, counts, 2)

    def test_valid_input_passes(self):
        check_value_count_pairs(
            np.array([0.0, 1.0]), np.array([1, 9], dtype=np.int64), 2
        )


class TestPrefixTable:
    def test_cumulative_weights(self):
        values = np.array([1.0, 2.0, 5.0])
        counts = np.array([2, 1, 3], dtype=np.int64)
        c_wv = np.empty(3)
        c_w = np.empty(3, dtype=np.int64)
        calculate_cumulative_weights(values, counts, c_wv, c_w)

        np.testing.assert_array_equal(c_wv, [2.0, 4.0, 19.0])
        np.testing.assert_array_equal(c_w, [2, 3, 6])

    def test_too_few_values(self):
        values = np.array([1.0, 2.0])
        np.testing.assert_array_equal(breaks_if_too_few_values(values, 2), values)
        assert breaks_if_too_few_values(values, 1) is None
