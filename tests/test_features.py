# =============================================================================
# Tests for FeatureVector and FeatureMatrix
# =============================================================================

import math

import pytest

from sms_bayes.core import (
    EmptyInputError,
    FeatureMatrix,
    FeatureVector,
    InconsistentShapeError,
    IndexOutOfRangeError,
    InvalidFeatureValueError,
    NaiveBayesError,
)


class TestFeatureVector:
    def test_values_are_floats(self):
        vector = FeatureVector([1, 0, 2.5])
        assert vector.values == (1.0, 0.0, 2.5)
        assert all(isinstance(v, float) for v in vector)

    def test_len_and_indexing(self):
        vector = FeatureVector([3.0, 4.0])
        assert len(vector) == 2
        assert vector[1] == 4.0

    def test_negative_zero_is_canonicalized(self):
        vector = FeatureVector([-0.0])
        assert math.copysign(1.0, vector[0]) == 1.0

    def test_nan_is_rejected(self):
        with pytest.raises(InvalidFeatureValueError):
            FeatureVector([1.0, float("nan")])

    def test_non_numbers_are_rejected(self):
        with pytest.raises(InvalidFeatureValueError):
            FeatureVector(["1.0"])
        with pytest.raises(InvalidFeatureValueError):
            FeatureVector([True])

    def test_equality(self):
        assert FeatureVector([1, 0]) == FeatureVector([1.0, 0.0])
        assert FeatureVector([1, 0]) != FeatureVector([0, 1])

    def test_empty_vector_is_allowed(self):
        assert len(FeatureVector([])) == 0


class TestFeatureMatrix:
    def test_shape(self):
        matrix = FeatureMatrix.create([[1, 0, 1], [0, 1, 1]])
        assert matrix.row_count == 2
        assert matrix.column_count == 3
        assert matrix.shape == (2, 3)
        assert len(matrix) == 2

    def test_accepts_feature_vectors(self):
        vectors = [FeatureVector([1, 2]), FeatureVector([3, 4])]
        matrix = FeatureMatrix.create(vectors)
        assert matrix.rows == tuple(vectors)

    def test_empty_input_fails(self):
        with pytest.raises(EmptyInputError):
            FeatureMatrix.create([])

    def test_inconsistent_lengths_fail(self):
        with pytest.raises(InconsistentShapeError):
            FeatureMatrix.create([[1, 0], [1, 0, 1]])

    def test_inconsistent_lengths_fail_anywhere(self):
        rows = [[1, 0]] * 5 + [[1]]
        with pytest.raises(InconsistentShapeError):
            FeatureMatrix.create(rows)

    def test_errors_share_a_base_class(self):
        with pytest.raises(NaiveBayesError):
            FeatureMatrix.create([])

    def test_column(self):
        matrix = FeatureMatrix.create([[1, 0], [0, 1], [1, 1]])
        assert matrix.column(0) == (1.0, 0.0, 1.0)
        assert matrix.column(1) == (0.0, 1.0, 1.0)

    def test_row(self):
        matrix = FeatureMatrix.create([[1, 0], [0, 1]])
        assert matrix.row(1) == (0.0, 1.0)

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_column_out_of_range(self, index):
        matrix = FeatureMatrix.create([[1, 0], [0, 1], [1, 1]])
        with pytest.raises(IndexOutOfRangeError):
            matrix.column(index)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_row_out_of_range(self, index):
        matrix = FeatureMatrix.create([[1, 0], [0, 1], [1, 1]])
        with pytest.raises(IndexOutOfRangeError):
            matrix.row(index)

    def test_out_of_range_is_an_index_error(self):
        matrix = FeatureMatrix.create([[1.0]])
        with pytest.raises(IndexError):
            matrix.row(5)

    def test_zero_width_rows(self):
        matrix = FeatureMatrix.create([[], []])
        assert matrix.shape == (2, 0)
