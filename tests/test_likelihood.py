# =============================================================================
# Tests for LikelihoodTable
# =============================================================================

import pytest

from sms_bayes.bayes import LikelihoodTable
from sms_bayes.core import EmptyClassError, ShapeMismatchError


@pytest.fixture
def table():
    # Feature present in both spam samples and one of two ham samples
    return LikelihoodTable.from_column(
        column=[1.0, 1.0, 1.0, 0.0],
        labels=[0, 0, 1, 1],
        classes=(0, 1),
    )


def test_conditional_probabilities(table):
    assert table.probability(1.0, 0) == 1.0
    assert table.probability(1.0, 1) == 0.5
    assert table.probability(0.0, 0) == 0.0
    assert table.probability(0.0, 1) == 0.5


def test_lookup_returns_row_aligned_with_classes(table):
    assert table.classes == (0, 1)
    assert table.lookup(1.0) == (1.0, 0.5)


def test_unseen_value_is_none(table):
    assert table.lookup(2.0) is None
    assert table.probability(2.0, 0) is None
    assert 2.0 not in table
    assert 1.0 in table


def test_integer_lookup_matches_float_key(table):
    assert table.lookup(1) == table.lookup(1.0)


def test_unknown_class_raises_key_error(table):
    with pytest.raises(KeyError):
        table.probability(1.0, 7)


def test_values_are_sorted(table):
    assert table.values == (0.0, 1.0)
    assert len(table) == 2


def test_rows_per_class_sum_to_one(table):
    view = table.as_dict()
    for label in table.classes:
        assert sum(view[value][label] for value in table.values) == pytest.approx(1.0)


def test_as_dict_is_read_only(table):
    view = table.as_dict()
    with pytest.raises(TypeError):
        view[5.0] = {}


def test_class_without_samples_raises():
    with pytest.raises(EmptyClassError):
        LikelihoodTable.from_column([1.0, 0.0], [0, 0], classes=(0, 1))


def test_column_label_length_mismatch_raises():
    with pytest.raises(ShapeMismatchError):
        LikelihoodTable.from_column([1.0, 0.0], [0], classes=(0,))


def test_multiclass_values():
    table = LikelihoodTable.from_column(
        column=[0.0, 1.0, 2.0, 2.0, 1.0, 0.0],
        labels=[0, 1, 2, 2, 1, 0],
        classes=(0, 1, 2),
    )
    assert table.lookup(2.0) == (0.0, 0.0, 1.0)
    assert table.lookup(0.0) == (1.0, 0.0, 0.0)


def test_same_input_builds_equal_tables():
    kwargs = dict(column=[1.0, 0.0, 1.0], labels=[0, 1, 1], classes=(0, 1))
    assert LikelihoodTable.from_column(**kwargs) == LikelihoodTable.from_column(**kwargs)
