# =============================================================================
# Per-Feature Likelihood Tables
# =============================================================================
# One LikelihoodTable holds P(feature_i = value | class) for a single
# feature column, for every value seen in training and every class.
#
# Layout:
#   - classes:   sorted tuple of class ids, shared by every table
#   - _index:    observed value -> row number
#   - _rows:     one tuple of probabilities per observed value, aligned
#                with `classes`
#
# Looking up a value that was never observed returns None. That's a normal
# outcome (the classifier skips the feature), not an error.
#
# No smoothing is applied: a value never seen together with a class gets
# probability 0.0 for that class.
# =============================================================================

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from sms_bayes.core.errors import EmptyClassError, ShapeMismatchError


class LikelihoodTable:
    """
    Conditional probabilities for one feature.

    Build with LikelihoodTable.from_column(); tables are immutable after
    that.

    Usage:
        >>> table = LikelihoodTable.from_column(
        ...     column=[1.0, 0.0, 1.0, 0.0],
        ...     labels=[0, 1, 0, 1],
        ...     classes=(0, 1),
        ... )
        >>> table.probability(1.0, 0)
        1.0
        >>> table.lookup(7.0) is None
        True

    Attributes:
        classes: Class ids the probabilities are aligned to.
    """

    __slots__ = ("classes", "_index", "_rows")

    def __init__(
        self,
        classes: tuple[int, ...],
        index: dict[float, int],
        rows: tuple[tuple[float, ...], ...],
    ) -> None:
        self.classes = classes
        self._index = index
        self._rows = rows

    @classmethod
    def from_column(
        cls,
        column: Sequence[float],
        labels: Sequence[int],
        classes: Sequence[int],
    ) -> "LikelihoodTable":
        """
        Estimate the table from one feature column and its labels.

        For each observed value v and class c:

            P(v | c) = count(value == v and label == c) / count(label == c)

        Args:
            column: The feature's value for every training sample.
            labels: The class of every training sample.
            classes: Class ids to estimate for, usually the sorted distinct
                     labels.

        Raises:
            ShapeMismatchError: If column and labels differ in length.
            EmptyClassError: If a class in `classes` has no samples.
        """
        if len(column) != len(labels):
            raise ShapeMismatchError(
                f"Column has {len(column)} values but there are {len(labels)} labels"
            )

        classes = tuple(classes)
        position = {label: i for i, label in enumerate(classes)}

        # Per-class sample totals (the denominators)
        class_totals = [0] * len(classes)
        for label in labels:
            if label in position:
                class_totals[position[label]] += 1

        for label, total in zip(classes, class_totals):
            if total == 0:
                raise EmptyClassError(f"Class {label} has no training samples")

        # Joint (value, class) counts
        counts: dict[float, list[int]] = {}
        for value, label in zip(column, labels):
            if label not in position:
                continue
            row = counts.setdefault(value, [0] * len(classes))
            row[position[label]] += 1

        values = sorted(counts)
        index = {value: i for i, value in enumerate(values)}
        rows = tuple(
            tuple(count / total for count, total in zip(counts[value], class_totals))
            for value in values
        )

        return cls(classes, index, rows)

    @property
    def values(self) -> tuple[float, ...]:
        """Observed feature values, ascending."""
        return tuple(self._index)

    def lookup(self, value: float) -> tuple[float, ...] | None:
        """
        Get the probability row for a value.

        Returns:
            Probabilities aligned with `classes`, or None if the value was
            never observed during training.
        """
        row = self._index.get(value)
        if row is None:
            return None
        return self._rows[row]

    def probability(self, value: float, label: int) -> float | None:
        """
        P(feature = value | class = label), or None for an unseen value.

        Raises:
            KeyError: If `label` is not one of this table's classes.
        """
        row = self.lookup(value)
        if row is None:
            return None
        if label not in self.classes:
            raise KeyError(label)
        return row[self.classes.index(label)]

    def as_dict(self) -> Mapping[float, Mapping[int, float]]:
        """Read-only nested mapping view: value -> class -> probability."""
        return MappingProxyType({
            value: MappingProxyType(dict(zip(self.classes, self._rows[i])))
            for value, i in self._index.items()
        })

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LikelihoodTable):
            return (
                self.classes == other.classes
                and self._index == other._index
                and self._rows == other._rows
            )
        return NotImplemented

    def __repr__(self) -> str:
        return f"LikelihoodTable(values={len(self)}, classes={self.classes})"
