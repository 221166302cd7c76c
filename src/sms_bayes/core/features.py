# =============================================================================
# Feature Containers
# =============================================================================
# The two data structures the classifier consumes:
#
#   - FeatureVector: one sample, an immutable tuple of floats.
#   - FeatureMatrix: a non-empty collection of vectors that all have the
#     same width. Rows are samples, columns are features.
#
# Both are plain value objects. Validation happens once, at construction,
# so everything downstream can rely on the shape being right.
# =============================================================================

import math
import numbers
from collections.abc import Iterable, Iterator, Sequence

from sms_bayes.core.errors import (
    EmptyInputError,
    InconsistentShapeError,
    IndexOutOfRangeError,
    InvalidFeatureValueError,
)


def _canonical(value: float) -> float:
    """
    Normalize a single feature value.

    Values are used as dictionary keys in the likelihood tables, so they
    must be hashable floats that compare equal when they mean the same
    thing. NaN never compares equal to itself and is rejected; -0.0 is
    folded into 0.0.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidFeatureValueError(f"Feature value must be a real number, got {value!r}")

    value = float(value)
    if math.isnan(value):
        raise InvalidFeatureValueError("Feature value must not be NaN")

    return value + 0.0  # -0.0 + 0.0 == 0.0


class FeatureVector:
    """
    An ordered, fixed-length sequence of feature values for one sample.

    Position i simply means "feature i"; in the SMS pipeline it is the
    presence (1.0) or absence (0.0) of the i-th vocabulary word.

    Usage:
        >>> vector = FeatureVector([1.0, 0.0, 1.0])
        >>> len(vector), vector[2]
        (3, 1.0)
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values: tuple[float, ...] = tuple(_canonical(v) for v in values)

    @property
    def values(self) -> tuple[float, ...]:
        """The feature values as a tuple."""
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FeatureVector):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"FeatureVector({list(self._values)!r})"


class FeatureMatrix:
    """
    A non-empty, rectangular collection of FeatureVectors.

    Always build one through FeatureMatrix.create(), which enforces the
    shape invariants.

    Usage:
        >>> matrix = FeatureMatrix.create([[1, 0], [0, 1], [1, 1]])
        >>> matrix.shape
        (3, 2)
        >>> matrix.column(0)
        (1.0, 0.0, 1.0)

    Attributes:
        rows: The vectors, in input order.
    """

    __slots__ = ("_rows", "_width")

    def __init__(self, rows: tuple[FeatureVector, ...], width: int) -> None:
        # Private: use create() so the invariants are checked.
        self._rows = rows
        self._width = width

    @classmethod
    def create(cls, vectors: Iterable[FeatureVector | Sequence[float]]) -> "FeatureMatrix":
        """
        Build a matrix from vectors (or plain sequences of numbers).

        Raises:
            EmptyInputError: If there are no vectors.
            InconsistentShapeError: If the vectors differ in length.
        """
        rows = tuple(
            v if isinstance(v, FeatureVector) else FeatureVector(v)
            for v in vectors
        )

        if not rows:
            raise EmptyInputError("Cannot build a feature matrix from an empty collection")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InconsistentShapeError(
                    f"Feature vector {index} has length {len(row)}, expected {width}"
                )

        return cls(rows, width)

    @property
    def rows(self) -> tuple[FeatureVector, ...]:
        return self._rows

    @property
    def row_count(self) -> int:
        """Number of samples."""
        return len(self._rows)

    @property
    def column_count(self) -> int:
        """Number of features per sample."""
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)"""
        return (self.row_count, self.column_count)

    def row(self, index: int) -> tuple[float, ...]:
        """
        Get one sample's feature values.

        Raises:
            IndexOutOfRangeError: If index is outside [0, row_count).
        """
        if not 0 <= index < self.row_count:
            raise IndexOutOfRangeError(
                f"Row index {index} out of range for {self.row_count} rows"
            )
        return self._rows[index].values

    def column(self, index: int) -> tuple[float, ...]:
        """
        Get one feature's values across all samples.

        Raises:
            IndexOutOfRangeError: If index is outside [0, column_count).
        """
        if not 0 <= index < self._width:
            raise IndexOutOfRangeError(
                f"Column index {index} out of range for {self._width} columns"
            )
        return tuple(row[index] for row in self._rows)

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[FeatureVector]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"FeatureMatrix(rows={self.row_count}, columns={self.column_count})"
