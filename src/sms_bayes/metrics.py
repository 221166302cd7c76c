# =============================================================================
# Model Metrics
# =============================================================================
# Binary classification metrics from true and predicted labels.
#
# One class is designated "positive" (in the SMS pipeline that's spam);
# every other class counts as negative. Predictions that carry no label
# (None, i.e. the model couldn't classify the vector) are always an error:
# a false negative for a positive sample, a false positive for a negative
# one. They are also tallied separately in `unclassified`.
#
# Any ratio whose denominator is zero is reported as 0.0.
# =============================================================================

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sms_bayes.bayes import Prediction
from sms_bayes.core import ShapeMismatchError

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass
class ModelMetrics:
    """
    Confusion counts and derived scores for one evaluation.

    Build with ModelMetrics.compute().

    Usage:
        >>> metrics = ModelMetrics.compute([0, 1, 0], [0, 1, 1], positive=0)
        >>> metrics.accuracy
        0.6666666666666666
        >>> print(metrics.report())

    Attributes:
        true_positives: Positive samples predicted positive.
        true_negatives: Negative samples predicted negative.
        false_positives: Negative samples predicted positive or left
                         unclassified.
        false_negatives: Positive samples predicted negative or left
                         unclassified.
        unclassified: Predictions that carried no label (already included
                      in false_positives/false_negatives).
        positive: The positive class id.
    """
    true_positives: int = 0
    true_negatives: int = 0
    false_positives: int = 0
    false_negatives: int = 0
    unclassified: int = 0
    positive: int = 1

    @classmethod
    def compute(
        cls,
        targets: Sequence[int],
        predictions: Sequence[Prediction | int | None],
        positive: int = 1,
    ) -> "ModelMetrics":
        """
        Tally the confusion counts.

        Args:
            targets: True class ids.
            predictions: Predicted class ids (or Predictions), same order.
            positive: Class id treated as positive.

        Raises:
            ShapeMismatchError: If targets and predictions differ in length.
        """
        if len(targets) != len(predictions):
            raise ShapeMismatchError(
                f"Got {len(targets)} targets but {len(predictions)} predictions"
            )

        metrics = cls(positive=positive)
        for target, predicted in zip(targets, predictions):
            if isinstance(predicted, Prediction):
                predicted = predicted.label
            actual_positive = target == positive

            if predicted is None:
                # Never counted as correct
                metrics.unclassified += 1
                if actual_positive:
                    metrics.false_negatives += 1
                else:
                    metrics.false_positives += 1
                continue

            predicted_positive = predicted == positive

            if actual_positive and predicted_positive:
                metrics.true_positives += 1
            elif actual_positive:
                metrics.false_negatives += 1
            elif predicted_positive:
                metrics.false_positives += 1
            else:
                metrics.true_negatives += 1

        if metrics.unclassified:
            logger.warning(f"{metrics.unclassified} predictions were unclassified")

        return metrics

    @property
    def total(self) -> int:
        """Number of evaluated samples."""
        return (
            self.true_positives + self.true_negatives
            + self.false_positives + self.false_negatives
        )

    @property
    def accuracy(self) -> float:
        """(TP + TN) / total"""
        return _ratio(self.true_positives + self.true_negatives, self.total)

    @property
    def precision(self) -> float:
        """TP / (TP + FP)"""
        return _ratio(self.true_positives, self.true_positives + self.false_positives)

    @property
    def recall(self) -> float:
        """TP / (TP + FN), a.k.a. sensitivity."""
        return _ratio(self.true_positives, self.true_positives + self.false_negatives)

    @property
    def specificity(self) -> float:
        """TN / (TN + FP)"""
        return _ratio(self.true_negatives, self.true_negatives + self.false_positives)

    @property
    def f1_score(self) -> float:
        """2TP / (2TP + FP + FN)"""
        return _ratio(
            2 * self.true_positives,
            2 * self.true_positives + self.false_positives + self.false_negatives,
        )

    @property
    def confusion_matrix(self) -> list[list[int]]:
        """[[TP, FP], [FN, TN]]"""
        return [
            [self.true_positives, self.false_positives],
            [self.false_negatives, self.true_negatives],
        ]

    def report(self) -> str:
        """Human-readable summary of every metric."""
        (tp, fp), (fn, tn) = self.confusion_matrix
        lines = [
            f"Model accuracy is:\t{self.accuracy:.2f}",
            f"Model precision is:\t{self.precision:.2f}",
            f"Model recall is:\t{self.recall:.2f}",
            f"Model specificity is:\t{self.specificity:.2f}",
            f"Model F1_score is:\t{self.f1_score:.2f}",
            "Confusion matrix is:",
            f"[[{tp}, {fp}],",
            f" [{fn}, {tn}]]",
        ]
        if self.unclassified:
            lines.append(f"Unclassified:\t\t{self.unclassified}")
        return "\n".join(lines)
