# =============================================================================
# Naive Bayes Classifier
# =============================================================================
# A generic Naive Bayes classifier over discrete feature vectors.
#
# How it works:
#   1. fit() builds one LikelihoodTable per feature column:
#      P(feature_i = v | c) = count(feature_i = v and label = c) / count(c)
#   2. For a vector x, each feature gives a per-feature posterior by Bayes'
#      rule:
#      p_i(c) = P(x_i | c) P(c) / Σ_c' P(x_i | c') P(c')
#   3. The per-feature posteriors are combined as independent evidence by
#      summing their log-odds:
#      S(c) = Σ_i [ log(1 - p_i(c)) - log(p_i(c)) ]
#      posterior(c) = 1 / (1 + e^S(c))
#   4. The class with the highest posterior wins (lowest id on ties).
#
# Feature values never seen during training are skipped for that vector;
# they carry no evidence either way. There is no Laplace smoothing.
#
# The posteriors of different classes don't have to sum to 1. Each one is
# a probability on its own, but they are not a softmax over the classes.
# =============================================================================

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import Executor
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

from sms_bayes.bayes.likelihood import LikelihoodTable
from sms_bayes.bayes.prior import validate_prior
from sms_bayes.core import (
    DegenerateNormalizationError,
    FeatureMatrix,
    FeatureVector,
    ShapeMismatchError,
    UntrainedModelError,
)

logger = logging.getLogger(__name__)


class PredictionStatus(Enum):
    """Outcome of classifying one vector."""
    CLASSIFIED = auto()         # A class label was assigned
    UNTRAINED = auto()          # Model has not been fit yet
    SHAPE_MISMATCH = auto()     # Vector length differs from training data


@dataclass(frozen=True)
class Prediction:
    """
    Result of classifying one feature vector.

    Only a CLASSIFIED prediction carries a label, so a real class 0 can
    never be mistaken for "no answer".

    Attributes:
        status: What happened.
        label: Predicted class id, or None if not classified.
        posteriors: Per-class posterior, empty if not classified.
    """
    status: PredictionStatus
    label: int | None = None
    posteriors: Mapping[int, float] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def ok(self) -> bool:
        """True if a label was assigned."""
        return self.status is PredictionStatus.CLASSIFIED


# Shared instances for the two failure outcomes
UNTRAINED = Prediction(PredictionStatus.UNTRAINED)
SHAPE_MISMATCH = Prediction(PredictionStatus.SHAPE_MISMATCH)


@dataclass(frozen=True)
class _FittedState:
    """Everything fit() produces. Swapped in as a single object."""
    classes: tuple[int, ...]
    prior: Mapping[int, float]
    likelihood: tuple[LikelihoodTable, ...]
    feature_vector_length: int


def prediction_labels(predictions: Iterable[Prediction]) -> list[int | None]:
    """Labels of a batch of predictions, None where nothing was assigned."""
    return [p.label for p in predictions]


def _logistic(log_odds: float) -> float:
    """1 / (1 + e^log_odds) without overflowing for large magnitudes."""
    if log_odds >= 0:
        z = math.exp(-log_odds)
        return z / (1.0 + z)
    return 1.0 / (1.0 + math.exp(log_odds))


class NaiveBayesModel:
    """
    Naive Bayes classifier for vectors of discrete feature values.

    Usage:
        >>> model = NaiveBayesModel()
        >>> model.fit(matrix, labels=[0, 1, 0, 1], prior={0: 0.5, 1: 0.5})
        >>> prediction = model.predict(FeatureVector([1.0, 0.0, 0.0]))
        >>> if prediction.ok:
        ...     print(prediction.label)

    The model is not safe for concurrent mutation: don't call predict()
    while fit() is running. Once fit() has returned, any number of threads
    can predict at the same time.
    """

    # Per-feature posteriors are kept this far from 0 and 1 so a certain
    # feature gives large but finite log-odds.
    POSTERIOR_EPSILON = 1e-12

    def __init__(self) -> None:
        self._state: _FittedState | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def is_trained(self) -> bool:
        """Returns True once fit() has completed successfully."""
        return self._state is not None

    @property
    def classes(self) -> tuple[int, ...]:
        """Sorted class ids seen in training (empty if untrained)."""
        return self._state.classes if self._state else ()

    @property
    def prior(self) -> Mapping[int, float]:
        """The prior the model was fit with (empty if untrained)."""
        return self._state.prior if self._state else MappingProxyType({})

    @property
    def likelihood(self) -> tuple[LikelihoodTable, ...]:
        """One LikelihoodTable per feature index (empty if untrained)."""
        return self._state.likelihood if self._state else ()

    @property
    def feature_vector_length(self) -> int | None:
        """Width of the training vectors, or None if untrained."""
        return self._state.feature_vector_length if self._state else None

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def fit(
        self,
        features: FeatureMatrix,
        labels: Sequence[int],
        prior: Mapping[int, float],
    ) -> None:
        """
        Fit the model to labelled training data.

        Replaces any previous training entirely. If fitting fails, the
        model keeps whatever state it had before.

        Args:
            features: Training vectors.
            labels: Class id of each training vector.
            prior: Probability of each class. Must cover exactly the classes
                   in `labels` and sum to 1.

        Raises:
            ShapeMismatchError: If there isn't one label per row.
            InvalidPriorError: If the prior isn't a proper distribution over
                               the training classes.
            EmptyClassError: If a class ends up with no samples.
        """
        labels = list(labels)
        if len(labels) != features.row_count:
            raise ShapeMismatchError(
                f"Got {len(labels)} labels for {features.row_count} feature vectors"
            )

        classes = tuple(sorted(set(labels)))
        validate_prior(prior, classes)

        logger.debug(
            f"Fitting on {features.row_count} samples, "
            f"{features.column_count} features, classes {list(classes)}"
        )

        tables = tuple(
            LikelihoodTable.from_column(features.column(i), labels, classes)
            for i in range(features.column_count)
        )

        self._state = _FittedState(
            classes=classes,
            prior=MappingProxyType({label: float(prior[label]) for label in classes}),
            likelihood=tables,
            feature_vector_length=features.column_count,
        )

        logger.info(
            f"Model trained: {features.row_count} samples, "
            f"{features.column_count} features, {len(classes)} classes"
        )

    # -------------------------------------------------------------------------
    # Prediction
    # -------------------------------------------------------------------------

    def predict(self, vector: FeatureVector | Sequence[float]) -> Prediction:
        """
        Classify a single feature vector.

        Returns:
            A CLASSIFIED Prediction with the winning label, or an UNTRAINED
            or SHAPE_MISMATCH Prediction (with no label).

        Raises:
            DegenerateNormalizationError: If Bayes' rule would divide by zero
                                          for some observed feature value.
        """
        state = self._state
        if state is None:
            return UNTRAINED

        if not isinstance(vector, FeatureVector):
            vector = FeatureVector(vector)

        if len(vector) != state.feature_vector_length:
            logger.warning(
                f"Feature vector has length {len(vector)}, "
                f"model was trained on length {state.feature_vector_length}"
            )
            return SHAPE_MISMATCH

        posteriors = self._posteriors(state, vector)

        # Argmax; iterating sorted classes with a strict > keeps the lowest
        # id on ties.
        best = state.classes[0]
        for label in state.classes[1:]:
            if posteriors[label] > posteriors[best]:
                best = label

        return Prediction(
            PredictionStatus.CLASSIFIED,
            label=best,
            posteriors=MappingProxyType(posteriors),
        )

    def predict_batch(
        self,
        vectors: Iterable[FeatureVector | Sequence[float]],
        executor: Executor | None = None,
    ) -> list[Prediction]:
        """
        Classify many vectors, preserving input order.

        A wrong-length vector gives a SHAPE_MISMATCH entry; the rest of the
        batch is still classified. An untrained model gives an UNTRAINED
        entry for every input.

        Args:
            vectors: Vectors to classify.
            executor: Optional executor to spread the work over. Each
                      prediction only reads the fitted tables.
        """
        vectors = list(vectors)

        if self._state is None:
            logger.warning(f"Predicting {len(vectors)} vectors with an untrained model")
            return [UNTRAINED] * len(vectors)

        if executor is not None:
            predictions = list(executor.map(self.predict, vectors))
        else:
            predictions = [self.predict(v) for v in vectors]

        unclassified = sum(1 for p in predictions if not p.ok)
        if unclassified:
            logger.warning(f"{unclassified} of {len(predictions)} vectors could not be classified")

        return predictions

    def classify(self, vector: FeatureVector | Sequence[float]) -> int:
        """
        Classify a vector, raising instead of returning a failed Prediction.

        Raises:
            UntrainedModelError: If the model hasn't been fit.
            ShapeMismatchError: If the vector has the wrong length.
        """
        prediction = self.predict(vector)
        if prediction.status is PredictionStatus.UNTRAINED:
            raise UntrainedModelError("Model must be fit before classifying")
        if prediction.status is PredictionStatus.SHAPE_MISMATCH:
            raise ShapeMismatchError(
                f"Feature vector has length {len(vector)}, "
                f"expected {self.feature_vector_length}"
            )
        return prediction.label

    def posteriors(self, vector: FeatureVector | Sequence[float]) -> dict[int, float]:
        """
        Per-class posterior for a vector.

        Each value is in [0, 1]; they need not sum to 1.

        Raises:
            UntrainedModelError: If the model hasn't been fit.
            ShapeMismatchError: If the vector has the wrong length.
        """
        state = self._state
        if state is None:
            raise UntrainedModelError("Model must be fit before computing posteriors")

        if not isinstance(vector, FeatureVector):
            vector = FeatureVector(vector)

        if len(vector) != state.feature_vector_length:
            raise ShapeMismatchError(
                f"Feature vector has length {len(vector)}, "
                f"expected {state.feature_vector_length}"
            )

        return self._posteriors(state, vector)

    def _posteriors(self, state: _FittedState, vector: FeatureVector) -> dict[int, float]:
        """Log-odds accumulation over features, then the logistic transform."""
        classes = state.classes
        priors = [state.prior[label] for label in classes]
        log_odds = [0.0] * len(classes)
        eps = self.POSTERIOR_EPSILON

        for i, value in enumerate(vector):
            row = state.likelihood[i].lookup(value)
            if row is None:
                # Value never seen in training: no evidence from this feature
                continue

            normalization = math.fsum(p * q for p, q in zip(row, priors))
            if normalization == 0.0:
                raise DegenerateNormalizationError(
                    f"Feature {i} with value {value} has zero evidence under the prior"
                )

            for k in range(len(classes)):
                posterior = row[k] * priors[k] / normalization
                posterior = min(max(posterior, eps), 1.0 - eps)
                log_odds[k] += math.log(1.0 - posterior) - math.log(posterior)

        return {label: _logistic(s) for label, s in zip(classes, log_odds)}
