# =============================================================================
# SMS-Bayes Core Module
# =============================================================================
# Domain types shared by every other module: the feature containers and the
# classifier exception hierarchy. Nothing here imports from the rest of the
# package, so it can be imported anywhere without circular dependencies.
#
#   - FeatureVector: one sample's feature values
#   - FeatureMatrix: a rectangular, non-empty set of samples
#   - NaiveBayesError and its subclasses
# =============================================================================

from sms_bayes.core.errors import (
    DegenerateNormalizationError,
    EmptyClassError,
    EmptyInputError,
    InconsistentShapeError,
    IndexOutOfRangeError,
    InvalidFeatureValueError,
    InvalidPriorError,
    NaiveBayesError,
    ShapeMismatchError,
    UntrainedModelError,
)
from sms_bayes.core.features import FeatureMatrix, FeatureVector

__all__ = [
    "FeatureVector",
    "FeatureMatrix",
    # Errors
    "NaiveBayesError",
    "EmptyInputError",
    "InconsistentShapeError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "InvalidPriorError",
    "InvalidFeatureValueError",
    "EmptyClassError",
    "DegenerateNormalizationError",
    "UntrainedModelError",
]
