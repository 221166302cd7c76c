# =============================================================================
# Bayes Module
# =============================================================================
# The Naive Bayes classifier itself.
#
#   - LikelihoodTable: P(feature value | class) for one feature column
#   - NaiveBayesModel: fit() builds the tables, predict() combines per-feature
#     posteriors as log-odds and picks the most probable class
#   - Prior helpers: presets and validation for class priors
#
# Everything here works on generic discrete feature vectors. The SMS-specific
# parts (tokenizing, vocabulary, labels) live in sms_bayes.text and
# sms_bayes.storage.
# =============================================================================

from sms_bayes.bayes.classifier import (
    NaiveBayesModel,
    Prediction,
    PredictionStatus,
    prediction_labels,
)
from sms_bayes.bayes.likelihood import LikelihoodTable
from sms_bayes.bayes.prior import (
    PRIOR_PRESETS,
    build_prior,
    dataset_prior,
    researched_prior,
    uniform_prior,
    validate_prior,
)

__all__ = [
    # Classifier
    "NaiveBayesModel",
    "Prediction",
    "PredictionStatus",
    "prediction_labels",
    "LikelihoodTable",
    # Priors
    "PRIOR_PRESETS",
    "build_prior",
    "dataset_prior",
    "researched_prior",
    "uniform_prior",
    "validate_prior",
]
