# =============================================================================
# Classifier Exceptions
# =============================================================================
# Every failure the classifier core can raise derives from NaiveBayesError,
# so callers can catch the whole family in one place (the CLI does exactly
# that). Most classes also derive from the matching builtin so code that
# expects e.g. a ValueError or IndexError keeps working.
#
# Things that are NOT errors:
#   - A feature value that was never seen during training (it is skipped).
#   - Predicting with an untrained model or a wrong-length vector through
#     NaiveBayesModel.predict() (those return a Prediction with a status).
# =============================================================================


class NaiveBayesError(Exception):
    """Base exception for the classifier core."""
    pass


class EmptyInputError(NaiveBayesError, ValueError):
    """Raised when a feature matrix is built from no vectors."""
    pass


class InconsistentShapeError(NaiveBayesError, ValueError):
    """Raised when feature vectors in one matrix differ in length."""
    pass


class IndexOutOfRangeError(NaiveBayesError, IndexError):
    """Raised when a row or column index is outside the matrix."""
    pass


class ShapeMismatchError(NaiveBayesError, ValueError):
    """Raised when two collections that must line up have different sizes."""
    pass


class InvalidPriorError(NaiveBayesError, ValueError):
    """Raised when a prior is not a proper distribution over the classes."""
    pass


class InvalidFeatureValueError(NaiveBayesError, ValueError):
    """Raised when a feature value is not a usable real number (e.g. NaN)."""
    pass


class EmptyClassError(NaiveBayesError):
    """Raised when a class has no training samples to estimate from."""
    pass


class DegenerateNormalizationError(NaiveBayesError, ArithmeticError):
    """Raised when Bayes' rule would divide by a zero evidence term."""
    pass


class UntrainedModelError(NaiveBayesError, RuntimeError):
    """Raised when an operation needs a fitted model and there is none."""
    pass
