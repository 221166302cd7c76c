# =============================================================================
# Class Priors
# =============================================================================
# A prior is a plain dict {class id: probability}. This module builds the
# presets the CLI offers and validates priors before they reach the model.
#
# Presets:
#   - uniform:    every class equally likely, carries no information
#   - researched: 80% spam / 20% ham, the commonly quoted share of spam in
#                 all mail (https://en.wikipedia.org/wiki/Naive_Bayes_spam_filtering)
#   - dataset:    class frequencies measured on the labelled data
# =============================================================================

import math
import numbers
from collections import Counter
from collections.abc import Iterable, Mapping

from sms_bayes.core.errors import EmptyInputError, InvalidPriorError

# Absolute tolerance when checking that a prior sums to 1
PRIOR_TOLERANCE = 1e-9

PRIOR_PRESETS = ("uniform", "researched", "dataset")

RESEARCHED_SPAM_SHARE = 0.8


def uniform_prior(classes: Iterable[int]) -> dict[int, float]:
    """Every class gets the same probability."""
    classes = sorted(set(classes))
    if not classes:
        raise EmptyInputError("Cannot build a prior over no classes")
    return {label: 1.0 / len(classes) for label in classes}


def researched_prior(spam_id: int = 0, ham_id: int = 1) -> dict[int, float]:
    """The 80/20 spam/ham split for a two-class spam filter."""
    return {
        spam_id: RESEARCHED_SPAM_SHARE,
        ham_id: 1.0 - RESEARCHED_SPAM_SHARE,
    }


def dataset_prior(labels: Iterable[int]) -> dict[int, float]:
    """
    Class frequencies in a list of labels.

    Example:
        >>> dataset_prior([0, 1, 1, 1])
        {0: 0.25, 1: 0.75}
    """
    counts = Counter(labels)
    total = sum(counts.values())
    if total == 0:
        raise EmptyInputError("Cannot compute a prior from no labels")
    return {label: counts[label] / total for label in sorted(counts)}


def validate_prior(prior: Mapping[int, float], classes: Iterable[int]) -> None:
    """
    Check that `prior` is a proper distribution over exactly `classes`.

    Raises:
        InvalidPriorError: If keys don't match the classes, a value is not
                           a number or lies outside [0, 1], or the values
                           don't sum to 1.
    """
    expected = set(classes)
    provided = set(prior)

    if provided != expected:
        missing = sorted(expected - provided)
        extra = sorted(provided - expected)
        raise InvalidPriorError(
            f"Prior classes do not match the training labels "
            f"(missing: {missing}, unexpected: {extra})"
        )

    for label, probability in prior.items():
        if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
            raise InvalidPriorError(
                f"Prior for class {label} must be a real number, got {probability!r}"
            )
        if not 0.0 <= probability <= 1.0:
            raise InvalidPriorError(
                f"Prior for class {label} is {probability}, must be within [0, 1]"
            )

    total = math.fsum(prior.values())
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=PRIOR_TOLERANCE):
        raise InvalidPriorError(f"Prior sums to {total}, must sum to 1")


def build_prior(
    name: str,
    labels: Iterable[int],
    spam_id: int = 0,
    ham_id: int = 1,
) -> dict[int, float]:
    """
    Build one of the preset priors by name.

    Args:
        name: "uniform", "researched" or "dataset".
        labels: Labels the prior is for. Used for the class set ("uniform")
                or the frequencies ("dataset").
        spam_id: Class id of spam (for "researched").
        ham_id: Class id of ham (for "researched").

    Raises:
        InvalidPriorError: If `name` is not a known preset.
    """
    if name == "uniform":
        return uniform_prior(labels)
    elif name == "researched":
        return researched_prior(spam_id, ham_id)
    elif name == "dataset":
        return dataset_prior(labels)

    raise InvalidPriorError(
        f"Unknown prior preset {name!r}, expected one of {', '.join(PRIOR_PRESETS)}"
    )
