# =============================================================================
# Prediction Results Writer
# =============================================================================
# Persists predictions as a TSV file, one line per message:
#
#   <message text>\t<predicted class id>
#
# Messages that could not be classified are written with "NA" in place of
# a class id.
# =============================================================================

import logging
from collections.abc import Sequence
from pathlib import Path

from sms_bayes.bayes import Prediction
from sms_bayes.core import ShapeMismatchError

logger = logging.getLogger(__name__)

UNCLASSIFIED_MARKER = "NA"


def format_result(text: str, prediction: Prediction | int | None) -> str:
    """Format one result line (without the newline)."""
    if isinstance(prediction, Prediction):
        prediction = prediction.label

    label = UNCLASSIFIED_MARKER if prediction is None else str(prediction)

    # Keep one message per line
    text = " ".join(text.split())
    return f"{text}\t{label}"


def write_results(
    path: Path,
    texts: Sequence[str],
    predictions: Sequence[Prediction | int | None],
) -> int:
    """
    Write (text, prediction) pairs to a TSV file.

    Args:
        path: Output file. Parent directories are created.
        texts: Message texts, in the order they were classified.
        predictions: Predictions or labels, same order as `texts`.

    Returns:
        Number of lines written.

    Raises:
        ShapeMismatchError: If texts and predictions differ in length.
    """
    if len(texts) != len(predictions):
        raise ShapeMismatchError(
            f"Got {len(texts)} texts but {len(predictions)} predictions"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for text, prediction in zip(texts, predictions):
            f.write(format_result(text, prediction) + "\n")

    logger.info(f"Wrote {len(texts)} results to {path}")
    return len(texts)
