# =============================================================================
# SMS Dataset Reader
# =============================================================================
# Reads the SMS Spam Collection format: one message per line,
#
#   <label>\t<message text>
#
# e.g.  "spam\tWINNER!! Claim your prize now"
#       "ham\tSee you at lunch"
#
# Blank lines are skipped. Only the first tab separates the label; the rest
# of the line (tabs included) is the message.
# =============================================================================

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetItem:
    """
    One labelled message.

    Attributes:
        text: The message body.
        target: The label as written in the file (e.g. "spam", "ham").
    """
    text: str
    target: str


@dataclass(frozen=True)
class LabelMap:
    """
    Mapping between the file's string labels and integer class ids.

    Attributes:
        spam: Label string for spam messages.
        ham: Label string for legitimate messages.
        spam_id: Class id used for spam.
        ham_id: Class id used for ham.
    """
    spam: str = "spam"
    ham: str = "ham"
    spam_id: int = 0
    ham_id: int = 1

    def to_id(self, target: str) -> int:
        """
        Convert a string label to its class id.

        Raises:
            DatasetError: If the label is neither spam nor ham.
        """
        if target == self.spam:
            return self.spam_id
        elif target == self.ham:
            return self.ham_id
        raise DatasetError(f"Unknown label {target!r}, expected {self.spam!r} or {self.ham!r}")

    def to_ids(self, items: Iterable[DatasetItem]) -> list[int]:
        """Class ids for a list of items, in order."""
        return [self.to_id(item.target) for item in items]


def parse_dataset(contents: str, source: str = "<string>") -> list[DatasetItem]:
    """
    Parse dataset text into items.

    Args:
        contents: Whole file contents.
        source: Name used in error messages.

    Raises:
        DatasetError: If a non-blank line has no tab separator.
    """
    items = []
    for line_number, line in enumerate(contents.splitlines(), start=1):
        if not line.strip():
            continue

        target, sep, text = line.partition("\t")
        if not sep:
            raise DatasetError(f"{source}:{line_number}: expected '<label>\\t<text>'")

        items.append(DatasetItem(text=text, target=target.strip()))

    return items


def read_dataset(path: Path) -> list[DatasetItem]:
    """
    Read a dataset file.

    Raises:
        DatasetError: If the file can't be read or is malformed.
    """
    try:
        contents = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DatasetError(f"Could not read dataset {path}: {e}") from e

    items = parse_dataset(contents, source=str(path))
    logger.info(f"Loaded {len(items)} messages from {path}")
    return items


def spam_fraction(items: Iterable[DatasetItem], label_map: LabelMap | None = None) -> float:
    """
    Share of spam messages in a dataset.

    Raises:
        DatasetError: If the dataset is empty.
    """
    label_map = label_map or LabelMap()
    items = list(items)
    if not items:
        raise DatasetError("Cannot compute the spam share of an empty dataset")
    spam_count = sum(1 for item in items if item.target == label_map.spam)
    return spam_count / len(items)


# =============================================================================
# Exceptions
# =============================================================================

class DatasetError(Exception):
    """Raised when a dataset file is missing or malformed."""
    pass
