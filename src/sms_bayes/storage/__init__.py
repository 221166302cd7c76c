# =============================================================================
# Storage Module
# =============================================================================
# File I/O around the classifier:
#   - Reading labelled SMS datasets (label<TAB>text)
#   - Writing predictions (text<TAB>label)
# =============================================================================

from sms_bayes.storage.dataset import (
    DatasetError,
    DatasetItem,
    LabelMap,
    parse_dataset,
    read_dataset,
    spam_fraction,
)
from sms_bayes.storage.results import write_results

__all__ = [
    "DatasetError",
    "DatasetItem",
    "LabelMap",
    "parse_dataset",
    "read_dataset",
    "spam_fraction",
    "write_results",
]
