# =============================================================================
# SMS-Bayes: Naive Bayes Spam Classification for SMS Messages
# =============================================================================
#
# SMS-Bayes trains a Naive Bayes classifier on labelled SMS messages and
# uses it to tell spam from ham.
#
# Features:
#   - Generic Naive Bayes over discrete feature vectors (no smoothing,
#     log-odds combination of per-feature posteriors)
#   - Bag-of-words features with a vocabulary occurrence cutoff
#   - Uniform, researched or dataset-measured class priors
#   - Accuracy / precision / recall / specificity / F1 report
#   - XDG Base Directory compliant configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "sms-bayes"

# Main entry point - this is what gets called by the 'sms-bayes' command
from sms_bayes.app import main

__all__ = ["main", "__version__", "__app_name__"]
