# =============================================================================
# Text Module
# =============================================================================
# Turns SMS text into bag-of-words feature vectors: tokenizing, vocabulary
# extraction with an occurrence cutoff, and presence vectors.
# =============================================================================

from sms_bayes.text.tokenizer import Tokenizer, TokenizerConfig

__all__ = ["Tokenizer", "TokenizerConfig"]
