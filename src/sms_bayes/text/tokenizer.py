# =============================================================================
# SMS Tokenizer and Bag-of-Words Features
# =============================================================================
# Turns raw message text into the feature vectors the classifier consumes.
#
# Pipeline:
#   1. tokenize(): split on anything that isn't a letter or digit, lowercase,
#      drop very short tokens ("don't" -> "don", "t" -> drop the "t")
#   2. extract_vocabulary(): keep tokens seen at least `cutoff` times across
#      the whole corpus, sorted so feature columns have a stable order
#   3. bag_of_words(): one 1.0/0.0 presence indicator per vocabulary word
# =============================================================================

import logging
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sms_bayes.core import FeatureMatrix, FeatureVector

logger = logging.getLogger(__name__)


@dataclass
class TokenizerConfig:
    """
    Configuration for message tokenization.

    Attributes:
        min_token_length: Minimum length for a token to be included.
        normalize_case: Convert all tokens to lowercase.
        drop_stop_words: Remove common English stop words.
    """
    min_token_length: int = 2
    normalize_case: bool = True
    drop_stop_words: bool = False


class Tokenizer:
    """
    Converts SMS text into tokens and bag-of-words vectors.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> tokenizer.tokenize("Buy now, don't wait!")
        ['buy', 'now', 'don', 'wait']
        >>> vocabulary = tokenizer.extract_vocabulary(["buy now", "buy it"], cutoff=2)
        >>> vocabulary
        ['buy']
    """

    # Common English stop words (not useful for classification)
    STOP_WORDS = frozenset([
        "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
        "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can", "to",
        "of", "in", "for", "on", "with", "at", "by", "from", "as", "into",
        "through", "during", "before", "after", "above", "below", "this",
        "that", "these", "those", "it", "its", "i", "me", "my", "we", "our",
        "you", "your", "he", "she", "they", "them", "his", "her", "their",
    ])

    # Word separators: every run of non-alphanumeric characters
    SPLIT_PATTERN = re.compile(r'[^a-zA-Z0-9]+')

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            config: Tokenizer configuration.
        """
        self.config = config or TokenizerConfig()

    def tokenize(self, text: str) -> list[str]:
        """
        Split a message into normalized tokens, in order, with repeats.
        """
        tokens = []
        for word in self.SPLIT_PATTERN.split(text):
            if len(word) < self.config.min_token_length:
                continue
            if self.config.normalize_case:
                word = word.lower()
            if self.config.drop_stop_words and word.lower() in self.STOP_WORDS:
                continue
            tokens.append(word)

        return tokens

    def extract_vocabulary(self, texts: Iterable[str], cutoff: int = 0) -> list[str]:
        """
        Collect the vocabulary of a corpus.

        Args:
            texts: Messages to scan.
            cutoff: Minimum number of occurrences across the corpus for a
                    token to be kept. 0 or 1 keeps every token.

        Returns:
            Sorted list of vocabulary words.
        """
        if cutoff < 0:
            raise ValueError(f"Vocabulary cutoff must be >= 0, got {cutoff}")

        counts: Counter[str] = Counter()
        for text in texts:
            counts.update(self.tokenize(text))

        vocabulary = sorted(word for word, count in counts.items() if count >= cutoff)
        logger.debug(
            f"Vocabulary: {len(vocabulary)} of {len(counts)} distinct tokens "
            f"occur at least {cutoff} times"
        )
        return vocabulary

    def vectorize(self, text: str, vocabulary: Sequence[str]) -> FeatureVector:
        """Presence vector of `text` over `vocabulary`."""
        present = set(self.tokenize(text))
        return FeatureVector(1.0 if word in present else 0.0 for word in vocabulary)

    def bag_of_words(self, texts: Iterable[str], vocabulary: Sequence[str]) -> FeatureMatrix:
        """
        Build the feature matrix for a list of messages.

        Raises:
            EmptyInputError: If `texts` is empty.
        """
        return FeatureMatrix.create(self.vectorize(text, vocabulary) for text in texts)
