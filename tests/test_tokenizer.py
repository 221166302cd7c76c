# =============================================================================
# Tests for the SMS tokenizer and bag-of-words features
# =============================================================================

import pytest

from sms_bayes.core import EmptyInputError
from sms_bayes.text import Tokenizer, TokenizerConfig


@pytest.fixture
def tokenizer():
    return Tokenizer()


class TestTokenize:
    def test_splits_on_non_alphanumerics(self, tokenizer):
        assert tokenizer.tokenize("Call 08001234567 now!!") == ["call", "08001234567", "now"]

    def test_drops_single_characters(self, tokenizer):
        assert tokenizer.tokenize("don't u see a b") == ["don", "see"]

    def test_lowercases(self, tokenizer):
        assert tokenizer.tokenize("FREE Prize") == ["free", "prize"]

    def test_keeps_case_when_asked(self):
        tokenizer = Tokenizer(TokenizerConfig(normalize_case=False))
        assert tokenizer.tokenize("FREE Prize") == ["FREE", "Prize"]

    def test_stop_words_kept_by_default(self, tokenizer):
        assert tokenizer.tokenize("you and me") == ["you", "and", "me"]

    def test_stop_words_dropped_when_asked(self):
        tokenizer = Tokenizer(TokenizerConfig(drop_stop_words=True))
        assert tokenizer.tokenize("You and me win") == ["win"]

    def test_min_token_length(self):
        tokenizer = Tokenizer(TokenizerConfig(min_token_length=4))
        assert tokenizer.tokenize("win a free prize") == ["free", "prize"]

    def test_empty_text(self, tokenizer):
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize("?!...") == []

    def test_non_ascii_letters_split(self, tokenizer):
        assert tokenizer.tokenize("café au lait") == ["caf", "au", "lait"]


class TestVocabulary:
    def test_sorted_and_unique(self, tokenizer, toy_corpus):
        vocabulary = tokenizer.extract_vocabulary([t for t, _ in toy_corpus])
        assert vocabulary == ["buy", "cheap", "friend", "hello", "now", "there"]

    def test_cutoff_counts_corpus_occurrences(self, tokenizer):
        texts = ["win win prize", "prize now", "win"]
        assert tokenizer.extract_vocabulary(texts, cutoff=3) == ["win"]
        assert tokenizer.extract_vocabulary(texts, cutoff=2) == ["prize", "win"]
        assert tokenizer.extract_vocabulary(texts, cutoff=1) == ["now", "prize", "win"]

    def test_cutoff_merges_case(self, tokenizer):
        assert tokenizer.extract_vocabulary(["Free", "FREE", "free"], cutoff=3) == ["free"]

    def test_negative_cutoff(self, tokenizer):
        with pytest.raises(ValueError):
            tokenizer.extract_vocabulary(["hello"], cutoff=-1)


class TestBagOfWords:
    def test_presence_vector(self, tokenizer):
        vector = tokenizer.vectorize("Buy now, buy!", ["buy", "cheap", "now"])
        assert vector.values == (1.0, 0.0, 1.0)

    def test_matrix_shape(self, toy_matrix, toy_corpus, toy_vocabulary):
        assert toy_matrix.shape == (len(toy_corpus), len(toy_vocabulary))

    def test_matrix_rows(self, toy_matrix):
        # vocabulary: buy, cheap, friend, hello, now, there
        assert toy_matrix.row(0) == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)
        assert toy_matrix.row(3) == (0.0, 0.0, 1.0, 1.0, 0.0, 1.0)

    def test_membership_is_case_insensitive(self, tokenizer):
        assert tokenizer.vectorize("HELLO", ["hello"]).values == (1.0,)

    def test_empty_corpus(self, tokenizer):
        with pytest.raises(EmptyInputError):
            tokenizer.bag_of_words([], ["hello"])
