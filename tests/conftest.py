# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the SMS-Bayes test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from sms_bayes.bayes import NaiveBayesModel
from sms_bayes.text import Tokenizer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_xdg(monkeypatch, tmp_path):
    """Keep config and data lookups out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


@pytest.fixture
def toy_corpus():
    """Four labelled messages: 0 = spam, 1 = ham."""
    return [
        ("buy now", 0),
        ("hello friend", 1),
        ("buy cheap now", 0),
        ("friend hello there", 1),
    ]


@pytest.fixture
def toy_vocabulary(toy_corpus):
    """Sorted vocabulary of the toy corpus (cutoff 0)."""
    return Tokenizer().extract_vocabulary([text for text, _ in toy_corpus], cutoff=0)


@pytest.fixture
def toy_matrix(toy_corpus, toy_vocabulary):
    """Bag-of-words matrix of the toy corpus."""
    return Tokenizer().bag_of_words([text for text, _ in toy_corpus], toy_vocabulary)


@pytest.fixture
def toy_labels(toy_corpus):
    return [label for _, label in toy_corpus]


@pytest.fixture
def uniform_prior():
    return {0: 0.5, 1: 0.5}


@pytest.fixture
def trained_model(toy_matrix, toy_labels, uniform_prior):
    """A model fit on the toy corpus with a uniform prior."""
    model = NaiveBayesModel()
    model.fit(toy_matrix, toy_labels, uniform_prior)
    return model


@pytest.fixture
def sms_dataset_files(temp_dir):
    """Small train/test files in the SMS Spam Collection format."""
    train = temp_dir / "train.tsv"
    test = temp_dir / "test.tsv"

    train.write_text(
        "spam\tWINNER! Claim your free prize now\n"
        "ham\tAre we still on for lunch today?\n"
        "spam\tFree entry, claim your prize, text WIN now\n"
        "ham\tCall me when you get home\n"
        "\n"
        "spam\tURGENT prize waiting, claim now\n"
        "ham\tLunch was great, see you tomorrow\n",
        encoding="utf-8",
    )
    test.write_text(
        "spam\tClaim your free prize now\n"
        "ham\tSee you at lunch tomorrow\n",
        encoding="utf-8",
    )
    return train, test
