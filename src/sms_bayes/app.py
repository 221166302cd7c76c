# =============================================================================
# SMS-Bayes Command-Line Application
# =============================================================================
# Runs the whole spam-filter experiment in one go:
#
#   1. Read the train and test sets (label<TAB>text)
#   2. Extract the vocabulary from both sets
#   3. Turn every message into a bag-of-words presence vector
#   4. Fit the Naive Bayes model with the chosen prior
#   5. Predict the test set, print the metrics
#   6. Write (text, prediction) pairs for the test set to a TSV file
#
# Settings come from the config file; command-line flags override them.
# =============================================================================

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from sms_bayes import __version__, __app_name__
from sms_bayes.bayes import PRIOR_PRESETS, NaiveBayesModel, Prediction, build_prior
from sms_bayes.config import Config, ConfigError, print_paths
from sms_bayes.core import NaiveBayesError
from sms_bayes.metrics import ModelMetrics
from sms_bayes.storage import DatasetError, LabelMap, read_dataset, spam_fraction, write_results
from sms_bayes.text import Tokenizer, TokenizerConfig

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Everything a pipeline run produces.

    Attributes:
        metrics: Evaluation on the test set.
        predictions: One Prediction per test message, in file order.
        vocabulary: The words used as features, in column order.
        results_path: Where results were written, or None if not written.
    """
    metrics: ModelMetrics
    predictions: list[Prediction]
    vocabulary: list[str]
    results_path: Path | None = None


def run_pipeline(config: Config) -> PipelineResult:
    """
    Train on the configured train set and evaluate on the test set.

    Raises:
        ConfigError: If the dataset paths are not configured.
        DatasetError: If a dataset can't be read or has unknown labels.
        NaiveBayesError: If training or prediction fails.
    """
    if config.dataset.train_path is None or config.dataset.test_path is None:
        raise ConfigError("Both a train and a test dataset path are required")

    label_map = LabelMap(spam=config.dataset.spam_label, ham=config.dataset.ham_label)

    # Load data
    train = read_dataset(config.dataset.train_path)
    test = read_dataset(config.dataset.test_path)
    logger.info(f"Spam share across both sets: {spam_fraction(train + test, label_map):.2%}")

    # Features
    tokenizer = Tokenizer(TokenizerConfig(
        min_token_length=config.vocabulary.min_token_length,
        drop_stop_words=config.vocabulary.drop_stop_words,
    ))
    vocabulary = tokenizer.extract_vocabulary(
        (item.text for item in train + test),
        cutoff=config.vocabulary.cutoff,
    )
    if not vocabulary:
        logger.warning("Vocabulary is empty - every message will get the same prediction")
    else:
        logger.info(f"Vocabulary size: {len(vocabulary)} words")

    x_train = tokenizer.bag_of_words((item.text for item in train), vocabulary)
    x_test = tokenizer.bag_of_words((item.text for item in test), vocabulary)
    y_train = label_map.to_ids(train)
    y_test = label_map.to_ids(test)

    # Prior: "dataset" measures frequencies over both sets
    prior_labels = y_train + y_test if config.model.prior == "dataset" else y_train
    prior = build_prior(
        config.model.prior,
        prior_labels,
        spam_id=label_map.spam_id,
        ham_id=label_map.ham_id,
    )
    logger.info(f"Using {config.model.prior} prior: {prior}")

    # Train and predict
    model = NaiveBayesModel()
    model.fit(x_train, y_train, prior)

    if config.model.workers > 0:
        with ThreadPoolExecutor(max_workers=config.model.workers) as executor:
            predictions = model.predict_batch(x_test.rows, executor=executor)
    else:
        predictions = model.predict_batch(x_test.rows)

    metrics = ModelMetrics.compute(y_test, predictions, positive=config.model.positive_class)

    # Save results for the test messages
    results_path = None
    if config.output.write_results:
        results_path = config.results_path
        write_results(results_path, [item.text.strip() for item in test], predictions)

    return PipelineResult(
        metrics=metrics,
        predictions=predictions,
        vocabulary=vocabulary,
        results_path=results_path,
    )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="SMS-Bayes: Naive Bayes spam classification for SMS messages",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the effective configuration to the config file and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    parser.add_argument("--train", type=Path, help="Training set (label<TAB>text)")
    parser.add_argument("--test", type=Path, help="Test set (label<TAB>text)")
    parser.add_argument(
        "--cutoff",
        type=int,
        help="Minimum word occurrences for the vocabulary",
    )
    parser.add_argument(
        "--prior",
        choices=PRIOR_PRESETS,
        help="Class prior preset",
    )
    parser.add_argument("--results", type=Path, help="Where to write predictions")
    parser.add_argument(
        "--workers",
        type=int,
        help="Threads for batch prediction (0 = none)",
    )

    return parser.parse_args(argv)


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr; DEBUG level with --debug, INFO otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Copy any command-line settings over the loaded config."""
    if args.train is not None:
        config.dataset.train_path = args.train
    if args.test is not None:
        config.dataset.test_path = args.test
    if args.cutoff is not None:
        config.vocabulary.cutoff = args.cutoff
    if args.prior is not None:
        config.model.prior = args.prior
    if args.results is not None:
        config.output.results_path = args.results
    if args.workers is not None:
        config.model.workers = args.workers

    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for SMS-Bayes.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version, --init-config)
        3. Loads configuration and applies overrides
        4. Runs the train/evaluate pipeline and prints the metrics

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    configure_logging(args.debug)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    try:
        config = apply_overrides(Config.load(args.config), args)

        if args.init_config:
            path = config.save(args.config)
            print(f"Configuration written to {path}")
            return 0

        result = run_pipeline(config)
    except (ConfigError, DatasetError, NaiveBayesError) as e:
        logger.error(str(e))
        return 1

    print(result.metrics.report())
    if result.results_path:
        print(f"Results written to {result.results_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
