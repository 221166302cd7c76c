# =============================================================================
# Tests for the command-line pipeline
# =============================================================================

import pytest

from sms_bayes import __version__
from sms_bayes.app import main, parse_args, run_pipeline
from sms_bayes.config import Config, ConfigError


@pytest.fixture
def pipeline_config(sms_dataset_files, temp_dir):
    train, test = sms_dataset_files
    config = Config()
    config.dataset.train_path = train
    config.dataset.test_path = test
    config.vocabulary.cutoff = 2
    config.output.results_path = temp_dir / "out" / "results.tsv"
    return config


class TestRunPipeline:
    def test_classifies_test_set(self, pipeline_config):
        result = run_pipeline(pipeline_config)
        assert [p.label for p in result.predictions] == [0, 1]
        assert result.metrics.accuracy == 1.0
        assert result.metrics.true_positives == 1
        assert result.metrics.true_negatives == 1

    def test_vocabulary_respects_cutoff(self, pipeline_config):
        result = run_pipeline(pipeline_config)
        assert result.vocabulary == [
            "claim", "free", "lunch", "now", "prize", "see", "tomorrow", "you", "your",
        ]

    def test_writes_test_set_results(self, pipeline_config):
        result = run_pipeline(pipeline_config)
        assert result.results_path == pipeline_config.output.results_path
        lines = result.results_path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "Claim your free prize now\t0",
            "See you at lunch tomorrow\t1",
        ]

    def test_results_can_be_disabled(self, pipeline_config):
        pipeline_config.output.write_results = False
        result = run_pipeline(pipeline_config)
        assert result.results_path is None
        assert not pipeline_config.output.results_path.exists()

    @pytest.mark.parametrize("prior", ["uniform", "researched", "dataset"])
    def test_every_prior_preset(self, pipeline_config, prior):
        pipeline_config.model.prior = prior
        result = run_pipeline(pipeline_config)
        assert all(p.ok for p in result.predictions)

    def test_threaded_prediction(self, pipeline_config):
        pipeline_config.model.workers = 2
        result = run_pipeline(pipeline_config)
        assert [p.label for p in result.predictions] == [0, 1]

    def test_requires_dataset_paths(self):
        with pytest.raises(ConfigError):
            run_pipeline(Config())


class TestMain:
    def test_parse_args(self):
        args = parse_args(["--train", "a.tsv", "--cutoff", "4", "--prior", "dataset"])
        assert str(args.train) == "a.tsv"
        assert args.cutoff == 4
        assert args.prior == "dataset"
        assert args.test is None

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_paths(self, capsys):
        assert main(["--paths"]) == 0
        assert "config.toml" in capsys.readouterr().out

    def test_full_run(self, sms_dataset_files, temp_dir, capsys):
        train, test = sms_dataset_files
        results = temp_dir / "results.tsv"
        code = main([
            "--train", str(train),
            "--test", str(test),
            "--cutoff", "2",
            "--results", str(results),
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "Model accuracy is:\t1.00" in out
        assert results.exists()

    def test_missing_dataset_is_an_error(self, temp_dir):
        code = main([
            "--train", str(temp_dir / "nope.tsv"),
            "--test", str(temp_dir / "nope.tsv"),
        ])
        assert code == 1

    def test_no_paths_configured(self):
        assert main([]) == 1

    def test_invalid_override(self, sms_dataset_files):
        train, test = sms_dataset_files
        assert main(["--train", str(train), "--test", str(test), "--cutoff", "-3"]) == 1

    def test_init_config(self, temp_dir, capsys):
        path = temp_dir / "config.toml"
        assert main(["--config", str(path), "--init-config", "--cutoff", "7"]) == 0
        assert Config.load(path).vocabulary.cutoff == 7
        assert str(path) in capsys.readouterr().out

    def test_config_file_is_used(self, sms_dataset_files, temp_dir):
        train, test = sms_dataset_files
        config = Config()
        config.dataset.train_path = train
        config.dataset.test_path = test
        config.vocabulary.cutoff = 2
        config.output.results_path = temp_dir / "from-config.tsv"
        path = config.save(temp_dir / "config.toml")

        assert main(["--config", str(path)]) == 0
        assert (temp_dir / "from-config.tsv").exists()

    def test_badly_typed_config_is_an_error(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text('[vocabulary]\ncutoff = "3"\n', encoding="utf-8")
        assert main(["--config", str(path)]) == 1
