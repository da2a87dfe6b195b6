"""
Tests for the experiment driver, MLflow tracking and the CLI.
"""

from unittest.mock import Mock, patch

import pytest

from flightcodes.config import DataSettings, Settings, TrackingSettings
from flightcodes.evaluation import EvaluationResult, PredictionReporter
from flightcodes.experiment import (
    ExperimentReport,
    build_settings,
    compare_variants,
    main,
    parse_args,
    run_experiment,
)
from flightcodes.tracking import ExperimentTracker
from flightcodes.training import train_model
from flightcodes.features import CharTrigramFeaturizer
from flightcodes.utils.exceptions import UnknownFeaturizerError

from tests.conftest import write_records


def make_settings(tmp_path, train, test, **kwargs) -> Settings:
    data = DataSettings(
        train_path=write_records(tmp_path / "FlightCodes.csv", train),
        test_path=write_records(tmp_path / "MoreFlightCodes.csv", test),
    )
    return Settings(data=data, tracking=TrackingSettings(enabled=False), **kwargs)


def test_compare_variants_evaluates_both_in_order(fleet):
    settings = Settings()

    report = compare_variants(fleet, fleet[:4], settings)

    assert list(report.results) == ["text", "char_trigram"]
    for result in report.results.values():
        assert result.total == 4
        assert 0.0 <= result.accuracy <= 1.0
    assert set(report.training_seconds) == {"text", "char_trigram"}


def test_compare_variants_runs_selected_variant_only(fleet):
    settings = Settings(variants=["char_trigram"])

    report = compare_variants(fleet, fleet, settings)

    assert list(report.results) == ["char_trigram"]


def test_compare_variants_trains_repeated_variant_once(fleet):
    settings = Settings(variants=["text", "text"])

    with patch("flightcodes.experiment.train_model", wraps=train_model) as train:
        report = compare_variants(fleet, fleet, settings)

    assert train.call_count == 1
    assert list(report.results) == ["text"]


def test_compare_variants_rejects_unknown_variant(fleet):
    with pytest.raises(UnknownFeaturizerError):
        compare_variants(fleet, fleet, Settings(variants=["quadgram"]))


def test_compare_variants_sends_samples_to_reporter(fleet):
    reporter = Mock(spec=PredictionReporter)

    compare_variants(fleet, fleet, Settings(), reporter=reporter)

    assert reporter.banner.call_count == 2


def test_run_experiment_from_csv_files(tmp_path, scenario_train, scenario_test):
    settings = make_settings(tmp_path, scenario_train, scenario_test)
    tracker = Mock(spec=ExperimentTracker)

    report = run_experiment(settings, tracker=tracker)

    assert list(report.accuracies()) == ["text", "char_trigram"]
    tracker.setup.assert_called_once()
    assert tracker.log_variant.call_count == 2


def test_report_summary_lists_accuracies_side_by_side():
    report = ExperimentReport(
        results={
            "text": EvaluationResult(variant="text", correct=93, incorrect=7),
            "char_trigram": EvaluationResult(variant="char_trigram", correct=98, incorrect=2),
        }
    )

    assert report.summary() == "text: 0.9300, char_trigram: 0.9800"


# =============================================================================
# Tracking
# =============================================================================

def test_disabled_tracker_does_nothing(fleet):
    tracker = ExperimentTracker(TrackingSettings(enabled=False))
    model = train_model(fleet, CharTrigramFeaturizer())
    result = EvaluationResult(variant="char_trigram", correct=1, incorrect=0)

    with patch("flightcodes.tracking.mlflow") as mlflow:
        assert tracker.setup() is None
        assert tracker.log_variant(model, result, test_samples=1) is None

    mlflow.set_tracking_uri.assert_not_called()
    mlflow.start_run.assert_not_called()


def test_enabled_tracker_logs_params_and_metrics(fleet):
    tracker = ExperimentTracker(TrackingSettings(enabled=True, tracking_uri="sqlite:///test.db"))
    model = train_model(fleet, CharTrigramFeaturizer())
    result = EvaluationResult(variant="char_trigram", correct=3, incorrect=1)

    with patch("flightcodes.tracking.mlflow") as mlflow:
        tracker.setup()
        tracker.log_variant(model, result, test_samples=4)

    mlflow.set_tracking_uri.assert_called_once_with("sqlite:///test.db")
    params = mlflow.log_params.call_args.args[0]
    metrics = mlflow.log_metrics.call_args.args[0]
    assert params["variant"] == "char_trigram"
    assert params["samples_train"] == len(fleet)
    assert params["samples_test"] == 4
    assert metrics["accuracy"] == 0.75
    assert metrics["correct"] == 3
    mlflow.sklearn.log_model.assert_not_called()


# =============================================================================
# CLI
# =============================================================================

def test_cli_overrides_settings(tmp_path):
    args = parse_args([
        "--train-path", str(tmp_path / "train.csv"),
        "--variant", "char_trigram",
        "--seed", "5",
        "--classifier", "sgd",
        "--pause",
    ])

    settings = build_settings(args, base=Settings())

    assert settings.data.train_path == tmp_path / "train.csv"
    assert settings.variants == ["char_trigram"]
    assert settings.trainer.seed == 5
    assert settings.trainer.classifier == "sgd"
    assert settings.pause_on_exit is True


def test_cli_keeps_defaults_without_flags():
    base = Settings()

    settings = build_settings(parse_args([]), base=base)

    assert settings.variants == base.variants
    assert settings.data.test_path == base.data.test_path
    assert settings.tracking.enabled == base.tracking.enabled
    assert settings.pause_on_exit is False


def test_main_succeeds(tmp_path, fleet):
    train = write_records(tmp_path / "train.csv", fleet)
    test = write_records(tmp_path / "test.csv", fleet[:3])

    exit_code = main(["--train-path", str(train), "--test-path", str(test), "--log-level", "WARNING"])

    assert exit_code == 0


def test_main_reports_missing_file(tmp_path):
    exit_code = main([
        "--train-path", str(tmp_path / "missing.csv"),
        "--test-path", str(tmp_path / "missing.csv"),
        "--log-level", "ERROR",
    ])

    assert exit_code == 1


def test_main_waits_for_enter_when_pausing(tmp_path, fleet):
    train = write_records(tmp_path / "train.csv", fleet)

    with patch("builtins.input", return_value="") as prompt:
        main(["--train-path", str(train), "--test-path", str(train), "--pause", "--log-level", "ERROR"])

    prompt.assert_called_once()
