"""
Experiment driver: train both featurizer variants and compare accuracy.

Loads the training and evaluation CSVs, trains one model per configured
variant (whole-string text featurization, then character trigrams),
evaluates each on the same held-out set and prints the accuracies side by
side.

Usage:
    python main.py
    python main.py --train-path TrainingData/ManyFlightCodes.csv --pause
    python main.py --variant char_trigram --classifier sgd --seed 7
"""

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from flightcodes.config import Settings, get_settings
from flightcodes.data import Record, load_records
from flightcodes.evaluation import ConsoleReporter, EvaluationResult, Evaluator, PredictionReporter
from flightcodes.features import FeaturizerKind, create_featurizer
from flightcodes.tracking import ExperimentTracker
from flightcodes.training import Model, train_model
from flightcodes.utils import FlightCodesError, setup_logger


@dataclass
class ExperimentReport:
    """Evaluation results and training times per variant, in run order."""
    results: dict[str, EvaluationResult] = field(default_factory=dict)
    training_seconds: dict[str, float] = field(default_factory=dict)

    def accuracies(self) -> dict[str, float]:
        return {variant: result.accuracy for variant, result in self.results.items()}

    def summary(self) -> str:
        """Accuracies side by side, e.g. "text: 0.9323, char_trigram: 0.9846"."""
        return ", ".join(f"{variant}: {accuracy:.4f}" for variant, accuracy in self.accuracies().items())


def compare_variants(
    train_records: Sequence[Record],
    test_records: Sequence[Record],
    settings: Settings,
    reporter: PredictionReporter | None = None,
    tracker: ExperimentTracker | None = None,
) -> ExperimentReport:
    """
    Train every configured variant, then evaluate each on the same test set.

    Args:
        train_records: Labeled training records
        test_records: Labeled held-out records
        settings: Experiment settings (variants, featurizer, trainer, evaluation)
        reporter: Sink for sampled predictions (silent if None)
        tracker: MLflow tracker (no tracking if None)

    Returns:
        ExperimentReport keyed by variant name
    """
    variants = list(dict.fromkeys(settings.variants))
    if len(variants) < len(settings.variants):
        logger.warning(f"Ignoring repeated variants, running {variants}")

    models: dict[str, Model] = {}
    for name in variants:
        featurizer = create_featurizer(name, settings.features)
        model = train_model(train_records, featurizer, settings.trainer)
        models[model.kind.value] = model

    report = ExperimentReport()
    for variant, model in models.items():
        logger.info(f"Test {variant} model")
        result = Evaluator(model, reporter, settings.evaluation).run(test_records)

        report.results[variant] = result
        report.training_seconds[variant] = model.training_seconds

        if tracker is not None:
            tracker.log_variant(model, result, test_samples=len(test_records))

    return report


def run_experiment(
    settings: Settings | None = None,
    reporter: PredictionReporter | None = None,
    tracker: ExperimentTracker | None = None,
) -> ExperimentReport:
    """
    Run the full experiment from the configured CSV files.

    Returns:
        ExperimentReport with one EvaluationResult per variant
    """
    settings = settings or get_settings()
    tracker = tracker or ExperimentTracker(settings.tracking)

    print("=" * 60)
    print("FLIGHT CODE CLASSIFIER EXPERIMENT")
    print(f"Training data: {settings.data.train_path}")
    print(f"Test data: {settings.data.test_path}")
    print(f"Variants: {', '.join(settings.variants)}")
    print("=" * 60)

    tracker.setup()

    logger.info("Step 1: Loading data...")
    train_records = load_records(settings.data.train_path)
    test_records = load_records(settings.data.test_path)

    logger.info("Step 2: Training and evaluating variants...")
    report = compare_variants(train_records, test_records, settings, reporter, tracker)

    print("=" * 60)
    print("EXPERIMENT COMPLETE")
    print(report.summary())
    print("=" * 60)
    logger.info("Finished")

    return report


def build_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command line overrides on top of environment settings."""
    base = base or get_settings()

    data_update = {}
    if args.train_path:
        data_update["train_path"] = Path(args.train_path)
    if args.test_path:
        data_update["test_path"] = Path(args.test_path)

    trainer_update = {}
    if args.seed is not None:
        trainer_update["seed"] = args.seed
    if args.classifier:
        trainer_update["classifier"] = args.classifier

    update = {
        "data": base.data.model_copy(update=data_update),
        "trainer": base.trainer.model_copy(update=trainer_update),
    }
    if args.track:
        update["tracking"] = base.tracking.model_copy(update={"enabled": True})
    if args.variant:
        update["variants"] = args.variant
    if args.pause:
        update["pause_on_exit"] = True

    return base.model_copy(update=update)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare text and character-trigram flight code classifiers"
    )
    parser.add_argument("--train-path", type=str, default=None, help="Training CSV (default: from settings)")
    parser.add_argument("--test-path", type=str, default=None, help="Evaluation CSV (default: from settings)")
    parser.add_argument(
        "--variant",
        action="append",
        choices=[kind.value for kind in FeaturizerKind],
        default=None,
        help="Featurizer variant to run; repeat for several (default: all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the trainer")
    parser.add_argument(
        "--classifier",
        choices=["logistic_regression", "sgd"],
        default=None,
        help="Multiclass linear classifier (default: from settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from settings)",
    )
    parser.add_argument("--track", action="store_true", help="Log params and metrics to MLflow")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logger(settings.logging, level=args.log_level)

    exit_code = 0
    try:
        run_experiment(settings, reporter=ConsoleReporter())
    except (FlightCodesError, OSError) as e:
        logger.error(f"Experiment failed: {e}")
        exit_code = 1

    if settings.pause_on_exit:
        input("Press Enter to exit...")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
