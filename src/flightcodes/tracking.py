"""
MLflow experiment tracking.

Logs parameters and metrics for each featurizer variant when tracking is
enabled. Models are never logged as artifacts.
"""

import math

import mlflow
from loguru import logger

from flightcodes.config import TrackingSettings
from flightcodes.evaluation.evaluator import EvaluationResult
from flightcodes.training.model import Model


class ExperimentTracker:
    """Records one MLflow run per evaluated variant. No-op when disabled."""

    def __init__(self, settings: TrackingSettings | None = None):
        self.settings = settings or TrackingSettings()
        self.experiment_id: str | None = None

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    def setup(self) -> str | None:
        """Configure MLflow tracking and return the experiment id."""
        if not self.enabled:
            return None

        mlflow.set_tracking_uri(self.settings.tracking_uri)

        # Create or get experiment
        experiment = mlflow.get_experiment_by_name(self.settings.experiment_name)
        if experiment is None:
            self.experiment_id = mlflow.create_experiment(self.settings.experiment_name)
        else:
            self.experiment_id = experiment.experiment_id

        mlflow.set_experiment(self.settings.experiment_name)
        logger.info(f"MLflow experiment: {self.settings.experiment_name}")

        return self.experiment_id

    def log_variant(self, model: Model, result: EvaluationResult, test_samples: int) -> str | None:
        """
        Log one variant's parameters and metrics as an MLflow run.

        Returns:
            The MLflow run id, or None when tracking is disabled
        """
        if not self.enabled:
            return None

        with mlflow.start_run(run_name=result.variant) as run:
            mlflow.log_params({
                "variant": result.variant,
                "classifier": model.classifier_name,
                "seed": model.seed,
                "n_features": model.pipeline.n_features,
                "n_classes": model.n_classes,
                "samples_train": model.training_samples,
                "samples_test": test_samples,
            })

            metrics = {
                "correct": result.correct,
                "incorrect": result.incorrect,
                "unknown_labels": result.unknown_labels,
                "training_seconds": model.training_seconds,
            }
            if not math.isnan(result.accuracy):
                metrics["accuracy"] = result.accuracy
            mlflow.log_metrics(metrics)

            logger.info(f"MLflow run for {result.variant}: {run.info.run_id}")
            return run.info.run_id


__all__ = ["ExperimentTracker"]
