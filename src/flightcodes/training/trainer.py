"""
Multiclass linear classifier training.

Fits logistic regression (or a seeded SGD log-loss classifier) on a
featurized training set and times the fit.
"""

import time
from collections.abc import Sequence

import numpy as np
from loguru import logger
from sklearn.linear_model import LogisticRegression, SGDClassifier

from flightcodes.config import TrainerSettings
from flightcodes.data.schema import Record
from flightcodes.features.base import FeaturePipeline, FeaturizedDataset
from flightcodes.training.model import Model
from flightcodes.utils.exceptions import DegenerateDatasetError


class Trainer:
    """Trains a multiclass classifier that scores every known label."""

    def __init__(self, settings: TrainerSettings | None = None):
        self.settings = settings or TrainerSettings()

    def build_classifier(self, n_samples: int):
        """
        Create an unfitted classifier exposing predict_proba.

        Args:
            n_samples: Training set size (scales the SGD penalty)
        """
        if self.settings.classifier == "sgd":
            return SGDClassifier(
                loss="log_loss",
                alpha=1.0 / (self.settings.regularization * n_samples),
                max_iter=self.settings.max_iter,
                random_state=self.settings.seed,
            )

        return LogisticRegression(
            C=self.settings.regularization,
            max_iter=self.settings.max_iter,
            random_state=self.settings.seed,
        )

    def train(self, featurized: FeaturizedDataset) -> Model:
        """
        Fit the classifier on a featurized training set.

        Args:
            featurized: Training matrix and encoded labels

        Returns:
            Model bound to the dataset's pipeline

        Raises:
            DegenerateDatasetError: If there are no samples or fewer than two classes
        """
        n_samples = len(featurized)
        if n_samples == 0:
            raise DegenerateDatasetError("No training samples", dataset="train")

        n_classes = len(np.unique(featurized.labels))
        if n_classes < 2:
            raise DegenerateDatasetError(
                f"Need at least 2 distinct labels to train, found {n_classes}",
                dataset="train",
            )

        logger.info(
            f"Training the {featurized.pipeline.kind.value} model "
            f"({self.settings.classifier}, {n_samples:,} samples, {n_classes} classes)"
        )

        classifier = self.build_classifier(n_samples)

        start = time.perf_counter()
        classifier.fit(featurized.features, featurized.labels)
        elapsed = time.perf_counter() - start

        logger.info(f"Training took {elapsed:.3f} secs")

        return Model(
            pipeline=featurized.pipeline,
            classifier=classifier,
            classifier_name=self.settings.classifier,
            seed=self.settings.seed,
            training_seconds=elapsed,
            training_samples=n_samples,
        )


def train_model(
    records: Sequence[Record],
    featurizer: FeaturePipeline,
    settings: TrainerSettings | None = None,
) -> Model:
    """
    Fit a feature pipeline and train a classifier on its output.

    Args:
        records: Labeled training records
        featurizer: Unfitted featurizer variant
        settings: Trainer settings

    Returns:
        Trained Model
    """
    pipeline = featurizer.fit_transform(records)
    featurized = pipeline.transform_many(records)
    return Trainer(settings).train(featurized)


__all__ = ["Trainer", "train_model"]
