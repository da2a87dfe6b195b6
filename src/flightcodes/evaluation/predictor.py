"""
Single-record prediction with a fitted Model.
"""

import math
from typing import NamedTuple

import numpy as np

from flightcodes.data.schema import Record
from flightcodes.training.model import Model


class Prediction(NamedTuple):
    """Predicted label plus one score per known label class."""
    label: str
    scores: tuple[float, ...]

    @property
    def confidence(self) -> float:
        """
        Highest class score, or NaN when there are no scores.

        Scores come from predict_proba, so this is the probability the
        classifier assigns to the predicted label.
        """
        if not self.scores:
            return math.nan
        return max(self.scores)


class Predictor:
    """Applies a Model's pipeline and classifier to individual records."""

    def __init__(self, model: Model):
        self.model = model

    def predict(self, record: Record) -> Prediction:
        """
        Predict the IATA code for one record.

        Args:
            record: Record whose code is featurized; its label is ignored

        Returns:
            Prediction with the decoded label and per-class scores
        """
        features = self.model.pipeline.featurize_codes([record.code])
        probabilities = self.model.classifier.predict_proba(features)[0]

        best = int(np.argmax(probabilities))
        label_index = int(self.model.classifier.classes_[best])

        return Prediction(
            label=self.model.pipeline.labels.decode(label_index),
            scores=tuple(float(p) for p in probabilities),
        )


def predict(model: Model, record: Record) -> Prediction:
    """Predict the label of a single record."""
    return Predictor(model).predict(record)


__all__ = ["Prediction", "Predictor", "predict"]
