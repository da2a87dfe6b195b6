"""
Fitted model: a feature pipeline bound to the classifier trained on its output.
"""

from dataclasses import dataclass
from typing import Any

from flightcodes.features.base import FeaturizerKind, FittedPipeline


@dataclass(frozen=True)
class Model:
    """
    Immutable result of one training run.

    The pipeline and classifier are never refit after construction, so a
    Model can be shared by any number of read-only predictors.
    """
    pipeline: FittedPipeline
    classifier: Any
    classifier_name: str
    seed: int
    training_seconds: float
    training_samples: int

    @property
    def kind(self) -> FeaturizerKind:
        return self.pipeline.kind

    @property
    def n_classes(self) -> int:
        return len(self.pipeline.labels)


__all__ = ["Model"]
