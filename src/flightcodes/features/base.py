"""
Feature pipeline interface shared by the featurizer variants.

A FeaturePipeline is fitted on training records and yields a FittedPipeline
that turns any record into a FeatureVector: a 1 x N sparse row derived from
the flight code plus the encoded label index.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

import numpy as np
from loguru import logger

from flightcodes.data.schema import Record
from flightcodes.features.labels import LabelVocabulary
from flightcodes.utils.exceptions import DegenerateDatasetError


class FeaturizerKind(str, Enum):
    """Featurizer variants available to the experiment."""
    TEXT = "text"
    CHAR_TRIGRAM = "char_trigram"


class FeatureVector(NamedTuple):
    """Numeric features for one record plus its label index (None if unseen)."""
    values: Any
    label: int | None


@dataclass(frozen=True)
class FeaturizedDataset:
    """Training matrix and encoded labels, bound to the pipeline that built them."""
    pipeline: "FittedPipeline"
    features: Any
    labels: np.ndarray

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class FittedPipeline:
    """
    A fitted code vectorizer together with the training label vocabulary.

    Read-only once built: transform calls never refit the vectorizer.
    """
    kind: FeaturizerKind
    vectorizer: Any
    labels: LabelVocabulary

    @property
    def n_features(self) -> int:
        if hasattr(self.vectorizer, "vocabulary_"):
            return len(self.vectorizer.vocabulary_)
        return int(self.vectorizer.n_features)

    def featurize_codes(self, codes: Sequence[str]) -> Any:
        """Sparse feature matrix with one row per code."""
        return self.vectorizer.transform(list(codes))

    def transform(self, record: Record) -> FeatureVector:
        """Featurize a single record."""
        return FeatureVector(
            values=self.featurize_codes([record.code]),
            label=self.labels.get(record.label),
        )

    def transform_many(self, records: Sequence[Record]) -> FeaturizedDataset:
        """
        Featurize a labeled batch for training.

        Raises:
            UnknownLabelError: If a record's label is not in the vocabulary
        """
        return FeaturizedDataset(
            pipeline=self,
            features=self.featurize_codes([r.code for r in records]),
            labels=self.labels.encode_many(r.label for r in records),
        )


class FeaturePipeline(ABC):
    """Builds a FittedPipeline from training records."""

    kind: FeaturizerKind

    @abstractmethod
    def build_vectorizer(self) -> Any:
        """Create an unfitted scikit-learn vectorizer for flight codes."""

    def fit_transform(self, records: Sequence[Record]) -> FittedPipeline:
        """
        Fit the label vocabulary and code vectorizer on training records.

        Args:
            records: Training records

        Returns:
            FittedPipeline bound to this variant
        """
        if not records:
            raise DegenerateDatasetError("No training records to fit the feature pipeline on", dataset="train")

        labels = LabelVocabulary.fit(r.label for r in records)
        vectorizer = self.build_vectorizer()
        try:
            vectorizer.fit([r.code for r in records])
        except ValueError as e:
            # scikit-learn refuses to fit an empty vocabulary
            raise DegenerateDatasetError(
                f"No {self.kind.value} features in {len(records):,} training codes: {e}",
                dataset="train",
            ) from e

        fitted = FittedPipeline(kind=self.kind, vectorizer=vectorizer, labels=labels)
        logger.info(
            f"Fitted {self.kind.value} pipeline: {fitted.n_features:,} features, "
            f"{len(labels)} classes from {len(records):,} records"
        )
        return fitted


__all__ = [
    "FeaturizerKind",
    "FeatureVector",
    "FeaturizedDataset",
    "FittedPipeline",
    "FeaturePipeline",
]
