"""
Label vocabulary shared by both feature pipelines.

Maps IATA code strings to integer indices (value-to-key) and back
(key-to-value). Built once from the training labels.
"""

from collections.abc import Iterable

import numpy as np
from sklearn.preprocessing import LabelEncoder

from flightcodes.utils.exceptions import DegenerateDatasetError, UnknownLabelError


class LabelVocabulary:
    """Deterministic label <-> index mapping over the training label set."""

    def __init__(self, encoder: LabelEncoder):
        self._encoder = encoder
        self._index = {str(label): i for i, label in enumerate(encoder.classes_)}

    @classmethod
    def fit(cls, labels: Iterable[str]) -> "LabelVocabulary":
        """
        Build the vocabulary from training labels.

        Indices follow sorted label order, so the same training set always
        yields the same mapping.
        """
        labels = list(labels)
        if not labels:
            raise DegenerateDatasetError("Cannot build a label vocabulary from zero labels", dataset="train")

        encoder = LabelEncoder()
        encoder.fit(labels)
        return cls(encoder)

    @property
    def classes(self) -> list[str]:
        return [str(label) for label in self._encoder.classes_]

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def get(self, label: str) -> int | None:
        """Index for a label, or None if it was never seen."""
        return self._index.get(label)

    def encode(self, label: str) -> int:
        """Index for a label; raises UnknownLabelError for unseen labels."""
        try:
            return self._index[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def encode_many(self, labels: Iterable[str]) -> np.ndarray:
        return np.array([self.encode(label) for label in labels], dtype=np.int64)

    def decode(self, index: int) -> str:
        """Label string for an index."""
        if not 0 <= index < len(self._index):
            raise IndexError(f"Label index {index} out of range for {len(self._index)} classes")
        return str(self._encoder.classes_[index])


__all__ = ["LabelVocabulary"]
