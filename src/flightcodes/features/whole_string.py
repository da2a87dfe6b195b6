"""
Whole-string text featurizer.

Treats the full flight code as a short text document and hashes its word
n-grams into a fixed-width feature block.
"""

from sklearn.feature_extraction.text import HashingVectorizer

from flightcodes.config import FeaturizerSettings
from flightcodes.features.base import FeaturePipeline, FeaturizerKind


class WholeStringFeaturizer(FeaturePipeline):
    """Generic text featurization over the whole code string."""

    kind = FeaturizerKind.TEXT

    def __init__(self, settings: FeaturizerSettings | None = None):
        self.settings = settings or FeaturizerSettings()

    def build_vectorizer(self) -> HashingVectorizer:
        return HashingVectorizer(
            n_features=self.settings.hashing_features,
            analyzer="word",
            ngram_range=(1, self.settings.word_ngram_max),
            lowercase=True,
            # Single-character tokens matter in codes such as "B 737"
            token_pattern=r"(?u)\b\w+\b",
            alternate_sign=False,
            norm="l2",
        )


__all__ = ["WholeStringFeaturizer"]
