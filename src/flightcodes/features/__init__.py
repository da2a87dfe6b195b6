"""
Feature pipelines for flight code classification.

Two interchangeable variants behind the FeaturePipeline interface:
- text: hashed word n-grams over the whole code string
- char_trigram: TF-IDF weighted bag of character trigrams

Pick one by name with create_featurizer().
"""

from flightcodes.config import FeaturizerSettings
from flightcodes.features.base import (
    FeaturizerKind,
    FeatureVector,
    FeaturizedDataset,
    FittedPipeline,
    FeaturePipeline,
)
from flightcodes.features.char_trigram import CharTrigramFeaturizer, char_trigrams
from flightcodes.features.labels import LabelVocabulary
from flightcodes.features.whole_string import WholeStringFeaturizer
from flightcodes.utils.exceptions import UnknownFeaturizerError

FEATURIZERS: dict[FeaturizerKind, type[FeaturePipeline]] = {
    FeaturizerKind.TEXT: WholeStringFeaturizer,
    FeaturizerKind.CHAR_TRIGRAM: CharTrigramFeaturizer,
}


def create_featurizer(
    kind: FeaturizerKind | str,
    settings: FeaturizerSettings | None = None,
) -> FeaturePipeline:
    """
    Create a featurizer variant by name.

    Args:
        kind: "text" or "char_trigram"
        settings: Featurizer settings (defaults from environment)

    Returns:
        Unfitted FeaturePipeline

    Raises:
        UnknownFeaturizerError: If the name is not a known variant
    """
    try:
        kind = FeaturizerKind(kind)
    except ValueError:
        raise UnknownFeaturizerError(str(kind)) from None
    return FEATURIZERS[kind](settings)


__all__ = [
    "FeaturizerKind",
    "FeatureVector",
    "FeaturizedDataset",
    "FittedPipeline",
    "FeaturePipeline",
    "LabelVocabulary",
    "WholeStringFeaturizer",
    "CharTrigramFeaturizer",
    "char_trigrams",
    "FEATURIZERS",
    "create_featurizer",
]
