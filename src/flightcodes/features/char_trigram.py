"""
Character trigram featurizer.

Splits a flight code into characters and builds a TF-IDF weighted bag of
every contiguous three-character window. Short structured codes such as
"B737-800" share discriminative substrings ("B73", "737", "800") that a
trigram profile picks up even when the whole string was never seen.
"""

from sklearn.feature_extraction.text import TfidfVectorizer

from flightcodes.config import FeaturizerSettings
from flightcodes.features.base import FeaturePipeline, FeaturizerKind

NGRAM_LENGTH = 3


def char_trigrams(code: str) -> list[str]:
    """
    Contiguous three-character windows of a code, in order.

    A non-empty code shorter than three characters is kept whole as a single
    partial window; the empty code has no windows.

    Examples:
        >>> char_trigrams("B737")
        ['B73', '737']
        >>> char_trigrams("AB")
        ['AB']
    """
    if len(code) < NGRAM_LENGTH:
        return [code] if code else []
    return [code[i:i + NGRAM_LENGTH] for i in range(len(code) - NGRAM_LENGTH + 1)]


class CharTrigramFeaturizer(FeaturePipeline):
    """TF-IDF weighted bag of character trigrams."""

    kind = FeaturizerKind.CHAR_TRIGRAM

    def __init__(self, settings: FeaturizerSettings | None = None):
        self.settings = settings or FeaturizerSettings()

    def build_vectorizer(self) -> TfidfVectorizer:
        # Callable analyzer: codes are tokenized as-is, no lowercasing
        return TfidfVectorizer(
            analyzer=char_trigrams,
            smooth_idf=self.settings.trigram_smooth_idf,
            sublinear_tf=self.settings.trigram_sublinear_tf,
            norm=self.settings.trigram_norm,
        )


__all__ = ["NGRAM_LENGTH", "char_trigrams", "CharTrigramFeaturizer"]
