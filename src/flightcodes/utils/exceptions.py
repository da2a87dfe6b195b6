"""
Custom exceptions for the flight code classifier experiment.

Provides a hierarchy of exceptions for different error scenarios:
- Data source errors (CSV header/row format)
- Label encoding errors (labels unseen at training time)
- Training errors (empty or single-class datasets)
- Configuration errors (unknown featurizer variants)

Missing or unreadable files surface as the built-in OSError.
"""


class FlightCodesError(Exception):
    """Base exception for all flight code experiment errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


# =============================================================================
# Data Source Exceptions
# =============================================================================

class DataSourceError(FlightCodesError):
    """Base exception for errors reading labeled data."""
    pass


class FormatError(DataSourceError):
    """Error when a CSV file does not match the expected schema."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


# =============================================================================
# Label Encoding Exceptions
# =============================================================================

class LabelEncodingError(FlightCodesError):
    """Base exception for label vocabulary errors."""
    pass


class UnknownLabelError(LabelEncodingError):
    """Error when a label was never seen in the training set."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Label not in training vocabulary: {label!r}")


# =============================================================================
# Training Exceptions
# =============================================================================

class TrainingError(FlightCodesError):
    """Base exception for model training errors."""
    pass


class DegenerateDatasetError(TrainingError):
    """Error when there is nothing meaningful to train or evaluate on."""

    def __init__(self, message: str, dataset: str | None = None):
        self.dataset = dataset
        super().__init__(message)


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(FlightCodesError):
    """Error with experiment configuration."""
    pass


class UnknownFeaturizerError(ConfigurationError):
    """Error when a featurizer variant name is not recognised."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown featurizer variant: {kind}")


# Export all exceptions
__all__ = [
    # Base
    "FlightCodesError",
    # Data source
    "DataSourceError",
    "FormatError",
    # Labels
    "LabelEncodingError",
    "UnknownLabelError",
    # Training
    "TrainingError",
    "DegenerateDatasetError",
    # Configuration
    "ConfigurationError",
    "UnknownFeaturizerError",
]
