"""
Utility modules for the flight code experiment.

Provides:
    - logger: Loguru-based logging with stdout and optional file output
    - exceptions: Custom exception classes for error handling
"""

from flightcodes.utils.logger import logger, setup_logger
from flightcodes.utils.exceptions import (
    # Base
    FlightCodesError,
    # Data source
    DataSourceError,
    FormatError,
    # Labels
    LabelEncodingError,
    UnknownLabelError,
    # Training
    TrainingError,
    DegenerateDatasetError,
    # Configuration
    ConfigurationError,
    UnknownFeaturizerError,
)

__all__ = [
    # Logger
    "logger",
    "setup_logger",
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
