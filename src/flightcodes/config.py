"""
Configuration management for the flight code experiment.

Loads settings from environment variables (and a .env file if present).
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file before settings are initialized
load_dotenv()


ClassifierName = Literal["logistic_regression", "sgd"]


class DataSettings(BaseSettings):
    """Locations of the labeled CSV files."""

    train_path: Path = Field(default=Path("TrainingData/FlightCodes.csv"))
    test_path: Path = Field(default=Path("TrainingData/MoreFlightCodes.csv"))

    model_config = SettingsConfigDict(env_prefix="DATA_")


class FeaturizerSettings(BaseSettings):
    """Feature pipeline configuration."""

    # Width of the hashed whole-string feature block
    hashing_features: int = Field(default=2**12, gt=0)
    # Word n-grams 1..word_ngram_max for the whole-string featurizer
    word_ngram_max: int = Field(default=2, ge=1)

    trigram_smooth_idf: bool = Field(default=True)
    trigram_sublinear_tf: bool = Field(default=False)
    trigram_norm: Literal["l1", "l2"] | None = Field(default="l2")

    model_config = SettingsConfigDict(env_prefix="FEATURES_")


class TrainerSettings(BaseSettings):
    """Multiclass linear classifier configuration."""

    classifier: ClassifierName = Field(default="logistic_regression")
    seed: int = Field(default=0)
    # Inverse regularization strength (C) for logistic regression,
    # converted to alpha for SGD
    regularization: float = Field(default=10.0, gt=0)
    max_iter: int = Field(default=1000, gt=0)

    model_config = SettingsConfigDict(env_prefix="TRAINER_")


class EvaluationSettings(BaseSettings):
    """Sampled prediction logging cadence."""

    correct_log_every: int = Field(default=300, gt=0)
    incorrect_log_every: int = Field(default=30, gt=0)

    model_config = SettingsConfigDict(env_prefix="EVAL_")


class TrackingSettings(BaseSettings):
    """MLflow configuration."""

    enabled: bool = Field(default=False)
    tracking_uri: str = Field(default="sqlite:///mlflow.db")
    experiment_name: str = Field(default="flight-code-classifier")

    model_config = SettingsConfigDict(env_prefix="MLFLOW_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO")
    log_dir: str = Field(default="logs")
    log_file: str = Field(default="experiment.log")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="7 days")
    enable_file: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""

    data: DataSettings = Field(default_factory=DataSettings)
    features: FeaturizerSettings = Field(default_factory=FeaturizerSettings)
    trainer: TrainerSettings = Field(default_factory=TrainerSettings)
    evaluation: EvaluationSettings = Field(default_factory=EvaluationSettings)
    tracking: TrackingSettings = Field(default_factory=TrackingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Featurizer variants to train and compare, in run order
    variants: list[str] = Field(default=["text", "char_trigram"])

    # Wait for Enter before the CLI exits (interactive demo convention)
    pause_on_exit: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTCODES_",
        env_nested_delimiter="__",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: The experiment settings
    """
    return Settings()


# Export for easy access
settings = get_settings()

__all__ = [
    "ClassifierName",
    "Settings",
    "DataSettings",
    "FeaturizerSettings",
    "TrainerSettings",
    "EvaluationSettings",
    "TrackingSettings",
    "LoggingSettings",
    "get_settings",
    "settings",
]
