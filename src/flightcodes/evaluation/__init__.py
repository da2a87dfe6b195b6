"""Evaluation module: prediction, accuracy scoring and sampled reporting."""

from flightcodes.evaluation.predictor import Prediction, Predictor, predict
from flightcodes.evaluation.reporting import (
    ConsoleReporter,
    PredictionReporter,
    format_prediction,
)
from flightcodes.evaluation.evaluator import EvaluationResult, Evaluator, evaluate

__all__ = [
    "Prediction",
    "Predictor",
    "predict",
    "PredictionReporter",
    "ConsoleReporter",
    "format_prediction",
    "EvaluationResult",
    "Evaluator",
    "evaluate",
]
