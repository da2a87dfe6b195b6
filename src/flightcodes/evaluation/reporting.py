"""
Output sinks for sampled predictions.

The evaluator hands sampled matches and misses to a PredictionReporter
instead of writing to the console itself, so evaluation runs headless in
tests and colourised in the CLI.
"""

from loguru import logger

from flightcodes.data.schema import Record
from flightcodes.evaluation.predictor import Prediction


def format_prediction(record: Record, prediction: Prediction) -> str:
    """One-line summary of a prediction against the expected label."""
    return (
        f"FlightCode: {record.code}, Aircraft Code: {record.label} - "
        f"Predicted Aircraft Code: {prediction.label}, Confidence: {prediction.confidence:.4f}"
    )


class PredictionReporter:
    """Reporter that discards everything. Subclass to send samples somewhere."""

    def banner(self, text: str) -> None:
        pass

    def correct(self, record: Record, prediction: Prediction) -> None:
        pass

    def incorrect(self, record: Record, prediction: Prediction) -> None:
        pass


class ConsoleReporter(PredictionReporter):
    """Logs samples through loguru: matches in green, misses in red."""

    def banner(self, text: str) -> None:
        logger.opt(colors=True).info("<yellow>{}</yellow>", text)

    def correct(self, record: Record, prediction: Prediction) -> None:
        logger.opt(colors=True).info("<green>{}</green>", format_prediction(record, prediction))

    def incorrect(self, record: Record, prediction: Prediction) -> None:
        logger.opt(colors=True).info("<red>{}</red>", format_prediction(record, prediction))


__all__ = ["format_prediction", "PredictionReporter", "ConsoleReporter"]
