"""
Held-out evaluation of a fitted Model.

Predicts every test record, compares the predicted label to the expected one
by exact string equality and reports a sample of matches and misses.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from flightcodes.config import EvaluationSettings
from flightcodes.data.schema import Record
from flightcodes.evaluation.predictor import Predictor
from flightcodes.evaluation.reporting import PredictionReporter
from flightcodes.training.model import Model
from flightcodes.utils.exceptions import DegenerateDatasetError, UnknownLabelError


@dataclass(frozen=True)
class EvaluationResult:
    """Correct/incorrect tallies for one evaluation run."""
    variant: str
    correct: int
    incorrect: int
    # Test labels absent from the training vocabulary (counted in incorrect)
    unknown_labels: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return math.nan
        return self.correct / self.total

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "variant": self.variant,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "unknown_labels": self.unknown_labels,
            "accuracy": self.accuracy,
        }


class Evaluator:
    """
    Scores a Model over a labeled test set.

    Every Nth correct match and every Mth incorrect match is handed to the
    reporter (N=300, M=30 by default). Test labels never seen in training
    cannot be predicted; they are counted as incorrect rather than aborting
    the run.
    """

    def __init__(
        self,
        model: Model,
        reporter: PredictionReporter | None = None,
        settings: EvaluationSettings | None = None,
    ):
        self.model = model
        self.predictor = Predictor(model)
        self.reporter = reporter or PredictionReporter()
        self.settings = settings or EvaluationSettings()

    def run(self, test_records: Iterable[Record]) -> EvaluationResult:
        """
        Evaluate the model on test records.

        Args:
            test_records: Labeled held-out records

        Returns:
            EvaluationResult with correct/incorrect counts

        Raises:
            DegenerateDatasetError: If there are no test records
        """
        variant = self.model.kind.value
        labels = self.model.pipeline.labels

        self.reporter.banner("Predicting IATA Aircraft Codes")

        correct = 0
        incorrect = 0
        unknown = 0

        for record in test_records:
            prediction = self.predictor.predict(record)

            try:
                labels.encode(record.label)
            except UnknownLabelError as e:
                unknown += 1
                logger.debug(f"{e.message} (code {record.code!r})")

            if prediction.label == record.label:
                correct += 1
                if correct % self.settings.correct_log_every == 0:
                    self.reporter.correct(record, prediction)
            else:
                incorrect += 1
                if incorrect % self.settings.incorrect_log_every == 0:
                    self.reporter.incorrect(record, prediction)

        result = EvaluationResult(
            variant=variant,
            correct=correct,
            incorrect=incorrect,
            unknown_labels=unknown,
        )

        if result.total == 0:
            raise DegenerateDatasetError("No test records to evaluate", dataset="test")

        if unknown:
            logger.warning(f"{unknown:,} test records had labels unseen in training")
        logger.info(
            f"Accuracy: {result.accuracy:.4f} "
            f"({correct:,} correct, {incorrect:,} incorrect)"
        )
        return result


def evaluate(
    model: Model,
    test_records: Iterable[Record],
    reporter: PredictionReporter | None = None,
    settings: EvaluationSettings | None = None,
) -> float:
    """
    Accuracy of a model on held-out records.

    Returns:
        correct / (correct + incorrect), in [0, 1]
    """
    return Evaluator(model, reporter, settings).run(test_records).accuracy


__all__ = ["EvaluationResult", "Evaluator", "evaluate"]
