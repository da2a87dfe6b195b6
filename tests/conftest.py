"""Shared fixtures for the flight code experiment tests."""

from pathlib import Path

import pytest

from flightcodes.config import TrainerSettings
from flightcodes.data import Record

HEADER = "FlightCode,IATACode"

# Small fleet with several codes per aircraft type
FLEET = [
    Record("B737-800", "738"),
    Record("B737-800W", "738"),
    Record("B737-8AS", "738"),
    Record("A320-214", "320"),
    Record("A320-232", "320"),
    Record("A320-251N", "32N"),
    Record("E190AR", "E90"),
    Record("E190LR", "E90"),
    Record("B777-300ER", "77W"),
    Record("B777-36NER", "77W"),
]


def write_csv(path: Path, rows: list[str], header: str | None = HEADER) -> Path:
    """Write a CSV file from raw lines."""
    lines = ([header] if header is not None else []) + rows
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_records(path: Path, records: list[Record]) -> Path:
    return write_csv(path, [f"{r.code},{r.label}" for r in records])


@pytest.fixture
def fleet() -> list[Record]:
    return list(FLEET)


@pytest.fixture
def scenario_train() -> list[Record]:
    return [Record("AA100", "B737"), Record("AA200", "A320"), Record("AA300", "B737")]


@pytest.fixture
def scenario_test() -> list[Record]:
    return [Record("AA150", "B737")]


@pytest.fixture
def overfit_settings() -> TrainerSettings:
    """Weak regularization so the classifier memorizes its training set."""
    return TrainerSettings(classifier="logistic_regression", regularization=1000.0, seed=0)
