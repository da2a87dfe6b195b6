"""
Tests for training multiclass classifiers on featurized flight codes.
"""

import numpy as np
import pytest

from flightcodes.config import TrainerSettings
from flightcodes.data import Record
from flightcodes.features import CharTrigramFeaturizer, FeaturizedDataset, FeaturizerKind, create_featurizer
from flightcodes.training import Model, Trainer, train_model
from flightcodes.utils.exceptions import DegenerateDatasetError


@pytest.mark.parametrize("kind", list(FeaturizerKind))
def test_train_model_binds_pipeline_and_classifier(kind, fleet):
    model = train_model(fleet, create_featurizer(kind))

    assert isinstance(model, Model)
    assert model.kind == kind
    assert model.n_classes == len({r.label for r in fleet})
    assert model.training_samples == len(fleet)
    assert model.training_seconds >= 0
    assert model.classifier_name == "logistic_regression"
    assert model.seed == 0


def test_classifier_scores_every_known_class(fleet):
    model = train_model(fleet, CharTrigramFeaturizer())
    features = model.pipeline.featurize_codes(["B737-900"])

    scores = model.classifier.predict_proba(features)

    assert scores.shape == (1, model.n_classes)


def test_sgd_classifier_is_supported(fleet):
    settings = TrainerSettings(classifier="sgd", seed=3)

    model = train_model(fleet, CharTrigramFeaturizer(), settings)

    assert model.classifier_name == "sgd"
    assert model.seed == 3
    assert model.classifier.predict_proba(model.pipeline.featurize_codes(["E190"])).shape == (1, model.n_classes)


@pytest.mark.parametrize("classifier", ["logistic_regression", "sgd"])
def test_same_seed_gives_identical_weights(classifier, fleet):
    settings = TrainerSettings(classifier=classifier, seed=42)

    first = train_model(fleet, CharTrigramFeaturizer(), settings)
    second = train_model(fleet, CharTrigramFeaturizer(), settings)

    np.testing.assert_array_equal(first.classifier.coef_, second.classifier.coef_)
    np.testing.assert_array_equal(first.classifier.intercept_, second.classifier.intercept_)


def test_no_training_records_is_degenerate():
    with pytest.raises(DegenerateDatasetError):
        train_model([], CharTrigramFeaturizer())


def test_single_class_is_degenerate():
    records = [Record("B737-800", "738"), Record("B737-8AS", "738")]

    with pytest.raises(DegenerateDatasetError, match="at least 2 distinct labels"):
        train_model(records, CharTrigramFeaturizer())


def test_training_codes_without_trigrams_are_degenerate():
    """Codes that yield no trigrams leave nothing to learn from."""
    records = [Record("", "738"), Record("", "320")]

    with pytest.raises(DegenerateDatasetError) as exc_info:
        train_model(records, CharTrigramFeaturizer())

    assert exc_info.value.dataset == "train"


def test_empty_featurized_dataset_is_degenerate(fleet):
    pipeline = CharTrigramFeaturizer().fit_transform(fleet)
    empty = FeaturizedDataset(pipeline=pipeline, features=None, labels=np.array([], dtype=np.int64))

    with pytest.raises(DegenerateDatasetError) as exc_info:
        Trainer().train(empty)

    assert exc_info.value.dataset == "train"
