"""
Flight code classifier experiment.

Trains multiclass linear classifiers that map flight codes (e.g. "B737-800")
to IATA aircraft codes, comparing two feature pipelines:
- text: hashed word n-grams over the whole code string
- char_trigram: TF-IDF weighted bag of character trigrams

Quick start:
    from flightcodes.experiment import run_experiment
    report = run_experiment()
    print(report.summary())

Configuration (environment variables):
    DATA_TRAIN_PATH / DATA_TEST_PATH: Labeled CSV files
    TRAINER_SEED: Random seed for the classifier (default: 0)
    MLFLOW_ENABLED: Log params and metrics to MLflow (default: false)
"""

__version__ = "0.1.0"
